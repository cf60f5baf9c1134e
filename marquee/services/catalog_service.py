"""
Catalog Service - movie CRUD, search/sort and TMDB import
"""

from sqlalchemy.orm import Session, joinedload
from sqlalchemy import or_
from fastapi import HTTPException, status
from typing import List, Optional, Dict, Any
import logging

from marquee.models.movie import Movie
from marquee.models.review import Review
from marquee.models.favorite import favorite_movies
from marquee.schemas.movie import MovieCreate, MovieUpdate, MovieSortOption
from marquee.services.tmdb_service import TMDBService

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = (
    "title",
    "director",
    "release_year",
    "synopsis",
    "short_synopsis",
    "written_by",
    "music_by",
    "starring",
    "poster_urls",
)

_SORT_ORDERS = {
    MovieSortOption.TITLE: Movie.title.asc(),
    MovieSortOption.TITLE_DESC: Movie.title.desc(),
    MovieSortOption.DIRECTOR: Movie.director.asc(),
    MovieSortOption.DIRECTOR_DESC: Movie.director.desc(),
    MovieSortOption.YEAR: Movie.release_year.asc(),
    MovieSortOption.YEAR_DESC: Movie.release_year.desc(),
}


def _first_crew_member(crew: List[Dict[str, Any]], *jobs: str) -> Optional[str]:
    for member in crew:
        if member.get("job") in jobs:
            return member.get("name")
    return None


def _parse_release_year(release_date: Optional[str]) -> int:
    """First four characters of a TMDB date as a year, 0 when unparseable"""
    if not release_date or len(release_date) < 4:
        return 0
    try:
        year = int(release_date[:4])
    except ValueError:
        return 0
    return year if year > 0 else 0


class CatalogService:
    """Service for movie catalog operations"""

    # ==================== QUERIES ====================

    @staticmethod
    def list_movies(
        db: Session,
        sort_order: Optional[str] = None,
        search: Optional[str] = None
    ) -> List[Movie]:
        """
        List movies, optionally filtered then sorted.

        Args:
            db: Database session
            sort_order: One of MovieSortOption values; unknown values sort by title
            search: Substring matched against title or director

        Returns:
            List of Movie objects
        """
        query = db.query(Movie)

        if search and search.strip():
            term = search.strip()
            query = query.filter(
                or_(Movie.title.contains(term), Movie.director.contains(term))
            )

        order = _SORT_ORDERS[MovieSortOption.parse(sort_order)]
        return query.order_by(order).all()

    @staticmethod
    def get_movie(db: Session, movie_id: Optional[int]) -> Movie:
        """Get a movie by id or raise 404"""
        movie = None
        if movie_id is not None:
            movie = db.query(Movie).filter(Movie.id == movie_id).first()

        if not movie:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Movie not found"
            )
        return movie

    @staticmethod
    def get_movie_details(db: Session, movie_id: int, user_id: Optional[str] = None) -> Dict:
        """
        Get a movie with its reviews (and authors) and the users who favorited it.

        Also computes presentation fields for the caller: their existing
        rating (0 if none) and whether they have favorited the movie.
        """
        movie = CatalogService.get_movie(db, movie_id)

        reviews = db.query(Review).options(
            joinedload(Review.user)
        ).filter(
            Review.movie_id == movie.id
        ).order_by(
            Review.review_date.desc()
        ).all()

        favorited_by = [
            row.user_id for row in db.query(favorite_movies.c.user_id).filter(
                favorite_movies.c.movie_id == movie.id
            ).all()
        ]

        user_rating = 0.0
        is_favorited = False
        if user_id:
            is_favorited = user_id in favorited_by
            own_review = next((r for r in reviews if r.user_id == user_id), None)
            if own_review:
                user_rating = own_review.rating

        return {
            "movie": movie,
            "reviews": [
                {
                    "id": review.id,
                    "rating": review.rating,
                    "comment": review.comment,
                    "review_date": review.review_date,
                    "user_id": review.user_id,
                    "author_display_name": review.user.display_name,
                }
                for review in reviews
            ],
            "favorited_by": favorited_by,
            "favorite_count": len(favorited_by),
            "user_rating": user_rating,
            "is_favorited": is_favorited,
        }

    # ==================== MUTATIONS ====================

    @staticmethod
    def create_movie(db: Session, movie_data: MovieCreate) -> Movie:
        """Create a movie; only the title is required"""
        if not movie_data.title or not movie_data.title.strip():
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Title is required"
            )

        movie = Movie(**{field: getattr(movie_data, field) for field in EDITABLE_FIELDS})
        db.add(movie)
        db.commit()
        db.refresh(movie)
        logger.info(f"Created movie {movie.id} '{movie.title}'")
        return movie

    @staticmethod
    def update_movie(db: Session, movie_id: int, movie_data: MovieUpdate) -> Movie:
        """
        Replace every editable field of a movie.
        Reviews and favorites are not touched.
        """
        movie = CatalogService.get_movie(db, movie_id)

        if not movie_data.title or not movie_data.title.strip():
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Title is required"
            )

        for field in EDITABLE_FIELDS:
            setattr(movie, field, getattr(movie_data, field))

        db.commit()
        db.refresh(movie)
        return movie

    @staticmethod
    def delete_movie(db: Session, movie_id: int) -> None:
        """
        Delete a movie together with everything that references it.

        The storage layer does not cascade, so the reviews go first, then the
        favorite rows, then the movie. All three steps commit together or
        not at all.
        """
        movie = CatalogService.get_movie(db, movie_id)

        try:
            removed_reviews = db.query(Review).filter(
                Review.movie_id == movie.id
            ).delete(synchronize_session=False)

            db.execute(
                favorite_movies.delete().where(favorite_movies.c.movie_id == movie.id)
            )

            db.delete(movie)
            db.commit()
        except Exception:
            db.rollback()
            logger.error(f"Failed to delete movie {movie_id}, changes rolled back")
            raise

        logger.info(f"Deleted movie {movie_id} and {removed_reviews} review(s)")

    # ==================== TMDB IMPORT ====================

    @staticmethod
    def movie_from_tmdb(details: Dict[str, Any]) -> MovieCreate:
        """
        Map a TMDB details payload (with credits and images) to movie fields.
        Pure function: no I/O, no database access.
        """
        credits = details.get("credits") or {}
        crew = credits.get("crew") or []
        cast = credits.get("cast") or []
        posters = (details.get("images") or {}).get("posters") or []

        starring = ", ".join(
            name for name in (member.get("name") for member in cast[:10]) if name
        )
        poster_urls = ",".join(
            TMDBService.poster_url(poster["file_path"])
            for poster in posters if poster.get("file_path")
        )

        return MovieCreate(
            title=details.get("title") or "Untitled",
            director=_first_crew_member(crew, "Director"),
            written_by=_first_crew_member(crew, "Screenplay", "Writer"),
            music_by=_first_crew_member(crew, "Original Music Composer"),
            starring=starring,
            release_year=_parse_release_year(details.get("release_date")),
            short_synopsis=details.get("overview"),
            synopsis=details.get("overview"),
            poster_urls=poster_urls,
        )

    @staticmethod
    def search_metadata(title: Optional[str]) -> List[Dict[str, Any]]:
        """
        Search TMDB by title. A blank title returns no results without
        calling the API.
        """
        if not title or not title.strip():
            return []

        response = TMDBService.search_movies(title.strip())
        return [
            {
                "tmdb_id": result.get("id"),
                "title": result.get("title", ""),
                "release_date": result.get("release_date"),
                "poster_path": result.get("poster_path"),
            }
            for result in response.get("results", [])
        ]

    @staticmethod
    def fetch_metadata_details(tmdb_id: int) -> MovieCreate:
        """Fetch a TMDB movie and map it to prefilled movie fields"""
        details = TMDBService.get_movie_details(tmdb_id)
        return CatalogService.movie_from_tmdb(details)

    @staticmethod
    def import_movie(db: Session, tmdb_id: int) -> Movie:
        """
        Fetch a TMDB movie and add it to the catalog.
        Nothing is written when the upstream call fails.
        """
        movie_data = CatalogService.fetch_metadata_details(tmdb_id)
        movie = CatalogService.create_movie(db, movie_data)
        logger.info(f"Imported TMDB movie {tmdb_id} as movie {movie.id}")
        return movie
