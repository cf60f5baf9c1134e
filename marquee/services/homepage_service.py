"""
Homepage Service - recent reviews plus two randomized spotlights
==================================================================
Everything is recomputed per call. Randomness comes from an injectable
``random.Random`` so the spotlights can be reproduced in tests.

Sections:
- Recent reviews: the 6 newest reviews, flattened for the feed
- Director spotlight: a random director, up to 6 of their movies
- Decade spotlight: a random decade with movies, up to 6 movies from it
"""

from sqlalchemy.orm import Session, joinedload
from typing import Dict, Iterable, List, Optional, Sequence, TypeVar
import random
import logging

from marquee.models.movie import Movie
from marquee.models.review import Review
from marquee.models.user import User
from marquee.models.favorite import favorite_movies

logger = logging.getLogger(__name__)

RECENT_REVIEWS_LIMIT = 6
SPOTLIGHT_SIZE = 6

T = TypeVar("T")


def sample_movies(candidates: Sequence[T], k: int, rng: random.Random) -> List[T]:
    """Uniform random subset of up to k candidates, without replacement"""
    return rng.sample(list(candidates), min(k, len(candidates)))


def candidate_decades(years: Iterable[int]) -> List[int]:
    """Decades that contain at least one known release year"""
    return sorted({(year // 10) * 10 for year in years if year and year > 0})


class HomepageService:
    """Read-only composition of the homepage"""

    @staticmethod
    def get_recent_reviews(db: Session, limit: int = RECENT_REVIEWS_LIMIT) -> List[Dict]:
        reviews = db.query(Review).options(
            joinedload(Review.movie),
            joinedload(Review.user)
        ).order_by(
            Review.review_date.desc()
        ).limit(limit).all()

        if not reviews:
            return []

        # Which of these (author, movie) pairs are also favorites
        author_ids = {review.user_id for review in reviews}
        movie_ids = {review.movie_id for review in reviews}
        liked = {
            (row.user_id, row.movie_id)
            for row in db.query(favorite_movies).filter(
                favorite_movies.c.user_id.in_(author_ids),
                favorite_movies.c.movie_id.in_(movie_ids)
            ).all()
        }

        return [
            {
                "movie_id": review.movie.id,
                "movie_title": review.movie.title,
                "poster_urls": review.movie.poster_urls,
                "rating": review.rating,
                "user_id": review.user.id,
                "user_display_name": review.user.display_name,
                "user_liked_movie": (review.user_id, review.movie_id) in liked,
            }
            for review in reviews
        ]

    @staticmethod
    def get_director_spotlight(db: Session, rng: random.Random) -> Dict:
        directors = sorted(
            row.director for row in db.query(Movie.director).distinct().all()
            if row.director and row.director.strip()
        )
        if not directors:
            return {"director": None, "movies": []}

        director = rng.choice(directors)
        movies = db.query(Movie).filter(Movie.director == director).order_by(Movie.id).all()
        return {"director": director, "movies": sample_movies(movies, SPOTLIGHT_SIZE, rng)}

    @staticmethod
    def get_decade_spotlight(db: Session, rng: random.Random) -> Dict:
        years = [row.release_year for row in db.query(Movie.release_year).distinct().all()]
        decades = candidate_decades(years)
        if not decades:
            return {"decade": None, "movies": []}

        decade = rng.choice(decades)
        movies = db.query(Movie).filter(
            Movie.release_year >= decade,
            Movie.release_year <= decade + 9
        ).order_by(Movie.id).all()
        return {"decade": f"{decade}s", "movies": sample_movies(movies, SPOTLIGHT_SIZE, rng)}

    @staticmethod
    def build_homepage(
        db: Session,
        current_user: Optional[User] = None,
        rng: Optional[random.Random] = None
    ) -> Dict:
        """
        Build every homepage section.

        Args:
            db: Database session
            current_user: Signed-in caller, used for the welcome name
            rng: Random source for the spotlights; a fresh one when omitted
        """
        rng = rng or random.Random()

        director_spotlight = HomepageService.get_director_spotlight(db, rng)
        decade_spotlight = HomepageService.get_decade_spotlight(db, rng)

        return {
            "recent_reviews": HomepageService.get_recent_reviews(db),
            "recommended_director_name": director_spotlight["director"],
            "director_recommendations": director_spotlight["movies"],
            "recommended_decade": decade_spotlight["decade"],
            "decade_recommendations": decade_spotlight["movies"],
            "welcome_name": current_user.display_name if current_user else None,
        }
