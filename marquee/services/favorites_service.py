from sqlalchemy.orm import Session
from fastapi import HTTPException, status
from typing import List
import logging

from marquee.models.favorite import favorite_movies
from marquee.models.movie import Movie
from marquee.models.user import User

logger = logging.getLogger(__name__)


class FavoritesService:
    """Service for the user <-> movie favorites membership"""

    @staticmethod
    def is_favorited(db: Session, user_id: str, movie_id: int) -> bool:
        row = db.query(favorite_movies).filter(
            favorite_movies.c.user_id == user_id,
            favorite_movies.c.movie_id == movie_id
        ).first()
        return row is not None

    @staticmethod
    def toggle_favorite(db: Session, user_id: str, movie_id: int) -> bool:
        """
        Flip the favorite membership for (user, movie).
        Returns True when the movie is now a favorite.
        """
        user = db.query(User.id).filter(User.id == user_id).first()
        movie = db.query(Movie.id).filter(Movie.id == movie_id).first()

        if not user or not movie:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="User or movie not found"
            )

        if FavoritesService.is_favorited(db, user_id, movie_id):
            db.execute(
                favorite_movies.delete().where(
                    favorite_movies.c.user_id == user_id,
                    favorite_movies.c.movie_id == movie_id
                )
            )
            now_favorited = False
        else:
            db.execute(
                favorite_movies.insert().values(user_id=user_id, movie_id=movie_id)
            )
            now_favorited = True

        db.commit()
        return now_favorited

    @staticmethod
    def get_favorite_movies(db: Session, user_id: str) -> List[Movie]:
        """Movies the user has favorited, by title"""
        return db.query(Movie).join(
            favorite_movies, favorite_movies.c.movie_id == Movie.id
        ).filter(
            favorite_movies.c.user_id == user_id
        ).order_by(Movie.title.asc()).all()

    @staticmethod
    def get_favorited_by(db: Session, movie_id: int) -> List[str]:
        """IDs of users who favorited the movie"""
        rows = db.query(favorite_movies.c.user_id).filter(
            favorite_movies.c.movie_id == movie_id
        ).all()
        return [row.user_id for row in rows]
