"""
Review Service - one review per (movie, user), with independently
upsertable rating and comment tracks
"""

from sqlalchemy.orm import Session, joinedload
from fastapi import HTTPException, status
from typing import List, Optional
from datetime import datetime, timezone
import logging

from marquee.models.review import Review
from marquee.models.movie import Movie
from marquee.models.user import User

logger = logging.getLogger(__name__)

MIN_RATING = 0.0
MAX_RATING = 5.0


class ReviewService:
    """Service for review operations"""

    @staticmethod
    def _ensure_movie_exists(db: Session, movie_id: int) -> None:
        exists = db.query(Movie.id).filter(Movie.id == movie_id).first()
        if not exists:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Movie not found"
            )

    @staticmethod
    def find_review(db: Session, user_id: str, movie_id: int) -> Optional[Review]:
        """Get the user's review for a movie, if any"""
        return db.query(Review).filter(
            Review.movie_id == movie_id,
            Review.user_id == user_id
        ).first()

    @staticmethod
    def upsert_comment(db: Session, user_id: str, movie_id: int, comment: str) -> Review:
        """
        Set the comment of the user's review for a movie.

        An existing review keeps its rating and review date; otherwise a new
        review is created with a rating of 0.
        """
        ReviewService._ensure_movie_exists(db, movie_id)

        review = ReviewService.find_review(db, user_id, movie_id)
        if review:
            review.comment = comment
        else:
            review = Review(
                movie_id=movie_id,
                user_id=user_id,
                rating=0.0,
                comment=comment,
                review_date=datetime.now(timezone.utc)
            )
            db.add(review)

        db.commit()
        db.refresh(review)
        return review

    @staticmethod
    def upsert_rating(db: Session, user_id: str, movie_id: int, rating: float) -> Review:
        """
        Set the rating of the user's review for a movie.

        Args:
            db: Database session
            user_id: Author ID
            movie_id: Catalog movie ID
            rating: Value between 0 and 5 inclusive

        Raises:
            HTTPException: 400 if the rating is out of range, 404 if the movie
            does not exist
        """
        if rating is None or not (MIN_RATING <= rating <= MAX_RATING):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Rating must be between 0 and 5"
            )

        ReviewService._ensure_movie_exists(db, movie_id)

        review = ReviewService.find_review(db, user_id, movie_id)
        if review:
            review.rating = rating
        else:
            review = Review(
                movie_id=movie_id,
                user_id=user_id,
                rating=rating,
                comment="",
                review_date=datetime.now(timezone.utc)
            )
            db.add(review)

        db.commit()
        db.refresh(review)
        return review

    @staticmethod
    def get_review(db: Session, review_id: int, user: User) -> Review:
        """
        Get a review the caller is allowed to delete.

        Raises:
            HTTPException: 404 if the review does not exist, 403 unless the
            caller is its author or an admin
        """
        review = db.query(Review).filter(Review.id == review_id).first()

        if not review:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Review not found"
            )

        if review.user_id != user.id and not user.is_admin:
            logger.warning(f"User {user.id} is not allowed to delete review {review_id}")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="You can only delete your own reviews"
            )

        return review

    @staticmethod
    def delete_review(db: Session, review_id: int, user: User) -> int:
        """Delete a review as its author or an admin; returns the review's movie id"""
        review = ReviewService.get_review(db, review_id, user)
        movie_id = review.movie_id

        db.delete(review)
        db.commit()
        return movie_id

    @staticmethod
    def get_user_reviews(db: Session, user_id: str) -> List[Review]:
        """All reviews by a user with their movies, newest first"""
        return db.query(Review).options(
            joinedload(Review.movie)
        ).filter(
            Review.user_id == user_id
        ).order_by(
            Review.review_date.desc()
        ).all()
