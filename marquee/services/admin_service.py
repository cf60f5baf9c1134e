from sqlalchemy.orm import Session
from fastapi import HTTPException, status
from typing import List
import logging

from marquee.models.user import User
from marquee.models.review import Review

logger = logging.getLogger(__name__)


class AdminService:
    """User management for administrators"""

    @staticmethod
    def list_users(db: Session) -> List[User]:
        return db.query(User).order_by(User.email.asc()).all()

    @staticmethod
    def get_user(db: Session, user_id: str) -> User:
        user = db.query(User).filter(User.id == user_id).first()
        if not user:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="User not found"
            )
        return user

    @staticmethod
    def delete_user(db: Session, user_id: str) -> None:
        """
        Delete a user and the reviews they wrote in one transaction.

        Reviews never cascade at the storage layer and are removed here.
        The user's favorite rows are removed by the ON DELETE CASCADE on
        user_favorite_movies.user_id.
        """
        user = AdminService.get_user(db, user_id)

        try:
            removed_reviews = db.query(Review).filter(
                Review.user_id == user.id
            ).delete(synchronize_session=False)

            db.delete(user)
            db.commit()
        except Exception:
            db.rollback()
            logger.error(f"Failed to delete user {user_id}, changes rolled back")
            raise

        logger.info(f"Deleted user {user_id} and {removed_reviews} review(s)")
