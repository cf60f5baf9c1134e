"""
Review Routes - comment and rating submission, review deletion
"""

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from marquee.database import get_db
from marquee.models.user import User
from marquee.schemas.review import (
    CommentCreate,
    RatingCreate,
    ReviewResponse,
    ReviewDeletedResponse,
)
from marquee.services.review_service import ReviewService
from marquee.utils.dependencies import get_current_user

router = APIRouter(prefix="/api/reviews", tags=["Reviews"])


@router.post("/comment", response_model=ReviewResponse)
def upsert_comment(
    comment_data: CommentCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Write or replace your comment for a movie

    Creates your review (rating 0) if you have none yet; otherwise only the
    comment changes.
    """
    return ReviewService.upsert_comment(db, current_user.id, comment_data.movie_id, comment_data.comment)


@router.post("/rating", response_model=ReviewResponse)
def upsert_rating(
    rating_data: RatingCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Rate a movie from 0 to 5

    Creates your review (empty comment) if you have none yet; otherwise only
    the rating changes.
    """
    return ReviewService.upsert_rating(db, current_user.id, rating_data.movie_id, rating_data.rating)


@router.get("/{review_id}", response_model=ReviewResponse)
def get_review(
    review_id: int = Path(..., description="Review ID", gt=0),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Review shown before deletion; only its author or an admin may view it here"""
    return ReviewService.get_review(db, review_id, current_user)


@router.delete("/{review_id}", response_model=ReviewDeletedResponse)
def delete_review(
    review_id: int = Path(..., description="Review ID", gt=0),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Delete a review

    Only the author or an admin can delete it. Returns the movie ID so the
    client can go back to the movie page.
    """
    movie_id = ReviewService.delete_review(db, review_id, current_user)
    return {"review_id": review_id, "movie_id": movie_id}
