from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from marquee.database import get_db
from marquee.models.user import User
from marquee.schemas.profile import ProfileResponse
from marquee.services.favorites_service import FavoritesService
from marquee.services.review_service import ReviewService
from marquee.utils.dependencies import get_current_user

router = APIRouter(prefix="/api/profile", tags=["Profile"])


@router.get("/me", response_model=ProfileResponse)
def get_my_profile(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Your account, your reviews (newest first) and your favorite movies"""
    return {
        "user": current_user,
        "reviews": ReviewService.get_user_reviews(db, current_user.id),
        "favorite_movies": FavoritesService.get_favorite_movies(db, current_user.id),
    }
