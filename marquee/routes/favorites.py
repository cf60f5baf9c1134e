from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session
from typing import List

from marquee.database import get_db
from marquee.models.user import User
from marquee.schemas.movie import MovieResponse
from marquee.schemas.profile import FavoriteToggleResponse
from marquee.services.favorites_service import FavoritesService
from marquee.utils.dependencies import get_current_user

router = APIRouter(prefix="/api/favorites", tags=["Favorites"])


@router.post("/{movie_id}/toggle", response_model=FavoriteToggleResponse)
def toggle_favorite(
    movie_id: int = Path(..., description="Catalog movie ID"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Add the movie to your favorites, or remove it if it is already there"""
    is_favorited = FavoritesService.toggle_favorite(db, current_user.id, movie_id)
    return {"movie_id": movie_id, "is_favorited": is_favorited}


@router.get("/", response_model=List[MovieResponse])
def get_my_favorites(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Your favorite movies"""
    return FavoritesService.get_favorite_movies(db, current_user.id)
