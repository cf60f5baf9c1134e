from fastapi import APIRouter, Depends, Query, Path, status
from sqlalchemy.orm import Session
from typing import List, Optional

from marquee.database import get_db
from marquee.models.user import User
from marquee.schemas.movie import (
    MovieCreate,
    MovieUpdate,
    MovieResponse,
    MovieDetailResponse,
)
from marquee.services.catalog_service import CatalogService
from marquee.utils.dependencies import get_optional_user, require_admin

router = APIRouter(prefix="/api/movies", tags=["Movies"])


# ============================================
# Browsing
# ============================================

@router.get("/", response_model=List[MovieResponse])
def list_movies(
    sort: Optional[str] = Query(
        None,
        description="title, title_desc, director, director_desc, year, year_desc (default: title)"
    ),
    search: Optional[str] = Query(None, max_length=200, description="Matches title or director"),
    db: Session = Depends(get_db)
):
    """
    List the catalog

    Search is applied first, then sorting. Unknown sort values fall back to
    title ascending.
    """
    return CatalogService.list_movies(db, sort, search)


@router.get("/{movie_id}", response_model=MovieDetailResponse)
def get_movie_details(
    movie_id: int = Path(..., description="Catalog movie ID"),
    current_user: Optional[User] = Depends(get_optional_user),
    db: Session = Depends(get_db)
):
    """
    Movie details with reviews and favorites

    When called with a token, `user_rating` and `is_favorited` reflect the
    caller.
    """
    user_id = current_user.id if current_user else None
    return CatalogService.get_movie_details(db, movie_id, user_id)


# ============================================
# Administration
# ============================================

@router.post("/", response_model=MovieResponse, status_code=status.HTTP_201_CREATED)
def create_movie(
    movie_data: MovieCreate,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Add a movie to the catalog (**Admin only**)"""
    return CatalogService.create_movie(db, movie_data)


@router.put("/{movie_id}", response_model=MovieResponse)
def update_movie(
    movie_data: MovieUpdate,
    movie_id: int = Path(..., description="Catalog movie ID"),
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Replace a movie's fields (**Admin only**)"""
    return CatalogService.update_movie(db, movie_id, movie_data)


@router.delete("/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_movie(
    movie_id: int = Path(..., description="Catalog movie ID"),
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """
    Delete a movie with its reviews and favorites (**Admin only**)

    ⚠️ WARNING: This action cannot be undone!
    """
    CatalogService.delete_movie(db, movie_id)
    return None
