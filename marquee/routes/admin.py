"""
Admin Routes
Provides user management and TMDB catalog import

Features:
- List, inspect and delete users (with their reviews)
- Search TMDB by title
- Prefill movie fields from a TMDB movie
- Import a TMDB movie straight into the catalog

All endpoints require the Admin role via the require_admin dependency
"""

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional

from marquee.database import get_db
from marquee.models.user import User
from marquee.schemas.auth import UserResponse
from marquee.schemas.movie import MovieCreate, MovieResponse, TmdbSearchResult
from marquee.services.admin_service import AdminService
from marquee.services.catalog_service import CatalogService
from marquee.utils.dependencies import require_admin

router = APIRouter(prefix="/api/admin", tags=["Admin"])


# ==================== USER MANAGEMENT ====================

@router.get("/users", response_model=List[UserResponse])
def list_users(
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """List all registered users"""
    return AdminService.list_users(db)


@router.get("/users/{user_id}", response_model=UserResponse)
def get_user(
    user_id: str = Path(..., description="User ID"),
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Get a single user, e.g. to confirm before deletion"""
    return AdminService.get_user(db, user_id)


@router.delete("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: str = Path(..., description="User ID"),
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """
    Delete a user together with their reviews and favorites

    ⚠️ WARNING: This action cannot be undone!
    """
    AdminService.delete_user(db, user_id)
    return None


# ==================== TMDB IMPORT ====================

@router.get("/tmdb/search", response_model=List[TmdbSearchResult])
def search_tmdb(
    title: Optional[str] = Query(None, max_length=200, description="Movie title to search for"),
    admin: User = Depends(require_admin)
):
    """
    Search TMDB by title

    An empty title returns an empty list.
    """
    return CatalogService.search_metadata(title)


@router.get("/tmdb/{tmdb_id}", response_model=MovieCreate)
def get_tmdb_movie(
    tmdb_id: int = Path(..., description="TMDB movie ID", gt=0),
    admin: User = Depends(require_admin)
):
    """
    Movie fields prefilled from TMDB

    Nothing is saved; submit the (edited) result to `POST /api/movies/`.
    """
    return CatalogService.fetch_metadata_details(tmdb_id)


@router.post("/tmdb/{tmdb_id}/import", response_model=MovieResponse, status_code=status.HTTP_201_CREATED)
def import_tmdb_movie(
    tmdb_id: int = Path(..., description="TMDB movie ID", gt=0),
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Fetch a TMDB movie and add it to the catalog in one step"""
    return CatalogService.import_movie(db, tmdb_id)
