import random
from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from marquee.database import get_db
from marquee.models.user import User
from marquee.schemas.homepage import HomepageResponse
from marquee.services.homepage_service import HomepageService
from marquee.utils.dependencies import get_optional_user

router = APIRouter(prefix="/api/home", tags=["Homepage"])


def get_random() -> random.Random:
    """Random source for the homepage spotlights, overridable in tests"""
    return random.Random()


@router.get("/", response_model=HomepageResponse)
def get_homepage(
    current_user: Optional[User] = Depends(get_optional_user),
    rng: random.Random = Depends(get_random),
    db: Session = Depends(get_db)
):
    """
    Homepage feed

    - 6 most recent reviews
    - Up to 6 random movies by a random director
    - Up to 6 random movies from a random decade

    Spotlights are re-drawn on every request.
    """
    return HomepageService.build_homepage(db, current_user, rng)
