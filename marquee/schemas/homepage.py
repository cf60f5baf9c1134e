from pydantic import BaseModel
from typing import List, Optional

from marquee.schemas.movie import MovieResponse


class HomepageReview(BaseModel):
    """Flattened review for the homepage feed"""
    movie_id: int
    movie_title: str
    poster_urls: Optional[str] = None
    rating: float
    user_id: str
    user_display_name: str
    user_liked_movie: bool


class HomepageResponse(BaseModel):
    recent_reviews: List[HomepageReview] = []
    recommended_director_name: Optional[str] = None
    director_recommendations: List[MovieResponse] = []
    recommended_decade: Optional[str] = None
    decade_recommendations: List[MovieResponse] = []
    welcome_name: Optional[str] = None
