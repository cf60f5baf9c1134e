from pydantic import BaseModel
from typing import List

from marquee.schemas.auth import UserResponse
from marquee.schemas.movie import MovieResponse
from marquee.schemas.review import ReviewWithMovieResponse


class FavoriteToggleResponse(BaseModel):
    movie_id: int
    is_favorited: bool


class ProfileResponse(BaseModel):
    user: UserResponse
    reviews: List[ReviewWithMovieResponse] = []
    favorite_movies: List[MovieResponse] = []
