"""
Import all models to ensure they are registered with SQLAlchemy
"""
from marquee.models.user import User
from marquee.models.movie import Movie
from marquee.models.review import Review
from marquee.models.favorite import favorite_movies

__all__ = [
    "User",
    "Movie",
    "Review",
    "favorite_movies"
]
