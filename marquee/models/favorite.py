"""
Favorite membership between users and movies.

A plain association table keyed by (user_id, movie_id). Deleting a user
cascades at the storage layer; deleting a movie does not, so CatalogService
clears a movie's rows itself before removing the movie.
"""
from sqlalchemy import Table, Column, Integer, String, ForeignKey
from marquee.database import Base

favorite_movies = Table(
    "user_favorite_movies",
    Base.metadata,
    Column("user_id", String(36), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("movie_id", Integer, ForeignKey("movies.id"), primary_key=True, index=True),
)
