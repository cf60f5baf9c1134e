"""
Review Schemas - comment and rating tracks are submitted independently
"""

from pydantic import BaseModel, Field, field_validator, ConfigDict
from datetime import datetime

from marquee.schemas.validation import SafeStringMixin
from marquee.schemas.movie import MovieResponse


class CommentCreate(BaseModel, SafeStringMixin):
    """Schema for creating/updating the comment of a review"""
    movie_id: int = Field(..., description="Catalog movie ID", gt=0)
    comment: str = Field("", max_length=2000)

    @field_validator('comment')
    @classmethod
    def clean_comment(cls, v):
        return cls.clean_text(v)


class RatingCreate(BaseModel):
    """Schema for creating/updating the rating of a review"""
    movie_id: int = Field(..., description="Catalog movie ID", gt=0)
    rating: float = Field(..., description="Rating value (0-5, half steps)", ge=0.0, le=5.0)

    @field_validator('rating')
    @classmethod
    def round_rating(cls, v):
        return round(v, 1)


class ReviewResponse(BaseModel):
    id: int
    movie_id: int
    user_id: str
    rating: float
    comment: str
    review_date: datetime

    model_config = ConfigDict(from_attributes=True)


class ReviewWithMovieResponse(ReviewResponse):
    """Review with its movie eager-loaded, used on the profile page"""
    movie: MovieResponse


class ReviewDeletedResponse(BaseModel):
    review_id: int
    movie_id: int
