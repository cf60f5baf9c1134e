"""
Movie catalog schemas: create/update payloads, responses, sort options
and TMDB search projections
"""
from pydantic import BaseModel, Field, field_validator, ConfigDict
from datetime import datetime
from typing import Optional, List
from enum import Enum

from marquee.schemas.validation import SafeStringMixin


class MovieSortOption(str, Enum):
    """Sort orders for the catalog listing"""
    TITLE = "title"
    TITLE_DESC = "title_desc"
    DIRECTOR = "director"
    DIRECTOR_DESC = "director_desc"
    YEAR = "year"
    YEAR_DESC = "year_desc"

    @classmethod
    def parse(cls, value: Optional[str]) -> "MovieSortOption":
        """Case-insensitive lookup; anything unrecognised sorts by title"""
        if value:
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.TITLE


class MovieBase(BaseModel, SafeStringMixin):
    title: str = Field(..., min_length=1, max_length=500)
    director: Optional[str] = Field(None, max_length=255)
    release_year: int = Field(0, ge=0, le=9999, description="0 when unknown")
    synopsis: Optional[str] = None
    short_synopsis: Optional[str] = None
    written_by: Optional[str] = Field(None, max_length=255)
    music_by: Optional[str] = Field(None, max_length=255)
    starring: Optional[str] = None
    poster_urls: Optional[str] = Field(None, description="Comma-separated poster URLs")

    @field_validator('title')
    @classmethod
    def title_not_blank(cls, v):
        if not v or not v.strip():
            raise ValueError('Title is required')
        return v.strip()

    @field_validator('synopsis', 'short_synopsis')
    @classmethod
    def strip_markup(cls, v):
        return cls.sanitize_html(v)


class MovieCreate(MovieBase):
    """Schema for creating a movie (manual entry or TMDB prefill)"""
    pass


class MovieUpdate(MovieBase):
    """Full replacement of a movie's editable fields"""
    pass


class MovieResponse(MovieBase):
    id: int
    poster_url_list: List[str] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class MovieReviewResponse(BaseModel):
    """A review as shown on the movie details page"""
    id: int
    rating: float
    comment: str
    review_date: datetime
    user_id: str
    author_display_name: str


class MovieDetailResponse(BaseModel):
    movie: MovieResponse
    reviews: List[MovieReviewResponse] = []
    favorited_by: List[str] = Field([], description="IDs of users who favorited the movie")
    favorite_count: int = 0
    user_rating: float = Field(0.0, description="Caller's rating, 0 when not rated")
    is_favorited: bool = False


class TmdbSearchResult(BaseModel):
    tmdb_id: int
    title: str
    release_date: Optional[str] = None
    poster_path: Optional[str] = None
