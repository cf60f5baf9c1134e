from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.sql import func
from typing import List
from marquee.database import Base


class Movie(Base):
    """
    A catalog entry. Reviews and favorites reference movies by id and are
    always loaded through explicit queries, never through collections here.
    """
    __tablename__ = "movies"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(500), nullable=False, index=True)
    director = Column(String(255), index=True)
    release_year = Column(Integer, nullable=False, default=0, index=True)  # 0 = unknown
    synopsis = Column(Text)
    short_synopsis = Column(Text)
    written_by = Column(String(255))
    music_by = Column(String(255))
    starring = Column(Text)  # "Actor One, Actor Two, ..."
    poster_urls = Column(Text)  # Comma-joined absolute URLs
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    @property
    def poster_url_list(self) -> List[str]:
        """Split the stored poster URLs into a list"""
        if not self.poster_urls:
            return []
        return [url.strip() for url in self.poster_urls.split(",") if url.strip()]

    def __repr__(self):
        return f"<Movie(id={self.id}, title='{self.title}', director='{self.director}')>"
