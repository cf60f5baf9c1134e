from sqlalchemy import Column, Integer, String, Float, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from marquee.database import Base


class Review(Base):
    """
    A user's rating and comment for a movie.

    At most one review exists per (movie_id, user_id); ReviewService enforces
    this with a lookup before every write, there is no unique constraint.
    Neither foreign key cascades: reviews must be removed by the service
    before their movie or author is deleted.
    """
    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True, index=True)
    rating = Column(Float, nullable=False, default=0.0)  # 0.0 - 5.0, half steps
    comment = Column(Text, nullable=False, default="")
    review_date = Column(DateTime(timezone=True), nullable=False)  # Set once at creation
    movie_id = Column(Integer, ForeignKey("movies.id"), nullable=False, index=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)

    # Only readable when the query eager-loads them
    movie = relationship("Movie", lazy="raise")
    user = relationship("User", lazy="raise")

    def __repr__(self):
        return f"<Review(id={self.id}, movie_id={self.movie_id}, user_id={self.user_id}, rating={self.rating})>"
