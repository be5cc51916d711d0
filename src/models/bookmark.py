"""Bookmark model."""

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class Bookmark(Base, TimestampMixin):
    """A saved link, visible only to the user who created it."""

    __tablename__ = "bookmarks"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(255), nullable=False)
    link = Column(String(2048), nullable=False)
    description = Column(Text, nullable=True)

    # Relationships
    user = relationship("User", back_populates="bookmarks")
