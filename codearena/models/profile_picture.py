"""
Profile picture records for images stored on the image host.
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime

from codearena.database import Base


class ProfilePicture(Base):
    """Uploaded profile picture; only the public URL is stored."""
    __tablename__ = "profile_pictures"

    id = Column(Integer, primary_key=True, index=True)
    url = Column(String(512), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    def __repr__(self) -> str:
        return f"<ProfilePicture(id={self.id}, url='{self.url}')>"
