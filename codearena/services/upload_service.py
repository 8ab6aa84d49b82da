"""
Profile picture uploads.
"""

from sqlalchemy.orm import Session

from codearena.errors import BadRequest
from codearena.models.profile_picture import ProfilePicture
from codearena.services.image_host import ImageHost

ALLOWED_IMAGE_TYPES = {"image/jpeg", "image/png"}


class UploadService:
    """Validates, uploads and records profile pictures."""

    def __init__(self, db: Session, image_host: ImageHost):
        self.db = db
        self.image_host = image_host

    async def upload_profile_picture(self, content: bytes, filename: str, mimetype: str) -> ProfilePicture:
        """
        Upload a JPEG or PNG and store its URL.

        Raises:
            BadRequest: For any other file type (nothing is uploaded or stored)
            InternalError: If the image host fails
        """
        if mimetype not in ALLOWED_IMAGE_TYPES:
            raise BadRequest("incorrect file type")

        url = await self.image_host.upload(content, filename, mimetype)

        picture = ProfilePicture(url=url)
        self.db.add(picture)
        self.db.commit()
        self.db.refresh(picture)
        return picture
