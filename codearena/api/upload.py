"""
Upload API routes.
"""

from fastapi import APIRouter, Depends, File, UploadFile, status
from sqlalchemy.orm import Session

from codearena.database import get_db
from codearena.schemas.common import ApiResponse
from codearena.schemas.profile import ProfilePictureResponse
from codearena.services.image_host import ImageHost, get_image_host
from codearena.services.upload_service import UploadService

router = APIRouter()


@router.post(
    "/profile-picture",
    response_model=ApiResponse[ProfilePictureResponse],
    status_code=status.HTTP_201_CREATED,
)
async def upload_profile_picture(
    file: UploadFile = File(...),
    db: Session = Depends(get_db),
    image_host: ImageHost = Depends(get_image_host),
):
    """
    Upload a JPEG or PNG profile picture.

    Returns:
        The stored picture record with its public URL
    """
    content = await file.read()
    picture = await UploadService(db, image_host).upload_profile_picture(
        content=content,
        filename=file.filename or "upload",
        mimetype=file.content_type or "",
    )
    return ApiResponse(
        status_code=status.HTTP_201_CREATED,
        data=ProfilePictureResponse.model_validate(picture),
    )
