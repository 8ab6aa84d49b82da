"""
Cloudinary image hosting over its REST upload API.
"""

import hashlib
import logging
import time
from typing import Optional

import httpx

from codearena.config import Settings, get_settings
from codearena.errors import InternalError

logger = logging.getLogger(__name__)


def sign_params(params: dict, api_secret: str) -> str:
    """
    Cloudinary request signature: SHA-1 of the sorted ``key=value`` pairs
    joined by ``&`` with the API secret appended.
    """
    to_sign = "&".join(f"{key}={params[key]}" for key in sorted(params) if params[key] not in (None, ""))
    return hashlib.sha1(f"{to_sign}{api_secret}".encode("utf-8")).hexdigest()


class ImageHost:
    """Uploads images with a signed request and returns their public URL."""

    def __init__(
        self,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        folder: str = "",
        upload_url: str = "https://api.cloudinary.com/v1_1",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.cloud_name = cloud_name
        self.api_key = api_key
        self.api_secret = api_secret
        self.folder = folder
        self.upload_url = upload_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "ImageHost":
        settings = settings or get_settings()
        return cls(
            cloud_name=settings.cloudinary_cloud_name,
            api_key=settings.cloudinary_api_key,
            api_secret=settings.cloudinary_api_secret,
            folder=settings.cloudinary_folder,
            upload_url=settings.cloudinary_upload_url,
        )

    async def upload(self, content: bytes, filename: str, mimetype: str) -> str:
        """
        Upload an image.

        Args:
            content: Raw file bytes
            filename: Original file name
            mimetype: MIME type of the file

        Returns:
            Public URL of the uploaded image

        Raises:
            InternalError: If the upload fails or the response has no URL
        """
        params = {"timestamp": int(time.time()), "folder": self.folder}
        data = {key: str(value) for key, value in params.items() if value not in (None, "")}
        data["api_key"] = self.api_key
        data["signature"] = sign_params(params, self.api_secret)

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(
                    f"{self.upload_url}/{self.cloud_name}/image/upload",
                    data=data,
                    files={"file": (filename, content, mimetype)},
                )
                response.raise_for_status()
                body = response.json()
        except httpx.HTTPError as e:
            logger.error(f"Image upload failed: {e}")
            raise InternalError(f"image upload failed: {e}") from e
        except ValueError as e:
            raise InternalError(f"image host returned invalid JSON: {e}") from e

        url = (body.get("secure_url") or body.get("url")) if isinstance(body, dict) else None
        if not url:
            raise InternalError("image host returned no URL")

        logger.info(f"Uploaded image {filename} to {url}")
        return url


def get_image_host() -> ImageHost:
    """FastAPI dependency providing a configured image host."""
    return ImageHost.from_settings()
