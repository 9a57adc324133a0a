# app/services/media_store.py
from typing import Callable, List, Optional
import asyncio
import logging
import os

import cloudinary.uploader
from cloudinary.exceptions import Error as CloudinaryError

logger = logging.getLogger(__name__)

CLOUDINARY_CLOUD_NAME = os.getenv("CLOUDINARY_CLOUD_NAME")
CLOUDINARY_API_KEY = os.getenv("CLOUDINARY_API_KEY")
CLOUDINARY_API_SECRET = os.getenv("CLOUDINARY_API_SECRET")
CLOUDINARY_FOLDER = os.getenv("CLOUDINARY_FOLDER", "ridge_park_crm")


class MediaStore:
    """
        Uploads listing images to Cloudinary.

        - Strings that are not base64 data URIs are taken to be URLs
          already and returned untouched.
        - Data URIs go through a signed `cloudinary.uploader.upload`
          and are replaced by the returned `secure_url`.
        - A failed upload yields None instead of raising, so one bad
          image never fails the whole write.
    """

    def __init__(
        self,
        cloud_name: Optional[str] = CLOUDINARY_CLOUD_NAME,
        api_key: Optional[str] = CLOUDINARY_API_KEY,
        api_secret: Optional[str] = CLOUDINARY_API_SECRET,
        folder: str = CLOUDINARY_FOLDER,
        uploader: Callable[..., dict] = cloudinary.uploader.upload,
    ):
        self.cloud_name = cloud_name
        self.api_key = api_key
        self.api_secret = api_secret
        self.folder = folder
        self.uploader = uploader

    async def upload(self, image: str) -> Optional[str]:
        if not image.startswith("data:image"):
            return image  # Already a url

        if not (self.cloud_name and self.api_key and self.api_secret):
            logger.error("Media upload skipped: CLOUDINARY_CLOUD_NAME / CLOUDINARY_API_KEY / CLOUDINARY_API_SECRET not set")
            return None

        try:
            # The SDK is blocking; keep it off the event loop
            result = await asyncio.to_thread(
                self.uploader,
                image,
                folder=self.folder,
                cloud_name=self.cloud_name,
                api_key=self.api_key,
                api_secret=self.api_secret,
            )
            return result["secure_url"]
        except (CloudinaryError, KeyError) as e:
            logger.error("Media upload error: %s", e)
            return None

    async def upload_all(self, images: List[str]) -> List[Optional[str]]:
        """ Upload concurrently, keeping order; failures stay as None """
        return list(await asyncio.gather(*(self.upload(img) for img in images)))

    async def upload_each(self, images: List[str]) -> List[str]:
        """ Upload one by one, dropping failures """
        uploaded = []
        for img in images:
            url = await self.upload(img)
            if url:
                uploaded.append(url)
        return uploaded


media_store = MediaStore()


def get_media_store() -> MediaStore:
    """ Dependency to provide the media store in FastAPI endpoints """
    return media_store
