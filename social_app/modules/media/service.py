import logging

from fastapi import UploadFile, HTTPException, status
from starlette.concurrency import run_in_threadpool

from social_app.core.config import settings
from social_app.core.storage import ObjectStorage

logger = logging.getLogger(__name__)

class MediaService:
    def __init__(self, storage: ObjectStorage, max_size: int = settings.MAX_UPLOAD_SIZE):
        self.storage = storage
        self.max_size = max_size

    async def upload_image(self, file: UploadFile, prefix: str = "post_media") -> str:
        """Validate an uploaded image and store it, returning its absolute URL"""
        content_type = file.content_type or ""
        if not content_type.startswith("image/"):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Only image files are allowed",
            )

        # One byte past the limit is enough to know the file is too big
        content = await file.read(self.max_size + 1)
        if len(content) > self.max_size:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"File too large, maximum size is {self.max_size // (1024 * 1024)}MB",
            )

        try:
            url = await run_in_threadpool(
                self.storage.upload_bytes, content, file.filename, content_type, prefix
            )
        except Exception as e:
            logger.error(f"Failed to store upload '{file.filename}': {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to upload media",
            )

        logger.info(f"Stored upload '{file.filename}' at {url}")
        return url
