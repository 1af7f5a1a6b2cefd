import os
import uuid
import boto3
import logging
from botocore.exceptions import BotoCoreError
from .config import settings

logger = logging.getLogger(__name__)

class ObjectStorage:
    """Stores uploaded media in an S3-compatible bucket, or on local disk when no bucket is configured"""

    def __init__(self):
        """Initialize the S3 client with settings from config"""
        self.client = None
        self.bucket = settings.STORAGE_BUCKET_NAME
        self.public_url = settings.STORAGE_PUBLIC_URL
        self.base_url = settings.BASE_URL
        self.upload_directory = settings.UPLOAD_DIRECTORY

        if all([settings.STORAGE_ENDPOINT, settings.STORAGE_ACCESS_KEY_ID, settings.STORAGE_SECRET_ACCESS_KEY]):
            try:
                logger.info(f"Creating S3 client for bucket '{self.bucket}' at {settings.STORAGE_ENDPOINT}")
                self.client = boto3.client(
                    "s3",
                    endpoint_url=settings.STORAGE_ENDPOINT,
                    aws_access_key_id=settings.STORAGE_ACCESS_KEY_ID,
                    aws_secret_access_key=settings.STORAGE_SECRET_ACCESS_KEY,
                )
            except (BotoCoreError, ValueError) as e:
                logger.error(f"Failed to create S3 client: {e}")
                logger.warning("Object storage unavailable, uploads will be saved locally")
        else:
            logger.info(f"Object storage not configured, saving uploads under '{self.upload_directory}'")

    def _unique_filename(self, filename: str) -> str:
        file_extension = os.path.splitext(filename or "")[1].lower()
        return f"{uuid.uuid4().hex}{file_extension}"

    def _save_locally(self, content: bytes, key: str) -> str:
        local_path = os.path.join(self.upload_directory, *key.split("/"))
        os.makedirs(os.path.dirname(local_path), exist_ok=True)
        with open(local_path, "wb") as out_file:
            out_file.write(content)
        logger.info(f"Saved file locally at {local_path}")
        return f"{self.base_url}/uploads/{key}"

    def upload_bytes(self, content: bytes, filename: str, content_type: str, prefix: str = "post_media") -> str:
        """Store the content under a fresh key and return its absolute URL"""
        key = f"{prefix}/{self._unique_filename(filename)}"
        if not self.client:
            return self._save_locally(content, key)

        logger.info(f"Uploading '{filename}' to bucket '{self.bucket}' with key '{key}'")
        self.client.put_object(
            Bucket=self.bucket,
            Key=key,
            Body=content,
            ContentType=content_type or "application/octet-stream",
        )
        if self.public_url:
            return f"{self.public_url}/{key}"
        return f"{settings.STORAGE_ENDPOINT.rstrip('/')}/{self.bucket}/{key}"

# Global instance for app-wide usage
object_storage = ObjectStorage()
