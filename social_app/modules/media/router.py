from typing import Dict

from fastapi import APIRouter, Depends, File, UploadFile
from social_app.core.storage import object_storage
from social_app.deps import get_current_user
from social_app.modules.user_management.models.user import User
from social_app.modules.media.service import MediaService

router = APIRouter()

def get_media_service() -> MediaService:
    return MediaService(object_storage)

@router.post("/upload")
async def upload_media(
    file: UploadFile = File(...),
    media_service: MediaService = Depends(get_media_service),
    current_user: User = Depends(get_current_user),
) -> Dict[str, str]:
    """Store an image (at most 5MB) and return the URL to reference from a post"""
    file_url = await media_service.upload_image(file)
    return {"fileUrl": file_url}
