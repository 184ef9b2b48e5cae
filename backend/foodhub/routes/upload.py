"""
FoodHub Backend — Image Upload Route
======================================

What:  POST /api/upload accepts one multipart image part named "image",
       stores it, and returns the URL it is served from.
How:   Rejects a part whose size (as spooled by the multipart parser) is
       over MAX_FILE_SIZE before reading it, then reads it into memory,
       hands it to FileService for validation and storage, and always
       closes the upload's spooled temp file.

Example:
    curl -F "image=@pizza.jpg" http://localhost:8000/api/upload
    → 201 {"message": "Image uploaded successfully",
           "fileUrl": "/uploads/2024/01/15/<uuid>.jpg", "filename": "<uuid>.jpg"}
"""

import logging
from pathlib import PurePosixPath

from fastapi import APIRouter, File, UploadFile

from foodhub.schemas.common import ErrorResponse
from foodhub.schemas.upload import UploadResponse
from foodhub.services.file_service import file_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Upload"])


@router.post(
    "/upload",
    status_code=201,
    response_model=UploadResponse,
    responses={
        400: {"description": "Unsupported type, empty, or oversized file", "model": ErrorResponse},
        500: {"description": "File could not be written", "model": ErrorResponse},
    },
    summary="Upload an image",
)
async def upload_image(image: UploadFile = File(..., description="Image file (png, jpg, gif, webp)")) -> UploadResponse:
    try:
        file_service.validate_declared_size(image.size)
        content = await image.read()
        _, relative_path = await file_service.validate_and_store(
            filename=image.filename or "",
            content=content,
            content_type=image.content_type,
            content_length=image.size,
        )
    finally:
        await image.close()

    logger.info("Image uploaded: %s (original=%s)", relative_path, image.filename)
    return UploadResponse(
        file_url=file_service.public_url(relative_path),
        filename=PurePosixPath(relative_path).name,
    )
