"""Image upload routes."""

from fastapi import APIRouter, Request, Response, UploadFile

from api.dependencies.store import DocumentStore
from api.schemas.upload import UploadResponse
from core.config import settings
from core.exceptions import UnsupportedMediaTypeError, UploadTooLargeError

router = APIRouter(tags=["upload"])


@router.post(
    "/api/upload",
    response_model=UploadResponse,
    summary="Upload an image",
    responses={
        413: {"description": "File exceeds the size limit"},
        415: {"description": "File is not an image"},
    },
)
async def upload_image(request: Request, file: UploadFile, store: DocumentStore) -> UploadResponse:
    """Store an image and return a stable URL for it."""
    content_type = file.content_type or "application/octet-stream"
    if not content_type.startswith("image/"):
        raise UnsupportedMediaTypeError(content_type)

    content = await file.read()
    if len(content) > settings.upload_max_bytes:
        raise UploadTooLargeError(len(content), settings.upload_max_bytes)

    upload = store.save_upload(content, content_type, file.filename or "upload")
    url = str(request.url_for("get_upload", key=upload.key))
    return UploadResponse(url=url)


@router.get("/uploads/{key}", name="get_upload", summary="Download an uploaded file")
async def get_upload(key: str, store: DocumentStore) -> Response:
    """Serve the bytes of a previously uploaded file."""
    upload = store.get_upload(key)
    return Response(content=upload.content, media_type=upload.content_type)
