from fastapi import APIRouter, Depends, File, Query, UploadFile
from PIL import UnidentifiedImageError

from marketplace.core.config import settings
from marketplace.core.logging import get_logger
from marketplace.utils.dependencies import get_blob_store
from marketplace.utils.exceptions import BadRequestError
from marketplace.utils.image_utils import (
    ALLOWED_CONTENT_TYPES,
    UPLOAD_KINDS,
    BlobStore,
    folder_for,
    prepare_image,
)

router = APIRouter(prefix="/api/uploads", tags=["uploads"])
logger = get_logger(__name__)


@router.post("")
def upload_image(
    file: UploadFile = File(...),
    kind: str = Query("product", description="Type of image: logo, cover, product"),
    blob_store: BlobStore = Depends(get_blob_store),
):
    """Normalise an image and hand it to the blob store; returns its public URL."""
    if file.content_type not in ALLOWED_CONTENT_TYPES:
        raise BadRequestError("Only JPEG, PNG, or WebP images allowed")
    if kind not in UPLOAD_KINDS:
        raise BadRequestError(f"Unknown upload kind: {kind}")

    try:
        buffer = prepare_image(file.file, kind)
    except (UnidentifiedImageError, OSError):
        raise BadRequestError("File is not a readable image")

    folder = folder_for(kind, settings.UPLOAD_FOLDER)
    url = blob_store.upload(buffer, folder)
    logger.info("Image uploaded", kind=kind, folder=folder)
    return {"url": url}
