import io
from typing import BinaryIO, Optional, Protocol

import cloudinary
import cloudinary.uploader
from PIL import Image

from marketplace.core.logging import get_logger

logger = get_logger(__name__)

ALLOWED_CONTENT_TYPES = ("image/jpeg", "image/png", "image/webp")

# Upload kind -> (sub-folder, longest side in px)
UPLOAD_KINDS = {
    "logo": ("vendors/logos", 500),
    "cover": ("vendors/covers", 1200),  # banners may be wider
    "product": ("products", 1080),
}


class BlobStore(Protocol):
    """Anything that can host a file and hand back a public URL."""

    def upload(self, data: BinaryIO, folder: str) -> str: ...


class CloudinaryBlobStore:

    def __init__(self, cloudinary_url: Optional[str] = None):
        if cloudinary_url:
            cloudinary.config(cloudinary_url=cloudinary_url)

    def upload(self, data: BinaryIO, folder: str) -> str:
        result = cloudinary.uploader.upload(data, folder=folder)
        url = result.get("secure_url")
        logger.info("Uploaded image", folder=folder, public_id=result.get("public_id"))
        return url


def prepare_image(source: BinaryIO, kind: str) -> io.BytesIO:
    """Flatten to RGB, cap the size for ``kind`` and re-encode as JPEG."""
    _, max_side = UPLOAD_KINDS[kind]

    image = Image.open(source)
    if image.mode != "RGB":
        image = image.convert("RGB")
    image.thumbnail((max_side, max_side))

    buffer = io.BytesIO()
    image.save(buffer, format="JPEG", quality=80, optimize=True)
    buffer.seek(0)
    return buffer


def folder_for(kind: str, root: str) -> str:
    sub_folder, _ = UPLOAD_KINDS[kind]
    return f"{root}/{sub_folder}"
