"""
Upload handling for scanned card images.

Checks type and size, writes the image to the upload directory under a
timestamped name, and hands the bytes back to the caller.
"""
import logging
import time
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from fastapi import UploadFile

from app.errors import ValidationError
from app.settings import ALLOWED_CONTENT_TYPES, MAX_UPLOAD_BYTES

log = logging.getLogger(__name__)


@dataclass
class StoredUpload:
    path: Path
    filename: str
    content_type: str
    data: bytes


class UploadHandler:
    def __init__(
        self,
        upload_dir: Path,
        max_bytes: int = MAX_UPLOAD_BYTES,
        allowed_types: Sequence[str] = ALLOWED_CONTENT_TYPES,
        keep_files: bool = False,
    ):
        self.upload_dir = Path(upload_dir)
        self.max_bytes = max_bytes
        self.allowed_types = tuple(allowed_types)
        self.keep_files = keep_files
        self.upload_dir.mkdir(parents=True, exist_ok=True)

    def _unique_name(self, original: Optional[str]) -> str:
        ext = Path(original or "").suffix.lower()
        return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}{ext}"

    def save(self, upload: Optional[UploadFile]) -> StoredUpload:
        """
        Validate and store one uploaded image.

        Raises:
            ValidationError: no file, unsupported type, empty, or over the size limit.
        """
        if upload is None or not upload.filename:
            raise ValidationError("Please upload an image", "No file in field 'image'")

        content_type = (upload.content_type or "").lower()
        if content_type not in self.allowed_types:
            raise ValidationError(
                "Unsupported file type",
                f"{content_type or 'unknown'} is not one of {', '.join(self.allowed_types)}",
            )

        # Read one byte past the limit so oversized files are caught without
        # pulling the whole thing into memory.
        data = upload.file.read(self.max_bytes + 1)
        if len(data) > self.max_bytes:
            raise ValidationError(
                "File too large",
                f"Maximum upload size is {self.max_bytes // (1024 * 1024)} MiB",
            )
        if not data:
            raise ValidationError("Uploaded image is empty", upload.filename)

        name = self._unique_name(upload.filename)
        path = self.upload_dir / name
        path.write_bytes(data)
        log.info("stored upload %s (%d bytes, %s)", name, len(data), content_type)
        return StoredUpload(path=path, filename=name, content_type=content_type, data=data)

    def discard(self, stored: StoredUpload) -> None:
        """Remove a stored upload unless uploads are configured to be kept."""
        if self.keep_files:
            return
        try:
            stored.path.unlink()
        except FileNotFoundError:
            pass
        except OSError:
            log.warning("could not remove upload %s", stored.path, exc_info=True)
