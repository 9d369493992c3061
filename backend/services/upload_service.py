import logging
import os
import time
import uuid
from dataclasses import dataclass
from typing import Optional

from fastapi import UploadFile
from fastapi.concurrency import run_in_threadpool

from ..config import Settings
from ..errors import UploadRejectionError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True)
class StoredUpload:
    filename: str
    path: str
    content_type: Optional[str]
    size: int


class UploadStore:
    """
    Keeps payment screenshots on local disk.

    Only images up to ``max_bytes`` are accepted. Files are named
    ``<unix_millis>-<uuid4><ext>`` and are never cleaned up.
    """

    def __init__(self, directory: str, max_bytes: int):
        self.directory = directory
        self.max_bytes = max_bytes

    @classmethod
    def from_settings(cls, settings: Settings) -> "UploadStore":
        return cls(settings.upload_dir, settings.max_upload_bytes)

    def check(self, upload: UploadFile):
        content_type = upload.content_type or ""
        if not content_type.startswith("image/"):
            raise UploadRejectionError("Only image files are allowed!")
        if upload.size is not None and upload.size > self.max_bytes:
            raise UploadRejectionError("File too large")

    @staticmethod
    def filename_for(original: Optional[str]) -> str:
        _, ext = os.path.splitext(original or "")
        return f"{int(time.time() * 1000)}-{uuid.uuid4()}{ext}"

    async def save(self, upload: UploadFile) -> StoredUpload:
        self.check(upload)
        await run_in_threadpool(os.makedirs, self.directory, exist_ok=True)

        filename = self.filename_for(upload.filename)
        path = os.path.join(self.directory, filename)

        size = 0
        out = await run_in_threadpool(open, path, "wb")
        try:
            while True:
                chunk = await upload.read(CHUNK_SIZE)
                if not chunk:
                    break
                size += len(chunk)
                if size > self.max_bytes:
                    break
                await run_in_threadpool(out.write, chunk)
        finally:
            await run_in_threadpool(out.close)

        if size > self.max_bytes:
            await run_in_threadpool(os.remove, path)
            raise UploadRejectionError("File too large")

        logger.info("🖼️ Stored upload %s (%d bytes)", path, size)
        return StoredUpload(filename=filename, path=path, content_type=upload.content_type, size=size)
