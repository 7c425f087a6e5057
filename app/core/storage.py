"""Image uploads to Supabase Storage buckets."""
import logging
import re
import time
from typing import List, Optional

from fastapi import UploadFile
from supabase import Client

logger = logging.getLogger(__name__)

_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-zA-Z0-9.-]")


def storage_filename(original: str, prefix: str = "") -> str:
    """Timestamped object name with anything outside [a-zA-Z0-9.-] removed."""
    cleaned = _UNSAFE_FILENAME_CHARS.sub("", original or "")
    return f"{prefix}{int(time.time() * 1000)}-{cleaned}"


def has_content(file: Optional[UploadFile]) -> bool:
    return file is not None and bool(file.filename) and (file.size is None or file.size > 0)


class SupabaseStorage:
    def __init__(self, supabase: Client, bucket_name: str):
        self.supabase = supabase
        self.bucket_name = bucket_name

    def upload_file(self, file_content: bytes, key: str, content_type: str = "application/octet-stream") -> Optional[str]:
        """Upload file and return its public URL, or None if the upload failed."""
        try:
            bucket = self.supabase.storage.from_(self.bucket_name)
            bucket.upload(key, file_content, {"content-type": content_type})
            return bucket.get_public_url(key)
        except Exception as e:
            logger.error("Failed to upload %s to bucket %s: %s", key, self.bucket_name, e)
            return None

    async def upload(self, file: Optional[UploadFile], prefix: str = "") -> Optional[str]:
        if not has_content(file):
            return None
        content = await file.read()
        if not content:
            return None
        key = storage_filename(file.filename, prefix)
        return self.upload_file(content, key, file.content_type or "application/octet-stream")

    async def upload_many(self, files: Optional[List[UploadFile]], prefix: str = "") -> List[Optional[str]]:
        """Public URLs in upload order; None where a file was empty or failed."""
        urls = []
        for file in files or []:
            urls.append(await self.upload(file, prefix))
        return urls

    def delete_file(self, key: str) -> bool:
        try:
            self.supabase.storage.from_(self.bucket_name).remove([key])
            return True
        except Exception as e:
            logger.warning("Failed to delete %s from bucket %s: %s", key, self.bucket_name, e)
            return False
