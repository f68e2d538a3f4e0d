# 📄 File: app/shared/infrastructure/storage/supabase_storage.py

# 🧭 Purpose (Layman Explanation):
# This file uploads pictures (profile photos, club banners, event banners) to cloud storage,
# organizes them in folders and hands back the link used to show them.

# 🧪 Purpose (Technical Summary):
# Supabase Storage client wrapper: validates and optimizes base64 images, uploads them
# under a per-purpose folder with a unique key, returns an ImageRef with the public URL,
# and deletes superseded objects. The supabase client is synchronous, so calls run in a
# worker thread.

# 🔗 Dependencies:
# - supabase: Storage client
# - file_manager.py: Base64 decoding and Pillow optimization
# - asyncio: Thread offloading

# 🔄 Connected Modules / Calls From:
# Called by: profile photo upload, group create/banner change, event create/banner change
# Connects to: Supabase cloud storage

import asyncio
from functools import lru_cache
from typing import Optional
from uuid import uuid4

from supabase import Client, create_client

from app.shared.config.settings import Settings, get_settings
from app.shared.core.exceptions import StorageError
from app.shared.core.value_objects import ImageProvider, ImageRef
from app.shared.infrastructure.storage.file_manager import (
    decode_base64_image,
    optimize_image,
    safe_stem,
)
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)


class SupabaseStorageClient:
    """
    Supabase Storage client for Clubbera media.
    """

    FOLDERS = {"profiles", "group-banners", "event-banners"}

    def __init__(self, settings: Settings):
        self.settings = settings
        self.bucket_name = settings.SUPABASE_STORAGE_BUCKET
        self._client: Optional[Client] = None

    def _storage(self):
        if self._client is None:
            if not self.settings.storage_configured:
                raise StorageError("File storage is not configured")
            self._client = create_client(self.settings.SUPABASE_URL, self.settings.SUPABASE_SERVICE_KEY)
            logger.info("Supabase Storage client initialized")
        return self._client.storage.from_(self.bucket_name)

    async def upload_image(self, base64_data: str, file_name: str, folder: str) -> ImageRef:
        """
        Upload a base64 image.

        Args:
            base64_data: Image bytes as base64, optionally with a data-URL prefix
            file_name: Original client-side filename
            folder: One of FOLDERS

        Returns:
            ImageRef pointing at the stored object

        Raises:
            InvalidImageError: If the payload is not an acceptable image
            StorageError: If Supabase rejects the upload
        """
        if folder not in self.FOLDERS:
            raise ValueError(f"Unknown storage folder: {folder}")

        raw = decode_base64_image(base64_data, self.settings.max_image_size_bytes)
        image = await asyncio.to_thread(optimize_image, raw)
        key = f"{folder}/{uuid4().hex}-{safe_stem(file_name)}{image.extension}"

        try:
            bucket = self._storage()
            await asyncio.to_thread(
                bucket.upload,
                key,
                image.data,
                {"content-type": image.content_type, "cache-control": "3600", "upsert": "false"},
            )
            public_url = await asyncio.to_thread(bucket.get_public_url, key)
        except StorageError:
            raise
        except Exception as e:
            logger.error(f"❌ File upload failed: {e}")
            raise StorageError("Image upload failed") from e

        logger.info(f"File uploaded successfully: {key}", bytes=len(image.data))
        return ImageRef(provider=ImageProvider.SUPABASE, key=key, url=public_url)

    async def delete_file(self, key: str) -> bool:
        """
        Delete an object. Failures are logged and reported as False so a
        stale file never blocks replacing a photo or banner.
        """
        try:
            await asyncio.to_thread(self._storage().remove, [key])
        except Exception as e:
            logger.error(f"File deletion failed for {key}: {e}")
            return False
        logger.info(f"File deleted successfully: {key}")
        return True

    async def replace_image(
        self,
        previous: Optional[ImageRef],
        base64_data: str,
        file_name: str,
        folder: str
    ) -> ImageRef:
        """Upload a new image, then remove the previous stored object if there was one."""
        new_ref = await self.upload_image(base64_data, file_name, folder)
        if previous and previous.provider == ImageProvider.SUPABASE and previous.key:
            await self.delete_file(previous.key)
        return new_ref


@lru_cache()
def get_storage_client() -> SupabaseStorageClient:
    return SupabaseStorageClient(get_settings())
