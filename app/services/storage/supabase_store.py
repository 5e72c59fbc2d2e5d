"""Supabase Storage document store"""

import logging
from typing import Any

from starlette.concurrency import run_in_threadpool
from supabase import Client, create_client

from app.core.config import Settings
from app.core.exceptions import DocumentStorageError

from .base import DocumentStore

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"


class SupabaseDocumentStore(DocumentStore):
    """Uploads documents to a Supabase bucket and hands out signed URLs.

    Uploads never overwrite: an existing object with the same name makes
    the upload fail. Signed URLs expire after ``expires_in`` seconds, the
    object itself stays in the bucket.
    """

    name = "supabase"

    def __init__(self, client: Client, bucket: str, expires_in: int = 15 * 60):
        self.client = client
        self.bucket = bucket
        self.expires_in = expires_in

    @classmethod
    def from_settings(cls, settings: Settings) -> "SupabaseDocumentStore":
        client = create_client(settings.supabase_url, settings.supabase_service_role)
        return cls(
            client,
            bucket=settings.supabase_bucket,
            expires_in=settings.signed_url_expires_in,
        )

    def _bucket(self) -> Any:
        return self.client.storage.from_(self.bucket)

    def _upload(self, filename: str, data: bytes) -> None:
        self._bucket().upload(
            path=filename,
            file=data,
            file_options={"content-type": PDF_CONTENT_TYPE, "upsert": "false"},
        )

    def _sign(self, filename: str) -> str:
        signed = self._bucket().create_signed_url(filename, self.expires_in)
        url = signed.get("signedUrl") or signed.get("signedURL")
        if not url:
            raise DocumentStorageError(f"No signed URL returned for {filename}")
        return url

    async def save(self, filename: str, data: bytes) -> str:
        try:
            await run_in_threadpool(self._upload, filename, data)
        except Exception as exc:
            raise DocumentStorageError(
                f"Upload of {filename} to bucket {self.bucket} failed"
            ) from exc

        try:
            url = await run_in_threadpool(self._sign, filename)
        except DocumentStorageError:
            raise
        except Exception as exc:
            raise DocumentStorageError(f"Signing {filename} failed") from exc

        logger.info(
            "Uploaded %s (%d bytes) to bucket %s, link valid %ds",
            filename,
            len(data),
            self.bucket,
            self.expires_in,
        )
        return url
