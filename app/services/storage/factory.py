"""Selects the document store for this process"""

import logging

from app.core.config import Settings

from .base import DocumentStore
from .local import LocalDocumentStore
from .supabase_store import SupabaseDocumentStore

logger = logging.getLogger(__name__)


def create_document_store(settings: Settings) -> DocumentStore:
    """Supabase when URL, service role and bucket are all set, else local disk"""
    if settings.use_remote_storage:
        logger.info("Using Supabase storage bucket %s", settings.supabase_bucket)
        return SupabaseDocumentStore.from_settings(settings)

    logger.info("Using local storage in %s", settings.files_dir)
    return LocalDocumentStore(settings.files_dir, settings.base_url)
