"""Document storage backends"""

from .base import DocumentStore
from .factory import create_document_store
from .local import LocalDocumentStore
from .supabase_store import SupabaseDocumentStore

__all__ = [
    "DocumentStore",
    "LocalDocumentStore",
    "SupabaseDocumentStore",
    "create_document_store",
]
