"""
Dependencies for dependency injection
"""

from fastapi import Depends, Request

from app.core.config import Settings
from app.services.jsa_service import JsaService
from app.services.storage import DocumentStore


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was created with"""
    return request.app.state.settings


def get_document_store(request: Request) -> DocumentStore:
    """Document store selected once at application start"""
    return request.app.state.document_store


def get_jsa_service(
    store: DocumentStore = Depends(get_document_store),
) -> JsaService:
    """Get JSA service instance for dependency injection"""
    return JsaService(store)
