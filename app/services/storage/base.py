"""Base class for document storage backends"""

from abc import ABC, abstractmethod


class DocumentStore(ABC):
    """Persists a rendered document and returns a URL to fetch it"""

    name: str = "base"

    @abstractmethod
    async def save(self, filename: str, data: bytes) -> str:
        """Store ``data`` under ``filename`` and return its retrieval URL"""
        pass
