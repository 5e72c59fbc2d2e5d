"""
JSA rendering service: filename, PDF rendering and storage
"""

import logging
import re
import time
from typing import Callable

from starlette.concurrency import run_in_threadpool

from app.core.exceptions import DocumentRenderError
from app.schemas.jsa import RenderJsaRequest
from app.services.pdf_renderer import render_jsa_pdf
from app.services.storage import DocumentStore

logger = logging.getLogger(__name__)

_NON_WORD = re.compile(r"\W+", re.ASCII)


def jsa_filename(company: str, timestamp_ms: int) -> str:
    """``JSA_<company>_<epoch ms>.pdf`` with non-word runs replaced by ``_``"""
    return f"JSA_{_NON_WORD.sub('_', company)}_{timestamp_ms}.pdf"


class JsaService:
    """Renders JSA requests and stores the resulting PDF"""

    def __init__(
        self,
        store: DocumentStore,
        clock: Callable[[], float] = time.time,
    ):
        self.store = store
        self.clock = clock

    async def render(self, request: RenderJsaRequest) -> str:
        """Render ``request`` and return the URL of the stored document"""
        filename = jsa_filename(request.job.company, int(self.clock() * 1000))

        try:
            pdf_bytes = await run_in_threadpool(render_jsa_pdf, request)
        except Exception as exc:
            raise DocumentRenderError(f"Rendering {filename} failed") from exc

        file_url = await self.store.save(filename, pdf_bytes)
        logger.info(
            "Rendered %s with %d hazard(s) via %s storage",
            filename,
            len(request.hazards),
            self.store.name,
        )
        return file_url
