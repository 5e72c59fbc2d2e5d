"""
API routes for JSA document rendering
"""

from fastapi import APIRouter, Depends

from app.core.deps import get_jsa_service
from app.core.security import rate_limit
from app.schemas.jsa import RenderJsaRequest, RenderJsaResponse
from app.services.jsa_service import JsaService

router = APIRouter(prefix="/jsa", tags=["jsa"], dependencies=[Depends(rate_limit)])


@router.post("/render", response_model=RenderJsaResponse)
async def render_jsa(
    payload: RenderJsaRequest,
    service: JsaService = Depends(get_jsa_service),
):
    """
    Render a Job Safety Analysis PDF

    - **job**: company, task, date, location, optional supervisor and crew
    - **hazards**: at least one hazard with controls and required PPE
    - **verificationChecklist**: optional field checks
    - **notes**: optional free text, printed on its own page

    Returns the URL of the stored PDF
    """
    file_url = await service.render(payload)
    return RenderJsaResponse(file_url=file_url)
