"""
API routes for photo analysis
"""

from fastapi import APIRouter, Depends

from app.core.security import rate_limit
from app.schemas.jsa import PhotoAnalysisRequest, PhotoAnalysisResponse
from app.services.vision_service import analyze_photos

router = APIRouter(
    prefix="/vision", tags=["vision"], dependencies=[Depends(rate_limit)]
)


@router.post("/analyze", response_model=PhotoAnalysisResponse)
async def analyze(payload: PhotoAnalysisRequest):
    """
    Analyze job-site photos for hazards

    - **fileUrls**: at least one photo URL
    - **jobContext**: optional task, location, environment and equipment

    Currently returns a generic hazard record without fetching the photos.
    """
    file_urls = [str(url) for url in payload.file_urls]
    return analyze_photos(file_urls, payload.job_context)
