"""
Health check route
"""

from fastapi import APIRouter

from app.schemas.jsa import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Liveness probe, no API key required"""
    return HealthResponse()
