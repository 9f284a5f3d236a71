"""
Health check endpoint.
Liveness status for monitoring and orchestration probes.
"""
from fastapi import APIRouter
from commu_api.models import HealthResponse

router = APIRouter()

@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse.up()
