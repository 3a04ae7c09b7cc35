"""System API endpoints."""

from fastapi import APIRouter

from fitnest.config import settings
from fitnest.schemas.progress import PingResponse

router = APIRouter(prefix="/system", tags=["system"])


@router.get("/ping", response_model=PingResponse)
def system_ping():
    """Lightweight health check."""
    return PingResponse(status="ok", server_name=settings.server_name, version=settings.version)
