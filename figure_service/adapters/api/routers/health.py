# figure_service/adapters/api/routers/health.py
from fastapi import APIRouter, status

from figure_service import __version__
from figure_service.shared.config import settings

router = APIRouter(prefix="/health", tags=["System"])


@router.get("/live", status_code=status.HTTP_200_OK)
async def liveness_probe():
    """
    Liveness Probe.
    Returns 200 OK if the service is operational. The service has no
    downstream dependencies, so there is no separate readiness check.
    """
    return {"status": "ok", "service": settings.APP_NAME, "version": __version__}
