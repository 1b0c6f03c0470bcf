"""Health endpoint."""

from fastapi import APIRouter, Response

router = APIRouter()


@router.api_route("/health", methods=["GET", "HEAD"])
async def health_check():
    """Liveness/readiness check.

    Always 200 with an empty body, for Docker and orchestrator probes.
    """
    return Response(status_code=200)
