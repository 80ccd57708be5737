"""Health check."""

from almanac.catalog import list_years
from fastapi import APIRouter
from fastapi.responses import JSONResponse

router = APIRouter()


@router.get("/health")
async def health_check():
    return {"status": "ok", "service": "stardate-api"}


@router.get("/health/ready")
async def readiness_check():
    try:
        years = list_years()
        return {"status": "ready", "years": len(years)}
    except Exception as exc:
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "error": str(exc)},
        )
