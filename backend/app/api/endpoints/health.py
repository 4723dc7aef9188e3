from __future__ import annotations

from fastapi import APIRouter, Request

from app.core.config import settings

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(request: Request):
    repository = getattr(request.app.state, "employee_repository", None)
    services = {"employee_repository": "ok" if repository is not None else "not_initialized"}

    all_ok = all(v == "ok" for v in services.values())

    return {
        "status": "healthy" if all_ok else "degraded",
        "version": settings.APP_VERSION,
        "services": services,
        "employees": len(repository) if repository is not None else 0,
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}
