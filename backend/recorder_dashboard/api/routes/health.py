"""
Health check endpoints.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from recorder_dashboard import __version__
from recorder_dashboard.config import settings
from recorder_dashboard.core.recorder import TestCaseRecorder, get_recorder

router = APIRouter()


@router.get("")
async def health_check():
    """
    Basic health check endpoint.
    """
    return {
        "status": "healthy",
        "version": __version__,
        "environment": settings.app_env,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/ready")
async def readiness_check(recorder: TestCaseRecorder = Depends(get_recorder)):
    """
    Readiness check - verifies the context document can be patched.
    """
    checks = {
        "api": True,
        "context_document": recorder.store.exists(),
    }

    all_ready = all(checks.values())

    return {
        "ready": all_ready,
        "checks": checks,
        "context_document_path": str(recorder.store.path),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
