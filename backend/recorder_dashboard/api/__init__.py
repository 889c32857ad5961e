"""
API routes package.
"""

from fastapi import APIRouter

from recorder_dashboard.api.routes import context, health, testcases

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["Health"])
api_router.include_router(testcases.router, prefix="/testcases", tags=["Test Cases"])
api_router.include_router(context.router, prefix="/context", tags=["Context"])
