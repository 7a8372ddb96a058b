"""API router aggregation.

Includes all endpoint modules with consistent prefix and tags. Mounted
under settings.api_prefix by main.create_app().
"""

from fastapi import APIRouter

from guardian_gate.api.endpoints import auth, health

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
