"""
API router.

Aggregates all endpoints.  Every route requires the bearer token when
``API_TOKEN`` is configured.
"""

from fastapi import APIRouter, Depends

from babysleep.api.dependencies import require_api_token
from babysleep.api.endpoints import app_settings, health, sleep, stats

api_router = APIRouter(dependencies=[Depends(require_api_token)])

# Include endpoint routers
api_router.include_router(health.router, tags=["Health"])
api_router.include_router(sleep.router, prefix="/sleep", tags=["Sleep sessions"])
api_router.include_router(stats.router, prefix="/sleep/stats", tags=["Stats"])
api_router.include_router(app_settings.router, prefix="/settings", tags=["Settings"])
