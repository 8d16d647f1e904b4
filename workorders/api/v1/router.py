"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from workorders.api.v1.dependencies.
"""

from fastapi import APIRouter

from workorders.api.v1.endpoints import auth, health, work_orders

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(work_orders.router, prefix="/orders", tags=["orders"])
