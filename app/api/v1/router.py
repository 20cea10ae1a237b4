"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import analytics, athletes, auth, dashboard, records, weather

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    auth.router, prefix="/auth", tags=["Authentication"]
)
api_router.include_router(
    athletes.router, prefix="/athletes", tags=["Athletes"]
)
api_router.include_router(records.router)
api_router.include_router(
    analytics.router, prefix="/analytics", tags=["Analytics"]
)
api_router.include_router(
    weather.router, prefix="/weather", tags=["Weather"]
)
api_router.include_router(
    dashboard.router, prefix="/dashboard", tags=["Dashboard"]
)
