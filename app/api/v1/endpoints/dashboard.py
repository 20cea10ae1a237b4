"""
Dashboard endpoints.
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.dashboard import DashboardCounts
from app.services.analytics_service import AnalyticsService

router = APIRouter()


@router.get("", summary="Record counts across the database.", response_model=DashboardCounts)
def get_dashboard(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return AnalyticsService(db).get_counts()
