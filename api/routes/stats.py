# api/routes/stats.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.sa.database import get_db
from core.sa.models import User
from core.sa.repositories.book import BookRepository
from core.services.stats import reading_stats, reading_analytics
from api.dependencies import get_current_user
from api.errors import internal_error
from api.schemas.stats import ReadingStats, ReadingAnalytics

router = APIRouter(tags=["stats"])

@router.get("/stats", response_model=ReadingStats)
def get_stats(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Get shelf counts, page totals and average progress for the current user.
    """
    with internal_error("Could not fetch statistics"):
        books = BookRepository(db).list_books(user.id)
        return ReadingStats(**reading_stats(books))

@router.get("/analytics", response_model=ReadingAnalytics)
def get_analytics(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Get the analytics dashboard for the current user.
    
    The genre distribution is randomly generated on every call, and the
    streak, speed, favourite genre and most productive month are estimates
    rather than measurements.
    """
    with internal_error("Could not fetch analytics"):
        books = BookRepository(db).list_books(user.id, newest_first=False)
        return ReadingAnalytics(**reading_analytics(books))
