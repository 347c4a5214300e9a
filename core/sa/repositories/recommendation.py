import logging
from typing import Optional
from datetime import datetime, UTC
from sqlalchemy.orm import Session
from core.sa.models import Recommendation

logger = logging.getLogger(__name__)

class RecommendationRepository:
    def __init__(self, session: Session):
        self.session = session

    def get(self, book_id: str, user_id: int) -> Optional[Recommendation]:
        return (
            self.session.query(Recommendation)
            .filter(
                Recommendation.book_id == book_id,
                Recommendation.user_id == user_id
            )
            .one_or_none()
        )

    def upsert(self, book_id: str, user_id: int, rating: Optional[int] = None, message: Optional[str] = None) -> Recommendation:
        """Create or overwrite the user's recommendation for a book.
        
        Every call resets rating, message and both timestamps.
        
        Args:
            book_id: Id of the shared book record
            user_id: The recommending user
            rating: 0-5, 0 when not given
            message: Free text, empty when not given
            
        Returns:
            The stored Recommendation
        """
        now = datetime.now(UTC)
        recommendation = self.get(book_id, user_id)
        if not recommendation:
            recommendation = Recommendation(book_id=book_id, user_id=user_id)
            self.session.add(recommendation)

        recommendation.rating = rating or 0
        recommendation.message = message or ""
        recommendation.created_at = now
        recommendation.updated_at = now
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        logger.info(f"User {user_id} recommended book {book_id} with rating {recommendation.rating}")
        return recommendation
