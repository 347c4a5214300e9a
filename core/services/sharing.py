# core/services/sharing.py
from typing import Optional
from sqlalchemy.orm import Session

from core.sa.repositories.book import BookRepository
from core.sa.repositories.recommendation import RecommendationRepository

ANONYMOUS_READER = "Anonymous Reader"


def get_shared_book(session: Session, record_id: str) -> Optional[dict]:
    """Build the public view of a saved book.
    
    Reads across owners and needs no authentication; only the fields a
    visitor may see are copied out.
    
    Args:
        session: Database session
        record_id: Id of the saved book record
        
    Returns:
        Dict for the shared-book page, or None if no such record exists
    """
    book = BookRepository(session).get_by_id(record_id)
    if not book:
        return None

    owner = book.user
    recommendation = RecommendationRepository(session).get(book.id, book.user_id)

    return {
        "id": book.id,
        "title": book.title,
        "authors": book.authors or [],
        "description": book.description,
        "thumbnail": book.thumbnail,
        "page_count": book.page_count,
        "published_date": book.published_date,
        "publisher": book.publisher,
        "shelf": book.shelf,
        "progress": book.progress,
        "shared_by": {
            "name": (owner.name if owner else None) or ANONYMOUS_READER,
            "avatar": owner.image if owner else None,
        },
        "recommendation": {
            "rating": recommendation.rating,
            "message": recommendation.message,
            "created_at": recommendation.created_at,
        } if recommendation else None,
    }
