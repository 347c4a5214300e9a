# api/routes/share.py

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from core.sa.database import get_db
from core.sa.models import User
from core.sa.repositories.recommendation import RecommendationRepository
from core.services.sharing import get_shared_book
from api.dependencies import get_current_user
from api.errors import internal_error
from api.schemas.base import SuccessResponse
from api.schemas.share import RecommendationCreate, SharedBook

router = APIRouter(tags=["share"])

@router.post("/share/recommendation", response_model=SuccessResponse)
def save_recommendation(
    payload: RecommendationCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Create or replace the current user's recommendation for a book.
    """
    with internal_error("Could not save recommendation"):
        RecommendationRepository(db).upsert(
            book_id=payload.book_id,
            user_id=user.id,
            rating=payload.rating,
            message=payload.message
        )
    return SuccessResponse()

@router.get("/shared/book/{book_id}", response_model=SharedBook)
def get_public_book(book_id: str, db: Session = Depends(get_db)):
    """
    Public view of a saved book. Needs no authentication.
    
    Raises:
        HTTPException: 404 if no record has this id
    """
    with internal_error("Could not fetch shared book"):
        shared = get_shared_book(db, book_id)
    if not shared:
        raise HTTPException(status_code=404, detail="Book not found")
    return SharedBook(**shared)
