# api/routes/books.py

from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from core.sa.database import get_db
from core.sa.models import User
from core.sa.repositories.book import BookRepository, DuplicateBookError
from core.services.content import find_book_content
from api.dependencies import get_current_user
from api.errors import internal_error
from api.schemas.base import SuccessResponse
from api.schemas.book import SavedBook, SavedBookCreate, SavedBookUpdate, BookContent

router = APIRouter(prefix="/books", tags=["books"])

BOOK_NOT_FOUND = "Book not found"

@router.get("", response_model=List[SavedBook])
def get_books(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Get every book the current user has saved, most recently saved first.
    """
    with internal_error("Could not fetch books"):
        books = BookRepository(db).list_books(user.id)
        return [SavedBook.model_validate(book) for book in books]

@router.post("", response_model=SavedBook, status_code=status.HTTP_201_CREATED)
def create_book(
    payload: SavedBookCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Save a catalog book to one of the current user's shelves.
    
    Args:
        payload: Catalog metadata, the shelf and optional initial progress
        user: The signed-in user
        db: Database session
    
    Returns:
        The created record
        
    Raises:
        HTTPException: 409 if the user already saved this catalog book
    """
    repo = BookRepository(db)
    with internal_error("Could not save book"):
        try:
            book = repo.create_book(
                user_id=user.id,
                book_id=payload.book_id,
                shelf=payload.shelf.value,
                title=payload.title,
                authors=payload.authors,
                description=payload.description,
                thumbnail=payload.thumbnail,
                page_count=payload.page_count,
                published_date=payload.published_date,
                publisher=payload.publisher,
                progress=payload.progress
            )
        except DuplicateBookError:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Book already in library")
        return SavedBook.model_validate(book)

@router.get("/{book_id}", response_model=SavedBook)
def get_book(
    book_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    with internal_error("Could not fetch book"):
        book = BookRepository(db).get_book(user.id, book_id)
        if not book:
            raise HTTPException(status_code=404, detail=BOOK_NOT_FOUND)
        return SavedBook.model_validate(book)

@router.patch("/{book_id}", response_model=SuccessResponse)
def update_book(
    book_id: str,
    payload: SavedBookUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Update progress and notes on a saved book.
    
    Both fields are written on every call: an omitted progress becomes 0 and
    omitted notes become empty. Progress is stored as sent, without clamping.
    """
    with internal_error("Could not update book"):
        book = BookRepository(db).update_progress(
            user_id=user.id,
            record_id=book_id,
            progress=payload.progress,
            notes=payload.notes
        )
        if not book:
            raise HTTPException(status_code=404, detail=BOOK_NOT_FOUND)
    return SuccessResponse()

@router.delete("/{book_id}", response_model=SuccessResponse)
def delete_book(
    book_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    with internal_error("Could not delete book"):
        if not BookRepository(db).delete_book(user.id, book_id):
            raise HTTPException(status_code=404, detail=BOOK_NOT_FOUND)
    return SuccessResponse()

@router.get("/{book_id}/content", response_model=BookContent)
def get_book_content(
    book_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Get free reading content for a saved public-domain classic.
    
    Raises:
        HTTPException: 404 if the record does not exist or no free content is available
    """
    with internal_error("Could not fetch book content"):
        book = BookRepository(db).get_book(user.id, book_id)
        if not book:
            raise HTTPException(status_code=404, detail=BOOK_NOT_FOUND)
        content = find_book_content(book)

    if not content:
        raise HTTPException(status_code=404, detail="Book content not available for free reading")
    return BookContent(**content)
