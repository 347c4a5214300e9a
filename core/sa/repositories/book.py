import logging
from typing import List, Optional
from datetime import datetime, UTC
from sqlalchemy import desc, asc
from sqlalchemy.orm import Session
from core.sa.models import SavedBook
from core.utils.url import secure_url

logger = logging.getLogger(__name__)


class DuplicateBookError(ValueError):
    """Raised when a user saves a catalog book that is already on their shelves."""


class BookRepository:
    """Repository for a user's saved book records."""

    def __init__(self, session: Session):
        self.session = session

    def list_books(self, user_id: int, newest_first: bool = True) -> List[SavedBook]:
        """Get every record a user has saved.
        
        Args:
            user_id: The owner
            newest_first: Order by saved_at descending (default) or in save order
            
        Returns:
            List of SavedBook objects
        """
        order = desc(SavedBook.saved_at) if newest_first else asc(SavedBook.saved_at)
        return (
            self.session.query(SavedBook)
            .filter(SavedBook.user_id == user_id)
            .order_by(order)
            .all()
        )

    def get_by_id(self, record_id: str) -> Optional[SavedBook]:
        """Get a record by id regardless of owner. Only the public share view uses this."""
        return self.session.query(SavedBook).filter(SavedBook.id == record_id).one_or_none()

    def get_book(self, user_id: int, record_id: str) -> Optional[SavedBook]:
        return (
            self.session.query(SavedBook)
            .filter(
                SavedBook.id == record_id,
                SavedBook.user_id == user_id
            )
            .one_or_none()
        )

    def get_by_external_id(self, user_id: int, book_id: str) -> Optional[SavedBook]:
        return (
            self.session.query(SavedBook)
            .filter(
                SavedBook.user_id == user_id,
                SavedBook.book_id == book_id
            )
            .first()
        )

    def create_book(
        self,
        user_id: int,
        book_id: str,
        shelf: str = "want-to-read",
        title: Optional[str] = None,
        authors: Optional[List[str]] = None,
        description: Optional[str] = None,
        thumbnail: Optional[str] = None,
        page_count: Optional[int] = None,
        published_date: Optional[str] = None,
        publisher: Optional[str] = None,
        progress: Optional[int] = None
    ) -> SavedBook:
        """Save a catalog book to one of the user's shelves.
        
        Args:
            user_id: The owner
            book_id: External catalog id of the book
            shelf: want-to-read, currently-reading or finished
            title, authors, description, thumbnail, page_count, published_date, publisher:
                Catalog metadata, stored as given (thumbnail is moved to https)
            progress: Initial progress, 0 when not given
            
        Returns:
            The created SavedBook
            
        Raises:
            DuplicateBookError: If the user already saved this catalog book
        """
        if self.get_by_external_id(user_id, book_id):
            raise DuplicateBookError(f"Book '{book_id}' already in library")

        book = SavedBook(
            user_id=user_id,
            book_id=book_id,
            title=title,
            authors=list(authors or []),
            description=description,
            thumbnail=secure_url(thumbnail),
            page_count=page_count,
            published_date=published_date,
            publisher=publisher,
            shelf=shelf,
            progress=progress or 0,
            notes="",
            saved_at=datetime.now(UTC)
        )
        self.session.add(book)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        logger.info(f"User {user_id} saved book {book_id} to {shelf} as {book.id}")
        return book

    def update_progress(
        self,
        user_id: int,
        record_id: str,
        progress: Optional[int] = None,
        notes: Optional[str] = None
    ) -> Optional[SavedBook]:
        """Overwrite progress and notes on a record.
        
        Missing values are stored as 0 and "" rather than left untouched.
        Progress is stored as given, without clamping to 0..100.
        
        Returns:
            The updated SavedBook, or None if the user has no such record
        """
        book = self.get_book(user_id, record_id)
        if not book:
            return None

        book.progress = progress if progress is not None else 0
        book.notes = notes if notes is not None else ""
        book.updated_at = datetime.now(UTC)
        try:
            self.session.commit()
            return book
        except Exception:
            self.session.rollback()
            raise

    def delete_book(self, user_id: int, record_id: str) -> bool:
        """Delete a record.
        
        Returns:
            True if the record was deleted, False if not found
        """
        result = (
            self.session.query(SavedBook)
            .filter(
                SavedBook.id == record_id,
                SavedBook.user_id == user_id
            )
            .delete()
        )
        self.session.commit()
        if result:
            logger.info(f"User {user_id} deleted book record {record_id}")
        return result > 0
