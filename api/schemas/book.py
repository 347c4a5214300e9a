# api/schemas/book.py

from typing import Optional, List

from core.models.book import Shelf
from .base import CamelModel, UTCDateTime

class SavedBookCreate(CamelModel):
    book_id: str
    title: Optional[str] = None
    authors: Optional[List[str]] = None
    description: Optional[str] = None
    thumbnail: Optional[str] = None
    page_count: Optional[int] = None
    published_date: Optional[str] = None
    publisher: Optional[str] = None
    shelf: Shelf = Shelf.WANT_TO_READ
    progress: Optional[int] = None

class SavedBookUpdate(CamelModel):
    progress: Optional[int] = None
    notes: Optional[str] = None

class SavedBook(CamelModel):
    id: str
    book_id: str
    title: Optional[str] = None
    authors: List[str] = []
    description: Optional[str] = None
    thumbnail: Optional[str] = None
    page_count: Optional[int] = None
    published_date: Optional[str] = None
    publisher: Optional[str] = None
    shelf: str
    progress: int
    notes: str = ""
    saved_at: UTCDateTime
    updated_at: Optional[UTCDateTime] = None
    user_email: Optional[str] = None

class BookContent(CamelModel):
    title: str
    content: List[str]
    total_pages: int
    current_page: int
    source: str
    download_url: str
