# api/schemas/share.py

from typing import Optional, List
from pydantic import Field

from .base import CamelModel, UTCDateTime

class RecommendationCreate(CamelModel):
    book_id: str
    rating: Optional[int] = Field(None, ge=0, le=5)
    message: Optional[str] = None

class SharedBy(CamelModel):
    name: str
    avatar: Optional[str] = None

class SharedRecommendation(CamelModel):
    rating: int
    message: str
    created_at: UTCDateTime

class SharedBook(CamelModel):
    id: str
    title: Optional[str] = None
    authors: List[str] = []
    description: Optional[str] = None
    thumbnail: Optional[str] = None
    page_count: Optional[int] = None
    published_date: Optional[str] = None
    publisher: Optional[str] = None
    shelf: str
    progress: int
    shared_by: SharedBy
    recommendation: Optional[SharedRecommendation] = None
