# core/sa/models/book.py
import uuid
from datetime import datetime
from sqlalchemy import Integer, String, Text, ForeignKey, DateTime, JSON, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, utcnow

def _new_record_id() -> str:
    return uuid.uuid4().hex

class SavedBook(Base):
    """A catalog book saved to one of a user's shelves."""
    __tablename__ = 'saved_book'

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=_new_record_id)
    user_id: Mapped[int] = mapped_column(ForeignKey('user.id'), nullable=False)
    book_id: Mapped[str] = mapped_column(String(255), nullable=False)

    # Catalog metadata captured at save time
    title: Mapped[str | None] = mapped_column(String(500), nullable=True)
    authors: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    thumbnail: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    page_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    published_date: Mapped[str | None] = mapped_column(String(50), nullable=True)
    publisher: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Reading state
    shelf: Mapped[str] = mapped_column(String(50), nullable=False, default="want-to-read")
    progress: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")
    saved_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)
    updated_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    # Relationships
    user = relationship('User', back_populates='saved_books')

    __table_args__ = (
        # Lookup index only; uniqueness per owner is checked before insert
        Index('idx_saved_book_user_book', 'user_id', 'book_id'),
        Index('idx_saved_book_user_saved_at', 'user_id', 'saved_at'),
    )

    @property
    def user_email(self) -> str | None:
        return self.user.email if self.user else None

    def __repr__(self) -> str:
        return f"<SavedBook {self.id} {self.book_id!r} shelf={self.shelf}>"
