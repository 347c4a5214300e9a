# core/sa/models/recommendation.py
from sqlalchemy import Integer, String, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class Recommendation(Base, TimestampMixin):
    """Rating and message a user attaches to a shared book."""
    __tablename__ = 'recommendation'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    book_id: Mapped[str] = mapped_column(String(255), nullable=False)
    user_id: Mapped[int] = mapped_column(ForeignKey('user.id'), nullable=False)
    rating: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    message: Mapped[str] = mapped_column(Text, nullable=False, default="")

    user = relationship('User', back_populates='recommendations')

    __table_args__ = (
        UniqueConstraint('book_id', 'user_id', name='uix_recommendation_book_user'),
    )
