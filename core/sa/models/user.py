# core/sa/models/user.py
from sqlalchemy import Integer, String, ForeignKey, DateTime
from sqlalchemy.orm import relationship, Mapped, mapped_column
from datetime import datetime
from .base import Base, TimestampMixin, utcnow

class User(Base, TimestampMixin):
    """A reader, as known to the identity provider."""
    __tablename__ = 'user'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    image: Mapped[str | None] = mapped_column(String(1000), nullable=True)

    # Relationships
    saved_books = relationship('SavedBook', back_populates='user', cascade='all, delete-orphan')
    recommendations = relationship('Recommendation', back_populates='user', cascade='all, delete-orphan')
    auth_sessions = relationship('AuthSession', back_populates='user', cascade='all, delete-orphan')

class AuthSession(Base):
    """Opaque bearer token issued for a signed-in user."""
    __tablename__ = 'auth_session'

    token: Mapped[str] = mapped_column(String(128), primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey('user.id'), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)
    expires_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    user = relationship('User', back_populates='auth_sessions')
