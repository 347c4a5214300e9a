# core/sa/models/__init__.py
from .base import Base, TimestampMixin, utcnow
from .user import User, AuthSession
from .book import SavedBook
from .recommendation import Recommendation

__all__ = [
    'Base',
    'TimestampMixin',
    'utcnow',
    'User',
    'AuthSession',
    'SavedBook',
    'Recommendation',
]
