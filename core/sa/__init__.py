# core/sa/__init__.py
from .database import Database
from .models import (
    Base, User, AuthSession, SavedBook, Recommendation
)

__all__ = [
    'Database',
    'Base',
    'User',
    'AuthSession',
    'SavedBook',
    'Recommendation',
]
