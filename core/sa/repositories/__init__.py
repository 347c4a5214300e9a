# core/sa/repositories/__init__.py
from .book import BookRepository, DuplicateBookError
from .user import UserRepository
from .recommendation import RecommendationRepository

__all__ = ['BookRepository', 'DuplicateBookError', 'UserRepository', 'RecommendationRepository']
