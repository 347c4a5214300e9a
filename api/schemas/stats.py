# api/schemas/stats.py

from typing import List

from .base import CamelModel, UTCDateTime

class ReadingStats(CamelModel):
    total_books: int
    books_read: int
    books_reading: int
    books_want_to_read: int
    total_pages: int
    pages_read: int
    average_progress: float
    books_this_month: int

class MonthlyProgress(CamelModel):
    month: str
    books_read: int
    pages_read: int
    average_progress: int

class GenreShare(CamelModel):
    genre: str
    count: int
    percentage: int

class ReadingStreak(CamelModel):
    current: int
    longest: int
    last_activity: UTCDateTime

class YearlyGoals(CamelModel):
    books_goal: int
    pages_goal: int
    books_progress: int
    pages_progress: int

class ReadingSpeed(CamelModel):
    average_pages_per_day: int
    average_time_per_book: int
    fastest_book: str
    slowest_book: str

class TopAuthor(CamelModel):
    author: str
    books_read: int
    total_pages: int

class ReadingHabits(CamelModel):
    favorite_genre: str
    average_book_length: int
    completion_rate: int
    most_productive_month: str

class ReadingAnalytics(CamelModel):
    monthly_progress: List[MonthlyProgress]
    genre_distribution: List[GenreShare]
    reading_streak: ReadingStreak
    yearly_goals: YearlyGoals
    reading_speed: ReadingSpeed
    top_authors: List[TopAuthor]
    reading_habits: ReadingHabits
