# core/services/stats.py
"""Reading statistics and analytics computed over a user's saved books.

Every function takes the full list of records (anything with ``shelf``,
``progress``, ``page_count``, ``authors``, ``title`` and ``saved_at``) and
returns plain dicts that the API schemas serialize.

Several analytics values are placeholders rather than measurements:
the genre distribution is a random draw, the reading streak is derived from
the finished count only, reading speed assumes one week per finished book,
and the favourite genre and most productive month are constants.
"""
import math
import random
from datetime import datetime, UTC
from typing import Iterable, List, Optional, Sequence

from core.utils.dates import as_utc

MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
GENRES = ["Fiction", "Non-Fiction", "Mystery", "Romance", "Sci-Fi", "Biography", "History"]

BOOKS_GOAL = 24
PAGES_GOAL = 8000
DAYS_PER_BOOK = 7
TOP_AUTHORS_LIMIT = 5
NO_FINISHED_BOOKS = "No books finished yet"


def round_half_up(value: float) -> int:
    """Round halves towards positive infinity; the built-in round() rounds halves to even."""
    return math.floor(value + 0.5)


def _now(now: Optional[datetime]) -> datetime:
    return now or datetime.now(UTC)


def _progress(book) -> int:
    return book.progress or 0


def _pages(book) -> int:
    return book.page_count or 0


def pages_read(book) -> int:
    """Pages read in one book: progress percent of its page count, rounded."""
    return round_half_up(_progress(book) / 100 * _pages(book))


def _finished(books: Iterable) -> list:
    return [book for book in books if book.shelf == "finished"]


def _saved_in(book, year: int, month: Optional[int] = None) -> bool:
    saved_at = book.saved_at
    if saved_at is None or saved_at.year != year:
        return False
    return month is None or saved_at.month == month


def reading_stats(books: Sequence, now: Optional[datetime] = None) -> dict:
    """Totals, shelf counts, pages and average progress for the stats page."""
    now = _now(now)
    total_books = len(books)

    return {
        "total_books": total_books,
        "books_read": len(_finished(books)),
        "books_reading": sum(1 for book in books if book.shelf == "currently-reading"),
        "books_want_to_read": sum(1 for book in books if book.shelf == "want-to-read"),
        "total_pages": sum(_pages(book) for book in books),
        "pages_read": sum(pages_read(book) for book in books),
        "average_progress": sum(_progress(book) for book in books) / total_books if total_books else 0,
        "books_this_month": sum(1 for book in books if _saved_in(book, now.year, now.month)),
    }


def monthly_progress(books: Sequence, now: Optional[datetime] = None) -> List[dict]:
    """One bucket per month of the current year, keyed on the save date."""
    now = _now(now)
    result = []
    for index, month in enumerate(MONTHS, start=1):
        month_books = [book for book in books if _saved_in(book, now.year, index)]
        average = (
            sum(_progress(book) for book in month_books) / len(month_books)
            if month_books else 0
        )
        result.append({
            "month": month,
            "books_read": len(_finished(month_books)),
            "pages_read": sum(pages_read(book) for book in month_books),
            "average_progress": round_half_up(average),
        })
    return result


def genre_distribution(books: Sequence, rng: Optional[random.Random] = None) -> List[dict]:
    """Random placeholder distribution over the fixed genre labels.

    Counts are drawn uniformly from 1..n/2+1 per genre and are not derived
    from the books themselves. Pass a seeded ``rng`` for repeatable output.
    """
    rng = rng or random.Random()
    counts = [math.floor(rng.random() * len(books) / 2) + 1 for _ in GENRES]
    total = sum(counts)
    return [
        {
            "genre": genre,
            "count": count,
            "percentage": round_half_up(count / total * 100),
        }
        for genre, count in zip(GENRES, counts)
    ]


def reading_streak(books: Sequence, now: Optional[datetime] = None) -> dict:
    """Streak stand-in computed from the number of finished books."""
    finished = sorted(
        _finished(books),
        key=lambda book: book.saved_at or datetime.min,
        reverse=True
    )
    count = len(finished)
    last_activity = finished[0].saved_at if finished and finished[0].saved_at else _now(now)
    return {
        "current": min(count, 7),
        "longest": min(count * 2, 30),
        "last_activity": as_utc(last_activity),
    }


def yearly_goals(books: Sequence, now: Optional[datetime] = None) -> dict:
    now = _now(now)
    year_books = [book for book in books if _saved_in(book, now.year)]
    return {
        "books_goal": BOOKS_GOAL,
        "pages_goal": PAGES_GOAL,
        "books_progress": len(_finished(year_books)),
        "pages_progress": sum(pages_read(book) for book in year_books),
    }


def reading_speed(books: Sequence) -> dict:
    """Speed estimate that assumes every finished book took one week."""
    finished = _finished(books)
    total_pages = sum(_pages(book) for book in finished)

    if finished:
        pages_per_day = round_half_up(total_pages / (len(finished) * DAYS_PER_BOOK))
    else:
        pages_per_day = 0

    if finished and pages_per_day:
        time_per_book = round_half_up(total_pages / len(finished) / pages_per_day) or DAYS_PER_BOOK
    else:
        time_per_book = DAYS_PER_BOOK

    return {
        "average_pages_per_day": pages_per_day,
        "average_time_per_book": time_per_book,
        "fastest_book": (finished[0].title if finished else None) or NO_FINISHED_BOOKS,
        "slowest_book": (finished[-1].title if finished else None) or NO_FINISHED_BOOKS,
    }


def top_authors(books: Sequence, limit: int = TOP_AUTHORS_LIMIT) -> List[dict]:
    """Most saved first-listed authors; ties keep first-seen order."""
    authors = {}
    for book in books:
        if not book.authors:
            continue
        author = book.authors[0]
        entry = authors.setdefault(author, {"author": author, "books_read": 0, "total_pages": 0})
        entry["books_read"] += 1
        entry["total_pages"] += _pages(book)

    # sorted() is stable, so equal counts stay in insertion order
    return sorted(authors.values(), key=lambda entry: entry["books_read"], reverse=True)[:limit]


def reading_habits(books: Sequence) -> dict:
    finished = _finished(books)
    total_books = len(books)
    return {
        "favorite_genre": "Fiction",
        "average_book_length": (
            round_half_up(sum(_pages(book) for book in finished) / len(finished)) if finished else 0
        ),
        "completion_rate": round_half_up(len(finished) / total_books * 100) if total_books else 0,
        "most_productive_month": "January",
    }


def reading_analytics(books: Sequence, now: Optional[datetime] = None, rng: Optional[random.Random] = None) -> dict:
    """Everything the analytics page shows.

    Args:
        books: The user's records in save order
        now: Reference time for "current month/year" (defaults to now, UTC)
        rng: Random source for the genre placeholder
    """
    now = _now(now)
    return {
        "monthly_progress": monthly_progress(books, now),
        "genre_distribution": genre_distribution(books, rng),
        "reading_streak": reading_streak(books, now),
        "yearly_goals": yearly_goals(books, now),
        "reading_speed": reading_speed(books),
        "top_authors": top_authors(books),
        "reading_habits": reading_habits(books),
    }
