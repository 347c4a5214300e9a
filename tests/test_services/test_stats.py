# tests/test_services/test_stats.py

import random
import pytest
from datetime import datetime, UTC
from types import SimpleNamespace
from unittest.mock import Mock
from core.services import stats

NOW = datetime(2026, 10, 19, 12, 0, 0)

def record(shelf="want-to-read", progress=0, page_count=200, authors=None, title="A Book", saved_at=NOW):
    return SimpleNamespace(
        shelf=shelf,
        progress=progress,
        page_count=page_count,
        authors=["Test Author"] if authors is None else authors,
        title=title,
        saved_at=saved_at
    )

def test_reading_stats_example():
    """Test the worked example: three books at 50%, 0% and 100%."""
    books = [
        record(page_count=100, progress=50),
        record(page_count=200, progress=0),
        record(page_count=300, progress=100, shelf="finished"),
    ]
    result = stats.reading_stats(books, now=NOW)
    assert result["pages_read"] == 350
    assert result["total_pages"] == 600
    assert result["average_progress"] == 50
    assert result["total_books"] == 3

def test_reading_stats_shelf_counts():
    books = [
        record(shelf="finished"),
        record(shelf="finished"),
        record(shelf="currently-reading"),
        record(shelf="want-to-read"),
    ]
    result = stats.reading_stats(books, now=NOW)
    assert result["books_read"] == 2
    assert result["books_reading"] == 1
    assert result["books_want_to_read"] == 1

def test_reading_stats_empty():
    result = stats.reading_stats([], now=NOW)
    assert result == {
        "total_books": 0,
        "books_read": 0,
        "books_reading": 0,
        "books_want_to_read": 0,
        "total_pages": 0,
        "pages_read": 0,
        "average_progress": 0,
        "books_this_month": 0,
    }

def test_reading_stats_average_is_not_rounded():
    books = [record(progress=10), record(progress=20), record(progress=0)]
    assert stats.reading_stats(books, now=NOW)["average_progress"] == 10
    books = [record(progress=1), record(progress=2)]
    assert stats.reading_stats(books, now=NOW)["average_progress"] == 1.5

def test_reading_stats_missing_values_count_as_zero():
    books = [record(page_count=None, progress=None)]
    result = stats.reading_stats(books, now=NOW)
    assert result["total_pages"] == 0
    assert result["pages_read"] == 0
    assert result["average_progress"] == 0

def test_books_this_month():
    books = [
        record(saved_at=datetime(2026, 10, 1)),
        record(saved_at=datetime(2026, 10, 31, 23, 59)),
        record(saved_at=datetime(2026, 9, 30)),
        record(saved_at=datetime(2025, 10, 15)),
    ]
    assert stats.reading_stats(books, now=NOW)["books_this_month"] == 2

def test_pages_read_rounds_half_up():
    """Test that halves round up rather than to even."""
    assert stats.pages_read(record(page_count=5, progress=50)) == 3
    assert stats.pages_read(record(page_count=1, progress=50)) == 1
    assert stats.pages_read(record(page_count=333, progress=33)) == 110

def test_pages_read_not_above_total_pages():
    rng = random.Random(42)
    books = [
        record(page_count=rng.randint(0, 1500), progress=rng.randint(0, 100))
        for _ in range(200)
    ]
    result = stats.reading_stats(books, now=NOW)
    assert result["pages_read"] <= result["total_pages"]

def test_unclamped_progress_flows_into_pages_read():
    books = [record(page_count=100, progress=150)]
    result = stats.reading_stats(books, now=NOW)
    assert result["pages_read"] == 150
    assert result["average_progress"] == 150

def test_monthly_progress_buckets():
    books = [
        record(shelf="finished", progress=100, page_count=300, saved_at=datetime(2026, 1, 5)),
        record(shelf="currently-reading", progress=50, page_count=200, saved_at=datetime(2026, 1, 20)),
        record(shelf="finished", progress=100, page_count=100, saved_at=datetime(2026, 3, 2)),
        record(shelf="finished", progress=100, page_count=100, saved_at=datetime(2025, 1, 2)),
    ]
    months = stats.monthly_progress(books, now=NOW)
    assert [m["month"] for m in months] == stats.MONTHS
    assert months[0] == {"month": "Jan", "books_read": 1, "pages_read": 400, "average_progress": 75}
    assert months[2] == {"month": "Mar", "books_read": 1, "pages_read": 100, "average_progress": 100}
    assert months[1] == {"month": "Feb", "books_read": 0, "pages_read": 0, "average_progress": 0}

def test_monthly_progress_rounds_average():
    books = [
        record(progress=33, saved_at=datetime(2026, 5, 1)),
        record(progress=34, saved_at=datetime(2026, 5, 2)),
    ]
    assert stats.monthly_progress(books, now=NOW)[4]["average_progress"] == 34

def test_genre_distribution_labels_and_counts():
    books = [record() for _ in range(10)]
    rng = Mock()
    rng.random.return_value = 0.5
    result = stats.genre_distribution(books, rng=rng)
    assert [g["genre"] for g in result] == stats.GENRES
    # floor(0.5 * 10 / 2) + 1
    assert all(g["count"] == 3 for g in result)
    assert all(g["percentage"] == 14 for g in result)

def test_genre_distribution_with_no_books():
    result = stats.genre_distribution([], rng=random.Random(1))
    assert all(g["count"] == 1 for g in result)
    assert sum(g["percentage"] for g in result) == 98

@pytest.mark.parametrize("seed", range(25))
def test_genre_percentages_close_to_100(seed):
    """Per-label rounding keeps the total within half a point per genre."""
    books = [record() for _ in range(seed * 3)]
    result = stats.genre_distribution(books, rng=random.Random(seed))
    assert abs(sum(g["percentage"] for g in result) - 100) <= 3
    assert all(1 <= g["count"] <= len(books) // 2 + 1 for g in result)

def test_reading_streak():
    books = [
        record(shelf="finished", saved_at=datetime(2026, 2, 1)),
        record(shelf="finished", saved_at=datetime(2026, 6, 1)),
        record(shelf="want-to-read", saved_at=datetime(2026, 9, 1)),
    ]
    result = stats.reading_streak(books, now=NOW)
    assert result["current"] == 2
    assert result["longest"] == 4
    assert result["last_activity"] == datetime(2026, 6, 1, tzinfo=UTC)

def test_reading_streak_caps():
    books = [record(shelf="finished") for _ in range(20)]
    result = stats.reading_streak(books, now=NOW)
    assert result["current"] == 7
    assert result["longest"] == 30

def test_reading_streak_without_finished_books():
    result = stats.reading_streak([record()], now=NOW)
    assert result == {"current": 0, "longest": 0, "last_activity": NOW.replace(tzinfo=UTC)}

def test_yearly_goals():
    books = [
        record(shelf="finished", progress=100, page_count=300, saved_at=datetime(2026, 3, 1)),
        record(shelf="currently-reading", progress=50, page_count=100, saved_at=datetime(2026, 4, 1)),
        record(shelf="finished", progress=100, page_count=500, saved_at=datetime(2025, 12, 31)),
    ]
    result = stats.yearly_goals(books, now=NOW)
    assert result == {"books_goal": 24, "pages_goal": 8000, "books_progress": 1, "pages_progress": 350}

def test_reading_speed_assumes_a_week_per_book():
    books = [
        record(shelf="finished", page_count=300, title="First"),
        record(shelf="currently-reading", page_count=1000),
        record(shelf="finished", page_count=400, title="Last"),
    ]
    result = stats.reading_speed(books)
    assert result["average_pages_per_day"] == 50
    assert result["average_time_per_book"] == 7
    assert result["fastest_book"] == "First"
    assert result["slowest_book"] == "Last"

def test_reading_speed_without_finished_books():
    result = stats.reading_speed([record()])
    assert result == {
        "average_pages_per_day": 0,
        "average_time_per_book": 7,
        "fastest_book": "No books finished yet",
        "slowest_book": "No books finished yet",
    }

def test_reading_speed_tiny_books_fall_back_to_a_week():
    result = stats.reading_speed([record(shelf="finished", page_count=3)])
    assert result["average_pages_per_day"] == 0
    assert result["average_time_per_book"] == 7

def test_top_authors_sorted_and_limited():
    books = []
    for author, count in [("A", 1), ("B", 3), ("C", 2), ("D", 1), ("E", 4), ("F", 1), ("G", 2)]:
        books.extend(record(authors=[author, "Co-author"], page_count=100) for _ in range(count))
    result = stats.top_authors(books)
    assert len(result) == 5
    assert [a["author"] for a in result] == ["E", "B", "C", "G", "A"]
    counts = [a["books_read"] for a in result]
    assert counts == sorted(counts, reverse=True)
    assert result[0]["total_pages"] == 400

def test_top_authors_ties_keep_first_seen_order():
    books = [
        record(authors=["Zed"]),
        record(authors=["Amy"]),
        record(authors=["Zed"]),
        record(authors=["Amy"]),
    ]
    assert [a["author"] for a in stats.top_authors(books)] == ["Zed", "Amy"]

def test_top_authors_skips_books_without_authors():
    books = [record(authors=[]), record(authors=["Solo"], page_count=None)]
    assert stats.top_authors(books) == [{"author": "Solo", "books_read": 1, "total_pages": 0}]

def test_reading_habits():
    books = [
        record(shelf="finished", page_count=300),
        record(shelf="finished", page_count=101),
        record(shelf="want-to-read", page_count=1000),
    ]
    result = stats.reading_habits(books)
    assert result == {
        "favorite_genre": "Fiction",
        "average_book_length": 201,
        "completion_rate": 67,
        "most_productive_month": "January",
    }

def test_reading_habits_empty():
    result = stats.reading_habits([])
    assert result["completion_rate"] == 0
    assert result["average_book_length"] == 0

def test_reading_analytics_sections():
    books = [record(shelf="finished", progress=100, saved_at=datetime(2026, 10, 1))]
    result = stats.reading_analytics(books, now=NOW, rng=random.Random(3))
    assert set(result) == {
        "monthly_progress", "genre_distribution", "reading_streak",
        "yearly_goals", "reading_speed", "top_authors", "reading_habits",
    }
    assert result["monthly_progress"][9]["books_read"] == 1
    assert result["top_authors"][0]["author"] == "Test Author"
