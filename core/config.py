# core/config.py
import os
import logging

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///booktracker.db")

GOOGLE_BOOKS_API_URL = os.getenv("GOOGLE_BOOKS_API_URL", "https://www.googleapis.com/books/v1/volumes")
GOOGLE_BOOKS_API_KEY = os.getenv("GOOGLE_BOOKS_API_KEY", "")
CATALOG_TIMEOUT = float(os.getenv("CATALOG_TIMEOUT", "10"))
CATALOG_MAX_RESULTS = 20

# Frontend origins allowed to call the API
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
    if origin.strip()
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Configure root logging once for the API process or the CLI."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
