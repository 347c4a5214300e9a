# core/models/book.py

from enum import Enum

class Shelf(str, Enum):
    WANT_TO_READ = "want-to-read"
    CURRENTLY_READING = "currently-reading"
    FINISHED = "finished"
