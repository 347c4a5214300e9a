# core/services/content.py
"""Free reading content for public-domain classics.

Only a short sample is served; the download link points at a Project
Gutenberg search for the title.
"""
from typing import List, Optional
from urllib.parse import quote

GUTENBERG_SEARCH_URL = "https://www.gutenberg.org/ebooks/search/?query="

CLASSIC_AUTHORS = [
    "jane austen", "charles dickens", "arthur conan doyle", "mark twain",
    "oscar wilde", "h.g. wells", "jules verne", "lewis carroll",
    "charlotte bronte", "emily bronte", "george eliot", "thomas hardy",
    "edgar allan poe", "nathaniel hawthorne", "herman melville",
    "washington irving", "henry james", "edith wharton", "jack london",
    "robert louis stevenson", "bram stoker", "mary shelley",
    "alexandre dumas", "victor hugo", "gustave flaubert", "leo tolstoy",
    "fyodor dostoevsky", "anton chekhov", "william shakespeare",
    "geoffrey chaucer", "daniel defoe", "jonathan swift",
    "miguel de cervantes",
]

CLASSIC_TITLES = [
    "pride and prejudice", "sense and sensibility", "emma", "mansfield park",
    "great expectations", "oliver twist", "david copperfield",
    "a tale of two cities", "sherlock holmes", "hound of the baskervilles",
    "study in scarlet", "adventures of tom sawyer",
    "adventures of huckleberry finn", "prince and the pauper",
    "picture of dorian gray", "importance of being earnest", "time machine",
    "war of the worlds", "invisible man", "island of dr. moreau",
    "twenty thousand leagues", "around the world in eighty days",
    "mysterious island", "alice's adventures in wonderland",
    "through the looking glass", "jane eyre", "wuthering heights",
    "silas marner", "middlemarch", "tess of the d'urbervilles",
    "jude the obscure", "mayor of casterbridge", "raven",
    "fall of the house of usher", "tell-tale heart", "scarlet letter",
    "house of seven gables", "moby dick", "bartleby",
    "legend of sleepy hollow", "rip van winkle", "turn of the screw",
    "age of innocence", "ethan frome", "call of the wild", "white fang",
    "treasure island", "kidnapped", "dr. jekyll and mr. hyde", "dracula",
    "frankenstein", "three musketeers", "count of monte cristo",
    "les miserables", "hunchback of notre dame", "madame bovary",
    "war and peace", "anna karenina", "crime and punishment",
    "brothers karamazov", "cherry orchard", "three sisters", "uncle vanya",
    "hamlet", "macbeth", "romeo and juliet", "othello", "king lear",
    "canterbury tales", "robinson crusoe", "gulliver's travels",
    "don quixote",
]


def is_classic(title: Optional[str], authors: Optional[List[str]]) -> bool:
    """Loose public-domain check on the first author and the title.

    Matching is by substring in either direction, on the author's first name
    and on the first two words of the title. A book without authors matches
    every classic author.
    """
    title_lower = (title or "").lower()
    author_lower = authors[0].lower() if authors else ""

    author_first_word = author_lower.split(" ")[0]
    if any(author in author_lower or author_first_word in author for author in CLASSIC_AUTHORS):
        return True

    title_start = " ".join(title_lower.split(" ")[:2])
    return any(classic in title_lower or title_start in classic for classic in CLASSIC_TITLES)


def _sample_pages(title: str, authors: List[str]) -> List[str]:
    byline = ", ".join(authors) if authors else "Unknown Author"
    return [
        f"{title}\n\nBy {byline}\n\n--- Chapter 1 ---\n\n"
        "This is a sample of classic literature content. The full text of this "
        "work is in the public domain and can be read on Project Gutenberg.",

        "Chapter 2: The Reading Experience\n\n"
        "Move between pages with the Previous and Next buttons. Update your "
        "overall progress in your library as you go.",

        "Chapter 3: Available Content\n\n"
        "Works published before 1928 in the United States are generally in the "
        "public domain and available as free eBooks.",

        "Chapter 4: Modern Books\n\n"
        "Books still under copyright are not served here. Look for them on "
        "Internet Archive, Google Books previews or at a bookstore.",

        "Final Chapter: Enjoy Reading!\n\n--- End of Sample ---",
    ]


def find_book_content(book) -> Optional[dict]:
    """Return readable sample content for a saved book, or None when it is not a classic."""
    if not is_classic(book.title, book.authors):
        return None

    title = book.title or ""
    pages = _sample_pages(title, book.authors or [])
    return {
        "title": title,
        "content": pages,
        "total_pages": len(pages),
        "current_page": 1,
        "source": "gutenberg",
        "download_url": GUTENBERG_SEARCH_URL + quote(title, safe="!*'()"),
    }
