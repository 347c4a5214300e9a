# core/utils/url.py
from typing import Optional

def secure_url(url: Optional[str]) -> Optional[str]:
    """Rewrite the first ``http:`` in a catalog image URL to ``https:``."""
    if not url:
        return url
    return url.replace("http:", "https:", 1)
