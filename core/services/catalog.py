# core/services/catalog.py
import logging
from typing import Iterator, Optional

import requests
from pydantic import ValidationError

from core import config
from core.models.catalog import CatalogSearchResult
from core.utils.url import secure_url

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """The external catalog could not answer a search."""


class CatalogClient:
    """Thin client for the Google Books volumes search."""

    def __init__(
        self,
        api_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None
    ):
        self.api_url = api_url or config.GOOGLE_BOOKS_API_URL
        self.api_key = config.GOOGLE_BOOKS_API_KEY if api_key is None else api_key
        self.timeout = timeout or config.CATALOG_TIMEOUT
        self.session = session or requests.Session()

    def search(self, query: str, max_results: int = config.CATALOG_MAX_RESULTS) -> CatalogSearchResult:
        """Search the catalog.
        
        Every returned volume has a volume_info and an image_links object, and
        thumbnails are moved to https, so callers never branch on missing keys.
        
        Args:
            query: Free-text search
            max_results: Result cap passed to the catalog
            
        Returns:
            CatalogSearchResult with the matching volumes (possibly none)
            
        Raises:
            CatalogError: On network failure, a non-success status or a malformed body
        """
        params = {"q": query, "maxResults": max_results, "key": self.api_key}
        try:
            response = self.session.get(self.api_url, params=params, timeout=self.timeout)
            response.raise_for_status()
            result = CatalogSearchResult.model_validate(response.json())
        except requests.RequestException as e:
            logger.warning(f"Catalog search for {query!r} failed: {e}")
            raise CatalogError(str(e)) from e
        except (ValidationError, ValueError) as e:
            logger.warning(f"Catalog returned an unexpected body for {query!r}: {e}")
            raise CatalogError(str(e)) from e

        for item in result.items:
            image_links = item.volume_info.image_links
            if image_links.thumbnail:
                image_links.thumbnail = secure_url(image_links.thumbnail)

        logger.info(f"Catalog search for {query!r} returned {len(result.items)} items")
        return result

    def close(self) -> None:
        self.session.close()


def get_catalog_client() -> Iterator[CatalogClient]:
    """FastAPI dependency yielding a catalog client built from settings.
    
    The client's HTTP session is closed when the request is complete.
    """
    client = CatalogClient()
    try:
        yield client
    finally:
        client.close()
