# api/routes/search.py

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query

from core.models.catalog import CatalogSearchResult
from core.sa.models import User
from core.services.catalog import CatalogClient, CatalogError, get_catalog_client
from api.dependencies import get_current_user

router = APIRouter(tags=["search"])

SEARCH_FAILED = "Books cannot be fetched now, please try again."

@router.get("/search", response_model=CatalogSearchResult, response_model_exclude_unset=True)
def search_catalog(
    q: Optional[str] = Query(None, description="Free-text catalog search"),
    user: User = Depends(get_current_user),
    catalog: CatalogClient = Depends(get_catalog_client)
):
    """
    Search the external book catalog.
    
    Returns at most 20 volumes. Every volume carries a volumeInfo and an
    imageLinks object, and thumbnails use https. Other fields are passed
    through as the catalog sent them, nulls included.
    
    Raises:
        HTTPException: 400 if q is missing, 500 if the catalog cannot be reached
    """
    if not q:
        raise HTTPException(status_code=400, detail="Query parameter is required")

    try:
        return catalog.search(q)
    except CatalogError:
        raise HTTPException(status_code=500, detail=SEARCH_FAILED)
