# core/models/catalog.py

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List

# Catalog payloads use camelCase keys and carry many fields we never read;
# unknown keys are kept so they pass through the search proxy untouched.
_catalog_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

def _fill_missing(data, name: str, empty):
    """Set a missing or null key to an empty value so it counts as provided."""
    if not isinstance(data, dict):
        return data
    alias = to_camel(name)
    if data.get(alias) is None and data.get(name) is None:
        data = {key: value for key, value in data.items() if key != name}
        data[alias] = empty
    return data

class ImageLinks(BaseModel):
    thumbnail: Optional[str] = None
    small_thumbnail: Optional[str] = None

    model_config = _catalog_config

class VolumeInfo(BaseModel):
    title: Optional[str] = None
    authors: Optional[List[str]] = None
    description: Optional[str] = None
    image_links: ImageLinks = Field(default_factory=ImageLinks)
    page_count: Optional[int] = None
    published_date: Optional[str] = None
    publisher: Optional[str] = None
    categories: Optional[List[str]] = None
    language: Optional[str] = None
    info_link: Optional[str] = None

    model_config = _catalog_config

    @model_validator(mode="before")
    @classmethod
    def default_image_links(cls, data):
        return _fill_missing(data, "image_links", {})

class CatalogVolume(BaseModel):
    id: str
    volume_info: VolumeInfo = Field(default_factory=VolumeInfo)

    model_config = _catalog_config

    @model_validator(mode="before")
    @classmethod
    def default_volume_info(cls, data):
        return _fill_missing(data, "volume_info", {})

class CatalogSearchResult(BaseModel):
    items: List[CatalogVolume] = []

    @model_validator(mode="before")
    @classmethod
    def default_items(cls, data):
        return _fill_missing(data, "items", [])
