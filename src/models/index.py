"""Lookup index models."""

from pydantic import BaseModel, ConfigDict, Field

from src.models.book import Translator
from src.models.heading import IndexRange


class IndexEntry(BaseModel):
    """Location of one excerpt in a stand-alone lookup index."""

    eid: int | str
    page: int


class GlobalIndex(BaseModel):
    """Consolidated per-book lookups, persisted as ``indexes.json``.

    All values are positions in the book's content array. Chunk ``n`` holds
    positions ``[n * chunk_size, (n + 1) * chunk_size)``.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    ids: dict[str, int] = Field(default_factory=dict)
    pages: dict[str, IndexRange] = Field(default_factory=dict)
    surahs: dict[str, int] | None = None  # scripture only
    hadiths: dict[str, int] = Field(default_factory=dict)
    translators: dict[str, Translator] = Field(default_factory=dict)
    chunk_size: int = Field(alias="chunkSize", gt=0)
    total_items: int = Field(alias="totalItems", ge=0)
    version: str = "1.0.0"
