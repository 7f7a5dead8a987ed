"""Source record models for the migration pipeline.

Raw records arrive in one of three historical shapes: the legacy flat
exports, entries from the collection API, and HuggingFace dataset exports.
Input adapters normalize each of them into the canonical ``Source*``
records defined at the bottom of this module.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# ── Legacy flat exports ─────────────────────────────────────────────────────


class LegacyQuranExcerpt(BaseModel):
    id: int
    nass: str
    text: str
    translator: int
    page: int
    surah: int
    verse: int
    chapter: int = 0


class LegacyQuranHeading(BaseModel):
    id: int
    nass: str
    text: str
    translator: int
    num: int  # surah number
    page: int


class LegacyHadithExcerpt(BaseModel):
    id: str
    nass: str
    text: str
    translator: int
    page: int
    pp: int | None = None
    volume: int | None = None
    type: int | None = None  # 1 = book title, 2 = chapter title


class LegacyHadithHeading(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    nass: str
    text: str
    translator: int
    from_page: int = Field(alias="from")  # page where the content starts
    page: int | None = None  # not reliable in the exports
    parent: int | None = None
    volume: int | None = None
    pp: int | None = None


# ── Collection API ──────────────────────────────────────────────────────────


class ApiEntry(BaseModel):
    """A raw entry from the upstream content API.

    Headings and content share one stream; headings have ``type`` set.
    """

    model_config = ConfigDict(extra="ignore")

    id: int
    body: str = ""
    ar_body: str = ""
    translator: int = 0
    from_page: int | str | None = None
    part_number: int | None = None
    part_page: int | None = None
    index_number: int | None = None
    type: int | None = None


# ── HuggingFace exports ─────────────────────────────────────────────────────


class HFExcerpt(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    nass: str
    from_page: int = Field(alias="from")
    type: Literal["book", "chapter"] | None = None
    to: int | None = None
    vol: int = 1
    vp: int = 0
    text: str
    translator: int
    last_updated_at: int | None = Field(default=None, alias="lastUpdatedAt")


class HFHeading(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    nass: str
    from_page: int = Field(alias="from")
    parent: str | None = None
    text: str
    translator: int
    last_updated_at: int | None = Field(default=None, alias="lastUpdatedAt")


class HFExport(BaseModel):
    excerpts: list[HFExcerpt]
    headings: list[HFHeading] = Field(default_factory=list)
    footnotes: list[HFExcerpt] | None = None


# ── Canonical records ───────────────────────────────────────────────────────


class SourceVerse(BaseModel):
    """A scripture verse, independent of the export it came from."""

    source_id: int | str | None = None
    surah: int
    verse: int
    nass: str
    text: str
    translator: int
    page: int


class SourceSurah(BaseModel):
    num: int
    nass: str
    text: str
    translator: int
    page: int


class SourceEntry(BaseModel):
    """A hadith-collection record: hadith, chapter title, or prose."""

    id: str
    nass: str
    text: str
    translator: int
    page: int
    volume: int = 1
    pp: int = 0
    title_marker: bool = False  # the export flagged it as a book/chapter title


class SourceHeading(BaseModel):
    """A hadith-collection heading before its range is resolved."""

    id: str
    nass: str
    text: str
    translator: int
    from_page: int
    parent: str | None = None
    volume: int | None = None
    pp: int | None = None
