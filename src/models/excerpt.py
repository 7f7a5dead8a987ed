"""Excerpt data models.

An excerpt is one addressable unit of corpus text. The four kinds form a
discriminated union keyed on ``kind`` (persisted as the JSON ``type`` key).
Prose excerpts are written without a ``type`` key, and a record with no
``type`` parses back as :class:`TextExcerpt`.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag


class VerseMeta(BaseModel):
    """Location of a scripture verse."""

    model_config = ConfigDict(frozen=True)

    surah: int
    verse: int


class CitationMeta(BaseModel):
    """Printed-edition citation for hadith, chapter titles, and prose."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    volume: int = 1
    pp: int = 0  # page within the volume, as in "9/5"
    hadith_num: int | None = Field(default=None, alias="hadithNum")


class _ExcerptBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    nass: str  # Arabic source text, never altered
    text: str
    translator: int
    page: int


class VerseExcerpt(_ExcerptBase):
    kind: Literal["verse"] = Field(default="verse", alias="type")
    meta: VerseMeta


class HadithExcerpt(_ExcerptBase):
    kind: Literal["hadith"] = Field(default="hadith", alias="type")
    meta: CitationMeta


class ChapterTitleExcerpt(_ExcerptBase):
    kind: Literal["chapter-title"] = Field(default="chapter-title", alias="type")
    meta: CitationMeta = Field(default_factory=CitationMeta)


class TextExcerpt(_ExcerptBase):
    """Generic prose: forewords, introductions, editorial notes."""

    kind: Literal["text"] = Field(default="text", alias="type", exclude=True)
    meta: CitationMeta = Field(default_factory=CitationMeta)


def _excerpt_kind(value: Any) -> str:
    if isinstance(value, dict):
        return value.get("type") or value.get("kind") or "text"
    return getattr(value, "kind", "text")


Excerpt = Annotated[
    Union[
        Annotated[VerseExcerpt, Tag("verse")],
        Annotated[HadithExcerpt, Tag("hadith")],
        Annotated[ChapterTitleExcerpt, Tag("chapter-title")],
        Annotated[TextExcerpt, Tag("text")],
    ],
    Discriminator(_excerpt_kind),
]

class ContentManifest(BaseModel):
    """Contents of one ``content/{n}.json`` chunk file."""

    content: list[Excerpt] = Field(default_factory=list)
