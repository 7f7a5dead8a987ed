"""Heading (table of contents) data models."""

from pydantic import BaseModel, ConfigDict, Field


class IndexRange(BaseModel):
    """Inclusive range of positions in a book's content array."""

    start: int
    end: int


class PageRange(BaseModel):
    """Inclusive range of source pages."""

    start: int
    end: int


class IdRange(BaseModel):
    """Inclusive range of excerpt ids."""

    start: str
    end: str


class Heading(BaseModel):
    """A table-of-contents entry covering a contiguous run of excerpts.

    Surah headings carry ``surah`` and no parent. Hadith headings carry
    ``volume``/``pp`` and, for chapters, the id of the enclosing book
    heading in ``parent``. The three range fields encode the same span
    by excerpt id, by array position, and by page.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    nass: str
    text: str
    translator: int
    page: int | None = None
    parent: str | None = None
    surah: int | None = None
    volume: int | None = None
    pp: int | None = None
    range: IdRange | None = None
    index_range: IndexRange | None = Field(default=None, alias="indexRange")
    page_range: PageRange | None = Field(default=None, alias="pageRange")


class HeadingsManifest(BaseModel):
    """Contents of ``headings.json``."""

    headings: list[Heading] = Field(default_factory=list)
