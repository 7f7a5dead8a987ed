"""Pure per-book migration pipelines: transform and resolve headings."""

from collections.abc import Sequence

from pydantic import BaseModel, Field

from src.ingestion.headings import (
    HEADING_LOOKAHEAD_PAGES,
    HeadingRangeResolver,
    resolve_surah_ranges,
)
from src.ingestion.transformer import transform_entries, transform_verses
from src.models.excerpt import Excerpt
from src.models.heading import Heading
from src.models.source import SourceEntry, SourceHeading, SourceSurah, SourceVerse


class MigratedBook(BaseModel):
    """The in-memory result of migrating one book, before indexing and persistence."""

    content: list[Excerpt]
    headings: list[Heading]
    dropped_headings: list[SourceHeading] = Field(default_factory=list)


def migrate_quran_data(verses: Sequence[SourceVerse], surahs: Sequence[SourceSurah]) -> MigratedBook:
    content = transform_verses(verses)
    return MigratedBook(content=content, headings=resolve_surah_ranges(surahs, content))


def migrate_hadith_data(
    entries: Sequence[SourceEntry],
    headings: Sequence[SourceHeading],
    lookahead_pages: int = HEADING_LOOKAHEAD_PAGES,
) -> MigratedBook:
    """Migrate a hadith collection.

    Args:
        entries: Canonical records in document order.
        headings: Canonical headings, in any order.
        lookahead_pages: Page window for placing headings.

    Returns:
        MigratedBook with content, resolved headings, and dropped headings.
    """
    content = transform_entries(entries)
    resolved = HeadingRangeResolver(lookahead_pages).resolve(headings, content)
    return MigratedBook(content=content, headings=resolved.headings, dropped_headings=resolved.dropped)
