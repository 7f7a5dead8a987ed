"""Record transformer: canonical source records to excerpts."""

from collections.abc import Iterable

from src.ingestion.text import extract_hadith_number
from src.models.excerpt import (
    ChapterTitleExcerpt,
    CitationMeta,
    Excerpt,
    HadithExcerpt,
    TextExcerpt,
    VerseExcerpt,
    VerseMeta,
)
from src.models.source import SourceEntry, SourceVerse

# Ids of book ("B") and chapter ("C") titles in the hadith corpora
TITLE_ID_PREFIXES = ("C", "B")


def transform_verse(verse: SourceVerse) -> VerseExcerpt:
    """Build a verse excerpt with an ``"{surah}:{verse}"`` id."""
    return VerseExcerpt(
        id=f"{verse.surah}:{verse.verse}",
        nass=verse.nass,
        text=verse.text,
        translator=verse.translator,
        page=verse.page,
        meta=VerseMeta(surah=verse.surah, verse=verse.verse),
    )


def transform_entry(entry: SourceEntry) -> Excerpt:
    """Classify a hadith-collection record and build its excerpt.

    Titles win over numbering: a record flagged as a title, or whose id
    has a title prefix, is a chapter title even if its text starts with
    a number. Otherwise a leading non-zero citation number makes it a
    hadith, and anything else is prose.

    Args:
        entry: Canonical source record.

    Returns:
        A ChapterTitleExcerpt, HadithExcerpt, or TextExcerpt.
    """
    common = {
        "id": entry.id,
        "nass": entry.nass,
        "text": entry.text,
        "translator": entry.translator,
        "page": entry.page,
    }

    if entry.title_marker or entry.id.startswith(TITLE_ID_PREFIXES):
        return ChapterTitleExcerpt(**common, meta=CitationMeta(volume=entry.volume, pp=entry.pp))

    hadith_num = extract_hadith_number(entry.nass)
    if hadith_num:
        return HadithExcerpt(
            **common,
            meta=CitationMeta(volume=entry.volume, pp=entry.pp, hadith_num=hadith_num),
        )

    return TextExcerpt(**common, meta=CitationMeta(volume=entry.volume, pp=entry.pp))


def transform_verses(verses: Iterable[SourceVerse]) -> list[Excerpt]:
    return [transform_verse(v) for v in verses]


def transform_entries(entries: Iterable[SourceEntry]) -> list[Excerpt]:
    return [transform_entry(e) for e in entries]
