"""Input adapters: one per historical source shape.

Each adapter maps a raw record to a canonical ``Source*`` record so the
transformer never branches on where a record came from.
"""

import logging
from collections.abc import Iterable

from src.models.source import (
    ApiEntry,
    HFExcerpt,
    HFHeading,
    LegacyHadithExcerpt,
    LegacyHadithHeading,
    LegacyQuranExcerpt,
    LegacyQuranHeading,
    SourceEntry,
    SourceHeading,
    SourceSurah,
    SourceVerse,
)

logger = logging.getLogger(__name__)

# Legacy hadith exports mark titles with a numeric type
LEGACY_TITLE_TYPES = frozenset({1, 2})


# ── Legacy flat exports ─────────────────────────────────────────────────────


def legacy_quran_verse(record: LegacyQuranExcerpt) -> SourceVerse:
    return SourceVerse(
        source_id=record.id,
        surah=record.surah,
        verse=record.verse,
        nass=record.nass,
        text=record.text,
        translator=record.translator,
        page=record.page,
    )


def legacy_quran_surah(record: LegacyQuranHeading) -> SourceSurah:
    return SourceSurah(
        num=record.num,
        nass=record.nass,
        text=record.text,
        translator=record.translator,
        page=record.page,
    )


def legacy_hadith_entry(record: LegacyHadithExcerpt) -> SourceEntry:
    return SourceEntry(
        id=record.id,
        nass=record.nass,
        text=record.text,
        translator=record.translator,
        page=record.page,
        volume=record.volume if record.volume is not None else 1,
        pp=record.pp if record.pp is not None else 0,
        title_marker=record.type in LEGACY_TITLE_TYPES,
    )


def legacy_hadith_heading(record: LegacyHadithHeading) -> SourceHeading:
    """Legacy parents are numeric title ids; they are stored as ``T{n}``.

    Missing citations default to volume 1, page 0 rather than to the
    covered content.
    """
    return SourceHeading(
        id=record.id,
        nass=record.nass,
        text=record.text,
        translator=record.translator,
        from_page=record.from_page,
        parent=f"T{record.parent}" if record.parent else None,
        volume=record.volume if record.volume is not None else 1,
        pp=record.pp if record.pp is not None else 0,
    )


# ── Collection API ──────────────────────────────────────────────────────────


def api_quran_records(
    entries: Iterable[ApiEntry],
) -> tuple[list[SourceVerse], list[SourceSurah]]:
    """Split a Qur'an entry stream into verses and surah headings.

    Entries without ``type`` are verses: ``part_number`` is the surah and
    ``part_page`` the verse. Entries with ``type`` are surah headings
    numbered by ``index_number``.

    Args:
        entries: Raw API entries in document order.

    Returns:
        Tuple of (verses, surahs), each in input order.

    Raises:
        ValueError: If a verse or heading lacks its numbering fields.
    """
    verses: list[SourceVerse] = []
    surahs: list[SourceSurah] = []

    for entry in entries:
        page = int(entry.from_page) if entry.from_page is not None else 0
        if entry.type:
            if entry.index_number is None:
                raise ValueError(f"Heading entry {entry.id} has no index_number")
            surahs.append(
                SourceSurah(
                    num=entry.index_number,
                    nass=entry.ar_body,
                    text=entry.body,
                    translator=entry.translator,
                    page=page,
                )
            )
            continue

        if entry.part_number is None or entry.part_page is None:
            raise ValueError(f"Verse entry {entry.id} has no surah/verse numbers")
        verses.append(
            SourceVerse(
                source_id=entry.id,
                surah=entry.part_number,
                verse=entry.part_page,
                nass=entry.ar_body,
                text=entry.body,
                translator=entry.translator,
                page=page,
            )
        )

    logger.debug("Split %d verses and %d surah headings", len(verses), len(surahs))
    return verses, surahs


# ── HuggingFace exports ─────────────────────────────────────────────────────


def hf_entry(record: HFExcerpt) -> SourceEntry:
    return SourceEntry(
        id=record.id,
        nass=record.nass,
        text=record.text,
        translator=record.translator,
        page=record.from_page,
        volume=record.vol,
        pp=record.vp,
        title_marker=record.type is not None,
    )


def hf_heading(record: HFHeading) -> SourceHeading:
    return SourceHeading(
        id=record.id,
        nass=record.nass,
        text=record.text,
        translator=record.translator,
        from_page=record.from_page,
        parent=record.parent or None,
    )
