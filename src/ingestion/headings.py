"""Heading range resolution.

Headings arrive as a flat list. Hadith headings only know the page their
content starts on (``from_page``) and, for chapters, the id of the book
heading that encloses them. Surah headings only know their surah number.
This module places each heading on the content array and computes the
span it covers.
"""

import logging
from collections.abc import Sequence
from typing import NamedTuple

from src.models.excerpt import CitationMeta, Excerpt, VerseExcerpt
from src.models.heading import Heading, IdRange, IndexRange, PageRange
from src.models.source import SourceHeading, SourceSurah

logger = logging.getLogger(__name__)

# How many pages past ``from_page`` to search when that page has no content.
# Existing corpus output depends on this exact value.
HEADING_LOOKAHEAD_PAGES = 10


class _PlacedHeading(NamedTuple):
    source: SourceHeading
    start: int

    @property
    def is_book(self) -> bool:
        return not self.source.parent


class ResolvedHeadings(NamedTuple):
    """Headings with ranges, plus the ones that could not be placed."""

    headings: list[Heading]
    dropped: list[SourceHeading]


def first_index_by_page(content: Sequence[Excerpt]) -> dict[int, int]:
    """Map each page to the position of its first excerpt."""
    page_map: dict[int, int] = {}
    for index, item in enumerate(content):
        page_map.setdefault(item.page, index)
    return page_map


def _spans(content: Sequence[Excerpt], start: int, end: int) -> dict:
    return {
        "range": IdRange(start=content[start].id, end=content[end].id),
        "index_range": IndexRange(start=start, end=end),
        "page_range": PageRange(start=content[start].page, end=content[end].page),
    }


class HeadingRangeResolver:
    """Computes the content span of hierarchical hadith headings.

    A heading without a parent is a book; one with a parent is a chapter.
    A book runs until the next book starts. A chapter runs until the next
    heading that starts strictly after it, or the next book. A book and
    its first chapter can therefore share a start position while the book
    still encloses the chapter.

    Args:
        lookahead_pages: Pages after ``from_page`` to probe when that page
            has no content.
    """

    def __init__(self, lookahead_pages: int = HEADING_LOOKAHEAD_PAGES) -> None:
        self._lookahead_pages = lookahead_pages

    def resolve(
        self, headings: Sequence[SourceHeading], content: Sequence[Excerpt]
    ) -> ResolvedHeadings:
        """Place headings on the content array and compute their ranges.

        Args:
            headings: Flat heading list, in any order.
            content: Transformed content in document order.

        Returns:
            ResolvedHeadings with headings sorted by start position, and the
            headings dropped because no content was found for them.
        """
        page_map = first_index_by_page(content)

        placed: list[_PlacedHeading] = []
        dropped: list[SourceHeading] = []
        for heading in headings:
            start = self._find_start_index(heading.from_page, page_map)
            if start is None:
                logger.debug(
                    "No content within %d pages of page %d for heading %s",
                    self._lookahead_pages,
                    heading.from_page,
                    heading.id,
                )
                dropped.append(heading)
            else:
                placed.append(_PlacedHeading(heading, start))

        if dropped:
            logger.warning(
                "Dropped %d of %d headings with no content in range: %s",
                len(dropped),
                len(headings),
                ", ".join(h.id for h in dropped),
            )

        # Stable: headings sharing a start keep their input order
        placed.sort(key=lambda p: p.start)

        resolved = [
            self._build_heading(p, self._find_end_index(i, placed, len(content)), content)
            for i, p in enumerate(placed)
        ]
        return ResolvedHeadings(headings=resolved, dropped=dropped)

    def _find_start_index(self, from_page: int, page_map: dict[int, int]) -> int | None:
        """Return the first excerpt on ``from_page`` or on one of the following pages."""
        if from_page in page_map:
            return page_map[from_page]
        for page in range(from_page + 1, from_page + self._lookahead_pages + 1):
            if page in page_map:
                return page_map[page]
        return None

    @staticmethod
    def _find_end_index(position: int, placed: Sequence[_PlacedHeading], content_length: int) -> int:
        """Return the last excerpt position covered by ``placed[position]``.

        Args:
            position: Index of the heading in the start-sorted list.
            placed: All placed headings, sorted by start.
            content_length: Length of the content array.

        Returns:
            End position, never below the heading's start.
        """
        current = placed[position]
        end = content_length - 1

        for following in placed[position + 1:]:
            if current.is_book:
                if following.is_book:
                    end = following.start - 1
                    break
            elif following.is_book or following.start > current.start:
                end = following.start - 1
                break

        return max(end, current.start)

    @staticmethod
    def _build_heading(placed: _PlacedHeading, end: int, content: Sequence[Excerpt]) -> Heading:
        source = placed.source
        meta = content[placed.start].meta
        citation = meta if isinstance(meta, CitationMeta) else CitationMeta()

        return Heading(
            id=source.id,
            nass=source.nass,
            text=source.text,
            translator=source.translator,
            page=source.from_page,
            parent=source.parent,
            volume=source.volume if source.volume is not None else citation.volume,
            pp=source.pp if source.pp is not None else citation.pp,
            **_spans(content, placed.start, end),
        )


def resolve_surah_ranges(surahs: Sequence[SourceSurah], content: Sequence[Excerpt]) -> list[Heading]:
    """Attach verse ranges to surah headings.

    Each surah covers the first through the last verse excerpt carrying its
    number. Surahs without verses are returned without ranges.
    """
    bounds: dict[int, list[int]] = {}
    for index, item in enumerate(content):
        if isinstance(item, VerseExcerpt):
            bounds.setdefault(item.meta.surah, [index, index])[1] = index

    headings: list[Heading] = []
    for surah in surahs:
        spans = _spans(content, *bounds[surah.num]) if surah.num in bounds else {}
        if not spans:
            logger.warning("Surah %d has no verses", surah.num)
        headings.append(
            Heading(
                id=str(surah.num),
                nass=surah.nass,
                text=surah.text,
                translator=surah.translator,
                page=surah.page,
                surah=surah.num,
                **spans,
            )
        )
    return headings
