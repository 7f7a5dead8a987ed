"""Lookup index construction."""

import logging
from collections.abc import Iterable, Sequence

from src.ingestion.text import extract_hadith_number
from src.models.book import Translator
from src.models.excerpt import ChapterTitleExcerpt, Excerpt, VerseMeta
from src.models.heading import Heading, IndexRange
from src.models.index import GlobalIndex, IndexEntry
from src.models.source import SourceVerse

logger = logging.getLogger(__name__)

INDEX_VERSION = "1.0.0"


def _extend_page(pages: dict[str, IndexRange], page: int, index: int) -> None:
    key = str(page)
    bucket = pages.get(key)
    if bucket is None:
        pages[key] = IndexRange(start=index, end=index)
    else:
        pages[key] = IndexRange(start=min(bucket.start, index), end=max(bucket.end, index))


def build_page_index(items: Iterable[Excerpt]) -> dict[str, IndexRange]:
    """Map each page (as a string) to the range of excerpt positions on it."""
    pages: dict[str, IndexRange] = {}
    for index, item in enumerate(items):
        _extend_page(pages, item.page, index)
    return pages


def build_surah_verse_index(verses: Iterable[SourceVerse]) -> dict[str, IndexEntry]:
    """Map ``"surah:verse"`` to the source record id and page of each verse.

    Verses without a source id fall back to their ``"surah:verse"`` key.
    """
    index: dict[str, IndexEntry] = {}
    for v in verses:
        key = f"{v.surah}:{v.verse}"
        index[key] = IndexEntry(eid=v.source_id if v.source_id is not None else key, page=v.page)
    return index


def build_hadith_number_index(excerpts: Iterable[Excerpt]) -> dict[str, IndexEntry]:
    """Map hadith numbers to the excerpt id and page where they appear.

    Chapter titles are skipped even when their text opens with a number.
    """
    index: dict[str, IndexEntry] = {}
    for excerpt in excerpts:
        if isinstance(excerpt, ChapterTitleExcerpt):
            continue
        hadith_num = extract_hadith_number(excerpt.nass)
        if hadith_num:
            index[str(hadith_num)] = IndexEntry(eid=excerpt.id, page=excerpt.page)
    return index


def build_global_index(
    content: Sequence[Excerpt],
    headings: Sequence[Heading],
    translators: Iterable[Translator],
    chunk_size: int,
    version: str = INDEX_VERSION,
) -> GlobalIndex:
    """Build the consolidated lookup index for one book.

    Args:
        content: Finished content array in document order.
        headings: Resolved headings for the book.
        translators: The full translator directory.
        chunk_size: Chunk size the content is (or will be) written with.
        version: Index format version.

    Returns:
        A GlobalIndex whose translator directory holds only the
        translators referenced by this book.
    """
    ids: dict[str, int] = {}
    pages: dict[str, IndexRange] = {}
    surahs: dict[str, int] = {}
    hadiths: dict[str, int] = {}
    used_translators: set[int] = set()

    for index, item in enumerate(content):
        ids[item.id] = index
        if item.translator:
            used_translators.add(item.translator)

        meta = item.meta
        if isinstance(meta, VerseMeta):
            surahs[f"{meta.surah}:{meta.verse}"] = index
        elif meta.hadith_num:
            hadiths[str(meta.hadith_num)] = index

        if item.page:
            _extend_page(pages, item.page, index)

    used_translators.update(h.translator for h in headings if h.translator)

    directory = {str(t.id): t for t in translators if t.id in used_translators}
    missing = used_translators - {t.id for t in directory.values()}
    if missing:
        logger.warning("Translator ids not in directory: %s", sorted(missing))

    return GlobalIndex(
        ids=ids,
        pages=pages,
        surahs=surahs or None,
        hadiths=hadiths,
        translators=directory,
        chunk_size=chunk_size,
        total_items=len(content),
        version=version,
    )
