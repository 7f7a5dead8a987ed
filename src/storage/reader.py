"""Read side of the persisted book layout.

Mirrors what the site does at build time: load headings, then load only
the chunks a heading's index range touches.
"""

from pathlib import Path

from src.models.book import Book, BooksManifest
from src.models.excerpt import ContentManifest, Excerpt
from src.models.heading import Heading, HeadingsManifest
from src.models.index import GlobalIndex
from src.storage.writer import CONTENT_DIR, HEADINGS_FILE, INDEX_FILE


def load_books(manifest_path: str | Path) -> list[Book]:
    """Load the book catalog from ``books.json``."""
    text = Path(manifest_path).read_text(encoding="utf-8")
    return BooksManifest.model_validate_json(text).books


def top_level_headings(headings: list[Heading]) -> list[Heading]:
    return [h for h in headings if not h.parent]


def find_heading(headings: list[Heading], heading_id: str) -> Heading | None:
    return next((h for h in headings if h.id == heading_id), None)


class BookReader:
    """Loads a migrated book from its output directory.

    Args:
        book_dir: The book's output directory.
    """

    def __init__(self, book_dir: str | Path) -> None:
        self.book_dir = Path(book_dir)
        self._index: GlobalIndex | None = None

    def load_headings(self) -> list[Heading]:
        text = (self.book_dir / HEADINGS_FILE).read_text(encoding="utf-8")
        return HeadingsManifest.model_validate_json(text).headings

    def load_index(self) -> GlobalIndex:
        if self._index is None:
            text = (self.book_dir / INDEX_FILE).read_text(encoding="utf-8")
            self._index = GlobalIndex.model_validate_json(text)
        return self._index

    def load_chunk(self, chunk_id: int) -> list[Excerpt]:
        text = (self.book_dir / CONTENT_DIR / f"{chunk_id}.json").read_text(encoding="utf-8")
        return ContentManifest.model_validate_json(text).content

    def load_heading_excerpts(self, heading: Heading) -> list[Excerpt]:
        """Return exactly the excerpts covered by a heading, in order.

        Loads chunks ``start // chunk_size`` through ``end // chunk_size``
        and slices the concatenation. Headings without an index range
        (e.g. a surah with no verses) yield an empty list.
        """
        if heading.index_range is None:
            return []

        chunk_size = self.load_index().chunk_size
        start, end = heading.index_range.start, heading.index_range.end
        first_chunk, last_chunk = start // chunk_size, end // chunk_size

        excerpts: list[Excerpt] = []
        for chunk_id in range(first_chunk, last_chunk + 1):
            excerpts.extend(self.load_chunk(chunk_id))

        offset = start - first_chunk * chunk_size
        return excerpts[offset:offset + (end - start) + 1]
