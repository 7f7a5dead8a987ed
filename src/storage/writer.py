"""Persistence of migrated books as chunked JSON files.

Layout of a book directory::

    headings.json       {"headings": [...]}
    indexes.json        GlobalIndex
    content/{n}.json    {"content": [...]}   n = 0 .. ceil(total / chunk_size) - 1
"""

import json
import logging
import math
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from src.models.excerpt import Excerpt
from src.models.heading import Heading
from src.models.index import GlobalIndex

logger = logging.getLogger(__name__)

HEADINGS_FILE = "headings.json"
INDEX_FILE = "indexes.json"
CONTENT_DIR = "content"


def chunk_count(total_items: int, chunk_size: int) -> int:
    return math.ceil(total_items / chunk_size)


def chunk_address(index: int, chunk_size: int) -> tuple[int, int]:
    """Return (chunk id, offset within chunk) for a content position."""
    return divmod(index, chunk_size)


def partition(content: Sequence[Excerpt], chunk_size: int) -> list[list[Excerpt]]:
    """Split content into consecutive slices of ``chunk_size`` (last may be shorter)."""
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    return [list(content[i:i + chunk_size]) for i in range(0, len(content), chunk_size)]


def to_json(value: BaseModel) -> dict[str, Any]:
    """Serialize a model in the persisted (camelCase, no nulls) form."""
    return value.model_dump(mode="json", by_alias=True, exclude_none=True)


def write_json(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")


class BookWriter:
    """Writes and checks the output files of one book.

    The chunk size is always taken from the GlobalIndex being written, so
    ``indexes.json`` and the chunk files cannot disagree about it.

    Args:
        book_dir: The book's output directory (keyed by book id).
    """

    def __init__(self, book_dir: str | Path) -> None:
        self.book_dir = Path(book_dir)

    @property
    def headings_path(self) -> Path:
        return self.book_dir / HEADINGS_FILE

    @property
    def index_path(self) -> Path:
        return self.book_dir / INDEX_FILE

    def chunk_path(self, chunk_id: int) -> Path:
        return self.book_dir / CONTENT_DIR / f"{chunk_id}.json"

    def output_paths(self, index: GlobalIndex) -> list[Path]:
        """All files a complete migration of this book produces."""
        chunks = chunk_count(index.total_items, index.chunk_size)
        return [self.headings_path, self.index_path] + [self.chunk_path(n) for n in range(chunks)]

    def is_complete(self) -> bool:
        """Return True only if every expected output file exists.

        The expected chunk files are derived from ``indexes.json``; an
        unreadable index counts as incomplete.
        """
        if not self.index_path.exists():
            return False
        try:
            index = GlobalIndex.model_validate_json(self.index_path.read_text(encoding="utf-8"))
        except (OSError, ValidationError):
            logger.warning("Unreadable index at %s, treating book as not migrated", self.index_path)
            return False
        return all(path.exists() for path in self.output_paths(index))

    def write(self, content: Sequence[Excerpt], headings: Sequence[Heading], index: GlobalIndex) -> int:
        """Write content chunks, headings, and the index, in that order.

        ``indexes.json`` goes last so an interrupted run is never mistaken
        for a complete one.

        Args:
            content: Finished content array.
            headings: Resolved headings.
            index: GlobalIndex built from ``content``.

        Returns:
            Number of chunk files written.

        Raises:
            ValueError: If the index was built for a different content length.
        """
        if index.total_items != len(content):
            raise ValueError(
                f"Index covers {index.total_items} items but content has {len(content)}"
            )

        chunks = partition(content, index.chunk_size)
        for chunk_id, chunk in enumerate(chunks):
            write_json(self.chunk_path(chunk_id), {"content": [to_json(item) for item in chunk]})

        write_json(self.headings_path, {"headings": [to_json(h) for h in headings]})
        write_json(self.index_path, to_json(index))

        logger.debug("Wrote %d chunks to %s", len(chunks), self.book_dir)
        return len(chunks)
