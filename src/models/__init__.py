"""Data models for the corpus migration pipeline."""

from src.models.book import Book, BooksManifest, Translator, TranslatorsManifest
from src.models.excerpt import (
    ChapterTitleExcerpt,
    CitationMeta,
    ContentManifest,
    Excerpt,
    HadithExcerpt,
    TextExcerpt,
    VerseExcerpt,
    VerseMeta,
)
from src.models.heading import Heading, HeadingsManifest, IdRange, IndexRange, PageRange
from src.models.index import GlobalIndex, IndexEntry
from src.models.source import (
    SourceEntry,
    SourceHeading,
    SourceSurah,
    SourceVerse,
)

__all__ = [
    "Book",
    "BooksManifest",
    "ChapterTitleExcerpt",
    "CitationMeta",
    "ContentManifest",
    "Excerpt",
    "GlobalIndex",
    "HadithExcerpt",
    "Heading",
    "HeadingsManifest",
    "IdRange",
    "IndexEntry",
    "IndexRange",
    "PageRange",
    "SourceEntry",
    "SourceHeading",
    "SourceSurah",
    "SourceVerse",
    "TextExcerpt",
    "Translator",
    "TranslatorsManifest",
    "VerseExcerpt",
    "VerseMeta",
]
