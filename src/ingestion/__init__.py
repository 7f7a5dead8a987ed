"""Book migration: source adapters, transformation, heading ranges, and indexing."""

from src.ingestion.headings import HeadingRangeResolver, resolve_surah_ranges
from src.ingestion.indexer import build_global_index
from src.ingestion.migrate import BookMigrator
from src.ingestion.pipeline import MigratedBook, migrate_hadith_data, migrate_quran_data
from src.ingestion.text import arabic_to_western, extract_hadith_number, normalize_arabic
from src.ingestion.transformer import transform_entry, transform_verse

__all__ = [
    "BookMigrator",
    "HeadingRangeResolver",
    "MigratedBook",
    "arabic_to_western",
    "build_global_index",
    "extract_hadith_number",
    "migrate_hadith_data",
    "migrate_quran_data",
    "normalize_arabic",
    "resolve_surah_ranges",
    "transform_entry",
    "transform_verse",
]
