"""Entry point for the corpus migration."""

import argparse
import logging
import sys
from pathlib import Path

from src.config import load_config
from src.ingestion.migrate import ERROR, BookMigrator
from src.models.book import Book
from src.storage.reader import load_books

logger = logging.getLogger(__name__)


def _load_catalog(manifest_path: str) -> dict[int, Book]:
    """Index the external book catalog by id; an absent catalog is empty."""
    if not Path(manifest_path).exists():
        logger.info("No book catalog at %s", manifest_path)
        return {}
    return {book.id: book for book in load_books(manifest_path)}


def main(argv: list[str] | None = None) -> int:
    """Migrate every configured book (or the ones selected with --book)."""
    parser = argparse.ArgumentParser(description="Migrate source exports into chunked book data.")
    parser.add_argument("--config", default="config.yaml", help="Path to the YAML configuration")
    parser.add_argument("--book", type=int, action="append", dest="books", help="Only migrate this book id")
    args = parser.parse_args(argv)

    config = load_config(args.config)
    logging.basicConfig(level=config.logging.level, format=config.logging.format)

    # Ensure the output root exists
    Path(config.storage.data_dir).mkdir(parents=True, exist_ok=True)

    books = config.books
    if args.books:
        books = [b for b in books if b.id in args.books]

    catalog = _load_catalog(config.storage.books_manifest)
    for book in books:
        if catalog and book.id not in catalog:
            logger.warning("Book %d is not listed in %s", book.id, config.storage.books_manifest)

    logger.info("Starting migration of %d book(s)", len(books))
    results = BookMigrator(config).migrate_all(books)
    for book_id, status in results.items():
        title = catalog[book_id].title if book_id in catalog else "unlisted"
        logger.info("Book %d (%s): %s", book_id, title, status)

    return 1 if ERROR in results.values() else 0


if __name__ == "__main__":
    sys.exit(main())
