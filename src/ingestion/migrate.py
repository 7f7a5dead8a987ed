"""Per-book migration driver.

Each book is migrated to completion before the next one starts. A book
whose output is already complete is skipped. Per-book failures are logged
and the run moves on; configuration errors abort the run.
"""

import logging
import zipfile
from pathlib import Path

import httpx

from src.config import AppConfig, BookSource, ConfigurationError
from src.ingestion.adapters import api_quran_records
from src.ingestion.api import ContentApiClient
from src.ingestion.download import SourceDownloader
from src.ingestion.indexer import build_global_index
from src.ingestion.loader import load_hadith_source, load_quran_source, load_translators
from src.ingestion.pipeline import MigratedBook, migrate_hadith_data, migrate_quran_data
from src.models.book import Translator
from src.storage.writer import BookWriter

logger = logging.getLogger(__name__)

MIGRATED = "migrated"
SKIPPED = "skipped"
UNAVAILABLE = "unavailable"
ERROR = "error"


class BookMigrator:
    """Runs the migration pipeline for books and persists the results.

    Collaborators are created lazily from the config when not injected,
    so a run over local files needs neither API access nor credentials.

    Args:
        config: Application configuration.
        api: Content API client (translators, Qur'an entries).
        downloader: Source export downloader.
        translators: Full translator directory, if already known.
    """

    def __init__(
        self,
        config: AppConfig,
        api: ContentApiClient | None = None,
        downloader: SourceDownloader | None = None,
        translators: list[Translator] | None = None,
    ) -> None:
        self._config = config
        self._api = api
        self._downloader = downloader
        self._translators = translators

    def book_dir(self, book_id: int) -> Path:
        return Path(self._config.storage.data_dir) / "books" / str(book_id)

    # ── Collaborators ───────────────────────────────────────────────────────

    @property
    def api(self) -> ContentApiClient:
        if self._api is None:
            self._api = ContentApiClient.from_config(self._config)
        return self._api

    @property
    def downloader(self) -> SourceDownloader:
        if self._downloader is None:
            self._downloader = SourceDownloader.from_config(self._config)
        return self._downloader

    def translators(self) -> list[Translator]:
        """Return the translator directory, loading it on first use."""
        if self._translators is not None:
            return self._translators

        path = self._config.storage.translators_path
        if path and Path(path).exists():
            self._translators = load_translators(path)
        elif self._config.source.api_url or self._api is not None:
            self._translators = self.api.get_translators()
        else:
            logger.warning("No translator source configured; indexes will list no translators")
            self._translators = []
        return self._translators

    # ── Migration runners ───────────────────────────────────────────────────

    def migrate_quran(self, book_id: int, input_path: str | Path | None = None) -> str:
        """Migrate the Qur'an from a legacy export or from the content API.

        Args:
            book_id: Catalog id; also the output directory name.
            input_path: Optional legacy export; the API is used when absent.
                A failed API fetch makes the book ``unavailable``.

        Returns:
            A status string.
        """
        book_dir = self.book_dir(book_id)
        writer = BookWriter(book_dir)
        if writer.is_complete():
            logger.info("Skipping book %d - already migrated at %s", book_id, book_dir)
            return SKIPPED

        logger.info("Migrating Qur'an (book %d)", book_id)
        if input_path is not None and Path(input_path).exists():
            verses, surahs = load_quran_source(input_path)
        else:
            try:
                entries = self.api.get_entries(self._config.source.quran_collection_id)
            except httpx.HTTPError as exc:
                logger.warning("Could not fetch Qur'an entries for book %d, skipping: %s", book_id, exc)
                return UNAVAILABLE
            verses, surahs = api_quran_records(entries)

        migrated = migrate_quran_data(verses, surahs)
        self._persist(book_id, writer, migrated)
        return MIGRATED

    def migrate_hadith(self, book_id: int, input_path: str | Path) -> str:
        """Migrate a hadith collection from a local or downloaded export.

        A missing local file triggers a download; a failed download makes
        the book ``unavailable`` rather than failing the run. The
        downloaded file is removed afterwards.

        Args:
            book_id: Catalog id; also the output directory name.
            input_path: Expected location of the export.

        Returns:
            A status string.
        """
        book_dir = self.book_dir(book_id)
        writer = BookWriter(book_dir)
        if writer.is_complete():
            logger.info("Skipping book %d - already migrated at %s", book_id, book_dir)
            return SKIPPED

        logger.info("Migrating hadith book %d", book_id)
        data_path = Path(input_path)
        downloaded: Path | None = None

        if not data_path.exists():
            logger.info("File not found locally: %s", data_path)
            try:
                downloaded = data_path = self.downloader.download(book_id, book_dir)
            except (httpx.HTTPError, OSError, zipfile.BadZipFile) as exc:
                logger.warning("Could not download data for book %d, skipping: %s", book_id, exc)
                return UNAVAILABLE

        try:
            entries, headings = load_hadith_source(data_path)
            migrated = migrate_hadith_data(
                entries, headings, lookahead_pages=self._config.migration.heading_lookahead_pages
            )
            self._persist(book_id, writer, migrated)
        finally:
            if downloaded is not None:
                downloaded.unlink(missing_ok=True)
                logger.info("Cleaned up temporary file: %s", downloaded)

        return MIGRATED

    def migrate(self, book: BookSource) -> str:
        input_path = self.book_dir(book.id) / book.input_path if book.input_path else None
        if book.kind == "quran":
            return self.migrate_quran(book.id, input_path)
        if input_path is None:
            input_path = self.book_dir(book.id) / "data.json"
        return self.migrate_hadith(book.id, input_path)

    def migrate_all(self, books: list[BookSource]) -> dict[int, str]:
        """Migrate books one after another.

        Args:
            books: Migration plan.

        Returns:
            Mapping of book id to status.

        Raises:
            ConfigurationError: Missing credentials or URLs abort the run.
        """
        results: dict[int, str] = {}
        for book in books:
            try:
                results[book.id] = self.migrate(book)
            except ConfigurationError:
                raise
            except Exception:
                logger.exception("Failed to migrate book %d", book.id)
                results[book.id] = ERROR
        return results

    def _persist(self, book_id: int, writer: BookWriter, migrated: MigratedBook) -> None:
        settings = self._config.migration
        index = build_global_index(
            migrated.content,
            migrated.headings,
            self.translators(),
            chunk_size=settings.chunk_size,
            version=settings.index_version,
        )
        chunks = writer.write(migrated.content, migrated.headings, index)

        logger.info(
            "Book %d: %d excerpts, %d headings (%d dropped), %d hadith numbers, "
            "%d surah:verse entries, %d pages, %d translators, %d chunks",
            book_id,
            len(migrated.content),
            len(migrated.headings),
            len(migrated.dropped_headings),
            len(index.hadiths),
            len(index.surahs or {}),
            len(index.pages),
            len(index.translators),
            chunks,
        )
