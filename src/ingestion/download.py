"""Download of source exports from the dataset host."""

import logging
import zipfile
from pathlib import Path

import httpx

from src.config import AppConfig, ConfigurationError

logger = logging.getLogger(__name__)

BOOK_ID_PLACEHOLDER = "{{bookId}}"
DOWNLOADED_JSON = "content-old.json"
DOWNLOADED_ZIP = "content.zip"


class SourceDownloader:
    """Fetches a book's source export with a bearer token.

    The URL is ``base_url`` plus ``template`` with ``{{bookId}}`` replaced.
    Zip archives are unpacked and removed; the caller owns (and deletes)
    the returned JSON file.

    Args:
        token: Bearer token for the dataset host.
        template: File path template containing ``{{bookId}}``.
        base_url: Prefix joined with the expanded template.
        timeout: Request timeout in seconds.
        client: Optional preconfigured httpx client.

    Raises:
        ConfigurationError: If the token or template is missing.
    """

    def __init__(
        self,
        token: str | None,
        template: str | None,
        base_url: str = "https://huggingface.co/datasets/",
        timeout: float = 60.0,
        client: httpx.Client | None = None,
    ) -> None:
        if not token or not template:
            raise ConfigurationError("Missing HF_TOKEN or HF_FILE_TEMPLATE environment variables")
        self._token = token
        self._template = template
        self._base_url = base_url
        self._client = client or httpx.Client(timeout=timeout, follow_redirects=True)

    @classmethod
    def from_config(cls, config: AppConfig) -> "SourceDownloader":
        return cls(
            token=config.hf_token,
            template=config.hf_file_template,
            base_url=config.source.download_base_url,
            timeout=config.source.timeout_seconds,
        )

    def build_url(self, book_id: int) -> str:
        return self._base_url + self._template.replace(BOOK_ID_PLACEHOLDER, str(book_id))

    def download(self, book_id: int, output_dir: str | Path) -> Path:
        """Download the export for ``book_id`` into ``output_dir``.

        Returns:
            Path of the downloaded (or extracted) JSON file.

        Raises:
            httpx.HTTPError: On network errors or non-success responses.
            zipfile.BadZipFile: If a zip download is corrupt.
            FileNotFoundError: If a zip archive holds no JSON member.
        """
        url = self.build_url(book_id)
        out = Path(output_dir)
        out.mkdir(parents=True, exist_ok=True)
        is_zip = url.endswith(".zip")
        download_path = out / (DOWNLOADED_ZIP if is_zip else DOWNLOADED_JSON)

        logger.info("Downloading data for book %d", book_id)
        response = self._client.get(url, headers={"Authorization": f"Bearer {self._token}"})
        response.raise_for_status()
        download_path.write_bytes(response.content)
        logger.info("Saved to %s", download_path)

        if not is_zip:
            return download_path

        try:
            return self._extract_json(download_path, out / DOWNLOADED_JSON)
        finally:
            download_path.unlink(missing_ok=True)

    @staticmethod
    def _extract_json(archive_path: Path, target: Path) -> Path:
        """Extract the archive's JSON member (not the archive itself) to ``target``."""
        with zipfile.ZipFile(archive_path) as archive:
            members = [
                name
                for name in archive.namelist()
                if name.endswith(".json") and Path(name).name != archive_path.name
            ]
            if not members:
                raise FileNotFoundError(f"No JSON file in archive {archive_path}")
            logger.info("Extracting %s from %s", members[0], archive_path.name)
            target.write_bytes(archive.read(members[0]))
        return target
