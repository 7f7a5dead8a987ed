"""Client for the upstream content API."""

import logging
from typing import Any

import httpx

from src.config import AppConfig, ConfigurationError
from src.models.book import Translator
from src.models.source import ApiEntry

logger = logging.getLogger(__name__)


class ContentApiClient:
    """Thin wrapper over the content API's translator and entry endpoints.

    Args:
        base_url: API root URL.
        timeout: Request timeout in seconds.
        client: Optional preconfigured httpx client (its base URL is used).

    Raises:
        ConfigurationError: If no base URL is configured.
    """

    def __init__(
        self,
        base_url: str | None,
        timeout: float = 60.0,
        client: httpx.Client | None = None,
    ) -> None:
        if not base_url and client is None:
            raise ConfigurationError("Missing ILMTEST_API_URL for the content API")
        self._client = client or httpx.Client(base_url=base_url, timeout=timeout)

    @classmethod
    def from_config(cls, config: AppConfig) -> "ContentApiClient":
        return cls(config.source.api_url, timeout=config.source.timeout_seconds)

    def _get(self, path: str, params: dict[str, Any]) -> Any:
        response = self._client.get(path, params=params)
        response.raise_for_status()
        return response.json()

    def get_translators(self) -> list[Translator]:
        """Fetch the full translator directory."""
        rows = self._get("/translators", {"limit": -1})
        translators = [
            Translator(id=row["id"], name=row["name"], img=row.get("instagram") or None)
            for row in rows
        ]
        logger.info("Fetched %d translators from API", len(translators))
        return translators

    def get_entries(self, collection: int) -> list[ApiEntry]:
        """Fetch every entry of a collection, headings included."""
        rows = self._get("/entries", {"collection": collection, "full": 1, "limit": -1})
        entries = [ApiEntry.model_validate(row) for row in rows]
        logger.info("Fetched %d entries from API", len(entries))
        return entries
