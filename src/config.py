"""Configuration loader for the corpus migration pipeline."""

import os
from pathlib import Path
from typing import Literal

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field


class ConfigurationError(Exception):
    """Raised when required settings (credentials, URLs) are missing.

    This is fatal for a whole migration run, unlike per-book failures.
    """


class AppInfo(BaseModel):
    """Application metadata."""

    name: str = "Ilm Corpus Migration"
    version: str = "1.0.0"


class MigrationConfig(BaseModel):
    """Chunking and indexing parameters.

    ``chunk_size`` is written into every ``indexes.json`` and must match
    the chunk files on disk; readers address chunks with it.
    """

    chunk_size: int = Field(default=500, gt=0)
    heading_lookahead_pages: int = Field(default=10, ge=0)
    index_version: str = "1.0.0"


class SourceConfig(BaseModel):
    """Remote source locations."""

    api_url: str | None = None
    download_base_url: str = "https://huggingface.co/datasets/"
    quran_collection_id: int = 1
    timeout_seconds: float = 60.0


class StorageConfig(BaseModel):
    """Storage paths configuration."""

    data_dir: str = "./public/data"
    books_manifest: str = "./public/data/books.json"
    translators_path: str | None = None


class LoggingConfig(BaseModel):
    """Logging setup applied by the entry point."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class BookSource(BaseModel):
    """One book in the migration plan."""

    id: int
    kind: Literal["quran", "hadith"]
    input_path: str | None = None  # relative to the book directory


def _default_books() -> list[BookSource]:
    return [
        BookSource(id=1, kind="quran"),
        BookSource(id=2576, kind="hadith", input_path="data.json"),
    ]


class AppConfig(BaseModel):
    """Root application configuration."""

    app: AppInfo = Field(default_factory=AppInfo)
    migration: MigrationConfig = Field(default_factory=MigrationConfig)
    source: SourceConfig = Field(default_factory=SourceConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    books: list[BookSource] = Field(default_factory=_default_books)

    # Download credentials loaded from environment
    hf_token: str | None = None
    hf_file_template: str | None = None


def load_config(config_path: str | Path = "config.yaml") -> AppConfig:
    """Load configuration from YAML file and environment variables.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        Fully populated AppConfig instance.
    """
    load_dotenv()

    yaml_data: dict = {}
    config_file = Path(config_path)
    if config_file.exists():
        with open(config_file, encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f) or {}

    config = AppConfig(**yaml_data)

    # Secrets come from the environment only
    config.hf_token = os.getenv("HF_TOKEN")
    config.hf_file_template = os.getenv("HF_FILE_TEMPLATE")

    api_url = os.getenv("ILMTEST_API_URL")
    if api_url:
        config.source.api_url = api_url

    return config
