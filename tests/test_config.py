"""Tests for configuration loading."""

from pathlib import Path

import pytest
import yaml

from src.config import AppConfig, load_config


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("HF_TOKEN", "HF_FILE_TEMPLATE", "ILMTEST_API_URL"):
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's .env out of the tests
    monkeypatch.setattr("src.config.load_dotenv", lambda: None)


class TestAppConfigDefaults:
    """Test that AppConfig provides sensible defaults."""

    def test_default_config_creates_successfully(self) -> None:
        config = AppConfig()
        assert config.app.name == "Ilm Corpus Migration"

    def test_default_migration_config(self) -> None:
        config = AppConfig()
        assert config.migration.chunk_size == 500
        assert config.migration.heading_lookahead_pages == 10
        assert config.migration.index_version == "1.0.0"

    def test_default_storage_config(self) -> None:
        config = AppConfig()
        assert config.storage.data_dir == "./public/data"
        assert config.storage.translators_path is None

    def test_default_books(self) -> None:
        config = AppConfig()
        assert [(b.id, b.kind) for b in config.books] == [(1, "quran"), (2576, "hadith")]

    def test_default_credentials_are_none(self) -> None:
        config = AppConfig()
        assert config.hf_token is None
        assert config.hf_file_template is None
        assert config.source.api_url is None

    def test_rejects_non_positive_chunk_size(self) -> None:
        with pytest.raises(ValueError):
            AppConfig(migration={"chunk_size": 0})


class TestLoadConfig:
    """Test loading config from YAML files."""

    def test_load_from_yaml(self, tmp_path: Path) -> None:
        yaml_data = {
            "migration": {"chunk_size": 100},
            "books": [{"id": 7, "kind": "hadith", "input_path": "src.json"}],
        }
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump(yaml_data))

        config = load_config(config_file)
        assert config.migration.chunk_size == 100
        assert config.books[0].id == 7
        assert config.books[0].input_path == "src.json"
        # Other fields keep defaults
        assert config.migration.heading_lookahead_pages == 10

    def test_load_missing_yaml_uses_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path / "nonexistent.yaml")
        assert config.app.name == "Ilm Corpus Migration"

    def test_env_vars_set_credentials(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("{}")

        monkeypatch.setenv("HF_TOKEN", "hf-test-123")
        monkeypatch.setenv("HF_FILE_TEMPLATE", "org/repo/resolve/main/{{bookId}}.json")
        monkeypatch.setenv("ILMTEST_API_URL", "https://api.example.test")

        config = load_config(config_file)
        assert config.hf_token == "hf-test-123"
        assert config.hf_file_template == "org/repo/resolve/main/{{bookId}}.json"
        assert config.source.api_url == "https://api.example.test"

    def test_yaml_api_url_kept_without_env(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump({"source": {"api_url": "https://yaml.example.test"}}))

        config = load_config(config_file)
        assert config.source.api_url == "https://yaml.example.test"

    def test_load_project_config_yaml(self) -> None:
        """Test loading the actual project config.yaml."""
        config = load_config(Path(__file__).parent.parent / "config.yaml")
        assert config.migration.chunk_size == 500
        assert config.storage.data_dir == "./public/data"
