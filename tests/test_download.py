"""Tests for the source export downloader and the content API client."""

import io
import json
import zipfile
from pathlib import Path

import httpx
import pytest

from src.config import AppConfig, ConfigurationError
from src.ingestion.api import ContentApiClient
from src.ingestion.download import SourceDownloader

EXPORT = {"excerpts": [], "headings": []}


def _zip_bytes(members: dict[str, bytes]) -> bytes:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        for name, data in members.items():
            archive.writestr(name, data)
    return buffer.getvalue()


def _downloader(handler, template: str = "org/books/resolve/main/{{bookId}}.json") -> SourceDownloader:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return SourceDownloader(token="secret", template=template, base_url="https://hf.test/", client=client)


class TestSourceDownloader:
    """Test downloading source exports with a bearer token."""

    @pytest.mark.parametrize(("token", "template"), [(None, "x/{{bookId}}.json"), ("secret", None), ("", "")])
    def test_missing_credentials(self, token: str | None, template: str | None) -> None:
        with pytest.raises(ConfigurationError):
            SourceDownloader(token=token, template=template)

    def test_from_config_requires_credentials(self) -> None:
        with pytest.raises(ConfigurationError):
            SourceDownloader.from_config(AppConfig())

    def test_build_url(self) -> None:
        downloader = _downloader(lambda request: httpx.Response(200))
        assert downloader.build_url(2576) == "https://hf.test/org/books/resolve/main/2576.json"

    def test_downloads_json(self, tmp_path: Path) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=EXPORT)

        path = _downloader(handler).download(2576, tmp_path)

        assert path == tmp_path / "content-old.json"
        assert json.loads(path.read_text(encoding="utf-8")) == EXPORT
        assert seen[0].headers["Authorization"] == "Bearer secret"
        assert str(seen[0].url) == "https://hf.test/org/books/resolve/main/2576.json"

    def test_extracts_zip_and_removes_archive(self, tmp_path: Path) -> None:
        payload = _zip_bytes({"README.txt": b"x", "2576.json": json.dumps(EXPORT).encode("utf-8")})
        downloader = _downloader(
            lambda request: httpx.Response(200, content=payload), template="org/books/{{bookId}}.zip"
        )

        path = downloader.download(2576, tmp_path)

        assert path == tmp_path / "content-old.json"
        assert json.loads(path.read_text(encoding="utf-8")) == EXPORT
        assert not (tmp_path / "content.zip").exists()

    def test_zip_without_json_is_rejected(self, tmp_path: Path) -> None:
        payload = _zip_bytes({"README.txt": b"x"})
        downloader = _downloader(
            lambda request: httpx.Response(200, content=payload), template="org/books/{{bookId}}.zip"
        )
        with pytest.raises(FileNotFoundError):
            downloader.download(1, tmp_path)
        assert not (tmp_path / "content.zip").exists()

    def test_corrupt_zip(self, tmp_path: Path) -> None:
        downloader = _downloader(
            lambda request: httpx.Response(200, content=b"not a zip"), template="org/books/{{bookId}}.zip"
        )
        with pytest.raises(zipfile.BadZipFile):
            downloader.download(1, tmp_path)

    def test_http_error(self, tmp_path: Path) -> None:
        downloader = _downloader(lambda request: httpx.Response(404))
        with pytest.raises(httpx.HTTPStatusError):
            downloader.download(9999, tmp_path)
        assert not (tmp_path / "content-old.json").exists()


class TestContentApiClient:
    """Test the content API translator and entry endpoints."""

    def _client(self, handler) -> ContentApiClient:
        transport = httpx.MockTransport(handler)
        return ContentApiClient(None, client=httpx.Client(base_url="https://api.test", transport=transport))

    def test_requires_url(self) -> None:
        with pytest.raises(ConfigurationError):
            ContentApiClient(None)

    def test_translators(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/translators"
            assert request.url.params["limit"] == "-1"
            return httpx.Response(
                200,
                json=[
                    {"id": 13, "name": "Sahih International", "instagram": ""},
                    {"id": 873, "name": "Hadith translator", "instagram": "hadith_tr"},
                ],
            )

        translators = self._client(handler).get_translators()
        assert [t.id for t in translators] == [13, 873]
        assert translators[0].img is None
        assert translators[1].img == "hadith_tr"

    def test_entries(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/entries"
            assert request.url.params["collection"] == "1"
            assert request.url.params["full"] == "1"
            return httpx.Response(
                200,
                json=[
                    {"id": 60518, "ar_body": "الفاتحة", "body": "The Opening", "translator": 13,
                     "from_page": "1", "index_number": 1, "type": 1, "extra": "ignored"},
                    {"id": 1, "ar_body": "بِسْمِ", "body": "In the Name", "translator": 13,
                     "from_page": "1", "part_number": 1, "part_page": 1},
                ],
            )

        entries = self._client(handler).get_entries(1)
        assert [e.id for e in entries] == [60518, 1]
        assert entries[0].type == 1
        assert entries[1].part_page == 1

    def test_server_error(self) -> None:
        client = self._client(lambda request: httpx.Response(500))
        with pytest.raises(httpx.HTTPStatusError):
            client.get_translators()
