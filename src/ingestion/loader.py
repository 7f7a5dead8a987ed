"""Loading of source exports from disk."""

import json
import logging
from pathlib import Path
from typing import Any, Literal

import chardet
from pydantic import ValidationError

from src.ingestion.adapters import (
    hf_entry,
    hf_heading,
    legacy_hadith_entry,
    legacy_hadith_heading,
    legacy_quran_surah,
    legacy_quran_verse,
)
from src.models.book import Translator, TranslatorsManifest
from src.models.source import (
    HFExport,
    LegacyHadithExcerpt,
    LegacyHadithHeading,
    LegacyQuranExcerpt,
    LegacyQuranHeading,
    SourceEntry,
    SourceHeading,
    SourceSurah,
    SourceVerse,
)

logger = logging.getLogger(__name__)

SourceShape = Literal["hf", "legacy"]


class SourceFormatError(ValueError):
    """Raised when a source export does not match any known shape."""


def read_text(file_path: Path) -> str:
    """Read a source file, detecting its encoding if it is not UTF-8.

    Args:
        file_path: Path to the file.

    Returns:
        The decoded content.
    """
    try:
        return file_path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError:
        pass

    raw_bytes = file_path.read_bytes()
    detected = chardet.detect(raw_bytes)
    encoding = detected.get("encoding") or "utf-8"
    confidence = detected.get("confidence") or 0

    if confidence < 0.7:
        logger.warning(
            "Low confidence encoding detection for %s: %s (%.0f%%)",
            file_path,
            encoding,
            confidence * 100,
        )

    try:
        return raw_bytes.decode(encoding)
    except (UnicodeDecodeError, LookupError):
        # Last resort: windows-1256 is the common Arabic code page
        return raw_bytes.decode("windows-1256", errors="replace")


def read_json(file_path: str | Path) -> Any:
    """Parse a JSON source file.

    Raises:
        FileNotFoundError: If file_path does not exist.
        SourceFormatError: If the file is not valid JSON.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    try:
        return json.loads(read_text(path))
    except json.JSONDecodeError as exc:
        raise SourceFormatError(f"Invalid JSON in {path}: {exc}") from exc


def detect_shape(data: Any) -> SourceShape:
    """Tell a HuggingFace export (``excerpts``) from a legacy one (``content``)."""
    if isinstance(data, dict):
        if isinstance(data.get("excerpts"), list):
            return "hf"
        if isinstance(data.get("content"), list):
            return "legacy"
    raise SourceFormatError("Unrecognized source format: expected an 'excerpts' or 'content' array")


def load_hadith_source(file_path: str | Path) -> tuple[list[SourceEntry], list[SourceHeading]]:
    """Load a hadith collection export of either known shape.

    Args:
        file_path: Path to the JSON export.

    Returns:
        Tuple of (entries, headings) as canonical records.

    Raises:
        SourceFormatError: If the file matches no known shape.
    """
    data = read_json(file_path)
    shape = detect_shape(data)
    logger.info("Loading %s hadith export from %s", shape, file_path)

    try:
        if shape == "hf":
            export = HFExport.model_validate(data)
            return (
                [hf_entry(e) for e in export.excerpts],
                [hf_heading(h) for h in export.headings],
            )

        entries = [legacy_hadith_entry(LegacyHadithExcerpt.model_validate(e)) for e in data["content"]]
        headings = [
            legacy_hadith_heading(LegacyHadithHeading.model_validate(h))
            for h in data.get("headings") or []
        ]
        return entries, headings
    except ValidationError as exc:
        raise SourceFormatError(f"Malformed {shape} export {file_path}: {exc}") from exc


def load_quran_source(file_path: str | Path) -> tuple[list[SourceVerse], list[SourceSurah]]:
    """Load a legacy Qur'an export (``{"content": [...], "headings": [...]}``)."""
    data = read_json(file_path)
    if detect_shape(data) != "legacy":
        raise SourceFormatError(f"Expected a legacy Qur'an export in {file_path}")

    try:
        verses = [legacy_quran_verse(LegacyQuranExcerpt.model_validate(e)) for e in data["content"]]
        surahs = [legacy_quran_surah(LegacyQuranHeading.model_validate(h)) for h in data.get("headings") or []]
    except ValidationError as exc:
        raise SourceFormatError(f"Malformed Qur'an export {file_path}: {exc}") from exc
    return verses, surahs


def load_translators(file_path: str | Path) -> list[Translator]:
    """Load a translator directory (``{"translators": [...]}``)."""
    return TranslatorsManifest.model_validate(read_json(file_path)).translators
