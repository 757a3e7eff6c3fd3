"""Read translation records from JSON.

The expected document is a JSON array of record objects::

    [
        {"key": "a", "lang": "fi", "value": "a fi"},
        {"key": "b", "lang": "fi", "value": "b test fi", "section": "test"}
    ]

Unlike ``Translator.add_translations`` (which reports bad input with a
``False`` return), the loader raises ``RecordFileError`` so that a broken
translation file is noticed at startup.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from langdesk.i18n.records import TranslationRecord, validate_records

logger = logging.getLogger(__name__)


class RecordFileError(ValueError):
    """Raised when a translation document cannot be turned into records."""


def parse_records(text: str) -> list[TranslationRecord]:
    """Parse a JSON array of records.

    Raises:
        RecordFileError: On invalid JSON, a non-array document or invalid records.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise RecordFileError(f"invalid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise RecordFileError(f"expected a JSON array of records, got {type(data).__name__}")

    try:
        return validate_records(data)
    except ValidationError as exc:
        raise RecordFileError(f"{exc.error_count()} invalid record(s): {exc}") from exc


def read_records(path: str | Path) -> list[TranslationRecord]:
    """Read and parse a UTF-8 JSON record file.

    Raises:
        RecordFileError: If the file is missing or its content is invalid.
    """
    path = Path(path)
    if not path.is_file():
        raise RecordFileError(f"translation file not found: {path}")

    records = parse_records(path.read_text(encoding="utf-8"))
    logger.info(
        "Read %d record(s) from %s",
        len(records),
        path,
        extra={"event": "records_read", "record_count": len(records)},
    )
    return records
