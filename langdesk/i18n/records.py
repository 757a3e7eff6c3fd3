"""Translation record model.

A record is the bulk-load format consumed by ``Translator.add_translations``
(typically one element of a JSON array)::

    {"key": "Save", "value": "Tallenna", "lang": "fi", "section": "toolbar"}

``lang`` and ``section`` are optional.  Empty strings behave like absent
values: the record falls back to the load-time language and lands in the
default section.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, TypeAdapter


class TranslationRecord(BaseModel):
    """A single (key, value) pair, optionally scoped to a language and section."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    key: str
    value: str
    lang: str | None = None
    section: str | None = None


_RECORD_LIST = TypeAdapter(list[TranslationRecord])


def is_record_sequence(data: Any) -> bool:
    """Return ``True`` if *data* has the outer shape of a record batch.

    Strings, bytes and mappings are sequences/iterables in Python but
    never a valid batch.
    """
    if isinstance(data, (str, bytes, bytearray, Mapping)):
        return False
    return isinstance(data, Sequence)


def validate_records(data: Any) -> list[TranslationRecord]:
    """Validate a whole batch up front.

    Raises:
        pydantic.ValidationError: If any element is not a valid record.
    """
    return _RECORD_LIST.validate_python(list(data))
