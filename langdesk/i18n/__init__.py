"""Runtime translation lookup.

Provides ``Translator`` (sectioned ``(language, key)`` index with
``{N}`` placeholder substitution) and ``TranslatorRegistry`` (named
translators plus a default one).

Fallback behaviour:
- No active language → the key is returned unchanged.
- Unknown key or section → the key itself (placeholders still filled).

Usage::

    from langdesk.i18n import Translator, TranslatorRegistry, t

    registry = TranslatorRegistry()
    fi = Translator("fi", [{"key": "Hello {0}", "lang": "fi", "value": "Hei {0}"}])
    registry.register("main", fi)
    registry.set_default_translator("main")

    t("Hello {0}", ["Ada"], registry=registry)   # → "Hei Ada"
"""

from __future__ import annotations

from typing import Any

from langdesk.i18n.loader import RecordFileError, parse_records, read_records
from langdesk.i18n.records import TranslationRecord
from langdesk.i18n.registry import TranslatorRegistry
from langdesk.i18n.translator import SectionIndex, Translator, format_placeholders


def t(key: Any, *args: Any, registry: TranslatorRegistry) -> str:
    """Translate *key* through *registry*'s default translator.

    Accepts the same positional forms as ``Translator.translate``.
    """
    return registry.translate(key, *args)


__all__ = [
    "RecordFileError",
    "SectionIndex",
    "TranslationRecord",
    "Translator",
    "TranslatorRegistry",
    "format_placeholders",
    "parse_records",
    "read_records",
    "t",
]
