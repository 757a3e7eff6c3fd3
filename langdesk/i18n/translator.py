"""Sectioned in-memory translator.

Translations are indexed by ``(language, key)`` inside sections: one
unnamed default section plus any number of named ones.  Lookups never
fail: a missing translation, a missing section or a disabled language
all resolve to the key itself.

Usage::

    from langdesk.i18n import Translator

    tr = Translator(
        language="fi",
        records=[
            {"key": "a", "lang": "fi", "value": "a fi"},
            {"key": "b", "lang": "fi", "value": "b test fi", "section": "test"},
            {"key": "Hello {0}", "lang": "fi", "value": "Hei {0}"},
        ],
    )

    tr.translate("a")                   # → "a fi"
    tr.translate("b", "test")           # → "b test fi"
    tr.translate("Hello {0}", ["Ada"])  # → "Hei Ada"
    tr.translate("missing")             # → "missing"
"""

from __future__ import annotations

import logging
import re
import threading
from collections.abc import Callable, Sequence
from typing import Any

from pydantic import ValidationError

from langdesk.i18n.records import TranslationRecord, is_record_sequence, validate_records

logger = logging.getLogger(__name__)

# (language, key) → translated value
SectionIndex = dict[tuple[str, str], str]

LoadListener = Callable[[str | None], None]

_PLACEHOLDER = re.compile(r"\{(\d+)\}")


def format_placeholders(text: str, params: Sequence[Any]) -> str:
    """Replace ``{N}`` tokens in *text* with ``str(params[N])``.

    Tokens without a matching param are left as they are.
    """

    def _sub(match: re.Match[str]) -> str:
        index = int(match.group(1))
        if index < len(params):
            return str(params[index])
        return match.group(0)

    return _PLACEHOLDER.sub(_sub, text)


def _is_params(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def resolve_arguments(args: tuple[Any, ...]) -> tuple[Sequence[Any] | None, str | None]:
    """Map the positional tail of ``translate(key, ...)`` to ``(params, section)``.

    - ``()`` → no params, default section.
    - ``(x,)`` → params when *x* is a list/tuple, else section name *x*.
    - ``(x, y)`` → params when *x* is a list/tuple; section when *y* is a str.
      Whatever does not match is dropped.
    - anything longer → no params, default section.
    """
    if len(args) == 1:
        (arg,) = args
        if _is_params(arg):
            return arg, None
        return None, arg if arg is None else str(arg)
    if len(args) == 2:
        first, second = args
        params = first if _is_params(first) else None
        section = second if isinstance(second, str) else None
        return params, section
    return None, None


class Translator:
    """Translation index for one set of messages.

    Args:
        language: Initially active language; ``None`` disables translation.
        records: Optional initial batch passed to ``add_translations``.
    """

    def __init__(
        self,
        language: str | None = None,
        records: Sequence[TranslationRecord | dict[str, Any]] | None = None,
    ) -> None:
        self._lock = threading.RLock()
        self._language: str | None = language or None
        self._default_section: SectionIndex = {}
        self._sections: dict[str, SectionIndex] = {}
        self._listeners: list[LoadListener] = []

        if records is not None:
            self.add_translations(records)

    def __repr__(self) -> str:
        return f"<Translator language={self._language!r} sections={len(self._sections)}>"

    # ------------------------------------------------------------------
    # Language
    # ------------------------------------------------------------------

    def set_language(self, lang: str | None) -> None:
        """Switch the language used by future lookups.

        Stored translations are not touched.
        """
        with self._lock:
            self._language = lang

    def get_language(self) -> str | None:
        with self._lock:
            return self._language

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    def get_section(self, name: str | None = None) -> SectionIndex:
        """Return section *name*, creating it when absent.

        Without a name the default section is returned.
        """
        if not name:
            return self._default_section
        with self._lock:
            section = self._sections.get(name)
            if section is None:
                section = self._sections[name] = {}
            return section

    def find_section(self, name: str | None = None) -> SectionIndex | None:
        """Return section *name* or ``None``; never creates anything."""
        if not name:
            return self._default_section
        with self._lock:
            return self._sections.get(name)

    def has_section(self, name: str) -> bool:
        with self._lock:
            return name in self._sections

    def section_names(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(sorted(self._sections))

    def available_languages(self) -> tuple[str, ...]:
        """Languages with at least one stored translation, sorted."""
        with self._lock:
            languages = {lang for lang, _ in self._default_section}
            for section in self._sections.values():
                languages.update(lang for lang, _ in section)
        return tuple(sorted(languages))

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def add_load_listener(self, listener: LoadListener) -> None:
        """Call *listener* with the current language after every load."""
        with self._lock:
            self._listeners.append(listener)

    def remove_load_listener(self, listener: LoadListener) -> bool:
        with self._lock:
            try:
                self._listeners.remove(listener)
            except ValueError:
                return False
            return True

    def add_translations(
        self,
        records: Sequence[TranslationRecord | dict[str, Any]],
        fallback_language: str | None = None,
    ) -> bool:
        """Merge a batch of records into the index.

        Records without ``lang`` use *fallback_language*, then the current
        language, then ``""``.  That default is resolved once for the whole
        batch.  Later writes to the same ``(language, key, section)`` win.

        Returns:
            ``False`` (and nothing is stored) when *records* is not a
            sequence of valid records, ``True`` otherwise.
        """
        if not is_record_sequence(records):
            logger.warning(
                "Rejected translation batch of type %s",
                type(records).__name__,
                extra={"event": "translations_rejected"},
            )
            return False

        try:
            batch = validate_records(records)
        except ValidationError as exc:
            logger.warning(
                "Rejected translation batch: %d invalid record(s)",
                exc.error_count(),
                extra={"event": "translations_rejected"},
            )
            return False

        with self._lock:
            default_lang = fallback_language or self._language or ""
            for record in batch:
                section = self.get_section(record.section)
                section[(record.lang or default_lang, record.key)] = record.value
            language = self._language
            listeners = list(self._listeners)

        logger.info(
            "Loaded %d translation(s)",
            len(batch),
            extra={"event": "translations_loaded", "language": language, "record_count": len(batch)},
        )

        for listener in listeners:
            try:
                listener(language)
            except Exception:
                logger.exception(
                    "Load listener %r failed",
                    listener,
                    extra={"event": "load_listener_failed", "language": language},
                )
        return True

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def lookup(
        self,
        key: Any,
        *,
        params: Sequence[Any] | None = None,
        section: str | None = None,
    ) -> str:
        """Translate *key* with explicit options.

        Args:
            key: Message key; non-strings are converted with ``str()``.
            params: Values for ``{0}``, ``{1}``, … placeholders.
            section: Section name; ``None`` means the default section.

        Returns:
            The translation, or *key* when there is none.  With no active
            language *key* is returned as is, without substitution.
        """
        text = key if isinstance(key, str) else str(key)

        with self._lock:
            language = self._language
            if not language:
                return text
            index = self.find_section(section)
            result = index.get((language, text), text) if index is not None else text

        if params is not None:
            result = format_placeholders(result, params)
        return result

    def translate(self, key: Any, *args: Any) -> str:
        """Translate *key*; see ``resolve_arguments`` for the accepted forms.

        ``translate(key)``, ``translate(key, params)``,
        ``translate(key, section)``, ``translate(key, params, section)``.
        """
        params, section = resolve_arguments(args)
        return self.lookup(key, params=params, section=section)

    _ = translate
