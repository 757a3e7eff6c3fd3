"""Named translator registry with a default translator.

The registry is a thin fan-out layer: it maps names to ``Translator``
instances, broadcasts language changes to all of them and forwards
``translate`` calls to the default translator.  It is an ordinary object
meant to be created once and passed around, not a process-wide global.
"""

from __future__ import annotations

import logging
import threading
import weakref
from typing import Any

from langdesk.i18n.translator import Translator

logger = logging.getLogger(__name__)


class TranslatorRegistry:
    """Directory of translators keyed by name."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._entries: dict[str, Translator] = {}
        self._default: weakref.ref[Translator] | None = None
        self._language: str | None = None

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        with self._lock:
            return name in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def names(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(self._entries)

    # ------------------------------------------------------------------
    # Entries
    # ------------------------------------------------------------------

    def register(self, name: str, translator: Translator) -> bool:
        """Bind *translator* to *name*, replacing any previous binding.

        Returns:
            ``False`` if *name* is not a non-empty string or *translator*
            is not a ``Translator``.
        """
        if not isinstance(name, str) or not name or not isinstance(translator, Translator):
            return False
        with self._lock:
            self._entries[name] = translator
        logger.debug("Registered translator", extra={"event": "translator_registered", "translator": name})
        return True

    def unregister(self, target: str | Translator) -> bool:
        """Remove a translator by name, or every name bound to an instance.

        The default translator pointer is left untouched.

        Returns:
            ``True`` if at least one entry was removed.
        """
        with self._lock:
            if isinstance(target, str):
                removed = [target] if self._entries.pop(target, None) is not None else []
            elif isinstance(target, Translator):
                removed = [name for name, tr in self._entries.items() if tr is target]
                for name in removed:
                    del self._entries[name]
            else:
                removed = []

        for name in removed:
            logger.debug("Unregistered translator", extra={"event": "translator_unregistered", "translator": name})
        return bool(removed)

    def get(self, name: str) -> Translator | None:
        """Return the translator bound to *name*; ``None`` for unknown or non-str names."""
        if not isinstance(name, str):
            return None
        with self._lock:
            return self._entries.get(name)

    # ------------------------------------------------------------------
    # Default translator
    # ------------------------------------------------------------------

    def set_default_translator(self, target: str | Translator) -> bool:
        """Point the default at a registered name or a ``Translator``.

        Only a weak reference is kept, so an unregistered translator used
        as the default must be kept alive by the caller.

        Returns:
            ``False`` (default unchanged) for unknown names and
            non-translator values.
        """
        with self._lock:
            if isinstance(target, str):
                translator = self._entries.get(target)
            elif isinstance(target, Translator):
                translator = target
            else:
                translator = None

            if translator is None:
                return False
            self._default = weakref.ref(translator)
        return True

    def get_default_translator(self) -> Translator | None:
        with self._lock:
            return self._default() if self._default is not None else None

    # ------------------------------------------------------------------
    # Language broadcast
    # ------------------------------------------------------------------

    def set_language(self, lang: str | None) -> None:
        """Set *lang* on every registered translator."""
        with self._lock:
            for translator in self._entries.values():
                translator.set_language(lang)
            self._language = lang
        logger.debug("Language switched", extra={"event": "language_changed", "language": lang})

    def get_language(self) -> str | None:
        """Return the language last broadcast with ``set_language``."""
        with self._lock:
            return self._language

    # ------------------------------------------------------------------
    # Translation
    # ------------------------------------------------------------------

    def translate(self, key: Any, *args: Any) -> str:
        """Translate through the default translator, or echo *key*."""
        translator = self.get_default_translator()
        if translator is None:
            return key if isinstance(key, str) else str(key)
        return translator.translate(key, *args)

    _ = translate
