"""Registry factory.

Builds a ``TranslatorRegistry`` from ``Settings``:
- the ``langdesk`` logger at ``LOG_LEVEL``
- one translator with ``DEFAULT_LANGUAGE`` as its active language
- records preloaded from ``TRANSLATIONS_FILE`` (when set)
- registered under ``DEFAULT_TRANSLATOR`` and made the default
"""

from __future__ import annotations

import logging

from langdesk.core.config import Settings
from langdesk.core.logging import setup_logging
from langdesk.i18n.loader import read_records
from langdesk.i18n.registry import TranslatorRegistry
from langdesk.i18n.translator import Translator

logger = logging.getLogger(__name__)


def create_translator(settings: Settings) -> Translator:
    """Create the default ``Translator`` described by *settings*.

    Raises:
        RecordFileError: If ``TRANSLATIONS_FILE`` is set but unreadable.
    """
    translator = Translator(language=settings.initial_language)
    if settings.TRANSLATIONS_FILE:
        translator.add_translations(read_records(settings.TRANSLATIONS_FILE))
    return translator


def create_registry(settings: Settings) -> TranslatorRegistry:
    """Create a registry whose default translator is configured by *settings*.

    Args:
        settings: Library settings.

    Returns:
        A ready-to-use ``TranslatorRegistry``.
    """
    setup_logging(settings.LOG_LEVEL)

    registry = TranslatorRegistry()
    translator = create_translator(settings)

    registry.register(settings.DEFAULT_TRANSLATOR, translator)
    registry.set_default_translator(settings.DEFAULT_TRANSLATOR)
    if settings.initial_language is not None:
        registry.set_language(settings.initial_language)

    logger.info(
        "Translator registry ready",
        extra={
            "event": "registry_ready",
            "translator": settings.DEFAULT_TRANSLATOR,
            "language": settings.initial_language,
        },
    )
    return registry
