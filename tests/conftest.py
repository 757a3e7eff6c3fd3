"""Shared test fixtures.

``records`` is a small Finnish/German catalog with one named section
(``"test"``) and placeholder entries in both the default and the named
section.
"""

from __future__ import annotations

import logging

import pytest

from langdesk.core.config import get_settings
from langdesk.i18n import Translator


@pytest.fixture
def records() -> list[dict[str, str]]:
    return [
        {"key": "a", "lang": "fi", "value": "a fi"},
        {"key": "b", "lang": "fi", "value": "b fi"},
        {"key": "b", "lang": "de", "value": "b de"},
        {"key": "b", "section": "test", "lang": "fi", "value": "b test fi"},
        {"key": "foo {0} bar {1} baz {2}", "lang": "fi", "value": "aaa {0} bbb {1} ccc {2}"},
        {"key": "foo {0} bar {1} baz {2}", "section": "test", "lang": "fi", "value": "xxx {0} yyy {1} zzz {2}"},
    ]


@pytest.fixture
def translator(records: list[dict[str, str]]) -> Translator:
    """A Finnish translator preloaded with ``records``."""
    return Translator(language="fi", records=records)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def langdesk_logger():
    """Yield the library logger and restore its configuration afterwards."""
    logger = logging.getLogger("langdesk")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield logger
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]
