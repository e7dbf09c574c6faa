"""Pytest configuration shared by the WorkCatalog suites.

Settings and the process-wide catalogue are cached with ``lru_cache``; every
test starts from a clean cache and without catalogue-related environment
overrides so results never depend on the developer's shell.
"""

from __future__ import annotations

from typing import Generator

import pytest

from work_catalog.catalog import get_catalog
from work_catalog.config import get_settings

_CATALOG_ENV_VARS = (
    "WCAT_EXTRA_WORKS_FILE",
    "WCAT_EXPORT_PATH",
    "WCAT_LOG_TO_FILE",
    "WCAT_LOG_FILE_DIR",
    "ENVIRONMENT",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolated_catalog_state(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear cached settings/catalogue and scrub overriding env vars."""
    for name in _CATALOG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    get_catalog.cache_clear()
    yield
    get_settings.cache_clear()
    get_catalog.cache_clear()
