"""Work catalogue (single source of truth) for the portfolio site.

This module is the facade page-rendering code imports from:
- core.py: record types (Project, ImageDescriptor, WorkSummary ...)
- images.py: image descriptor builders
- registry.py: registration used by definitions/
- store.py: the immutable WorkCatalog and its queries
- definitions/: one module per work

``get_catalog()`` builds the process-wide catalogue once. The module-level
query functions read from it; code that wants an explicit dependency can
take a ``WorkCatalog`` instead.
"""

from __future__ import annotations

from functools import lru_cache
from typing import List, Optional, Union

# Trigger work registration by importing definitions package
from . import definitions  # noqa: F401
from work_catalog.config import get_settings
from work_catalog.utils.logging import get_logger

from .core import Project, WorkCategory, WorkSummary
from .loader import load_extra_works
from .registry import registered_works
from .store import WorkCatalog

logger = get_logger(__name__)


def build_catalog(include_extra: bool = True) -> WorkCatalog:
    """Build a catalogue from the registered definitions.

    When ``include_extra`` is set and ``WCAT_EXTRA_WORKS_FILE`` is configured,
    the works from that file are appended after the built-in ones.
    """
    works = list(registered_works())
    extra_path = get_settings().extra_works_path if include_extra else None
    if extra_path is not None:
        works.extend(load_extra_works(extra_path))

    catalog = WorkCatalog(works)
    logger.info(
        "catalog.built",
        work_count=len(catalog),
        categories=catalog.category_counts(),
        environment=get_settings().ENVIRONMENT,
    )
    return catalog


@lru_cache()
def get_catalog() -> WorkCatalog:
    """Get the cached process-wide catalogue."""
    return build_catalog()


def list_all() -> List[Project]:
    return get_catalog().list_all()


def list_by_category(category: Union[WorkCategory, str]) -> List[Project]:
    return get_catalog().list_by_category(category)


def list_products() -> List[Project]:
    return get_catalog().list_products()


def list_uiux() -> List[Project]:
    return get_catalog().list_uiux()


def list_3d() -> List[Project]:
    return get_catalog().list_3d()


def get_by_slug(slug: str) -> Optional[Project]:
    return get_catalog().get_by_slug(slug)


def list_all_slugs() -> List[str]:
    return get_catalog().list_all_slugs()


def list_summaries() -> List[WorkSummary]:
    return get_catalog().list_summaries()


__all__ = [
    "build_catalog",
    "get_catalog",
    "list_all",
    "list_by_category",
    "list_products",
    "list_uiux",
    "list_3d",
    "get_by_slug",
    "list_all_slugs",
    "list_summaries",
]
