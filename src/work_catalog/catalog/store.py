"""Immutable work catalogue and its read-only queries.

A ``WorkCatalog`` is built once from a sequence of projects and never
changes afterwards, so it can be shared between callers (and threads)
without coordination. Lookups fail soft: a missing slug is ``None`` and a
category without works is an empty list.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

from work_catalog.utils.logging import get_logger

from .core import Project, WorkCategory, WorkSummary
from .errors import CatalogError

logger = get_logger(__name__)


class WorkCatalog:
    """Read-only slug to Project mapping with listing helpers."""

    def __init__(self, works: Iterable[Project]):
        by_slug: Dict[str, Project] = {}
        for work in works:
            if work.id in by_slug:
                raise CatalogError(
                    f"Duplicate work id '{work.id}' in catalogue",
                    slug=work.id,
                    reason="duplicate",
                )
            by_slug[work.id] = work
        self._works: Mapping[str, Project] = MappingProxyType(by_slug)
        self._summaries: Tuple[WorkSummary, ...] = tuple(
            WorkSummary.from_project(work) for work in by_slug.values()
        )

    @property
    def works(self) -> Mapping[str, Project]:
        return self._works

    def __len__(self) -> int:
        return len(self._works)

    def __contains__(self, slug: object) -> bool:
        return slug in self._works

    def __repr__(self) -> str:
        return f"WorkCatalog({len(self)} works)"

    def list_all(self) -> List[Project]:
        """Every work in catalogue order."""
        return list(self._works.values())

    def list_by_category(self, category: Union[WorkCategory, str]) -> List[Project]:
        """Works whose category equals ``category``, in catalogue order.

        Values outside the enumeration simply match nothing.
        """
        return [work for work in self._works.values() if work.category == category]

    def list_products(self) -> List[Project]:
        return self.list_by_category(WorkCategory.PRODUCTS)

    def list_uiux(self) -> List[Project]:
        return self.list_by_category(WorkCategory.UIUX)

    def list_3d(self) -> List[Project]:
        return self.list_by_category(WorkCategory.THREE_D)

    def get_by_slug(self, slug: str) -> Optional[Project]:
        """Exact-match lookup; ``None`` when no work has that slug."""
        work = self._works.get(slug)
        if work is None:
            logger.debug("catalog.lookup_miss", slug=slug)
        return work

    def list_all_slugs(self) -> List[str]:
        return list(self._works.keys())

    def list_summaries(self) -> List[WorkSummary]:
        """Listing projection, derived once when the catalogue was built."""
        return list(self._summaries)

    def category_counts(self) -> Dict[str, int]:
        counts = {category.value: 0 for category in WorkCategory}
        for work in self._works.values():
            counts[work.category.value] += 1
        return counts


__all__ = ["WorkCatalog"]
