"""Work registry populated by the definitions package.

Each module under ``definitions/`` calls ``register_work`` at import time.
The registry is only written while definitions are imported; the catalogue
served to consumers is an immutable snapshot taken by ``store.WorkCatalog``.
"""

from __future__ import annotations

from typing import Dict, Tuple

from .core import Project
from .errors import CatalogError

_WORK_REGISTRY: Dict[str, Project] = {}


def register_work(project: Project) -> None:
    """Register a work in the global registry, keyed by its ``id``."""
    if project.id in _WORK_REGISTRY:
        raise CatalogError(
            f"Work '{project.id}' is already registered. Use a different id.",
            slug=project.id,
            reason="duplicate",
        )
    _WORK_REGISTRY[project.id] = project


def registered_works() -> Tuple[Project, ...]:
    """All registered works in registration order."""
    return tuple(_WORK_REGISTRY.values())


__all__ = [
    "register_work",
    "registered_works",
]
