"""Portfolio work catalogue.

Importing this package registers every work definition; queries read the
immutable catalogue returned by ``get_catalog()``.
"""

from .core import ImageDescriptor, Project, ProjectAbout, WorkCategory, WorkSummary
from .errors import CatalogError
from .images import (
    build_image_descriptor,
    build_large_image,
    build_responsive_variants,
    build_secondary_image,
)
from .store import WorkCatalog
from .works import (
    build_catalog,
    get_by_slug,
    get_catalog,
    list_3d,
    list_all,
    list_all_slugs,
    list_by_category,
    list_products,
    list_summaries,
    list_uiux,
)

__all__ = [
    "WorkCategory",
    "ImageDescriptor",
    "ProjectAbout",
    "Project",
    "WorkSummary",
    "CatalogError",
    "WorkCatalog",
    "build_responsive_variants",
    "build_image_descriptor",
    "build_large_image",
    "build_secondary_image",
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
