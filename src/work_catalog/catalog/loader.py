"""
Loader for additional works kept in a YAML file.

The file lists works by slug using the same field names as the catalogue
(camelCase or snake_case). Images are written as ``{src, alt}`` pairs and
expanded with the shared builders, so loaded works get the same responsive
configuration as the built-in definitions:

    works:
      my-new-project:
        title: My New Project
        category: uiux
        heroImage: {src: /New/Hero.png, alt: New project hero}
        ...
"""

from pathlib import Path
from typing import Any, Callable, Dict, List, Tuple, Union

import yaml
from pydantic import ValidationError

from work_catalog.utils.logging import get_logger

from .core import ImageDescriptor, Project
from .errors import CatalogError
from .images import build_large_image, build_secondary_image

logger = get_logger(__name__)

ImageBuilder = Callable[[str, str], ImageDescriptor]

# (attribute name, alias, builder)
IMAGE_FIELDS: Tuple[Tuple[str, str, ImageBuilder], ...] = (
    ("hero_image", "heroImage", build_large_image),
    ("secondary_image", "secondaryImage", build_secondary_image),
    ("process_image", "processImage", build_secondary_image),
    ("closing_image", "closingImage", build_large_image),
)


def _expand_images(slug: str, record: Dict[str, Any]) -> Dict[str, Any]:
    expanded = dict(record)
    for name, alias, builder in IMAGE_FIELDS:
        key = alias if alias in expanded else name
        if key not in expanded:
            continue
        image = expanded.pop(key)
        if not isinstance(image, dict) or "src" not in image or "alt" not in image:
            raise CatalogError(
                f"Work '{slug}': {alias} must be a mapping with 'src' and 'alt'",
                slug=slug,
                reason="invalid_image",
            )
        expanded[name] = builder(str(image["src"]), str(image["alt"]))
    return expanded


def _build_project(slug: str, record: Any) -> Project:
    if not isinstance(record, dict):
        raise CatalogError(
            f"Work '{slug}' must be a mapping, got {type(record).__name__}",
            slug=slug,
            reason="invalid_record",
        )

    record_id = record.get("id", slug)
    if record_id != slug:
        raise CatalogError(
            f"Work key '{slug}' does not match its id '{record_id}'",
            slug=slug,
            reason="id_mismatch",
        )

    fields = _expand_images(slug, record)
    fields["id"] = slug
    try:
        return Project(**fields)
    except ValidationError as e:
        raise CatalogError(
            f"Work '{slug}' failed validation: {e}", slug=slug, reason="validation"
        ) from e


def load_extra_works(path: Union[str, Path]) -> List[Project]:
    """
    Load and validate additional works from a YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        Projects in file order

    Raises:
        CatalogError: If the file is missing, unreadable or any work is invalid
    """
    config_path = Path(path)

    if not config_path.exists():
        raise CatalogError(f"Extra works file not found: {config_path}", reason="missing_file")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise CatalogError(f"Invalid YAML in extra works file: {e}", reason="invalid_yaml") from e
    except OSError as e:
        raise CatalogError(f"Failed to read extra works file: {e}", reason="unreadable") from e

    if not isinstance(data, dict):
        raise CatalogError("Extra works file must be a mapping", reason="invalid_structure")

    works = data.get("works") or {}
    if not isinstance(works, dict):
        raise CatalogError("'works' must map slugs to work records", reason="invalid_structure")

    projects = [_build_project(str(slug), record) for slug, record in works.items()]
    logger.info(
        "catalog.extra_works_loaded",
        path=str(config_path),
        work_count=len(projects),
        slugs=[p.id for p in projects],
    )
    return projects


__all__ = ["load_extra_works"]
