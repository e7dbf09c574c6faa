"""JSON export of the catalogue for front-end consumers.

The document mirrors the two structures the site reads: ``works`` (slug to
full detail record) and ``worksData`` (listing summaries). Field names use
the camelCase aliases and ``None`` fields are omitted, so secondary images
carry no ``width``/``height`` keys.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Union

from work_catalog.utils.logging import get_logger

from .core import Project, WorkSummary
from .store import WorkCatalog

logger = get_logger(__name__)


def project_to_dict(project: Project) -> Dict[str, Any]:
    return project.model_dump(mode="json", by_alias=True, exclude_none=True)


def summary_to_dict(summary: WorkSummary) -> Dict[str, Any]:
    return summary.model_dump(mode="json", by_alias=True)


def export_catalog(catalog: WorkCatalog) -> Dict[str, Any]:
    return {
        "works": {work.id: project_to_dict(work) for work in catalog.list_all()},
        "worksData": [summary_to_dict(s) for s in catalog.list_summaries()],
    }


def write_catalog_json(catalog: WorkCatalog, path: Union[str, Path]) -> Path:
    """Write the export document to ``path`` and return the resolved path."""
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    document = export_catalog(catalog)
    output_path.write_text(
        json.dumps(document, ensure_ascii=False, indent=2) + "\n", encoding="utf-8"
    )
    logger.info("catalog.exported", path=str(output_path), work_count=len(catalog))
    return output_path


__all__ = [
    "project_to_dict",
    "summary_to_dict",
    "export_catalog",
    "write_catalog_json",
]
