"""Catalog construction errors.

Lookups never raise; these errors are only raised while the catalogue is
being assembled (registration, extra works loading).
"""

from typing import Dict, Optional


class CatalogError(Exception):
    """Structured error for catalogue construction failures."""

    def __init__(self, message: str, slug: Optional[str] = None, reason: str = "invalid"):
        self.slug = slug
        self.reason = reason
        super().__init__(message)

    def to_dict(self) -> Dict[str, Optional[str]]:
        """Convert to structured dict for logging."""
        return {
            "error_type": "CatalogError",
            "slug": self.slug,
            "reason": self.reason,
            "message": str(self),
        }
