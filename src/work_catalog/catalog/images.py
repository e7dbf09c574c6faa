"""Image descriptor builders.

Catalog definitions only supply an image URL and alt text; the responsive
``srcSet`` and ``sizes`` configuration is derived here so every image in the
catalogue is configured the same way.

Use ``build_large_image`` for hero and closing images (2400x1600) and
``build_secondary_image`` for secondary and process images (no dimensions).
"""

from __future__ import annotations

from typing import Optional

from .core import ImageDescriptor

SCALE_DOWN_WIDTHS = (512, 1024, 2048, 4096)
ORIGINAL_WIDTH_LABEL = 4500
DEFAULT_SIZING_HINT = "calc(100vw - 24px)"

LARGE_IMAGE_WIDTH = 2400
LARGE_IMAGE_HEIGHT = 1600


def build_responsive_variants(source: str) -> str:
    """Build the ``srcSet`` string for an image URL.

    The image backend understands a ``scale-down-to`` query parameter; the
    unscaled original is listed last at 4500w.

    Example:
        >>> build_responsive_variants("/a.png").split(",")[0]
        '/a.png?scale-down-to=512 512w'
    """
    variants = [f"{source}?scale-down-to={width} {width}w" for width in SCALE_DOWN_WIDTHS]
    variants.append(f"{source} {ORIGINAL_WIDTH_LABEL}w")
    return ",".join(variants)


def build_image_descriptor(
    source: str,
    alt_text: str,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> ImageDescriptor:
    """Create a complete ImageDescriptor with the standard responsive configuration.

    Dimensions are only included when truthy; ``0`` is treated as absent.
    """
    fields = {
        "source": source,
        "responsive_variants": build_responsive_variants(source),
        "alt_text": alt_text,
        "sizing_hint": DEFAULT_SIZING_HINT,
    }
    if width:
        fields["width"] = width
    if height:
        fields["height"] = height
    return ImageDescriptor(**fields)


def build_large_image(source: str, alt_text: str) -> ImageDescriptor:
    return build_image_descriptor(source, alt_text, LARGE_IMAGE_WIDTH, LARGE_IMAGE_HEIGHT)


def build_secondary_image(source: str, alt_text: str) -> ImageDescriptor:
    return build_image_descriptor(source, alt_text)


__all__ = [
    "SCALE_DOWN_WIDTHS",
    "ORIGINAL_WIDTH_LABEL",
    "DEFAULT_SIZING_HINT",
    "LARGE_IMAGE_WIDTH",
    "LARGE_IMAGE_HEIGHT",
    "build_responsive_variants",
    "build_image_descriptor",
    "build_large_image",
    "build_secondary_image",
]
