"""Core catalog record types.

Records are frozen pydantic models. Python attributes are snake_case while
serialization aliases keep the camelCase names the front-end components
read (``srcSet``, ``heroImage``, ``problemDescription`` ...).
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class WorkCategory(str, Enum):
    """Tabs a work can be listed under."""

    PRODUCTS = "products"
    UIUX = "uiux"
    THREE_D = "3d"


_RECORD_CONFIG = ConfigDict(
    frozen=True, populate_by_name=True, extra="forbid", coerce_numbers_to_str=True
)


class ImageDescriptor(BaseModel):
    """One displayable image with its responsive configuration."""

    model_config = _RECORD_CONFIG

    source: str = Field(alias="src", description="Image URL")
    responsive_variants: Optional[str] = Field(
        default=None, alias="srcSet", description="Comma separated (url, width) pairs"
    )
    alt_text: str = Field(alias="alt", description="Alt text for accessibility")
    width: Optional[int] = Field(default=None, gt=0)
    height: Optional[int] = Field(default=None, gt=0)
    sizing_hint: Optional[str] = Field(default=None, alias="sizes")


class ProjectAbout(BaseModel):
    model_config = _RECORD_CONFIG

    client: str
    contribution: str = Field(description="Free text describing the role on the project")
    year: str = Field(description="Four digit year, kept as text")


class Project(BaseModel):
    """A portfolio case study, keyed in the catalogue by ``id``."""

    model_config = _RECORD_CONFIG

    id: str
    title: str
    description: str = Field(description="Short summary for the listing page")
    category: WorkCategory
    thumbnail_image: str = Field(alias="thumbnailImage")
    hero_image: ImageDescriptor = Field(alias="heroImage")
    secondary_image: ImageDescriptor = Field(alias="secondaryImage")
    about: ProjectAbout
    full_description: str = Field(alias="fullDescription")
    process_image: ImageDescriptor = Field(alias="processImage")
    problem_title: str = Field(alias="problemTitle")
    problem_description: Tuple[str, ...] = Field(alias="problemDescription")
    solution_title: str = Field(alias="solutionTitle")
    solution_description: Tuple[str, ...] = Field(alias="solutionDescription")
    closing_image: ImageDescriptor = Field(alias="closingImage")
    external_link: Optional[str] = Field(default=None, alias="externalLink")


class WorkSummary(BaseModel):
    """Reduced projection of a Project used by listing views."""

    model_config = _RECORD_CONFIG

    id: str
    title: str
    description: str
    image: str

    @classmethod
    def from_project(cls, project: Project) -> "WorkSummary":
        return cls(
            id=project.id,
            title=project.title,
            description=project.description,
            image=project.thumbnail_image,
        )


__all__ = [
    "WorkCategory",
    "ImageDescriptor",
    "ProjectAbout",
    "Project",
    "WorkSummary",
]
