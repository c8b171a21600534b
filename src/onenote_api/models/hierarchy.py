"""Notebook hierarchy records: Notebook, SectionGroup, Section, Page.

Mirrors the JSON returned by the notebooks/sections/pages endpoints. Field
names are snake_case with camelCase aliases; unknown service fields are kept.
Each container kind carries a literal ``kind`` tag so the three node types
form an explicit tagged union (``HierarchyNode``).
"""

from datetime import datetime
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel

_RECORD_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    extra="allow",
)


class Page(BaseModel):
    """A page summary as returned by the pages endpoints."""

    model_config = _RECORD_CONFIG

    id: str
    self_url: str | None = Field(default=None, alias="self")
    title: str = ""
    created_time: datetime | None = None
    last_modified_time: datetime | None = None
    content_url: str | None = None
    created_by_app_id: str | None = None
    links: dict[str, Any] | None = None
    thumbnail_url: str | None = None


class Section(BaseModel):
    """A section: leaf of the hierarchy, parent of pages."""

    model_config = _RECORD_CONFIG

    kind: Literal["section"] = "section"
    id: str
    self_url: str | None = Field(default=None, alias="self")
    name: str = ""
    is_default: bool = False
    created_time: datetime | None = None
    last_modified_time: datetime | None = None
    created_by: str | None = None
    last_modified_by: str | None = None
    pages_url: str | None = None
    pages: list[Page] = []
    # Display-only back-reference; the owning container holds the section.
    parent_notebook: "Notebook | None" = None


class SectionGroup(BaseModel):
    """A section group: container of sections and nested section groups."""

    model_config = _RECORD_CONFIG

    kind: Literal["section_group"] = "section_group"
    id: str
    self_url: str | None = Field(default=None, alias="self")
    name: str = ""
    created_time: datetime | None = None
    last_modified_time: datetime | None = None
    created_by: str | None = None
    last_modified_by: str | None = None
    sections_url: str | None = None
    section_groups_url: str | None = None
    sections: list[Section] = []
    section_groups: list["SectionGroup"] = []


class Notebook(BaseModel):
    """A notebook: root container of sections and section groups."""

    model_config = _RECORD_CONFIG

    kind: Literal["notebook"] = "notebook"
    id: str
    self_url: str | None = Field(default=None, alias="self")
    name: str = ""
    is_default: bool = False
    is_shared: bool = False
    user_role: str | None = None
    links: dict[str, Any] | None = None
    created_time: datetime | None = None
    last_modified_time: datetime | None = None
    created_by: str | None = None
    last_modified_by: str | None = None
    sections_url: str | None = None
    section_groups_url: str | None = None
    sections: list[Section] = []
    section_groups: list[SectionGroup] = []


Section.model_rebuild()
SectionGroup.model_rebuild()
Notebook.model_rebuild()

SectionParent = Notebook | SectionGroup
HierarchyNode = Annotated[Union[Notebook, SectionGroup, Section], Field(discriminator="kind")]

_NOTEBOOK_LIST = TypeAdapter(list[Notebook])


def notebooks_from_response(parsed: Any) -> list[Notebook]:
    """Build Notebook records from a parsed notebooks response.

    Accepts either the service envelope (``{"value": [...]}``) or a bare list.
    """
    if isinstance(parsed, dict):
        parsed = parsed.get("value", [])
    return _NOTEBOOK_LIST.validate_python(parsed or [])


class Revision(BaseModel):
    """A single PATCH operation against a page's content."""

    target: str
    action: str  # append, insert, prepend, replace
    content: str
    position: str | None = None  # before / after, for insert
