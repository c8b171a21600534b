"""Data models and enums for the OneNote API client."""

from onenote_api.models.errors import (
    RequestError,
    RequestErrorType,
    ResponsePackage,
    TransportOutcome,
)
from onenote_api.models.hierarchy import (
    HierarchyNode,
    Notebook,
    Page,
    Revision,
    Section,
    SectionGroup,
    SectionParent,
    notebooks_from_response,
)

__all__ = [
    "HierarchyNode",
    "Notebook",
    "Page",
    "RequestError",
    "RequestErrorType",
    "ResponsePackage",
    "Revision",
    "Section",
    "SectionGroup",
    "SectionParent",
    "TransportOutcome",
    "notebooks_from_response",
]
