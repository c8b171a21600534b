"""Client library for the OneNote notes REST API."""

from onenote_api.api import OneNoteApi, OneNoteApiBase, get_onenote_api, reset_client
from onenote_api.batch import BatchRequest, BatchResponse, parse_batch_response
from onenote_api.models import (
    Notebook,
    Page,
    RequestError,
    RequestErrorType,
    ResponsePackage,
    Revision,
    Section,
    SectionGroup,
)
from onenote_api.multipart import BoundaryCollisionError, MultipartBody, MultipartBodyBuilder, Part
from onenote_api.notebooks import (
    get_depth_of_notebooks,
    get_depth_of_parent,
    get_path_from_notebooks_to_section,
    get_path_from_parent_to_section,
    section_exists_in_notebooks,
    section_exists_in_parent,
)
from onenote_api.pages import ContentType, OneNotePage, escape_html_entities

__all__ = [
    "BatchRequest",
    "BatchResponse",
    "BoundaryCollisionError",
    "ContentType",
    "MultipartBody",
    "MultipartBodyBuilder",
    "Notebook",
    "OneNoteApi",
    "OneNoteApiBase",
    "OneNotePage",
    "Page",
    "Part",
    "RequestError",
    "RequestErrorType",
    "ResponsePackage",
    "Revision",
    "Section",
    "SectionGroup",
    "escape_html_entities",
    "get_depth_of_notebooks",
    "get_depth_of_parent",
    "get_onenote_api",
    "get_path_from_notebooks_to_section",
    "get_path_from_parent_to_section",
    "parse_batch_response",
    "reset_client",
    "section_exists_in_notebooks",
    "section_exists_in_parent",
]
