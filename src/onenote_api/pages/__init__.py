"""Page content assembly: ONML markup and multipart page bodies."""

from onenote_api.pages.document import ContentType, OneNotePage, PageFragment
from onenote_api.pages.html import (
    CITATION_CLIPPED_FROM,
    CITATION_PLAIN,
    escape_html_entities,
)

__all__ = [
    "CITATION_CLIPPED_FROM",
    "CITATION_PLAIN",
    "ContentType",
    "OneNotePage",
    "PageFragment",
    "escape_html_entities",
]
