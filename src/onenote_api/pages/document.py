"""Page content assembler producing the multipart body for page creation.

A OneNotePage accumulates content fragments in caller order (the order is the
visual order of the rendered page) and finalizes into one ``Presentation``
part plus one part per binary/HTML data fragment.
"""

import mimetypes
import uuid
from dataclasses import dataclass
from enum import Enum

from onenote_api.multipart import MultipartBody, MultipartBodyBuilder, Part
from onenote_api.pages.html import (
    attachment_tag,
    citation_tag,
    escape_html_entities,
    head_tag,
    image_tag,
    link_tag,
    render_src_image_tag,
)

PRESENTATION_PART_NAME = "Presentation"
PRESENTATION_MEDIA_TYPE = "application/xhtml+xml"
DEFAULT_ATTACHMENT_MEDIA_TYPE = "application/octet-stream"


class ContentType(str, Enum):
    """Kinds of content fragments a page can hold."""

    HTML = "Html"
    IMAGE = "Image"
    ENHANCED_URL = "EnhancedUrl"
    URL = "Url"
    ONML = "Onml"
    ATTACHMENT = "Attachment"
    CITATION = "Citation"


@dataclass(frozen=True)
class PageFragment:
    """One ordered piece of page content.

    ``onml`` is the markup placed in the page body; ``data_part`` is the
    separate multipart part the markup references, if any.
    """

    content_type: ContentType
    onml: str
    data_part: Part | None = None


class OneNotePage:
    """Mutable page document finalized via to_form_data()."""

    def __init__(
        self,
        title: str = "",
        body: str = "",
        locale: str = "en-us",
        metadata: dict[str, str] | None = None,
    ) -> None:
        self.title = title
        self.locale = locale
        self.metadata: dict[str, str] = dict(metadata or {})
        self.fragments: list[PageFragment] = []
        if body:
            self.add_onml(body)

    escape_html_entities = staticmethod(escape_html_entities)

    def add_onml(self, onml: str) -> None:
        """Append pre-built ONML verbatim. Well-formedness is the caller's job."""
        self.fragments.append(PageFragment(ContentType.ONML, onml))

    def add_html(self, html: str) -> str:
        """Add an HTML snippet rendered by the service at this point in the page.

        Returns the part name, usable as ``name:<part>`` in later markup.
        """
        name = _new_part_name("Html")
        part = Part(name=name, content=html, media_type="text/html")
        self.fragments.append(
            PageFragment(ContentType.HTML, render_src_image_tag(f"name:{name}"), part)
        )
        return name

    def add_image(self, url: str) -> None:
        """Add an image the service downloads from ``url``."""
        self.fragments.append(PageFragment(ContentType.IMAGE, image_tag(url)))

    def add_object_url_as_image(self, url: str) -> None:
        """Add an image rendered by the service from a page or object URL."""
        self.fragments.append(PageFragment(ContentType.ENHANCED_URL, render_src_image_tag(url)))

    def add_attachment(self, data: bytes, name: str, media_type: str | None = None) -> str:
        """Attach a binary file shown inline under ``name``. Returns the part name."""
        if media_type is None:
            media_type = mimetypes.guess_type(name)[0] or DEFAULT_ATTACHMENT_MEDIA_TYPE
        part_name = _new_part_name("Attachment")
        part = Part(name=part_name, content=bytes(data), media_type=media_type)
        self.fragments.append(
            PageFragment(ContentType.ATTACHMENT, attachment_tag(name, part_name, media_type), part)
        )
        return part_name

    def add_url(self, url: str) -> None:
        self.fragments.append(PageFragment(ContentType.URL, link_tag(url)))

    def add_citation(self, format: str, url_to_display: str, raw_url: str | None = None) -> None:
        """Add a citation line; ``format`` is a template with a ``{0}`` link slot."""
        self.fragments.append(
            PageFragment(ContentType.CITATION, citation_tag(format, url_to_display, raw_url))
        )

    def get_body_onml(self) -> str:
        return "".join(fragment.onml for fragment in self.fragments)

    def get_entire_onml(self) -> str:
        """The full presentation document: head (title, metadata) and body."""
        return (
            f'<html xmlns="http://www.w3.org/1999/xhtml" lang="{escape_html_entities(self.locale)}">'
            f"{head_tag(self.title, self.metadata)}"
            f"<body>{self.get_body_onml()}</body></html>"
        )

    def to_form_data(self) -> MultipartBody:
        """Finalize into a multipart/form-data body.

        Safe to call repeatedly; each call reflects the current fragments and
        differs from earlier calls only in its boundary.
        """
        builder = MultipartBodyBuilder()
        builder.append(PRESENTATION_PART_NAME, self.get_entire_onml(), PRESENTATION_MEDIA_TYPE)
        for fragment in self.fragments:
            if fragment.data_part is not None:
                builder.add_part(fragment.data_part)
        return builder.build()


def _new_part_name(prefix: str) -> str:
    return f"{prefix}{uuid.uuid4().hex}"
