"""Pure functions producing the ONML snippets that make up a page body.

Every caller-supplied value interpolated into markup goes through
escape_html_entities. Raw ONML passed to OneNotePage.add_onml never does.
"""

_ENTITIES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
}

CITATION_PLAIN = "{0}"
CITATION_CLIPPED_FROM = "Clipped from: {0}"


def escape_html_entities(value: str) -> str:
    """Replace & < > " ' with their entity equivalents. Single pass."""
    return "".join(_ENTITIES.get(ch, ch) for ch in value)


def image_tag(url: str) -> str:
    """An image the service downloads from ``url``."""
    return f'<img src="{escape_html_entities(url)}" />'


def render_src_image_tag(src: str) -> str:
    """An image the service renders from ``src`` (a URL or ``name:<part>``)."""
    return f'<img data-render-src="{escape_html_entities(src)}" />'


def attachment_tag(file_name: str, part_name: str, media_type: str) -> str:
    """An inline file attachment backed by the data part ``part_name``."""
    return (
        f'<object data-attachment="{escape_html_entities(file_name)}" '
        f'data="name:{part_name}" type="{escape_html_entities(media_type)}" />'
    )


def link_tag(url: str) -> str:
    """A plain hyperlink showing its own URL."""
    escaped = escape_html_entities(url)
    return f'<div><a href="{escaped}">{escaped}</a></div>'


def citation_tag(template: str, url_to_display: str, raw_url: str | None = None) -> str:
    """Render a citation template, replacing ``{0}`` with a link.

    The link points at ``raw_url`` (defaults to ``url_to_display``) and shows
    the display URL as text.
    """
    href = escape_html_entities(raw_url or url_to_display)
    anchor = f'<a href="{href}">{escape_html_entities(url_to_display)}</a>'
    return f'<div style="font-size: 12px; color: gray">{template.replace("{0}", anchor)}</div>'


def head_tag(title: str, metadata: dict[str, str]) -> str:
    """The <head> element: escaped title plus one <meta> per metadata entry."""
    meta = "".join(
        f'<meta name="{escape_html_entities(key)}" content="{escape_html_entities(value)}" />'
        for key, value in metadata.items()
    )
    return f"<head><title>{escape_html_entities(title)}</title>{meta}</head>"
