"""
Turns a .docx file into an HTML body fragment using mammoth.

StyleOptions only influence extraction through ConversionDirectives;
everything visual is left to the generated stylesheet.
"""
import base64
import html
import logging
from dataclasses import dataclass
from pathlib import Path

import mammoth
import mammoth.images
import lxml.html

from ..utils.config import StyleOptions


log = logging.getLogger("docx2html")


# Explicit paragraph mappings used when the document's own styles are dropped
BASIC_STYLE_MAP = [
    "p[style-name='Heading 1'] => h1:fresh",
    "p[style-name='Heading 2'] => h2:fresh",
    "p[style-name='Heading 3'] => h3:fresh",
    "p[style-name='Heading 4'] => h4:fresh",
    "p[style-name='Heading 5'] => h5:fresh",
    "p[style-name='Heading 6'] => h6:fresh",
    "p[style-name='Normal'] => p:fresh",
]
FLAT_LIST_STYLE_MAP = ["p[style-name='List Paragraph'] => p:fresh"]


@dataclass(frozen=True)
class ConversionDirectives:
    """Extraction instructions handed to the conversion library."""
    style_map: str = ""
    inline_images: bool = True
    keep_links: bool = True


def build_directives(options: StyleOptions) -> ConversionDirectives:
    """Derives conversion directives from the extraction-related options."""
    style_map = [] if options.preserve_styles else list(BASIC_STYLE_MAP)
    if not options.preserve_lists:
        style_map.extend(FLAT_LIST_STYLE_MAP)

    return ConversionDirectives(
        style_map="\n".join(style_map),
        inline_images=options.preserve_images,
        keep_links=options.preserve_links,
    )


def _inline_image(image) -> dict[str, str]:
    """Embeds image bytes as a base64 data URI."""
    with image.open() as image_bytes:
        encoded = base64.b64encode(image_bytes.read()).decode("ascii")
    return {"src": f"data:{image.content_type};base64,{encoded}"}


def _skip_image(image) -> dict[str, str]:
    # Image data is never read; the bare <img> is removed afterwards
    return {}


def strip_elements(fragment: str, unwrap_links: bool = False, drop_images: bool = False) -> str:
    """
    Removes hyperlinks (keeping their text) and/or images from an HTML fragment.
    """
    if not (unwrap_links or drop_images) or not fragment.strip():
        return fragment

    # huge_tree lifts libxml2's 10 MB cap on inlined base64 image attributes
    root = lxml.html.fragment_fromstring(
        fragment, create_parent="div", parser=lxml.html.HTMLParser(huge_tree=True)
    )
    if unwrap_links:
        for link in list(root.iter("a")):
            link.drop_tag()
    if drop_images:
        for img in list(root.iter("img")):
            img.drop_tree()

    parts = [html.escape(root.text or "", quote=False)]
    parts.extend(lxml.html.tostring(child, encoding="unicode") for child in root)
    return "".join(parts)


def convert_docx(source: Path, directives: ConversionDirectives) -> str:
    """
    Converts a .docx file to an HTML fragment.
    Raises whatever mammoth or the filesystem raises on unreadable input.
    """
    kwargs = {
        "convert_image": mammoth.images.img_element(
            _inline_image if directives.inline_images else _skip_image
        ),
    }
    if directives.style_map:
        kwargs["style_map"] = directives.style_map

    with open(source, "rb") as docx_file:
        result = mammoth.convert_to_html(docx_file, **kwargs)

    for message in result.messages:
        log.warning(f"{Path(source).name}: {message.message}")

    return strip_elements(
        result.value,
        unwrap_links=not directives.keep_links,
        drop_images=not directives.inline_images,
    )
