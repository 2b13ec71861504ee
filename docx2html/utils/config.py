"""
Defines the style options that drive CSS generation and extraction.
"""
import logging
from dataclasses import dataclass, fields


log = logging.getLogger("docx2html")


@dataclass(frozen=True)
class StyleOptions:
    """
    A container for all styling options of a conversion batch.
    This object is created by the UI (CLI or GUI) or from a preset and
    passed unchanged to the ConversionPipeline for every file.
    """
    # Typography
    font_family: str = "Arial, sans-serif"
    font_size: int = 16             # px
    line_height: float = 1.6
    page_margin: int = 40           # px
    text_color: str = "#333333"

    # Headings
    heading_color: str = "#2c3e50"
    heading_margin: int = 20        # px, bottom margin is half of it
    heading_bold: bool = True
    heading_underline: bool = False

    # Tables
    table_border_color: str = "#dddddd"
    table_header_bg: str = "#f5f5f5"
    table_padding: int = 8          # px
    table_striped: bool = True

    # Images
    preserve_images: bool = True
    image_max_width: int = 100      # percent
    image_responsive: bool = True
    image_center: bool = False

    # Structure
    preserve_styles: bool = True
    preserve_lists: bool = True
    preserve_links: bool = True
    add_page_breaks: bool = False

    # Appended verbatim to the generated stylesheet
    custom_css: str = ""

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_dict(cls, data: dict) -> "StyleOptions":
        """Builds options from a mapping. Missing keys keep their defaults."""
        known = set(cls.field_names())
        unknown = set(data) - known
        if unknown:
            log.warning(f"Ignoring unknown style options: {sorted(unknown)}")
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> dict:
        return {name: getattr(self, name) for name in self.field_names()}
