import logging

from PIL import Image, ImageColor, ImageDraw, ImageTk


log = logging.getLogger("docx2html")


MARK_COLORS = {
    "pending": "#9e9e9e",
    "success": "#2e7d32",
    "failure": "#c62828",
}


def parse_color(color: str) -> tuple[int, int, int] | None:
    """Return an RGB tuple for a CSS color string, or None if Pillow can't parse it."""
    try:
        return ImageColor.getrgb(color.strip())[:3]
    except (ValueError, AttributeError):
        return None


def make_swatch(color: str, size: int = 16) -> ImageTk.PhotoImage:
    """
    Render a small square filled with the given CSS color.
    Unparseable colors give a crossed-out swatch.
    """
    img = Image.new("RGBA", (size, size), (255, 255, 255, 0))
    draw = ImageDraw.Draw(img)
    rgb = parse_color(color)
    if rgb is None:
        log.debug(f"Cannot preview color '{color}'")
        draw.rectangle((0, 0, size - 1, size - 1), outline="#808080")
        draw.line((0, size - 1, size - 1, 0), fill="#c62828")
    else:
        draw.rectangle((0, 0, size - 1, size - 1), fill=rgb, outline="#808080")
    return ImageTk.PhotoImage(img)


def make_status_mark(status: str, size: int = 14) -> ImageTk.PhotoImage:
    """Render a round status mark for the file list (pending/success/failure)."""
    color = MARK_COLORS.get(status, MARK_COLORS["pending"])
    # Draw at 4x and downscale for smooth edges
    scale = 4
    img = Image.new("RGBA", (size * scale, size * scale), (0, 0, 0, 0))
    ImageDraw.Draw(img).ellipse((scale, scale, size * scale - scale, size * scale - scale), fill=color)
    img = img.resize((size, size), Image.Resampling.LANCZOS)
    return ImageTk.PhotoImage(img)
