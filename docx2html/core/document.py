"""
Wraps a converted HTML fragment into a complete, self-contained document.
"""
import html
from pathlib import Path


DOCUMENT_TEMPLATE = """<!DOCTYPE html>
<html lang="{lang}">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <style>
{stylesheet}
    </style>
</head>
<body>
{body}
</body>
</html>
"""


def document_title(source: Path | str) -> str:
    """Returns the file's base name without its extension."""
    return Path(source).stem


def assemble_document(fragment: str, title: str, stylesheet: str, lang: str = "en") -> str:
    """
    Builds the output document. The fragment is embedded unmodified;
    only the title text is escaped.
    """
    return DOCUMENT_TEMPLATE.format(
        lang=html.escape(lang, quote=True),
        title=html.escape(title, quote=False),
        stylesheet=stylesheet,
        body=fragment,
    )
