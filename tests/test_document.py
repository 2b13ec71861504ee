import re
from pathlib import Path

from docx2html.core.document import assemble_document, document_title


def test_title_and_body_are_exact() -> None:
    doc = assemble_document("<p>hi</p>", "report", "")
    assert re.search(r"<title>(.*?)</title>", doc).group(1) == "report"
    assert re.search(r"<body>\n(.*)\n</body>", doc, re.S).group(1) == "<p>hi</p>"


def test_document_shell() -> None:
    doc = assemble_document("<p>x</p>", "t", "body { color: red; }")
    assert doc.startswith("<!DOCTYPE html>")
    assert '<meta charset="UTF-8">' in doc
    assert 'name="viewport"' in doc
    assert "<style>\nbody { color: red; }\n    </style>" in doc


def test_fragment_is_not_sanitized() -> None:
    fragment = "<script>alert(1)</script><p>{braces}</p>"
    assert fragment in assemble_document(fragment, "t", "")


def test_title_is_escaped() -> None:
    doc = assemble_document("", "A & B <draft>", "")
    assert "<title>A &amp; B &lt;draft&gt;</title>" in doc


def test_document_title() -> None:
    assert document_title(Path("/x/Report Final.docx")) == "Report Final"
    assert document_title("notes.v2.docx") == "notes.v2"
