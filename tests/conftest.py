from pathlib import Path
from types import SimpleNamespace

import pytest

from docx2html.core import docx_converter


@pytest.fixture
def docx_files(tmp_path: Path):
    """Creates placeholder .docx files; content is irrelevant once mammoth is stubbed."""
    def make(*names: str) -> list[Path]:
        paths = []
        for name in names:
            path = tmp_path / "in" / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(b"PK\x03\x04 placeholder")
            paths.append(path)
        return paths
    return make


@pytest.fixture
def fake_mammoth(monkeypatch):
    """Replaces mammoth.convert_to_html; records kwargs, returns `state.html`."""
    state = SimpleNamespace(
        calls=[],
        html='<p>Hello <a href="https://example.com">world</a></p>',
        messages=[],
    )

    def convert_to_html(fileobj, **kwargs):
        state.calls.append(kwargs)
        return SimpleNamespace(value=state.html, messages=state.messages)

    monkeypatch.setattr(docx_converter.mammoth, "convert_to_html", convert_to_html)
    return state


def _add_hyperlink(paragraph, url: str, text: str):
    """python-docx has no public hyperlink API; build the w:hyperlink run by hand."""
    from docx.opc.constants import RELATIONSHIP_TYPE as RT
    from docx.oxml import OxmlElement
    from docx.oxml.ns import qn

    r_id = paragraph.part.relate_to(url, RT.HYPERLINK, is_external=True)
    hyperlink = OxmlElement("w:hyperlink")
    hyperlink.set(qn("r:id"), r_id)
    run = OxmlElement("w:r")
    text_el = OxmlElement("w:t")
    text_el.text = text
    run.append(text_el)
    hyperlink.append(run)
    paragraph._p.append(hyperlink)


@pytest.fixture
def sample_docx(tmp_path: Path) -> Path:
    """A real .docx with a heading, a hyperlink and a PNG image."""
    import io

    import docx
    from PIL import Image

    document = docx.Document()
    document.add_heading("Quarterly Report", level=1)
    paragraph = document.add_paragraph("See ")
    _add_hyperlink(paragraph, "https://example.com", "example link")

    png = io.BytesIO()
    Image.new("RGB", (8, 8), "red").save(png, format="PNG")
    png.seek(0)
    document.add_picture(png)

    path = tmp_path / "Quarterly Report.docx"
    document.save(str(path))
    return path
