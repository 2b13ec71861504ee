from pathlib import Path

from docx2html.core.docx_converter import build_directives, convert_docx
from docx2html.core.pipeline import ConversionPipeline
from docx2html.utils.config import StyleOptions


def convert(source: Path, **options) -> str:
    return convert_docx(source, build_directives(StyleOptions(**options)))


def test_defaults_keep_heading_link_and_inline_image(sample_docx: Path) -> None:
    html = convert(sample_docx)
    assert "<h1>Quarterly Report</h1>" in html
    assert '<a href="https://example.com">example link</a>' in html
    assert 'src="data:image/png;base64,' in html


def test_images_dropped(sample_docx: Path) -> None:
    html = convert(sample_docx, preserve_images=False)
    assert "<img" not in html
    assert "example link" in html


def test_links_unwrapped_keep_text_and_image(sample_docx: Path) -> None:
    html = convert(sample_docx, preserve_links=False)
    assert "<a" not in html
    assert "See example link" in html
    assert 'src="data:image/png;base64,' in html


def test_basic_style_map_produces_headings(sample_docx: Path) -> None:
    html = convert(sample_docx, preserve_styles=False, preserve_lists=False)
    assert "<h1>Quarterly Report</h1>" in html


def test_pipeline_writes_real_document(sample_docx: Path, tmp_path: Path) -> None:
    destination = tmp_path / "Quarterly Report.html"
    result = ConversionPipeline(StyleOptions(preserve_links=False)).convert(sample_docx, destination)

    assert result.success
    text = destination.read_text(encoding="utf-8")
    assert "<title>Quarterly Report</title>" in text
    assert "<h1>Quarterly Report</h1>" in text
    assert 'src="data:image/png;base64,' in text
