from pathlib import Path

import pytest

from docx2html import cli
from docx2html.utils.config import StyleOptions


def parse(*argv: str):
    return cli.build_parser().parse_args(list(argv))


def test_options_default() -> None:
    assert cli.options_from_args(parse("a.docx")) == StyleOptions()


def test_options_preset_and_flags(tmp_path: Path) -> None:
    css = tmp_path / "extra.css"
    css.write_text("h1 { letter-spacing: 1px; }", encoding="utf-8")
    args = parse("a.docx", "-p", "web", "--no-links", "--no-images", "--page-breaks", "-c", str(css))

    options = cli.options_from_args(args)

    assert options.heading_color == "#0366d6"
    assert options.preserve_links is False
    assert options.preserve_images is False
    assert options.add_page_breaks is True
    assert options.custom_css.startswith("body { max-width: 900px;")
    assert options.custom_css.endswith("h1 { letter-spacing: 1px; }")


def test_unknown_preset_rejected() -> None:
    with pytest.raises(SystemExit):
        parse("a.docx", "-p", "neon")


def test_collect_files(docx_files, tmp_path: Path) -> None:
    a, b = docx_files("a.docx", "sub/b.DOCX")
    (tmp_path / "in" / "c.txt").write_text("x")
    found = cli.collect_files([tmp_path / "in", tmp_path / "missing.docx"])
    assert sorted(p.name for p in found) == ["a.docx", "b.DOCX"]


def test_run_cli_end_to_end(docx_files, fake_mammoth, tmp_path: Path, monkeypatch, capsys) -> None:
    monkeypatch.chdir(tmp_path)
    a, b = docx_files("a.docx", "b.docx")
    out = tmp_path / "out"
    out.mkdir()

    code = cli.run_cli([str(a), str(b), "-o", str(out)])

    assert code == cli.EXIT_OK
    assert (out / "a.html").exists() and (out / "b.html").exists()
    assert "All files converted successfully!" in capsys.readouterr().out


def test_run_cli_reports_failures(docx_files, tmp_path: Path, monkeypatch, capsys) -> None:
    monkeypatch.chdir(tmp_path)
    (a,) = docx_files("broken.docx")
    # not a real zip, so mammoth fails to open it
    code = cli.run_cli([str(a), "-o", str(tmp_path)])
    assert code == cli.EXIT_FAILURES
    assert "Error: broken.docx" in capsys.readouterr().out


def test_run_cli_preconditions(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert cli.run_cli([str(tmp_path / "none.docx"), "-o", str(tmp_path)]) == cli.EXIT_PRECONDITION
    assert cli.run_cli(["x.docx", "-o", str(tmp_path / "nope")]) == cli.EXIT_PRECONDITION
