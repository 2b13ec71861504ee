from pathlib import Path

from docx2html.core.batch_processor import BatchProcessor, output_path_for
from docx2html.core.pipeline import ConversionPipeline
from docx2html.utils.config import StyleOptions
from docx2html.utils.structures import BatchSummary


def test_output_path_for() -> None:
    assert output_path_for(Path("/x/Report Final.docx"), Path("/out")) == Path("/out/Report Final.html")


def test_failure_is_isolated(tmp_path: Path) -> None:
    attempted = []

    def converter(source: Path, directives) -> str:
        attempted.append(source.name)
        if source.stem == "B":
            raise RuntimeError("cannot read B")
        return f"<p>{source.stem}</p>"

    files = [tmp_path / "A.docx", tmp_path / "B.docx", tmp_path / "C.docx"]
    processor = BatchProcessor(pipeline=ConversionPipeline(converter=converter))

    results = processor.run(files, tmp_path)

    assert attempted == ["A.docx", "B.docx", "C.docx"]
    assert [(r.file_name, r.success) for r in results] == [
        ("A.docx", True), ("B.docx", False), ("C.docx", True),
    ]
    assert results[1].message == "Conversion failed: cannot read B"
    assert (tmp_path / "A.html").exists()
    assert not (tmp_path / "B.html").exists()
    assert results[2].output_path == tmp_path / "C.html"


def test_progress_callback_in_order(tmp_path: Path) -> None:
    seen = []
    processor = BatchProcessor(pipeline=ConversionPipeline(converter=lambda s, d: ""))
    processor.run([tmp_path / "1.docx", tmp_path / "2.docx"], tmp_path,
                  lambda index, total, result: seen.append((index, total, result.file_name)))
    assert seen == [(0, 2, "1.docx"), (1, 2, "2.docx")]


def test_shared_options_reach_every_file(tmp_path: Path) -> None:
    options = StyleOptions(text_color="#010203")
    processor = BatchProcessor(options)
    processor.pipeline.converter = lambda s, d: "<p>x</p>"
    processor.run([tmp_path / "a.docx", tmp_path / "b.docx"], tmp_path)
    for name in ("a.html", "b.html"):
        assert "color: #010203;" in (tmp_path / name).read_text(encoding="utf-8")


def test_empty_batch(tmp_path: Path) -> None:
    assert BatchProcessor().run([], tmp_path) == []


def test_summary_texts(tmp_path: Path) -> None:
    def converter(source, directives):
        if source.stem.startswith("bad"):
            raise OSError("nope")
        return ""

    processor = BatchProcessor(pipeline=ConversionPipeline(converter=converter))

    mixed = BatchSummary.from_results(processor.run([tmp_path / "ok.docx", tmp_path / "bad.docx"], tmp_path))
    assert mixed == BatchSummary(total=2, succeeded=1, failed=1)
    assert mixed.status_text == "Conversion finished: 1 succeeded, 1 failed"

    good = BatchSummary.from_results(processor.run([tmp_path / "ok.docx"], tmp_path))
    assert good.status_text == "All files converted successfully!"

    bad = BatchSummary.from_results(processor.run([tmp_path / "bad.docx"], tmp_path))
    assert bad.status_text == "All conversions failed"
