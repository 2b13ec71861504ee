"""
Handles the processing of a batch of files.
This class is used by both the CLI and GUI.
"""
import logging
from pathlib import Path
from typing import Callable

from .pipeline import ConversionPipeline
from ..utils.config import StyleOptions
from ..utils.structures import BatchSummary, ConversionResult

# The main logger is configured by the entry point (CLI/GUI)
log = logging.getLogger("docx2html")

ProgressCallback = Callable[[int, int, ConversionResult], None]


def output_path_for(source: Path, output_dir: Path) -> Path:
    """Output files are named after the input, directly in output_dir."""
    return Path(output_dir) / f"{Path(source).stem}.html"


class BatchProcessor:
    """Orchestrates the conversion of multiple files, one at a time."""

    def __init__(self, options: StyleOptions | None = None, pipeline: ConversionPipeline | None = None):
        self.options = options or StyleOptions()
        self.pipeline = pipeline or ConversionPipeline(self.options)

    def run(self, files: list[Path], output_dir: Path,
            progress_callback: ProgressCallback | None = None) -> list[ConversionResult]:
        """
        Converts files sequentially in the given order.

        Args:
            files: Input paths.
            output_dir: Existing directory to write <name>.html files into.
            progress_callback: Called after each file with (index, total, result).

        Returns:
            One result per input file, in input order.
        """
        total = len(files)
        log.info(f"Starting batch of {total} files. Output folder: {output_dir}")

        results: list[ConversionResult] = []
        for index, path in enumerate(files):
            path = Path(path)
            result = self.pipeline.convert(path, output_path_for(path, output_dir))
            results.append(result)

            if progress_callback:
                progress_callback(index, total, result)

        summary = BatchSummary.from_results(results)
        log.info(f"Batch processing complete. {summary.status_text}")
        return results
