from pathlib import Path
from typing import NamedTuple

__all__ = ["ConversionResult", "FileEntry", "BatchSummary"]


SUCCESS_MESSAGE = "Conversion succeeded"


class ConversionResult(NamedTuple):
    """Outcome of converting one input file. Output path is set on success only."""
    file_name: str
    success: bool
    message: str
    output_path: Path | None = None

    @classmethod
    def ok(cls, source: Path, output_path: Path) -> "ConversionResult":
        return cls(Path(source).name, True, SUCCESS_MESSAGE, Path(output_path))

    @classmethod
    def failed(cls, source: Path, error: Exception | str) -> "ConversionResult":
        return cls(Path(source).name, False, f"Conversion failed: {error}")


class FileEntry(NamedTuple):
    """A file picked for conversion: absolute path, display name, formatted size."""
    path: Path
    name: str
    size: str


class BatchSummary(NamedTuple):
    """Aggregated counters over the results of one batch."""
    total: int
    succeeded: int
    failed: int

    @classmethod
    def from_results(cls, results: list[ConversionResult]) -> "BatchSummary":
        succeeded = sum(1 for r in results if r.success)
        return cls(len(results), succeeded, len(results) - succeeded)

    @property
    def status_text(self) -> str:
        if self.failed == 0:
            return "All files converted successfully!"
        if self.succeeded == 0:
            return "All conversions failed"
        return f"Conversion finished: {self.succeeded} succeeded, {self.failed} failed"
