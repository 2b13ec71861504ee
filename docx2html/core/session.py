"""
Holds the state of one interactive session: selected files, output folder
and the current style options. Both UIs go through this object instead of
keeping their own copies of that state.
"""
import logging
from pathlib import Path
from typing import Callable

from ..utils.config import StyleOptions
from ..utils.structures import ConversionResult, FileEntry
from .batch_processor import BatchProcessor, ProgressCallback
from .presets import apply_preset


log = logging.getLogger("docx2html")

WORD_EXTENSIONS = (".docx", ".doc")
SIZE_UNITS = ["Bytes", "KB", "MB", "GB"]


class SessionError(Exception):
    """Base class for errors reported to the user before any work starts."""


class SelectionError(SessionError):
    """Nothing could be added to the file list."""


class PreconditionError(SessionError):
    """Conversion cannot start yet."""


def format_file_size(size: int) -> str:
    """Human readable size: '0 Bytes', '512 Bytes', '1.5 KB', ..."""
    if size <= 0:
        return "0 Bytes"
    value, i = float(size), 0
    while value >= 1024 and i < len(SIZE_UNITS) - 1:
        value /= 1024
        i += 1
    return f"{round(value, 2):g} {SIZE_UNITS[i]}"


def find_word_documents(folder: Path) -> list[Path]:
    """Recursively lists .docx files in a folder, matching the extension in any case."""
    return sorted(
        p for p in Path(folder).rglob("*")
        if p.suffix.lower() == ".docx" and p.is_file()
    )


def default_output_dir() -> Path:
    """The user's desktop when there is one, else the home directory."""
    desktop = Path.home() / "Desktop"
    return desktop if desktop.is_dir() else Path.home()


class ConversionSession:
    """Explicit session state with accessors and mutators."""

    def __init__(self, options: StyleOptions | None = None, output_dir: Path | None = None):
        self._files: list[FileEntry] = []
        self.options = options or StyleOptions()
        self.output_dir: Path | None = Path(output_dir) if output_dir else None

    @property
    def files(self) -> tuple[FileEntry, ...]:
        return tuple(self._files)

    # --- File selection ---

    def add_files(self, paths) -> list[FileEntry]:
        """
        Adds Word documents to the selection, skipping duplicates.
        Raises SelectionError if nothing new was added.
        """
        candidates = [Path(p).absolute() for p in paths]
        candidates = [p for p in candidates if p.suffix.lower() in WORD_EXTENSIONS]
        if not candidates:
            raise SelectionError("No valid Word documents selected")

        existing = {entry.path for entry in self._files}
        new_paths = []
        for path in candidates:
            if path not in existing:
                existing.add(path)
                new_paths.append(path)
        if not new_paths:
            raise SelectionError("All files are already in the list")

        added = []
        for path in new_paths:
            try:
                entry = FileEntry(path, path.name, format_file_size(path.stat().st_size))
            except OSError as e:
                log.error(f"Failed to read file info for {path}: {e}")
                continue
            self._files.append(entry)
            added.append(entry)

        log.info(f"Added {len(added)} files to the selection.")
        return added

    def remove_file(self, path: Path):
        path = Path(path).absolute()
        self._files = [entry for entry in self._files if entry.path != path]

    def clear_files(self):
        self._files.clear()

    # --- Output and options ---

    def set_output_dir(self, path: Path | str | None):
        """A cancelled picker passes None or '' and leaves the folder as is."""
        if path:
            self.output_dir = Path(path)

    def set_options(self, options: StyleOptions):
        self.options = options

    def apply_preset(self, name: str) -> StyleOptions:
        self.options = apply_preset(self.options, name)
        return self.options

    # --- Conversion ---

    def check_ready(self):
        if not self._files:
            raise PreconditionError("Please select files to convert first")
        if not self.output_dir:
            raise PreconditionError("Please choose an output directory first")

    def start_conversion(
        self,
        progress_callback: ProgressCallback | None = None,
        processor_factory: Callable[[StyleOptions], BatchProcessor] = BatchProcessor,
    ) -> list[ConversionResult]:
        """
        Runs the batch over the selected files with the current options.
        Raises PreconditionError without touching the processor if not ready.
        """
        self.check_ready()
        processor = processor_factory(self.options)
        return processor.run([entry.path for entry in self._files], self.output_dir, progress_callback)
