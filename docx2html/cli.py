"""
Handles command-line argument parsing and initiates the conversion.
This is the entry point for the console script.
"""
import argparse
import dataclasses
import logging
from pathlib import Path

from .core.presets import apply_preset, preset_names
from .core.session import (
    ConversionSession, SessionError, WORD_EXTENSIONS, find_word_documents,
)
from .utils.config import StyleOptions
from .utils.structures import BatchSummary, ConversionResult
from .utils.logger import setup_main_logger


# Get logger (will be configured in run_cli)
log = logging.getLogger("docx2html")

EXIT_OK = 0
EXIT_FAILURES = 1
EXIT_PRECONDITION = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docx2html",
        description="Convert Word documents to styled, self-contained HTML files.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("input_paths", type=Path, nargs="+",
                        help="Input .docx files or/and folders separated by a space.")
    parser.add_argument("-o", "--output", type=Path, default=Path("."),
                        help="Existing output folder for the generated .html files.")
    parser.add_argument("-p", "--preset", choices=preset_names(), default=None,
                        help="Style preset to start from.")
    parser.add_argument("-c", "--css", type=Path, default=None,
                        help="Path to a CSS file appended to the generated stylesheet.")
    parser.add_argument("--no-images", action="store_true", help="Drop images instead of embedding them.")
    parser.add_argument("--no-styles", action="store_true", help="Map paragraphs to plain headings/paragraphs.")
    parser.add_argument("--no-lists", action="store_true", help="Turn list paragraphs into plain paragraphs.")
    parser.add_argument("--no-links", action="store_true", help="Replace hyperlinks with their text.")
    parser.add_argument("--page-breaks", action="store_true", help="Emit the .page-break helper class.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show info messages on the console.")
    return parser


def options_from_args(args: argparse.Namespace) -> StyleOptions:
    """Builds style options from a preset (if any) and the override flags."""
    options = StyleOptions()
    if args.preset:
        options = apply_preset(options, args.preset)

    overrides = {}
    if args.no_images:
        overrides["preserve_images"] = False
    if args.no_styles:
        overrides["preserve_styles"] = False
    if args.no_lists:
        overrides["preserve_lists"] = False
    if args.no_links:
        overrides["preserve_links"] = False
    if args.page_breaks:
        overrides["add_page_breaks"] = True
    if args.css:
        extra = args.css.read_text(encoding="utf-8")
        overrides["custom_css"] = "\n".join(filter(None, [options.custom_css, extra]))

    return dataclasses.replace(options, **overrides)


def collect_files(input_paths: list[Path]) -> list[Path]:
    """Expands folders (recursively) and keeps Word documents only."""
    files_to_process = []
    for path in input_paths:
        if not path.exists():
            log.warning(f"Input path does not exist, skipping: {path}")
            continue
        if path.is_dir():
            files_to_process.extend(find_word_documents(path))
        elif path.suffix.lower() in WORD_EXTENSIONS:
            files_to_process.append(path)
    return files_to_process


def run_cli(argv: list[str] | None = None) -> int:
    """
    The main function for the command-line interface.
    Parses arguments, runs the batch and returns the process exit code.
    """
    args = build_parser().parse_args(argv)

    console_level = logging.INFO if args.verbose else logging.ERROR
    setup_main_logger(console_level)

    if not args.output.is_dir():
        log.error(f"Output folder does not exist: {args.output}")
        return EXIT_PRECONDITION

    try:
        session = ConversionSession(options_from_args(args), output_dir=args.output)
        session.add_files(collect_files(args.input_paths))
    except (SessionError, OSError) as e:
        log.error(str(e))
        return EXIT_PRECONDITION

    num_files = len(session.files)
    log.info(f"Found {num_files} files. Starting conversion...")

    def progress_callback(index: int, total: int, result: ConversionResult):
        # pad the counter with spaces for alignment
        completed_str = str(index + 1).rjust(len(str(total)))
        prefix = f"[{completed_str}/{total}]"
        if result.success:
            print(f"{prefix} OK: {result.file_name} -> {result.output_path}", flush=True)
        else:
            print(f"{prefix} Error: {result.file_name}", flush=True)
            print(f"  └─ {result.message}", flush=True)

    try:
        results = session.start_conversion(progress_callback)
    except SessionError as e:
        log.error(str(e))
        return EXIT_PRECONDITION

    summary = BatchSummary.from_results(results)
    print(f"\n{summary.status_text}")
    return EXIT_FAILURES if summary.failed else EXIT_OK
