"""
The single-file conversion pipeline (Facade).

This module orchestrates one .docx -> .html conversion, using the other
core modules to perform specific tasks.
"""
import logging
from pathlib import Path
from typing import Callable

from ..utils.config import StyleOptions
from ..utils.structures import ConversionResult
from .docx_converter import ConversionDirectives, build_directives, convert_docx
from .document import assemble_document, document_title
from .stylesheet import compile_stylesheet


log = logging.getLogger("docx2html")

Converter = Callable[[Path, ConversionDirectives], str]


class ConversionPipeline:
    """
    A facade that simplifies the conversion process.

    The batch processor and the UI layer interact with this class to run
    a conversion. It coordinates the converter, the stylesheet compiler
    and the document assembler.
    """

    def __init__(self, options: StyleOptions | None = None, converter: Converter = convert_docx):
        """Initializes the pipeline with style options (defaults if omitted)."""
        self.options = options or StyleOptions()
        self.converter = converter

    def convert(self, source: Path, destination: Path) -> ConversionResult:
        """
        Converts `source` and writes the styled document to `destination`,
        overwriting it. Never raises: failures are returned as a result.
        """
        source, destination = Path(source), Path(destination)
        try:
            log.info(f"Converting: {source.name}")

            # 1. Derive extraction directives and convert the body
            directives = build_directives(self.options)
            fragment = self.converter(source, directives)

            # 2. Style and wrap it into a full document
            stylesheet = compile_stylesheet(self.options)
            document = assemble_document(fragment, document_title(source), stylesheet)

            # 3. Persist
            destination.write_text(document, encoding="utf-8")

            log.info(f"Successfully converted {source.name} -> {destination}")
            return ConversionResult.ok(source, destination)

        except Exception as e:
            log.error(f"Failed conversion for: {source.name}", exc_info=True)
            return ConversionResult.failed(source, e)
