"""
Command-line interface for the reports importer.

This module handles argument parsing, logging configuration and error
reporting; the conversion itself happens in the registered converters.
"""

import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, Sequence, TextIO

from reports_import.arguments import parse_arguments
from reports_import.config_models import ImportSettings
from reports_import.errors import InputFileNotFoundError, UsageError
from reports_import.registry import ConverterRegistry, build_default_registry
from reports_import.tracing import configure_tracer

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2

INPUT_ARGUMENT = "/in"
OUTPUT_ARGUMENT = "/out"


def usage_text(registry: ConverterRegistry) -> str:
    """Help text listing the formats enabled in ``registry``."""
    lines = [
        "Imports report files of different types into an XML report layout file.",
        "",
        "Usage:",
        "reports-import /in:path1 /out:path2",
        "",
        "              path1 Specifies the input file's location and type.",
    ]
    lines.extend(registry.usage_lines())
    lines.extend([
        "",
        "              path2 Specifies the output file's location.",
    ])
    return "\n".join(lines)


def run(tokens: Sequence[str], registry: ConverterRegistry, settings: ImportSettings) -> Path:
    """Convert the report named by ``/in`` and save it to ``/out``.

    Args:
        tokens: Command-line tokens, without the program name
        registry: Enabled formats
        settings: Import settings

    Returns:
        Path of the saved root report

    Raises:
        UsageError: Malformed command line or unsupported input format
        InputFileNotFoundError: The input file does not exist
    """
    arguments = parse_arguments(tokens)
    if INPUT_ARGUMENT not in arguments or OUTPUT_ARGUMENT not in arguments:
        raise UsageError()
    output_path = Path(arguments[OUTPUT_ARGUMENT])

    input_path = Path(os.path.abspath(arguments[INPUT_ARGUMENT]))
    if not input_path.is_file():
        raise InputFileNotFoundError(input_path)

    configure_tracer(settings.trace_level)

    converter = registry.create_converter(input_path.suffix, arguments, output_path)
    result = converter.convert(input_path)
    result.target_report.save_layout_to_xml(output_path)
    logger.info(f"Saved {result.target_report.name} to {output_path}")
    return output_path


def main(argv: Optional[List[str]] = None, registry: Optional[ConverterRegistry] = None,
         stdout: Optional[TextIO] = None) -> int:
    """CLI entry point.

    Returns:
        Exit code: 0 = success, 1 = error, 2 = usage error
    """
    tokens = sys.argv[1:] if argv is None else argv
    out = stdout if stdout is not None else sys.stdout

    try:
        settings = ImportSettings.from_env()
        logging.basicConfig(
            level=settings.log_level,
            format='%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        if registry is None:
            registry = build_default_registry(settings=settings)
        run(tokens, registry, settings)
        return EXIT_OK

    except UsageError as e:
        if e.detail:
            print(e.detail, file=out)
        print(usage_text(registry or ConverterRegistry()), file=out)
        return EXIT_USAGE
    except Exception as e:
        logger.debug("Import failed", exc_info=True)
        print(e, file=out)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
