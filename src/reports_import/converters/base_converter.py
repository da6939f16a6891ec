"""
Base converter class with common functionality.

A converter adapts one external conversion engine to the importer: it
checks what the engine returns and logs the conversion. The engines
themselves are closed-source and are treated as black boxes.
"""

import logging
from pathlib import Path
from typing import Callable, Tuple

from reports_import.config_models import FormatName
from reports_import.errors import ConversionError
from reports_import.models import ConversionResult

logger = logging.getLogger(__name__)

Engine = Callable[..., ConversionResult]


class BaseConverter:
    """Base class for all format converters.

    Subclasses set ``format_name`` and ``extensions`` and may override
    ``run_engine`` to pass format-specific options.
    """

    format_name: FormatName
    extensions: Tuple[str, ...] = ()
    description: str = ""
    option_usage: Tuple[str, ...] = ()

    def __init__(self, engine: Engine):
        """Initialize converter.

        Args:
            engine: External conversion engine for this format
        """
        self.engine = engine

    def run_engine(self, path: Path) -> ConversionResult:
        """Invoke the engine; the default contract is ``engine(path)``."""
        return self.engine(path)

    def convert(self, path: Path) -> ConversionResult:
        """Convert a report file into the in-memory report model.

        Args:
            path: Absolute path of the input report file

        Returns:
            Conversion result holding the root report

        Raises:
            ConversionError: If the engine returns something unexpected
        """
        logger.info(f"Converting {path.name} with the {self.format_name.value} engine")
        result = self.run_engine(path)
        if not isinstance(result, ConversionResult):
            raise ConversionError(
                f"{self.format_name.value} engine returned {type(result).__name__}, "
                f"expected ConversionResult"
            )
        logger.info(
            f"Converted {path.name}: report '{result.target_report.name}', "
            f"{len(result.generated_subreports)} subreport(s)"
        )
        return result
