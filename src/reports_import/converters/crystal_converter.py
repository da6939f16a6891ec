"""
Crystal Reports converter.

The Crystal engine splits embedded subreports out of the main report and
announces each one through a callback while the conversion is still
running.
"""

import logging
from pathlib import Path
from typing import Callable, List, Optional

from reports_import.config_models import CrystalOptions, FormatName
from reports_import.converters.base_converter import BaseConverter, Engine
from reports_import.models import ConversionResult, GeneratedSubreport

logger = logging.getLogger(__name__)

SubreportHandler = Callable[[GeneratedSubreport], None]


class CrystalConverter(BaseConverter):
    """Converts Crystal Reports files (*.rpt).

    The engine is called as ``engine(path, unrecognized_function_behavior=...,
    on_subreport_generated=...)`` and must invoke the callback once per
    subreport before it returns.
    """
    format_name = FormatName.CRYSTAL
    extensions = (".rpt",)
    description = "*.rpt file matches Crystal Reports."
    option_usage = ("/crystal:UnrecognizedFunctionBehavior=Ignore",)

    def __init__(self, engine: Engine, options: Optional[CrystalOptions] = None):
        super().__init__(engine)
        self.options = options or CrystalOptions()
        self._subreport_handlers: List[SubreportHandler] = []

    def add_subreport_handler(self, handler: SubreportHandler) -> None:
        """Register a callback fired for every generated subreport."""
        self._subreport_handlers.append(handler)

    def _on_subreport_generated(self, subreport: GeneratedSubreport) -> None:
        logger.info(f"Subreport generated: {subreport.original_name}")
        for handler in self._subreport_handlers:
            handler(subreport)

    def run_engine(self, path: Path) -> ConversionResult:
        behavior = self.options.unrecognized_function_behavior
        logger.debug(f"Unrecognized function behavior: {behavior.value}")
        return self.engine(
            path,
            unrecognized_function_behavior=behavior,
            on_subreport_generated=self._on_subreport_generated,
        )
