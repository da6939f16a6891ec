"""
Registry of enabled report formats.

Which formats are available depends on which conversion engines are
installed. Engines are discovered through the ``reports_import.engines``
entry-point group, one entry point per format name (``access``,
``activereports``, ``crystal``), or passed in explicitly.
"""

import logging
from dataclasses import dataclass
from importlib.metadata import entry_points
from pathlib import Path
from typing import Callable, Dict, List, Mapping, Optional, Type, Union

from reports_import.arguments import parse_sub_arguments
from reports_import.config_models import CrystalOptions, FormatName, ImportSettings
from reports_import.converters import (
    AccessConverter,
    ActiveReportsConverter,
    BaseConverter,
    CrystalConverter,
    Engine,
)
from reports_import.errors import UnsupportedFormatError
from reports_import.subreports import SubreportMaterializer

logger = logging.getLogger(__name__)

ENGINE_ENTRY_POINT_GROUP = "reports_import.engines"
CRYSTAL_ARGUMENT = "/crystal"

ConverterFactory = Callable[[Engine, Mapping, Path], BaseConverter]

CONVERTER_CLASSES: Dict[FormatName, Type[BaseConverter]] = {
    FormatName.ACCESS: AccessConverter,
    FormatName.ACTIVE_REPORTS: ActiveReportsConverter,
    FormatName.CRYSTAL: CrystalConverter,
}


def create_simple_converter(converter_class: Type[BaseConverter]) -> ConverterFactory:
    """Factory for converters that take no options."""
    def factory(engine: Engine, arguments: Mapping, output_path: Path) -> BaseConverter:
        return converter_class(engine)
    return factory


def create_crystal_converter(engine: Engine, arguments: Mapping, output_path: Path) -> BaseConverter:
    """Configure a Crystal converter from ``/crystal`` and bind subreport output."""
    options = CrystalOptions.from_sub_arguments(parse_sub_arguments(arguments, CRYSTAL_ARGUMENT))
    converter = CrystalConverter(engine, options)
    converter.add_subreport_handler(SubreportMaterializer(output_path))
    return converter


CONVERTER_FACTORIES: Dict[FormatName, ConverterFactory] = {
    FormatName.ACCESS: create_simple_converter(AccessConverter),
    FormatName.ACTIVE_REPORTS: create_simple_converter(ActiveReportsConverter),
    FormatName.CRYSTAL: create_crystal_converter,
}


@dataclass
class FormatHandler:
    """An enabled format: converter class, engine and factory."""
    converter_class: Type[BaseConverter]
    engine: Engine
    factory: ConverterFactory


class ConverterRegistry:
    """Maps input file extensions to converters."""

    def __init__(self):
        self._handlers: Dict[str, FormatHandler] = {}
        self._formats: Dict[FormatName, FormatHandler] = {}

    def register(self, format_name: FormatName, engine: Engine,
                 factory: Optional[ConverterFactory] = None) -> None:
        """Enable a format backed by ``engine``.

        Args:
            format_name: Format to enable
            engine: External conversion engine
            factory: Converter factory (defaults to the format's standard one)
        """
        format_name = FormatName(format_name)
        handler = FormatHandler(
            converter_class=CONVERTER_CLASSES[format_name],
            engine=engine,
            factory=factory or CONVERTER_FACTORIES[format_name],
        )
        for extension in handler.converter_class.extensions:
            self._handlers[extension] = handler
        self._formats[format_name] = handler
        logger.debug(f"Registered {format_name.value} for {', '.join(handler.converter_class.extensions)}")

    def supported_extensions(self) -> List[str]:
        return sorted(self._handlers)

    def is_supported(self, extension: str) -> bool:
        return extension.lower() in self._handlers

    def create_converter(self, extension: str, arguments: Mapping,
                         output_path: Union[str, Path]) -> BaseConverter:
        """Create a configured converter for an input file extension.

        Args:
            extension: Input file extension including the leading dot
            arguments: Full argument map (converter options are read from it)
            output_path: Path the root report will be saved to

        Returns:
            Converter ready to run

        Raises:
            UnsupportedFormatError: If no enabled format handles the extension
        """
        handler = self._handlers.get(extension.lower())
        if handler is None:
            raise UnsupportedFormatError(extension)
        return handler.factory(handler.engine, arguments, Path(output_path))

    def usage_lines(self) -> List[str]:
        """Help text lines describing the enabled formats."""
        lines = []
        handlers = [self._formats[name] for name in FormatName if name in self._formats]
        for handler in handlers:
            lines.append(f"                    {handler.converter_class.description}")
        for handler in handlers:
            for option in handler.converter_class.option_usage:
                lines.append(f"              {option}")
        return lines


def discover_engines() -> Dict[str, Engine]:
    """Load the conversion engines installed as entry points."""
    engines = {}
    for entry_point in entry_points(group=ENGINE_ENTRY_POINT_GROUP):
        try:
            engines[entry_point.name] = entry_point.load()
        except Exception as e:
            logger.warning(f"Could not load {entry_point.name} engine ({entry_point.value}): {e}")
    return engines


def build_default_registry(engines: Optional[Mapping[str, Engine]] = None,
                           settings: Optional[ImportSettings] = None) -> ConverterRegistry:
    """Assemble the registry from the available engines.

    Args:
        engines: Engine per format name (discovered from entry points if None)
        settings: Import settings restricting the enabled formats

    Returns:
        Registry with one handler per available, enabled format
    """
    if engines is None:
        engines = discover_engines()
    settings = settings or ImportSettings()

    registry = ConverterRegistry()
    for name, engine in engines.items():
        try:
            format_name = FormatName(name.lower())
        except ValueError:
            logger.warning(f"Ignoring engine for unknown format '{name}'")
            continue
        if not settings.is_enabled(format_name):
            logger.debug(f"Format {format_name.value} disabled by settings")
            continue
        registry.register(format_name, engine)

    if not registry.supported_extensions():
        logger.warning("No conversion engines available; every input format will be rejected")
    return registry
