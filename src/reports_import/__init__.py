"""
Reports importer package.
"""

__version__ = "1.0.0"

from reports_import.arguments import ArgumentMap, parse_arguments, parse_sub_arguments
from reports_import.config_models import CrystalOptions, ImportSettings, UnrecognizedFunctionBehavior
from reports_import.errors import (
    ConversionError,
    DuplicateArgumentError,
    InputFileNotFoundError,
    ReportsImportError,
    UnsupportedFormatError,
    UsageError,
)
from reports_import.models import Control, ConversionResult, GeneratedSubreport, Report, SubreportControl
from reports_import.registry import ConverterRegistry, build_default_registry
from reports_import.subreports import SubreportMaterializer, escape_file_name

__all__ = [
    "ArgumentMap",
    "parse_arguments",
    "parse_sub_arguments",
    "CrystalOptions",
    "ImportSettings",
    "UnrecognizedFunctionBehavior",
    "ReportsImportError",
    "UsageError",
    "DuplicateArgumentError",
    "UnsupportedFormatError",
    "InputFileNotFoundError",
    "ConversionError",
    "Report",
    "Control",
    "SubreportControl",
    "GeneratedSubreport",
    "ConversionResult",
    "ConverterRegistry",
    "build_default_registry",
    "SubreportMaterializer",
    "escape_file_name",
]
