"""
Converter adapters for the supported report formats.
"""

from reports_import.converters.access_converter import AccessConverter
from reports_import.converters.active_reports_converter import ActiveReportsConverter
from reports_import.converters.base_converter import BaseConverter, Engine
from reports_import.converters.crystal_converter import CrystalConverter

__all__ = [
    "BaseConverter",
    "Engine",
    "AccessConverter",
    "ActiveReportsConverter",
    "CrystalConverter",
]
