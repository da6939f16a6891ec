"""
MS Access report converter.
"""

from reports_import.config_models import FormatName
from reports_import.converters.base_converter import BaseConverter


class AccessConverter(BaseConverter):
    """Converts reports stored in Access databases (*.mdb, *.mde)."""
    format_name = FormatName.ACCESS
    extensions = (".mdb", ".mde")
    description = "*.mdb or *.mde file matches MS Access reports."
