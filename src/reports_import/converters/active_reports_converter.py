"""
ActiveReports converter.
"""

from reports_import.config_models import FormatName
from reports_import.converters.base_converter import BaseConverter


class ActiveReportsConverter(BaseConverter):
    """Converts ActiveReports layouts (*.rpx)."""
    format_name = FormatName.ACTIVE_REPORTS
    extensions = (".rpx",)
    description = "*.rpx file matches ActiveReports."
