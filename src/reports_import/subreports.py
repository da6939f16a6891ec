"""
Writes generated subreports next to the main output file.

Each subreport is saved to ``<out-stem>_<name><out-suffix>`` and the parent's
placeholder control is pointed at that file. The Crystal engine fires the
handler during conversion, so all sibling files exist before the root report
is saved.
"""

import logging
from pathlib import Path
from typing import List, Union

from reports_import.models import GeneratedSubreport

logger = logging.getLogger(__name__)

# Characters not allowed in a file name on Windows, the strictest target.
INVALID_FILE_NAME_CHARS = frozenset('"<>|:*?\\/' + "".join(chr(i) for i in range(32)))


def escape_file_name(name: str) -> str:
    """Replace characters that are invalid in a file name with ``_``."""
    return "".join("_" if char in INVALID_FILE_NAME_CHARS else char for char in name)


def subreport_path(output_path: Union[str, Path], subreport_name: str) -> Path:
    """Sibling path of ``output_path`` for the named subreport.

    >>> subreport_path("out/main.xml", "Sub:1").as_posix()
    'out/main_Sub_1.xml'
    """
    output_path = Path(output_path)
    # A name made only of an extension (".xml") has an empty stem.
    stem, dot, extension = output_path.name.rpartition(".")
    if not dot:
        stem, extension = output_path.name, ""
    suffix = f".{extension}" if extension else ""
    return output_path.with_name(f"{stem}_{escape_file_name(subreport_name)}{suffix}")


class SubreportMaterializer:
    """Subreport handler bound to the main output path.

    Args:
        output_path: Path the root report will be saved to
    """

    def __init__(self, output_path: Union[str, Path]):
        self.output_path = Path(output_path)
        self.written_paths: List[Path] = []

    def __call__(self, subreport: GeneratedSubreport) -> None:
        target = subreport_path(self.output_path, subreport.original_name)
        subreport.report.save_layout_to_xml(target)
        subreport.control.report_source_url = str(target)
        self.written_paths.append(target)
        logger.info(f"Saved subreport '{subreport.original_name}' to {target}")
