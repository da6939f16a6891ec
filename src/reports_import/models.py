"""
In-memory report model produced by the conversion engines.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Union

from lxml import etree

logger = logging.getLogger(__name__)

SUBREPORT_CONTROL_TYPE = "Subreport"


@dataclass
class Control:
    """A report control (label, field, line, ...)."""
    name: str
    type: str = "Label"
    properties: Dict[str, str] = field(default_factory=dict)

    def to_xml_element(self) -> etree._Element:
        element = etree.Element("Control", Name=self.name, Type=self.type)
        for key, value in self.properties.items():
            etree.SubElement(element, "Property", Name=key).text = value
        return element


@dataclass
class SubreportControl(Control):
    """Placeholder control that references another serialized report."""
    type: str = SUBREPORT_CONTROL_TYPE
    report_source_url: Optional[str] = None

    def to_xml_element(self) -> etree._Element:
        element = super().to_xml_element()
        if self.report_source_url is not None:
            element.set("ReportSourceUrl", self.report_source_url)
        return element


@dataclass
class Report:
    """Report layout: named, with properties and an ordered control list."""
    name: str
    controls: List[Control] = field(default_factory=list)
    properties: Dict[str, str] = field(default_factory=dict)

    def subreport_controls(self) -> Iterator[SubreportControl]:
        """Iterate the subreport placeholders of this report."""
        for control in self.controls:
            if isinstance(control, SubreportControl):
                yield control

    def to_xml_element(self) -> etree._Element:
        """Build the XML layout tree of the report."""
        root = etree.Element("Report", Name=self.name)
        props = etree.SubElement(root, "Properties")
        for key, value in self.properties.items():
            etree.SubElement(props, "Property", Name=key).text = value
        controls = etree.SubElement(root, "Controls")
        for control in self.controls:
            controls.append(control.to_xml_element())
        return root

    def save_layout_to_xml(self, path: Union[str, Path]) -> None:
        """Serialize the report layout to an XML file.

        Args:
            path: Destination file; overwritten if it exists
        """
        tree = etree.ElementTree(self.to_xml_element())
        with open(path, "wb") as f:
            tree.write(f, encoding="utf-8", xml_declaration=True, pretty_print=True)
        logger.debug(f"Saved layout of '{self.name}' to {path}")


@dataclass
class GeneratedSubreport:
    """A subreport split out of its parent during conversion.

    Attributes:
        original_name: Subreport name in the source file
        report: The subreport layout
        control: Placeholder control in the parent report
    """
    original_name: str
    report: Report
    control: SubreportControl


@dataclass
class ConversionResult:
    """Output of a converter: the root report plus generated subreports."""
    target_report: Report
    generated_subreports: List[GeneratedSubreport] = field(default_factory=list)
