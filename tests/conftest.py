"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from reports_import.models import Control, ConversionResult, GeneratedSubreport, Report, SubreportControl
from reports_import.registry import ConverterRegistry
from reports_import.tracing import get_engine_logger


class FakeEngine:
    """Stand-in for an external conversion engine that records its calls."""

    def __init__(self, report_name: str = "Main"):
        self.report_name = report_name
        self.calls = []

    def __call__(self, path: Path) -> ConversionResult:
        self.calls.append(path)
        return ConversionResult(Report(self.report_name, controls=[Control("Title")]))


class FakeCrystalEngine:
    """Crystal stand-in that emits one subreport per name in ``subreport_names``."""

    def __init__(self, subreport_names=(), warning: str = None):
        self.subreport_names = list(subreport_names)
        self.warning = warning
        self.calls = []

    def __call__(self, path, *, unrecognized_function_behavior, on_subreport_generated):
        self.calls.append((path, unrecognized_function_behavior))
        if self.warning:
            get_engine_logger().warning(self.warning)

        root = Report("Main", controls=[Control("Title")])
        generated = []
        for name in self.subreport_names:
            control = SubreportControl(f"sub_{len(generated)}")
            root.controls.append(control)
            subreport = GeneratedSubreport(
                original_name=name,
                report=Report(name, controls=[Control("Detail")]),
                control=control,
            )
            on_subreport_generated(subreport)
            generated.append(subreport)
        return ConversionResult(root, generated)


@pytest.fixture
def access_engine() -> FakeEngine:
    return FakeEngine("AccessReport")


@pytest.fixture
def active_engine() -> FakeEngine:
    return FakeEngine("ActiveReport")


@pytest.fixture
def crystal_engine() -> FakeCrystalEngine:
    return FakeCrystalEngine(subreport_names=["Sub:1"])


@pytest.fixture
def registry(access_engine, active_engine, crystal_engine) -> ConverterRegistry:
    """Registry with every format enabled."""
    registry = ConverterRegistry()
    registry.register("access", access_engine)
    registry.register("activereports", active_engine)
    registry.register("crystal", crystal_engine)
    return registry


@pytest.fixture
def sample_rpt_file(tmp_path) -> Path:
    """Create an input file with the Crystal extension."""
    rpt_file = tmp_path / "report.rpt"
    rpt_file.write_bytes(b"\xd0\xcf\x11\xe0")
    return rpt_file


@pytest.fixture
def sample_mdb_file(tmp_path) -> Path:
    """Create an input file with the Access extension."""
    mdb_file = tmp_path / "reports.mdb"
    mdb_file.write_bytes(b"\x00\x01\x00\x00Standard Jet DB")
    return mdb_file


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep REPORTS_IMPORT_* variables from the host out of the tests."""
    for name in ("REPORTS_IMPORT_LOG_LEVEL", "REPORTS_IMPORT_TRACE_LEVEL", "REPORTS_IMPORT_FORMATS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_engine():
    """Factory for simple fake engines."""
    return FakeEngine
