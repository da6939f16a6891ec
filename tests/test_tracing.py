"""Tests for engine diagnostics on the console."""

import io

from reports_import.tracing import ConsoleTraceHandler, configure_tracer, get_engine_logger


def test_warnings_and_errors_reach_console():
    stream = io.StringIO()
    configure_tracer("WARNING", stream=stream)
    engine_logger = get_engine_logger()

    engine_logger.info("loading section")
    engine_logger.warning("function CDate is not supported")
    engine_logger.error("control Box1 dropped")

    output = stream.getvalue()
    assert "loading section" not in output
    assert "WARNING: function CDate is not supported" in output
    assert "ERROR: control Box1 dropped" in output


def test_error_level_hides_warnings():
    stream = io.StringIO()
    configure_tracer("ERROR", stream=stream)
    get_engine_logger().warning("hidden")
    assert stream.getvalue() == ""


def test_configure_twice_keeps_one_listener():
    configure_tracer(stream=io.StringIO())
    configure_tracer(stream=io.StringIO())
    handlers = [h for h in get_engine_logger().handlers if isinstance(h, ConsoleTraceHandler)]
    assert len(handlers) == 1
