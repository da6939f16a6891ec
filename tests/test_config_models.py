"""
Tests for Pydantic-based option and settings models.
"""

import pytest
from pydantic import ValidationError

from reports_import.arguments import ArgumentMap
from reports_import.config_models import (
    CrystalOptions,
    FormatName,
    ImportSettings,
    UnrecognizedFunctionBehavior,
)


class TestCrystalOptions:
    """Test /crystal option handling."""

    def test_ignore(self):
        options = CrystalOptions.from_sub_arguments(
            ArgumentMap([("UnrecognizedFunctionBehavior", "Ignore")])
        )
        assert options.unrecognized_function_behavior == UnrecognizedFunctionBehavior.IGNORE

    def test_ignore_case_insensitive(self):
        options = CrystalOptions.from_sub_arguments(
            ArgumentMap([("unrecognizedfunctionbehavior", "IGNORE")])
        )
        assert options.unrecognized_function_behavior == UnrecognizedFunctionBehavior.IGNORE

    @pytest.mark.parametrize("value", ["Foo", "", None, "InsertWarning"])
    def test_other_values_insert_warning(self, value):
        options = CrystalOptions.from_sub_arguments(
            ArgumentMap([("UnrecognizedFunctionBehavior", value)])
        )
        assert options.unrecognized_function_behavior == UnrecognizedFunctionBehavior.INSERT_WARNING

    def test_absent_option_inserts_warning(self):
        options = CrystalOptions.from_sub_arguments(ArgumentMap())
        assert options.unrecognized_function_behavior == UnrecognizedFunctionBehavior.INSERT_WARNING


class TestImportSettings:
    """Test settings loaded from the environment."""

    def test_defaults(self):
        settings = ImportSettings.from_env({})
        assert settings.log_level == "WARNING"
        assert settings.trace_level == "WARNING"
        assert settings.formats is None
        assert settings.is_enabled(FormatName.CRYSTAL)

    def test_formats_from_comma_list(self):
        settings = ImportSettings.from_env({"REPORTS_IMPORT_FORMATS": "Crystal, access"})
        assert settings.formats == [FormatName.CRYSTAL, FormatName.ACCESS]
        assert settings.is_enabled(FormatName.ACCESS)
        assert not settings.is_enabled(FormatName.ACTIVE_REPORTS)

    def test_levels_normalized(self):
        settings = ImportSettings.from_env({
            "REPORTS_IMPORT_LOG_LEVEL": "debug",
            "REPORTS_IMPORT_TRACE_LEVEL": "error",
        })
        assert settings.log_level == "DEBUG"
        assert settings.trace_level == "ERROR"

    def test_invalid_format(self):
        with pytest.raises(ValidationError):
            ImportSettings.from_env({"REPORTS_IMPORT_FORMATS": "word"})

    def test_invalid_trace_level(self):
        with pytest.raises(ValidationError) as exc_info:
            ImportSettings.from_env({"REPORTS_IMPORT_TRACE_LEVEL": "INFO"})
        assert "trace level" in str(exc_info.value).lower()

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("REPORTS_IMPORT_LOG_LEVEL", "INFO")
        assert ImportSettings.from_env().log_level == "INFO"
