"""
Pydantic models for converter options and process settings.
"""

import os
from enum import Enum
from typing import List, Mapping, Optional

from pydantic import BaseModel, Field, field_validator


class FormatName(str, Enum):
    """Report formats that can be enabled."""
    ACCESS = "access"
    ACTIVE_REPORTS = "activereports"
    CRYSTAL = "crystal"


class UnrecognizedFunctionBehavior(str, Enum):
    """What the Crystal engine does with formula functions it cannot map."""
    INSERT_WARNING = "InsertWarning"
    IGNORE = "Ignore"

    @classmethod
    def parse(cls, value: Optional[str]) -> "UnrecognizedFunctionBehavior":
        """Match ``value`` case-insensitively; anything unknown inserts warnings."""
        if value is not None:
            for member in cls:
                if member.value.casefold() == value.casefold():
                    return member
        return cls.INSERT_WARNING


class CrystalOptions(BaseModel):
    """Options for the Crystal Reports converter (``/crystal:...``)."""
    unrecognized_function_behavior: UnrecognizedFunctionBehavior = Field(
        UnrecognizedFunctionBehavior.INSERT_WARNING,
        description="Handling of unrecognized formula functions"
    )

    @classmethod
    def from_sub_arguments(cls, sub_arguments: Mapping) -> "CrystalOptions":
        """Build options from the parsed ``/crystal`` sub-arguments.

        Args:
            sub_arguments: Case-insensitive option map

        Returns:
            Validated CrystalOptions instance
        """
        behavior = UnrecognizedFunctionBehavior.parse(
            sub_arguments.get("UnrecognizedFunctionBehavior")
        )
        return cls(unrecognized_function_behavior=behavior)


class ImportSettings(BaseModel):
    """Process-wide settings, read from the environment."""
    log_level: str = Field("WARNING", description="Level of the importer's own log output")
    trace_level: str = Field("WARNING", description="Level of engine diagnostics on the console")
    formats: Optional[List[FormatName]] = Field(
        None,
        description="Formats to enable (None = every format with an available engine)"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, value):
        """Ensure a standard logging level name."""
        value = value.upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR"):
            raise ValueError(f"Invalid log level: {value}")
        return value

    @field_validator('trace_level')
    @classmethod
    def validate_trace_level(cls, value):
        """Engine tracing is limited to warnings and errors."""
        value = value.upper()
        if value not in ("WARNING", "ERROR"):
            raise ValueError(f"Invalid trace level: {value} (expected WARNING or ERROR)")
        return value

    @field_validator('formats', mode='before')
    @classmethod
    def split_formats(cls, value):
        """Accept a comma-separated string as well as a list."""
        if isinstance(value, str):
            return [part.strip().lower() for part in value.split(",") if part.strip()]
        return value

    def is_enabled(self, format_name: FormatName) -> bool:
        """Check whether a format is allowed by these settings."""
        return self.formats is None or format_name in self.formats

    @classmethod
    def from_env(cls, environ: Optional[Mapping] = None) -> "ImportSettings":
        """
        Load settings from ``REPORTS_IMPORT_*`` environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Returns:
            Validated ImportSettings instance

        Raises:
            ValidationError: If a variable holds an invalid value
        """
        environ = os.environ if environ is None else environ
        values = {}
        for name, env_var in (
            ("log_level", "REPORTS_IMPORT_LOG_LEVEL"),
            ("trace_level", "REPORTS_IMPORT_TRACE_LEVEL"),
            ("formats", "REPORTS_IMPORT_FORMATS"),
        ):
            if environ.get(env_var):
                values[name] = environ[env_var]
        return cls.model_validate(values)
