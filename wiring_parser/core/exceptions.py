"""
Custom exceptions for the wiring parser package.

Learner mistakes (short circuits, incomplete groups) are never raised; they
are reported as diagnostics on a ValidationResult. These exceptions are for
caller bugs and bad scenario data.
"""

from typing import Any, Dict, Optional


class WiringParserError(Exception):
    """Base exception class for wiring parser errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} (Details: {details_str})"
        return self.message


class ConfigurationError(WiringParserError):
    """Raised when configuration or scenario data is invalid or missing."""
    pass


class ConnectionFormatError(WiringParserError):
    """Raised when a connection object cannot be read as a terminal pair."""

    def __init__(self, message: str, connection: Any = None):
        details = {}
        if connection is not None:
            details['connection'] = repr(connection)
            details['connection_type'] = type(connection).__name__
        super().__init__(message, details=details)
        self.connection = connection


class GeneratorError(WiringParserError):
    """Raised when a configuration generator gets invalid parameters or builds a bad partition."""

    def __init__(self, message: str, generator: Optional[str] = None, **details):
        if generator:
            details['generator'] = generator
        super().__init__(message, details=details)
        self.generator = generator


class ScenarioNotFoundError(WiringParserError):
    """Raised when a scenario id is not in the catalog."""

    def __init__(self, scenario_id: str, available: Optional[list] = None):
        details = {}
        if available:
            details['available'] = list(available)
        super().__init__(f"Unknown scenario: '{scenario_id}'", details=details)
        self.scenario_id = scenario_id
        self.available = list(available or [])
