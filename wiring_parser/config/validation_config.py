"""
Configuration settings for wiring validation.

Centralizes the diagnostic texts reported to the learner and the exam pass
threshold so every validator and grader reports consistently.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict

from ..core.exceptions import ConfigurationError


@dataclass
class ValidationConfig:
    """
    Configuration settings for the validation system.

    The default messages are the ones shown to learners by the exam UI;
    callers may localize them without touching the validators.
    """

    # Diagnostic messages
    no_connections_message: str = "No connections made."
    short_circuit_message: str = "Short Circuit Detected! Distinct phases connected together."
    incomplete_prefix: str = "Incomplete: "
    group_separator: str = ", "

    # Grading
    pass_threshold: float = 70.0

    def __post_init__(self):
        try:
            self.pass_threshold = float(self.pass_threshold)
        except (TypeError, ValueError):
            raise ConfigurationError(
                "pass_threshold must be a number",
                details={'pass_threshold': repr(self.pass_threshold)},
            ) from None
        if not 0.0 <= self.pass_threshold <= 100.0:
            raise ConfigurationError(
                "pass_threshold must be between 0 and 100",
                details={'pass_threshold': self.pass_threshold},
            )

    def format_incomplete(self, terminals) -> str:
        """Diagnostic for a required group not joined in any single node."""
        return f"{self.incomplete_prefix}{self.group_separator.join(terminals)}"

    def get_setting(self, key: str, default: Any = None) -> Any:
        """
        Get a validation setting value.

        Args:
            key: Setting key to retrieve
            default: Default value if key not found

        Returns:
            Setting value or default
        """
        return getattr(self, key, default)

    def update_settings(self, **kwargs) -> None:
        """
        Update multiple validation settings.

        Unknown keys are ignored. Raises ConfigurationError, leaving the
        settings unchanged, if the result is invalid.
        """
        previous = self.to_dict()
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)
        try:
            self.__post_init__()
        except ConfigurationError:
            for key, value in previous.items():
                setattr(self, key, value)
            raise

    def to_dict(self) -> Dict[str, Any]:
        """Export configuration as dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'ValidationConfig':
        """Create configuration from dictionary."""
        if not isinstance(config_dict, dict):
            raise ConfigurationError(
                "Validation settings must be an object",
                details={'type': type(config_dict).__name__},
            )
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config_dict) - known)
        if unknown:
            raise ConfigurationError(
                "Unknown validation settings",
                details={'unknown': unknown},
            )
        return cls(**config_dict)

    def __str__(self) -> str:
        return (
            f"ValidationConfig(\n"
            f"  pass_threshold={self.pass_threshold},\n"
            f"  no_connections_message='{self.no_connections_message}'\n"
            f")"
        )
