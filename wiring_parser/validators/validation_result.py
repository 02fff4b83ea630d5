"""
Validation result class returned to the drawing layer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class ValidationResult:
    """
    Outcome of grading one wiring against a scenario.

    ``score`` is 0-100; ``errors`` holds the learner-facing diagnostics of
    the closest acceptance configuration and is empty when passed.
    """

    passed: bool = False
    score: float = 0.0
    errors: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def reason(self) -> str:
        """Get the primary reason for failure."""
        if self.passed:
            return ""
        return self.errors[0] if self.errors else "Unknown validation error"

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "passed": self.passed,
            "score": self.score,
            "errors": list(self.errors),
            "metadata": dict(self.metadata),
        }

    def __str__(self) -> str:
        if self.passed:
            return "Validation passed (score 100)"

        status = f"Validation failed (score {self.score:.0f}): {self.reason}"
        if len(self.errors) > 1:
            status += f"\nErrors ({len(self.errors)}):"
            for error in self.errors:
                status += f"\n  - {error}"
        return status
