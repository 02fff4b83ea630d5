"""
Validators package for grading user wiring.
"""

from .acceptance_matcher import AcceptanceMatcher
from .best_match_selector import BestMatchSelector, validate_connections
from .validation_result import ValidationResult

__all__ = [
    'AcceptanceMatcher',
    'BestMatchSelector',
    'validate_connections',
    'ValidationResult',
]
