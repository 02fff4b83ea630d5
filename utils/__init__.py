"""
Console and logging helpers for the grader.
"""

from .logging_utils import setup_logging, print_validation_result, print_exam_grade

__all__ = [
    'setup_logging',
    'print_validation_result',
    'print_exam_grade',
]
