"""
Configuration package for the wiring parser.
"""

from .validation_config import ValidationConfig

__all__ = [
    'ValidationConfig',
]
