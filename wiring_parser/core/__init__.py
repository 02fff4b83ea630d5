"""
Core components for transformer bank wiring validation.

This package provides the fundamental data structures and exceptions
shared by the graph builder, the validators and the configuration
generators.
"""

from .models import (
    Terminal,
    TerminalKind,
    Connection,
    RequiredGroup,
    AcceptanceConfiguration,
    MatchResult,
)
from .exceptions import (
    WiringParserError,
    ConfigurationError,
    ConnectionFormatError,
    GeneratorError,
    ScenarioNotFoundError,
)

__all__ = [
    'Terminal',
    'TerminalKind',
    'Connection',
    'RequiredGroup',
    'AcceptanceConfiguration',
    'MatchResult',
    'WiringParserError',
    'ConfigurationError',
    'ConnectionFormatError',
    'GeneratorError',
    'ScenarioNotFoundError',
]
