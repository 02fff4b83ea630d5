"""
Wiring Parser Package - Transformer Bank Wiring Validation

Grades a learner's point-to-point wiring of a transformer bank. Two
terminals are correct when they share an electrical node, whatever path
joins them; a wiring is wrong only when it shorts two required groups or
leaves a required group split.

Architecture:
- core/: Data models and exceptions
- graph/: Terminal graph construction and connectivity analysis
- validators/: Acceptance matching and best-match selection
- config/: Validation settings

Example Usage:
    from wiring_parser import validate_connections
    from transformer_banks import get_scenario

    scenario = get_scenario("wye-wye-120-208")
    result = validate_connections(
        [("BUS_P_A", "T1_H1"), ("BUS_P_N", "T1_H2")],
        scenario.valid_configurations,
    )
    print(result.passed, result.score, result.errors)
"""

from .core.models import (
    Terminal,
    TerminalKind,
    Connection,
    RequiredGroup,
    AcceptanceConfiguration,
    MatchResult,
)
from .core.exceptions import (
    WiringParserError,
    ConfigurationError,
    ConnectionFormatError,
    GeneratorError,
    ScenarioNotFoundError,
)
from .config.validation_config import ValidationConfig
from .graph.graph_builder import TerminalGraphBuilder, build_electrical_nodes
from .graph.connectivity_analyzer import ConnectivityAnalyzer, ConnectivityResult
from .validators.acceptance_matcher import AcceptanceMatcher
from .validators.best_match_selector import BestMatchSelector, validate_connections
from .validators.validation_result import ValidationResult

__version__ = "1.0.0"

__all__ = [
    # Core models
    'Terminal',
    'TerminalKind',
    'Connection',
    'RequiredGroup',
    'AcceptanceConfiguration',
    'MatchResult',

    # Exceptions
    'WiringParserError',
    'ConfigurationError',
    'ConnectionFormatError',
    'GeneratorError',
    'ScenarioNotFoundError',

    # Configuration
    'ValidationConfig',

    # Graph
    'TerminalGraphBuilder',
    'build_electrical_nodes',
    'ConnectivityAnalyzer',
    'ConnectivityResult',

    # Validation
    'AcceptanceMatcher',
    'BestMatchSelector',
    'validate_connections',
    'ValidationResult',
]

# Module configuration
import logging
logging.getLogger(__name__).addHandler(logging.NullHandler())
