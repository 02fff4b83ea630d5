"""
Best-match selector: grades user wiring against every acceptance
configuration of a scenario.
"""

import logging
from typing import Any, Iterable, Optional, Sequence

from ..config.validation_config import ValidationConfig
from ..core.models import AcceptanceConfiguration
from ..graph.graph_builder import TerminalGraphBuilder
from .acceptance_matcher import AcceptanceMatcher
from .validation_result import ValidationResult

logger = logging.getLogger(__name__)


class BestMatchSelector:
    """
    Runs the acceptance matcher over all configurations of a scenario.

    The first fully matched configuration passes the wiring. Otherwise the
    closest incomplete (non-shorted) configuration provides the score and
    diagnostics. A shorted configuration only reports its diagnostic while
    nothing better has been found; when every configuration shorts, the
    first one evaluated is reported.
    """

    def __init__(
        self,
        config: Optional[ValidationConfig] = None,
        graph_builder: Optional[TerminalGraphBuilder] = None,
    ):
        self.config = config or ValidationConfig()
        self.graph_builder = graph_builder or TerminalGraphBuilder()
        self.matcher = AcceptanceMatcher(self.config)

    def select(
        self,
        configurations: Sequence[AcceptanceConfiguration],
        connections: Iterable[Any],
    ) -> ValidationResult:
        """
        Grade connections against a scenario's acceptance configurations.

        Args:
            configurations: Every valid wiring of the scenario
            connections: User wires (Connection objects, mappings or pairs)

        Returns:
            ValidationResult for the best matching configuration
        """
        nodes = self.graph_builder.electrical_nodes(connections)

        best_score = 0.0
        best_errors = [self.config.no_connections_message]
        best_is_sentinel = True
        best_label = None
        checked = 0

        for configuration in configurations:
            checked += 1
            match = self.matcher.match(configuration, nodes)

            if match.short_circuit:
                if best_is_sentinel:
                    best_errors = list(match.errors)
                    best_is_sentinel = False
                    best_label = configuration.label
                continue

            if not match.errors:
                logger.debug(f"Wiring matches configuration '{configuration.label}'")
                return ValidationResult(
                    passed=True,
                    score=100.0,
                    errors=[],
                    metadata={
                        'configurations_checked': checked,
                        'electrical_nodes': len(nodes),
                        'matched_configuration': configuration.label,
                    },
                )

            if match.completeness > best_score:
                best_score = match.completeness
                best_errors = list(match.errors)
                best_is_sentinel = False
                best_label = configuration.label

        logger.debug(
            f"No configuration matched after {checked} checks; best score {best_score:.1f}"
        )
        metadata = {
            'configurations_checked': checked,
            'electrical_nodes': len(nodes),
        }
        if best_label is not None:
            metadata['best_configuration'] = best_label
        return ValidationResult(passed=False, score=best_score, errors=best_errors, metadata=metadata)


def validate_connections(
    connections: Iterable[Any],
    configurations: Sequence[AcceptanceConfiguration],
    config: Optional[ValidationConfig] = None,
) -> ValidationResult:
    """Grade user connections against a list of acceptance configurations."""
    return BestMatchSelector(config).select(configurations, connections)
