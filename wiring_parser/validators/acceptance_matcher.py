"""
Acceptance matcher: compares the user's electrical nodes with one
acceptance configuration.
"""

import logging
from typing import FrozenSet, Iterable, Optional

from ..config.validation_config import ValidationConfig
from ..core.models import AcceptanceConfiguration, MatchResult

logger = logging.getLogger(__name__)


class AcceptanceMatcher:
    """
    Checks one acceptance configuration against the user's electrical nodes.

    A node that touches two groups of the configuration is a short circuit
    and disqualifies the configuration. Otherwise each group is satisfied
    only when a single node holds all of its terminals.
    """

    def __init__(self, config: Optional[ValidationConfig] = None):
        self.config = config or ValidationConfig()

    def match(
        self,
        configuration: AcceptanceConfiguration,
        electrical_nodes: Iterable[FrozenSet[str]],
    ) -> MatchResult:
        """
        Match a configuration.

        Args:
            configuration: Required groups of one valid wiring
            electrical_nodes: User nodes from the terminal graph builder

        Returns:
            MatchResult with short-circuit flag, satisfied count and diagnostics
        """
        nodes = list(electrical_nodes)
        result = MatchResult(total_groups=len(configuration))

        for node in nodes:
            touched = [
                index for index, group in enumerate(configuration.groups)
                if group.touches(node)
            ]
            if len(touched) > 1:
                logger.debug(
                    f"Configuration '{configuration.label}' shorted: node touches groups {touched}"
                )
                result.short_circuit = True
                result.errors.append(self.config.short_circuit_message)
                return result

        for group in configuration.groups:
            if any(group.is_within(node) for node in nodes):
                result.satisfied_count += 1
            else:
                result.errors.append(self.config.format_incomplete(group.terminals))

        return result
