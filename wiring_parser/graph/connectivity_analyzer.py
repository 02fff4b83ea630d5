"""
Connectivity analyzer for user wiring.
"""

import logging
from typing import Any, Iterable, Optional

from .graph_builder import TerminalGraphBuilder

logger = logging.getLogger(__name__)


class ConnectivityResult:
    """Results from connectivity analysis."""

    def __init__(self):
        self.electrical_nodes = []
        self.isolated_terminals = []
        self.unknown_terminals = []
        self.analysis_details = {}

    @property
    def node_count(self) -> int:
        return len(self.electrical_nodes)

    def __str__(self) -> str:
        return (
            f"ConnectivityResult(nodes={self.node_count}, "
            f"isolated={len(self.isolated_terminals)}, "
            f"unknown={len(self.unknown_terminals)})"
        )


class ConnectivityAnalyzer:
    """
    Analyzes how a set of wires joins the terminals of a scenario.
    """

    def __init__(self, graph_builder: Optional[TerminalGraphBuilder] = None):
        self.graph_builder = graph_builder or TerminalGraphBuilder()

    def analyze(
        self,
        connections: Iterable[Any],
        terminals: Optional[Iterable[str]] = None,
    ) -> ConnectivityResult:
        """
        Analyze connectivity of the given wires.

        Args:
            connections: User connections
            terminals: Every terminal id of the scenario. When given, the
                result lists unwired terminals and wired ids the scenario
                does not know.

        Returns:
            ConnectivityResult with analysis details
        """
        result = ConnectivityResult()
        graph = self.graph_builder.build_graph(connections)
        result.electrical_nodes = self.graph_builder.components(graph)

        wired = set(graph.nodes())
        if terminals is not None:
            known = list(terminals)
            known_set = set(known)
            result.isolated_terminals = [t for t in known if t not in wired]
            result.unknown_terminals = sorted(wired - known_set)
            if result.unknown_terminals:
                logger.warning(f"Connections reference unknown terminals: {result.unknown_terminals}")

        result.analysis_details = {
            'wired_terminals': len(wired),
            'distinct_wires': graph.number_of_edges(),
            'electrical_nodes': result.node_count,
            'isolated_count': len(result.isolated_terminals),
        }
        return result
