"""
Graph builder module for turning user wires into electrical nodes.
"""

import logging
from typing import Any, FrozenSet, Iterable, List, Mapping, Tuple

import networkx as nx

from ..core.exceptions import ConnectionFormatError
from ..core.models import Connection

logger = logging.getLogger(__name__)


def connection_endpoints(connection: Any) -> Tuple[str, str]:
    """
    Read the two terminal ids of a wire.

    Accepts Connection objects, ``{"from": ..., "to": ...}`` mappings and
    plain two-item sequences.
    """
    if isinstance(connection, Connection):
        return connection.terminals
    if isinstance(connection, Mapping):
        return Connection.from_dict(connection).terminals
    if isinstance(connection, (tuple, list)) and len(connection) == 2:
        return (str(connection[0]), str(connection[1]))
    raise ConnectionFormatError("Cannot read connection as a terminal pair", connection)


class TerminalGraphBuilder:
    """
    Builds undirected terminal graphs from user connections.

    Any string is a valid terminal id; terminals that no connection mentions
    never appear in the graph.
    """

    def build_graph(self, connections: Iterable[Any]) -> nx.Graph:
        """
        Build a NetworkX graph with one edge per wire.

        Args:
            connections: Connection objects, mappings or terminal pairs

        Returns:
            Undirected graph whose nodes are terminal ids
        """
        graph = nx.Graph(name="Terminal Graph")
        for connection in connections:
            a, b = connection_endpoints(connection)
            # Duplicate wires collapse onto the same edge.
            graph.add_edge(a, b)
        return graph

    def components(self, graph: nx.Graph) -> List[FrozenSet[str]]:
        """Connected components of an already built terminal graph."""
        return [frozenset(component) for component in nx.connected_components(graph)]

    def electrical_nodes(self, connections: Iterable[Any]) -> List[FrozenSet[str]]:
        """
        Partition the wired terminals into electrical nodes.

        Returns:
            Disjoint, non-empty terminal sets in no particular order
        """
        graph = self.build_graph(connections)
        nodes = self.components(graph)
        logger.debug(
            f"Built {len(nodes)} electrical nodes from {graph.number_of_edges()} distinct wires"
        )
        return nodes


def build_electrical_nodes(connections: Iterable[Any]) -> List[FrozenSet[str]]:
    """Functional shortcut for TerminalGraphBuilder().electrical_nodes()."""
    return TerminalGraphBuilder().electrical_nodes(connections)
