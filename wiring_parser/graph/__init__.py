"""
Graph Module - Terminal Graph Construction and Analysis

Turns user wires into electrical nodes (connected components) and reports
how the wiring covers a scenario's terminals.
"""

from .graph_builder import TerminalGraphBuilder, build_electrical_nodes, connection_endpoints
from .connectivity_analyzer import ConnectivityAnalyzer, ConnectivityResult

__all__ = [
    'TerminalGraphBuilder',
    'build_electrical_nodes',
    'connection_endpoints',
    'ConnectivityAnalyzer',
    'ConnectivityResult',
]
