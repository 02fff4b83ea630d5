"""
Terminal identifiers for transformer bank scenarios.

Bus terminals are ``BUS_P_<phase>`` (primary) and ``BUS_S_<phase>``
(secondary); transformer bushings are ``T<n>_<bushing>``. The drawing
layer maps these ids to screen positions; the grader only compares them.
"""

from typing import Dict, Iterable, List

from wiring_parser.core.models import AcceptanceConfiguration, Terminal, TerminalKind

PRIMARY_BUSHINGS = ("H1", "H2")
SECONDARY_BUSHINGS = ("X1", "X2", "X3")


def primary_bus(phase: str) -> str:
    return f"BUS_P_{phase}"


def secondary_bus(phase: str) -> str:
    return f"BUS_S_{phase}"


def bushing(transformer: int, name: str) -> str:
    return f"T{transformer}_{name}"


def scenario_terminals(
    primary_phases: Iterable[str],
    secondary_phases: Iterable[str],
    num_transformers: int,
) -> List[Terminal]:
    """Every terminal of a bank: primary buses, secondary buses, then bushings per transformer."""
    terminals = [Terminal(primary_bus(p), p, TerminalKind.PRIMARY_BUS) for p in primary_phases]
    terminals += [Terminal(secondary_bus(p), p, TerminalKind.SECONDARY_BUS) for p in secondary_phases]
    for index in range(1, num_transformers + 1):
        terminals += [
            Terminal(bushing(index, name), name, TerminalKind.PRIMARY_BUSHING)
            for name in PRIMARY_BUSHINGS
        ]
        terminals += [
            Terminal(bushing(index, name), name, TerminalKind.SECONDARY_BUSHING)
            for name in SECONDARY_BUSHINGS
        ]
    return terminals


class BusGroups:
    """
    Collects required groups keyed by bus terminal.

    Each group starts with its bus id, so every path that ties a bushing to
    the same bus lands in the same group.
    """

    def __init__(self):
        self._groups: Dict[str, List[str]] = {}

    def tie(self, bus: str, *terminals: str) -> None:
        group = self._groups.setdefault(bus, [bus])
        group.extend(terminals)

    def build(self, label: str = "") -> AcceptanceConfiguration:
        return AcceptanceConfiguration.from_lists(self._groups.values(), label=label)
