"""
Core data models for transformer bank wiring.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, Iterator, List, Mapping, Optional, Tuple

from .exceptions import ConfigurationError, ConnectionFormatError


class TerminalKind(Enum):
    """Physical role of a terminal."""
    PRIMARY_BUS = "primary_bus"
    SECONDARY_BUS = "secondary_bus"
    PRIMARY_BUSHING = "primary_bushing"
    SECONDARY_BUSHING = "secondary_bushing"


@dataclass(frozen=True)
class Terminal:
    """A named physical connection point (bus position or transformer bushing)."""
    id: str
    label: str
    kind: TerminalKind

    def __str__(self) -> str:
        return f"{self.id} ({self.kind.value})"


@dataclass(frozen=True)
class Connection:
    """An undirected wire between two terminals."""
    from_terminal: str
    to_terminal: str
    connection_id: Optional[str] = None
    color: Optional[str] = None

    @property
    def terminals(self) -> Tuple[str, str]:
        return (self.from_terminal, self.to_terminal)

    @property
    def key(self) -> FrozenSet[str]:
        """Order-independent identity of the wire's endpoints."""
        return frozenset(self.terminals)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Connection':
        """Build a connection from a ``{"from": ..., "to": ...}`` mapping."""
        from_terminal = data.get('from', data.get('from_terminal'))
        to_terminal = data.get('to', data.get('to_terminal'))
        if from_terminal is None or to_terminal is None:
            raise ConnectionFormatError("Connection mapping needs 'from' and 'to' keys", data)
        return cls(
            from_terminal=str(from_terminal),
            to_terminal=str(to_terminal),
            connection_id=data.get('id'),
            color=data.get('color'),
        )

    def to_dict(self) -> Dict[str, Any]:
        result = {'from': self.from_terminal, 'to': self.to_terminal}
        if self.connection_id is not None:
            result['id'] = self.connection_id
        if self.color is not None:
            result['color'] = self.color
        return result

    def __str__(self) -> str:
        return f"{self.from_terminal} <-> {self.to_terminal}"


@dataclass(frozen=True)
class RequiredGroup:
    """Terminals that must all share one electrical node."""
    terminals: Tuple[str, ...]

    def __post_init__(self):
        if not self.terminals:
            raise ConfigurationError("Required group must contain at least one terminal")

    def __iter__(self) -> Iterator[str]:
        return iter(self.terminals)

    def __len__(self) -> int:
        return len(self.terminals)

    def __contains__(self, terminal: object) -> bool:
        return terminal in self.terminals

    def is_within(self, node: FrozenSet[str]) -> bool:
        """True if every terminal of the group lies in ``node``."""
        return all(terminal in node for terminal in self.terminals)

    def touches(self, node: FrozenSet[str]) -> bool:
        """True if at least one terminal of the group lies in ``node``."""
        return any(terminal in node for terminal in self.terminals)

    def __str__(self) -> str:
        return ", ".join(self.terminals)


@dataclass(frozen=True)
class AcceptanceConfiguration:
    """One complete, independently valid wiring solution."""
    groups: Tuple[RequiredGroup, ...]
    label: str = ""

    @classmethod
    def from_lists(cls, groups: Iterable[Iterable[str]], label: str = "") -> 'AcceptanceConfiguration':
        return cls(
            groups=tuple(RequiredGroup(tuple(group)) for group in groups),
            label=label,
        )

    def __iter__(self) -> Iterator[RequiredGroup]:
        return iter(self.groups)

    def __len__(self) -> int:
        return len(self.groups)

    def terminals(self) -> List[str]:
        """All terminals referenced by the configuration, in group order."""
        return [terminal for group in self.groups for terminal in group]

    def is_partition(self) -> bool:
        """True if no terminal appears in more than one group."""
        terminals = self.terminals()
        return len(terminals) == len(set(terminals))

    def to_lists(self) -> List[List[str]]:
        return [list(group.terminals) for group in self.groups]


@dataclass
class MatchResult:
    """Outcome of matching the user's electrical nodes against one configuration."""
    short_circuit: bool = False
    satisfied_count: int = 0
    total_groups: int = 0
    errors: List[str] = field(default_factory=list)

    @property
    def completeness(self) -> Optional[float]:
        """Percentage of satisfied groups, or None when the configuration is shorted."""
        if self.short_circuit:
            return None
        if self.total_groups == 0:
            return 100.0
        return (self.satisfied_count / self.total_groups) * 100

    @property
    def is_complete(self) -> bool:
        return not self.short_circuit and not self.errors

    def __str__(self) -> str:
        if self.short_circuit:
            return "MatchResult(SHORT CIRCUIT)"
        return f"MatchResult({self.satisfied_count}/{self.total_groups} groups satisfied)"
