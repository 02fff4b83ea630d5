"""
Choice axes for combinatorial configuration generation.

A bank's valid wirings are the Cartesian product of small, independent
choices (role assignment, phase rotation, polarity flags). Each axis is a
closed enumeration; generators iterate the product and build one
configuration per point.
"""

from dataclasses import dataclass
from itertools import product
from math import prod
from typing import Any, Dict, Iterator, Sequence, Tuple


@dataclass(frozen=True)
class ChoiceAxis:
    """One independent choice and its possible values."""
    name: str
    options: Tuple[Any, ...]

    def __len__(self) -> int:
        return len(self.options)


@dataclass(frozen=True)
class SecondaryPairing:
    """Secondary buses spanned by the lighting pot; the remaining bus is the high leg."""
    lighting: Tuple[str, str]
    high: str

    def __str__(self) -> str:
        return f"{self.lighting[0]}-{self.lighting[1]}/{self.high}"


POLARITY = (False, True)


def axis_product_size(axes: Sequence[ChoiceAxis]) -> int:
    """Number of points in the product of the axes."""
    return prod(len(axis) for axis in axes)


def iter_choices(axes: Sequence[ChoiceAxis]) -> Iterator[Dict[str, Any]]:
    """Yield every combination as a ``{axis name: option}`` mapping, first axis slowest."""
    names = [axis.name for axis in axes]
    for combination in product(*(axis.options for axis in axes)):
        yield dict(zip(names, combination))


def describe_choices(choices: Dict[str, Any]) -> str:
    """Readable label such as ``lighting=1 rotation=0 primary_swap=0``."""
    parts = []
    for name, value in choices.items():
        if isinstance(value, bool):
            value = int(value)
        parts.append(f"{name}={value}")
    return " ".join(parts)
