"""
Generic expansion of a bank's choice axes into acceptance configurations.
"""

import logging
from functools import lru_cache
from typing import Any, Dict, Protocol, Sequence, Tuple

from wiring_parser.core.exceptions import GeneratorError
from wiring_parser.core.models import AcceptanceConfiguration

from .choice_axes import ChoiceAxis, axis_product_size, iter_choices

logger = logging.getLogger(__name__)


class BankTopology(Protocol):
    """Hashable topology parameters that know their choice axes."""

    name: str

    def axes(self) -> Sequence[ChoiceAxis]:
        ...

    def build(self, choices: Dict[str, Any]) -> AcceptanceConfiguration:
        ...


def check_partition(configuration: AcceptanceConfiguration, generator: str = "") -> None:
    """Raise GeneratorError if a terminal sits in more than one group."""
    seen = set()
    for group in configuration.groups:
        for terminal in group:
            if terminal in seen:
                raise GeneratorError(
                    f"Terminal {terminal} placed in two groups",
                    generator=generator,
                    configuration=configuration.label,
                )
            seen.add(terminal)


@lru_cache(maxsize=32)
def generate_configurations(bank: BankTopology) -> Tuple[AcceptanceConfiguration, ...]:
    """
    Build every acceptance configuration of a bank.

    Args:
        bank: Frozen topology parameters (the cache key)

    Returns:
        One configuration per point of the axes' Cartesian product

    Raises:
        GeneratorError: If a built configuration is not a partition
    """
    axes = bank.axes()
    configurations = []
    for choices in iter_choices(axes):
        configuration = bank.build(choices)
        check_partition(configuration, bank.name)
        configurations.append(configuration)

    expected = axis_product_size(axes)
    if len(configurations) != expected:
        raise GeneratorError(
            "Configuration count does not match choice product",
            generator=bank.name,
            expected=expected,
            actual=len(configurations),
        )
    logger.debug(f"Generated {len(configurations)} configurations for {bank.name}")
    return tuple(configurations)
