"""
Closed-loop three-transformer bank (delta primary, 240 V delta secondary
with high leg).

One transformer is the center-tapped lighting pot feeding the secondary
neutral; the other two are power pots spanning a lighting leg and the
high leg.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Optional, Tuple

from wiring_parser.core.exceptions import GeneratorError
from wiring_parser.core.models import AcceptanceConfiguration

from .choice_axes import POLARITY, ChoiceAxis, SecondaryPairing, describe_choices
from .terminals import BusGroups, bushing, primary_bus, secondary_bus


@dataclass(frozen=True)
class ClosedDeltaBank:
    """Topology parameters of a closed delta-delta bank."""

    name: ClassVar[str] = "closed_delta"

    transformers: Tuple[int, ...] = (1, 2, 3)
    primary_phases: Tuple[str, ...] = ("A", "B", "C")
    secondary_phases: Tuple[str, ...] = ("a", "b", "c")
    secondary_neutral: str = "n"
    lighting_candidates: Optional[Tuple[int, ...]] = None

    def __post_init__(self):
        for field_name in ("transformers", "primary_phases", "secondary_phases"):
            values = getattr(self, field_name)
            if len(values) != 3 or len(set(values)) != 3:
                raise GeneratorError(
                    f"{field_name} must hold three distinct values",
                    generator=self.name,
                    **{field_name: values},
                )
        if self.secondary_neutral in self.secondary_phases:
            raise GeneratorError("Secondary neutral clashes with a phase", generator=self.name)
        unknown = set(self.candidates) - set(self.transformers)
        if not self.candidates or unknown:
            raise GeneratorError(
                "Lighting candidates must be known transformers",
                generator=self.name,
                candidates=self.candidates,
            )

    @property
    def candidates(self) -> Tuple[int, ...]:
        if self.lighting_candidates is None:
            return self.transformers
        return self.lighting_candidates

    def pairings(self) -> Tuple[SecondaryPairing, ...]:
        """Lighting spans two secondary buses; the remaining bus is the high leg."""
        options = []
        for index in range(3):
            high = self.secondary_phases[(index + 1) % 3]
            lighting = tuple(p for p in self.secondary_phases if p != high)
            options.append(SecondaryPairing(lighting=lighting, high=high))
        return tuple(options)

    def axes(self) -> List[ChoiceAxis]:
        return [
            ChoiceAxis("lighting", self.candidates),
            ChoiceAxis("rotation", (0, 1, 2)),
            ChoiceAxis("primary_swap", POLARITY),
            ChoiceAxis("power_swap", POLARITY),
            ChoiceAxis("pairing", self.pairings()),
            ChoiceAxis("lighting_secondary_swap", POLARITY),
            ChoiceAxis("power1_secondary_swap", POLARITY),
            ChoiceAxis("power2_secondary_swap", POLARITY),
        ]

    def power_pots(self, lighting: int, swapped: bool) -> Tuple[int, int]:
        """The two non-lighting transformers in cyclic order after the lighting pot."""
        index = self.transformers.index(lighting)
        first = self.transformers[(index + 1) % 3]
        second = self.transformers[(index + 2) % 3]
        return (second, first) if swapped else (first, second)

    def build(self, choices: Dict[str, Any]) -> AcceptanceConfiguration:
        lighting = choices["lighting"]
        rotation = choices["rotation"]
        pairing = choices["pairing"]
        power1, power2 = self.power_pots(lighting, choices["power_swap"])
        groups = BusGroups()

        # Primary delta: leg i spans phases (i, i+1); pots follow the lighting leg.
        for transformer, leg in ((lighting, rotation), (power1, rotation + 1), (power2, rotation + 2)):
            start = primary_bus(self.primary_phases[leg % 3])
            end = primary_bus(self.primary_phases[(leg + 1) % 3])
            if choices["primary_swap"]:
                start, end = end, start
            groups.tie(start, bushing(transformer, "H1"))
            groups.tie(end, bushing(transformer, "H2"))

        groups.tie(secondary_bus(self.secondary_neutral), bushing(lighting, "X2"))

        first, second = (secondary_bus(p) for p in pairing.lighting)
        if choices["lighting_secondary_swap"]:
            first, second = second, first
        groups.tie(first, bushing(lighting, "X1"))
        groups.tie(second, bushing(lighting, "X3"))
        # corner1 is the lighting leg fed by X3, corner2 the one fed by X1.
        corner1, corner2 = second, first
        high = secondary_bus(pairing.high)

        x1, x3 = (high, corner1) if choices["power1_secondary_swap"] else (corner1, high)
        groups.tie(x1, bushing(power1, "X1"))
        groups.tie(x3, bushing(power1, "X3"))

        x1, x3 = (corner2, high) if choices["power2_secondary_swap"] else (high, corner2)
        groups.tie(x1, bushing(power2, "X1"))
        groups.tie(x3, bushing(power2, "X3"))

        return groups.build(describe_choices(choices))
