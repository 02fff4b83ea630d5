"""
Two-transformer open bank (open-wye primary, open-delta 4-wire secondary).

Roles are fixed: one lighting pot, one power pot. Both primaries return to
the primary neutral.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Tuple

from wiring_parser.core.exceptions import GeneratorError
from wiring_parser.core.models import AcceptanceConfiguration

from .choice_axes import POLARITY, ChoiceAxis, SecondaryPairing, describe_choices
from .terminals import BusGroups, bushing, primary_bus, secondary_bus


@dataclass(frozen=True)
class OpenDeltaBank:
    """Topology parameters of an open-wye/open-delta bank."""

    name: ClassVar[str] = "open_delta"

    lighting: int = 1
    power: int = 2
    primary_phases: Tuple[str, ...] = ("A", "B", "C")
    primary_neutral: str = "N"
    secondary_phases: Tuple[str, ...] = ("a", "b", "c")
    secondary_neutral: str = "n"

    def __post_init__(self):
        if self.lighting == self.power:
            raise GeneratorError("Lighting and power pots must differ", generator=self.name)
        for field_name in ("primary_phases", "secondary_phases"):
            values = getattr(self, field_name)
            if len(values) != 3 or len(set(values)) != 3:
                raise GeneratorError(
                    f"{field_name} must hold three distinct values",
                    generator=self.name,
                    **{field_name: values},
                )
        if self.primary_neutral in self.primary_phases or self.secondary_neutral in self.secondary_phases:
            raise GeneratorError("Neutral clashes with a phase", generator=self.name)

    def primary_pairs(self) -> Tuple[Tuple[str, str], ...]:
        p = self.primary_phases
        return tuple((p[i], p[(i + 1) % 3]) for i in range(3))

    def pairings(self) -> Tuple[SecondaryPairing, ...]:
        s = self.secondary_phases
        options = []
        for i in range(3):
            lighting = (s[i], s[(i + 1) % 3])
            high = next(p for p in s if p not in lighting)
            options.append(SecondaryPairing(lighting=lighting, high=high))
        return tuple(options)

    def axes(self) -> List[ChoiceAxis]:
        return [
            ChoiceAxis("primary_pair", (0, 1, 2)),
            ChoiceAxis("pairing", self.pairings()),
            ChoiceAxis("common", (0, 1)),
            ChoiceAxis("lighting_primary_swap", POLARITY),
            ChoiceAxis("power_primary_swap", POLARITY),
            ChoiceAxis("lighting_secondary_swap", POLARITY),
            ChoiceAxis("power_secondary_swap", POLARITY),
        ]

    def build(self, choices: Dict[str, Any]) -> AcceptanceConfiguration:
        lighting_phase, power_phase = self.primary_pairs()[choices["primary_pair"]]
        pairing = choices["pairing"]
        neutral = primary_bus(self.primary_neutral)
        groups = BusGroups()

        for transformer, phase, swapped in (
            (self.lighting, lighting_phase, choices["lighting_primary_swap"]),
            (self.power, power_phase, choices["power_primary_swap"]),
        ):
            h1, h2 = (neutral, primary_bus(phase)) if swapped else (primary_bus(phase), neutral)
            groups.tie(h1, bushing(transformer, "H1"))
            groups.tie(h2, bushing(transformer, "H2"))

        groups.tie(secondary_bus(self.secondary_neutral), bushing(self.lighting, "X2"))

        first, second = (secondary_bus(p) for p in pairing.lighting)
        if choices["lighting_secondary_swap"]:
            first, second = second, first
        groups.tie(first, bushing(self.lighting, "X1"))
        groups.tie(second, bushing(self.lighting, "X3"))

        # The power pot joins the high leg to one lighting leg.
        common = secondary_bus(pairing.lighting[choices["common"]])
        high = secondary_bus(pairing.high)
        x1, x3 = (high, common) if choices["power_secondary_swap"] else (common, high)
        groups.tie(x1, bushing(self.power, "X1"))
        groups.tie(x3, bushing(self.power, "X3"))

        return groups.build(describe_choices(choices))
