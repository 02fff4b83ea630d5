"""
Rotation-built configurations for three-transformer banks with a wye
secondary.

Transformer n serves phase ``p[(n - 1 + r) % 3]`` for rotation r, so the
three rotations are ABC, BCA and CAB. All X1 bushings land on their phase's
secondary bus and all X2 bushings are tied to the secondary neutral.

Group order matches the learner feedback of the exam: wye groups follow
transformer order, delta primary groups follow phase order.
"""

from typing import Sequence, Tuple

from wiring_parser.core.models import AcceptanceConfiguration

from .terminals import BusGroups, bushing, primary_bus, secondary_bus

ROTATIONS = (0, 1, 2)


def _phase_for(transformer: int, rotation: int, phases: Sequence[str]) -> int:
    return (transformer - 1 + rotation) % len(phases)


def _transformer_for(phase_index: int, rotation: int, phases: Sequence[str]) -> int:
    return (phase_index - rotation) % len(phases) + 1


def _tie_wye_secondary(
    groups: BusGroups,
    rotation: int,
    phases: Sequence[str],
    neutral: str,
) -> None:
    transformers = range(1, len(phases) + 1)
    for transformer in transformers:
        phase = phases[_phase_for(transformer, rotation, phases)]
        groups.tie(secondary_bus(phase), bushing(transformer, "X1"))
    groups.tie(secondary_bus(neutral), *(bushing(t, "X2") for t in transformers))


def _label(rotation: int, phases: Sequence[str]) -> str:
    order = "".join(phases[(i + rotation) % len(phases)] for i in range(len(phases)))
    return f"rotation={order}"


def wye_wye_configurations(
    primary_phases: Sequence[str] = ("A", "B", "C"),
    primary_neutral: str = "N",
    secondary_phases: Sequence[str] = ("a", "b", "c"),
    secondary_neutral: str = "n",
) -> Tuple[AcceptanceConfiguration, ...]:
    """4-wire wye primary, 4-wire wye secondary; both neutrals tied."""
    configurations = []
    for rotation in ROTATIONS:
        groups = BusGroups()
        for transformer in range(1, len(primary_phases) + 1):
            phase = primary_phases[_phase_for(transformer, rotation, primary_phases)]
            groups.tie(primary_bus(phase), bushing(transformer, "H1"))
        groups.tie(
            primary_bus(primary_neutral),
            *(bushing(t, "H2") for t in range(1, len(primary_phases) + 1)),
        )
        _tie_wye_secondary(groups, rotation, secondary_phases, secondary_neutral)
        configurations.append(groups.build(_label(rotation, primary_phases)))
    return tuple(configurations)


def delta_wye_configurations(
    primary_phases: Sequence[str] = ("A", "B", "C"),
    secondary_phases: Sequence[str] = ("a", "b", "c"),
    secondary_neutral: str = "n",
) -> Tuple[AcceptanceConfiguration, ...]:
    """Delta primary (H1 on the served phase, H2 on the next), wye secondary."""
    count = len(primary_phases)
    configurations = []
    for rotation in ROTATIONS:
        groups = BusGroups()
        # Each phase bus holds the H1 of the pot it serves, then the H2 of the pot before it.
        for index, phase in enumerate(primary_phases):
            served_by = _transformer_for(index, rotation, primary_phases)
            closing = _transformer_for((index - 1) % count, rotation, primary_phases)
            groups.tie(primary_bus(phase), bushing(served_by, "H1"), bushing(closing, "H2"))
        _tie_wye_secondary(groups, rotation, secondary_phases, secondary_neutral)
        configurations.append(groups.build(_label(rotation, primary_phases)))
    return tuple(configurations)
