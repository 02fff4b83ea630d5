"""
Scenario catalog for the transformer bank exam.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from wiring_parser.core.exceptions import ScenarioNotFoundError
from wiring_parser.core.models import AcceptanceConfiguration, Terminal

from .closed_delta import ClosedDeltaBank
from .generator import generate_configurations
from .open_delta import OpenDeltaBank
from .rotations import delta_wye_configurations, wye_wye_configurations
from .terminals import scenario_terminals


@dataclass(frozen=True)
class Scenario:
    """A named bank topology and every wiring that counts as correct."""
    id: str
    title: str
    description: str
    num_transformers: int
    primary_bus: Tuple[str, ...]
    secondary_bus: Tuple[str, ...]
    valid_configurations: Tuple[AcceptanceConfiguration, ...]
    transformer_hints: Tuple[str, ...] = field(default_factory=tuple)

    def terminals(self) -> List[Terminal]:
        """Every terminal the drawing surface shows for this scenario."""
        return scenario_terminals(self.primary_bus, self.secondary_bus, self.num_transformers)

    def terminal_ids(self) -> List[str]:
        return [terminal.id for terminal in self.terminals()]

    def __str__(self) -> str:
        return f"Scenario({self.id}, configurations={len(self.valid_configurations)})"


def build_scenarios() -> Tuple[Scenario, ...]:
    """Build the standard exam scenarios in exam order."""
    return (
        Scenario(
            id="wye-wye-120-208",
            title="Wye - Wye Bank (120/208V)",
            description=(
                "Connect a 3-transformer bank. Primary 4-wire Wye, "
                "Secondary 4-wire Wye. (Neutrals must be tied)"
            ),
            num_transformers=3,
            transformer_hints=("120/208", "120/208", "120/208"),
            primary_bus=("A", "B", "C", "N"),
            secondary_bus=("a", "b", "c", "n"),
            valid_configurations=wye_wye_configurations(),
        ),
        Scenario(
            id="delta-delta-240",
            title="Delta - Delta Bank (240V)",
            description=(
                "Primary Delta, Secondary Delta with 120/240V High Leg. "
                "Ensure the High Leg connects to the Orange Bus (b)."
            ),
            num_transformers=3,
            transformer_hints=("XFMR", "XFMR", "XFMR"),
            primary_bus=("A", "B", "C"),
            secondary_bus=("a", "b", "c", "n"),
            valid_configurations=generate_configurations(ClosedDeltaBank()),
        ),
        Scenario(
            id="delta-wye-120-208",
            title="Delta - Wye Bank (120/208V)",
            description="Connect a 3-transformer bank. Primary Delta, Secondary Wye.",
            num_transformers=3,
            transformer_hints=("120/208", "120/208", "120/208"),
            primary_bus=("A", "B", "C"),
            secondary_bus=("a", "b", "c", "n"),
            valid_configurations=delta_wye_configurations(),
        ),
        Scenario(
            id="open-wye-open-delta",
            title="Open Wye - Open Delta",
            description=(
                "Primary Open Wye, Secondary Open Delta (4-wire). "
                "T1 is Lighting, T2 is Power."
            ),
            num_transformers=2,
            transformer_hints=("LIGHTING", "POWER"),
            primary_bus=("A", "B", "C", "N"),
            secondary_bus=("a", "b", "c", "n"),
            valid_configurations=generate_configurations(OpenDeltaBank()),
        ),
    )


SCENARIOS: Tuple[Scenario, ...] = build_scenarios()


def scenario_ids(scenarios: Optional[Tuple[Scenario, ...]] = None) -> List[str]:
    return [scenario.id for scenario in (SCENARIOS if scenarios is None else scenarios)]


def get_scenario(scenario_id: str, scenarios: Optional[Tuple[Scenario, ...]] = None) -> Scenario:
    """
    Look up a scenario by id.

    Raises:
        ScenarioNotFoundError: If no scenario has that id
    """
    catalog: Dict[str, Scenario] = {s.id: s for s in (SCENARIOS if scenarios is None else scenarios)}
    try:
        return catalog[scenario_id]
    except KeyError:
        raise ScenarioNotFoundError(scenario_id, available=list(catalog)) from None
