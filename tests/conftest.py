import pytest

from wiring_parser import AcceptanceConfiguration, ValidationConfig


def star_wiring(configuration: AcceptanceConfiguration):
    """Wires that join each group by tying every member to its first terminal."""
    connections = []
    for group in configuration.groups:
        first = group.terminals[0]
        for terminal in group.terminals[1:]:
            connections.append((first, terminal))
    return connections


@pytest.fixture
def wire_configuration():
    """
    Fixture that returns a function building the exact wiring of a configuration.
    Usage:
        def test_something(wire_configuration):
            connections = wire_configuration(configuration)
    """
    return star_wiring


@pytest.fixture
def config():
    return ValidationConfig()


@pytest.fixture
def two_phase_configuration():
    """A small hand-written configuration: two phases and a neutral."""
    return AcceptanceConfiguration.from_lists(
        [
            ["BUS_P_A", "T1_H1"],
            ["BUS_P_B", "T2_H1"],
            ["BUS_P_N", "T1_H2", "T2_H2"],
        ],
        label="two-phase",
    )
