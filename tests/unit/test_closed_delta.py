"""Unit tests for the closed delta-delta configuration generator."""

from collections import Counter
from dataclasses import dataclass
from typing import ClassVar

import pytest

from transformer_banks import ClosedDeltaBank, check_partition, generate_configurations
from transformer_banks.choice_axes import ChoiceAxis, axis_product_size
from wiring_parser import AcceptanceConfiguration, GeneratorError


@pytest.fixture(scope="module")
def configurations():
    return generate_configurations(ClosedDeltaBank())


class TestCounts:
    def test_total(self, configurations):
        assert len(configurations) == 864

    def test_axis_sizes(self):
        sizes = {axis.name: len(axis) for axis in ClosedDeltaBank().axes()}
        assert sizes == {
            "lighting": 3,
            "rotation": 3,
            "primary_swap": 2,
            "power_swap": 2,
            "pairing": 3,
            "lighting_secondary_swap": 2,
            "power1_secondary_swap": 2,
            "power2_secondary_swap": 2,
        }
        assert axis_product_size(ClosedDeltaBank().axes()) == 864

    def test_single_lighting_candidate(self):
        assert len(generate_configurations(ClosedDeltaBank(lighting_candidates=(2,)))) == 288

    def test_configurations_are_distinct(self, configurations):
        assert len({c.groups for c in configurations}) == 864

    def test_labels_are_distinct(self, configurations):
        assert len({c.label for c in configurations}) == 864


class TestStructure:
    def test_every_configuration_is_a_partition(self, configurations):
        assert all(c.is_partition() for c in configurations)

    def test_seven_groups_per_bus(self, configurations):
        expected = {
            "BUS_P_A", "BUS_P_B", "BUS_P_C",
            "BUS_S_a", "BUS_S_b", "BUS_S_c", "BUS_S_n",
        }
        for configuration in configurations:
            assert {group.terminals[0] for group in configuration.groups} == expected

    def test_covers_every_terminal_once(self, configurations):
        for configuration in configurations:
            terminals = configuration.terminals()
            # 7 buses, 6 primary bushings, 7 secondary bushings (one X2 used).
            assert len(terminals) == 20
            assert "BUS_P_N" not in terminals

    def test_one_x2_on_neutral(self, configurations):
        for configuration in configurations:
            neutral = next(g for g in configuration.groups if g.terminals[0] == "BUS_S_n")
            assert len(neutral) == 2
            assert neutral.terminals[1].endswith("_X2")

    def test_lighting_pot_skips_high_leg(self, configurations):
        # Lighting pot feeds the neutral and two lighting buses, never the high leg.
        for configuration in configurations:
            neutral = next(g for g in configuration.groups if g.terminals[0] == "BUS_S_n")
            lighting = neutral.terminals[1].split("_")[0]
            fed_by_lighting = [
                g.terminals[0] for g in configuration.groups
                if any(t.startswith(f"{lighting}_X") for t in g.terminals[1:])
            ]
            assert len(fed_by_lighting) == 3

    def test_primary_buses_hold_two_bushings(self, configurations):
        for configuration in configurations:
            for group in configuration.groups:
                if group.terminals[0].startswith("BUS_P_"):
                    assert len(group) == 3

    def test_each_lighting_candidate_used(self, configurations):
        counts = Counter(c.label.split()[0] for c in configurations)
        assert counts == {"lighting=1": 288, "lighting=2": 288, "lighting=3": 288}


class TestFirstConfiguration:
    def test_groups(self, configurations):
        assert configurations[0].to_lists() == [
            ["BUS_P_A", "T1_H1", "T3_H2"],
            ["BUS_P_B", "T1_H2", "T2_H1"],
            ["BUS_P_C", "T2_H2", "T3_H1"],
            ["BUS_S_n", "T1_X2"],
            ["BUS_S_a", "T1_X1", "T3_X3"],
            ["BUS_S_c", "T1_X3", "T2_X1"],
            ["BUS_S_b", "T2_X3", "T3_X1"],
        ]

    def test_label(self, configurations):
        assert configurations[0].label == (
            "lighting=1 rotation=0 primary_swap=0 power_swap=0 pairing=a-c/b "
            "lighting_secondary_swap=0 power1_secondary_swap=0 power2_secondary_swap=0"
        )


class TestParameters:
    def test_pairings(self):
        assert [str(p) for p in ClosedDeltaBank().pairings()] == ["a-c/b", "a-b/c", "b-c/a"]

    def test_power_pots_follow_lighting(self):
        bank = ClosedDeltaBank()
        assert bank.power_pots(1, False) == (2, 3)
        assert bank.power_pots(2, False) == (3, 1)
        assert bank.power_pots(3, True) == (2, 1)

    def test_custom_transformer_numbers(self):
        configurations = generate_configurations(ClosedDeltaBank(transformers=(4, 5, 6)))
        assert len(configurations) == 864
        assert "T4_H1" in configurations[0].terminals()

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"transformers": (1, 1, 2)},
            {"transformers": (1, 2)},
            {"primary_phases": ("A", "B", "B")},
            {"secondary_neutral": "a"},
            {"lighting_candidates": ()},
            {"lighting_candidates": (4,)},
        ],
    )
    def test_invalid_parameters(self, kwargs):
        with pytest.raises(GeneratorError):
            ClosedDeltaBank(**kwargs)


class TestGenerator:
    def test_cached_by_parameters(self):
        assert generate_configurations(ClosedDeltaBank()) is generate_configurations(ClosedDeltaBank())

    def test_returns_tuple(self, configurations):
        assert isinstance(configurations, tuple)

    def test_check_partition_rejects_overlap(self):
        bad = AcceptanceConfiguration.from_lists([["BUS_P_A", "T1_H1"], ["BUS_P_B", "T1_H1"]], label="bad")
        with pytest.raises(GeneratorError) as excinfo:
            check_partition(bad, "test")
        assert excinfo.value.details["generator"] == "test"

    def test_overlapping_bank_rejected(self):
        @dataclass(frozen=True)
        class OverlappingBank:
            name: ClassVar[str] = "overlapping"

            def axes(self):
                return [ChoiceAxis("x", (0,))]

            def build(self, choices):
                return AcceptanceConfiguration.from_lists([["A", "T1_H1"], ["B", "T1_H1"]])

        with pytest.raises(GeneratorError):
            generate_configurations(OverlappingBank())
