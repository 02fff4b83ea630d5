"""End-to-end grading against the built-in exam scenarios."""

import pytest

from transformer_banks import SCENARIOS, get_scenario, scenario_ids
from wiring_parser import (
    AcceptanceMatcher,
    BestMatchSelector,
    ScenarioNotFoundError,
    build_electrical_nodes,
    validate_connections,
)

SHORT_CIRCUIT = "Short Circuit Detected! Distinct phases connected together."


def test_catalog_order():
    assert scenario_ids() == [
        "wye-wye-120-208",
        "delta-delta-240",
        "delta-wye-120-208",
        "open-wye-open-delta",
    ]


def test_configuration_counts():
    counts = {s.id: len(s.valid_configurations) for s in SCENARIOS}
    assert counts == {
        "wye-wye-120-208": 3,
        "delta-delta-240": 864,
        "delta-wye-120-208": 3,
        "open-wye-open-delta": 288,
    }


def test_unknown_scenario():
    with pytest.raises(ScenarioNotFoundError) as excinfo:
        get_scenario("zig-zag")
    assert "wye-wye-120-208" in excinfo.value.available


def test_empty_catalog_is_not_replaced_by_builtins():
    assert scenario_ids(()) == []
    with pytest.raises(ScenarioNotFoundError):
        get_scenario("wye-wye-120-208", ())


@pytest.mark.parametrize("scenario", SCENARIOS, ids=lambda s: s.id)
def test_configurations_use_scenario_terminals(scenario):
    known = set(scenario.terminal_ids())
    for configuration in scenario.valid_configurations:
        assert set(configuration.terminals()) <= known
        assert configuration.is_partition()


@pytest.mark.parametrize("scenario", SCENARIOS, ids=lambda s: s.id)
def test_every_configuration_satisfied_by_its_own_wiring(scenario, wire_configuration):
    matcher = AcceptanceMatcher()
    for configuration in scenario.valid_configurations:
        nodes = build_electrical_nodes(wire_configuration(configuration))
        assert matcher.match(configuration, nodes).is_complete, configuration.label


@pytest.mark.parametrize("scenario", SCENARIOS, ids=lambda s: s.id)
def test_sampled_configurations_pass_through_selector(scenario, wire_configuration):
    selector = BestMatchSelector()
    sample = scenario.valid_configurations[::97] + scenario.valid_configurations[-1:]
    for configuration in sample:
        result = selector.select(scenario.valid_configurations, wire_configuration(configuration))
        assert result.passed, configuration.label
        assert result.score == 100.0
        assert result.errors == []


@pytest.mark.parametrize("scenario", SCENARIOS, ids=lambda s: s.id)
def test_empty_submission(scenario):
    result = validate_connections([], scenario.valid_configurations)
    assert not result.passed
    assert result.score == 0.0
    assert result.errors == ["No connections made."]


@pytest.mark.parametrize("scenario", SCENARIOS, ids=lambda s: s.id)
def test_primary_phase_short(scenario):
    result = validate_connections([("BUS_P_A", "BUS_P_B")], scenario.valid_configurations)
    assert not result.passed
    assert result.score == 0.0
    assert result.errors == [SHORT_CIRCUIT]


class TestWyeWye:
    scenario = get_scenario("wye-wye-120-208")

    def _bca(self):
        return [
            ("BUS_P_B", "T1_H1"), ("BUS_P_C", "T2_H1"), ("BUS_P_A", "T3_H1"),
            ("BUS_P_N", "T1_H2"), ("T1_H2", "T2_H2"), ("T2_H2", "T3_H2"),
            ("BUS_S_b", "T1_X1"), ("BUS_S_c", "T2_X1"), ("BUS_S_a", "T3_X1"),
            ("BUS_S_n", "T1_X2"), ("T1_X2", "T2_X2"), ("T2_X2", "T3_X2"),
        ]

    def test_rotated_wiring_passes(self):
        result = validate_connections(self._bca(), self.scenario.valid_configurations)
        assert result.passed
        assert result.metadata["matched_configuration"] == "rotation=BCA"

    def test_daisy_chain_equals_star(self):
        # Neutral reached through a chain of bushings instead of home runs.
        chained = self._bca()
        starred = [w for w in chained if w not in {("T1_H2", "T2_H2"), ("T2_H2", "T3_H2")}]
        starred += [("BUS_P_N", "T2_H2"), ("BUS_P_N", "T3_H2")]
        a = validate_connections(chained, self.scenario.valid_configurations)
        b = validate_connections(starred, self.scenario.valid_configurations)
        assert a.passed and b.passed

    def test_missing_wire_is_incomplete(self):
        wiring = self._bca()[:-1]
        result = validate_connections(wiring, self.scenario.valid_configurations)
        assert not result.passed
        assert result.score == pytest.approx(7 / 8 * 100)
        assert result.errors == ["Incomplete: BUS_S_n, T1_X2, T2_X2, T3_X2"]

    def test_mixed_rotation_is_shorted_for_every_rotation(self):
        # Primary in ABC, secondary in BCA.
        wiring = [
            ("BUS_P_A", "T1_H1"), ("BUS_P_B", "T2_H1"), ("BUS_P_C", "T3_H1"),
            ("BUS_S_b", "T1_X1"), ("BUS_S_c", "T2_X1"), ("BUS_S_a", "T3_X1"),
        ]
        result = validate_connections(wiring, self.scenario.valid_configurations)
        assert result.errors == [SHORT_CIRCUIT]

    def test_completing_groups_never_lowers_score(self):
        full = self._bca()
        previous = 0.0
        for count in range(1, len(full) + 1):
            result = validate_connections(full[:count], self.scenario.valid_configurations)
            assert result.score >= previous
            previous = result.score
        assert previous == 100.0

    def test_unknown_terminals_ignored(self):
        wiring = self._bca() + [("T9_H1", "FLOATING")]
        assert validate_connections(wiring, self.scenario.valid_configurations).passed

    def test_ui_connection_objects(self):
        wiring = [{"id": f"w{i}", "from": a, "to": b, "color": "#000"} for i, (a, b) in enumerate(self._bca())]
        assert validate_connections(wiring, self.scenario.valid_configurations).passed


class TestDeltaDelta:
    scenario = get_scenario("delta-delta-240")

    def test_high_leg_on_b(self):
        wiring = [
            ("BUS_P_A", "T1_H1"), ("BUS_P_B", "T1_H2"),
            ("BUS_P_B", "T2_H1"), ("BUS_P_C", "T2_H2"),
            ("BUS_P_C", "T3_H1"), ("BUS_P_A", "T3_H2"),
            ("BUS_S_n", "T1_X2"),
            ("BUS_S_a", "T1_X1"), ("BUS_S_c", "T1_X3"),
            ("BUS_S_c", "T2_X1"), ("BUS_S_b", "T2_X3"),
            ("BUS_S_b", "T3_X1"), ("BUS_S_a", "T3_X3"),
        ]
        result = validate_connections(wiring, self.scenario.valid_configurations)
        assert result.passed
        assert result.metadata["matched_configuration"].startswith("lighting=1 rotation=0")

    def test_secondary_neutral_on_power_pot_not_accepted(self):
        wiring = [("BUS_S_n", "T1_X2"), ("BUS_S_n", "T2_X2")]
        result = validate_connections(wiring, self.scenario.valid_configurations)
        assert not result.passed


class TestOpenDelta:
    scenario = get_scenario("open-wye-open-delta")

    def test_first_configuration_by_hand(self):
        wiring = [
            ("BUS_P_A", "T1_H1"), ("BUS_P_N", "T1_H2"), ("T1_H2", "T2_H2"),
            ("BUS_P_B", "T2_H1"),
            ("BUS_S_n", "T1_X2"), ("BUS_S_a", "T1_X1"), ("T1_X1", "T2_X1"),
            ("BUS_S_b", "T1_X3"), ("BUS_S_c", "T2_X3"),
        ]
        assert validate_connections(wiring, self.scenario.valid_configurations).passed

    def test_partial_wiring_scores_best_configuration(self):
        wiring = [("BUS_P_A", "T1_H1"), ("BUS_P_N", "T1_H2"), ("BUS_P_N", "T2_H2")]
        result = validate_connections(wiring, self.scenario.valid_configurations)
        assert not result.passed
        assert result.score == pytest.approx(2 / 7 * 100)
        assert len(result.errors) == 5
