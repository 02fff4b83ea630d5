"""
Load hand-enumerated scenarios from JSON.

The file holds a list of scenario objects in the exam UI's format::

    [{"id": "...", "title": "...", "description": "...",
      "numTransformers": 3, "transformerHints": ["..."],
      "busConfig": {"primary": ["A", "B", "C"], "secondary": ["a", "b", "c", "n"]},
      "validConfigurations": [[["BUS_P_A", "T1_H1"], ...], ...]}]
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Tuple, Union

from wiring_parser.core.exceptions import ConfigurationError
from wiring_parser.core.models import AcceptanceConfiguration

from .scenarios import Scenario

logger = logging.getLogger(__name__)


def _string_list(value: Any, what: str, scenario_id: Any) -> Tuple[str, ...]:
    """Check that a JSON value is a list of strings."""
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigurationError(
            f"{what} must be a list of strings",
            details={'scenario': scenario_id, 'value': repr(value)},
        )
    return tuple(value)


def _configuration_from_lists(raw: Any, label: str, scenario_id: str) -> AcceptanceConfiguration:
    # A configuration is a list of groups; each group is a list of terminal ids.
    if not isinstance(raw, list):
        raise ConfigurationError(
            "Configuration must be a list of groups",
            details={'scenario': scenario_id, 'configuration': label},
        )
    groups = [_string_list(group, f"Group of {label}", scenario_id) for group in raw]
    return AcceptanceConfiguration.from_lists(groups, label=label)


def _scenario_from_dict(data: Dict[str, Any]) -> Scenario:
    if not isinstance(data, dict):
        raise ConfigurationError("Scenario definition must be an object", details={'value': repr(data)})
    try:
        scenario_id = data["id"]
        bus_config = data["busConfig"]
        raw_configurations = data["validConfigurations"]
        num_transformers = int(data["numTransformers"])
    except (KeyError, TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid scenario definition: {e}", details={'scenario': data.get('id')})

    if not isinstance(scenario_id, str):
        raise ConfigurationError("Scenario id must be a string", details={'scenario': repr(scenario_id)})
    if not isinstance(bus_config, dict):
        raise ConfigurationError("busConfig must be an object", details={'scenario': scenario_id})
    if not isinstance(raw_configurations, list):
        raise ConfigurationError("validConfigurations must be a list", details={'scenario': scenario_id})
    if not raw_configurations:
        raise ConfigurationError("Scenario has no valid configurations", details={'scenario': scenario_id})

    configurations = tuple(
        _configuration_from_lists(groups, f"{scenario_id}#{index + 1}", scenario_id)
        for index, groups in enumerate(raw_configurations)
    )
    return Scenario(
        id=scenario_id,
        title=data.get("title", scenario_id),
        description=data.get("description", ""),
        num_transformers=num_transformers,
        primary_bus=_string_list(bus_config.get("primary", []), "busConfig.primary", scenario_id),
        secondary_bus=_string_list(bus_config.get("secondary", []), "busConfig.secondary", scenario_id),
        valid_configurations=configurations,
        transformer_hints=_string_list(data.get("transformerHints", []), "transformerHints", scenario_id),
    )


def load_scenarios(path: Union[str, Path]) -> Tuple[Scenario, ...]:
    """
    Load scenarios from a JSON file.

    Raises:
        ConfigurationError: If the file is missing, not JSON, or a scenario
            is incomplete or malformed (wrong nesting, non-string terminal
            ids, empty required groups)
    """
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Scenario file not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in scenario file {path}: {e}")

    if isinstance(raw, dict):
        raw = [raw]
    if not isinstance(raw, list):
        raise ConfigurationError(f"Scenario file {path} must hold a list of scenarios")

    scenarios = tuple(_scenario_from_dict(item) for item in raw)
    logger.info(f"Loaded {len(scenarios)} scenarios from: {path}")
    return scenarios
