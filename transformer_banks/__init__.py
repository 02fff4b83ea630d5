"""
Transformer Banks Package - Scenarios and Acceptance Configurations

Builds the acceptance configurations of each exam scenario. Banks whose
valid wirings are too numerous to list by hand (closed delta-delta with a
high leg, open-wye/open-delta) are expanded from explicit choice axes;
rotation banks (wye-wye, delta-wye) are built per phase rotation.

Example Usage:
    from transformer_banks import ClosedDeltaBank, generate_configurations

    configurations = generate_configurations(ClosedDeltaBank())
    print(len(configurations))  # 864
"""

from .choice_axes import ChoiceAxis, SecondaryPairing, axis_product_size, iter_choices
from .closed_delta import ClosedDeltaBank
from .open_delta import OpenDeltaBank
from .generator import check_partition, generate_configurations
from .rotations import delta_wye_configurations, wye_wye_configurations
from .scenarios import SCENARIOS, Scenario, build_scenarios, get_scenario, scenario_ids
from .scenario_loader import load_scenarios
from .terminals import bushing, primary_bus, scenario_terminals, secondary_bus

__all__ = [
    # Choice axes
    'ChoiceAxis',
    'SecondaryPairing',
    'axis_product_size',
    'iter_choices',

    # Generators
    'ClosedDeltaBank',
    'OpenDeltaBank',
    'check_partition',
    'generate_configurations',
    'delta_wye_configurations',
    'wye_wye_configurations',

    # Scenarios
    'SCENARIOS',
    'Scenario',
    'build_scenarios',
    'get_scenario',
    'scenario_ids',
    'load_scenarios',

    # Terminal ids
    'bushing',
    'primary_bus',
    'secondary_bus',
    'scenario_terminals',
]

# Module configuration
import logging
logging.getLogger(__name__).addHandler(logging.NullHandler())
