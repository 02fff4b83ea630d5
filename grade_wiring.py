"""
Grade transformer bank wiring from the command line.

    python grade_wiring.py --scenario wye-wye-120-208 --connections wires.json
    python grade_wiring.py --exam submissions.json
    python grade_wiring.py --list

A connections file holds a JSON list of ``{"from": ..., "to": ...}`` objects
or ``[a, b]`` pairs. An exam file maps scenario ids to such lists.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from grading import ExamGrade, grade_scenario
from transformer_banks import SCENARIOS, get_scenario, load_scenarios
from utils.logging_utils import print_exam_grade, print_validation_result, setup_logging
from wiring_parser import (
    BestMatchSelector,
    ConnectionFormatError,
    ConnectivityAnalyzer,
    ValidationConfig,
    WiringParserError,
)

logger = logging.getLogger("wiring_parser.cli")


def _read_json(path: str):
    try:
        with open(Path(path), 'r', encoding='utf-8') as f:
            return json.load(f)
    except FileNotFoundError:
        raise WiringParserError(f"File not found: {path}")
    except json.JSONDecodeError as e:
        raise WiringParserError(f"Invalid JSON in {path}: {e}")


def _connection_list(value, source: str) -> list:
    """Check that a JSON payload is a list of wires."""
    if not isinstance(value, list):
        raise ConnectionFormatError(f"Wires for {source} must be a JSON list", value)
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Grade transformer bank wiring")
    parser.add_argument("--scenario", help="Scenario id to grade against")
    parser.add_argument("--connections", help="JSON file with the user's wires")
    parser.add_argument("--exam", help="JSON file mapping scenario ids to wires")
    parser.add_argument("--scenarios", help="JSON file with custom scenarios (replaces the built-in set)")
    parser.add_argument("--config", help="JSON file with validation settings")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    parser.add_argument("--list", action="store_true", help="List available scenarios and exit")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(level=args.log_level)
    console = Console()

    try:
        scenarios = load_scenarios(args.scenarios) if args.scenarios else SCENARIOS
        config = ValidationConfig.from_dict(_read_json(args.config)) if args.config else ValidationConfig()

        if args.list:
            for scenario in scenarios:
                console.print(
                    f"[bold]{scenario.id}[/bold]  {scenario.title}  "
                    f"({len(scenario.valid_configurations)} configurations)"
                )
            return 0

        selector = BestMatchSelector(config)

        if args.exam:
            submissions = _read_json(args.exam)
            if not isinstance(submissions, dict):
                raise WiringParserError(f"Exam file {args.exam} must map scenario ids to wires")
            grade = ExamGrade.from_results([], config)
            for scenario in scenarios:
                result, _ = grade_scenario(
                    scenario,
                    _connection_list(submissions.get(scenario.id, []), scenario.id),
                    selector,
                )
                grade.add_result(result)
            print_exam_grade(grade, {s.id: s.title for s in scenarios}, console=console)
            return 0 if grade.qualified else 1

        if not args.scenario or not args.connections:
            parser.error("--scenario and --connections are required unless --exam or --list is given")

        scenario = get_scenario(args.scenario, scenarios)
        connections = _connection_list(_read_json(args.connections), args.connections)
        _, validation = grade_scenario(scenario, connections, selector)
        connectivity = ConnectivityAnalyzer().analyze(connections, scenario.terminal_ids())
        print_validation_result(scenario.title, validation, connectivity, config=config, console=console)
        return 0 if validation.passed else 1

    except WiringParserError as e:
        logger.error(str(e))
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
