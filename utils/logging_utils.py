import logging
import sys
from typing import Iterable, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.panel import Panel

from wiring_parser.config.validation_config import ValidationConfig
from wiring_parser.graph.connectivity_analyzer import ConnectivityResult
from wiring_parser.validators.validation_result import ValidationResult
from grading.exam_grade import ExamGrade

PACKAGE_LOGGERS = ("wiring_parser", "transformer_banks", "grading")


def setup_logging(
    level: str = "INFO",
    log_format: Optional[str] = None,
    date_format: Optional[str] = None,
    loggers: Iterable[str] = PACKAGE_LOGGERS,
) -> None:
    """
    Setup basic logging configuration for the grader packages.

    Args:
        level: The logging level to use. Defaults to "INFO".
        log_format: Custom log format string. If None, uses default format.
        date_format: Custom date format string. If None, uses default format.
        loggers: Package loggers to configure.
    """
    if log_format is None:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    if date_format is None:
        date_format = "%Y-%m-%d %H:%M:%S"

    # Create a StreamHandler that writes to stderr
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=log_format, datefmt=date_format))

    for name in loggers:
        logger = logging.getLogger(name)
        logger.setLevel(level.upper())
        # Replace handlers from an earlier call
        for existing in list(logger.handlers):
            logger.removeHandler(existing)
        logger.addHandler(handler)
        # Prevent the logger from propagating messages to the root logger
        logger.propagate = False


def print_validation_result(
    title: str,
    result: ValidationResult,
    connectivity: Optional[ConnectivityResult] = None,
    config: Optional[ValidationConfig] = None,
    console: Optional[Console] = None,
) -> None:
    """Render one scenario's grading outcome as a rich panel."""
    console = console or Console()
    config = config or ValidationConfig()
    table = Table(show_header=True, header_style="bold white", expand=True)

    table.add_column("Status", style="bold", no_wrap=True)
    table.add_column("Score", style="bold cyan", justify="right")
    table.add_column("Diagnostics")

    status = Text("PASS", style="bold green") if result.passed else Text("FAIL", style="bold red")
    diagnostics = Text()
    for i, error in enumerate(result.errors):
        if i:
            diagnostics.append("\n")
        style = "bright_red" if error == config.short_circuit_message else "bright_yellow"
        diagnostics.append(error, style=style)

    table.add_row(status, Text(f"{result.score:.0f}%"), diagnostics)

    if connectivity is not None:
        table.add_section()
        details = connectivity.analysis_details
        summary = Text(
            f"{details.get('distinct_wires', 0)} wires, "
            f"{details.get('electrical_nodes', 0)} electrical nodes, "
            f"{details.get('isolated_count', 0)} unwired terminals"
        )
        if connectivity.unknown_terminals:
            summary.append(
                f"\nUnknown terminals: {', '.join(connectivity.unknown_terminals)}",
                style="magenta",
            )
        table.add_row(Text("Wiring"), Text(""), summary)

    border = "green" if result.passed else "red"
    console.print(Panel(table, expand=False, title=title, border_style=f"bold {border}"))


def print_exam_grade(grade: ExamGrade, titles: Optional[dict] = None, console: Optional[Console] = None) -> None:
    """Render the performance log of an exam attempt."""
    console = console or Console()
    titles = titles or {}
    table = Table(show_header=True, header_style="bold white", expand=True)

    table.add_column("#", style="dim", justify="right")
    table.add_column("Scenario", style="bright_white")
    table.add_column("Score", style="bold cyan", justify="right")
    table.add_column("Result", justify="center")

    for index, result in enumerate(grade.results, start=1):
        outcome = Text("PASS", style="green") if result.passed else Text("FAIL", style="red")
        table.add_row(
            f"{index:02d}",
            titles.get(result.scenario_id, result.scenario_id),
            f"{result.score:.0f}%",
            outcome,
        )

    status = "QUALIFIED" if grade.qualified else "UNQUALIFIED"
    border = "green" if grade.qualified else "red"
    console.print(Panel(table, expand=False, title=f"{status} - SCORE: {grade.final_score}%", border_style=f"bold {border}"))
