"""
Exam-level grading.

Each scenario submission yields a QuestionResult; the exam grade is the
rounded mean of the scenario scores, qualified at the pass threshold.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

from wiring_parser.config.validation_config import ValidationConfig
from wiring_parser.validators.best_match_selector import BestMatchSelector
from wiring_parser.validators.validation_result import ValidationResult
from transformer_banks.scenarios import Scenario

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuestionResult:
    """Outcome of one scenario submission."""
    scenario_id: str
    passed: bool
    score: float

    def to_dict(self) -> Dict[str, Any]:
        return {'scenario_id': self.scenario_id, 'passed': self.passed, 'score': self.score}


@dataclass
class ExamGrade:
    """Container for the results of one exam attempt."""

    results: List[QuestionResult] = field(default_factory=list)
    pass_threshold: float = 70.0

    @classmethod
    def from_results(
        cls,
        results: Iterable[QuestionResult],
        config: Optional[ValidationConfig] = None,
    ) -> 'ExamGrade':
        config = config or ValidationConfig()
        return cls(results=list(results), pass_threshold=config.pass_threshold)

    @property
    def final_score(self) -> int:
        """Rounded mean of scenario scores; 0 when nothing was submitted."""
        if not self.results:
            return 0
        total = sum(result.score for result in self.results)
        # Half-up rounding, as shown to the learner.
        return math.floor(total / len(self.results) + 0.5)

    @property
    def qualified(self) -> bool:
        return self.final_score >= self.pass_threshold

    @property
    def passed_count(self) -> int:
        return sum(1 for result in self.results if result.passed)

    def add_result(self, result: QuestionResult) -> None:
        self.results.append(result)

    def get_result(self, scenario_id: str) -> Optional[QuestionResult]:
        for result in self.results:
            if result.scenario_id == scenario_id:
                return result
        return None

    def get_summary(self) -> Dict[str, Any]:
        return {
            'final_score': self.final_score,
            'qualified': self.qualified,
            'passed_scenarios': self.passed_count,
            'total_scenarios': len(self.results),
        }

    def __str__(self) -> str:
        status = "QUALIFIED" if self.qualified else "UNQUALIFIED"
        return f"ExamGrade({status}, score={self.final_score}%, passed={self.passed_count}/{len(self.results)})"


def grade_scenario(
    scenario: Scenario,
    connections: Iterable[Any],
    selector: Optional[BestMatchSelector] = None,
) -> Tuple[QuestionResult, ValidationResult]:
    """
    Grade one submission against a scenario.

    Returns:
        The exam-level QuestionResult and the full ValidationResult
    """
    selector = selector or BestMatchSelector()
    validation = selector.select(scenario.valid_configurations, connections)
    result = QuestionResult(scenario_id=scenario.id, passed=validation.passed, score=validation.score)
    logger.info(f"Scenario {scenario.id}: passed={result.passed} score={result.score:.1f}")
    return result, validation
