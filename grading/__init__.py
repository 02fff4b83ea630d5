"""
Grading Package - Exam Scoring for Transformer Bank Scenarios

Aggregates per-scenario validation results into an exam grade.

Example Usage:
    from grading import ExamGrade, grade_scenario
    from transformer_banks import SCENARIOS

    grade = ExamGrade()
    for scenario in SCENARIOS:
        result, validation = grade_scenario(scenario, submissions[scenario.id])
        grade.add_result(result)
    print(grade.final_score, grade.qualified)
"""

from .exam_grade import ExamGrade, QuestionResult, grade_scenario

__all__ = [
    'ExamGrade',
    'QuestionResult',
    'grade_scenario',
]

# Module configuration
import logging
logging.getLogger(__name__).addHandler(logging.NullHandler())
