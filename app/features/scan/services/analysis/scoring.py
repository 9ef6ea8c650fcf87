from typing import Mapping

from app.features.scan.schemas.scan import CheckId, CheckResult

# (minimum score, grade), evaluated top-down
GRADE_THRESHOLDS = (
    (90, "A"),
    (80, "B"),
    (70, "C"),
    (60, "D"),
)
FAILING_GRADE = "F"


def calculate_overall_score(checks: Mapping[CheckId, CheckResult]) -> int:
    return sum(check.score for check in checks.values())


def calculate_grade(score: int) -> str:
    for minimum, grade in GRADE_THRESHOLDS:
        if score >= minimum:
            return grade
    return FAILING_GRADE
