from __future__ import annotations

from typing import Iterable

from classgrades.core.grade_scale import DEFAULT_SCALE, GradeScale
from classgrades.models.entities import Assignment, GradeEntry, StudentAverage

# Float noise below this many digits is dropped so 25/25 reads as 100.0.
_PRECISION = 9


def calc_weighted_average(pairs: Iterable[tuple[Assignment, GradeEntry]]) -> tuple[float, float]:
    """Return (weighted percentage, total weight as a fraction).

    Weights are relative to the graded subset only; a student with no
    graded pairs gets (0.0, 0.0).
    """
    weighted_score = 0.0
    total_weight = 0.0
    for assignment, entry in pairs:
        entry_pct = entry.percentage(assignment.total_points)
        fraction = assignment.weight / 100
        weighted_score += entry_pct * fraction
        total_weight += fraction
    if total_weight <= 0:
        return 0.0, 0.0
    return round(weighted_score / total_weight, _PRECISION), round(total_weight, _PRECISION)


def calc_student_average(
    student_id: str,
    pairs: Iterable[tuple[Assignment, GradeEntry]],
    scale: GradeScale = DEFAULT_SCALE,
) -> StudentAverage:
    pair_list = list(pairs)
    percentage, total_weight = calc_weighted_average(pair_list)

    earned = 0.0
    maximum = 0.0
    for assignment, entry in pair_list:
        earned += entry.earned_points
        maximum += assignment.total_points

    band = scale.lookup(percentage)
    return StudentAverage(
        student_id=student_id,
        percentage=percentage,
        letter_grade=band.letter,
        gpa=band.gpa,
        earned_points=earned,
        total_points=maximum,
        total_weight=total_weight,
        graded_count=len(pair_list),
    )


def calc_points_percentage(average: StudentAverage) -> float:
    """Unweighted view: raw earned points over raw possible points."""
    if average.total_points <= 0:
        return 0.0
    return round(average.earned_points / average.total_points * 100, _PRECISION)
