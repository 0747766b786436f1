from __future__ import annotations

import logging
from typing import Iterable

from classgrades.core.errors import ConfigurationError
from classgrades.core.grade_scale import DEFAULT_SCALE, GradeScale
from classgrades.core.weighting import check_total_points
from classgrades.models.entities import Assignment, ClassStatistics, GradeEntry, StudentAverage

logger = logging.getLogger(__name__)


def empty_distribution(scale: GradeScale = DEFAULT_SCALE) -> dict[str, int]:
    return {letter: 0 for letter in scale.letters()}


def _summarize(percentages: list[float], letters: Iterable[str], scale: GradeScale) -> ClassStatistics:
    distribution = empty_distribution(scale)
    for letter in letters:
        if letter in distribution:
            distribution[letter] += 1

    if not percentages:
        return ClassStatistics(0.0, 0.0, 0.0, distribution, 0)

    return ClassStatistics(
        class_average=sum(percentages) / len(percentages),
        highest=max(percentages),
        lowest=min(percentages),
        distribution=distribution,
        total_students=len(percentages),
    )


def calc_class_statistics(
    averages: Iterable[StudentAverage],
    scale: GradeScale = DEFAULT_SCALE,
) -> ClassStatistics:
    """Summarize per-student averages into one class-wide view.

    Every student counts once, whatever their number of graded
    assignments. An empty class gives zeros and an all-zero distribution;
    check ``total_students`` before treating the numbers as meaningful.
    """
    average_list = list(averages)
    return _summarize(
        [a.percentage for a in average_list],
        [a.letter_grade for a in average_list],
        scale,
    )


def assignment_statistics(
    assignment: Assignment,
    entries: Iterable[GradeEntry],
    scale: GradeScale = DEFAULT_SCALE,
) -> ClassStatistics:
    try:
        check_total_points(assignment)
    except ConfigurationError as exc:
        logger.warning("No statistics for assignment %s: %s", assignment.id, exc)
        return _summarize([], [], scale)

    percentages = [
        entry.percentage(assignment.total_points)
        for entry in entries
        if entry.assignment_id == assignment.id
    ]
    return _summarize(percentages, [scale.letter_for(p) for p in percentages], scale)


def calc_grading_progress(graded_count: int, submissions_count: int) -> float:
    if submissions_count <= 0:
        return 0.0
    return max(0, min(graded_count, submissions_count)) / submissions_count * 100
