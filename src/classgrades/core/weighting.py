from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import Iterable, Mapping

from classgrades.core.errors import ConfigurationError
from classgrades.models.entities import Assignment, GradeEntry

logger = logging.getLogger(__name__)


def is_valid_weight(weight: float | None) -> bool:
    return weight is not None and math.isfinite(weight) and weight > 0


def check_weight(assignment: Assignment) -> float:
    if assignment.weight is None:
        raise ConfigurationError(
            f"Assignment {assignment.id} has no weight", assignment_id=assignment.id
        )
    if not is_valid_weight(assignment.weight):
        raise ConfigurationError(
            f"Assignment {assignment.id} has invalid weight {assignment.weight}",
            assignment_id=assignment.id,
        )
    return assignment.weight


def check_total_points(assignment: Assignment) -> float:
    total = assignment.total_points
    if not math.isfinite(total) or total <= 0:
        raise ConfigurationError(
            f"Assignment {assignment.id} has invalid total points {total}",
            assignment_id=assignment.id,
        )
    return total


def usable_assignments(
    assignments: Iterable[Assignment],
    *,
    strict: bool = False,
) -> list[Assignment]:
    """Drop assignments whose weight or total points cannot be used.

    Every assignment is checked, graded or not. Bad ones are skipped and
    logged, or re-raised as ConfigurationError when ``strict`` is set.
    """
    usable: list[Assignment] = []
    for assignment in assignments:
        try:
            check_weight(assignment)
            check_total_points(assignment)
        except ConfigurationError as exc:
            if strict:
                raise
            logger.warning("Skipping assignment %s: %s", assignment.id, exc)
            continue
        usable.append(assignment)
    return usable


def graded_pairs(
    assignments: Iterable[Assignment],
    entries: Iterable[GradeEntry],
    *,
    strict: bool = False,
) -> list[tuple[Assignment, GradeEntry]]:
    """Pair one student's entries with the assignments they grade.

    Assignments without an entry are left out entirely, so they count in
    neither the numerator nor the denominator of the weighted average.
    Unusable assignments are filtered by ``usable_assignments`` first.
    """
    by_assignment: dict[str, GradeEntry] = {}
    for entry in entries:
        by_assignment[entry.assignment_id] = entry

    assignment_list = list(assignments)
    known = {assignment.id for assignment in assignment_list}

    pairs: list[tuple[Assignment, GradeEntry]] = []
    for assignment in usable_assignments(assignment_list, strict=strict):
        entry = by_assignment.get(assignment.id)
        if entry is not None:
            pairs.append((assignment, entry))

    for assignment_id in by_assignment.keys() - known:
        logger.warning("Ignoring grade entry for unknown assignment %s", assignment_id)

    return pairs


def apply_default_weights(
    assignments: Iterable[Assignment],
    default_weights: Mapping[str, float],
) -> list[Assignment]:
    lookup = {category.strip().lower(): weight for category, weight in default_weights.items()}
    result: list[Assignment] = []
    for assignment in assignments:
        if assignment.weight is None:
            assignment = replace(assignment, weight=lookup.get(assignment.category.strip().lower()))
        result.append(assignment)
    return result
