from __future__ import annotations

import logging
import math
from typing import Iterable

from classgrades.core.errors import RangeViolation
from classgrades.models.entities import Assignment, GradeEntry

logger = logging.getLogger(__name__)


def validate_entry(entry: GradeEntry, assignment: Assignment) -> GradeEntry:
    if assignment.total_points <= 0:
        raise RangeViolation(
            f"Assignment {assignment.id} has non-positive total points {assignment.total_points}",
            student_id=entry.student_id,
            assignment_id=assignment.id,
            earned_points=entry.earned_points,
        )
    earned = entry.earned_points
    if not math.isfinite(earned) or earned < 0 or earned > assignment.total_points:
        raise RangeViolation(
            f"Score {earned} for student {entry.student_id} on {assignment.id} "
            f"is outside 0-{assignment.total_points}",
            student_id=entry.student_id,
            assignment_id=assignment.id,
            earned_points=earned,
        )
    return entry


def validate_entries(
    assignments: Iterable[Assignment],
    entries: Iterable[GradeEntry],
) -> tuple[list[GradeEntry], list[RangeViolation]]:
    """Split raw entries into accepted records and rejected violations.

    A later entry for the same student and assignment replaces the earlier
    one before validation.
    """
    by_id = {a.id: a for a in assignments}

    latest: dict[tuple[str, str], GradeEntry] = {}
    for entry in entries:
        key = (entry.student_id, entry.assignment_id)
        if key in latest:
            logger.debug("Entry for %s on %s replaced by a newer record", *key)
        latest[key] = entry

    accepted: list[GradeEntry] = []
    rejected: list[RangeViolation] = []
    for entry in latest.values():
        assignment = by_id.get(entry.assignment_id)
        if assignment is None:
            rejected.append(
                RangeViolation(
                    f"Unknown assignment {entry.assignment_id} for student {entry.student_id}",
                    student_id=entry.student_id,
                    assignment_id=entry.assignment_id,
                    earned_points=entry.earned_points,
                )
            )
            continue
        try:
            accepted.append(validate_entry(entry, assignment))
        except RangeViolation as exc:
            rejected.append(exc)

    for violation in rejected:
        logger.warning("Rejected grade entry: %s", violation)
    return accepted, rejected
