from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Protocol

from classgrades.config.gradebook import GradebookConfig
from classgrades.core.averages import calc_student_average
from classgrades.core.errors import RangeViolation
from classgrades.core.gpa import CourseSummary, ReportCard, summarize_courses
from classgrades.core.statistics import calc_class_statistics
from classgrades.core.validation import validate_entries
from classgrades.core.weighting import apply_default_weights, graded_pairs, usable_assignments
from classgrades.models.entities import (
    Assignment,
    ClassStatistics,
    GradeEntry,
    Student,
    StudentAverage,
)

logger = logging.getLogger(__name__)


class GradebookServiceError(Exception):
    pass


class GradeSource(Protocol):
    def fetch_grades(self, class_id: str) -> list[GradeEntry]:
        ...


@dataclass(frozen=True)
class ClassReport:
    class_id: str
    students: list[StudentAverage]
    statistics: ClassStatistics
    rejected: list[RangeViolation] = field(default_factory=list)


class GradebookService:
    def __init__(self, source: GradeSource, config: GradebookConfig | None = None) -> None:
        self.source = source
        self.config = config or GradebookConfig()

    @classmethod
    def from_settings(cls, source: GradeSource) -> "GradebookService":
        return cls(source, GradebookConfig.from_settings())

    def _fetch(self, class_id: str) -> list[GradeEntry]:
        try:
            return list(self.source.fetch_grades(class_id))
        except GradebookServiceError:
            raise
        except Exception as exc:
            raise GradebookServiceError(f"Failed to fetch grades for class {class_id}: {exc}") from exc

    def _compute(
        self,
        assignments: Iterable[Assignment],
        students: Iterable[Student],
        entries: Iterable[GradeEntry],
    ) -> tuple[list[StudentAverage], list[RangeViolation]]:
        weighted = apply_default_weights(assignments, self.config.default_weights)
        usable = usable_assignments(weighted, strict=self.config.strict_weights)
        usable_ids = {assignment.id for assignment in usable}
        accepted, rejected = validate_entries(weighted, entries)

        by_student: dict[str, list[GradeEntry]] = {}
        for entry in accepted:
            if entry.assignment_id not in usable_ids:
                continue
            by_student.setdefault(entry.student_id, []).append(entry)

        averages = []
        for student in students:
            pairs = graded_pairs(usable, by_student.get(student.id, []))
            averages.append(calc_student_average(student.id, pairs, self.config.scale))
        return averages, rejected

    def student_averages(
        self,
        class_id: str,
        assignments: Iterable[Assignment],
        students: Iterable[Student],
    ) -> list[StudentAverage]:
        averages, _ = self._compute(assignments, students, self._fetch(class_id))
        return averages

    def class_report(
        self,
        class_id: str,
        assignments: Iterable[Assignment],
        students: Iterable[Student],
    ) -> ClassReport:
        entries = self._fetch(class_id)
        logger.debug("Computing report for class %s from %d entries", class_id, len(entries))
        averages, rejected = self._compute(assignments, students, entries)
        statistics = calc_class_statistics(averages, self.config.scale)
        logger.info(
            "Class %s: %d students, average %.2f, %d rejected entries",
            class_id,
            statistics.total_students,
            statistics.class_average,
            len(rejected),
        )
        return ClassReport(class_id, averages, statistics, rejected)

    def report_card(self, courses: Iterable[CourseSummary], subject: str | None = None) -> ReportCard:
        return summarize_courses(courses, subject, round_to=self.config.round_to)
