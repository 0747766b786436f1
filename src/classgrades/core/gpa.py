from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from classgrades.models.entities import StudentAverage


@dataclass(frozen=True)
class CourseResult:
    credits: int
    grade_point: float


@dataclass(frozen=True)
class CourseSummary:
    subject: str
    average: StudentAverage
    teacher: str = ""
    credits: int = 1


@dataclass(frozen=True)
class ReportCard:
    courses: list[CourseSummary]
    overall_average: float
    overall_gpa: float
    total_subjects: int


def calc_term_gpa(courses: Iterable[CourseResult], *, round_to: int = 2) -> float:
    weighted = 0.0
    total_credits = 0
    for c in courses:
        if c.credits <= 0:
            raise ValueError("Course credits must be greater than 0")
        weighted += c.credits * c.grade_point
        total_credits += c.credits
    if total_credits == 0:
        return 0.0
    return round(weighted / total_credits, round_to)


def calc_cumulative_gpa(terms: Iterable[Iterable[CourseResult]], *, round_to: int = 2) -> float:
    return calc_term_gpa((c for term in terms for c in term), round_to=round_to)


def summarize_courses(
    courses: Iterable[CourseSummary],
    subject: str | None = None,
    *,
    round_to: int = 2,
) -> ReportCard:
    """Roll a student's per-course results into one report card.

    ``subject`` narrows the courses by case-insensitive substring match.
    """
    selected = list(courses)
    if subject:
        needle = subject.strip().lower()
        selected = [c for c in selected if needle in c.subject.lower()]

    if not selected:
        return ReportCard([], 0.0, 0.0, 0)

    overall_average = sum(c.average.percentage for c in selected) / len(selected)
    overall_gpa = calc_term_gpa(
        (CourseResult(c.credits, c.average.gpa) for c in selected), round_to=round_to
    )
    return ReportCard(
        courses=selected,
        overall_average=round(overall_average, round_to),
        overall_gpa=overall_gpa,
        total_subjects=len(selected),
    )
