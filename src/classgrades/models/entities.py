from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Assignment:
    id: str
    total_points: float
    weight: float | None
    title: str = ""
    category: str = ""


@dataclass(frozen=True)
class GradeEntry:
    student_id: str
    assignment_id: str
    earned_points: float

    def percentage(self, total_points: float) -> float:
        return self.earned_points / total_points * 100


@dataclass(frozen=True)
class Student:
    id: str
    name: str


@dataclass(frozen=True)
class GradeBand:
    min: int
    max: int
    letter: str
    gpa: float
    color: str = ""


@dataclass(frozen=True)
class StudentAverage:
    student_id: str
    percentage: float
    letter_grade: str
    gpa: float
    earned_points: float
    total_points: float
    total_weight: float
    graded_count: int


@dataclass(frozen=True)
class ClassStatistics:
    class_average: float
    highest: float
    lowest: float
    distribution: dict[str, int] = field(default_factory=dict)
    total_students: int = 0
