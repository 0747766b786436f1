from __future__ import annotations

from typing import Annotated, Optional

from pydantic import BaseModel, Field

from classgrades.models.entities import Assignment, GradeEntry, Student


class AssignmentPayload(BaseModel):
    id: str
    total_points: float = Field(gt=0, allow_inf_nan=False)
    weight: Optional[Annotated[float, Field(gt=0, allow_inf_nan=False)]] = None
    title: str = ""
    category: str = ""

    def to_entity(self) -> Assignment:
        return Assignment(
            id=self.id,
            total_points=self.total_points,
            weight=self.weight,
            title=self.title,
            category=self.category,
        )


class GradeEntryPayload(BaseModel):
    student_id: str
    assignment_id: str
    earned_points: float

    def to_entity(self) -> GradeEntry:
        return GradeEntry(self.student_id, self.assignment_id, self.earned_points)


class StudentPayload(BaseModel):
    id: str
    name: str

    def to_entity(self) -> Student:
        return Student(self.id, self.name)
