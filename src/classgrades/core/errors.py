from __future__ import annotations


class GradebookError(Exception):
    pass


class ConfigurationError(GradebookError):
    def __init__(self, message: str, assignment_id: str | None = None) -> None:
        super().__init__(message)
        self.assignment_id = assignment_id


class RangeViolation(GradebookError):
    def __init__(
        self,
        message: str,
        student_id: str | None = None,
        assignment_id: str | None = None,
        earned_points: float | None = None,
    ) -> None:
        super().__init__(message)
        self.student_id = student_id
        self.assignment_id = assignment_id
        self.earned_points = earned_points
