from __future__ import annotations

import json
from pathlib import Path
from typing import List

from pydantic import BaseModel, Field, ValidationError

from classgrades.core.errors import ConfigurationError
from classgrades.core.grade_scale import GradeScale
from classgrades.models.entities import GradeBand


class GradeBandPayload(BaseModel):
    min: int = Field(ge=0, le=100)
    max: int = Field(ge=0, le=100)
    letter: str = Field(min_length=1)
    gpa: float = Field(ge=0)
    color: str = ""

    def to_entity(self) -> GradeBand:
        return GradeBand(self.min, self.max, self.letter, self.gpa, self.color)


class GradeScalePayload(BaseModel):
    bands: List[GradeBandPayload]


def parse_grade_scale(data: object) -> GradeScale:
    if isinstance(data, list):
        data = {"bands": data}
    try:
        payload = GradeScalePayload.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid grade scale: {exc}") from exc
    return GradeScale(band.to_entity() for band in payload.bands)


def load_grade_scale(path: str | Path) -> GradeScale:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Cannot read grade scale file {path}: {exc}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Grade scale file {path} is not valid JSON") from exc
    return parse_grade_scale(data)
