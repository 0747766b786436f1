from __future__ import annotations

from dataclasses import dataclass, field

from classgrades.config.scale_file import load_grade_scale
from classgrades.config.settings import Settings, parse_weights, settings
from classgrades.core.errors import ConfigurationError
from classgrades.core.grade_scale import DEFAULT_SCALE, GradeScale
from classgrades.core.weighting import is_valid_weight


@dataclass(frozen=True)
class GradebookConfig:
    scale: GradeScale = DEFAULT_SCALE
    default_weights: dict[str, float] = field(default_factory=dict)
    strict_weights: bool = False
    round_to: int = 2

    @classmethod
    def from_settings(cls, source: Settings = settings) -> "GradebookConfig":
        scale = load_grade_scale(source.scale_file) if source.scale_file else DEFAULT_SCALE
        try:
            weights = parse_weights(source.default_weights)
        except ValueError as exc:
            raise ConfigurationError(f"Invalid CLASSGRADES_DEFAULT_WEIGHTS: {exc}") from exc
        for category, weight in weights.items():
            if not is_valid_weight(weight):
                raise ConfigurationError(f"Default weight for {category} must be a positive number")
        return cls(
            scale=scale,
            default_weights=weights,
            strict_weights=source.strict_weights,
            round_to=source.round_to,
        )
