from dataclasses import dataclass
import os
from dotenv import load_dotenv


load_dotenv()


def _split_csv(value: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in value.split(",") if item.strip())


def _to_bool(value: str) -> bool:
    return value.strip().lower() in {"true", "1", "yes", "y", "on"}


def parse_weights(value: str) -> dict[str, float]:
    weights: dict[str, float] = {}
    for item in _split_csv(value):
        category, sep, weight = item.partition("=")
        if not sep:
            raise ValueError(f"Expected category=weight, got {item!r}")
        weights[category.strip().lower()] = float(weight)
    return weights


@dataclass(frozen=True)
class Settings:
    scale_file: str = os.getenv("CLASSGRADES_SCALE_FILE", "")
    round_to: int = int(os.getenv("CLASSGRADES_ROUND_TO", "2"))
    strict_weights: bool = _to_bool(os.getenv("CLASSGRADES_STRICT_WEIGHTS", "0"))
    default_weights: str = os.getenv(
        "CLASSGRADES_DEFAULT_WEIGHTS",
        "quiz=20,test=40,assignment=40",
    )


settings = Settings()
