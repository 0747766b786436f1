from __future__ import annotations

from typing import Iterable

from classgrades.core.errors import ConfigurationError
from classgrades.models.entities import GradeBand

DEFAULT_GRADE_BANDS: list[GradeBand] = [
    GradeBand(90, 100, "A", 4.0, "#28A745"),
    GradeBand(80, 89, "B", 3.0, "#17A2B8"),
    GradeBand(70, 79, "C", 2.0, "#FFC107"),
    GradeBand(60, 69, "D", 1.0, "#FD7E14"),
    GradeBand(0, 59, "F", 0.0, "#DC3545"),
]


def _check_bands(bands: list[GradeBand]) -> None:
    if not bands:
        raise ConfigurationError("Grade scale needs at least one band")

    letters = [band.letter for band in bands]
    duplicates = sorted({letter for letter in letters if letters.count(letter) > 1})
    if duplicates:
        raise ConfigurationError(f"Duplicate grade letters: {', '.join(duplicates)}")

    for band in bands:
        if band.min > band.max:
            raise ConfigurationError(f"Band {band.letter} has min {band.min} above max {band.max}")
        if band.min < 0 or band.max > 100:
            raise ConfigurationError(f"Band {band.letter} must lie within 0-100")

    ascending = sorted(bands, key=lambda b: b.min)
    if ascending[0].min != 0:
        raise ConfigurationError(f"Grade scale starts at {ascending[0].min}, expected 0")
    if ascending[-1].max != 100:
        raise ConfigurationError(f"Grade scale ends at {ascending[-1].max}, expected 100")

    for lower, upper in zip(ascending, ascending[1:]):
        if upper.min <= lower.max:
            raise ConfigurationError(f"Bands {lower.letter} and {upper.letter} overlap")
        if upper.min != lower.max + 1:
            raise ConfigurationError(f"Gap between bands {lower.letter} and {upper.letter}")


class GradeScale:
    """Percentage to grade band lookup over a validated set of bands.

    Bands use inclusive whole-percentage bounds and must partition 0-100.
    Lookup saturates: anything above the top band maps to it, anything
    below the lowest band (negatives included) maps to the lowest one.
    """

    def __init__(self, bands: Iterable[GradeBand] = DEFAULT_GRADE_BANDS) -> None:
        band_list = list(bands)
        _check_bands(band_list)
        self._bands = tuple(sorted(band_list, key=lambda b: b.min, reverse=True))

    @property
    def bands(self) -> tuple[GradeBand, ...]:
        return self._bands

    @property
    def lowest_band(self) -> GradeBand:
        return self._bands[-1]

    def letters(self) -> list[str]:
        return [band.letter for band in self._bands]

    def lookup(self, percentage: float) -> GradeBand:
        for band in self._bands:
            if percentage >= band.min:
                return band
        return self.lowest_band

    def letter_for(self, percentage: float) -> str:
        return self.lookup(percentage).letter

    def gpa_for(self, percentage: float) -> float:
        return self.lookup(percentage).gpa

    def color_for(self, percentage: float) -> str:
        return self.lookup(percentage).color

    def band_for_letter(self, letter: str) -> GradeBand:
        for band in self._bands:
            if band.letter.upper() == letter.upper():
                return band
        raise ValueError(f"Unsupported letter grade: {letter}")

    def __repr__(self) -> str:
        return f"GradeScale({', '.join(self.letters())})"


DEFAULT_SCALE = GradeScale()
