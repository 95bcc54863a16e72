"""
Every threshold and lookup table used by the classification, conversion and
projection code. Override with dataclasses.replace(DEFAULT_CONFIG, ...).

Band tables are (lower_bound, label) pairs in descending order; a value
belongs to the first band whose lower bound it reaches.
"""
from dataclasses import dataclass
from typing import Tuple

Band = Tuple[float, str]
Breakpoint = Tuple[float, float]

NO_CLASSIFICATION = "No classification yet"


@dataclass(frozen=True)
class GradingConfig:
    # ---- Percentage system ----
    percentage_classes: Tuple[Band, ...] = (
        (70.0, "First Class"),
        (60.0, "Upper Second (2:1)"),
        (50.0, "Lower Second (2:2)"),
        (40.0, "Third Class"),
    )
    percentage_fallback: str = "Fail"
    short_classes: Tuple[Band, ...] = (
        (70.0, "1st"),
        (60.0, "2:1"),
        (50.0, "2:2"),
        (40.0, "3rd"),
    )
    percentage_letters: Tuple[Band, ...] = (
        (85.0, "A*"),
        (70.0, "A"),
        (60.0, "B"),
        (50.0, "C"),
        (40.0, "D"),
    )
    letter_fallback: str = "F"
    percentage_target: float = 65.0  # 2:1

    # ---- Four-point system ----
    four_point_letters: Tuple[Band, ...] = (
        (3.7, "A"),
        (3.3, "A-"),
        (3.0, "B+"),
        (2.7, "B"),
        (2.3, "B-"),
        (2.0, "C+"),
        (1.7, "C"),
        (1.3, "C-"),
        (1.0, "D+"),
        (0.67, "D"),
    )
    four_point_fallback: str = "F"
    four_point_target: float = 3.0  # B average
    max_points: float = 4.0

    # ---- Conversion tables (lower bound -> converted value) ----
    percentage_to_points: Tuple[Breakpoint, ...] = (
        (97.0, 4.0),
        (93.0, 3.7),
        (90.0, 3.3),
        (87.0, 3.0),
        (83.0, 2.7),
        (80.0, 2.3),
        (77.0, 2.0),
        (73.0, 1.7),
        (70.0, 1.3),
        (67.0, 1.0),
        (65.0, 0.7),
    )
    percentage_to_points_floor: float = 0.0
    points_to_percentage: Tuple[Breakpoint, ...] = (
        (3.97, 98.0),
        (3.67, 95.0),
        (3.33, 91.0),
        (3.0, 88.0),
        (2.67, 85.0),
        (2.33, 82.0),
        (2.0, 78.0),
        (1.67, 75.0),
        (1.33, 72.0),
        (1.0, 68.0),
        (0.67, 66.0),
        (0.0, 63.0),
    )
    points_to_percentage_floor: float = 0.0

    # ---- Dashboard ----
    max_score: float = 100.0
    trend_margin: float = 2.0
    progress_bands: Tuple[Band, ...] = (
        (0.9, "excellent"),
        (0.75, "good"),
        (0.6, "satisfactory"),
    )
    progress_fallback: str = "poor"
    distribution_brackets: Tuple[Band, ...] = (
        (90.0, "90-100%"),
        (80.0, "80-89%"),
        (70.0, "70-79%"),
        (60.0, "60-69%"),
        (50.0, "50-59%"),
        (40.0, "40-49%"),
    )
    distribution_fallback: str = "Below 40%"


DEFAULT_CONFIG = GradingConfig()


def lookup_band(value: float, bands: Tuple[Band, ...], fallback: str) -> str:
    for lower, label in bands:
        if value >= lower:
            return label
    return fallback


def lookup_breakpoint(value: float, table: Tuple[Breakpoint, ...], floor: float) -> float:
    for lower, converted in table:
        if value >= lower:
            return converted
    return floor
