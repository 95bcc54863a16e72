"""
Classification of averages into named bands.

Percentage averages map to UK degree classes and four-point averages map to
US letter grades. Lower bounds are inclusive: exactly 70.0 is a First.
An undefined average always yields NO_CLASSIFICATION, never the bottom band.
"""
from collections import Counter
from typing import Dict, Iterable, List, Optional

from grade_tracker.averages import student_average
from grade_tracker.aggregation import round_1dp_half_up
from grade_tracker.config import DEFAULT_CONFIG, NO_CLASSIFICATION, GradingConfig, lookup_band
from grade_tracker.conversion import percentage_to_points
from grade_tracker.grading_system import GradingSystem
from grade_tracker.models import Student

NOT_AVAILABLE = "N/A"


def classify(
    average: Optional[float],
    system: GradingSystem,
    config: GradingConfig = DEFAULT_CONFIG,
) -> str:
    if average is None:
        return NO_CLASSIFICATION
    if system is GradingSystem.FOUR_POINT:
        return lookup_band(average, config.four_point_letters, config.four_point_fallback)
    return lookup_band(average, config.percentage_classes, config.percentage_fallback)


def classify_student(student: Student, config: GradingConfig = DEFAULT_CONFIG) -> str:
    return classify(student_average(student, config), student.grading_system, config)


def classify_percentage(
    percentage: Optional[float],
    system: GradingSystem,
    config: GradingConfig = DEFAULT_CONFIG,
) -> str:
    """Classify a percentage grade, converting it to points first on the four-point scale."""
    if percentage is not None and system is GradingSystem.FOUR_POINT:
        percentage = percentage_to_points(percentage, config)
    return classify(percentage, system, config)


def short_classification(percentage: Optional[float], config: GradingConfig = DEFAULT_CONFIG) -> str:
    if percentage is None:
        return NO_CLASSIFICATION
    return lookup_band(percentage, config.short_classes, config.percentage_fallback)


def letter_grade(percentage: Optional[float], config: GradingConfig = DEFAULT_CONFIG) -> str:
    """UK-style letter for a single assessment or module percentage (A* ... F)."""
    if percentage is None:
        return NO_CLASSIFICATION
    return lookup_band(percentage, config.percentage_letters, config.letter_fallback)


def class_labels(system: GradingSystem, config: GradingConfig = DEFAULT_CONFIG) -> List[str]:
    """Band labels from best to worst, fallback included."""
    if system is GradingSystem.FOUR_POINT:
        return [label for _, label in config.four_point_letters] + [config.four_point_fallback]
    return [label for _, label in config.percentage_classes] + [config.percentage_fallback]


def class_threshold(label: str, system: GradingSystem, config: GradingConfig = DEFAULT_CONFIG) -> float:
    """Lower bound of a named band; raises ValueError for an unknown label."""
    bands = config.four_point_letters if system is GradingSystem.FOUR_POINT else config.percentage_classes
    for lower, name in bands:
        if name == label:
            return lower
    raise ValueError(f"Unknown classification {label!r} for {system.display_name}")


def target_grade(system: GradingSystem, config: GradingConfig = DEFAULT_CONFIG) -> float:
    if system is GradingSystem.FOUR_POINT:
        return config.four_point_target
    return config.percentage_target


def is_excellent(grade: Optional[float], system: GradingSystem, config: GradingConfig = DEFAULT_CONFIG) -> bool:
    if grade is None:
        return False
    bands = config.four_point_letters if system is GradingSystem.FOUR_POINT else config.percentage_classes
    return grade >= bands[0][0]


def format_grade(grade: Optional[float], system: GradingSystem) -> str:
    if grade is None:
        return NOT_AVAILABLE
    if system is GradingSystem.FOUR_POINT:
        return f"{grade:.2f}"
    return f"{round_1dp_half_up(grade):.1f}%"


def grade_distribution(grades: Iterable[Optional[float]], config: GradingConfig = DEFAULT_CONFIG) -> Dict[str, int]:
    """Count of grades per percentage bracket; undefined grades are skipped."""
    return dict(
        Counter(
            lookup_band(g, config.distribution_brackets, config.distribution_fallback)
            for g in grades
            if g is not None
        )
    )


def progress_band(fraction: float, config: GradingConfig = DEFAULT_CONFIG) -> str:
    return lookup_band(fraction, config.progress_bands, config.progress_fallback)
