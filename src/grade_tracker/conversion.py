"""
Percentage <-> four-point conversion.

The two directions come from separate lookup tables and are not inverses of
each other: 70% converts to 1.3 points, and 1.3 points converts back to 68%.
Both functions are total; anything outside the tables clamps to the extremes.
"""
from grade_tracker.config import DEFAULT_CONFIG, GradingConfig, lookup_breakpoint
from grade_tracker.grading_system import GradingSystem


def percentage_to_points(percentage: float, config: GradingConfig = DEFAULT_CONFIG) -> float:
    return lookup_breakpoint(
        percentage, config.percentage_to_points, config.percentage_to_points_floor
    )


def points_to_percentage(points: float, config: GradingConfig = DEFAULT_CONFIG) -> float:
    return lookup_breakpoint(
        points, config.points_to_percentage, config.points_to_percentage_floor
    )


def normalize(
    grade: float,
    from_system: GradingSystem,
    to_system: GradingSystem,
    config: GradingConfig = DEFAULT_CONFIG,
) -> float:
    if from_system == to_system:
        return grade
    if to_system is GradingSystem.FOUR_POINT:
        return percentage_to_points(grade, config)
    return points_to_percentage(grade, config)
