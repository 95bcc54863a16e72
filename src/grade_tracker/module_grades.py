"""
Module-level grade calculations.

Assessment weightings are percentages of the module but are not required to
add up to 100, so the current grade is normalised by the weighting that has
actually been graded.

A module counts as completed only when every assessment has a score; the
per-assessment is_completed flag is not consulted here.
"""
from typing import List, Optional, Tuple

from grade_tracker.aggregation import weighted_mean
from grade_tracker.config import DEFAULT_CONFIG, GradingConfig
from grade_tracker.conversion import percentage_to_points
from grade_tracker.models import Assessment, Module

FULL_WEIGHTING = 100.0


def graded_assessments(module: Module) -> List[Assessment]:
    return [a for a in module.assessments if a.score is not None]


def ungraded_assessments(module: Module) -> List[Assessment]:
    return [a for a in module.assessments if a.score is None]


def graded_pairs(module: Module) -> List[Tuple[float, float]]:
    """(score, weighting) for every graded assessment."""
    return [(a.score, a.weighting) for a in graded_assessments(module)]


def total_weighting(module: Module) -> float:
    return float(sum(a.weighting for a in module.assessments if a.weighting > 0))


def completed_weighting(module: Module) -> float:
    return float(sum(a.weighting for a in graded_assessments(module) if a.weighting > 0))


def current_grade(module: Module) -> Optional[float]:
    if completed_weighting(module) == 0:
        return None
    return weighted_mean(graded_pairs(module))


def earned_points(module: Module) -> float:
    """Percentage points of the whole module already secured."""
    return float(
        sum(a.score * a.weighting / FULL_WEIGHTING for a in graded_assessments(module) if a.weighting > 0)
    )


def is_completed(module: Module) -> bool:
    return len(module.assessments) > 0 and all(a.score is not None for a in module.assessments)


def completion_percentage(module: Module) -> float:
    """Graded share of the recorded weighting, as a 0-1 fraction."""
    total = total_weighting(module)
    if total <= 0:
        return 0.0
    return completed_weighting(module) / total


def remaining_weighting(module: Module) -> float:
    """Share of the module (out of 100) still to be earned."""
    return max(0.0, FULL_WEIGHTING - completed_weighting(module))


def unallocated_weighting(module: Module) -> float:
    """Share of the module (out of 100) not covered by any recorded assessment."""
    return max(0.0, FULL_WEIGHTING - total_weighting(module))


def grade_points(module: Module, config: GradingConfig = DEFAULT_CONFIG) -> Optional[float]:
    grade = current_grade(module)
    if grade is None:
        return None
    return percentage_to_points(grade, config)
