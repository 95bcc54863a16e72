"""
Projections from partial results: best-case finals, the score needed on the
remaining weighting to reach a target, and what-if checks for planned scores.

Required scores are never clamped. A value above the maximum means the target
cannot be reached and a negative value means it is already secured.
"""
import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from grade_tracker.aggregation import weighted_mean, weighted_mean_with_total
from grade_tracker.averages import year_average, year_grade_points
from grade_tracker.classification import class_threshold, classify, classify_percentage
from grade_tracker.config import DEFAULT_CONFIG, GradingConfig
from grade_tracker.grading_system import GradingSystem
from grade_tracker.models import AcademicYear, Module
from grade_tracker import module_grades

logger = logging.getLogger(__name__)

NOT_ACHIEVABLE = "not achievable"
ALREADY_SECURED = "already secured"
REQUIRED = "required"
LOCKED_IN = "locked in"


def projected_final_grade(module: Module) -> Optional[float]:
    """
    Best case: every ungraded share of the module scores full marks.
    earned points + remaining weighting.
    """
    remaining = module_grades.remaining_weighting(module)
    if remaining <= 0:
        return module_grades.current_grade(module)
    return module_grades.earned_points(module) + remaining


def required_score_for_target(
    current_grades: Iterable[Tuple[float, float]],
    remaining_weight: float,
    target_grade: float,
) -> Optional[float]:
    """
    current_grades:   (grade, weight) pairs already achieved
    remaining_weight: weight still to be assessed
    Solves (sum(g*w) + x*R) / (sum(w) + R) == target for x.
    Returns None when nothing remains to be assessed.
    """
    if remaining_weight <= 0:
        return None

    current_mean, current_weight = weighted_mean_with_total(current_grades)
    achieved = current_mean * current_weight if current_mean is not None else 0.0

    required_total = target_grade * (current_weight + remaining_weight)
    return (required_total - achieved) / remaining_weight


def required_score_for_module(module: Module, target_grade: float) -> Optional[float]:
    return required_score_for_target(
        module_grades.graded_pairs(module),
        module_grades.remaining_weighting(module),
        target_grade,
    )


def requirement_status(required: Optional[float], maximum: float = 100.0) -> str:
    if required is None:
        return LOCKED_IN
    if required > maximum:
        return NOT_ACHIEVABLE
    if required < 0:
        return ALREADY_SECURED
    return REQUIRED


# ------------------------
# What-if planning
# ------------------------
def _suggested_pairs(module: Module, suggested_scores: Sequence[float]) -> List[Tuple[float, float]]:
    ungraded = module_grades.ungraded_assessments(module)
    if len(ungraded) != len(suggested_scores):
        raise ValueError(
            "Length of suggested_scores must match the number of ungraded assessments "
            f"({len(suggested_scores)} != {len(ungraded)})"
        )
    planned = [(float(s), a.weighting) for a, s in zip(ungraded, suggested_scores)]
    return module_grades.graded_pairs(module) + planned


def what_if_final_grade(module: Module, suggested_scores: Sequence[float]) -> Optional[float]:
    """
    Final module grade if each ungraded assessment, in order, scored the
    matching suggested score.
    """
    return weighted_mean(_suggested_pairs(module, suggested_scores))


def check_suggestion_meets_target(
    module: Module,
    suggested_scores: Sequence[float],
    target_grade: float,
    config: GradingConfig = DEFAULT_CONFIG,
) -> Dict[str, object]:
    final_grade = what_if_final_grade(module, suggested_scores)
    meets_target = final_grade is not None and final_grade >= target_grade

    return {
        "final_grade": final_grade,
        "final_class": classify_percentage(final_grade, module.grading_system, config),
        "target_grade": target_grade,
        "meets_target": meets_target,
        "delta_to_target": final_grade - target_grade if final_grade is not None else None,
    }


# ------------------------
# Year planning
# ------------------------
def minimal_forward_average(
    target_mean: float,
    remaining_credits: float,
    current_mean: Optional[float],
    completed_credits: float,
) -> Optional[float]:
    """Average needed across the remaining credits to finish on target_mean."""
    if remaining_credits <= 0:
        return None
    Ca = completed_credits
    Cr = remaining_credits
    Ma = current_mean if current_mean is not None else 0.0

    return (target_mean * (Ca + Cr) - Ma * Ca) / Cr


def year_requirements(
    year: AcademicYear,
    target_label: str,
    system: GradingSystem = GradingSystem.PERCENTAGE,
    config: GradingConfig = DEFAULT_CONFIG,
) -> Dict[str, object]:
    """
    Where a year stands against a target classification.

    Modules with any graded work count at their current grade; modules with
    nothing graded yet make up the remaining credits.
    """
    target_mean = class_threshold(target_label, system, config)

    if system is GradingSystem.FOUR_POINT:
        current_mean = year_grade_points(year, config)
        maximum = config.max_points
    else:
        current_mean = year_average(year)
        maximum = config.max_score

    # ---- Completed vs outstanding credits ----
    credits_completed = 0.0
    credits_outstanding = 0.0
    for m in year.modules:
        if m.credits <= 0:
            logger.debug("Ignoring module %r with non-positive credits", m.name)
            continue
        if module_grades.current_grade(m) is None:
            credits_outstanding += m.credits
        else:
            credits_completed += m.credits

    needed_forward_mean = minimal_forward_average(
        target_mean=target_mean,
        remaining_credits=credits_outstanding,
        current_mean=current_mean,
        completed_credits=credits_completed,
    )

    status = requirement_status(needed_forward_mean, maximum)

    return {
        "current_mean": current_mean,
        "current_class": classify(current_mean, system, config),
        "target_class_label": target_label,
        "credits_completed": credits_completed,
        "credits_outstanding": credits_outstanding,
        "needed_forward_mean": needed_forward_mean,
        "status": status,
    }
