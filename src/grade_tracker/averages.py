from enum import Enum
from typing import List, Optional

from grade_tracker.aggregation import weighted_mean
from grade_tracker.config import DEFAULT_CONFIG, GradingConfig
from grade_tracker.grading_system import GradingSystem
from grade_tracker.models import AcademicYear, Student
from grade_tracker import module_grades


class Trend(Enum):
    UP = "up"
    DOWN = "down"
    STABLE = "stable"


# ------------------------
# Year level
# ------------------------
def year_average(year: AcademicYear) -> Optional[float]:
    """
    Credit-weighted mean of module grades. Modules with nothing graded are
    left out entirely rather than counted as zero.
    """
    return weighted_mean(
        (module_grades.current_grade(m), m.credits) for m in year.modules
    )


def year_grade_points(year: AcademicYear, config: GradingConfig = DEFAULT_CONFIG) -> Optional[float]:
    """Credit-weighted four-point average (GPA) over graded modules."""
    return weighted_mean(
        (module_grades.grade_points(m, config), m.credits) for m in year.modules
    )


def total_credits(year: AcademicYear) -> int:
    return sum(m.credits for m in year.modules)


def completed_credits(year: AcademicYear) -> int:
    return sum(m.credits for m in year.modules if module_grades.is_completed(m))


# ------------------------
# Student level
# ------------------------
def overall_average(student: Student) -> Optional[float]:
    """
    Multiplier-weighted mean of year averages. Years with a multiplier of 0
    or with no graded modules do not contribute.
    """
    return weighted_mean(
        (year_average(y), y.weighting_multiplier) for y in student.academic_years
    )


def overall_grade_points(student: Student, config: GradingConfig = DEFAULT_CONFIG) -> Optional[float]:
    return weighted_mean(
        (year_grade_points(y, config), y.weighting_multiplier)
        for y in student.academic_years
    )


def student_average(student: Student, config: GradingConfig = DEFAULT_CONFIG) -> Optional[float]:
    """Overall average expressed in the student's own grading system."""
    if student.grading_system is GradingSystem.FOUR_POINT:
        return overall_grade_points(student, config)
    return overall_average(student)


def active_year(student: Student) -> Optional[AcademicYear]:
    for year in student.academic_years:
        if year.is_active:
            return year
    return None


def assessment_completion_rate(student: Student) -> float:
    assessments = [
        a
        for year in student.academic_years
        for m in year.modules
        for a in m.assessments
    ]
    if not assessments:
        return 0.0
    graded = sum(1 for a in assessments if a.score is not None)
    return graded / len(assessments)


def _chronological(years) -> List[AcademicYear]:
    years = list(years)
    if years and all(y.start_date is not None for y in years):
        return sorted(years, key=lambda y: y.start_date)
    return years


def year_trend(student: Student, config: GradingConfig = DEFAULT_CONFIG) -> Optional[Trend]:
    """
    Direction of the latest year average against the one before it.
    A change within config.trend_margin counts as stable.
    """
    averages = [
        avg
        for avg in (year_average(y) for y in _chronological(student.academic_years))
        if avg is not None
    ]
    if len(averages) < 2:
        return None

    previous, latest = averages[-2], averages[-1]
    if latest > previous + config.trend_margin:
        return Trend.UP
    if latest < previous - config.trend_margin:
        return Trend.DOWN
    return Trend.STABLE
