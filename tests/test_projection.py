import pytest

from conftest import graded_module
from grade_tracker import projection
from grade_tracker.grading_system import GradingSystem
from grade_tracker.models import AcademicYear, Assessment, Module
from grade_tracker.module_grades import current_grade


def test_projected_final_grade_uses_earned_points(half_graded_module):
    assert projection.projected_final_grade(half_graded_module) == pytest.approx(87.2)


def test_projected_equals_current_when_nothing_remains():
    module = Module(credits=20, assessments=(Assessment(weighting=50, score=70), Assessment(weighting=50, score=80)))
    assert projection.projected_final_grade(module) == pytest.approx(current_grade(module))


def test_projected_equals_current_when_over_weighted():
    module = Module(credits=20, assessments=(Assessment(weighting=60, score=40), Assessment(weighting=60, score=90)))
    assert projection.projected_final_grade(module) == pytest.approx(65.0)


def test_projected_for_ungraded_module_is_full_marks():
    assert projection.projected_final_grade(Module(credits=20, assessments=(Assessment(weighting=100),))) == 100.0


def test_required_score_for_target():
    assert projection.required_score_for_target([(60, 50)], 50, 65) == pytest.approx(70.0)


def test_required_score_with_nothing_graded_is_the_target():
    assert projection.required_score_for_target([], 100, 65) == pytest.approx(65.0)


@pytest.mark.parametrize("remaining", [0, -10])
def test_required_score_undefined_when_nothing_remains(remaining):
    assert projection.required_score_for_target([(60, 100)], remaining, 65) is None


def test_required_score_is_not_clamped():
    assert projection.required_score_for_target([(30, 80)], 20, 70) == pytest.approx(230.0)
    assert projection.required_score_for_target([(90, 80)], 20, 40) == pytest.approx(-160.0)


def test_required_score_for_module(half_graded_module):
    required = projection.required_score_for_module(half_graded_module, 70)
    assert required == pytest.approx((7000 - 68 * 40) / 60)
    assert projection.requirement_status(required) == projection.REQUIRED


@pytest.mark.parametrize(
    "required, status",
    [
        (120.0, projection.NOT_ACHIEVABLE),
        (100.0, projection.REQUIRED),
        (0.0, projection.REQUIRED),
        (-5.0, projection.ALREADY_SECURED),
        (None, projection.LOCKED_IN),
    ],
)
def test_requirement_status(required, status):
    assert projection.requirement_status(required) == status


def test_what_if_final_grade(half_graded_module):
    assert projection.what_if_final_grade(half_graded_module, [80]) == pytest.approx(75.2)


def test_what_if_rejects_mismatched_suggestions(half_graded_module):
    with pytest.raises(ValueError):
        projection.what_if_final_grade(half_graded_module, [80, 90])


def test_check_suggestion_meets_target(half_graded_module):
    result = projection.check_suggestion_meets_target(half_graded_module, [80], 70)
    assert result["meets_target"] is True
    assert result["final_class"] == "First Class"
    assert result["delta_to_target"] == pytest.approx(5.2)

    result = projection.check_suggestion_meets_target(half_graded_module, [50], 70)
    assert result["meets_target"] is False
    assert result["final_class"] == "Lower Second (2:2)"


def test_minimal_forward_average():
    assert projection.minimal_forward_average(70, 20, 65, 40) == pytest.approx(80.0)
    assert projection.minimal_forward_average(70, 0, 65, 40) is None
    assert projection.minimal_forward_average(60, 120, None, 0) == pytest.approx(60.0)


def test_year_requirements(second_year):
    summary = projection.year_requirements(second_year, "First Class")
    assert summary["current_mean"] == pytest.approx(65.0)
    assert summary["current_class"] == "Upper Second (2:1)"
    assert summary["credits_completed"] == 40
    assert summary["credits_outstanding"] == 20
    assert summary["needed_forward_mean"] == pytest.approx(80.0)
    assert summary["status"] == projection.REQUIRED

    assert projection.year_requirements(second_year, "Third Class")["status"] == projection.ALREADY_SECURED


def test_year_requirements_when_everything_is_graded():
    year = AcademicYear(modules=(graded_module(72), graded_module(58)))
    summary = projection.year_requirements(year, "First Class")
    assert summary["needed_forward_mean"] is None
    assert summary["status"] == projection.LOCKED_IN


def test_year_requirements_on_four_point_scale():
    year = AcademicYear(modules=(graded_module(95), Module(credits=20)))
    summary = projection.year_requirements(year, "A", GradingSystem.FOUR_POINT)
    assert summary["current_mean"] == pytest.approx(3.7)
    assert summary["needed_forward_mean"] == pytest.approx(3.7)
    assert summary["status"] == projection.REQUIRED


def test_year_requirements_unknown_target(second_year):
    with pytest.raises(ValueError):
        projection.year_requirements(second_year, "Distinction")


def test_check_suggestion_uses_module_grading_system():
    module = Module(
        credits=20,
        assessments=(Assessment(weighting=40, score=68), Assessment(weighting=60)),
        grading_system=GradingSystem.FOUR_POINT,
    )
    result = projection.check_suggestion_meets_target(module, [80], 70)
    assert result["final_grade"] == pytest.approx(75.2)
    assert result["final_class"] == "C"


def test_projection_ignores_non_positive_weightings():
    module = Module(
        credits=20,
        assessments=(
            Assessment(weighting=-20, score=10),
            Assessment(weighting=50, score=80),
            Assessment(weighting=50),
        ),
    )
    assert projection.projected_final_grade(module) == pytest.approx(90.0)
    assert projection.required_score_for_module(module, 70) == pytest.approx(60.0)
