from datetime import datetime, timezone

import pytest

from grade_tracker.models import AcademicYear, Assessment, Module, Student


def graded_module(grade, credits=20, name=""):
    return Module(credits=credits, assessments=(Assessment(weighting=100, score=grade),), name=name)


@pytest.fixture
def half_graded_module():
    return Module(
        credits=20,
        assessments=(
            Assessment(weighting=40, score=68, is_completed=True, name="Coursework"),
            Assessment(weighting=60, name="Exam"),
        ),
        name="Algorithms",
    )


@pytest.fixture
def second_year():
    return AcademicYear(
        modules=(
            graded_module(72, name="Databases"),
            graded_module(58, name="Networks"),
            Module(credits=20, assessments=(Assessment(weighting=100),), name="Compilers"),
        ),
        weighting_multiplier=1.0,
        name="Year 2",
    )


@pytest.fixture
def student_with_foundation_year():
    return Student(
        academic_years=(
            AcademicYear(modules=(graded_module(50),), weighting_multiplier=0.0, name="Foundation"),
            AcademicYear(modules=(graded_module(65),), weighting_multiplier=1.0, name="Year 2"),
            AcademicYear(modules=(graded_module(74),), weighting_multiplier=1.0, name="Year 3", is_active=True),
        ),
        name="Sam",
    )


@pytest.fixture
def now():
    return datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)
