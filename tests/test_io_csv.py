import io
import logging
from datetime import datetime, timezone

import pandas as pd
import pytest

from grade_tracker import io_csv
from grade_tracker.averages import overall_average, year_average
from grade_tracker.grading_system import GradingSystem

CSV = """Year,Module,Credit,Weight,Score,Year Multiplier,Due Date
Foundation,Study Skills,20,100,50,0,
Year 2,Databases,20,100,72,1,
Year 2,Networks,20,40,58,1,
Year 2,Networks,20,60,58,1,2026-05-01
Year 2,Compilers,20,100,,1,2026-06-01T09:00:00Z
Year 3,Dissertation,40,,,1,
"""


@pytest.fixture
def frame():
    return io_csv.read_csv_upload(io.StringIO(CSV))


def test_read_csv_upload_normalises_columns(frame):
    assert {"year", "module", "credits", "weighting", "score", "year_multiplier", "due_date"} <= set(frame.columns)


def test_student_from_frame_builds_tree(frame):
    student = io_csv.student_from_frame(frame, GradingSystem.PERCENTAGE, name="Sam")

    assert [y.name for y in student.academic_years] == ["Foundation", "Year 2", "Year 3"]
    foundation, second, third = student.academic_years
    assert foundation.weighting_multiplier == 0.0
    assert [m.name for m in second.modules] == ["Databases", "Networks", "Compilers"]
    assert len(second.modules[1].assessments) == 2
    assert third.modules[0].assessments == ()
    assert third.modules[0].credits == 40

    compilers = second.modules[2].assessments[0]
    assert compilers.score is None
    assert not compilers.is_completed
    assert compilers.due_date == datetime(2026, 6, 1, 9, 0, tzinfo=timezone.utc)

    assert year_average(second) == pytest.approx(65.0)
    assert overall_average(student) == pytest.approx(65.0)


def test_rows_with_bad_credits_are_skipped(caplog):
    df = pd.DataFrame(
        [
            {"Year": "Year 1", "Module": "Maths", "Credits": 0, "Weighting": 100, "Score": 70},
            {"Year": "Year 1", "Module": "Physics", "Credits": 20, "Weighting": 100, "Score": 60},
        ]
    )
    with caplog.at_level(logging.WARNING, logger="grade_tracker.io_csv"):
        student = io_csv.student_from_frame(df)
    assert [m.name for m in student.academic_years[0].modules] == ["Physics"]
    assert "Maths" in caplog.text


def test_missing_columns_are_reported():
    with pytest.raises(ValueError, match="credits"):
        io_csv.validate_records(pd.DataFrame([{"Year": "Year 1", "Module": "Maths"}]))


def test_module_summary_frame(frame):
    summary = io_csv.module_summary_frame(io_csv.student_from_frame(frame))

    assert list(summary.columns) == [
        "Year",
        "Module",
        "Credits",
        "Current grade",
        "Completion",
        "Projected grade",
        "Classification",
    ]
    assert len(summary) == 5
    compilers = summary[summary["Module"] == "Compilers"].iloc[0]
    assert pd.isna(compilers["Current grade"])
    assert compilers["Projected grade"] == pytest.approx(100.0)
    assert compilers["Classification"] == "No classification yet"
    databases = summary[summary["Module"] == "Databases"].iloc[0]
    assert databases["Classification"] == "First Class"


def test_module_summary_frame_classifies_in_student_system():
    df = pd.DataFrame([{"Year": "Year 1", "Module": "Calculus", "Credits": 4, "Weighting": 100, "Score": 95}])
    student = io_csv.student_from_frame(df, GradingSystem.FOUR_POINT)
    summary = io_csv.module_summary_frame(student)
    assert summary.iloc[0]["Classification"] == "A"
