"""
Tabular input/output helpers for hosts that keep records as flat tables.

One row per assessment:
    year, module, credits, weighting, score, [year_multiplier, is_active,
    code, assessment, due_date, is_completed]

A row with no weighting declares a module that has no assessments yet.
"""
import logging
from typing import Dict, List

import pandas as pd

from grade_tracker.classification import classify_percentage
from grade_tracker.grading_system import GradingSystem
from grade_tracker.models import AcademicYear, Assessment, Module, Student
from grade_tracker.module_grades import completion_percentage, current_grade
from grade_tracker.projection import projected_final_grade

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = {"year", "module", "credits"}
COLUMN_ALIASES = {
    "credit": "credits",
    "weight": "weighting",
    "grade": "score",
    "multiplier": "year_multiplier",
}


# ------------------------
# CSV helpers
# ------------------------
def _normalise_cols(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    df.columns = [str(c).strip().lower().replace(" ", "_") for c in df.columns]
    renames = {
        alias: canonical
        for alias, canonical in COLUMN_ALIASES.items()
        if alias in df.columns and canonical not in df.columns
    }
    return df.rename(columns=renames)


def read_csv_upload(source) -> pd.DataFrame:
    df = pd.read_csv(source)
    return _normalise_cols(df)


def validate_records(df: pd.DataFrame) -> pd.DataFrame:
    df = _normalise_cols(df)
    missing = REQUIRED_COLUMNS - set(df.columns)
    if missing:
        raise ValueError(f"Missing columns: {sorted(missing)}. Expected: Year, Module, Credits.")
    return df


def _optional(row, column):
    value = row.get(column)
    if value is None or pd.isna(value):
        return None
    return value


def _flag(row, column) -> bool:
    value = _optional(row, column)
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "y"}
    return bool(value)


def _parse_due_date(row):
    value = _optional(row, "due_date")
    if value is None:
        return None
    ts = pd.Timestamp(value)
    ts = ts.tz_localize("UTC") if ts.tzinfo is None else ts.tz_convert("UTC")
    return ts.to_pydatetime()


# ------------------------
# Frame -> records
# ------------------------
def student_from_frame(
    df: pd.DataFrame,
    grading_system: GradingSystem = GradingSystem.PERCENTAGE,
    name: str = "",
) -> Student:
    """Group assessment rows into years and modules, keeping first-seen order."""
    df = validate_records(df)

    years: Dict[str, dict] = {}
    for _, row in df.iterrows():
        year_key = str(row["year"])
        module_key = str(row["module"])
        credits = row.get("credits")
        if pd.isna(credits) or float(credits) <= 0:
            logger.warning("Skipping row for module %r: credits must be positive", module_key)
            continue

        year = years.setdefault(
            year_key,
            {
                "multiplier": 1.0,
                "is_active": False,
                "modules": {},
            },
        )
        multiplier = _optional(row, "year_multiplier")
        if multiplier is not None:
            year["multiplier"] = float(multiplier)
        if _flag(row, "is_active"):
            year["is_active"] = True

        module = year["modules"].setdefault(
            module_key,
            {"credits": int(float(credits)), "code": str(_optional(row, "code") or ""), "assessments": []},
        )

        weighting = _optional(row, "weighting")
        if weighting is None:
            continue
        score = _optional(row, "score")
        module["assessments"].append(
            Assessment(
                weighting=float(weighting),
                score=float(score) if score is not None else None,
                is_completed=_flag(row, "is_completed") or score is not None,
                due_date=_parse_due_date(row),
                name=str(_optional(row, "assessment") or ""),
            )
        )

    academic_years: List[AcademicYear] = []
    for year_key, year in years.items():
        modules = tuple(
            Module(
                credits=m["credits"],
                assessments=tuple(m["assessments"]),
                grading_system=grading_system,
                name=module_key,
                code=m["code"],
            )
            for module_key, m in year["modules"].items()
        )
        academic_years.append(
            AcademicYear(
                modules=modules,
                weighting_multiplier=year["multiplier"],
                is_active=year["is_active"],
                name=year_key,
            )
        )

    return Student(academic_years=tuple(academic_years), grading_system=grading_system, name=name)


# ------------------------
# Records -> frame
# ------------------------
def module_summary_frame(student: Student) -> pd.DataFrame:
    """One row per module with its derived figures, for tables and charts."""
    rows = []
    for year in student.academic_years:
        for m in year.modules:
            grade = current_grade(m)
            rows.append(
                {
                    "Year": year.name,
                    "Module": m.name,
                    "Credits": m.credits,
                    "Current grade": grade,
                    "Completion": completion_percentage(m),
                    "Projected grade": projected_final_grade(m),
                    "Classification": classify_percentage(grade, m.grading_system),
                }
            )
    columns = ["Year", "Module", "Credits", "Current grade", "Completion", "Projected grade", "Classification"]
    return pd.DataFrame(rows, columns=columns)
