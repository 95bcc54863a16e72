"""
Read-only snapshots of a student's record.

The host application owns and edits these; every calculation in the package
takes them as input and never writes back.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

from grade_tracker.grading_system import AssessmentType, GradingSystem


@dataclass(frozen=True)
class Assessment:
    """
    weighting: percentage of the owning module (0-100)
    score:     percentage achieved, None until graded
    """

    weighting: float
    score: Optional[float] = None
    is_completed: bool = False
    due_date: Optional[datetime] = None
    name: str = ""
    kind: AssessmentType = AssessmentType.COURSEWORK

    @property
    def is_graded(self) -> bool:
        return self.score is not None


@dataclass(frozen=True)
class Module:
    credits: int
    assessments: Sequence[Assessment] = ()
    grading_system: GradingSystem = GradingSystem.PERCENTAGE
    name: str = ""
    code: str = ""


@dataclass(frozen=True)
class AcademicYear:
    """
    weighting_multiplier: contribution to the overall average; 0 means the
    year never counts (foundation or placement years).
    """

    modules: Sequence[Module] = ()
    weighting_multiplier: float = 1.0
    is_active: bool = False
    name: str = ""
    level: Optional[int] = None
    start_date: Optional[datetime] = None


@dataclass(frozen=True)
class Student:
    academic_years: Sequence[AcademicYear] = ()
    grading_system: GradingSystem = GradingSystem.PERCENTAGE
    name: str = ""
