"""
Due-date arithmetic for assessments. `now` is always supplied by the caller
as a timezone-aware UTC datetime.
"""
from datetime import datetime
from typing import List, Optional, Tuple

from grade_tracker.models import Assessment, Module, Student

SECONDS_PER_DAY = 86400


def days_until_due(assessment: Assessment, now: datetime) -> Optional[int]:
    """Whole days until the due date, truncated toward zero; negative once past."""
    if assessment.due_date is None:
        return None
    return int((assessment.due_date - now).total_seconds() / SECONDS_PER_DAY)


def is_outstanding(assessment: Assessment) -> bool:
    return not assessment.is_completed and assessment.score is None


def is_overdue(assessment: Assessment, now: datetime) -> bool:
    if assessment.due_date is None:
        return False
    return is_outstanding(assessment) and now > assessment.due_date


def relative_due_label(assessment: Assessment, now: datetime) -> Optional[str]:
    days = days_until_due(assessment, now)
    if days is None:
        return None
    if days == 0:
        return "Today"
    if days == 1:
        return "Tomorrow"
    if days > 0:
        return f"In {days} days"
    return f"{-days} day{'' if days == -1 else 's'} ago"


def upcoming_assessments(
    student: Student,
    limit: Optional[int] = None,
) -> List[Tuple[Module, Assessment]]:
    """Outstanding assessments with a due date, soonest first."""
    pending = [
        (m, a)
        for year in student.academic_years
        for m in year.modules
        for a in m.assessments
        if a.due_date is not None and is_outstanding(a)
    ]
    pending.sort(key=lambda pair: pair[1].due_date)
    if limit is not None:
        return pending[:limit]
    return pending
