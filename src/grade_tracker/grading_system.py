from enum import Enum


class GradingSystem(Enum):
    """Which convention a student's record is reported and classified in."""

    PERCENTAGE = "UK System"
    FOUR_POINT = "US System"

    @property
    def display_name(self) -> str:
        return self.value


class AssessmentType(Enum):
    EXAM = "Exam"
    COURSEWORK = "Coursework"
    ESSAY = "Essay"
    PRESENTATION = "Presentation"
    LAB_WORK = "Lab Work"
    PROJECT = "Project"
    PARTICIPATION = "Participation"
    QUIZ = "Quiz"
    DISSERTATION = "Dissertation"
