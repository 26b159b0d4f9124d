from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.models.quiz import StudyMcq


# ──────────────────────────────────────────────
# Study-material summarizer
# ──────────────────────────────────────────────

class SummarizeStudyMaterialInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    material: str = Field(min_length=20, max_length=30000)
    topic: str = Field(min_length=2, max_length=150)
    exam_type: Optional[str] = Field(default=None, alias="examType")
    user_level: Optional[str] = Field(default=None, alias="userLevel")
    user_name: Optional[str] = Field(default=None, alias="userName")


class SummarizeStudyMaterialOutput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    summary: str = Field(min_length=1)
    key_concepts: list[str] = Field(min_length=3, max_length=7, alias="keyConcepts")
    multiple_choice_questions: list[StudyMcq] = Field(
        min_length=1, max_length=5, alias="multipleChoiceQuestions"
    )


# ──────────────────────────────────────────────
# Study-topic suggestion (weekly syllabus)
# ──────────────────────────────────────────────

class SuggestStudyTopicsInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    exam_type: str = Field(min_length=2, max_length=60, alias="examType")
    subjects: list[str] = Field(min_length=1, max_length=10)
    time_available_per_day: float = Field(gt=0, le=24, alias="timeAvailablePerDay")
    target_date: date = Field(alias="targetDate")
    # Pinned "today" for the week arithmetic in the prompt; None means the server date.
    current_date: Optional[date] = Field(default=None, alias="currentDate")

    @field_validator("subjects")
    @classmethod
    def _non_blank_subjects(cls, v: list[str]) -> list[str]:
        cleaned = [s.strip() for s in v if s and s.strip()]
        if not cleaned:
            raise ValueError("At least one non-empty subject is required")
        return cleaned


class SubjectSyllabus(BaseModel):
    subject: str = Field(min_length=1)
    schedule: dict[str, list[str]] = Field(min_length=1)
    summary: Optional[str] = None


class SuggestStudyTopicsOutput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    generated_syllabus: list[SubjectSyllabus] = Field(min_length=1, alias="generatedSyllabus")
    overall_feedback: Optional[str] = Field(default=None, alias="overallFeedback")


# ──────────────────────────────────────────────
# Productivity analysis
# ──────────────────────────────────────────────

class AnalyzeProductivityDataInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    study_hours: float = Field(ge=0, le=168, alias="studyHours")
    topics_completed: int = Field(ge=0, alias="topicsCompleted")
    subject_wise_time_distribution: dict[str, float] = Field(
        default_factory=dict, alias="subjectWiseTimeDistribution"
    )
    streak_length: int = Field(ge=0, alias="streakLength")
    weekly_goals_completed: int = Field(ge=0, alias="weeklyGoalsCompleted")

    @field_validator("subject_wise_time_distribution")
    @classmethod
    def _non_negative_hours(cls, v: dict[str, float]) -> dict[str, float]:
        for subject, hours in v.items():
            if hours < 0:
                raise ValueError(f"Hours for '{subject}' must be >= 0")
        return v


class AnalyzeProductivityDataOutput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    insights: list[str]
    overall_assessment: str = Field(min_length=1, alias="overallAssessment")
    recommendations: list[str]


# ──────────────────────────────────────────────
# Academic doubt solver
# ──────────────────────────────────────────────

class SolveAcademicDoubtInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_query: str = Field(min_length=5, max_length=500, alias="userQuery")
    user_name: Optional[str] = Field(default=None, alias="userName")
    exam_type: Optional[str] = Field(default=None, alias="examType")
    subject_context: Optional[str] = Field(default=None, alias="subjectContext")
    preparation_level: Optional[str] = Field(default=None, alias="preparationLevel")


class SolveAcademicDoubtOutput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    explanation: str = Field(min_length=1)
    related_topics: list[str] = Field(default_factory=list, alias="relatedTopics")
    confidence_score: Optional[float] = Field(default=None, ge=0, le=1, alias="confidenceScore")
