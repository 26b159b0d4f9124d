from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SubjectDetail(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    subject: str
    preparation_level: Optional[str] = Field(default=None, alias="preparationLevel")
    preferred_learning_methods: list[str] = Field(default_factory=list, alias="preferredLearningMethods")


class PersonalizedRecommendationsInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    target_exams: list[str] = Field(default_factory=list, alias="targetExams")
    other_exam_name: Optional[str] = Field(default=None, alias="otherExamName")
    exam_attempt_year: Optional[str] = Field(default=None, alias="examAttemptYear")
    language_medium: Optional[str] = Field(default=None, alias="languageMedium")
    daily_study_hours: Optional[str] = Field(default=None, alias="dailyStudyHours")
    study_mode: Optional[str] = Field(default=None, alias="studyMode")
    exam_phase: Optional[str] = Field(default=None, alias="examPhase")
    previous_attempts: Optional[str] = Field(default=None, alias="previousAttempts")
    preferred_study_time: list[str] = Field(default_factory=list, alias="preferredStudyTime")
    weak_subjects: list[str] = Field(default_factory=list, alias="weakSubjects")
    strong_subjects: list[str] = Field(default_factory=list, alias="strongSubjects")
    subject_details: list[SubjectDetail] = Field(default_factory=list, alias="subjectDetails")
    preferred_learning_styles: list[str] = Field(default_factory=list, alias="preferredLearningStyles")
    motivation_type: Optional[str] = Field(default=None, alias="motivationType")
    age: Optional[int] = Field(default=None, ge=5, le=100)
    location: Optional[str] = None
    distraction_struggles: Optional[str] = Field(default=None, alias="distractionStruggles")


class Goal(BaseModel):
    goal: str = Field(min_length=1)
    timeline: Optional[str] = None


class PersonalizedTips(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    time_management: list[str] = Field(min_length=1, max_length=3, alias="timeManagement")
    subject_specific_study: list[str] = Field(min_length=1, max_length=3, alias="subjectSpecificStudy")
    motivational_nudges: list[str] = Field(min_length=1, max_length=3, alias="motivationalNudges")
    focus_and_distraction: list[str] = Field(min_length=1, max_length=3, alias="focusAndDistraction")


class PersonalizedRecommendationsOutput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    fallback: bool = False
    suggested_weekly_timetable_focus: list[str] = Field(
        min_length=3, max_length=7, alias="suggestedWeeklyTimetableFocus"
    )
    suggested_monthly_goals: list[str] = Field(min_length=2, max_length=5, alias="suggestedMonthlyGoals")
    study_cycle_recommendation: str = Field(min_length=1, alias="studyCycleRecommendation")
    short_term_goals: list[Goal] = Field(min_length=2, max_length=4, alias="shortTermGoals")
    long_term_goals: list[Goal] = Field(min_length=1, max_length=3, alias="longTermGoals")
    milestone_suggestions: list[str] = Field(min_length=2, max_length=4, alias="milestoneSuggestions")
    personalized_tips: PersonalizedTips = Field(alias="personalizedTips")
    overall_strategy_statement: str = Field(min_length=1, alias="overallStrategyStatement")
