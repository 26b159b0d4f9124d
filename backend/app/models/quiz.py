from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

Difficulty = Literal["basic", "intermediate", "advanced"]
ExamType = Literal["neet", "jee", "upsc_prelims", "ssc_bank", "cat", "general"]


class McqQuestion(BaseModel):
    """One multiple-choice question. Option bounds are narrowed by subclasses."""

    model_config = ConfigDict(populate_by_name=True)

    question_text: str = Field(
        min_length=1,
        alias="questionText",
        validation_alias=AliasChoices("questionText", "question", "question_text"),
    )
    options: list[str] = Field(min_length=2)
    correct_answer_index: int = Field(ge=0, alias="correctAnswerIndex")
    explanation: str = ""

    @model_validator(mode="after")
    def _index_within_options(self):
        if self.correct_answer_index >= len(self.options):
            raise ValueError(
                f"correctAnswerIndex {self.correct_answer_index} out of range "
                f"for {len(self.options)} options"
            )
        return self


class QuizQuestion(McqQuestion):
    options: list[str] = Field(min_length=4, max_length=5)


class StudyMcq(McqQuestion):
    options: list[str] = Field(min_length=3, max_length=5)


class GenerateQuizInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    topic: str = Field(min_length=3, max_length=150)
    difficulty: Difficulty
    exam_type: ExamType = Field(alias="examType")
    num_questions: int = Field(ge=3, le=10, alias="numQuestions")


class GenerateQuizOutput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    quiz_title: str = Field(min_length=1, alias="quizTitle")
    questions: list[QuizQuestion] = Field(min_length=1)
