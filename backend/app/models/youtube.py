import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.models.quiz import QuizQuestion

_YOUTUBE_URL_RE = re.compile(r"^(https?://)?(www\.|m\.)?(youtube\.com|youtu\.?be)/.+", re.IGNORECASE)


class ProcessYouTubeVideoInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    youtube_url: Optional[str] = Field(default=None, alias="youtubeUrl")
    video_transcript: str = Field(min_length=100, max_length=30000, alias="videoTranscript")
    custom_title: Optional[str] = Field(default=None, alias="customTitle")
    user_name: Optional[str] = Field(default=None, alias="userName")
    exam_context: Optional[str] = Field(default=None, alias="examContext")
    language: str = "English"

    @field_validator("youtube_url")
    @classmethod
    def _youtube_url(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        if not _YOUTUBE_URL_RE.match(v.strip()):
            raise ValueError("Please enter a valid YouTube URL.")
        return v.strip()


class ProcessYouTubeVideoOutput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    video_title: str = Field(min_length=1, alias="videoTitle")
    summary: str = Field(min_length=1)
    structured_notes: str = Field(alias="structuredNotes")
    key_concepts: list[str] = Field(min_length=3, max_length=10, alias="keyConcepts")
    multiple_choice_questions: list[QuizQuestion] = Field(
        min_length=1, max_length=5, alias="multipleChoiceQuestions"
    )
