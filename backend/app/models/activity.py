from dataclasses import dataclass, asdict
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

UnlockReason = Literal["study_streak", "interaction_streak", "both", "none"]


@dataclass
class StudyStreakState:
    user_id: str
    current_streak: int = 0
    longest_streak: int = 0
    last_check_in_date: Optional[str] = None   # YYYY-MM-DD

    def to_dict(self):
        return asdict(self)


class UnlockStatus(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    unlocked: bool
    display_progress: int = Field(ge=0, alias="displayProgress")
    progress_target: int = Field(alias="progressTarget")
    message: str
    unlock_reason: UnlockReason = Field(alias="unlockReason")
    study_streak_count: int = Field(default=0, alias="studyStreakCount")
    interaction_streak_count: int = Field(default=0, alias="interactionStreakCount")


class InteractionRecordResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="userId")
    recorded: bool
    last_interaction_dates: list[str] = Field(alias="lastInteractionDates")
