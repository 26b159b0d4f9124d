import logging
import os
from typing import Optional

from app.models.activity import StudyStreakState

logger = logging.getLogger("studytrack.activity_store")


class ActivityStore:
    def get_interaction_dates(self, user_id: str) -> list[str]:
        raise NotImplementedError

    def set_interaction_dates(self, user_id: str, dates: list[str]) -> None:
        raise NotImplementedError

    def get_study_streak(self, user_id: str) -> Optional[StudyStreakState]:
        raise NotImplementedError

    def upsert_study_streak(self, state: StudyStreakState) -> StudyStreakState:
        raise NotImplementedError


class InMemoryActivityStore(ActivityStore):
    def __init__(self):
        self._dates: dict[str, list[str]] = {}
        self._streaks: dict[str, StudyStreakState] = {}

    def get_interaction_dates(self, user_id):
        return list(self._dates.get(user_id, []))

    def set_interaction_dates(self, user_id, dates):
        self._dates[user_id] = list(dates)

    def get_study_streak(self, user_id):
        return self._streaks.get(user_id)

    def upsert_study_streak(self, state):
        self._streaks[state.user_id] = state
        return state


class SupabaseActivityStore(ActivityStore):
    def __init__(self, supabase_client):
        self.sb = supabase_client

    def get_interaction_dates(self, user_id):
        r = (
            self.sb.table("user_activity")
            .select("last_interaction_dates")
            .eq("user_id", user_id)
            .maybe_single()
            .execute()
        )
        data = getattr(r, "data", None)
        if not data:
            return []
        return [str(d) for d in (data.get("last_interaction_dates") or [])]

    def set_interaction_dates(self, user_id, dates):
        (
            self.sb.table("user_activity")
            .upsert({"user_id": user_id, "last_interaction_dates": list(dates)}, on_conflict="user_id")
            .execute()
        )

    def get_study_streak(self, user_id):
        r = (
            self.sb.table("study_streaks")
            .select("*")
            .eq("user_id", user_id)
            .maybe_single()
            .execute()
        )
        data = getattr(r, "data", None)
        if not data:
            return None
        return StudyStreakState(
            user_id=data["user_id"],
            current_streak=int(data.get("current_streak") or 0),
            longest_streak=int(data.get("longest_streak") or 0),
            last_check_in_date=data.get("last_check_in_date"),
        )

    def upsert_study_streak(self, state):
        (
            self.sb.table("study_streaks")
            .upsert(state.to_dict(), on_conflict="user_id")
            .execute()
        )
        return state


ACTIVITY_STORE = InMemoryActivityStore()


def get_activity_store() -> ActivityStore:
    use_db = os.getenv("STUDYTRACK_ACTIVITY_STORE", "memory").lower()
    if use_db != "supabase":
        return ACTIVITY_STORE

    try:
        from app.core.deps import get_supabase_client
        return SupabaseActivityStore(get_supabase_client())
    except Exception as e:
        logger.error("Supabase activity store unavailable, using memory: %s", e)
        return ACTIVITY_STORE
