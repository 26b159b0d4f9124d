"""
Study streak and reward-unlock calculator.

A reward unlocks when either the study streak or the interaction streak
(consecutive calendar days the user opened the platform, ending today)
reaches UNLOCK_TARGET. The calculation is pure: "today" is always passed in.
Only the two store-facing wrappers at the bottom touch I/O, and both of them
swallow store failures so a streak widget can never break a page.
"""
import logging
from datetime import date, datetime, timedelta
from typing import Iterable, Optional, Union

from app.models.activity import UnlockStatus
from app.services.activity_store import ActivityStore

logger = logging.getLogger("studytrack.activity")

UNLOCK_TARGET = 7
MAX_INTERACTION_DATES = 14

DateLike = Union[date, str]


def _to_date(value: DateLike) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip()[:10])
    except ValueError:
        return None


def add_interaction_date(dates: Iterable[str], today: DateLike,
                         cap: int = MAX_INTERACTION_DATES) -> list[str]:
    """Return dates with today added, deduplicated, newest first, capped."""
    day = _to_date(today)
    if day is None:
        raise ValueError(f"Invalid date: {today!r}")
    parsed = {d for d in (_to_date(x) for x in dates) if d is not None}
    parsed.add(day)
    return [d.isoformat() for d in sorted(parsed, reverse=True)[:cap]]


def count_interaction_streak(dates: Iterable[str], today: DateLike,
                             target: int = UNLOCK_TARGET) -> int:
    """Consecutive days ending today present in dates, capped at target.

    Zero when today itself is missing, whatever the older dates say.
    """
    day = _to_date(today)
    present = {d for d in (_to_date(x) for x in dates) if d is not None}
    count = 0
    while day in present and count < target:
        count += 1
        day -= timedelta(days=1)
    return count


def compute_unlock_status(current_study_streak: int, interaction_dates: Iterable[str],
                          today: DateLike, target: int = UNLOCK_TARGET) -> UnlockStatus:
    study = max(0, int(current_study_streak or 0))
    interaction = count_interaction_streak(interaction_dates, today, target)

    study_met = study >= target
    interaction_met = interaction >= target

    if study_met and interaction_met:
        reason = "both"
        message = f"You've unlocked it through both study and interaction streaks! ({target}/{target})"
    elif study_met:
        reason = "study_streak"
        message = f"Unlocked via your awesome {study}-day study streak! ({target}/{target})"
    elif interaction_met:
        reason = "interaction_streak"
        message = f"Unlocked via your consistent {interaction}-day platform activity! ({target}/{target})"
    else:
        progress = min(target, max(study, interaction))
        if study > interaction:
            message = f"Current study streak: {study}/{target} days. Keep it up!"
        elif interaction > 0:
            message = f"Daily platform interaction: {interaction}/{target} consecutive days."
        else:
            message = f"Start a {target}-day study or interaction streak to unlock! (0/{target})"
        return UnlockStatus(
            unlocked=False,
            display_progress=progress,
            progress_target=target,
            message=message,
            unlock_reason="none",
            study_streak_count=study,
            interaction_streak_count=interaction,
        )

    return UnlockStatus(
        unlocked=True,
        display_progress=target,
        progress_target=target,
        message=message,
        unlock_reason=reason,
        study_streak_count=study,
        interaction_streak_count=interaction,
    )


def _locked(message: str, target: int = UNLOCK_TARGET) -> UnlockStatus:
    return UnlockStatus(
        unlocked=False,
        display_progress=0,
        progress_target=target,
        message=message,
        unlock_reason="none",
    )


# ──────────────────────────────────────────────
# Store-facing wrappers
# ──────────────────────────────────────────────

def get_unlock_status(user_id: str, store: ActivityStore,
                      today: Optional[DateLike] = None) -> UnlockStatus:
    if not user_id:
        return _locked("Log in to track your progress!")
    today = today or date.today()
    try:
        dates = store.get_interaction_dates(user_id)
        streak = store.get_study_streak(user_id)
    except Exception as e:
        logger.error("[activity.get_unlock_status] %s: %s", user_id, e, exc_info=True)
        return _locked("Could not retrieve progress. Please try again.")
    return compute_unlock_status(streak.current_streak if streak else 0, dates, today)


def record_platform_interaction(user_id: str, store: ActivityStore,
                                today: Optional[DateLike] = None) -> Optional[list[str]]:
    """Record today's visit. Returns the stored dates, or None when the store failed."""
    if not user_id:
        return None
    today = today or date.today()
    try:
        current = store.get_interaction_dates(user_id)
        updated = add_interaction_date(current, today)
        if updated != current:
            store.set_interaction_dates(user_id, updated)
        return updated
    except Exception as e:
        logger.error("[activity.record_platform_interaction] %s: %s", user_id, e, exc_info=True)
        return None
