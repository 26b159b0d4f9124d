"""
Tests for the streak & unlock calculator and the activity store.

All tests run fully offline: "today" is always pinned and the Supabase
store is exercised against a MagicMock client.
"""
import sys
import os
from datetime import date, timedelta
from unittest.mock import MagicMock

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from app.models.activity import StudyStreakState
from app.services.activity import (
    add_interaction_date,
    compute_unlock_status,
    count_interaction_streak,
    get_unlock_status,
    record_platform_interaction,
)
from app.services.activity_store import (
    ACTIVITY_STORE,
    InMemoryActivityStore,
    SupabaseActivityStore,
    get_activity_store,
)

TODAY = date(2026, 10, 18)


def _days(*offsets):
    return [(TODAY - timedelta(days=n)).isoformat() for n in offsets]


class _BrokenStore(InMemoryActivityStore):
    def get_interaction_dates(self, user_id):
        raise ConnectionError("storage unavailable")

    def set_interaction_dates(self, user_id, dates):
        raise ConnectionError("storage unavailable")


# ---------------------------------------------------------------------------
# count_interaction_streak
# ---------------------------------------------------------------------------

class TestInteractionStreak:
    def test_today_only(self):
        assert count_interaction_streak(_days(0), TODAY) == 1

    def test_seven_consecutive_days(self):
        assert count_interaction_streak(_days(*range(7)), TODAY) == 7

    def test_capped_at_seven(self):
        assert count_interaction_streak(_days(*range(12)), TODAY) == 7

    def test_missing_today_is_zero(self):
        assert count_interaction_streak(_days(*range(1, 8)), TODAY) == 0

    def test_gap_breaks_streak(self):
        assert count_interaction_streak(_days(0, 1, 3, 4), TODAY) == 2

    def test_order_and_duplicates_ignored(self):
        assert count_interaction_streak(_days(2, 0, 1, 0), TODAY) == 3

    def test_unparseable_dates_ignored(self):
        assert count_interaction_streak(["garbage", *_days(0, 1)], TODAY) == 2

    def test_removing_today_drops_to_zero(self):
        dates = _days(*range(5))
        assert count_interaction_streak(dates, TODAY) == 5
        assert count_interaction_streak(dates[1:], TODAY) == 0

    def test_accepts_string_today(self):
        assert count_interaction_streak(_days(0, 1), TODAY.isoformat()) == 2


# ---------------------------------------------------------------------------
# compute_unlock_status
# ---------------------------------------------------------------------------

class TestUnlockStatus:
    def test_study_streak_unlocks(self):
        status = compute_unlock_status(7, _days(0), TODAY)
        assert status.unlocked is True
        assert status.display_progress == 7
        assert status.unlock_reason == "study_streak"
        assert status.message == "Unlocked via your awesome 7-day study streak! (7/7)"

    def test_interaction_streak_unlocks(self):
        status = compute_unlock_status(3, _days(*range(7)), TODAY)
        assert status.unlocked is True
        assert status.display_progress == 7
        assert status.unlock_reason == "interaction_streak"
        assert status.message == "Unlocked via your consistent 7-day platform activity! (7/7)"

    def test_both_unlock(self):
        status = compute_unlock_status(10, _days(*range(7)), TODAY)
        assert status.unlock_reason == "both"
        assert status.message == "You've unlocked it through both study and interaction streaks! (7/7)"

    def test_locked_shows_study_progress(self):
        status = compute_unlock_status(4, _days(0, 1), TODAY)
        assert status.unlocked is False
        assert status.display_progress == 4
        assert status.unlock_reason == "none"
        assert status.message == "Current study streak: 4/7 days. Keep it up!"

    def test_locked_shows_interaction_progress(self):
        status = compute_unlock_status(1, _days(0, 1, 2), TODAY)
        assert status.display_progress == 3
        assert status.message == "Daily platform interaction: 3/7 consecutive days."

    def test_tie_shows_interaction_message(self):
        status = compute_unlock_status(2, _days(0, 1), TODAY)
        assert status.display_progress == 2
        assert status.message.startswith("Daily platform interaction")

    def test_nothing_yet(self):
        status = compute_unlock_status(0, [], TODAY)
        assert status.display_progress == 0
        assert status.message == "Start a 7-day study or interaction streak to unlock! (0/7)"

    def test_long_study_streak_counts_kept(self):
        status = compute_unlock_status(30, [], TODAY)
        assert status.display_progress == 7
        assert status.study_streak_count == 30

    def test_serialises_camel_case(self):
        payload = compute_unlock_status(7, [], TODAY).model_dump(by_alias=True)
        assert payload["displayProgress"] == 7
        assert payload["unlockReason"] == "study_streak"

    @pytest.mark.parametrize("study, interaction_days, expected", [
        (0, 0, "none"),
        (6, 6, "none"),
        (6, 7, "interaction_streak"),
        (7, 6, "study_streak"),
        (7, 7, "both"),
        (25, 10, "both"),
        (25, 0, "study_streak"),
        (0, 10, "interaction_streak"),
    ])
    def test_reason_follows_which_streaks_are_met(self, study, interaction_days, expected):
        status = compute_unlock_status(study, _days(*range(interaction_days)), TODAY)
        study_met = study >= 7
        interaction_met = interaction_days >= 7
        assert status.unlock_reason == expected
        assert (status.unlock_reason == "both") == (study_met and interaction_met)
        assert (status.unlock_reason == "none") == (not study_met and not interaction_met)
        assert status.unlocked is (study_met or interaction_met)


# ---------------------------------------------------------------------------
# add_interaction_date / record_platform_interaction
# ---------------------------------------------------------------------------

class TestRecordInteraction:
    def test_adds_today_newest_first(self):
        assert add_interaction_date(_days(2, 1), TODAY) == _days(0, 1, 2)

    def test_idempotent(self):
        once = add_interaction_date([], TODAY)
        assert add_interaction_date(once, TODAY) == once

    def test_capped_at_fourteen(self):
        out = add_interaction_date(_days(*range(1, 20)), TODAY)
        assert len(out) == 14
        assert out[0] == TODAY.isoformat()

    def test_invalid_today_raises(self):
        with pytest.raises(ValueError):
            add_interaction_date([], "not-a-date")

    def test_record_writes_once_per_day(self):
        store = InMemoryActivityStore()
        store.set_interaction_dates = MagicMock(wraps=store.set_interaction_dates)
        record_platform_interaction("u1", store, today=TODAY)
        record_platform_interaction("u1", store, today=TODAY)
        assert store.set_interaction_dates.call_count == 1
        assert store.get_interaction_dates("u1") == [TODAY.isoformat()]

    def test_record_swallows_store_errors(self):
        assert record_platform_interaction("u1", _BrokenStore(), today=TODAY) is None

    def test_record_requires_user(self):
        assert record_platform_interaction("", InMemoryActivityStore(), today=TODAY) is None


# ---------------------------------------------------------------------------
# get_unlock_status (store-backed)
# ---------------------------------------------------------------------------

class TestGetUnlockStatus:
    def test_reads_both_records(self):
        store = InMemoryActivityStore()
        store.set_interaction_dates("u1", _days(*range(7)))
        store.upsert_study_streak(StudyStreakState(user_id="u1", current_streak=2))
        status = get_unlock_status("u1", store, today=TODAY)
        assert status.unlocked is True
        assert status.study_streak_count == 2

    def test_missing_records_start_locked(self):
        status = get_unlock_status("new-user", InMemoryActivityStore(), today=TODAY)
        assert status.unlocked is False
        assert status.display_progress == 0

    def test_store_failure_fails_closed(self):
        status = get_unlock_status("u1", _BrokenStore(), today=TODAY)
        assert status.unlocked is False
        assert status.display_progress == 0
        assert status.message == "Could not retrieve progress. Please try again."

    def test_empty_user(self):
        status = get_unlock_status("", InMemoryActivityStore(), today=TODAY)
        assert status.message == "Log in to track your progress!"


# ---------------------------------------------------------------------------
# Stores
# ---------------------------------------------------------------------------

class TestActivityStores:
    def test_default_store_is_memory(self, monkeypatch):
        monkeypatch.delenv("STUDYTRACK_ACTIVITY_STORE", raising=False)
        assert get_activity_store() is ACTIVITY_STORE

    def test_supabase_unavailable_falls_back_to_memory(self, monkeypatch):
        monkeypatch.setenv("STUDYTRACK_ACTIVITY_STORE", "supabase")
        monkeypatch.setattr(
            "app.core.deps.get_supabase_client",
            MagicMock(side_effect=RuntimeError("Supabase settings missing")),
        )
        assert get_activity_store() is ACTIVITY_STORE

    def test_supabase_reads_interaction_dates(self):
        sb = MagicMock()
        (sb.table.return_value.select.return_value.eq.return_value
         .maybe_single.return_value.execute.return_value) = MagicMock(
            data={"last_interaction_dates": ["2026-10-18", "2026-10-17"]}
        )
        store = SupabaseActivityStore(sb)
        assert store.get_interaction_dates("u1") == ["2026-10-18", "2026-10-17"]
        sb.table.assert_called_with("user_activity")

    def test_supabase_missing_row_is_empty(self):
        sb = MagicMock()
        (sb.table.return_value.select.return_value.eq.return_value
         .maybe_single.return_value.execute.return_value) = None
        store = SupabaseActivityStore(sb)
        assert store.get_interaction_dates("u1") == []
        assert store.get_study_streak("u1") is None

    def test_supabase_reads_study_streak(self):
        sb = MagicMock()
        (sb.table.return_value.select.return_value.eq.return_value
         .maybe_single.return_value.execute.return_value) = MagicMock(
            data={"user_id": "u1", "current_streak": 5, "longest_streak": 9,
                  "last_check_in_date": "2026-10-18"}
        )
        state = SupabaseActivityStore(sb).get_study_streak("u1")
        assert state.current_streak == 5
        assert state.longest_streak == 9

    def test_supabase_upserts_dates(self):
        sb = MagicMock()
        SupabaseActivityStore(sb).set_interaction_dates("u1", ["2026-10-18"])
        sb.table.return_value.upsert.assert_called_once_with(
            {"user_id": "u1", "last_interaction_dates": ["2026-10-18"]}, on_conflict="user_id"
        )
