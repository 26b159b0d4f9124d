from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from app.core.exceptions import GenerationIrreparable
from app.models.wordquest import GameMode
from app.services.telemetry import instrument
from app.services.vocabulary_bank import build_session_from_bank

router = APIRouter(prefix="/api/wordquest", tags=["wordquest"])


@router.get("/bank-session")
@instrument(route="/api/wordquest/bank-session", version="v1")
def bank_session(
    game_mode: GameMode = Query(alias="gameMode"),
    num_challenges: int = Query(default=3, ge=1, le=10, alias="numChallenges"),
    previous_words: Optional[list[str]] = Query(default=None, alias="previousWords"),
):
    """WordQuest session from the curated vocabulary bank (no model call)."""
    try:
        session = build_session_from_bank(game_mode, num_challenges, previous_words)
    except GenerationIrreparable as e:
        raise HTTPException(status_code=404, detail=str(e))
    return session.model_dump(by_alias=True, exclude_none=True)
