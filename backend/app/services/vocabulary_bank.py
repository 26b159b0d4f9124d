"""
Curated WordQuest vocabulary bank.

Builds a challenge session without calling the model, from
app/data/vocabulary_bank.json. Sessions pass the same VocabularyChallenge
validation as model-generated ones.
"""
import json
import logging
import random
import re
from pathlib import Path
from typing import Optional

from app.core.exceptions import GenerationIrreparable
from app.models.wordquest import (
    BASIC_MAX_OPTIONS,
    BASIC_MIN_OPTIONS,
    VocabularyChallenge,
    VocabularyItem,
    WordQuestSessionOutput,
)
from app.utils.output_repair import pad_options

logger = logging.getLogger("studytrack.vocabulary_bank")

BANK_FLOW_NAME = "wordquest_bank_session"
BLANK = "_______"

_BANK_CACHE: Optional[list[VocabularyItem]] = None


def load_vocabulary_bank() -> list[VocabularyItem]:
    """Load vocabulary_bank.json once and cache it."""
    global _BANK_CACHE
    if _BANK_CACHE is not None:
        return _BANK_CACHE

    path = Path(__file__).parent.parent / "data" / "vocabulary_bank.json"
    with open(path, encoding="utf-8") as f:
        _BANK_CACHE = [VocabularyItem.model_validate(item) for item in json.load(f)]
    logger.debug("[vocabulary_bank] Loaded %d words from %s", len(_BANK_CACHE), path)
    return _BANK_CACHE


def _basic_options(item: VocabularyItem, bank: list[VocabularyItem], rng: random.Random) -> list[str]:
    options = [d for d in item.distractors if d and d != item.word]
    options.append(item.word)

    others = [w.word for w in bank if w.word != item.word and w.word not in options]
    rng.shuffle(others)
    while len(options) < BASIC_MIN_OPTIONS and others:
        options.append(others.pop())

    if len(options) > BASIC_MAX_OPTIONS:
        options = [o for o in options if o != item.word][:BASIC_MAX_OPTIONS - 1] + [item.word]
    options = pad_options(options, BASIC_MIN_OPTIONS, reserved=(item.word,))
    rng.shuffle(options)
    return options


def _challenge_from_item(item: VocabularyItem, game_mode: str, bank: list[VocabularyItem],
                         rng: random.Random) -> VocabularyChallenge:
    data = {"word": item.word, "clue": item.definition, "clueType": "definition"}
    if game_mode == "basic":
        data["options"] = _basic_options(item, bank, rng)
    else:
        data["hint"] = item.hint or f"Hint: Related to {item.category or 'general knowledge'}."
        if item.example_sentence and rng.random() < 0.5:
            blanked, n = re.subn(re.escape(item.word), BLANK, item.example_sentence,
                                 count=1, flags=re.IGNORECASE)
            if n:
                data["clue"] = blanked
                data["clueType"] = "fill-in-the-blank"
    return VocabularyChallenge.model_validate(data)


def build_session_from_bank(game_mode: str, num_challenges: int = 3,
                            previous_words: Optional[list[str]] = None,
                            rng: Optional[random.Random] = None,
                            bank: Optional[list[VocabularyItem]] = None) -> WordQuestSessionOutput:
    rng = rng or random.Random()
    bank = bank if bank is not None else load_vocabulary_bank()
    used = {w.lower() for w in (previous_words or [])}

    tier = [item for item in bank if item.difficulty == game_mode]
    candidates = [item for item in tier if item.word.lower() not in used]
    if not candidates:
        # Every word of this tier was already played; allow repeats.
        candidates = tier
    if not candidates:
        raise GenerationIrreparable(BANK_FLOW_NAME, f"no vocabulary for game mode '{game_mode}'")

    candidates = list(candidates)
    rng.shuffle(candidates)
    challenges = [
        _challenge_from_item(item, game_mode, bank, rng)
        for item in candidates[:max(1, num_challenges)]
    ]
    logger.info("[vocabulary_bank] %s session: %s", game_mode, [c.word for c in challenges])
    return WordQuestSessionOutput(challenges=challenges)
