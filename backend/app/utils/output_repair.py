"""output_repair.py: deterministic repair of raw model output.

Runs after the model response is decoded and before it is validated against
the flow's output schema. Every routine is pure: it takes the decoded JSON
(plus the validated flow input where the tier matters) and returns the
repaired object together with a human-readable log of every change.

Repairs are applied per item. An item that cannot be repaired is dropped and
logged; the caller decides whether an empty result is fatal.

Field conventions understood (camelCase, as the prompts request):
  MCQ text        → item["questionText"] | item["question"]
  MCQ options     → item["options"]            (list[str])
  MCQ answer      → item["correctAnswerIndex"] (0-based int)
  challenge word  → item["word"]
  challenge tier  → taken from the flow input (gameMode), never from the model
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from app.models.wordquest import BASIC_MAX_OPTIONS, BASIC_MIN_OPTIONS

logger = logging.getLogger("studytrack.output_repair")

PLACEHOLDER_PREFIX = "Option"
_VALID_CLUE_TYPES = ("definition", "fill-in-the-blank")


@dataclass
class RepairResult:
    """Repaired payload plus the log of corrections applied to it."""
    data: Any = None
    corrections: list = field(default_factory=list)


# ---------------------------------------------------------------------------
# Small coercion helpers
# ---------------------------------------------------------------------------

def first_token(value: Any) -> str:
    """Return the first whitespace-delimited token of value ("" if none)."""
    parts = str(value or "").split()
    return parts[0] if parts else ""


def coerce_str_list(value: Any) -> list[str]:
    """Coerce a model-provided value to a list of non-empty strings."""
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        return []
    out = []
    for v in value:
        if v is None:
            continue
        s = str(v).strip()
        if s:
            out.append(s)
    return out


def _coerce_index(value: Any) -> Optional[int]:
    """Best-effort int conversion for an answer index; None when impossible."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value.strip())
    return None


def _dedupe(items: list[str]) -> list[str]:
    seen: set = set()
    out = []
    for it in items:
        if it not in seen:
            seen.add(it)
            out.append(it)
    return out


# ---------------------------------------------------------------------------
# Shared placeholder routine
# ---------------------------------------------------------------------------

def pad_options(options: list[str], minimum: int, reserved: tuple | list = ()) -> list[str]:
    """Pad options with "Option <n>" placeholders until minimum is met.

    n is the 1-based slot the placeholder fills. A name already present (or
    listed in reserved) is skipped by bumping n, so the result never holds
    duplicates. Existing options keep their order.
    """
    padded = _dedupe(list(options))
    taken = set(padded) | set(reserved)
    n = len(padded) + 1
    while len(padded) < minimum:
        candidate = f"{PLACEHOLDER_PREFIX} {n}"
        n += 1
        if candidate in taken:
            continue
        padded.append(candidate)
        taken.add(candidate)
    return padded


# ---------------------------------------------------------------------------
# MCQ repair (quiz, summarizer, YouTube)
# ---------------------------------------------------------------------------

def repair_mcq(item: Any, min_options: int, max_options: int, label: str = "Q?") -> RepairResult:
    """Repair one MCQ dict. result.data is None when the item must be dropped."""
    result = RepairResult()
    if not isinstance(item, dict):
        result.corrections.append(f"{label}: dropped (not an object)")
        return result

    text = str(item.get("questionText") or item.get("question") or "").strip()
    if not text:
        result.corrections.append(f"{label}: dropped (empty question text)")
        return result

    raw_options = item.get("options")
    if not isinstance(raw_options, list):
        raw_options = []
    # (raw position, cleaned text) so the answer index survives dropped blanks
    kept = [(i, s) for i, s in enumerate(raw_options) if coerce_str_list([s])]
    options = [coerce_str_list([s])[0] for _, s in kept]
    if not options:
        result.corrections.append(f"{label}: dropped (no options)")
        return result
    if len(options) < len(raw_options):
        result.corrections.append(
            f"{label}: {len(raw_options) - len(options)} blank option(s) removed"
        )

    raw_idx = _coerce_index(item.get("correctAnswerIndex"))
    positions = [i for i, _ in kept]
    if raw_idx is None or raw_idx < 0 or raw_idx >= len(raw_options):
        result.corrections.append(
            f"{label}: correctAnswerIndex {item.get('correctAnswerIndex')!r} out of range "
            f"for {len(raw_options)} options; clamped to 0"
        )
        idx = 0
    elif raw_idx not in positions:
        result.corrections.append(
            f"{label}: correct option at index {raw_idx} was blank; clamped to 0"
        )
        idx = 0
    else:
        idx = positions.index(raw_idx)

    deduped = _dedupe(options)
    if len(deduped) < len(options):
        correct = options[idx]
        options, idx = deduped, deduped.index(correct)
        result.corrections.append(f"{label}: duplicate options removed")

    if len(options) > max_options:
        if idx >= max_options:
            correct = options[idx]
            options = options[:max_options - 1] + [correct]
            idx = max_options - 1
        else:
            options = options[:max_options]
        result.corrections.append(f"{label}: options trimmed to {max_options}")

    if len(options) < min_options:
        before = len(options)
        options = pad_options(options, min_options)
        result.corrections.append(
            f"{label}: options padded from {before} to {len(options)}"
        )

    result.data = {
        "questionText": text,
        "options": options,
        "correctAnswerIndex": idx,
        "explanation": str(item.get("explanation") or "").strip(),
    }
    return result


def repair_mcq_list(
    items: Any,
    min_options: int,
    max_options: int,
    max_items: Optional[int] = None,
) -> RepairResult:
    """Repair a list of MCQs item by item; irreparable items are dropped."""
    result = RepairResult(data=[])
    if not isinstance(items, list):
        result.corrections.append("questions: not a list; treated as empty")
        return result
    for i, item in enumerate(items, 1):
        fixed = repair_mcq(item, min_options, max_options, label=f"Q{i}")
        result.corrections.extend(fixed.corrections)
        if fixed.data is not None:
            result.data.append(fixed.data)
    if max_items is not None and len(result.data) > max_items:
        result.corrections.append(f"questions: trimmed from {len(result.data)} to {max_items}")
        result.data = result.data[:max_items]
    return result


# ---------------------------------------------------------------------------
# Vocabulary challenge repair
# ---------------------------------------------------------------------------

def repair_basic_options(word: str, options: list[str], label: str = "challenge") -> RepairResult:
    """Make a basic-tier option list contain word and hold 3–4 unique entries."""
    result = RepairResult()
    opts = _dedupe(options)

    # Same word with different casing counts as present.
    for i, opt in enumerate(opts):
        if opt != word and opt.lower() == word.lower():
            opts[i] = word
            result.corrections.append(f"{label}: option '{opt}' normalised to '{word}'")
    opts = _dedupe(opts)

    if word not in opts:
        if opts:
            removed = opts.pop()
            result.corrections.append(
                f"{label}: options missed '{word}'; replaced last option '{removed}'"
            )
        else:
            result.corrections.append(f"{label}: options missed '{word}'; added")
        opts.append(word)

    if len(opts) < BASIC_MIN_OPTIONS:
        before = len(opts)
        opts = pad_options(opts, BASIC_MIN_OPTIONS, reserved=(word,))
        result.corrections.append(f"{label}: options padded from {before} to {len(opts)}")

    if len(opts) > BASIC_MAX_OPTIONS:
        others = [o for o in opts if o != word][:BASIC_MAX_OPTIONS - 1]
        pos = min(opts.index(word), len(others))
        opts = others[:pos] + [word] + others[pos:]
        result.corrections.append(f"{label}: options trimmed to {BASIC_MAX_OPTIONS}")

    result.data = opts
    return result


def repair_vocabulary_challenge(item: Any, game_mode: str, label: str = "challenge") -> RepairResult:
    """Repair one challenge dict for the given tier. data is None when dropped."""
    result = RepairResult()
    if not isinstance(item, dict):
        result.corrections.append(f"{label}: dropped (not an object)")
        return result

    raw_word = str(item.get("word") or "").strip()
    word = first_token(raw_word)
    if not word:
        result.corrections.append(f"{label}: dropped (empty word)")
        return result
    if word != raw_word:
        result.corrections.append(f"{label}: multi-word '{raw_word}' truncated to '{word}'")

    clue = str(item.get("clue") or "").strip()
    if not clue:
        result.corrections.append(f"{label}: dropped (empty clue for '{word}')")
        return result

    clue_type = item.get("clueType")
    if clue_type not in _VALID_CLUE_TYPES:
        result.corrections.append(f"{label}: clueType {clue_type!r} replaced with 'definition'")
        clue_type = "definition"

    challenge = {"word": word, "clue": clue, "clueType": clue_type}

    if game_mode == "basic":
        raw_options = item.get("options")
        options = [first_token(o) for o in coerce_str_list(raw_options)]
        options = [o for o in options if o]
        fixed = repair_basic_options(word, options, label=label)
        result.corrections.extend(fixed.corrections)
        challenge["options"] = fixed.data
        if item.get("hint"):
            result.corrections.append(f"{label}: hint removed for basic mode")
    else:
        if item.get("options"):
            result.corrections.append(f"{label}: options removed for {game_mode} mode")
        hint = str(item.get("hint") or "").strip()
        if not hint:
            hint = f"Starts with {word[0].upper()}"
            result.corrections.append(f"{label}: missing hint synthesised ('{hint}')")
        challenge["hint"] = hint

    result.data = challenge
    return result


def log_corrections(flow_name: str, corrections: list[str]) -> None:
    for msg in corrections:
        logger.warning("[%s] repair: %s", flow_name, msg)
