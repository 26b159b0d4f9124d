"""
Flow registry: every LLM-backed AI tool StudyTrack exposes.

Each entry pairs a prompt renderer with the repair routine for that flow's
output. Repairs never call the model again; see app/utils/output_repair.py
for the shared per-item routines.
"""
from __future__ import annotations

import math
from datetime import date
from typing import Any

from pydantic import BaseModel, ValidationError

from app.core.exceptions import UnknownFlowError
from app.models.quiz import GenerateQuizInput, GenerateQuizOutput, QuizQuestion
from app.models.recommendations import (
    PersonalizedRecommendationsInput,
    PersonalizedRecommendationsOutput,
)
from app.models.study_tools import (
    AnalyzeProductivityDataInput,
    AnalyzeProductivityDataOutput,
    SolveAcademicDoubtInput,
    SolveAcademicDoubtOutput,
    StudyMcq,
    SubjectSyllabus,
    SuggestStudyTopicsInput,
    SuggestStudyTopicsOutput,
    SummarizeStudyMaterialInput,
    SummarizeStudyMaterialOutput,
)
from app.models.wordquest import (
    GenerateWordQuestChallengeInput,
    GenerateWordQuestSessionInput,
    VocabularyChallenge,
    WordQuestSessionOutput,
)
from app.models.youtube import ProcessYouTubeVideoInput, ProcessYouTubeVideoOutput
from app.prompts.doubt_solver import DOUBT_SOLVER_PROMPT, DOUBT_SOLVER_SYSTEM_PROMPT
from app.prompts.productivity import PRODUCTIVITY_PROMPT, PRODUCTIVITY_SYSTEM_PROMPT
from app.prompts.quiz_generation import QUIZ_GENERATION_PROMPT, QUIZ_GENERATION_SYSTEM_PROMPT
from app.prompts.recommendations import RECOMMENDATIONS_PROMPT, RECOMMENDATIONS_SYSTEM_PROMPT
from app.prompts.study_material import STUDY_MATERIAL_PROMPT, STUDY_MATERIAL_SYSTEM_PROMPT
from app.prompts.study_topics import STUDY_TOPICS_PROMPT, STUDY_TOPICS_SYSTEM_PROMPT
from app.prompts.wordquest import (
    WORDQUEST_CHALLENGE_PROMPT,
    WORDQUEST_SESSION_PROMPT,
    WORDQUEST_SYSTEM_PROMPT,
)
from app.prompts.youtube_processing import YOUTUBE_PROMPT, YOUTUBE_SYSTEM_PROMPT
from app.services.flow_contract import FlowDefinition
from app.utils.output_repair import (
    RepairResult,
    coerce_str_list,
    repair_mcq_list,
    repair_vocabulary_challenge,
)

# Option bounds per MCQ-bearing flow: (min, max)
QUIZ_OPTION_BOUNDS = (4, 5)
STUDY_MCQ_OPTION_BOUNDS = (3, 5)
MAX_STUDY_MCQS = 5

EXAM_DISPLAY_NAMES: dict[str, str] = {
    "neet": "NEET",
    "jee": "JEE",
    "upsc": "UPSC",
    "upsc_prelims": "UPSC Prelims",
    "ssc_bank": "SSC / Bank",
    "cat": "CAT",
    "gate": "GATE",
    "general": "General",
}


def _as_dict(raw: Any) -> dict:
    return dict(raw) if isinstance(raw, dict) else {}


def _text(value: Any) -> str:
    return str(value).strip() if value is not None else ""


def _or(value: Any, default: str) -> str:
    if isinstance(value, (list, tuple)):
        value = ", ".join(str(v) for v in value if v)
    return str(value) if value else default


def _keep_valid(items: list, model: type[BaseModel], result: RepairResult, label: str) -> list:
    """Drop items that still fail the item schema after repair."""
    kept = []
    for i, item in enumerate(items, 1):
        try:
            model.model_validate(item)
        except ValidationError as exc:
            result.corrections.append(
                f"{label} {i}: dropped (still invalid after repair, {exc.error_count()} error(s))"
            )
            continue
        kept.append(item)
    return kept


# ──────────────────────────────────────────────
# Quiz generation
# ──────────────────────────────────────────────

def _render_quiz(inp: GenerateQuizInput) -> str:
    return QUIZ_GENERATION_PROMPT.format(
        topic=inp.topic,
        difficulty=inp.difficulty,
        exam_type=inp.exam_type,
        num_questions=inp.num_questions,
    )


def _repair_quiz(raw: Any, inp: GenerateQuizInput) -> RepairResult:
    if isinstance(raw, list):
        raw = {"questions": raw}
    data = _as_dict(raw)
    result = RepairResult()

    title = _text(data.get("quizTitle"))
    if not title:
        title = f"{inp.topic} Quiz ({inp.difficulty})"
        result.corrections.append(f"quizTitle missing; defaulted to '{title}'")

    lo, hi = QUIZ_OPTION_BOUNDS
    questions = repair_mcq_list(data.get("questions"), lo, hi, max_items=inp.num_questions)
    result.corrections.extend(questions.corrections)
    result.data = {
        "quizTitle": title,
        "questions": _keep_valid(questions.data, QuizQuestion, result, "question"),
    }
    return result


# ──────────────────────────────────────────────
# Study-material summarizer
# ──────────────────────────────────────────────

def _render_summary(inp: SummarizeStudyMaterialInput) -> str:
    return STUDY_MATERIAL_PROMPT.format(
        greeting=f"Hello {inp.user_name}! " if inp.user_name else "",
        exam_type=_or(inp.exam_type, "General"),
        user_level=_or(inp.user_level, "general"),
        topic=inp.topic,
        material=inp.material,
    )


def _repair_summary(raw: Any, inp: SummarizeStudyMaterialInput) -> RepairResult:
    data = _as_dict(raw)
    result = RepairResult()

    concepts = coerce_str_list(data.get("keyConcepts"))
    if len(concepts) > 7:
        result.corrections.append(f"keyConcepts trimmed from {len(concepts)} to 7")
        concepts = concepts[:7]

    lo, hi = STUDY_MCQ_OPTION_BOUNDS
    mcqs = repair_mcq_list(data.get("multipleChoiceQuestions"), lo, hi, max_items=MAX_STUDY_MCQS)
    result.corrections.extend(mcqs.corrections)
    result.data = {
        "summary": _text(data.get("summary")),
        "keyConcepts": concepts,
        "multipleChoiceQuestions": _keep_valid(mcqs.data, StudyMcq, result, "question"),
    }
    return result


# ──────────────────────────────────────────────
# Study-topic suggestion
# ──────────────────────────────────────────────

def _render_study_topics(inp: SuggestStudyTopicsInput) -> str:
    today = inp.current_date or date.today()
    days_left = max(0, (inp.target_date - today).days)
    weeks_left = max(1, math.ceil(days_left / 7))
    return STUDY_TOPICS_PROMPT.format(
        exam_type=inp.exam_type,
        subjects=", ".join(inp.subjects),
        hours_per_day=inp.time_available_per_day,
        current_date=today.isoformat(),
        target_date=inp.target_date.isoformat(),
        days_left=days_left,
        weeks_left=weeks_left,
    )


def _repair_schedule(schedule: Any) -> dict[str, list[str]]:
    if isinstance(schedule, list):
        schedule = {f"Week {i}": week for i, week in enumerate(schedule, 1)}
    if not isinstance(schedule, dict):
        return {}
    out: dict[str, list[str]] = {}
    for week, topics in schedule.items():
        cleaned = coerce_str_list(topics)
        if cleaned:
            out[str(week)] = cleaned
    return out


def _repair_study_topics(raw: Any, inp: SuggestStudyTopicsInput) -> RepairResult:
    data = _as_dict(raw)
    result = RepairResult()
    syllabus = []
    entries = data.get("generatedSyllabus")
    for i, entry in enumerate(entries if isinstance(entries, list) else [], 1):
        entry = _as_dict(entry)
        subject = _text(entry.get("subject"))
        schedule = _repair_schedule(entry.get("schedule"))
        if not subject or not schedule:
            result.corrections.append(f"syllabus entry {i}: dropped (missing subject or schedule)")
            continue
        fixed = {"subject": subject, "schedule": schedule}
        if entry.get("summary"):
            fixed["summary"] = _text(entry["summary"])
        syllabus.append(fixed)

    covered = {s["subject"].lower() for s in syllabus}
    missing = [s for s in inp.subjects if s.lower() not in covered]
    if syllabus and missing:
        result.corrections.append(f"syllabus missing subject(s): {', '.join(missing)}")

    syllabus = _keep_valid(syllabus, SubjectSyllabus, result, "syllabus entry")
    result.data = {"generatedSyllabus": syllabus}
    if data.get("overallFeedback"):
        result.data["overallFeedback"] = _text(data["overallFeedback"])
    return result


# ──────────────────────────────────────────────
# Productivity analysis
# ──────────────────────────────────────────────

def _render_productivity(inp: AnalyzeProductivityDataInput) -> str:
    lines = [f"  - {subject}: {hours:g}" for subject, hours in inp.subject_wise_time_distribution.items()]
    return PRODUCTIVITY_PROMPT.format(
        study_hours=f"{inp.study_hours:g}",
        topics_completed=inp.topics_completed,
        distribution="\n".join(lines) or "  - (no subject data)",
        streak_length=inp.streak_length,
        weekly_goals_completed=inp.weekly_goals_completed,
    )


def _repair_productivity(raw: Any, inp: AnalyzeProductivityDataInput) -> RepairResult:
    data = _as_dict(raw)
    return RepairResult(data={
        "insights": coerce_str_list(data.get("insights")),
        "overallAssessment": _text(data.get("overallAssessment")),
        "recommendations": coerce_str_list(data.get("recommendations")),
    })


# ──────────────────────────────────────────────
# YouTube transcript processing
# ──────────────────────────────────────────────

def _render_youtube(inp: ProcessYouTubeVideoInput) -> str:
    if inp.custom_title:
        title_instruction = "use the suggested title, refining it only if the transcript demands it."
    else:
        title_instruction = "a concise, descriptive title based on the transcript."
    return YOUTUBE_PROMPT.format(
        user_name=_or(inp.user_name, "Student"),
        exam_context=_or(inp.exam_context, "General academic content"),
        url_line=f"- Original Video URL (for context): {inp.youtube_url}\n" if inp.youtube_url else "",
        title_line=f"- Suggested Video Title: {inp.custom_title}\n" if inp.custom_title else "",
        language=inp.language,
        transcript=inp.video_transcript,
        title_instruction=title_instruction,
    )


def _repair_youtube(raw: Any, inp: ProcessYouTubeVideoInput) -> RepairResult:
    data = _as_dict(raw)
    result = RepairResult()

    title = _text(data.get("videoTitle"))
    if not title and inp.custom_title:
        title = inp.custom_title.strip()
        result.corrections.append("videoTitle missing; used customTitle")

    concepts = coerce_str_list(data.get("keyConcepts"))
    if len(concepts) > 10:
        result.corrections.append(f"keyConcepts trimmed from {len(concepts)} to 10")
        concepts = concepts[:10]

    lo, hi = QUIZ_OPTION_BOUNDS
    mcqs = repair_mcq_list(data.get("multipleChoiceQuestions"), lo, hi, max_items=MAX_STUDY_MCQS)
    result.corrections.extend(mcqs.corrections)
    result.data = {
        "videoTitle": title,
        "summary": _text(data.get("summary")),
        "structuredNotes": _text(data.get("structuredNotes")),
        "keyConcepts": concepts,
        "multipleChoiceQuestions": _keep_valid(mcqs.data, QuizQuestion, result, "question"),
    }
    return result


# ──────────────────────────────────────────────
# Academic doubt solver
# ──────────────────────────────────────────────

def _render_doubt(inp: SolveAcademicDoubtInput) -> str:
    if inp.user_name:
        greeting = f'"Hi {inp.user_name}! 👋 Let\'s dive into this problem together!"'
    else:
        greeting = '"Hey there! 👋 Let\'s break this down step-by-step!"'
    return DOUBT_SOLVER_PROMPT.format(
        user_name=_or(inp.user_name, "Student"),
        exam_type=_or(inp.exam_type, "General Knowledge"),
        subject_context=_or(inp.subject_context, "Not specified"),
        preparation_level=_or(inp.preparation_level, "Not specified"),
        user_query=inp.user_query,
        greeting_instruction=greeting,
    )


def _repair_doubt(raw: Any, inp: SolveAcademicDoubtInput) -> RepairResult:
    data = _as_dict(raw)
    result = RepairResult()

    score = data.get("confidenceScore")
    if score is not None:
        try:
            score = float(score)
        except (TypeError, ValueError):
            result.corrections.append(f"confidenceScore {score!r} not numeric; dropped")
            score = None
    if score is not None and (math.isnan(score) or not 0.0 <= score <= 1.0):
        clamped = 0.0 if math.isnan(score) else min(1.0, max(0.0, score))
        result.corrections.append(f"confidenceScore {score} clamped to {clamped}")
        score = clamped

    result.data = {
        "explanation": _text(data.get("explanation")),
        "relatedTopics": coerce_str_list(data.get("relatedTopics")),
        "confidenceScore": score,
    }
    return result


# ──────────────────────────────────────────────
# WordQuest vocabulary challenges
# ──────────────────────────────────────────────

def _avoid_block(previous_words: list[str]) -> str:
    if not previous_words:
        return ""
    listed = "\n".join(f"- {w}" for w in previous_words[-30:])
    return f"Previously used words in this session (avoid repeating them):\n{listed}\n"


def _render_wordquest_session(inp: GenerateWordQuestSessionInput) -> str:
    return WORDQUEST_SESSION_PROMPT.format(
        game_mode=inp.game_mode,
        avoid_block=_avoid_block(inp.previous_words),
        num_challenges=inp.num_challenges,
    )


def _render_wordquest_challenge(inp: GenerateWordQuestChallengeInput) -> str:
    return WORDQUEST_CHALLENGE_PROMPT.format(
        game_mode=inp.game_mode,
        avoid_block=_avoid_block(inp.previous_words),
    )


def _repair_wordquest_session(raw: Any, inp: GenerateWordQuestSessionInput) -> RepairResult:
    items = raw if isinstance(raw, list) else _as_dict(raw).get("challenges")
    result = RepairResult()
    challenges = []
    seen: set = set()
    for i, item in enumerate(items if isinstance(items, list) else [], 1):
        fixed = repair_vocabulary_challenge(item, inp.game_mode, label=f"challenge {i}")
        result.corrections.extend(fixed.corrections)
        if fixed.data is None:
            continue
        key = fixed.data["word"].lower()
        if key in seen:
            result.corrections.append(f"challenge {i}: dropped duplicate word '{fixed.data['word']}'")
            continue
        seen.add(key)
        challenges.append(fixed.data)

    challenges = _keep_valid(challenges, VocabularyChallenge, result, "challenge")
    if len(challenges) > inp.num_challenges:
        result.corrections.append(
            f"challenges trimmed from {len(challenges)} to {inp.num_challenges}"
        )
        challenges = challenges[:inp.num_challenges]
    result.data = {"challenges": challenges}
    return result


def _repair_wordquest_challenge(raw: Any, inp: GenerateWordQuestChallengeInput) -> RepairResult:
    data = _as_dict(raw)
    if isinstance(data.get("challenges"), list) and data["challenges"]:
        data = data["challenges"][0]
    fixed = repair_vocabulary_challenge(data, inp.game_mode)
    return RepairResult(data=fixed.data if fixed.data is not None else {}, corrections=fixed.corrections)


# ──────────────────────────────────────────────
# Personalized recommendations
# ──────────────────────────────────────────────

FALLBACK_RECOMMENDATIONS: dict = {
    "fallback": True,
    "suggestedWeeklyTimetableFocus": [
        "Focus on your core subjects this week.",
        "Ensure regular revision of topics already covered.",
        "Practice effective time management with dedicated study blocks.",
    ],
    "suggestedMonthlyGoals": [
        "Aim to cover a significant portion of your syllabus for at least one subject.",
        "Schedule and attempt at least one mock test or comprehensive quiz.",
    ],
    "studyCycleRecommendation": (
        "Consider the Pomodoro Technique (e.g., 25 minutes study, 5 minutes break). "
        "Adjust based on your focus levels."
    ),
    "shortTermGoals": [
        {"goal": "Complete one key module or unit of a core subject.", "timeline": "This week"},
        {"goal": "Review all notes from the past 3 days of study.", "timeline": "Daily"},
    ],
    "longTermGoals": [
        {"goal": "Achieve mastery in fundamental concepts of all major subjects.", "timeline": "Next 1-2 months"},
    ],
    "milestoneSuggestions": [
        "End of Week: Conduct a self-assessment quiz on topics studied during the week.",
        "End of Month: Review all completed chapters and identify areas needing more attention.",
    ],
    "personalizedTips": {
        "timeManagement": [
            "Prioritize your tasks daily using a to-do list or planner.",
            "Minimize distractions during your dedicated study sessions.",
        ],
        "subjectSpecificStudy": [
            "For complex topics, try breaking them down into smaller, manageable parts.",
            "Use active recall techniques like flashcards or teaching the concept to someone else.",
        ],
        "motivationalNudges": [
            "Keep your long-term exam goals in mind to stay focused.",
            "Acknowledge and celebrate small victories and progress made.",
        ],
        "focusAndDistraction": [
            "Identify your common distractions and create a plan to minimize them.",
            "Experiment with different study environments to find what helps you focus best.",
        ],
    },
    "overallStrategyStatement": (
        "Build a consistent daily routine, revise regularly, and use mock tests to find and fix weak areas."
    ),
}


def exam_display(inp: PersonalizedRecommendationsInput) -> str:
    names = []
    for exam in inp.target_exams:
        if exam.lower() == "other":
            if inp.other_exam_name:
                names.append(inp.other_exam_name)
            continue
        names.append(EXAM_DISPLAY_NAMES.get(exam.lower(), exam))
    return ", ".join(names) or "General competitive exams"


def _render_recommendations(inp: PersonalizedRecommendationsInput) -> str:
    details = []
    for d in inp.subject_details:
        methods = ", ".join(d.preferred_learning_methods) or "Not specified"
        details.append(
            f"  - {d.subject}: level {d.preparation_level or 'Not specified'}; methods {methods}"
        )
    return RECOMMENDATIONS_PROMPT.format(
        name=_or(inp.name, "Student"),
        exam_display=exam_display(inp),
        exam_attempt_year=_or(inp.exam_attempt_year, "Not specified"),
        language_medium=_or(inp.language_medium, "Not specified"),
        daily_study_hours=_or(inp.daily_study_hours, "Not specified"),
        study_mode=_or(inp.study_mode, "Not specified"),
        exam_phase=_or(inp.exam_phase, "Not specified"),
        previous_attempts=_or(inp.previous_attempts, "Not specified"),
        preferred_study_time=_or(inp.preferred_study_time, "Not specified"),
        weak_subjects=_or(inp.weak_subjects, "None listed"),
        strong_subjects=_or(inp.strong_subjects, "None listed"),
        learning_styles=_or(inp.preferred_learning_styles, "Not specified"),
        motivation_type=_or(inp.motivation_type, "Not specified"),
        distraction_struggles=_or(inp.distraction_struggles, "Not specified"),
        subject_details="\n".join(details) or "  - (none provided)",
    )


def _trim(result: RepairResult, key: str, values: list, limit: int) -> list:
    if len(values) > limit:
        result.corrections.append(f"{key} trimmed from {len(values)} to {limit}")
        return values[:limit]
    return values


def _repair_goals(value: Any) -> list[dict]:
    goals = []
    for g in value if isinstance(value, list) else []:
        if isinstance(g, str) and g.strip():
            goals.append({"goal": g.strip()})
        elif isinstance(g, dict) and _text(g.get("goal")):
            goal = {"goal": _text(g["goal"])}
            if g.get("timeline"):
                goal["timeline"] = _text(g["timeline"])
            goals.append(goal)
    return goals


def _repair_recommendations(raw: Any, inp: PersonalizedRecommendationsInput) -> RepairResult:
    data = _as_dict(raw)
    result = RepairResult()
    tips = _as_dict(data.get("personalizedTips"))
    result.data = {
        "fallback": False,
        "suggestedWeeklyTimetableFocus": _trim(
            result, "suggestedWeeklyTimetableFocus",
            coerce_str_list(data.get("suggestedWeeklyTimetableFocus")), 7),
        "suggestedMonthlyGoals": _trim(
            result, "suggestedMonthlyGoals", coerce_str_list(data.get("suggestedMonthlyGoals")), 5),
        "studyCycleRecommendation": _text(data.get("studyCycleRecommendation")),
        "shortTermGoals": _trim(result, "shortTermGoals", _repair_goals(data.get("shortTermGoals")), 4),
        "longTermGoals": _trim(result, "longTermGoals", _repair_goals(data.get("longTermGoals")), 3),
        "milestoneSuggestions": _trim(
            result, "milestoneSuggestions", coerce_str_list(data.get("milestoneSuggestions")), 4),
        "personalizedTips": {
            key: _trim(result, key, coerce_str_list(tips.get(key)), 3)
            for key in ("timeManagement", "subjectSpecificStudy", "motivationalNudges", "focusAndDistraction")
        },
        "overallStrategyStatement": _text(data.get("overallStrategyStatement")),
    }
    return result


# ──────────────────────────────────────────────
# Registry
# ──────────────────────────────────────────────

FLOWS: dict[str, FlowDefinition] = {
    flow.name: flow
    for flow in (
        FlowDefinition(
            name="generate_quiz",
            description="Exam-style multiple-choice quiz on a topic.",
            input_model=GenerateQuizInput,
            output_model=GenerateQuizOutput,
            system_prompt=QUIZ_GENERATION_SYSTEM_PROMPT,
            render=_render_quiz,
            repair=_repair_quiz,
        ),
        FlowDefinition(
            name="summarize_study_material",
            description="Summary, key concepts and practice MCQs for pasted study material.",
            input_model=SummarizeStudyMaterialInput,
            output_model=SummarizeStudyMaterialOutput,
            system_prompt=STUDY_MATERIAL_SYSTEM_PROMPT,
            render=_render_summary,
            repair=_repair_summary,
            temperature=0.5,
        ),
        FlowDefinition(
            name="suggest_study_topics",
            description="Week-by-week syllabus per subject up to a target date.",
            input_model=SuggestStudyTopicsInput,
            output_model=SuggestStudyTopicsOutput,
            system_prompt=STUDY_TOPICS_SYSTEM_PROMPT,
            render=_render_study_topics,
            repair=_repair_study_topics,
        ),
        FlowDefinition(
            name="analyze_productivity_data",
            description="Insights and recommendations from a week of study metrics.",
            input_model=AnalyzeProductivityDataInput,
            output_model=AnalyzeProductivityDataOutput,
            system_prompt=PRODUCTIVITY_SYSTEM_PROMPT,
            render=_render_productivity,
            repair=_repair_productivity,
            temperature=0.5,
        ),
        FlowDefinition(
            name="process_youtube_video",
            description="Title, summary, notes, key concepts and MCQs from a video transcript.",
            input_model=ProcessYouTubeVideoInput,
            output_model=ProcessYouTubeVideoOutput,
            system_prompt=YOUTUBE_SYSTEM_PROMPT,
            render=_render_youtube,
            repair=_repair_youtube,
            temperature=0.5,
        ),
        FlowDefinition(
            name="solve_academic_doubt",
            description="Step-by-step tutor explanation for an academic question.",
            input_model=SolveAcademicDoubtInput,
            output_model=SolveAcademicDoubtOutput,
            system_prompt=DOUBT_SOLVER_SYSTEM_PROMPT,
            render=_render_doubt,
            repair=_repair_doubt,
        ),
        FlowDefinition(
            name="generate_wordquest_session",
            description="A batch of WordQuest vocabulary challenges for one game mode.",
            input_model=GenerateWordQuestSessionInput,
            output_model=WordQuestSessionOutput,
            system_prompt=WORDQUEST_SYSTEM_PROMPT,
            render=_render_wordquest_session,
            repair=_repair_wordquest_session,
            temperature=0.9,
        ),
        FlowDefinition(
            name="generate_wordquest_challenge",
            description="A single WordQuest vocabulary challenge.",
            input_model=GenerateWordQuestChallengeInput,
            output_model=VocabularyChallenge,
            system_prompt=WORDQUEST_SYSTEM_PROMPT,
            render=_render_wordquest_challenge,
            repair=_repair_wordquest_challenge,
            temperature=0.9,
        ),
        FlowDefinition(
            name="generate_personalized_recommendations",
            description="Study strategy, goals and tips from the student's profile.",
            input_model=PersonalizedRecommendationsInput,
            output_model=PersonalizedRecommendationsOutput,
            system_prompt=RECOMMENDATIONS_SYSTEM_PROMPT,
            render=_render_recommendations,
            repair=_repair_recommendations,
            fallback=lambda _inp: dict(FALLBACK_RECOMMENDATIONS),
        ),
    )
}


def get_flow(flow_name: str) -> FlowDefinition:
    try:
        return FLOWS[flow_name]
    except KeyError:
        raise UnknownFlowError(flow_name) from None


def list_flows() -> list[dict]:
    return [flow.describe() for flow in FLOWS.values()]
