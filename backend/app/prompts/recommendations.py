"""Prompt templates for personalized study recommendations."""

RECOMMENDATIONS_SYSTEM_PROMPT = """You are an expert academic advisor for competitive exam aspirants.
You turn a student's profile into a concrete, encouraging study strategy."""

RECOMMENDATIONS_PROMPT = """Student Profile:
- Name: {name}
- Target Exam(s): {exam_display}
- Attempt Year: {exam_attempt_year}
- Language Medium: {language_medium}
- Daily Study Hours: {daily_study_hours}
- Study Mode: {study_mode}
- Exam Phase: {exam_phase}
- Previous Attempts: {previous_attempts}
- Preferred Study Time: {preferred_study_time}
- Weak Subjects: {weak_subjects}
- Strong Subjects: {strong_subjects}
- Preferred Learning Styles: {learning_styles}
- Motivation: {motivation_type}
- Main Distractions: {distraction_struggles}
Subject Details:
{subject_details}

Produce:
- suggestedWeeklyTimetableFocus: 3-7 focus areas for this week.
- suggestedMonthlyGoals: 2-5 goals for the month.
- studyCycleRecommendation: a study/break cycle suited to the student (e.g. Pomodoro variants).
- shortTermGoals: 2-4 objects {{"goal": ..., "timeline": ...}}.
- longTermGoals: 1-3 objects {{"goal": ..., "timeline": ...}}.
- milestoneSuggestions: 2-4 checkpoints.
- personalizedTips: {{"timeManagement": [...], "subjectSpecificStudy": [...],
  "motivationalNudges": [...], "focusAndDistraction": [...]}} with 1-3 tips each. Prefer the
  per-subject preparation level and learning methods when given.
- overallStrategyStatement: 2-3 sentences.
Set "fallback" to false."""
