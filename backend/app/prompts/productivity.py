"""Prompt templates for productivity-data analysis."""

PRODUCTIVITY_SYSTEM_PROMPT = """You are an AI study coach who specialises in student productivity and
study-habit analysis. Your advice is specific, actionable and kind."""

PRODUCTIVITY_PROMPT = """Analyze the student's productivity data from the last 7 days.

Student's Data:
- Total Study Hours: {study_hours}
- Topics Completed: {topics_completed}
- Subject-wise Time Distribution (Hours):
{distribution}
- Current Study Streak (Days): {streak_length}
- Weekly Goals Completed: {weekly_goals_completed}

Based on this data:
1. insights: patterns as short bullet strings. Highlight strong subjects (time aligns with outcomes)
   and weak ones (time disproportionate to outcomes, or too little time). Flag burnout signals such as
   very low hours for the week or a broken streak.
2. overallAssessment: a brief summary of the week's productivity.
3. recommendations: specific, actionable tips, e.g. "Try 3 Pomodoros instead of 5 today".

Keep insights and recommendations distinct."""
