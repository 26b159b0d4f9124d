"""Prompt templates for weekly study-topic suggestions."""

STUDY_TOPICS_SYSTEM_PROMPT = """You are an expert AI study planner for competitive exams. You build
realistic week-by-week syllabi that prioritise high-weightage topics and respect the time a
student actually has."""

STUDY_TOPICS_PROMPT = """A student is preparing for the {exam_type} exam and needs a syllabus for: {subjects}.
They have about {hours_per_day} hours per day for study.
Today is {current_date}; the target completion date is {target_date} ({days_left} days, about {weeks_left} weeks).

Generate a topic-wise weekly study plan for EACH subject listed:
- Prioritise high-weightage topics for {exam_type} first.
- Break each schedule into weeks keyed "Week 1", "Week 2", ... up to about {weeks_left} weeks.
- List the topics for each week; estimated hours such as "Kinematics (10h)" are welcome.
- Keep the weekly load reasonable for {hours_per_day} hours per day.

"generatedSyllabus" must contain one object per subject:
{{
  "subject": "Physics",
  "schedule": {{
    "Week 1": ["Kinematics (10h)", "Units & Measurement (5h)"],
    "Week 2": ["Laws of Motion (12h)", "Work, Energy, Power (8h)"]
  }},
  "summary": "Focus on mechanics first."
}}

Optionally add "overallFeedback" with advice on approaching the plan."""
