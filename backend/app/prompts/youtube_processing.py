"""Prompt templates for turning a YouTube transcript into study material."""

YOUTUBE_SYSTEM_PROMPT = """You are an expert AI Study Assistant who transforms video transcripts into
learning material for students preparing for exams like NEET, UPSC and JEE. Everything you
produce reflects the transcript only; you never introduce outside information."""

YOUTUBE_PROMPT = """Context:
- User: {user_name}
- Exam Focus: {exam_context}
{url_line}{title_line}- Transcript Language: {language}

Video Transcript to Process:
---
{transcript}
---

Generate:
1. videoTitle: {title_instruction}
2. summary: about 150-250 words covering the main topics and the core message.
3. structuredNotes: detailed Markdown notes with "## Heading", "### Subheading", bullet points and
   **bold** keywords. More detailed than the summary.
4. keyConcepts: 3 to 10 key terms or takeaways.
5. multipleChoiceQuestions: 2 to 5 MCQs based only on the transcript. Each has "questionText",
   4 distinct "options", the 0-based "correctAnswerIndex" and a brief "explanation".

Example structuredNotes value:
"## Main Topic 1\\n\\n- **Key Point 1.1**: Detail about this point.\\n\\n## Main Topic 2\\n\\n- **Concept A**: Explanation.\""""
