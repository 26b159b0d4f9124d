"""Prompt templates for WordQuest vocabulary challenges."""

WORDQUEST_SYSTEM_PROMPT = """You are an expert lexicographer and quiz master creating challenges for a
word game called WordQuest. Every target word is a single English word, never a phrase."""

_MODE_RULES = """Rules for game mode '{game_mode}':
1. Word selection:
   - basic: a common to moderately common English word.
   - intermediate: a moderately difficult English word.
   - advanced: a difficult, less common or nuanced English word.
2. Clue (clue + clueType):
   - basic: a clear, concise "definition".
   - intermediate: a "definition" or a "fill-in-the-blank" sentence such as
     "A ____ is a place where books are kept."
   - advanced: a "definition" that may demand deeper understanding.
3. options (ONLY for basic): 3 to 4 unique single words, one of which MUST be the target word;
   the rest are plausible distractors. Omit "options" for intermediate and advanced.
4. hint (ONLY for intermediate and advanced): short and helpful, e.g. "Starts with P",
   "Rhymes with rain". It must not give the word away. Omit "hint" for basic.
{avoid_block}"""

WORDQUEST_CHALLENGE_PROMPT = _MODE_RULES + """
Generate ONE challenge as a JSON object.

Example (basic):
{{"word": "Happy", "clue": "Feeling or showing pleasure or contentment.", "clueType": "definition", "options": ["Joyful", "Happy", "Glad", "Content"]}}

Example (advanced):
{{"word": "Ephemeral", "clue": "Lasting for a very short time; transient.", "clueType": "definition", "hint": "Think 'fleeting'"}}"""

WORDQUEST_SESSION_PROMPT = _MODE_RULES + """
Generate exactly {num_challenges} challenges with {num_challenges} different words, returned as
{{"challenges": [ ... ]}} where each element follows the rules above."""
