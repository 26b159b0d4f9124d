from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

GameMode = Literal["basic", "intermediate", "advanced"]
ClueType = Literal["definition", "fill-in-the-blank"]

BASIC_MIN_OPTIONS = 3
BASIC_MAX_OPTIONS = 4


class VocabularyChallenge(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    word: str = Field(min_length=1, pattern=r"^\S+$")
    clue: str = Field(min_length=1)
    clue_type: ClueType = Field(default="definition", alias="clueType")
    options: Optional[list[str]] = Field(
        default=None, min_length=BASIC_MIN_OPTIONS, max_length=BASIC_MAX_OPTIONS
    )
    hint: Optional[str] = None

    @model_validator(mode="after")
    def _options_xor_hint(self):
        if self.options is not None and self.hint is not None:
            raise ValueError("A challenge carries either options or a hint, not both")
        if self.options is None and not self.hint:
            raise ValueError("A challenge needs options (basic) or a hint (intermediate/advanced)")
        if self.options is not None and self.word not in self.options:
            raise ValueError(f"Options must include the target word '{self.word}'")
        return self


class GenerateWordQuestSessionInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    game_mode: GameMode = Field(alias="gameMode")
    num_challenges: int = Field(default=3, ge=1, le=10, alias="numChallenges")
    previous_words: list[str] = Field(default_factory=list, alias="previousWords")


class WordQuestSessionOutput(BaseModel):
    challenges: list[VocabularyChallenge] = Field(min_length=1)


class GenerateWordQuestChallengeInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    game_mode: GameMode = Field(alias="gameMode")
    previous_words: list[str] = Field(default_factory=list, alias="previousWords")


class VocabularyItem(BaseModel):
    """One curated entry of the bundled vocabulary bank."""

    model_config = ConfigDict(populate_by_name=True)

    word: str
    difficulty: GameMode
    definition: str
    example_sentence: Optional[str] = Field(default=None, alias="exampleSentence")
    category: Optional[str] = None
    parts_of_speech: Optional[str] = Field(default=None, alias="partsOfSpeech")
    distractors: list[str] = Field(default_factory=list)
    hint: Optional[str] = None
