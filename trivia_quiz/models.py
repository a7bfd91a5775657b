"""
Core data models for the trivia quiz.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class QuestionType(Enum):
    """Question shapes served by the provider."""
    BOOLEAN = "boolean"
    MULTIPLE = "multiple"


class Difficulty(Enum):
    """Difficulty levels understood by the provider."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class SessionState(Enum):
    """Enumeration of the phases a quiz session goes through."""
    COLLECTING = "collecting"
    LOADING = "loading"
    ACTIVE = "active"
    COMPLETED = "completed"
    ERROR = "error"


@dataclass(frozen=True)
class Question:
    """Represents a single multiple-choice trivia question."""
    kind: QuestionType
    difficulty: Difficulty
    category: str
    prompt: str
    correct_answer: str
    incorrect_answers: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Category:
    """An entry of the category table: provider id and display name."""
    id: int
    name: str


@dataclass
class QuizSettings:
    """Runtime settings for talking to the question provider."""
    api_url: str = "https://opentdb.com/api.php"
    request_timeout: int = 10


@dataclass
class QuizSession:
    """In-memory state of one quiz run."""
    user_name: str = ""
    category: Optional[Category] = None
    difficulty: Optional[Difficulty] = None
    requested_count: int = 0
    questions: List[Question] = field(default_factory=list)
    correct_count: int = 0
    state: SessionState = SessionState.COLLECTING

    @property
    def total_questions(self) -> int:
        return len(self.questions)
