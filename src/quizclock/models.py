from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, computed_field


class Problem(BaseModel):
    model_config = ConfigDict(frozen=True)

    question: str
    expected_answer: str


class Response(BaseModel):
    problem_index: int
    raw_text: str
    submitted: bool = True


class SessionState(str, Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    EXHAUSTED = "exhausted"
    TIMED_OUT = "timed_out"
    ABORTED = "aborted"
    REPORTED = "reported"

    @property
    def is_terminal(self) -> bool:
        return self in (
            SessionState.EXHAUSTED,
            SessionState.TIMED_OUT,
            SessionState.ABORTED,
        )


class EventKind(str, Enum):
    ANSWER = "answer"
    END_OF_INPUT = "end_of_input"
    READ_ERROR = "read_error"
    DEADLINE = "deadline"


class QuizEvent(BaseModel):
    """A message posted to the controller by the reader or the timer thread."""

    kind: EventKind
    problem_index: Optional[int] = None
    text: str = ""
    error: Optional[str] = None


class AnswerRecord(BaseModel):
    question: str
    user_answer: str
    correct_answer: str
    is_correct: bool
    attempted: bool


class QuizOutcome(BaseModel):
    total_questions: int
    total_attempted: int
    correct: int
    incorrect: int
    state: SessionState
    records: List[AnswerRecord] = []

    @computed_field
    @property
    def score_percentage(self) -> int:
        if self.total_questions <= 0:
            return 0
        return round((self.correct / self.total_questions) * 100)
