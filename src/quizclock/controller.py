import logging
import queue
import sys
from typing import List, Optional, TextIO

from .collector import AnswerCollector
from .config import QuizConfig, settings
from .deadline import Deadline
from .exceptions import QuizStateError, ReadError
from .models import (
    EventKind,
    Problem,
    QuizEvent,
    QuizOutcome,
    Response,
    SessionState,
)
from .scoring import tally

logger = logging.getLogger(__name__)


class QuizController:
    """Runs one timed quiz session.

    The controller is the only consumer of the event queue and the only
    writer of ``responses``. The reader threads and the deadline timer only
    post events, so the session state needs no locking.

    States move ``NOT_STARTED -> RUNNING -> {EXHAUSTED, TIMED_OUT, ABORTED}
    -> REPORTED``. Once the deadline has expired no further question is shown
    and no answer is recorded, even one that was typed in time but dequeued
    late.
    """

    def __init__(
        self,
        problems: List[Problem],
        config: QuizConfig,
        collector: Optional[AnswerCollector] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self.problems = list(problems)
        self.config = config
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.collector = collector or AnswerCollector(self.stdin, self.stdout)
        self.state = SessionState.NOT_STARTED
        self.responses: List[Response] = []
        self._events: "queue.Queue[QuizEvent]" = queue.Queue()
        self._deadline = Deadline(config.time_limit, self._events)
        self._outcome: Optional[QuizOutcome] = None

    @property
    def outcome(self) -> Optional[QuizOutcome]:
        return self._outcome

    @property
    def deadline(self) -> Deadline:
        return self._deadline

    def wait_for_start(self):
        """Blocks on the Enter gate. The countdown has not started yet."""
        if self.state is not SessionState.NOT_STARTED:
            raise QuizStateError(f"cannot wait for start in state {self.state.value}")
        self.stdout.write(
            f"{len(self.problems)} questions, {self.config.time_limit:g} seconds.\n"
        )
        self.stdout.write(f"{settings.START_PROMPT}\n")
        self.stdout.flush()
        try:
            self.stdin.readline()
        except (OSError, ValueError) as e:
            raise ReadError(f"failed to read start signal: {e}") from e

    def run(self) -> QuizOutcome:
        if self.state is not SessionState.NOT_STARTED:
            raise QuizStateError(f"cannot run a session in state {self.state.value}")

        self.state = SessionState.RUNNING
        self._deadline.start()
        logger.info(f"Quiz started with {len(self.problems)} problems")
        try:
            self.state = self._ask_all()
        except ReadError as e:
            logger.warning(f"Input failed mid-quiz, ending early: {e}")
            self.state = SessionState.ABORTED
        except Exception:
            logger.exception("Unexpected error during quiz, ending early")
            self.state = SessionState.ABORTED
        finally:
            self._deadline.cancel()

        self._outcome = tally(self.problems, self.responses, self.state)
        logger.info(
            f"Quiz finished: {self.state.value}, "
            f"{self._outcome.correct}/{self._outcome.total_attempted} correct"
        )
        return self._outcome

    def mark_reported(self):
        if not self.state.is_terminal:
            raise QuizStateError(f"cannot report a session in state {self.state.value}")
        self.state = SessionState.REPORTED

    def _ask_all(self) -> SessionState:
        for index, problem in enumerate(self.problems):
            if self._deadline.expired:
                return SessionState.TIMED_OUT
            self.collector.collect(index, problem.question, self._events)
            state = self._await_answer(index)
            if state is not None:
                return state
        return SessionState.EXHAUSTED

    def _await_answer(self, index: int) -> Optional[SessionState]:
        """Waits for the current question's answer or the deadline.

        Returns a terminal state, or None when the answer was recorded.
        """
        while True:
            event = self._events.get()
            if event.kind is EventKind.DEADLINE:
                return SessionState.TIMED_OUT
            if event.problem_index != index:
                continue

            if event.kind is EventKind.ANSWER:
                if self._deadline.expired:
                    return SessionState.TIMED_OUT
                self.responses.append(
                    Response(problem_index=index, raw_text=event.text)
                )
                return None
            if event.kind is EventKind.END_OF_INPUT:
                logger.info("End of input, ending quiz early")
                return SessionState.ABORTED
            raise ReadError(event.error or "unknown read error")
