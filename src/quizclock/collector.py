import queue
import sys
import threading
from typing import Optional, TextIO

from .config import settings
from .models import EventKind, QuizEvent


class AnswerCollector:
    """Reads one answer per question on a background thread.

    A read that is already blocked cannot be interrupted. Whatever it returns
    is posted to the event queue, and the controller decides whether the
    result still counts.
    """

    def __init__(self, stream: Optional[TextIO] = None, output: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdin
        self.output = output if output is not None else sys.stdout

    def collect(
        self,
        problem_index: int,
        question: str,
        events: "queue.Queue[QuizEvent]",
    ) -> threading.Thread:
        self.output.write(f"Question {problem_index + 1}: {question}\n")
        self.output.write(settings.ANSWER_PROMPT)
        self.output.flush()

        reader = threading.Thread(
            target=self._read_one,
            args=(problem_index, events),
            name=f"answer-reader-{problem_index}",
            daemon=True,
        )
        reader.start()
        return reader

    def _read_one(self, problem_index: int, events: "queue.Queue[QuizEvent]"):
        try:
            line = self.stream.readline()
        except (OSError, ValueError) as e:
            events.put_nowait(
                QuizEvent(
                    kind=EventKind.READ_ERROR,
                    problem_index=problem_index,
                    error=str(e),
                )
            )
            return

        if line == "":
            events.put_nowait(
                QuizEvent(kind=EventKind.END_OF_INPUT, problem_index=problem_index)
            )
            return

        events.put_nowait(
            QuizEvent(
                kind=EventKind.ANSWER,
                problem_index=problem_index,
                text=line.strip(),
            )
        )
