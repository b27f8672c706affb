import sys
from typing import Optional, TextIO

from .models import QuizOutcome, SessionState


def format_outcome(outcome: QuizOutcome, review: bool = False) -> str:
    lines = []
    if outcome.state is SessionState.TIMED_OUT:
        lines.append("Time's up.")
    lines.append(
        f"Total: {outcome.total_questions}, "
        f"Attempted: {outcome.total_attempted}, "
        f"Correct: {outcome.correct}, "
        f"Wrong: {outcome.incorrect} "
        f"({outcome.correct} / {outcome.total_questions}, "
        f"{outcome.score_percentage}%)"
    )

    if review:
        for number, record in enumerate(outcome.records, start=1):
            if not record.attempted:
                mark = "-"
                given = "(no answer)"
            else:
                mark = "ok" if record.is_correct else "x"
                given = record.user_answer
            lines.append(
                f"  [{mark}] {number}. {record.question} -> {given} "
                f"(answer: {record.correct_answer})"
            )

    return "\n".join(lines)


def report(outcome: QuizOutcome, stream: Optional[TextIO] = None, review: bool = False):
    stream = stream if stream is not None else sys.stdout
    stream.write("\n" + format_outcome(outcome, review=review) + "\n")
    stream.flush()
