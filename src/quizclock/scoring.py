from typing import Dict, List

from .models import AnswerRecord, Problem, QuizOutcome, Response, SessionState


def matches(given: str, expected: str) -> bool:
    """Case-insensitive equality after trimming surrounding whitespace."""
    return given.strip().casefold() == expected.strip().casefold()


def tally(
    problems: List[Problem], responses: List[Response], state: SessionState
) -> QuizOutcome:
    by_index: Dict[int, Response] = {
        r.problem_index: r for r in responses if r.submitted
    }

    correct = 0
    incorrect = 0
    records = []
    for index, problem in enumerate(problems):
        response = by_index.get(index)
        if response is None:
            records.append(
                AnswerRecord(
                    question=problem.question,
                    user_answer="",
                    correct_answer=problem.expected_answer,
                    is_correct=False,
                    attempted=False,
                )
            )
            continue

        is_correct = matches(response.raw_text, problem.expected_answer)
        if is_correct:
            correct += 1
        else:
            incorrect += 1
        records.append(
            AnswerRecord(
                question=problem.question,
                user_answer=response.raw_text,
                correct_answer=problem.expected_answer,
                is_correct=is_correct,
                attempted=True,
            )
        )

    return QuizOutcome(
        total_questions=len(problems),
        total_attempted=correct + incorrect,
        correct=correct,
        incorrect=incorrect,
        state=state,
        records=records,
    )
