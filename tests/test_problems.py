import random
from collections import Counter

import pytest

from quizclock.exceptions import DataFormatError
from quizclock.models import Problem
from quizclock.problems import load_problems, shuffle_problems


def test_load_problems_keeps_row_order(sample_csv):
    problems = load_problems(sample_csv)

    assert problems == [
        Problem(question="2+2", expected_answer="4"),
        Problem(question="capital of France", expected_answer="Paris"),
        Problem(question="1+1", expected_answer="2"),
    ]


def test_load_problems_reads_values_as_text(write_csv):
    path = write_csv('"5,000 + 1",5001\nNA,None\n007,7\n')

    problems = load_problems(path)

    assert problems[0].question == "5,000 + 1"
    assert problems[1] == Problem(question="NA", expected_answer="None")
    assert problems[2].question == "007"


def test_load_problems_missing_file(tmp_path):
    with pytest.raises(DataFormatError) as exc_info:
        load_problems(str(tmp_path / "nope.csv"))
    assert "not found" in str(exc_info.value)


def test_load_problems_empty_file_gives_no_problems(write_csv):
    assert load_problems(write_csv("")) == []


def test_load_problems_keeps_empty_fields(write_csv):
    path = write_csv('what is the empty string?,""\nq,\n2+2,4\n')

    problems = load_problems(path)

    assert problems[0] == Problem(
        question="what is the empty string?", expected_answer=""
    )
    assert problems[1] == Problem(question="q", expected_answer="")
    assert len(problems) == 3


def test_load_problems_names_the_short_record(write_csv):
    path = write_csv("2+2,4\n\n\nlonely\n1+1,2\n")

    with pytest.raises(DataFormatError) as exc_info:
        load_problems(path)

    assert "'lonely' does not have 2 fields" in str(exc_info.value)


@pytest.mark.parametrize(
    "content",
    [
        "2+2,4\n1+1,2,extra\n",
        "2+2,4,extra\n1+1,2\n",
        "2+2,4\nlonely\n1+1,2\n",
        "single column\nanother\n",
    ],
)
def test_load_problems_rejects_wrong_field_count(write_csv, content):
    with pytest.raises(DataFormatError):
        load_problems(write_csv(content))


def test_shuffle_returns_new_permutation(problems):
    original = list(problems)

    shuffled = shuffle_problems(problems, random.Random(7))

    assert shuffled is not problems
    assert problems == original
    assert sorted(shuffled, key=lambda p: p.question) == sorted(
        original, key=lambda p: p.question
    )


def test_shuffle_without_rng_keeps_elements(problems):
    assert len(shuffle_problems(problems)) == len(problems)


def test_shuffle_is_roughly_uniform(problems):
    rng = random.Random(1234)
    trials = 6000
    positions = {p.question: Counter() for p in problems}

    for _ in range(trials):
        for position, problem in enumerate(shuffle_problems(problems, rng)):
            positions[problem.question][position] += 1

    expected = trials / len(problems)
    for counts in positions.values():
        for position in range(len(problems)):
            assert abs(counts[position] - expected) < expected * 0.1
