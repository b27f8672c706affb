import logging
import os
import random
import time
from typing import List, Optional

import pandas as pd

from .exceptions import DataFormatError
from .models import Problem

logger = logging.getLogger(__name__)

QUESTION_COLUMN = 0
ANSWER_COLUMN = 1


def load_problems(path: str) -> List[Problem]:
    """Loads question/answer pairs from a headerless two-column CSV file.

    Any record without exactly two fields makes the whole file invalid. Empty
    fields are kept as empty strings, and an empty file gives no problems.
    """
    if not os.path.isfile(path):
        raise DataFormatError(path, "file not found")

    try:
        df = pd.read_csv(
            path,
            header=None,
            dtype=str,
            keep_default_na=False,
            encoding="utf-8",
        )
    except pd.errors.EmptyDataError:
        logger.warning(f"No problems found in {path}")
        return []
    except pd.errors.ParserError as e:
        raise DataFormatError(path, f"malformed record ({e})")
    except (OSError, UnicodeDecodeError) as e:
        raise DataFormatError(path, f"cannot read file ({e})")

    if len(df.columns) != 2:
        raise DataFormatError(
            path, f"expected 2 fields per record, found {len(df.columns)}"
        )

    # Only rows that ran out of fields are NaN, empty fields read as ""
    short = df[df[ANSWER_COLUMN].isna()]
    if not short.empty:
        question = short.iloc[0][QUESTION_COLUMN]
        raise DataFormatError(
            path, f"record starting {question!r} does not have 2 fields"
        )

    problems = [
        Problem(question=row[QUESTION_COLUMN], expected_answer=row[ANSWER_COLUMN])
        for row in df.itertuples(index=False, name=None)
    ]
    logger.info(f"Loaded {len(problems)} problems from {path}")
    return problems


def shuffle_problems(
    problems: List[Problem], rng: Optional[random.Random] = None
) -> List[Problem]:
    """Returns a uniformly shuffled copy of ``problems``."""
    if rng is None:
        rng = random.Random(time.time_ns())
    shuffled = list(problems)
    rng.shuffle(shuffled)
    return shuffled
