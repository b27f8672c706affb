import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from .app import run_session, setup_logging
from .config import QuizConfig, settings
from .exceptions import QuizError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=settings.PROJECT_NAME,
        description="Timed quiz over question/answer pairs from a CSV file.",
    )
    parser.add_argument(
        "--file",
        default=settings.PROBLEM_FILE,
        help="CSV file of question,answer rows (default: %(default)s)",
    )
    parser.add_argument(
        "--shuffle",
        action=argparse.BooleanOptionalAction,
        default=settings.SHUFFLE,
        help="shuffle the question order (default: %(default)s)",
    )
    parser.add_argument(
        "--timer",
        type=float,
        default=settings.TIME_LIMIT_SECONDS,
        help="time limit for the whole quiz in seconds (default: %(default)s)",
    )
    parser.add_argument(
        "--review",
        action="store_true",
        help="list every question with the expected answer at the end",
    )
    parser.add_argument(
        "--log-dir",
        default=settings.LOG_DIR,
        help="directory for the log file (default: %(default)s)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = QuizConfig(
            problem_file=args.file,
            shuffle=args.shuffle,
            time_limit=args.timer,
            review=args.review,
        )
    except ValidationError:
        parser.error("--timer must be a finite number greater than 0")

    setup_logging(args.log_dir)
    try:
        run_session(config)
    except QuizError as e:
        logger.error(f"Quiz not started: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
