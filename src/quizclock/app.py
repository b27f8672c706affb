import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional, TextIO

from .config import QuizConfig, settings
from .controller import QuizController
from .models import QuizOutcome
from .problems import load_problems, shuffle_problems
from .report import report


# --- Logging Setup ---
def setup_logging(log_dir: Optional[str] = None):
    logger = logging.getLogger("quizclock")
    logger.setLevel(logging.INFO)

    log_dir = log_dir or settings.LOG_DIR
    if not os.path.exists(log_dir):
        os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, settings.LOG_FILE)
    file_handler = RotatingFileHandler(log_path, maxBytes=5_000_000, backupCount=3)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    )
    logger.addHandler(file_handler)
    logger.propagate = False
    # The terminal is the quiz screen; other libraries may still warn there
    logging.basicConfig(level=logging.WARNING)
    return file_handler


# --- Controller Factory ---
def create_controller(
    config: QuizConfig,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> QuizController:
    problems = load_problems(config.problem_file)
    if config.shuffle:
        problems = shuffle_problems(problems)
    return QuizController(problems, config, stdin=stdin, stdout=stdout)


def run_session(
    config: QuizConfig,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> QuizOutcome:
    """Loads the problems, waits for Enter, runs the quiz and prints the tally."""
    controller = create_controller(config, stdin=stdin, stdout=stdout)
    controller.wait_for_start()
    outcome = controller.run()
    report(outcome, controller.stdout, review=config.review)
    controller.mark_reported()
    return outcome
