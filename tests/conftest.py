import logging
import queue

import pytest

from quizclock.models import Problem


class QueueStream:
    """Line stream whose readline blocks until a line is fed, like a terminal."""

    def __init__(self, *lines):
        self._lines = queue.Queue()
        for line in lines:
            self.feed(line)

    def feed(self, line):
        self._lines.put(line)

    def close(self):
        self._lines.put("")

    def readline(self):
        return self._lines.get()


class BrokenStream:
    def readline(self):
        raise OSError("input/output error")


@pytest.fixture
def write_csv(tmp_path):
    def _write(content, name="problems.csv"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def sample_csv(write_csv):
    return write_csv("2+2,4\ncapital of France,Paris\n1+1,2\n")


@pytest.fixture
def problems():
    return [
        Problem(question="2+2", expected_answer="4"),
        Problem(question="capital of France", expected_answer="Paris"),
        Problem(question="1+1", expected_answer="2"),
    ]


@pytest.fixture(autouse=True)
def reset_quizclock_logger():
    logger = logging.getLogger("quizclock")
    handlers = list(logger.handlers)
    yield
    for handler in logger.handlers[:]:
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.propagate = True
