import os

from pydantic import BaseModel, Field


class Settings:
    PROJECT_NAME: str = "quizclock"
    LOG_DIR: str = os.environ.get("QUIZCLOCK_LOG_DIR", "log")
    LOG_FILE: str = "quizclock.log"
    PROBLEM_FILE: str = os.environ.get("QUIZCLOCK_FILE", "problems.csv")
    TIME_LIMIT_SECONDS: float = float(os.environ.get("QUIZCLOCK_TIMER", "10"))
    SHUFFLE: bool = True
    START_PROMPT: str = "Press [Enter] to start the quiz!"
    ANSWER_PROMPT: str = "Please enter the answer: "


settings = Settings()


class QuizConfig(BaseModel):
    """Per-session options handed to the controller."""

    problem_file: str = settings.PROBLEM_FILE
    shuffle: bool = settings.SHUFFLE
    time_limit: float = Field(
        default=settings.TIME_LIMIT_SECONDS, gt=0, allow_inf_nan=False
    )
    review: bool = False
