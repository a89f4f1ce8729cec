"""Session events and user-facing notices."""

from dataclasses import dataclass
from enum import Enum


class SessionEvent(str, Enum):
    """Mutations observed by session listeners."""

    ANSWER_CHANGED = "answer_changed"
    STEP_CHANGED = "step_changed"
    RESULTS_READY = "results_ready"
    RESET = "reset"


class NoticeLevel(str, Enum):
    """Severity of a user-facing notice."""

    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notice:
    """Non-blocking alert for the presentation layer."""

    level: NoticeLevel
    message: str
