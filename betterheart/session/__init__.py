"""Assessment session state machine for Better Heart."""

from betterheart.session.assessment import AssessmentSession
from betterheart.session.events import Notice, NoticeLevel, SessionEvent

__all__ = [
    "AssessmentSession",
    "Notice",
    "NoticeLevel",
    "SessionEvent",
]
