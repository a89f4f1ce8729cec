"""Assessment persistence for Better Heart."""

from betterheart.persistence.record import AssessmentRecord
from betterheart.persistence.store import (
    AssessmentStore,
    IdentityProvider,
    ParquetAssessmentStore,
    StaticIdentityProvider,
)

__all__ = [
    "AssessmentRecord",
    "AssessmentStore",
    "IdentityProvider",
    "ParquetAssessmentStore",
    "StaticIdentityProvider",
]
