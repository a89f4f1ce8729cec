"""
Assessment persistence for Better Heart.

Defines the collaborator interfaces the session talks to and a local
Parquet-backed store that implements the persistence side.
"""

import logging
import threading
from pathlib import Path
from typing import Protocol

import pandas as pd

from betterheart.core.config import Settings, get_settings
from betterheart.core.exceptions import PersistenceError
from betterheart.core.types import Identity
from betterheart.persistence.record import AssessmentRecord


logger = logging.getLogger(__name__)


class IdentityProvider(Protocol):
    """Source of the current user identity."""

    def get_current_identity(self) -> Identity | None:
        """Return the signed-in identity, or None."""
        ...


class AssessmentStore(Protocol):
    """Destination for completed assessments. Raising signals failure."""

    def save_assessment(self, record: AssessmentRecord) -> None:
        """Persist one assessment record."""
        ...


class StaticIdentityProvider:
    """Identity provider that always returns the identity it was given."""

    def __init__(self, identity: Identity | None = None) -> None:
        self.identity = identity

    def get_current_identity(self) -> Identity | None:
        return self.identity


class ParquetAssessmentStore:
    """
    Local assessment history kept in a single Parquet file.

    Appends are serialized with a lock because saves run on background
    workers.
    """

    HISTORY_FILE = "assessment_history.parquet"

    def __init__(
        self,
        output_dir: Path | None = None,
        settings: Settings | None = None,
    ) -> None:
        """
        Initialize the store.

        Args:
            output_dir: Directory for the history file
            settings: Application settings (used when output_dir is omitted)
        """
        if output_dir is None:
            output_dir = (settings or get_settings()).assessments_dir
        self.output_dir = output_dir
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()

    @property
    def history_file(self) -> Path:
        return self.output_dir / self.HISTORY_FILE

    def save_assessment(self, record: AssessmentRecord) -> None:
        """
        Append one record to the history file.

        Args:
            record: Assessment record to save

        Raises:
            PersistenceError: If the history file cannot be read or written
        """
        row = record.to_dict()

        with self._lock:
            try:
                if self.history_file.exists():
                    df = pd.read_parquet(self.history_file)
                    df = pd.concat([df, pd.DataFrame([row])], ignore_index=True)
                    # Remove duplicates by user and timestamp
                    df = df.drop_duplicates(
                        subset=["user_id", "assessment_date"], keep="last"
                    )
                else:
                    df = pd.DataFrame([row])

                df.to_parquet(self.history_file, index=False)
            except (OSError, ValueError) as e:
                raise PersistenceError(
                    f"Failed to save assessment: {e}",
                    path=str(self.history_file),
                ) from e

        logger.info(f"Saved assessment for user {record.user_id} to {self.history_file}")

    def get_history(self, user_id: str | None = None) -> pd.DataFrame:
        """
        Load saved assessments.

        Args:
            user_id: Only return this user's assessments

        Returns:
            DataFrame of records, oldest first
        """
        if not self.history_file.exists():
            return pd.DataFrame()

        with self._lock:
            df = pd.read_parquet(self.history_file)

        if user_id is not None:
            df = df[df["user_id"] == user_id]

        return df.sort_values("assessment_date").reset_index(drop=True)
