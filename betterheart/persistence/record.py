"""
Flattened assessment record handed to the persistence collaborator.

Built once, at the 3 -> 4 transition, as a frozen snapshot so later edits
or a reset of the live answer set cannot reach an in-flight save.
"""

from dataclasses import dataclass
from datetime import datetime, timezone

from betterheart.core.types import AnswerSet, Identity, Results
from betterheart.scoring.bmi import parse_leading_number


@dataclass(frozen=True)
class AssessmentRecord:
    """
    One saved assessment in the persisted schema.

    Optional text fields are None when blank, never an empty string.
    """

    user_id: str
    name: str
    age: float | None
    height: float | None
    weight: float | None
    ethnicity: str | None
    gender: str | None
    family_history: bool
    family_history_details: str | None
    diabetes: bool
    hypertension: bool
    dyslipidemia: bool
    bmi: float
    bmi_category: str
    cv_risk_level: str
    sleep_apnea_risk: str
    heart_attack_risk: str
    assessment_date: str  # ISO-8601

    @classmethod
    def build(
        cls,
        answers: AnswerSet,
        results: Results,
        identity: Identity,
        timestamp: datetime | None = None,
    ) -> "AssessmentRecord":
        """
        Snapshot answers and results into a record.

        Args:
            answers: Live answer set (values are copied)
            results: Results of the scoring pass
            identity: Identity the record belongs to
            timestamp: Assessment time (default: now, UTC)

        Returns:
            Frozen record
        """
        timestamp = timestamp or datetime.now(timezone.utc)
        gender = answers.gender
        return cls(
            user_id=identity.user_id,
            name=answers.name,
            age=parse_leading_number(answers.age),
            height=parse_leading_number(answers.height),
            weight=parse_leading_number(answers.weight),
            ethnicity=_blank_to_none(answers.ethnicity),
            gender=str(getattr(gender, "value", gender)) if gender else None,
            family_history=bool(answers.family_history),
            family_history_details=_blank_to_none(answers.family_history_details),
            diabetes=bool(answers.diabetes),
            hypertension=bool(answers.hypertension),
            dyslipidemia=bool(answers.dyslipidemia),
            bmi=results.bmi,
            bmi_category=results.bmi_category.value,
            cv_risk_level=results.risk_level.value,
            sleep_apnea_risk=results.sleep_apnea_risk.value,
            heart_attack_risk=results.heart_attack_risk.value,
            assessment_date=timestamp.isoformat(),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "user_id": self.user_id,
            "name": self.name,
            "age": self.age,
            "height": self.height,
            "weight": self.weight,
            "ethnicity": self.ethnicity,
            "gender": self.gender,
            "family_history": self.family_history,
            "family_history_details": self.family_history_details,
            "diabetes": self.diabetes,
            "hypertension": self.hypertension,
            "dyslipidemia": self.dyslipidemia,
            "bmi": self.bmi,
            "bmi_category": self.bmi_category,
            "cv_risk_level": self.cv_risk_level,
            "sleep_apnea_risk": self.sleep_apnea_risk,
            "heart_attack_risk": self.heart_attack_risk,
            "assessment_date": self.assessment_date,
        }


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text if text.strip() else None
