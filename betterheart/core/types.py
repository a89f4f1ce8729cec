"""
Core type definitions for Better Heart.

Defines enums and dataclasses for the assessment wizard and its results.
"""

from dataclasses import dataclass, field, fields
from enum import Enum, IntEnum
from typing import Any

from betterheart.core.constants import (
    BMI_OBESE_FROM,
    BMI_OVERWEIGHT_FROM,
    BMI_UNDERWEIGHT_BELOW,
)


class Step(IntEnum):
    """
    The six ordered steps of the assessment wizard.

    Only PERSONAL_INFO and BODY_METRICS gate forward navigation.
    Leaving MEDICAL_HISTORY triggers the one scoring pass.
    """

    WELCOME = 0
    PERSONAL_INFO = 1
    BODY_METRICS = 2
    MEDICAL_HISTORY = 3
    RESULTS = 4
    RESOURCES = 5

    @property
    def title(self) -> str:
        """Human-readable step title."""
        return self.name.replace("_", " ").title()


class Gender(str, Enum):
    """Gender options offered by the personal info step."""

    MALE = "Male"
    FEMALE = "Female"


class BMICategory(str, Enum):
    """
    BMI categories.

    Thresholds (half-open):
        - Underweight: < 18.5
        - Normal weight: [18.5, 25)
        - Overweight: [25, 30)
        - Obese: >= 30
    """

    UNDERWEIGHT = "Underweight"
    NORMAL = "Normal weight"
    OVERWEIGHT = "Overweight"
    OBESE = "Obese"

    @classmethod
    def from_bmi(cls, bmi: float) -> "BMICategory":
        """
        Convert a BMI value to its category.

        Args:
            bmi: BMI in kg/m^2

        Returns:
            Corresponding category
        """
        if bmi < BMI_UNDERWEIGHT_BELOW:
            return cls.UNDERWEIGHT
        elif bmi < BMI_OVERWEIGHT_FROM:
            return cls.NORMAL
        elif bmi < BMI_OBESE_FROM:
            return cls.OVERWEIGHT
        else:
            return cls.OBESE


class RiskLevel(str, Enum):
    """Categorical output of every risk function."""

    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"

    @classmethod
    def from_score(cls, score: int, low_max: int, moderate_max: int) -> "RiskLevel":
        """
        Map an integer score to a risk level.

        Args:
            score: Summed factor points
            low_max: Highest score still considered Low
            moderate_max: Highest score still considered Moderate

        Returns:
            Corresponding risk level
        """
        if score <= low_max:
            return cls.LOW
        elif score <= moderate_max:
            return cls.MODERATE
        else:
            return cls.HIGH


@dataclass(frozen=True)
class RiskFactor:
    """A single contribution to a risk score."""

    name: str
    points: int


@dataclass(frozen=True)
class RiskScore:
    """
    Breakdown of one risk function.

    The level is always derived from the sum of the factor points.
    """

    name: str
    score: int
    level: RiskLevel
    factors: tuple[RiskFactor, ...] = ()

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "score": self.score,
            "level": self.level.value,
            "factors": [{"name": f.name, "points": f.points} for f in self.factors],
        }


@dataclass(frozen=True)
class Identity:
    """Externally supplied user identity. Never owned by the session."""

    user_id: str
    full_name: str = ""
    email: str | None = None


@dataclass
class AnswerSet:
    """
    Mutable record of every user-entered field.

    Values are stored exactly as the host supplies them (often text);
    numeric parsing happens in the step gates and the scoring engine.
    """

    name: str = ""
    age: float | str | None = None
    height: float | str | None = None  # centimeters
    weight: float | str | None = None  # kilograms
    ethnicity: str = ""
    gender: Gender | str | None = None
    family_history: bool = False
    family_history_details: str = ""
    diabetes: bool = False
    hypertension: bool = False
    dyslipidemia: bool = False

    # Host field names that differ from the attribute names
    ALIASES = {
        "familyHistory": "family_history",
        "familyHistoryDetails": "family_history_details",
    }

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        """Names of all answer fields."""
        return tuple(f.name for f in fields(cls))

    @classmethod
    def resolve_field(cls, name: str) -> str:
        """
        Resolve a host or attribute field name.

        Raises:
            KeyError: If the name is not an answer field
        """
        resolved = cls.ALIASES.get(name, name)
        if resolved not in cls.field_names():
            raise KeyError(f"Unknown answer field: {name}")
        return resolved

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary (a copy, safe to hand off)."""
        return {name: getattr(self, name) for name in self.field_names()}


@dataclass(frozen=True)
class Results:
    """
    Derived output of one scoring pass.

    Immutable once produced. A new assessment pass replaces it wholesale.
    """

    bmi: float
    bmi_category: BMICategory
    risk_level: RiskLevel  # Cardiovascular
    sleep_apnea_risk: RiskLevel
    heart_attack_risk: RiskLevel
    breakdown: tuple[RiskScore, ...] = field(default=(), compare=False)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "bmi": self.bmi,
            "bmi_category": self.bmi_category.value,
            "risk_level": self.risk_level.value,
            "sleep_apnea_risk": self.sleep_apnea_risk.value,
            "heart_attack_risk": self.heart_attack_risk.value,
            "breakdown": [score.to_dict() for score in self.breakdown],
        }

    def score_for(self, name: str) -> RiskScore | None:
        """Look up a risk breakdown by name."""
        for score in self.breakdown:
            if score.name == name:
                return score
        return None

    @property
    def has_high_risk(self) -> bool:
        """Whether any of the three risks is High."""
        return RiskLevel.HIGH in (
            self.risk_level,
            self.sleep_apnea_risk,
            self.heart_attack_risk,
        )

