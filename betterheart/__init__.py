"""
Better Heart - guided heart health self-assessment.

Walks a user through personal info, body metrics and medical history,
then derives risk indicators from the answers.

Outputs:
    - BMI (one decimal) and category
    - Cardiovascular, sleep apnea and heart attack risk: Low / Moderate / High
    - Human-readable explanation of the contributing factors

Design Philosophy:
    - Fixed integer point scores, no fitted parameters
    - Results are computed once, when medical history is completed
    - Informational only, not a diagnosis
"""

from betterheart.core.types import (
    AnswerSet,
    BMICategory,
    Gender,
    Identity,
    Results,
    RiskLevel,
    Step,
)
from betterheart.scoring.engine import RiskEngine
from betterheart.session.assessment import AssessmentSession

__version__ = "1.0.0"

__all__ = [
    "AnswerSet",
    "AssessmentSession",
    "BMICategory",
    "Gender",
    "Identity",
    "Results",
    "RiskEngine",
    "RiskLevel",
    "Step",
    "__version__",
]
