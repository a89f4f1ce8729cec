"""Scoring module for Better Heart."""

from betterheart.scoring.bmi import (
    categorize_bmi,
    compute_bmi,
    parse_leading_number,
    parse_number,
)
from betterheart.scoring.engine import RiskEngine
from betterheart.scoring.risk import (
    cardiovascular_factors,
    cardiovascular_risk,
    cardiovascular_score,
    heart_attack_factors,
    heart_attack_risk,
    heart_attack_score,
    sleep_apnea_factors,
    sleep_apnea_risk,
    sleep_apnea_score,
)

__all__ = [
    "RiskEngine",
    "cardiovascular_factors",
    "cardiovascular_risk",
    "cardiovascular_score",
    "categorize_bmi",
    "compute_bmi",
    "heart_attack_factors",
    "heart_attack_risk",
    "heart_attack_score",
    "parse_leading_number",
    "parse_number",
    "sleep_apnea_factors",
    "sleep_apnea_risk",
    "sleep_apnea_score",
]
