"""
Constants for Better Heart.

These thresholds are FROZEN. They are exact ports of the scoring rules
and must not drift: no tuning, no calibration.
"""

from typing import Final

# =============================================================================
# BMI CATEGORY THRESHOLDS (FROZEN)
# =============================================================================
# Half-open intervals: lower bound inclusive, upper bound exclusive.

BMI_UNDERWEIGHT_BELOW: Final[float] = 18.5
BMI_OVERWEIGHT_FROM: Final[float] = 25.0
BMI_OBESE_FROM: Final[float] = 30.0
BMI_SEVERELY_OBESE_FROM: Final[float] = 35.0  # Sleep apnea top tier only

BMI_DECIMALS: Final[int] = 1

# =============================================================================
# CARDIOVASCULAR RISK (FROZEN)
# =============================================================================
# +1 per factor, max 6.

CV_POINTS_PER_FACTOR: Final[int] = 1
CV_AGE_FROM: Final[int] = 65
CV_LOW_MAX: Final[int] = 0
CV_MODERATE_MAX: Final[int] = 2  # 0 -> Low, 1..2 -> Moderate, >=3 -> High

# =============================================================================
# SLEEP APNEA RISK (FROZEN)
# =============================================================================

SLEEP_APNEA_BMI_TIERS: Final[tuple[tuple[float, int], ...]] = (
    (BMI_SEVERELY_OBESE_FROM, 3),
    (BMI_OBESE_FROM, 2),
    (BMI_OVERWEIGHT_FROM, 1),
)
SLEEP_APNEA_AGE_FROM: Final[int] = 50
SLEEP_APNEA_MALE_POINTS: Final[int] = 1
SLEEP_APNEA_AGE_POINTS: Final[int] = 1
SLEEP_APNEA_HYPERTENSION_POINTS: Final[int] = 2
SLEEP_APNEA_LOW_MAX: Final[int] = 3
SLEEP_APNEA_MODERATE_MAX: Final[int] = 7

# =============================================================================
# HEART ATTACK RISK (FROZEN)
# =============================================================================

HEART_ATTACK_AGE_TIERS: Final[tuple[tuple[int, int], ...]] = (
    (65, 3),
    (55, 2),
    (45, 1),
)
HEART_ATTACK_MALE_AGE_FROM: Final[int] = 45
HEART_ATTACK_FEMALE_AGE_FROM: Final[int] = 55
HEART_ATTACK_GENDER_POINTS: Final[int] = 1
HEART_ATTACK_BMI_TIERS: Final[tuple[tuple[float, int], ...]] = (
    (BMI_OBESE_FROM, 2),
    (BMI_OVERWEIGHT_FROM, 1),
)
HEART_ATTACK_FAMILY_HISTORY_POINTS: Final[int] = 3
HEART_ATTACK_CONDITION_POINTS: Final[int] = 2  # diabetes, hypertension, dyslipidemia
HEART_ATTACK_LOW_MAX: Final[int] = 4
HEART_ATTACK_MODERATE_MAX: Final[int] = 9

# Max total: 3 + 1 + 2 + 3 + 2 + 2 + 2 = 15
assert (
    HEART_ATTACK_AGE_TIERS[0][1]
    + HEART_ATTACK_GENDER_POINTS
    + HEART_ATTACK_BMI_TIERS[0][1]
    + HEART_ATTACK_FAMILY_HISTORY_POINTS
    + 3 * HEART_ATTACK_CONDITION_POINTS
) == 15, "Heart attack score ceiling must be 15"

# =============================================================================
# WIZARD
# =============================================================================

TOTAL_STEPS: Final[int] = 6
PROGRESS_STEPS: Final[int] = 4  # Steps shown in the progress bar (1..4)

# =============================================================================
# USER-FACING NOTICES (defaults, overridable via config/messages.yaml)
# =============================================================================

DEFAULT_MESSAGES: Final[dict[str, str]] = {
    "validation_failed": "Please fill in all required fields",
    "save_succeeded": "Assessment saved successfully!",
    "save_failed": "Failed to save assessment",
}
