"""
Risk scoring functions for Better Heart.

Each risk is a sum of integer factor points mapped to Low / Moderate / High.
The *_factors functions list the contributions; the label functions are
defined over their sum so the two can never disagree.

Every function reads answer fields and the already-computed BMI only,
never the output of another risk function.
"""

from betterheart.core.constants import (
    BMI_OBESE_FROM,
    CV_AGE_FROM,
    CV_LOW_MAX,
    CV_MODERATE_MAX,
    CV_POINTS_PER_FACTOR,
    HEART_ATTACK_AGE_TIERS,
    HEART_ATTACK_BMI_TIERS,
    HEART_ATTACK_CONDITION_POINTS,
    HEART_ATTACK_FAMILY_HISTORY_POINTS,
    HEART_ATTACK_FEMALE_AGE_FROM,
    HEART_ATTACK_GENDER_POINTS,
    HEART_ATTACK_LOW_MAX,
    HEART_ATTACK_MALE_AGE_FROM,
    HEART_ATTACK_MODERATE_MAX,
    SLEEP_APNEA_AGE_FROM,
    SLEEP_APNEA_AGE_POINTS,
    SLEEP_APNEA_BMI_TIERS,
    SLEEP_APNEA_HYPERTENSION_POINTS,
    SLEEP_APNEA_LOW_MAX,
    SLEEP_APNEA_MALE_POINTS,
    SLEEP_APNEA_MODERATE_MAX,
)
from betterheart.core.types import AnswerSet, Gender, RiskFactor, RiskLevel, RiskScore
from betterheart.scoring.bmi import parse_number


CARDIOVASCULAR = "cardiovascular"
SLEEP_APNEA = "sleep_apnea"
HEART_ATTACK = "heart_attack"


def answer_age(answers: AnswerSet) -> float:
    """Numeric age, 0 when the answer does not parse."""
    age = parse_number(answers.age)
    return age if age is not None else 0.0


def _tier(value: float, tiers: tuple[tuple[float, int], ...]) -> tuple[float, int] | None:
    """Highest applicable tier (tiers sorted high to low), exclusive."""
    for threshold, points in tiers:
        if value >= threshold:
            return threshold, points
    return None


def _total(factors: list[RiskFactor]) -> int:
    return sum(f.points for f in factors)


# =============================================================================
# CARDIOVASCULAR
# =============================================================================


def cardiovascular_factors(answers: AnswerSet, bmi: float) -> list[RiskFactor]:
    """
    Cardiovascular risk contributions.

    +1 each for family history, diabetes, hypertension, dyslipidemia,
    BMI >= 30 and age >= 65 (max 6).
    """
    factors: list[RiskFactor] = []
    if answers.family_history:
        factors.append(RiskFactor("family_history", CV_POINTS_PER_FACTOR))
    if answers.diabetes:
        factors.append(RiskFactor("diabetes", CV_POINTS_PER_FACTOR))
    if answers.hypertension:
        factors.append(RiskFactor("hypertension", CV_POINTS_PER_FACTOR))
    if answers.dyslipidemia:
        factors.append(RiskFactor("dyslipidemia", CV_POINTS_PER_FACTOR))
    if bmi >= BMI_OBESE_FROM:
        factors.append(RiskFactor(f"bmi_{BMI_OBESE_FROM:g}_plus", CV_POINTS_PER_FACTOR))
    if answer_age(answers) >= CV_AGE_FROM:
        factors.append(RiskFactor(f"age_{CV_AGE_FROM}_plus", CV_POINTS_PER_FACTOR))
    return factors


def cardiovascular_risk(answers: AnswerSet, bmi: float) -> RiskLevel:
    """Cardiovascular risk: 0 Low, 1..2 Moderate, >=3 High."""
    return cardiovascular_score(answers, bmi).level


def cardiovascular_score(answers: AnswerSet, bmi: float) -> RiskScore:
    """Full cardiovascular breakdown."""
    factors = cardiovascular_factors(answers, bmi)
    score = _total(factors)
    return RiskScore(
        name=CARDIOVASCULAR,
        score=score,
        level=RiskLevel.from_score(score, CV_LOW_MAX, CV_MODERATE_MAX),
        factors=tuple(factors),
    )


# =============================================================================
# SLEEP APNEA
# =============================================================================


def sleep_apnea_factors(answers: AnswerSet, bmi: float) -> list[RiskFactor]:
    """
    Sleep apnea risk contributions.

    BMI tier is exclusive (>=35 +3, else >=30 +2, else >=25 +1);
    +1 age >= 50; +1 male; +2 hypertension.
    """
    factors: list[RiskFactor] = []
    tier = _tier(bmi, SLEEP_APNEA_BMI_TIERS)
    if tier is not None:
        threshold, points = tier
        factors.append(RiskFactor(f"bmi_{threshold:g}_plus", points))
    if answer_age(answers) >= SLEEP_APNEA_AGE_FROM:
        factors.append(RiskFactor(f"age_{SLEEP_APNEA_AGE_FROM}_plus", SLEEP_APNEA_AGE_POINTS))
    if answers.gender == Gender.MALE:
        factors.append(RiskFactor("male", SLEEP_APNEA_MALE_POINTS))
    if answers.hypertension:
        factors.append(RiskFactor("hypertension", SLEEP_APNEA_HYPERTENSION_POINTS))
    return factors


def sleep_apnea_risk(answers: AnswerSet, bmi: float) -> RiskLevel:
    """Sleep apnea risk: <=3 Low, 4..7 Moderate, >=8 High."""
    return sleep_apnea_score(answers, bmi).level


def sleep_apnea_score(answers: AnswerSet, bmi: float) -> RiskScore:
    """Full sleep apnea breakdown."""
    factors = sleep_apnea_factors(answers, bmi)
    score = _total(factors)
    return RiskScore(
        name=SLEEP_APNEA,
        score=score,
        level=RiskLevel.from_score(score, SLEEP_APNEA_LOW_MAX, SLEEP_APNEA_MODERATE_MAX),
        factors=tuple(factors),
    )


# =============================================================================
# HEART ATTACK
# =============================================================================


def heart_attack_factors(answers: AnswerSet, bmi: float) -> list[RiskFactor]:
    """
    Heart attack risk contributions.

    Age tier exclusive (>=65 +3, else >=55 +2, else >=45 +1).
    The gender/age checks are independent of the age tier:
    +1 male and age >= 45, +1 female and age >= 55.
    BMI tier exclusive (>=30 +2, else >=25 +1).
    +3 family history; +2 each diabetes, hypertension, dyslipidemia.
    """
    age = answer_age(answers)
    factors: list[RiskFactor] = []

    age_tier = _tier(age, HEART_ATTACK_AGE_TIERS)
    if age_tier is not None:
        threshold, points = age_tier
        factors.append(RiskFactor(f"age_{threshold:g}_plus", points))
    if answers.gender == Gender.MALE and age >= HEART_ATTACK_MALE_AGE_FROM:
        factors.append(RiskFactor("male_age", HEART_ATTACK_GENDER_POINTS))
    if answers.gender == Gender.FEMALE and age >= HEART_ATTACK_FEMALE_AGE_FROM:
        factors.append(RiskFactor("female_age", HEART_ATTACK_GENDER_POINTS))

    bmi_tier = _tier(bmi, HEART_ATTACK_BMI_TIERS)
    if bmi_tier is not None:
        threshold, points = bmi_tier
        factors.append(RiskFactor(f"bmi_{threshold:g}_plus", points))

    if answers.family_history:
        factors.append(RiskFactor("family_history", HEART_ATTACK_FAMILY_HISTORY_POINTS))
    if answers.diabetes:
        factors.append(RiskFactor("diabetes", HEART_ATTACK_CONDITION_POINTS))
    if answers.hypertension:
        factors.append(RiskFactor("hypertension", HEART_ATTACK_CONDITION_POINTS))
    if answers.dyslipidemia:
        factors.append(RiskFactor("dyslipidemia", HEART_ATTACK_CONDITION_POINTS))
    return factors


def heart_attack_risk(answers: AnswerSet, bmi: float) -> RiskLevel:
    """Heart attack risk: <=4 Low, 5..9 Moderate, >=10 High."""
    return heart_attack_score(answers, bmi).level


def heart_attack_score(answers: AnswerSet, bmi: float) -> RiskScore:
    """Full heart attack breakdown."""
    factors = heart_attack_factors(answers, bmi)
    score = _total(factors)
    return RiskScore(
        name=HEART_ATTACK,
        score=score,
        level=RiskLevel.from_score(score, HEART_ATTACK_LOW_MAX, HEART_ATTACK_MODERATE_MAX),
        factors=tuple(factors),
    )
