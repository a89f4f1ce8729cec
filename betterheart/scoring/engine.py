"""
Risk scoring engine for Better Heart.

Orchestrates one full scoring pass:
1. Parse and guard body measurements
2. Calculate BMI and its category
3. Score the three risks from the same BMI
4. Return an immutable Results record
"""

import logging

from betterheart.core.exceptions import InvalidMeasurementError
from betterheart.core.types import AnswerSet, Results
from betterheart.scoring.bmi import (
    categorize_bmi,
    compute_bmi,
    parse_leading_number,
    parse_number,
)
from betterheart.scoring.risk import (
    cardiovascular_score,
    heart_attack_score,
    sleep_apnea_score,
)


logger = logging.getLogger(__name__)


class RiskEngine:
    """
    Better Heart scoring engine.

    Transforms a finalized answer set into BMI, BMI category and the
    cardiovascular, sleep apnea and heart attack risk labels.
    """

    def calculate(self, answers: AnswerSet) -> Results:
        """
        Run one scoring pass.

        Args:
            answers: Answer set that passed the body metrics gate

        Returns:
            Results with BMI, category and risk labels

        Raises:
            InvalidMeasurementError: If height or weight is not a positive number
        """
        height = self._positive_measurement("height", answers.height)
        weight = self._positive_measurement("weight", answers.weight)

        if answers.age not in (None, "") and parse_number(answers.age) is None:
            logger.warning(
                f"Age {answers.age!r} is not numeric; age factors will not apply"
            )

        # Step 1: BMI (guarded above, height > 0)
        bmi = compute_bmi(weight, height)
        category = categorize_bmi(bmi)

        # Step 2: Risk scores, each reading answers + BMI only
        cardiovascular = cardiovascular_score(answers, bmi)
        sleep_apnea = sleep_apnea_score(answers, bmi)
        heart_attack = heart_attack_score(answers, bmi)

        logger.debug(
            f"Scores: cardiovascular={cardiovascular.score}, "
            f"sleep_apnea={sleep_apnea.score}, heart_attack={heart_attack.score}"
        )

        return Results(
            bmi=bmi,
            bmi_category=category,
            risk_level=cardiovascular.level,
            sleep_apnea_risk=sleep_apnea.level,
            heart_attack_risk=heart_attack.level,
            breakdown=(cardiovascular, sleep_apnea, heart_attack),
        )

    @staticmethod
    def _positive_measurement(field: str, value: object) -> float:
        """
        Parse a body measurement that must be strictly positive.

        Args:
            field: Answer field name (for the error)
            value: Raw answer value

        Returns:
            Parsed measurement
        """
        number = parse_leading_number(value)
        if number is None or number <= 0:
            raise InvalidMeasurementError(
                f"{field.capitalize()} must be a positive number, got {value!r}",
                field=field,
                value=value,
            )
        return number

    def get_diagnostics(self, results: Results) -> dict:
        """
        Get diagnostic information from results.

        Args:
            results: Results of a scoring pass

        Returns:
            Dict with per-risk scores and contributing factors
        """
        return {
            "bmi": results.bmi,
            "bmi_category": results.bmi_category.value,
            "scores": {score.name: score.score for score in results.breakdown},
            "levels": {score.name: score.level.value for score in results.breakdown},
            "factors": {
                score.name: [f.name for f in score.factors]
                for score in results.breakdown
            },
        }
