"""Tests for the risk scoring functions."""

from betterheart.core.types import AnswerSet, Gender, RiskLevel
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


class TestCardiovascularRisk:
    """Tests for cardiovascular risk."""

    def test_scenario_a(self, scenario_a):
        """familyHistory + diabetes + hypertension + BMI>=30 + age>=65 = 5."""
        score = cardiovascular_score(scenario_a, 30.9)

        assert score.score == 5
        assert score.level == RiskLevel.HIGH
        assert cardiovascular_risk(scenario_a, 30.9) == RiskLevel.HIGH

    def test_scenario_b(self, scenario_b):
        assert cardiovascular_score(scenario_b, 22.5).score == 0
        assert cardiovascular_risk(scenario_b, 22.5) == RiskLevel.LOW

    def test_level_boundaries(self):
        """0 Low, 1..2 Moderate, >=3 High."""
        answers = AnswerSet(age=40, diabetes=True)
        assert cardiovascular_risk(answers, 22.0) == RiskLevel.MODERATE

        answers.hypertension = True
        assert cardiovascular_risk(answers, 22.0) == RiskLevel.MODERATE

        answers.dyslipidemia = True
        assert cardiovascular_risk(answers, 22.0) == RiskLevel.HIGH

    def test_maximum_score(self):
        answers = AnswerSet(
            age=80,
            family_history=True,
            diabetes=True,
            hypertension=True,
            dyslipidemia=True,
        )
        assert cardiovascular_score(answers, 40.0).score == 6

    def test_age_and_bmi_thresholds(self):
        """Age 65 and BMI 30 count, 64 and 29.9 do not."""
        assert cardiovascular_score(AnswerSet(age=65), 30.0).score == 2
        assert cardiovascular_score(AnswerSet(age=64), 29.9).score == 0

    def test_factor_names(self, scenario_a):
        names = [f.name for f in cardiovascular_factors(scenario_a, 30.9)]
        assert names == [
            "family_history",
            "diabetes",
            "hypertension",
            "bmi_30_plus",
            "age_65_plus",
        ]


class TestSleepApneaRisk:
    """Tests for sleep apnea risk."""

    def test_scenario_a(self, scenario_a):
        """BMI>=30 (2) + age>=50 (1) + male (1) + hypertension (2) = 6."""
        score = sleep_apnea_score(scenario_a, 30.9)

        assert score.score == 6
        assert score.level == RiskLevel.MODERATE

    def test_scenario_b(self, scenario_b):
        assert sleep_apnea_score(scenario_b, 22.5).score == 0
        assert sleep_apnea_risk(scenario_b, 22.5) == RiskLevel.LOW

    def test_bmi_tier_is_exclusive(self):
        """Only the highest BMI tier applies."""
        answers = AnswerSet(age=20, gender=Gender.FEMALE)
        assert sleep_apnea_score(answers, 24.9).score == 0
        assert sleep_apnea_score(answers, 25.0).score == 1
        assert sleep_apnea_score(answers, 30.0).score == 2
        assert sleep_apnea_score(answers, 35.0).score == 3

    def test_low_moderate_boundary(self):
        """Score 3 is Low, 4 is Moderate."""
        female = AnswerSet(age=20, gender=Gender.FEMALE)
        male = AnswerSet(age=20, gender=Gender.MALE)

        assert sleep_apnea_risk(female, 36.0) == RiskLevel.LOW
        assert sleep_apnea_risk(male, 36.0) == RiskLevel.MODERATE

    def test_maximum_score_is_moderate(self):
        """3 + 1 + 1 + 2 = 7 is the ceiling, so High is never produced."""
        answers = AnswerSet(age=60, gender=Gender.MALE, hypertension=True)
        score = sleep_apnea_score(answers, 50.0)

        assert score.score == 7
        assert score.level == RiskLevel.MODERATE

    def test_hypertension_adds_to_bmi_tier(self):
        answers = AnswerSet(age=20, hypertension=True)
        names = [f.name for f in sleep_apnea_factors(answers, 31.0)]
        assert names == ["bmi_30_plus", "hypertension"]
        assert sleep_apnea_score(answers, 31.0).score == 4


class TestHeartAttackRisk:
    """Tests for heart attack risk."""

    def test_scenario_a(self, scenario_a):
        """age>=65 (3) + male>=45 (1) + BMI>=30 (2) + FH (3) + diabetes (2) + HTN (2) = 13."""
        score = heart_attack_score(scenario_a, 30.9)

        assert score.score == 13
        assert score.level == RiskLevel.HIGH

    def test_scenario_b(self, scenario_b):
        assert heart_attack_score(scenario_b, 22.5).score == 0
        assert heart_attack_risk(scenario_b, 22.5) == RiskLevel.LOW

    def test_age_tier_is_exclusive(self):
        assert heart_attack_score(AnswerSet(age=44), 20.0).score == 0
        assert heart_attack_score(AnswerSet(age=45), 20.0).score == 1
        assert heart_attack_score(AnswerSet(age=55), 20.0).score == 2
        assert heart_attack_score(AnswerSet(age=65), 20.0).score == 3

    def test_gender_checks_stack_with_age_tier(self):
        """Male 45+ and female 55+ add a point on top of the age tier."""
        assert heart_attack_score(AnswerSet(age=45, gender=Gender.MALE), 20.0).score == 2
        assert heart_attack_score(AnswerSet(age=54, gender=Gender.FEMALE), 20.0).score == 1
        assert heart_attack_score(AnswerSet(age=55, gender=Gender.FEMALE), 20.0).score == 3

    def test_level_boundaries(self):
        """<=4 Low, 5..9 Moderate, >=10 High."""
        female_55 = AnswerSet(age=55, gender=Gender.FEMALE)
        assert heart_attack_score(female_55, 22.0).score == 3
        assert heart_attack_risk(female_55, 26.0) == RiskLevel.LOW  # 4
        assert heart_attack_risk(female_55, 30.0) == RiskLevel.MODERATE  # 5

        nine = AnswerSet(age=60, family_history=True, diabetes=True, hypertension=True)
        assert heart_attack_score(nine, 22.0).score == 9
        assert heart_attack_risk(nine, 22.0) == RiskLevel.MODERATE

        ten = AnswerSet(age=65, family_history=True, diabetes=True, hypertension=True)
        assert heart_attack_score(ten, 22.0).score == 10
        assert heart_attack_risk(ten, 22.0) == RiskLevel.HIGH

    def test_maximum_score(self):
        answers = AnswerSet(
            age=70,
            gender=Gender.MALE,
            family_history=True,
            diabetes=True,
            hypertension=True,
            dyslipidemia=True,
        )
        assert heart_attack_score(answers, 32.0).score == 15

    def test_text_answers(self):
        """Ages and genders arriving as host text score the same."""
        answers = AnswerSet(age="70", gender="Male")
        names = [f.name for f in heart_attack_factors(answers, 20.0)]
        assert names == ["age_65_plus", "male_age"]

    def test_non_numeric_age_scores_no_age_points(self):
        answers = AnswerSet(age="unknown", gender=Gender.MALE)
        assert heart_attack_score(answers, 20.0).score == 0
