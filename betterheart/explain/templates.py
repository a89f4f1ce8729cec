"""
Explanation templates for Better Heart.

These templates provide human-readable interpretations
of the assessment results and their contributing factors.
"""

from betterheart.core.types import BMICategory, RiskLevel


# Headline by BMI category
BMI_TEMPLATES: dict[BMICategory, str] = {
    BMICategory.UNDERWEIGHT: "Your BMI is below the healthy range.",
    BMICategory.NORMAL: "Your BMI is within the healthy range.",
    BMICategory.OVERWEIGHT: "Your BMI is above the healthy range.",
    BMICategory.OBESE: "Your BMI is in the obese range.",
}

# Display names of the three risks
RISK_TITLES: dict[str, str] = {
    "cardiovascular": "Cardiovascular risk",
    "sleep_apnea": "Sleep apnea risk",
    "heart_attack": "Heart attack risk",
}

# Interpretation by risk level
LEVEL_TEMPLATES: dict[RiskLevel, str] = {
    RiskLevel.LOW: "few risk factors were identified",
    RiskLevel.MODERATE: "some risk factors were identified",
    RiskLevel.HIGH: "several significant risk factors were identified",
}

# Factor names produced by the scoring functions
FACTOR_TEMPLATES: dict[str, str] = {
    "family_history": "family history of heart disease",
    "diabetes": "diabetes",
    "hypertension": "high blood pressure",
    "dyslipidemia": "abnormal cholesterol",
    "male": "male sex",
    "male_age": "male aged 45 or older",
    "female_age": "female aged 55 or older",
    "bmi_25_plus": "BMI of 25 or more",
    "bmi_30_plus": "BMI of 30 or more",
    "bmi_35_plus": "BMI of 35 or more",
    "age_45_plus": "age 45 or older",
    "age_50_plus": "age 50 or older",
    "age_55_plus": "age 55 or older",
    "age_65_plus": "age 65 or older",
}

# Closing advice
HIGH_RISK_ADVICE: str = (
    "Consider discussing these results with a healthcare professional."
)

DISCLAIMER: str = (
    "This assessment is informational only and is not a medical diagnosis."
)
