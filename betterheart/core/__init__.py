"""Core types, constants, configuration, and exceptions for Better Heart."""

from betterheart.core.config import (
    MessagesConfig,
    Settings,
    get_settings,
    load_config,
)
from betterheart.core.constants import (
    BMI_OBESE_FROM,
    BMI_OVERWEIGHT_FROM,
    BMI_UNDERWEIGHT_BELOW,
    DEFAULT_MESSAGES,
    TOTAL_STEPS,
)
from betterheart.core.exceptions import (
    BetterHeartError,
    ConfigurationError,
    InvalidMeasurementError,
    NavigationError,
    PersistenceError,
    ValidationError,
)
from betterheart.core.types import (
    AnswerSet,
    BMICategory,
    Gender,
    Identity,
    Results,
    RiskFactor,
    RiskLevel,
    RiskScore,
    Step,
)

__all__ = [
    # Types
    "AnswerSet",
    "BMICategory",
    "Gender",
    "Identity",
    "Results",
    "RiskFactor",
    "RiskLevel",
    "RiskScore",
    "Step",
    # Constants
    "BMI_OBESE_FROM",
    "BMI_OVERWEIGHT_FROM",
    "BMI_UNDERWEIGHT_BELOW",
    "DEFAULT_MESSAGES",
    "TOTAL_STEPS",
    # Config
    "MessagesConfig",
    "Settings",
    "get_settings",
    "load_config",
    # Exceptions
    "BetterHeartError",
    "ConfigurationError",
    "InvalidMeasurementError",
    "NavigationError",
    "PersistenceError",
    "ValidationError",
]
