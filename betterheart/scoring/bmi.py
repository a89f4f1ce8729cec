"""
Body Mass Index calculation and categorization.

Formula:
    BMI = weight_kg / (height_cm / 100)^2

Rounded to one decimal place, half away from zero on the exact binary
value of the quotient (the same result a browser's toFixed(1) gives).
"""

import math
import re
from decimal import ROUND_HALF_UP, Decimal

from betterheart.core.constants import BMI_DECIMALS
from betterheart.core.types import BMICategory


_QUANTUM = Decimal(1).scaleb(-BMI_DECIMALS)

# Optional sign, digits with optional fraction (or a bare fraction), optional exponent
_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(value: object) -> float | None:
    """
    Parse a host-supplied value as a finite number.

    Args:
        value: Number or numeric text

    Returns:
        The parsed float, or None if the value is blank or not numeric
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    if not math.isfinite(number):
        return None
    return number


def parse_leading_number(value: object) -> float | None:
    """
    Parse the number a host value starts with, ignoring any trailing text.

    "170cm" parses as 170 and "70 kg" as 70, the way a browser's
    parseFloat reads form input.

    Args:
        value: Number or text starting with a number

    Returns:
        The parsed float, or None if the value does not start with a number
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return parse_number(value)
    match = _LEADING_NUMBER.match(str(value).strip())
    if match is None:
        return None
    return parse_number(match.group(0))


def compute_bmi(weight_kg: float, height_cm: float) -> float:
    """
    Calculate BMI rounded to one decimal place.

    The caller must guarantee height_cm > 0.

    Args:
        weight_kg: Body weight in kilograms
        height_cm: Body height in centimeters

    Returns:
        BMI in kg/m^2
    """
    height_m = height_cm / 100
    raw = weight_kg / (height_m * height_m)
    return float(Decimal(raw).quantize(_QUANTUM, rounding=ROUND_HALF_UP))


def categorize_bmi(bmi: float) -> BMICategory:
    """Map a BMI value to its category."""
    return BMICategory.from_bmi(bmi)
