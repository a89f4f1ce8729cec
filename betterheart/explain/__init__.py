"""Explanation generation for Better Heart."""

from betterheart.explain.generator import ExplanationGenerator
from betterheart.explain.templates import FACTOR_TEMPLATES, RISK_TITLES

__all__ = [
    "ExplanationGenerator",
    "FACTOR_TEMPLATES",
    "RISK_TITLES",
]
