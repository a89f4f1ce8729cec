"""
Explanation generator for Better Heart.

Generates human-readable summaries of assessment results.
"""

import logging
from typing import Sequence

from betterheart.core.types import Results, RiskFactor, RiskScore
from betterheart.explain.templates import (
    BMI_TEMPLATES,
    DISCLAIMER,
    FACTOR_TEMPLATES,
    HIGH_RISK_ADVICE,
    LEVEL_TEMPLATES,
    RISK_TITLES,
)


logger = logging.getLogger(__name__)


class ExplanationGenerator:
    """
    Generates human-readable explanations for assessment results.

    Combines:
    - BMI headline
    - Per-risk level with its top contributing factors
    - Advice when any risk is High
    """

    def __init__(self, include_disclaimer: bool = True) -> None:
        """
        Initialize explanation generator.

        Args:
            include_disclaimer: Append the informational-only disclaimer
        """
        self.include_disclaimer = include_disclaimer

    def generate(self, results: Results) -> str:
        """
        Generate complete explanation.

        Args:
            results: Results of a scoring pass

        Returns:
            Human-readable explanation (structured with newlines)
        """
        lines: list[str] = []

        # 1. BMI headline
        headline = BMI_TEMPLATES.get(results.bmi_category, "")
        lines.append(
            f"**BMI:** {results.bmi:.1f} ({results.bmi_category.value}). {headline}".rstrip()
        )

        # 2. Risks (bulleted list)
        if results.breakdown:
            lines.append("")
            lines.append("**Risks:**")
            lines.extend(self.format_risk(score) for score in results.breakdown)

        # 3. Advice
        if results.has_high_risk:
            lines.append("")
            lines.append(f"**Note:** {HIGH_RISK_ADVICE}")

        if self.include_disclaimer:
            lines.append("")
            lines.append(DISCLAIMER)

        return "\n".join(lines)

    def format_risk(self, score: RiskScore, n: int = 3) -> str:
        """
        Format one risk as a bullet with its top N factors.

        Args:
            score: Risk breakdown
            n: Number of factors to include

        Returns:
            Formatted bullet line
        """
        title = RISK_TITLES.get(score.name, score.name)
        line = f"• {title}: {score.level.value} ({LEVEL_TEMPLATES[score.level]})"

        drivers = self._format_factors(score.factors, n)
        if drivers:
            line += f"; driven by {drivers}"
        return line

    def _format_factors(self, factors: Sequence[RiskFactor], n: int) -> str:
        """Top N factors by points, largest first."""
        top = sorted(factors, key=lambda f: f.points, reverse=True)[:n]
        return ", ".join(FACTOR_TEMPLATES.get(f.name, f.name) for f in top)

    def format_summary(self, results: Results) -> str:
        """
        Format one-line summary.

        Args:
            results: Results of a scoring pass

        Returns:
            One-line summary
        """
        return (
            f"BMI {results.bmi:.1f} ({results.bmi_category.value}) | "
            f"Cardiovascular: {results.risk_level.value} | "
            f"Sleep apnea: {results.sleep_apnea_risk.value} | "
            f"Heart attack: {results.heart_attack_risk.value}"
        )
