#!/usr/bin/env python3
"""
Run a Better Heart assessment from the command line.

Usage:
    python scripts/run_assessment.py --name Ana --age 30 --gender Female --height 170 --weight 65
    python scripts/run_assessment.py ... --diabetes --hypertension
    python scripts/run_assessment.py ... --user-id u123 --save
"""

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from betterheart.core.config import Settings, get_settings, load_config
from betterheart.core.exceptions import BetterHeartError
from betterheart.core.types import Gender, Identity, Step
from betterheart.explain.generator import ExplanationGenerator
from betterheart.persistence.store import ParquetAssessmentStore, StaticIdentityProvider
from betterheart.session.assessment import AssessmentSession
from betterheart.session.events import Notice


def resolve_log_level(verbose: bool = False, settings: Settings | None = None) -> int:
    """Logging level: DEBUG when verbose, otherwise the configured log_level."""
    if verbose:
        return logging.DEBUG
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level, None)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = resolve_log_level(verbose)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def print_notice(notice: Notice) -> None:
    """Print a session notice."""
    print(f"[{notice.level.value}] {notice.message}")


def run(args: argparse.Namespace) -> int:
    """Drive a session through all six steps."""
    settings = get_settings()

    identity = None
    store = None
    if args.user_id:
        identity = Identity(user_id=args.user_id, full_name=args.name or "")
        if args.save:
            store = ParquetAssessmentStore(settings=settings)

    try:
        messages = load_config("messages")
    except BetterHeartError as e:
        logging.warning(f"Using default messages: {e}")
        messages = None

    with AssessmentSession(
        identity_provider=StaticIdentityProvider(identity),
        store=store,
        notifier=print_notice,
        messages=messages,
        settings=settings,
    ) as session:
        answers = {
            "name": args.name,
            "age": args.age,
            "gender": args.gender,
            "ethnicity": args.ethnicity,
            "height": args.height,
            "weight": args.weight,
            "family_history": args.family_history,
            "family_history_details": args.family_history_details,
            "diabetes": args.diabetes,
            "hypertension": args.hypertension,
            "dyslipidemia": args.dyslipidemia,
        }
        for field, value in answers.items():
            if value is not None:
                session.set_answer(field, value)

        try:
            while session.current_step < Step.RESULTS:
                session.advance()
        except BetterHeartError as e:
            logging.error(f"Assessment stopped at {session.current_step.title}: {e}")
            return 1

        results = session.results
        explainer = ExplanationGenerator()

        print("\n" + "=" * 60)
        print("BETTER HEART RESULTS")
        print("=" * 60)
        print(f"BMI:            {results.bmi:.1f} ({results.bmi_category.value})")
        print(f"Cardiovascular: {results.risk_level.value}")
        print(f"Sleep apnea:    {results.sleep_apnea_risk.value}")
        print(f"Heart attack:   {results.heart_attack_risk.value}")
        print("-" * 60)
        print("Scores:")
        for score in results.breakdown:
            print(f"  {score.name}: {score.score} ({score.level.value})")
        print("-" * 60)
        print(explainer.generate(results))
        print("=" * 60 + "\n")

    return 0


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Run a Better Heart self-assessment",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Risk levels:
    Cardiovascular:  0 Low, 1-2 Moderate, 3+ High
    Sleep apnea:     0-3 Low, 4-7 Moderate, 8+ High
    Heart attack:    0-4 Low, 5-9 Moderate, 10+ High
        """,
    )

    parser.add_argument("--name", type=str, default=None, help="Your name")
    parser.add_argument("--age", type=str, default=None, help="Age in years")
    parser.add_argument(
        "--gender",
        choices=[g.value for g in Gender],
        default=None,
        help="Gender",
    )
    parser.add_argument("--ethnicity", type=str, default=None, help="Ethnicity (optional)")
    parser.add_argument("--height", type=str, default=None, help="Height in centimeters")
    parser.add_argument("--weight", type=str, default=None, help="Weight in kilograms")
    parser.add_argument(
        "--family-history",
        action="store_true",
        help="Family history of heart disease",
    )
    parser.add_argument(
        "--family-history-details",
        type=str,
        default=None,
        help="Details of the family history",
    )
    parser.add_argument("--diabetes", action="store_true", help="Diagnosed with diabetes")
    parser.add_argument("--hypertension", action="store_true", help="High blood pressure")
    parser.add_argument("--dyslipidemia", action="store_true", help="Abnormal cholesterol")

    parser.add_argument(
        "--user-id",
        type=str,
        default=None,
        help="Identity to attach the assessment to",
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Save the assessment to the local store (requires --user-id)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args()

    setup_logging(args.verbose)

    return run(args)


if __name__ == "__main__":
    sys.exit(main())
