#!/usr/bin/env python3
"""
Show saved Better Heart assessments.

Usage:
    python scripts/show_history.py
    python scripts/show_history.py --user-id u123
"""

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from betterheart.persistence.store import ParquetAssessmentStore


COLUMNS = [
    "assessment_date",
    "user_id",
    "bmi",
    "bmi_category",
    "cv_risk_level",
    "sleep_apnea_risk",
    "heart_attack_risk",
]


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Show saved Better Heart assessments")
    parser.add_argument("--user-id", type=str, default=None, help="Only this user")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory holding assessment_history.parquet",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    store = ParquetAssessmentStore(output_dir=args.data_dir)
    history = store.get_history(user_id=args.user_id)

    if history.empty:
        print("No saved assessments.")
        return 0

    print(history[COLUMNS].to_string(index=False))
    print(f"\n{len(history)} assessment(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
