"""Tests for BMI calculation and categorization."""

import pytest

from betterheart.core.types import BMICategory
from betterheart.scoring.bmi import (
    categorize_bmi,
    compute_bmi,
    parse_leading_number,
    parse_number,
)


class TestComputeBMI:
    """Tests for BMI calculation."""

    def test_basic_calculation(self):
        """Test 70 kg at 170 cm."""
        assert compute_bmi(70, 170) == 24.2

    def test_rounds_to_one_decimal(self):
        """Test rounding of the scenario values."""
        assert compute_bmi(100, 180) == 30.9  # 30.864...
        assert compute_bmi(65, 170) == 22.5  # 22.491...

    def test_exact_half_rounds_up(self):
        """An exact .x5 quotient rounds away from zero."""
        assert compute_bmi(22.25, 100) == 22.3

    def test_monotonic_in_weight(self):
        """BMI never decreases as weight increases."""
        values = [compute_bmi(w, 175) for w in range(40, 160, 5)]
        assert values == sorted(values)
        assert values[0] < values[-1]

    def test_monotonic_in_height(self):
        """BMI never increases as height increases."""
        values = [compute_bmi(80, h) for h in range(140, 210, 5)]
        assert values == sorted(values, reverse=True)
        assert values[0] > values[-1]


class TestCategorizeBMI:
    """Tests for BMI category thresholds."""

    def test_underweight(self):
        assert categorize_bmi(15.0) == BMICategory.UNDERWEIGHT
        assert categorize_bmi(18.4) == BMICategory.UNDERWEIGHT

    def test_boundary_conditions(self):
        """Test exact boundary values (lower bound inclusive)."""
        assert categorize_bmi(18.5) == BMICategory.NORMAL
        assert categorize_bmi(24.9) == BMICategory.NORMAL
        assert categorize_bmi(25.0) == BMICategory.OVERWEIGHT
        assert categorize_bmi(29.9) == BMICategory.OVERWEIGHT
        assert categorize_bmi(30.0) == BMICategory.OBESE

    def test_obese(self):
        assert categorize_bmi(42.0) == BMICategory.OBESE

    def test_category_labels(self):
        """Category values are the display labels."""
        assert BMICategory.NORMAL.value == "Normal weight"
        assert [c.value for c in BMICategory] == [
            "Underweight",
            "Normal weight",
            "Overweight",
            "Obese",
        ]


class TestParseNumber:
    """Tests for numeric parsing of host values."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (170, 170.0),
            (70.5, 70.5),
            ("170", 170.0),
            (" 65.5 ", 65.5),
            ("0", 0.0),
        ],
    )
    def test_numeric_values(self, value, expected):
        assert parse_number(value) == expected

    @pytest.mark.parametrize("value", [None, "", "   ", "abc", "nan", "inf", True])
    def test_non_numeric_values(self, value):
        assert parse_number(value) is None

    def test_unit_suffix_is_not_numeric(self):
        assert parse_number("170cm") is None


class TestParseLeadingNumber:
    """Tests for parsing the number a form value starts with."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("170cm", 170.0),
            ("70kg", 70.0),
            ("70 kg", 70.0),
            (" 1.5e2x", 150.0),
            (".5", 0.5),
            ("-3", -3.0),
            ("180", 180.0),
            (65, 65.0),
            (70.5, 70.5),
        ],
    )
    def test_leading_number(self, value, expected):
        assert parse_leading_number(value) == expected

    @pytest.mark.parametrize("value", [None, "", "abc", "kg70", ".", "inf", False])
    def test_no_leading_number(self, value):
        assert parse_leading_number(value) is None
