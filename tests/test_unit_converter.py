"""Tests for unit conversion, formatting and weight input handling."""

import unittest

from lift_tracker.unit_converter import (
    InvalidLiftNameError,
    InvalidWeightError,
    decrement_weight,
    format_weight,
    from_display_unit,
    increment_weight,
    parse_weight_input,
    percent_of_max,
    step_sizes,
    to_display_unit,
    to_kg,
    to_lbs,
    validate_lift_name,
    validate_max_weight,
)


class TestConversion(unittest.TestCase):
    def test_to_kg(self):
        self.assertAlmostEqual(to_kg(100), 45.3592)

    def test_to_lbs(self):
        self.assertAlmostEqual(to_lbs(45.3592), 100)

    def test_round_trip(self):
        for lbs in (0.5, 1, 45, 137.5, 225, 315, 1000.1):
            self.assertAlmostEqual(to_lbs(to_kg(lbs)), lbs, delta=1e-6)

    def test_display_unit(self):
        self.assertEqual(to_display_unit(225, "lbs"), 225)
        self.assertAlmostEqual(to_display_unit(225, "kg"), 102.0582)
        self.assertAlmostEqual(from_display_unit(102.0582, "kg"), 225)

    def test_unknown_unit(self):
        with self.assertRaises(ValueError):
            to_display_unit(100, "stone")


class TestFormatWeight(unittest.TestCase):
    def test_one_decimal_lbs(self):
        self.assertEqual(format_weight(225, "lbs"), "225.0 lbs")
        self.assertEqual(format_weight(89.375, "lbs"), "89.4 lbs")

    def test_one_decimal_kg(self):
        self.assertEqual(format_weight(225, "kg"), "102.1 kg")

    def test_without_label(self):
        self.assertEqual(format_weight(185, "lbs", with_label=False), "185.0")


class TestPercentOfMax(unittest.TestCase):
    def test_recomputed_from_weights(self):
        self.assertEqual(percent_of_max(170, 200), 85)

    def test_rounds_to_whole_percent(self):
        # 100 / 315 = 31.7%
        self.assertEqual(percent_of_max(100, 315), 32)
        self.assertEqual(percent_of_max(12.5, 100), 13)

    def test_after_max_edit(self):
        # A 170 lb set is 85% of 200 but 68% of a new max of 250
        self.assertEqual(percent_of_max(170, 250), 68)


class TestSteps(unittest.TestCase):
    def test_step_sizes(self):
        self.assertEqual(step_sizes("lbs"), (5, 10))
        self.assertEqual(step_sizes("kg"), (2.5, 5))

    def test_increment(self):
        self.assertEqual(increment_weight(100, 5), 105)
        self.assertEqual(increment_weight(100, 2.5), 102.5)

    def test_decrement(self):
        self.assertEqual(decrement_weight(100, 10), 90)

    def test_kg_step_applied_to_kg_value(self):
        small, large = step_sizes("kg")
        current = to_display_unit(225, "kg")
        down = from_display_unit(decrement_weight(current, small), "kg")
        up = from_display_unit(increment_weight(current, large), "kg")
        self.assertAlmostEqual(down, to_lbs(to_kg(225) - 2.5))
        self.assertAlmostEqual(up, to_lbs(to_kg(225) + 5))
        # 2.5 kg is about 5.5 lbs, not 2.5 lbs
        self.assertAlmostEqual(225 - down, 2.5 / 0.453592)

    def test_decrement_clamps_at_zero(self):
        self.assertEqual(decrement_weight(3, 5), 0)
        self.assertEqual(decrement_weight(0, 2.5), 0)


class TestParseWeightInput(unittest.TestCase):
    def test_lbs(self):
        self.assertEqual(parse_weight_input("225", "lbs"), 225)
        self.assertEqual(parse_weight_input(" 137.5 ", "lbs"), 137.5)

    def test_kg_converted_to_lbs(self):
        self.assertAlmostEqual(parse_weight_input("100", "kg"), 100 / 0.453592)

    def test_non_numeric_is_zero(self):
        self.assertEqual(parse_weight_input("abc", "lbs"), 0.0)
        self.assertEqual(parse_weight_input("", "kg"), 0.0)
        self.assertEqual(parse_weight_input("nan", "lbs"), 0.0)


class TestValidation(unittest.TestCase):
    def test_valid_weight(self):
        self.assertEqual(validate_max_weight("185"), 185.0)
        self.assertEqual(validate_max_weight(0.5), 0.5)

    def test_invalid_weights(self):
        for bad in (0, -5, "abc", None, float("inf"), float("nan")):
            with self.assertRaises(InvalidWeightError, msg=f"Failed for {bad!r}"):
                validate_max_weight(bad)

    def test_invalid_weight_is_value_error(self):
        with self.assertRaises(ValueError):
            validate_max_weight(0)

    def test_lift_name(self):
        self.assertEqual(validate_lift_name("  Squat "), "Squat")
        with self.assertRaises(InvalidLiftNameError):
            validate_lift_name("   ")
        with self.assertRaises(InvalidLiftNameError):
            validate_lift_name(None)


if __name__ == "__main__":
    unittest.main()
