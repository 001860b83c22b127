"""
Tests for number parsing utilities
"""

import unittest
import sys
import os
import io
from unittest.mock import patch
from decimal import Decimal

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from form_helpers.log_utils import init_error_report, get_error_report, configure_logging
from form_helpers.number_parser import (
    is_numeric, is_currency, normalize_number_text, parse_decimal,
    parse_decimal_result, parse_int, parse_double, to_decimal
)


class TestValidationPatterns(unittest.TestCase):

    def setUp(self):
        """Set up test fixtures"""
        configure_logging({'log_to_console': False})
        init_error_report()

    def test_is_numeric_valid(self):
        """Test plain numbers accepted by the number pattern"""
        for text in ["0", "1", "12", "1234", "1,234", "1,234,567", "12.5", "12.50", "1,000.05"]:
            self.assertTrue(is_numeric(text), text)

    def test_is_numeric_invalid(self):
        """Test strings rejected by the number pattern"""
        for text in ["", "abc", "01", "0.5", "1.", "1.234", "1,,2", "1,", "$12", "-5", " 1"]:
            self.assertFalse(is_numeric(text), text)

    def test_is_currency_valid(self):
        """Test currency amounts with and without the symbol"""
        for text in ["0", "$1", "$1,234.50", "12.3", "$999"]:
            self.assertTrue(is_currency(text), text)

    def test_is_currency_invalid(self):
        """Test strings rejected by the currency pattern"""
        for text in ["$", "$0", "$$1", "1$", "$1.234", "abc"]:
            self.assertFalse(is_currency(text), text)

    def test_validation_failure_not_stored(self):
        """Validation failures go to the console, not the error report"""
        configure_logging({'log_to_console': True})
        with patch('sys.stdout', new_callable=io.StringIO) as stdout:
            self.assertFalse(is_numeric("12a"))

        self.assertIn('Invalid input detected in string: "12a"', stdout.getvalue())
        self.assertEqual(get_error_report(), [])

    def test_currency_failure_logged_to_console(self):
        """Currency validation failures go to the console, not the error report"""
        configure_logging({'log_to_console': True})
        with patch('sys.stdout', new_callable=io.StringIO) as stdout:
            self.assertFalse(is_currency("$0"))

        self.assertIn('Invalid input detected in string: "$0"', stdout.getvalue())
        self.assertEqual(get_error_report(), [])


class TestParseDecimal(unittest.TestCase):

    def setUp(self):
        """Set up test fixtures"""
        configure_logging({'log_to_console': False})
        init_error_report()

    def test_normalize_text(self):
        """Test symbol and unit stripping"""
        self.assertEqual(normalize_number_text(""), "0")
        self.assertEqual(normalize_number_text("$1,234.50"), "1234.50")
        self.assertEqual(normalize_number_text("50 cents"), "50")
        self.assertEqual(normalize_number_text("2hrs30mins"), "2.30")
        self.assertEqual(normalize_number_text("1 hrs 18 mins"), "1.18")

    def test_parse_currency_text(self):
        """Test parsing formatted currency"""
        self.assertEqual(parse_decimal("$1,234.50"), Decimal("1234.50"))

    def test_parse_hours_text(self):
        """Test hrs/mins substitution is textual"""
        self.assertEqual(parse_decimal("2hrs30mins"), Decimal("2.30"))

    def test_parse_empty_is_zero(self):
        """Test empty input parses as zero"""
        self.assertEqual(parse_decimal(""), Decimal("0"))
        self.assertEqual(get_error_report(), [])

    def test_parse_negative(self):
        """Test signed input"""
        self.assertEqual(parse_decimal("-4.5"), Decimal("-4.5"))

    def test_parse_failure_sentinel(self):
        """Malformed input returns -1 and stores exactly one entry"""
        self.assertEqual(parse_decimal("abc"), Decimal(-1))

        report = get_error_report()
        self.assertEqual(len(report), 1)
        self.assertIn('Failed to parse "abc" into a decimal value', report[0])
        self.assertIn('. Exception: ', report[0])
        self.assertTrue(report[0].startswith('['))

    def test_parse_rejects_special_values(self):
        """Test exponent, NaN and Infinity are not accepted"""
        for text in ["1e5", "NaN", "Infinity", "$", "1.2.3"]:
            success, value, error = parse_decimal_result(text)
            self.assertFalse(success, text)
            self.assertIsNone(value)
            self.assertIsNotNone(error)
        self.assertEqual(len(get_error_report()), 5)

    def test_result_distinguishes_minus_one(self):
        """A real -1 is a success in the result form"""
        self.assertEqual(parse_decimal_result("-1"), (True, Decimal("-1"), None))
        self.assertEqual(get_error_report(), [])

    def test_parse_int_truncates(self):
        """Test truncation toward zero"""
        self.assertEqual(parse_int("12.99"), 12)
        self.assertEqual(parse_int("-12.99"), -12)
        self.assertEqual(parse_int("$1,000"), 1000)
        self.assertEqual(parse_int("oops"), -1)

    def test_parse_double_rounds_half_up(self):
        """Test rounding to 2 decimal places"""
        self.assertEqual(parse_double("1.005"), 1.01)
        self.assertEqual(parse_double("2.344"), 2.34)
        self.assertEqual(parse_double("-1.005"), -1.01)
        self.assertEqual(parse_double("$12.3"), 12.3)

    def test_parse_double_out_of_range(self):
        """Values too large to round to 2 places return -1.0 and log once"""
        self.assertEqual(parse_decimal("1" * 30), Decimal("1" * 30))
        self.assertEqual(parse_double("1" * 30), -1.0)

        report = get_error_report()
        self.assertEqual(len(report), 1)
        self.assertIn("to 2 decimal places", report[0])

    def test_parse_surrounding_whitespace(self):
        """Tabs and newlines around the number are tolerated consistently"""
        for text in ["5\n", "\n5", "5\t", "\t5\n"]:
            self.assertEqual(parse_decimal_result(text), (True, Decimal("5"), None), repr(text))
        self.assertEqual(parse_decimal("5\n6"), Decimal(-1))

    def test_to_decimal(self):
        """Test numeric conversion without logging"""
        self.assertEqual(to_decimal(1.3), (True, Decimal("1.3"), None))
        self.assertEqual(to_decimal(7), (True, Decimal(7), None))
        self.assertFalse(to_decimal(True)[0])
        self.assertFalse(to_decimal(None)[0])
        self.assertFalse(to_decimal("xyz")[0])
        self.assertEqual(get_error_report(), [])


if __name__ == '__main__':
    unittest.main()
