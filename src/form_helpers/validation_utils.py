"""
Input validation and normalization utilities
Per-field-type checks used by form code before accepting a value
"""

from form_helpers.number_parser import (
    is_numeric, is_currency, parse_decimal_result, round_money_result
)
from form_helpers.format_utils import (
    format_currency_result, format_hours_result, count_visible_characters
)


def validate_local(user_input, expected_type):
    """
    Validate a form field value for its type

    Args:
        user_input: The user's input string
        expected_type: One of 'number', 'currency', 'hours', 'text'

    Returns:
        dict: {'valid': bool, 'error': str or None}
    """
    user_input = user_input.strip()

    # Empty check
    if not user_input:
        return {'valid': False, 'error': 'Input cannot be empty'}

    if expected_type == 'number':
        return validate_number(user_input)
    elif expected_type == 'currency':
        return validate_currency(user_input)
    elif expected_type == 'hours':
        return validate_hours(user_input)

    # Text and unknown types pass
    return {'valid': True, 'error': None}


def validate_number(user_input):
    """Validate a plain number ("1,234.5")"""
    if is_numeric(user_input):
        return {'valid': True, 'error': None}
    return {'valid': False, 'error': 'Invalid number'}


def validate_currency(user_input):
    """Validate a currency amount ("$1,234.50")"""
    if is_currency(user_input):
        return {'valid': True, 'error': None}
    return {'valid': False, 'error': 'Invalid currency value'}


def validate_hours(user_input):
    """Validate an hours value ("1.5", "2hrs30mins")"""
    success, value, error = parse_decimal_result(user_input)
    if not success:
        return {'valid': False, 'error': 'Invalid hours value'}
    if value < 0:
        return {'valid': False, 'error': 'Hours cannot be negative'}
    return {'valid': True, 'error': None}


def normalize_value(user_input, expected_type):
    """
    Normalize validated input to its display format

    Args:
        user_input: The validated input string
        expected_type: One of 'number', 'currency', 'hours', 'text'

    Returns:
        str: Display value; input that fails to parse is returned stripped
             but otherwise unchanged
    """
    user_input = user_input.strip()

    if expected_type == 'currency':
        success, text, error = format_currency_result(user_input)
        return text if success else user_input
    elif expected_type == 'hours':
        success, text, error = format_hours_result(user_input)
        return text if success else user_input
    elif expected_type == 'number':
        success, value, error = parse_decimal_result(user_input)
        if success:
            success, value, error = round_money_result(value)
        if not success:
            return user_input
        # "12.50" -> "12.5", "12.00" -> "12"
        return format(value.normalize(), 'f')
    else:
        return user_input


def visible_length_ok(user_input, max_length):
    """
    Check a text field against a maximum visible length

    Args:
        user_input: Input text
        max_length: Maximum characters after trimming

    Returns:
        bool: True if within the limit
    """
    return count_visible_characters(user_input) <= max_length
