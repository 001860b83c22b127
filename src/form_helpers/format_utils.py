"""
Formatting utilities
Renders numbers as display strings for form fields (currency, hours)
"""

import math
from decimal import Decimal, InvalidOperation
from form_helpers.log_utils import log_error
from form_helpers.number_parser import to_decimal, round_money


CURRENCY_SYMBOL = '$'
HOURS_ERROR_TEXT = 'Error!'


def format_hours_result(value):
    """
    Format a decimal-hours value as "<H> hrs <M> mins"

    The two digits after the point are hundredths of an hour, not minutes,
    so 1.30 is 1 hour 18 minutes.

    Args:
        value: Hours as int, float, Decimal or form text ("1.5", "2hrs30")

    Returns:
        tuple: (success: bool, text: str or None, error: str or None)
    """
    success, hours_value, error = to_decimal(value)
    if success and not hours_value.is_finite():
        success, error = False, f'{value} is not a finite number'

    if not success:
        log_error(f'Couldn\'t convert "{value}" to hours format!', error)
        return (False, None, error)

    text = format(hours_value, 'f')
    if '.' not in text:
        return (True, f"{text} hrs", None)

    hours, fraction = text.split('.', 1)
    if int(fraction) == 0:
        return (True, f"{hours} hrs", None)

    # Exactly two digits: "5" -> "50", "333" -> "33"
    fraction = fraction[:2].ljust(2, '0')
    minutes = math.ceil(Decimal(fraction) / 100 * 60)

    return (True, f"{hours} hrs {minutes} mins", None)


def format_hours(value):
    """
    Format a decimal-hours value, returning "Error!" on failure

    Args:
        value: Hours as int, float, Decimal or form text

    Returns:
        str: e.g. "1 hrs", "1 hrs 30 mins", or "Error!"
    """
    success, text, error = format_hours_result(value)
    if not success:
        return HOURS_ERROR_TEXT
    return text


def format_currency_result(value):
    """
    Format a value as a currency string

    Args:
        value: Amount as int, float, Decimal or form text

    Returns:
        tuple: (success: bool, text: str or None, error: str or None)
            text is "$0", "$0.50", "$12.30" or "- $4.50"
    """
    success, amount, error = to_decimal(value)

    try:
        if not success:
            raise ValueError(error)
        if not amount.is_finite():
            raise ValueError(f'{value} is not a finite number')

        if amount == 0:
            text = f"{CURRENCY_SYMBOL}0"
        elif amount < 0:
            # Sign, then symbol, then magnitude
            text = f"- {CURRENCY_SYMBOL}{round_money(-amount):f}"
        else:
            text = f"{CURRENCY_SYMBOL}{round_money(amount):f}"
    except ValueError as e:
        error = str(e)
    except InvalidOperation:
        # quantize() overflows the decimal context for very large amounts
        error = f'{value} is out of range for a currency value'
    else:
        return (True, text, None)

    log_error(f'Failed to format "{value}" as a currency value', error)
    return (False, None, error)


def format_currency(value):
    """
    Format a value as a currency string, returning None on failure

    Args:
        value: Amount as int, float, Decimal or form text

    Returns:
        str: Formatted amount, or None
    """
    success, text, error = format_currency_result(value)
    return text


def count_visible_characters(text):
    """
    Count characters left after trimming leading/trailing whitespace

    Args:
        text: Input text

    Returns:
        int: Number of characters, e.g. 4 for "  ab c "
    """
    return len(text.strip())
