"""
Number parsing for form input
Handles: 1,234.50, $12.30, 50 cents, 2hrs30mins, etc.
"""

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from form_helpers.log_utils import log, log_error


# Either "0", or a non-zero leading digit followed by digits with optional
# single commas between them, and an optional 1-2 digit fraction
NUMBER_PATTERN = re.compile(r'^0$|^[1-9](?:,?\d)*(?:\.\d{1,2})?$')
CURRENCY_PATTERN = re.compile(r'^0$|^\$?[1-9](?:,?\d)*(?:\.\d{1,2})?$')

# Residue accepted after normalization: plain signed decimal, no exponent
DECIMAL_LITERAL_PATTERN = re.compile(r'^[+-]?(?:\d+\.?\d*|\.\d+)$')

PARSE_FAILURE_VALUE = Decimal(-1)
TWO_PLACES = Decimal('0.01')


def is_numeric(text):
    """
    Check that the whole string is a plain number (e.g. "0", "1,234", "12.5")

    Args:
        text: Input string

    Returns:
        bool: True if the string matches; a console log entry is written otherwise
    """
    if NUMBER_PATTERN.fullmatch(text):
        return True

    log(f'Invalid input detected in string: "{text}"')
    return False


def is_currency(text):
    """
    Check that the whole string is a currency amount (e.g. "$1,234.50")

    Args:
        text: Input string

    Returns:
        bool: True if the string matches; a console log entry is written otherwise
    """
    if CURRENCY_PATTERN.fullmatch(text):
        return True

    log(f'Invalid input detected in string: "{text}"')
    return False


def normalize_number_text(text):
    """
    Strip units and symbols from form text before parsing

    Args:
        text: Input string such as "$1,234.50", "50 cents" or "2hrs30mins"

    Returns:
        str: Remaining text, e.g. "1234.50", "50", "2.30"
    """
    if text == '':
        text = '0'

    # "hrs" becomes the decimal point: "2hrs30mins" -> "2.30"
    text = text.replace('$', '').replace('cents', '')
    text = text.replace('hrs', '.').replace('mins', '')

    # Remove spaces and thousands separators
    return text.replace(' ', '').replace(',', '')


def _parse_normalized(text):
    # Surrounding whitespace (tabs, newlines) is tolerated
    normalized = normalize_number_text(text).strip()

    try:
        if not DECIMAL_LITERAL_PATTERN.fullmatch(normalized):
            raise ValueError(f'"{normalized}" is not a valid number')
        return (True, Decimal(normalized), None)
    except (ValueError, InvalidOperation) as e:
        return (False, None, str(e))


def parse_decimal_result(text):
    """
    Parse form text into a Decimal

    Args:
        text: User's input string

    Returns:
        tuple: (success: bool, value: Decimal or None, error: str or None)
    """
    success, value, error = _parse_normalized(text)
    if not success:
        log_error(f'Failed to parse "{text}" into a decimal value', error)

    return (success, value, error)


def parse_decimal(text):
    """
    Parse form text into a Decimal, returning -1 on failure

    Kept for callers that expect the -1 sentinel. A parsed "-1" and a failure
    look the same here; use parse_decimal_result to tell them apart.

    Args:
        text: User's input string

    Returns:
        Decimal: Parsed value, or Decimal(-1) if parsing failed
    """
    success, value, error = parse_decimal_result(text)
    if not success:
        return PARSE_FAILURE_VALUE
    return value


def parse_int(text):
    """Parse form text and truncate toward zero (-1 on failure)"""
    return int(parse_decimal(text))


def round_money(value):
    """Round a Decimal to 2 places, halves away from zero"""
    return value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def round_money_result(value):
    """
    Round a Decimal to 2 places without raising

    Args:
        value: Decimal to round

    Returns:
        tuple: (success: bool, value: Decimal or None, error: str or None)
    """
    try:
        return (True, round_money(value), None)
    except InvalidOperation:
        # quantize() overflows the decimal context for very large values
        error = f"{value} is out of range for 2 decimal places"
        log_error(f'Failed to round "{value}" to 2 decimal places', error)
        return (False, None, error)


def parse_double(text):
    """
    Parse form text into a float rounded to 2 decimal places

    Args:
        text: User's input string

    Returns:
        float: Rounded value, or -1.0 if parsing or rounding failed
    """
    success, value, error = round_money_result(parse_decimal(text))
    if not success:
        return float(PARSE_FAILURE_VALUE)
    return float(value)


def to_decimal(value):
    """
    Convert a numeric value (int, float, Decimal or form text) to Decimal
    Does not log; callers report failures in their own terms

    Args:
        value: Value to convert

    Returns:
        tuple: (success: bool, value: Decimal or None, error: str or None)
    """
    if isinstance(value, bool):
        return (False, None, f'{value!r} is not a number')

    if isinstance(value, Decimal):
        return (True, value, None)

    if isinstance(value, int):
        return (True, Decimal(value), None)

    if isinstance(value, float):
        # Go through repr so 1.3 stays "1.3" instead of its binary expansion
        return (True, Decimal(repr(value)), None)

    if isinstance(value, str):
        return _parse_normalized(value)

    return (False, None, f'{type(value).__name__} is not a number')
