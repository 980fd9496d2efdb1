"""Scale factor parsing.

Scale inputs accept either a plain number ("1.5", "-2") or a fraction
("3/2", "-1 / 4"). Blank input means "no scaling on this axis" and yields 1.
"""
import math
import re

from utils.errors import InvalidInputError

_FRACTION_RE = re.compile(r'^([+-]?\d+(?:\.\d*)?)\s*/\s*([+-]?\d+(?:\.\d*)?)$')

ZERO_DENOMINATOR_MESSAGE = 'Denominator cannot be zero.'
INVALID_NUMBER_MESSAGE = 'Please enter a valid non-zero number or fraction (e.g., 3/2).'


def parse_fraction_strict(text):
    """Parse a scale factor, raising on bad input.

    Args:
        text: Raw input text (surrounding whitespace is ignored)

    Returns:
        float: The scale factor, 1.0 for blank input

    Raises:
        InvalidInputError: Zero denominator, unparseable text, or a value
            that is zero or not finite
    """
    text = (text or '').strip()
    if not text:
        return 1.0

    match = _FRACTION_RE.match(text)
    if match:
        numerator = float(match.group(1))
        denominator = float(match.group(2))
        if denominator == 0:
            raise InvalidInputError(ZERO_DENOMINATOR_MESSAGE)
        value = numerator / denominator
    else:
        try:
            value = float(text)
        except ValueError:
            raise InvalidInputError(INVALID_NUMBER_MESSAGE) from None

    if not math.isfinite(value) or value == 0:
        raise InvalidInputError(INVALID_NUMBER_MESSAGE)
    return value


def parse_fraction(text, on_invalid=None):
    """Parse a scale factor, falling back to 1 on bad input.

    Callers that need to stop on bad input should pass ``on_invalid`` (or
    use ``parse_fraction_strict``); the fallback only keeps the return
    value usable.

    Args:
        text: Raw input text
        on_invalid: Optional callback receiving the InvalidInputError

    Returns:
        float: The parsed scale factor, or 1.0 if the text was invalid
    """
    try:
        return parse_fraction_strict(text)
    except InvalidInputError as e:
        if on_invalid is not None:
            on_invalid(e)
        return 1.0
