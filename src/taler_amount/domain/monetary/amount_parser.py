"""Parsing of canonical amount strings.

Grammar (surrounding ASCII whitespace is ignored)::

    amount   = currency ":" integer [ "." fraction ]
    currency = 1*( ALPHA / DIGIT / "_" / "*" / "-" )
    integer  = 1*DIGIT
    fraction = 1*DIGIT            ; at most FRACTIONAL_LENGTH digits
"""

from __future__ import annotations

import string

from taler_amount.domain.monetary.amount import CURRENCY_CHARS, FRACTIONAL_LENGTH, MAX_AMOUNT_VALUE, Amount
from taler_amount.domain.monetary.amount_errors import (
    MalformedAmountError,
    PrecisionExceededError,
    ValueOutOfRangeError,
)

DIGIT_CHARS = frozenset(string.digits)
SURROUNDING_WHITESPACE = " \t\n\r\f\v"

CURRENCY_SEPARATOR = ":"
DECIMAL_SEPARATOR = "."


def split_amount(text: str) -> tuple[str, str, str | None]:
    """Split $text into currency, integer and optional fraction tokens.

    Only the shape is checked here; precision and range are checked by `parse_amount`.

    Args:
        text: Amount string, e.g. " EUR:1.5 ".

    Returns:
        tuple: (currency, integer digits, fraction digits or None).

    Raises:
        MalformedAmountError: If $text does not match the amount grammar.
    """
    if not isinstance(text, str):
        raise MalformedAmountError(repr(text), "it is not a string")

    stripped = text.strip(SURROUNDING_WHITESPACE)

    currency, separator, number = stripped.partition(CURRENCY_SEPARATOR)
    if not separator:
        raise MalformedAmountError(text, f"'{CURRENCY_SEPARATOR}' is missing")
    if not currency:
        raise MalformedAmountError(text, "the currency is empty")
    if not set(currency) <= CURRENCY_CHARS:
        raise MalformedAmountError(text, f"the currency '{currency}' contains characters outside [A-Za-z0-9_*-]")

    integer, separator, fraction = number.partition(DECIMAL_SEPARATOR)
    if not integer:
        raise MalformedAmountError(text, "the value is empty")
    if not set(integer) <= DIGIT_CHARS:
        raise MalformedAmountError(text, f"the value '{integer}' is not a decimal number")

    if not separator:
        return currency, integer, None

    if not fraction:
        raise MalformedAmountError(text, "the fraction after '.' is empty")
    if not set(fraction) <= DIGIT_CHARS:
        raise MalformedAmountError(text, f"the fraction '{fraction}' is not a decimal number")

    return currency, integer, fraction


def parse_fraction(digits: str, text: str = "") -> int:
    """Convert fractional digits into sub-units, e.g. "5" -> 50000000.

    Raises:
        PrecisionExceededError: If there are more than FRACTIONAL_LENGTH digits.
    """
    if len(digits) > FRACTIONAL_LENGTH:
        raise PrecisionExceededError(text or digits, len(digits), FRACTIONAL_LENGTH)
    return int(digits.ljust(FRACTIONAL_LENGTH, "0"))


def parse_amount(text: str) -> Amount:
    """Parse an Amount from `<currency>:<value>[.<fraction>]`.

    Example:
        >>> parse_amount("EUR:23.70007")
        Amount('EUR', 23, 70007000)

    Args:
        text: Amount string.

    Returns:
        Amount: The parsed amount.

    Raises:
        MalformedAmountError: If $text does not match the grammar.
        PrecisionExceededError: If the fraction has more than FRACTIONAL_LENGTH digits.
        ValueOutOfRangeError: If the value is not below MAX_AMOUNT_VALUE.
    """
    currency, integer, fraction_digits = split_amount(text)

    fraction = parse_fraction(fraction_digits, text) if fraction_digits is not None else 0

    # Leading zeros are allowed; more significant digits than the maximum has are out of range
    significant = integer.lstrip("0") or "0"
    if len(significant) > len(str(MAX_AMOUNT_VALUE)) or int(significant) >= MAX_AMOUNT_VALUE:
        raise ValueOutOfRangeError(text, significant, MAX_AMOUNT_VALUE)
    value = int(significant)

    return Amount(currency, value, fraction)
