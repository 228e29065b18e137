"""Errors raised by parsing, arithmetic and formatting of amounts."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from taler_amount.domain.monetary.amount import Amount


class AmountError(ValueError):
    """Base class for all amount errors."""


class MalformedAmountError(AmountError):
    """Raised when a string does not match `<currency>:<value>[.<fraction>]`."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Cannot parse amount from $text '{text}' because {reason}")


class PrecisionExceededError(AmountError):
    """Raised when the fractional part has more digits than the fixed base supports."""

    def __init__(self, text: str, digits: int, max_digits: int):
        self.text = text
        self.digits = digits
        self.max_digits = max_digits
        super().__init__(f"Cannot parse amount from $text '{text}' because the fraction has {digits} digits (max {max_digits})")


class ValueOutOfRangeError(AmountError):
    """Raised when the integer part does not fit the representable range."""

    def __init__(self, text: str, digits: str, max_value: int):
        self.text = text
        self.digits = digits
        self.max_value = max_value
        super().__init__(f"Cannot parse amount from $text '{text}' because $value ({digits}) >= {max_value}")


class CurrencyMismatchError(AmountError):
    """Raised when two amounts of different currencies are combined."""

    def __init__(self, left: Amount, right: Amount):
        self.left = left
        self.right = right
        super().__init__(f"Cannot operate on different currencies: '{left.currency}' and '{right.currency}'")


class AmountOverflowError(AmountError):
    """Raised when an addition would reach or exceed the maximum amount value."""

    def __init__(self, left: Amount, right: Amount, value: int, max_value: int):
        self.left = left
        self.right = right
        self.value = value
        self.max_value = max_value
        super().__init__(f"Cannot add {right} to {left} because the resulting $value ({value}) >= {max_value}")


class AmountUnderflowError(AmountError):
    """Raised when a subtraction would produce a negative amount."""

    def __init__(self, left: Amount, right: Amount):
        self.left = left
        self.right = right
        super().__init__(f"Cannot subtract {right} from {left} because the result would be negative")


class UnknownCurrencyError(AmountError, LookupError):
    """Raised when no currency specification is registered for a currency code."""

    def __init__(self, currency: str, available: list[str] | None = None):
        self.currency = currency
        self.available = available or []
        super().__init__(f"No currency specification found for '{currency}'. Available currencies: {self.available}")
