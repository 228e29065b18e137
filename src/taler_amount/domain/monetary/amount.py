from __future__ import annotations

import string
from collections.abc import Iterable
from typing import TYPE_CHECKING

from taler_amount.domain.monetary.amount_errors import (
    AmountOverflowError,
    AmountUnderflowError,
    CurrencyMismatchError,
)

if TYPE_CHECKING:
    from taler_amount.domain.monetary.currency_registry import CurrencyRegistry

# Maximum number of fractional digits
FRACTIONAL_LENGTH = 8

# Scale of $fraction: the fractional value is `fraction / FRACTIONAL_BASE`
FRACTIONAL_BASE = 100_000_000

# 2**52, so that every $value is exactly representable as a double
MAX_AMOUNT_VALUE = 4_503_599_627_370_496

# Characters allowed in a currency code
CURRENCY_CHARS = frozenset(string.ascii_letters + string.digits + "_*-")


class Amount:
    """Fixed-point monetary amount in a currency.

    The amount equals `value + fraction / FRACTIONAL_BASE` units of $currency.
    Instances are immutable; arithmetic always returns a new Amount.

    Example:
        >>> a = Amount.from_str("EUR:1.5")
        >>> b = Amount("EUR", 23, 70007000)
        >>> str(a + b)
        'EUR:25.20007'

    Attributes:
        currency (str): Currency code (e.g. "EUR", "KUDOS"); compared case-sensitively.
        value (int): Whole currency units, `0 <= value < MAX_AMOUNT_VALUE`.
        fraction (int): Sub-units in `1 / FRACTIONAL_BASE`, `0 <= fraction < FRACTIONAL_BASE`.
    """

    __slots__ = ("_currency", "_value", "_fraction")

    # region Init

    def __init__(self, currency: str, value: int, fraction: int = 0):
        """Initialize an Amount from already valid parts.

        Parts are checked but never normalized, so a $fraction of FRACTIONAL_BASE
        or more is rejected instead of being carried into $value.

        Args:
            currency: Currency code.
            value: Whole currency units.
            fraction: Sub-units scaled by FRACTIONAL_BASE.

        Raises:
            ValueError: If any part violates the amount invariants.
        """
        # Raise: $currency must be a non-empty string of [A-Za-z0-9_*-]
        if not isinstance(currency, str) or not currency or not set(currency) <= CURRENCY_CHARS:
            raise ValueError(f"Cannot call `Amount.__init__` because $currency must be a non-empty string of [A-Za-z0-9_*-], but provided value is: '{currency}'")

        # Raise: $value must be an int in [0, MAX_AMOUNT_VALUE)
        if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value < MAX_AMOUNT_VALUE:
            raise ValueError(f"Cannot call `Amount.__init__` because $value ({value!r}) is not an int in [0, {MAX_AMOUNT_VALUE})")

        # Raise: $fraction must be an int in [0, FRACTIONAL_BASE)
        if not isinstance(fraction, int) or isinstance(fraction, bool) or not 0 <= fraction < FRACTIONAL_BASE:
            raise ValueError(f"Cannot call `Amount.__init__` because $fraction ({fraction!r}) is not an int in [0, {FRACTIONAL_BASE})")

        self._currency = currency
        self._value = value
        self._fraction = fraction

    @classmethod
    def zero(cls, currency: str) -> Amount:
        """Create the zero amount in $currency."""
        return cls(currency, 0, 0)

    @classmethod
    def from_str(cls, text: str) -> Amount:
        """Parse an Amount from its canonical string, e.g. "EUR:1.5".

        See `parse_amount` for the grammar and the errors raised.
        """
        from taler_amount.domain.monetary.amount_parser import parse_amount

        return parse_amount(text)

    # endregion

    # region Properties

    @property
    def currency(self) -> str:
        """Get the currency code."""
        return self._currency

    @property
    def value(self) -> int:
        """Get the whole currency units."""
        return self._value

    @property
    def fraction(self) -> int:
        """Get the sub-units, scaled by FRACTIONAL_BASE."""
        return self._fraction

    def is_zero(self) -> bool:
        """Check whether both $value and $fraction are zero."""
        return self._value == 0 and self._fraction == 0

    # endregion

    # region Arithmetic

    def _check_same_currency(self, other: Amount) -> None:
        # Raise: both amounts must use the same currency
        if self._currency != other.currency:
            raise CurrencyMismatchError(self, other)

    def add(self, other: Amount) -> Amount:
        """Return `self + other`.

        Args:
            other: Amount in the same currency.

        Returns:
            Amount: The sum, in $self.currency.

        Raises:
            CurrencyMismatchError: If the currencies differ.
            AmountOverflowError: If the resulting value reaches MAX_AMOUNT_VALUE.
        """
        self._check_same_currency(other)

        fraction = self._fraction + other.fraction
        carry = 0
        if fraction >= FRACTIONAL_BASE:
            carry = 1
            fraction -= FRACTIONAL_BASE

        value = self._value + other.value + carry
        # Raise: result must stay below the maximum value
        if value >= MAX_AMOUNT_VALUE:
            raise AmountOverflowError(self, other, value, MAX_AMOUNT_VALUE)

        return Amount(self._currency, value, fraction)

    def sub(self, other: Amount) -> Amount:
        """Return `self - other`.

        Args:
            other: Amount in the same currency, not greater than $self.

        Returns:
            Amount: The difference, in $self.currency.

        Raises:
            CurrencyMismatchError: If the currencies differ.
            AmountUnderflowError: If $other is greater than $self.
        """
        self._check_same_currency(other)

        value = self._value
        fraction = self._fraction
        if fraction < other.fraction:
            # Borrow one unit; with value 0 this goes negative and is caught below
            value -= 1
            fraction += FRACTIONAL_BASE

        # Raise: result must not be negative
        if value < other.value:
            raise AmountUnderflowError(self, other)

        return Amount(self._currency, value - other.value, fraction - other.fraction)

    @classmethod
    def sum(cls, amounts: Iterable[Amount], currency: str) -> Amount:
        """Add up $amounts, starting from zero in $currency.

        Raises:
            CurrencyMismatchError: If any amount is not in $currency.
            AmountOverflowError: If the running total overflows.
        """
        total = cls.zero(currency)
        for amount in amounts:
            total = total.add(amount)
        return total

    def __add__(self, other):
        if not isinstance(other, Amount):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Amount):
            return NotImplemented
        return self.sub(other)

    # endregion

    # region Comparison

    def _sort_key(self) -> tuple[str, int, int]:
        return self._currency, self._value, self._fraction

    def compare(self, other: Amount) -> int:
        """Compare by currency, then value, then fraction.

        Returns:
            int: -1 if $self sorts before $other, 0 if equal, 1 otherwise.
        """
        left, right = self._sort_key(), other._sort_key()
        return (left > right) - (left < right)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Amount):
            return False
        return self._sort_key() == other._sort_key()

    def __lt__(self, other) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    def __hash__(self) -> int:
        return hash(self._sort_key())

    # endregion

    # region Formatting

    def format(self, registry: CurrencyRegistry | None = None) -> str:
        """Render for display using the currency specification from $registry.

        Without $registry the process default registry is used as a convenience. See `format_amount`.
        """
        from taler_amount.domain.monetary.amount_formatter import format_amount

        return format_amount(self, registry)

    def __str__(self) -> str:
        """Return the canonical string, e.g. 'EUR:25.20007'."""
        from taler_amount.domain.monetary.amount_formatter import to_canonical_string

        return to_canonical_string(self)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self._currency}', {self._value}, {self._fraction})"

    # endregion
