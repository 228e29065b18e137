__version__ = "0.1.0"

from taler_amount.domain.monetary.amount import FRACTIONAL_BASE, FRACTIONAL_LENGTH, MAX_AMOUNT_VALUE, Amount
from taler_amount.domain.monetary.amount_errors import (
    AmountError,
    AmountOverflowError,
    AmountUnderflowError,
    CurrencyMismatchError,
    MalformedAmountError,
    PrecisionExceededError,
    UnknownCurrencyError,
    ValueOutOfRangeError,
)
from taler_amount.domain.monetary.amount_formatter import format_amount, format_with_specification, to_canonical_string
from taler_amount.domain.monetary.amount_parser import parse_amount
from taler_amount.domain.monetary.currency_registry import CurrencyRegistry, DEFAULT_CURRENCY_REGISTRY
from taler_amount.domain.monetary.currency_specification import CurrencySpecification

__all__ = [
    "FRACTIONAL_BASE",
    "FRACTIONAL_LENGTH",
    "MAX_AMOUNT_VALUE",
    "Amount",
    "AmountError",
    "AmountOverflowError",
    "AmountUnderflowError",
    "CurrencyMismatchError",
    "MalformedAmountError",
    "PrecisionExceededError",
    "UnknownCurrencyError",
    "ValueOutOfRangeError",
    "format_amount",
    "format_with_specification",
    "to_canonical_string",
    "parse_amount",
    "CurrencyRegistry",
    "DEFAULT_CURRENCY_REGISTRY",
    "CurrencySpecification",
]
