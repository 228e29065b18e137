from __future__ import annotations

from taler_amount.domain.monetary.amount import FRACTIONAL_BASE, FRACTIONAL_LENGTH, Amount
from taler_amount.domain.monetary.currency_registry import CurrencyRegistry, get_default_registry
from taler_amount.domain.monetary.currency_specification import CurrencySpecification


def to_canonical_string(amount: Amount) -> str:
    """Render $amount as `<currency>:<value>[.<fraction>]`.

    The fraction is written with its full 8-digit weight and trailing zeros removed;
    it is omitted when zero. The result parses back to an equal Amount.

    Example:
        >>> to_canonical_string(Amount("EUR", 25, 20007000))
        'EUR:25.20007'
    """
    if amount.fraction == 0:
        return f"{amount.currency}:{amount.value}"

    fraction = f"{amount.fraction:0{FRACTIONAL_LENGTH}d}".rstrip("0")
    return f"{amount.currency}:{amount.value}.{fraction}"


def format_with_specification(amount: Amount, specification: CurrencySpecification, unit_power: int = 0) -> str:
    """Render $amount for display, e.g. '€ 50.23'.

    Shows $specification.num_fractional_normal_digits fractional digits, truncated
    (never rounded) and zero-padded. With 0 normal digits only the whole units are shown.

    Args:
        amount: Amount to render.
        specification: Display rules of the amount's currency.
        unit_power: Power of ten of the unit to display in; 0 is the base unit, -3 shows
            the amount in thousandths (e.g. "mBTC"), 3 in thousands (e.g. "k€").

    Returns:
        str: `<unit name> <value>[.<digits>]`.

    Raises:
        ValueError: If $specification has no unit name for $unit_power.
    """
    unit_name = specification.alt_unit_names.get(unit_power)
    # Raise: the requested unit must be defined by the specification
    if unit_name is None:
        raise ValueError(f"Cannot call `format_with_specification` because '{specification.name}' has no unit name for $unit_power {unit_power}")

    value, fraction = amount.value, amount.fraction
    if unit_power != 0:
        # Rescale in whole sub-units; digits below 10**-8 of the display unit are truncated
        total = value * FRACTIONAL_BASE + fraction
        if unit_power > 0:
            total //= 10**unit_power
        else:
            total *= 10**-unit_power
        value, fraction = divmod(total, FRACTIONAL_BASE)

    digits = specification.num_fractional_normal_digits
    if digits == 0:
        return f"{unit_name} {value}"

    if digits <= FRACTIONAL_LENGTH:
        shown = fraction // 10 ** (FRACTIONAL_LENGTH - digits)
    else:
        shown = fraction * 10 ** (digits - FRACTIONAL_LENGTH)
    return f"{unit_name} {value}.{shown:0{digits}d}"


def format_amount(amount: Amount, registry: CurrencyRegistry | None = None) -> str:
    """Render $amount using the specification registered for its currency.

    Pass $registry explicitly wherever possible. Omitting it falls back to the process-wide
    default from `get_default_registry` (DEFAULT_CURRENCY_REGISTRY unless replaced with
    `set_default_registry`), a convenience for callers that do not carry a registry.

    Args:
        amount: Amount to render.
        registry: Registry to look the currency up in; the process default if None.

    Raises:
        UnknownCurrencyError: If $registry has no specification for $amount.currency.
    """
    registry = registry if registry is not None else get_default_registry()
    return format_with_specification(amount, registry.lookup(amount.currency))
