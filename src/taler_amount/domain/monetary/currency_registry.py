from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from taler_amount.domain.monetary.amount_errors import UnknownCurrencyError
from taler_amount.domain.monetary.currency_specification import CurrencySpecification


class CurrencyRegistry(Mapping[str, CurrencySpecification]):
    """Read-only mapping from currency code to its CurrencySpecification.

    Codes are matched exactly (case-sensitive). A registry is never edited after
    construction; `with_specification` returns a new registry instead.

    Examples:
        >>> registry = CurrencyRegistry({"EUR": EUR})
        >>> registry.lookup("EUR").base_unit_name
        '€'
        >>> bigger = registry.with_specification("KUDOS", KUDOS)
        >>> "KUDOS" in registry, "KUDOS" in bigger
        (False, True)
    """

    __slots__ = ("_specifications",)

    def __init__(self, specifications: Mapping[str, CurrencySpecification] | None = None):
        specifications = dict(specifications or {})
        for code, specification in specifications.items():
            # Raise: every code must be a non-empty string
            if not isinstance(code, str) or not code:
                raise ValueError(f"$code must be a non-empty string, but provided value is: '{code}'")
            # Raise: every value must be a CurrencySpecification
            if not isinstance(specification, CurrencySpecification):
                raise TypeError(f"Specification for '{code}' must be a CurrencySpecification instance, but provided value is: {specification}")

        self._specifications = MappingProxyType(specifications)

    @classmethod
    def from_config(cls, currencies: Mapping[str, Mapping[str, Any]]) -> CurrencyRegistry:
        """Build a registry from the JSON `currencies` object of a configuration.

        Args:
            currencies: Currency code -> specification in its JSON shape.

        Returns:
            CurrencyRegistry: Registry holding the parsed specifications.

        Raises:
            ValueError: If an entry cannot be parsed; the message names the currency code.
        """
        specifications = {}
        for code, data in currencies.items():
            try:
                specifications[code] = CurrencySpecification.from_dict(data)
            except (ValueError, TypeError) as e:
                raise ValueError(f"Invalid currency specification for '{code}': {e}") from e
        return cls(specifications)

    def lookup(self, code: str) -> CurrencySpecification:
        """Get the specification for $code.

        Raises:
            UnknownCurrencyError: If no specification is registered for $code.
        """
        specification = self._specifications.get(code)
        if specification is None:
            raise UnknownCurrencyError(code, sorted(self._specifications))
        return specification

    def with_specification(self, code: str, specification: CurrencySpecification) -> CurrencyRegistry:
        """Return a new registry with $specification registered (or replaced) under $code."""
        specifications = dict(self._specifications)
        specifications[code] = specification
        return CurrencyRegistry(specifications)

    def __getitem__(self, code: str) -> CurrencySpecification:
        return self._specifications[code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._specifications)

    def __len__(self) -> int:
        return len(self._specifications)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({sorted(self._specifications)})"


# Predefined currencies
KUDOS = CurrencySpecification("KUDOS", {0: "KUDOS"}, num_fractional_input_digits=2, num_fractional_normal_digits=2)
USD = CurrencySpecification("US Dollar", {0: "$"}, num_fractional_input_digits=2, num_fractional_normal_digits=2)
EUR = CurrencySpecification("Euro", {0: "€"}, num_fractional_input_digits=2, num_fractional_normal_digits=2)
JPY = CurrencySpecification("Japanese Yen", {0: "¥"}, num_fractional_input_digits=2, num_fractional_normal_digits=0)

DEFAULT_CURRENCY_REGISTRY = CurrencyRegistry({"KUDOS": KUDOS, "USD": USD, "EUR": EUR, "JPY": JPY})

# Process-wide default, replaced wholesale by `set_default_registry`
_default_registry: CurrencyRegistry = DEFAULT_CURRENCY_REGISTRY


def get_default_registry() -> CurrencyRegistry:
    """Get the registry used when no registry is passed explicitly."""
    return _default_registry


def set_default_registry(registry: CurrencyRegistry) -> CurrencyRegistry:
    """Replace the process-wide default registry and return the previous one.

    Readers always see either the old or the new registry, never a mix.
    """
    global _default_registry

    # Raise: only whole registries can be installed
    if not isinstance(registry, CurrencyRegistry):
        raise TypeError(f"$registry must be a CurrencyRegistry instance, but provided value is: {registry}")

    previous = _default_registry
    _default_registry = registry
    return previous
