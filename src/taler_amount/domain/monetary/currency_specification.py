from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any


class CurrencySpecification:
    """Display rules of one currency.

    Attributes:
        name (str): Human-readable name (e.g. "Japanese Yen", "Bitcoin (Mainnet)").
        num_fractional_input_digits (int): How many digits a user may enter after the decimal separator.
        num_fractional_normal_digits (int): How many fractional digits are normally displayed
            (2 for €, $ and £; 0 for ¥).
        num_fractional_trailing_zero_digits (int): How many trailing zero digits are displayed;
            usually the same as $num_fractional_normal_digits.
        alt_unit_names (Mapping[int, str]): Power of ten -> unit name. Always has an entry under 0
            with the base name, e.g. {0: "€"} or {0: "BTC", -3: "mBTC"}.
    """

    __slots__ = (
        "_name",
        "_num_fractional_input_digits",
        "_num_fractional_normal_digits",
        "_num_fractional_trailing_zero_digits",
        "_alt_unit_names",
    )

    def __init__(
        self,
        name: str,
        alt_unit_names: Mapping[int, str],
        num_fractional_input_digits: int = 2,
        num_fractional_normal_digits: int = 2,
        num_fractional_trailing_zero_digits: int = 0,
    ) -> None:
        # Raise: $name must be a non-empty string
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"$name must be a non-empty string, but provided value is: '{name}'")

        for arg_name, digits in (
            ("num_fractional_input_digits", num_fractional_input_digits),
            ("num_fractional_normal_digits", num_fractional_normal_digits),
            ("num_fractional_trailing_zero_digits", num_fractional_trailing_zero_digits),
        ):
            # Raise: digit counts are non-negative integers
            if not isinstance(digits, int) or isinstance(digits, bool) or digits < 0:
                raise ValueError(f"${arg_name} must be a non-negative integer, but provided value is: {digits}")

        # Raise: the base unit name (power 0) is mandatory
        if 0 not in alt_unit_names:
            raise ValueError(f"$alt_unit_names must contain an entry for power 0, but provided value is: {dict(alt_unit_names)}")

        self._name = name
        self._num_fractional_input_digits = num_fractional_input_digits
        self._num_fractional_normal_digits = num_fractional_normal_digits
        self._num_fractional_trailing_zero_digits = num_fractional_trailing_zero_digits
        self._alt_unit_names = MappingProxyType(dict(alt_unit_names))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CurrencySpecification:
        """Build a specification from its JSON shape.

        Unit names arrive with string keys (JSON object keys), e.g. {"0": "BTC", "-3": "mBTC"}.

        Args:
            data: Mapping with keys `name`, `alt_unit_names` and optionally the three
                `num_fractional_*_digits` counts.

        Returns:
            CurrencySpecification: The parsed specification.

        Raises:
            ValueError: If a key is missing or a value has the wrong shape.
        """
        # Raise: required keys must be present
        missing = [key for key in ("name", "alt_unit_names") if key not in data]
        if missing:
            raise ValueError(f"Cannot call `CurrencySpecification.from_dict` because keys {missing} are missing")

        raw_unit_names = data["alt_unit_names"]
        if not isinstance(raw_unit_names, Mapping):
            raise ValueError(f"$alt_unit_names must be an object, but provided value is: {raw_unit_names!r}")

        try:
            alt_unit_names = {int(power): str(unit) for power, unit in raw_unit_names.items()}
        except ValueError as e:
            raise ValueError(f"$alt_unit_names keys must be integer powers of ten, but provided value is: {dict(raw_unit_names)}") from e

        return cls(
            name=data["name"],
            alt_unit_names=alt_unit_names,
            num_fractional_input_digits=data.get("num_fractional_input_digits", 2),
            num_fractional_normal_digits=data.get("num_fractional_normal_digits", 2),
            num_fractional_trailing_zero_digits=data.get("num_fractional_trailing_zero_digits", 0),
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def num_fractional_input_digits(self) -> int:
        return self._num_fractional_input_digits

    @property
    def num_fractional_normal_digits(self) -> int:
        return self._num_fractional_normal_digits

    @property
    def num_fractional_trailing_zero_digits(self) -> int:
        return self._num_fractional_trailing_zero_digits

    @property
    def alt_unit_names(self) -> Mapping[int, str]:
        return self._alt_unit_names

    @property
    def base_unit_name(self) -> str:
        """Get the unit name for power of ten 0 (e.g. "€")."""
        return self._alt_unit_names[0]

    def __eq__(self, other) -> bool:
        if not isinstance(other, CurrencySpecification):
            return False
        return (
            self.name == other.name
            and self.num_fractional_input_digits == other.num_fractional_input_digits
            and self.num_fractional_normal_digits == other.num_fractional_normal_digits
            and self.num_fractional_trailing_zero_digits == other.num_fractional_trailing_zero_digits
            and dict(self.alt_unit_names) == dict(other.alt_unit_names)
        )

    def __hash__(self) -> int:
        return hash((self.name, self.num_fractional_normal_digits, tuple(sorted(self.alt_unit_names.items()))))

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}('{self.name}', {dict(self.alt_unit_names)}, "
            f"input={self.num_fractional_input_digits}, normal={self.num_fractional_normal_digits}, "
            f"trailing_zero={self.num_fractional_trailing_zero_digits})"
        )
