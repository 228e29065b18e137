"""Loading of currency specifications from a JSON configuration file.

The file holds either the `/config` response of a merchant backend (currency
specifications under its `currencies` key) or a bare object mapping currency
codes to specifications::

    {
        "currencies": {
            "BTC": {"name": "Bitcoin", "num_fractional_normal_digits": 8, "alt_unit_names": {"0": "BTC", "-3": "mBTC"}}
        }
    }

The path comes from the `path` argument or the `TALER_CURRENCY_SPECS` environment
variable (a `.env` file is honoured).
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from dotenv import dotenv_values, find_dotenv

from taler_amount.domain.monetary.currency_registry import (
    DEFAULT_CURRENCY_REGISTRY,
    CurrencyRegistry,
    set_default_registry,
)

logger = logging.getLogger(__name__)

CURRENCY_SPECS_ENV_VAR = "TALER_CURRENCY_SPECS"


def resolve_currency_specs_path(path: str | Path | None = None) -> Path | None:
    """Return $path, or the path from TALER_CURRENCY_SPECS, or None if neither is set.

    The process environment wins over a `.env` file; `.env` is read without touching `os.environ`.
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CURRENCY_SPECS_ENV_VAR)
    if not env_path:
        dotenv_path = find_dotenv(usecwd=True)
        if dotenv_path:
            env_path = dotenv_values(dotenv_path).get(CURRENCY_SPECS_ENV_VAR)
    if not env_path:
        return None
    return Path(env_path)


def load_currency_registry(path: str | Path | None = None) -> CurrencyRegistry:
    """Build a CurrencyRegistry from a JSON configuration file.

    Args:
        path: JSON file to read. If None, TALER_CURRENCY_SPECS is used; if that is
            unset as well, DEFAULT_CURRENCY_REGISTRY is returned.

    Returns:
        CurrencyRegistry: Registry with every specification from the file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid JSON or a specification is invalid.
    """
    resolved = resolve_currency_specs_path(path)
    if resolved is None:
        logger.debug(f"No currency specification file configured (${CURRENCY_SPECS_ENV_VAR} unset), using defaults")
        return DEFAULT_CURRENCY_REGISTRY

    try:
        with open(resolved, "r", encoding="utf-8") as f:
            document = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Cannot load currency specifications because '{resolved}' is not valid JSON: {e}") from e

    # Raise: top-level must be a JSON object
    if not isinstance(document, dict):
        raise ValueError(f"Cannot load currency specifications because '{resolved}' does not contain a JSON object")

    currencies = document.get("currencies", document)
    # Raise: `currencies` must be a JSON object
    if not isinstance(currencies, dict):
        raise ValueError(f"Cannot load currency specifications because `currencies` in '{resolved}' is not a JSON object")

    registry = CurrencyRegistry.from_config(currencies)
    for code in registry:
        logger.debug(f"Loaded currency specification '{code}' ({registry[code].name})")
    logger.info(f"Loaded {len(registry)} currency specification(s) from '{resolved}'")
    return registry


def install_currency_registry(path: str | Path | None = None) -> CurrencyRegistry:
    """Load a registry (see `load_currency_registry`) and make it the process default.

    Returns:
        CurrencyRegistry: The newly installed registry.
    """
    registry = load_currency_registry(path)
    set_default_registry(registry)
    logger.info(f"Installed default currency registry with currencies {sorted(registry)}")
    return registry
