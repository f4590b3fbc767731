"""Configuration merging utilities for CLI override support.

Precedence is CLI args > config values > defaults. Only non-None CLI
arguments override configuration values.
"""

from typing import Any

from toterack.application.config.loader import load_config_from_dict
from toterack.application.config.schema import QuoteConfiguration


def merge_config_with_cli(
    config: QuoteConfiguration,
    *,
    length: float | None = None,
    width: float | None = None,
    height: float | None = None,
    columns: int | None = None,
    rows: int | None = None,
    overrides: dict[str, float] | None = None,
    price_override: float | None = None,
    material_override: float | None = None,
    delivery: float | None = None,
    wheels: bool | None = None,
    plywood_top: bool | None = None,
) -> QuoteConfiguration:
    """Merge CLI arguments with configuration values.

    Lumber overrides from the CLI are added to (and replace, per label)
    the ones in the configuration.

    Returns:
        A new, re-validated QuoteConfiguration.

    Raises:
        ConfigError: If a CLI value fails validation.

    Example:
        >>> merged = merge_config_with_cli(config, columns=4)
        >>> merged.layout.columns
        4
    """
    data: dict[str, Any] = config.model_dump()

    _set_if_given(data["container"], "length", length)
    _set_if_given(data["container"], "width", width)
    _set_if_given(data["container"], "height", height)
    _set_if_given(data["layout"], "columns", columns)
    _set_if_given(data["layout"], "rows", rows)
    _set_if_given(data["pricing"], "price_override", price_override)
    _set_if_given(data["pricing"], "material_override", material_override)
    _set_if_given(data["pricing"], "delivery", delivery)
    _set_if_given(data["addons"]["wheels"], "enabled", wheels)
    _set_if_given(data["addons"]["plywood_top"], "enabled", plywood_top)
    if overrides:
        data["lumber"]["overrides"].update(overrides)

    return load_config_from_dict(data)


def _set_if_given(section: dict[str, Any], key: str, value: Any) -> None:
    if value is not None:
        section[key] = value
