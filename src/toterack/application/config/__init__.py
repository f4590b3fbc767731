"""Configuration loading, validation, and conversion for quote files.

Example:
    >>> from pathlib import Path
    >>> from toterack.application.config import load_config, config_to_quote_input
    >>> config = load_config(Path("rack.json"))
    >>> quote_input = config_to_quote_input(config)
"""

from toterack.application.config.adapter import config_to_quote_input
from toterack.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from toterack.application.config.merger import merge_config_with_cli
from toterack.application.config.schema import (
    SUPPORTED_VERSIONS,
    AddonConfig,
    AddonsConfig,
    ConsumablesConfig,
    ContainerConfig,
    CustomItemConfig,
    LayoutConfig,
    LumberConfig,
    PricingConfig,
    QuoteConfiguration,
)
from toterack.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "AddonConfig",
    "AddonsConfig",
    "ConfigError",
    "ConsumablesConfig",
    "ContainerConfig",
    "CustomItemConfig",
    "LayoutConfig",
    "LumberConfig",
    "PricingConfig",
    "QuoteConfiguration",
    "SUPPORTED_VERSIONS",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_to_quote_input",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
    "validate_config",
]
