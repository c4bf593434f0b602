################################################################################
# File Name: config_validator.py
# Purpose/Description: Configuration defaults and field type checks
# Author: Michael Cornelison
# Creation Date: 2026-01-21
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-21    | M. Cornelison | Initial implementation
# 2026-10-19    | M. Cornelison | Service-level defaults, dropped required keys
# ================================================================================
################################################################################

"""
Configuration validation module.

Provides validation of configuration dictionaries with:
- Default value application
- Nested configuration support (dot notation)
- Type checks for individual fields

Usage:
    from common.config_validator import ConfigValidator

    validator = ConfigValidator(defaults={'vinDecoder.apiTimeoutSeconds': 30})
    config = validator.validate(rawConfig)
"""

import logging
from typing import Any

logger = logging.getLogger(__name__)


DEFAULTS: dict[str, Any] = {
    'logging.level': 'INFO',
    'logging.file': None,
}


class ConfigValidator:
    """
    Validates configuration dictionaries.

    Attributes:
        defaults: Dictionary of default values for optional fields
    """

    def __init__(self, defaults: dict[str, Any] | None = None):
        """
        Initialize the validator.

        Args:
            defaults: Default values in dot notation, merged over DEFAULTS
        """
        self.defaults = {**DEFAULTS, **(defaults or {})}

    def validate(self, config: dict[str, Any]) -> dict[str, Any]:
        """
        Apply defaults to a configuration.

        Args:
            config: Raw configuration dictionary

        Returns:
            Configuration with defaults applied
        """
        config = self._applyDefaults(config)

        logger.debug("Configuration validated successfully")
        return config

    def _applyDefaults(self, config: dict[str, Any]) -> dict[str, Any]:
        for key, defaultValue in self.defaults.items():
            if self.getNestedValue(config, key) is None:
                self._setNestedValue(config, key, defaultValue)
                logger.debug(f"Applied default for {key}: {defaultValue}")

        return config

    def getNestedValue(self, config: dict[str, Any], key: str) -> Any:
        """
        Get a value from nested dictionary using dot notation.

        Args:
            config: Configuration dictionary
            key: Dot-notation key (e.g., 'vinDecoder.vincario.apiKey')

        Returns:
            Value if found, None otherwise
        """
        keys = key.split('.')
        value = config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return None

        return value

    def _setNestedValue(self, config: dict[str, Any], key: str, value: Any) -> None:
        keys = key.split('.')
        current = config

        for k in keys[:-1]:
            if not isinstance(current.get(k), dict):
                current[k] = {}
            current = current[k]

        current[keys[-1]] = value

    def validateField(
        self,
        config: dict[str, Any],
        key: str,
        expectedType: type | tuple[type, ...],
        allowNone: bool = False
    ) -> bool:
        """
        Validate a specific field's type.

        Args:
            config: Configuration dictionary
            key: Dot-notation key to validate
            expectedType: Expected Python type(s)
            allowNone: Whether None is acceptable

        Returns:
            True if valid, False otherwise
        """
        value = self.getNestedValue(config, key)

        if value is None:
            return allowNone

        # bool is an int subclass but never a valid number setting
        if isinstance(value, bool) and bool not in (
            expectedType if isinstance(expectedType, tuple) else (expectedType,)
        ):
            return False

        return isinstance(value, expectedType)
