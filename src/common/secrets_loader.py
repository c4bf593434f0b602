################################################################################
# File Name: secrets_loader.py
# Purpose/Description: Loading of .env files and resolution of config placeholders
# Author: Michael Cornelison
# Creation Date: 2026-01-21
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-21    | M. Cornelison | Initial implementation
# 2026-10-19    | M. Cornelison | Parse .env files with python-dotenv
# ================================================================================
################################################################################

"""
Secrets management module.

Provides secure loading and resolution of secrets:
- Loads environment variables from .env file (python-dotenv)
- Resolves ${VAR_NAME} placeholders in configuration
- Supports default values: ${VAR_NAME:default}
- Never logs or exposes secret values

Usage:
    from common.secrets_loader import loadConfigWithSecrets

    config = loadConfigWithSecrets('vin_decoder_config.json')
"""

import json
import logging
import os
import re
from pathlib import Path
from typing import Any

from dotenv import dotenv_values

logger = logging.getLogger(__name__)

# Pattern to match ${VAR_NAME} or ${VAR_NAME:default}
PLACEHOLDER_PATTERN = re.compile(r'\$\{([^}:]+)(?::([^}]*))?\}')


def loadEnvFile(envPath: str | None = None) -> dict[str, str]:
    """
    Load environment variables from .env file.

    Args:
        envPath: Path to .env file. Defaults to .env in current directory.

    Returns:
        Dictionary of loaded variable names (values are never returned)

    Note:
        Does not override existing environment variables.
    """
    if envPath is None:
        envPath = '.env'

    loadedVars: dict[str, str] = {}
    envFile = Path(envPath)

    if not envFile.exists():
        logger.debug(f".env file not found at {envPath}")
        return loadedVars

    for key, value in dotenv_values(envFile).items():
        if value is None:
            logger.warning(f"Ignoring .env entry without value: {key}")
            continue

        if key not in os.environ:
            os.environ[key] = value
            loadedVars[key] = '[LOADED]'

    logger.info(f"Loaded {len(loadedVars)} variables from {envPath}")
    return loadedVars


def resolveSecrets(config: Any) -> Any:
    """
    Recursively resolve ${VAR_NAME} placeholders in configuration.

    Supports:
    - ${VAR_NAME} - resolves to environment variable
    - ${VAR_NAME:default} - uses default if VAR_NAME not set

    Args:
        config: Configuration value (dict, list, str, or other)

    Returns:
        Configuration with placeholders resolved
    """
    if isinstance(config, dict):
        return {key: resolveSecrets(value) for key, value in config.items()}

    elif isinstance(config, list):
        return [resolveSecrets(item) for item in config]

    elif isinstance(config, str):
        return _resolveString(config)

    else:
        return config


def _resolveString(value: str) -> str:
    def replacer(match: re.Match) -> str:
        varName = match.group(1)
        defaultValue = match.group(2)

        envValue = os.environ.get(varName)

        if envValue is not None:
            logger.debug(f"Resolved {varName} from environment")
            return envValue
        elif defaultValue is not None:
            logger.debug(f"Using default for {varName}")
            return defaultValue
        else:
            logger.warning(f"Environment variable {varName} not set and no default")
            return match.group(0)

    return PLACEHOLDER_PATTERN.sub(replacer, value)


def loadConfigWithSecrets(
    configPath: str,
    envPath: str | None = None
) -> dict[str, Any]:
    """
    Load configuration file and resolve all secret placeholders.

    Args:
        configPath: Path to configuration JSON file
        envPath: Optional path to .env file

    Returns:
        Configuration dictionary with secrets resolved

    Raises:
        FileNotFoundError: If config file doesn't exist
        json.JSONDecodeError: If config file is invalid JSON
    """
    loadEnvFile(envPath)

    configFile = Path(configPath)
    if not configFile.exists():
        raise FileNotFoundError(f"Configuration file not found: {configPath}")

    logger.info(f"Loading configuration from {configPath}")

    with open(configFile, 'r', encoding='utf-8') as f:
        config = json.load(f)

    config = resolveSecrets(config)

    logger.debug("Configuration loaded and secrets resolved")
    return config
