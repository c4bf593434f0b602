################################################################################
# File Name: config.py
# Purpose/Description: VIN decoder configuration loading and validation
# Author: Michael Cornelison
# Creation Date: 2026-10-19
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-10-19    | M. Cornelison | Initial implementation
# ================================================================================
################################################################################

"""
VIN decoder configuration module.

Configuration is a nested dictionary with a 'vinDecoder' section. The packaged
vin_decoder_config.json maps every setting to an environment variable through
${VAR:default} placeholders:

    VIN_DECODER_PROVIDER         nhtsa | vincario | vindecoder | vindecoder_eu | (auto)
    VINDECODER_EU_API_KEY        Vincario API key
    VINDECODER_EU_SECRET_KEY     Vincario secret key
    VINDECODER_EU_API_PREFIX     Vincario base URL override
    NHTSA_API_BASE_URL           vPIC decode endpoint override
    VIN_DECODER_TIMEOUT_SECONDS  Per-request timeout

Usage:
    from vindecoder.config import loadDecoderConfig

    config = loadDecoderConfig(envPath='.env')
"""

import copy
import logging
from pathlib import Path
from typing import Any

from common.config_validator import ConfigValidator
from common.secrets_loader import loadConfigWithSecrets

from .exceptions import VinConfigurationError
from .http_client import DEFAULT_API_TIMEOUT
from .providers.nhtsa import NHTSA_API_BASE_URL
from .providers.vincario import VINCARIO_API_PREFIX
from .types import ProviderMode

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / 'vin_decoder_config.json'

VIN_DECODER_DEFAULTS: dict[str, Any] = {
    'vinDecoder.provider': '',
    'vinDecoder.apiTimeoutSeconds': DEFAULT_API_TIMEOUT,
    'vinDecoder.concurrentProviders': True,
    'vinDecoder.vincario.apiKey': '',
    'vinDecoder.vincario.secretKey': '',
    'vinDecoder.vincario.apiPrefix': VINCARIO_API_PREFIX,
    'vinDecoder.nhtsa.apiBaseUrl': NHTSA_API_BASE_URL,
}

NHTSA_PROVIDER_NAMES = ('nhtsa',)
PRIMARY_PROVIDER_NAMES = ('vincario', 'vindecoder', 'vindecoder_eu')


def getProviderMode(config: dict[str, Any]) -> ProviderMode:
    """
    Resolve which provider(s) to call from configuration.

    Args:
        config: Configuration dictionary with 'vinDecoder' section

    Returns:
        NHTSA_ONLY, PRIMARY_ONLY, or AUTO for anything else (including unset)
    """
    provider = str(config.get('vinDecoder', {}).get('provider') or '').strip().lower()

    if provider in NHTSA_PROVIDER_NAMES:
        return ProviderMode.NHTSA_ONLY
    if provider in PRIMARY_PROVIDER_NAMES:
        return ProviderMode.PRIMARY_ONLY
    return ProviderMode.AUTO


def _parseTimeout(value: Any) -> float:
    if isinstance(value, bool):
        raise VinConfigurationError(
            "vinDecoder.apiTimeoutSeconds must be a number",
            details={'value': value}
        )
    try:
        timeout = float(value)
    except (TypeError, ValueError) as e:
        raise VinConfigurationError(
            "vinDecoder.apiTimeoutSeconds must be a number",
            details={'value': value}
        ) from e

    if timeout <= 0:
        raise VinConfigurationError(
            "vinDecoder.apiTimeoutSeconds must be positive",
            details={'value': value}
        )
    return timeout


def validateDecoderConfig(config: dict[str, Any] | None) -> dict[str, Any]:
    """
    Apply defaults to a decoder configuration and check its values.

    Args:
        config: Raw configuration dictionary (None for all defaults)

    Returns:
        Validated configuration

    Raises:
        VinConfigurationError: If a setting has an unusable value
    """
    validator = ConfigValidator(defaults=VIN_DECODER_DEFAULTS)
    config = validator.validate(copy.deepcopy(config or {}))

    vinConfig = config['vinDecoder']
    vinConfig['apiTimeoutSeconds'] = _parseTimeout(vinConfig['apiTimeoutSeconds'])
    vinConfig['provider'] = str(vinConfig.get('provider') or '').strip().lower()

    if not validator.validateField(config, 'vinDecoder.concurrentProviders', bool):
        raise VinConfigurationError(
            "vinDecoder.concurrentProviders must be true or false",
            details={'value': vinConfig.get('concurrentProviders')}
        )

    return config


def loadDecoderConfig(
    configPath: str | Path | None = None,
    envPath: str | None = None
) -> dict[str, Any]:
    """
    Load the decoder configuration file, resolving environment placeholders.

    Args:
        configPath: Path to configuration JSON (packaged default if None)
        envPath: Optional path to .env file

    Returns:
        Validated configuration dictionary

    Raises:
        VinConfigurationError: If the file is missing or invalid
    """
    path = Path(configPath) if configPath else DEFAULT_CONFIG_PATH

    try:
        config = loadConfigWithSecrets(str(path), envPath)
    except FileNotFoundError as e:
        raise VinConfigurationError(str(e), details={'path': str(path)}) from e
    except ValueError as e:
        raise VinConfigurationError(
            f"Invalid configuration file: {e}",
            details={'path': str(path)}
        ) from e

    config = validateDecoderConfig(config)
    logger.debug(f"Decoder configuration loaded | mode={getProviderMode(config).name}")
    return config
