################################################################################
# File Name: helpers.py
# Purpose/Description: Factory and convenience functions for VIN decoding
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
VIN decoder helper functions module.
"""

import logging
from typing import Any

from .config import getProviderMode, loadDecoderConfig
from .decoder import VinDecoder
from .types import DecodedVehicle, ProviderMode
from .validator import isValidVinFormat, normalizeVin

logger = logging.getLogger(__name__)


def createVinDecoderFromConfig(config: dict[str, Any] | None = None) -> VinDecoder:
    """
    Create a VinDecoder from configuration.

    Args:
        config: Configuration dictionary; loaded from the packaged config
            file and environment when None

    Returns:
        Configured VinDecoder instance
    """
    if config is None:
        config = loadDecoderConfig()
    return VinDecoder(config)


def decodeVin(vin: Any, config: dict[str, Any] | None = None) -> DecodedVehicle:
    """
    Decode one VIN with a freshly configured decoder.

    Args:
        vin: Raw VIN
        config: Optional configuration dictionary

    Returns:
        DecodedVehicle

    Raises:
        VinDecoderError: Subclass describing why decoding failed
    """
    return createVinDecoderFromConfig(config).decodeVin(vin)


def validateVinFormat(vin: Any) -> bool:
    """Check a raw VIN after normalization."""
    return isValidVinFormat(normalizeVin(vin))


def isPrimaryProviderEnabled(config: dict[str, Any]) -> bool:
    """
    Check whether the Vincario adapter would be called for this config.

    Args:
        config: Configuration dictionary with 'vinDecoder' section

    Returns:
        True when the mode uses Vincario and both credentials are set
    """
    if getProviderMode(config) == ProviderMode.NHTSA_ONLY:
        return False
    vincario = config.get('vinDecoder', {}).get('vincario', {})
    return bool(
        str(vincario.get('apiKey') or '').strip()
        and str(vincario.get('secretKey') or '').strip()
    )
