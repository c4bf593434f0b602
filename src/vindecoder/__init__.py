################################################################################
# File Name: __init__.py
# Purpose/Description: VIN decoding package
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
VIN decoding package for the fleet backend.

Decodes truck VINs through two providers (Vincario for EU/global coverage,
NHTSA vPIC for US coverage), classifies the truck type and reconciles the
model year with the VIN's year character.

Types:
    DecodedVehicle: Result of a VIN decode
    ProviderMode: Which provider(s) are called
    TruckType: Truck category labels

Exceptions:
    VinDecoderError: Base exception for VIN decoder errors
    VinRequiredError: VIN is missing (VIN_REQUIRED)
    VinValidationError: VIN format is invalid (VIN_INVALID)
    VinNotFoundError: No provider returned usable data (VIN_NOT_FOUND)
    VinApiError: Provider call failed (VIN_PROVIDER_ERROR)
    VinApiTimeoutError: Provider call timed out (VIN_PROVIDER_TIMEOUT)
    VinConfigurationError: Configuration is unusable (VIN_CONFIG_INVALID)

Classes:
    VinDecoder: Decodes VINs and merges provider results

Usage:
    from vindecoder import VinDecoder, loadDecoderConfig

    decoder = VinDecoder(loadDecoderConfig())
    vehicle = decoder.decodeVin('1M8GDM9AXKP042788')
"""

from .types import DecodedVehicle, ProviderMode, TruckType

from .exceptions import (
    VinDecoderError,
    VinRequiredError,
    VinValidationError,
    VinNotFoundError,
    VinApiError,
    VinApiTimeoutError,
    VinConfigurationError,
)

from .validator import normalizeVin, isValidVinFormat, requireValidVin
from .labels import normalizeLabelKey, buildLabelMap, pickLabel
from .year_resolver import modelYearCandidates, coerceYear
from .classifier import classifyTruckType
from .config import loadDecoderConfig, validateDecoderConfig, getProviderMode
from .decoder import VinDecoder, mergeDecodedVehicles

from .helpers import (
    createVinDecoderFromConfig,
    decodeVin,
    validateVinFormat,
    isPrimaryProviderEnabled,
)

__all__ = [
    # Types
    'DecodedVehicle',
    'ProviderMode',
    'TruckType',
    # Exceptions
    'VinDecoderError',
    'VinRequiredError',
    'VinValidationError',
    'VinNotFoundError',
    'VinApiError',
    'VinApiTimeoutError',
    'VinConfigurationError',
    # Functions
    'normalizeVin',
    'isValidVinFormat',
    'requireValidVin',
    'normalizeLabelKey',
    'buildLabelMap',
    'pickLabel',
    'modelYearCandidates',
    'coerceYear',
    'classifyTruckType',
    'loadDecoderConfig',
    'validateDecoderConfig',
    'getProviderMode',
    'mergeDecodedVehicles',
    # Classes
    'VinDecoder',
    # Helpers
    'createVinDecoderFromConfig',
    'decodeVin',
    'validateVinFormat',
    'isPrimaryProviderEnabled',
]
