################################################################################
# File Name: exceptions.py
# Purpose/Description: VIN decoding exceptions with stable error codes
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
VIN decoder exceptions module.

Every exception carries a stable ``code`` for programmatic handling, distinct
from its human-readable message. Subclasses also derive from the common
error class for their category (DataError, RetryableError, ConfigurationError):
- VinDecoderError: Base exception for VIN decoder errors (VIN_DECODE_FAILED)
- VinRequiredError: VIN is missing or empty (VIN_REQUIRED)
- VinValidationError: VIN format is invalid (VIN_INVALID)
- VinNotFoundError: No provider returned usable data (VIN_NOT_FOUND)
- VinApiError: Error calling a decoding provider (VIN_PROVIDER_ERROR)
- VinApiTimeoutError: Provider request timed out (VIN_PROVIDER_TIMEOUT)
- VinConfigurationError: Decoder configuration is unusable (VIN_CONFIG_INVALID)
"""

from common.error_handler import BaseError, ConfigurationError, DataError, RetryableError


# ================================================================================
# VIN Decoder Exceptions
# ================================================================================

class VinDecoderError(BaseError):
    """Base exception for VIN decoder errors."""
    code = 'VIN_DECODE_FAILED'


class VinRequiredError(VinDecoderError, DataError):
    """VIN is missing or empty."""
    code = 'VIN_REQUIRED'


class VinValidationError(VinDecoderError, DataError):
    """VIN format is invalid."""
    code = 'VIN_INVALID'


class VinNotFoundError(VinDecoderError, DataError):
    """No provider returned usable data for the VIN."""
    code = 'VIN_NOT_FOUND'


class VinApiError(VinDecoderError, RetryableError):
    """Error calling a decoding provider."""
    code = 'VIN_PROVIDER_ERROR'


class VinApiTimeoutError(VinApiError):
    """Decoding provider request timed out."""
    code = 'VIN_PROVIDER_TIMEOUT'


class VinConfigurationError(VinDecoderError, ConfigurationError):
    """Decoder configuration is unusable."""
    code = 'VIN_CONFIG_INVALID'
