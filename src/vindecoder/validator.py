################################################################################
# File Name: validator.py
# Purpose/Description: Structural VIN normalization and validation
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
VIN validation module.

Structural checks only: length and alphabet. The check digit (9th character)
is not verified since its algorithm differs between manufacturer regions.
"""

import re
from typing import Any

from .exceptions import VinRequiredError, VinValidationError

VIN_LENGTH = 17

# A-Z and 0-9 without I, O and Q
VIN_PATTERN = re.compile(r'^[A-HJ-NPR-Z0-9]{17}$')

_WHITESPACE = re.compile(r'\s+')


def normalizeVin(value: Any) -> str:
    """
    Normalize a raw VIN to uppercase without any whitespace.

    Args:
        value: Raw VIN (None and non-strings are tolerated)

    Returns:
        Normalized VIN string, possibly empty
    """
    return _WHITESPACE.sub('', str(value or '').strip().upper())


def isValidVinFormat(vin: str) -> bool:
    """
    Check that a VIN is 17 characters from the allowed alphabet.

    Args:
        vin: Normalized VIN string

    Returns:
        True if VIN format is valid
    """
    return bool(VIN_PATTERN.fullmatch(vin or ''))


def requireValidVin(value: Any) -> str:
    """
    Normalize and validate a VIN, failing fast on bad input.

    Args:
        value: Raw VIN

    Returns:
        Normalized VIN

    Raises:
        VinRequiredError: If the VIN is missing or blank
        VinValidationError: If the VIN is not structurally valid
    """
    vin = normalizeVin(value)
    if not vin:
        raise VinRequiredError("VIN is required", details={'field': 'vin'})
    if not isValidVinFormat(vin):
        raise VinValidationError(
            f"VIN must be {VIN_LENGTH} characters",
            details={'field': 'vin', 'vin': vin, 'length': len(vin)}
        )
    return vin
