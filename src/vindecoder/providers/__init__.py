################################################################################
# File Name: __init__.py
# Purpose/Description: VIN decoding provider adapters
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
Provider adapters.

Classes:
    ProviderAdapter: Base class for provider adapters
    VincarioAdapter: Signed Vincario (vindecoder.eu) API, EU/global coverage
    NhtsaAdapter: Public NHTSA vPIC API, US coverage
"""

from .base import ProviderAdapter, buildDecodedVehicle, combineModel
from .nhtsa import NHTSA_API_BASE_URL, NhtsaAdapter, pickFirstResult
from .vincario import VINCARIO_API_PREFIX, VincarioAdapter, computeControlSum

__all__ = [
    'ProviderAdapter',
    'VincarioAdapter',
    'NhtsaAdapter',
    'buildDecodedVehicle',
    'combineModel',
    'computeControlSum',
    'pickFirstResult',
    'NHTSA_API_BASE_URL',
    'VINCARIO_API_PREFIX',
]
