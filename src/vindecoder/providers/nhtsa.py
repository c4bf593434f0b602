################################################################################
# File Name: nhtsa.py
# Purpose/Description: NHTSA vPIC decoding provider adapter
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
NHTSA vPIC provider adapter.

The vPIC (Vehicle Product Information Catalog) API is free and needs no
credentials. Its decode endpoint returns a flat record in Results[0], so
fields are read by name. Coverage of non-US VINs is thin: the model falls
back through several fields so the result is more than just the maker.

API Documentation:
    https://vpic.nhtsa.dot.gov/api/
"""

import logging
from typing import Any
from urllib.parse import quote

from ..classifier import classifyTruckType
from ..http_client import FetchJson
from ..labels import pickStr
from ..types import DecodedVehicle
from ..year_resolver import parseYear
from .base import ProviderAdapter, buildDecodedVehicle, combineModel

logger = logging.getLogger(__name__)

NHTSA_API_BASE_URL = 'https://vpic.nhtsa.dot.gov/api/vehicles/DecodeVinValuesExtended'

PROVIDER_NAME = 'nhtsa'

# Ordered fallbacks, most specific first
MAKE_FIELDS = ('Make', 'ManufacturerName', 'Manufacturer')
MODEL_FIELDS = ('Model', 'ModelName', 'Series', 'Trim', 'BodyClass')


def pickFirstResult(payload: Any) -> dict[str, Any] | None:
    """
    Get the first record of a vPIC Results array.

    Args:
        payload: Parsed vPIC response

    Returns:
        First result record, or None when absent
    """
    if not isinstance(payload, dict):
        return None
    results = payload.get('Results')
    if not isinstance(results, list) or not results:
        return None
    first = results[0]
    return first if isinstance(first, dict) and first else None


class NhtsaAdapter(ProviderAdapter):
    """
    Decodes VINs with the NHTSA vPIC API.

    Attributes:
        apiBaseUrl: Decode endpoint; the VIN is appended as a path segment
    """

    name = PROVIDER_NAME

    def __init__(self, fetchJson: FetchJson, apiBaseUrl: str = NHTSA_API_BASE_URL):
        super().__init__(fetchJson)
        self.apiBaseUrl = (apiBaseUrl or NHTSA_API_BASE_URL).rstrip('/')

    def buildUrl(self, vin: str) -> str:
        """Build the decode URL for a VIN."""
        return f"{self.apiBaseUrl}/{quote(vin, safe='')}?format=json"

    def decode(self, vin: str) -> DecodedVehicle | None:
        logger.info(f"Decoding VIN via NHTSA API: {vin}")
        fields = pickFirstResult(self.fetchJson(self.buildUrl(vin)))
        if fields is None:
            logger.debug(f"NHTSA returned no results for {vin}")
            return None

        errorCode = pickStr(fields.get('ErrorCode'))
        if errorCode and errorCode != '0':
            logger.warning(
                f"NHTSA API returned error code {errorCode}: {pickStr(fields.get('ErrorText'))}"
            )

        make = pickStr(*(fields.get(name) for name in MAKE_FIELDS))
        modelName = pickStr(*(fields.get(name) for name in MODEL_FIELDS))

        return buildDecodedVehicle(
            vin=vin,
            provider=self.name,
            year=parseYear(fields.get('ModelYear')),
            make=make,
            modelName=modelName,
            combinedModel=combineModel(make, modelName),
            truckType=classifyTruckType(fields),
            vehicleType=pickStr(fields.get('VehicleType')),
            bodyClass=pickStr(fields.get('BodyClass')),
        )
