################################################################################
# File Name: base.py
# Purpose/Description: Shared shape of the VIN decoding provider adapters
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
Provider adapter base module.

An adapter calls one external decoding service and maps its payload to a
DecodedVehicle. It returns None when the payload carries no useful signal
(no year, no model text and no truck type) and raises VinApiError when the
call itself fails.
"""

import logging
from abc import ABC, abstractmethod

from ..http_client import FetchJson
from ..labels import joinNonEmpty, pickStr
from ..types import DecodedVehicle
from ..year_resolver import coerceYear

logger = logging.getLogger(__name__)


def combineModel(make: str, modelName: str) -> str:
    """
    Build the "make model" text shown for a vehicle.

    Args:
        make: Manufacturer text
        modelName: Model text

    Returns:
        "{make} {modelName}", falling back to modelName, then make
    """
    return pickStr(joinNonEmpty([make, modelName]), modelName, make)


def buildDecodedVehicle(
    vin: str,
    provider: str,
    year: int | None,
    make: str,
    modelName: str,
    combinedModel: str,
    truckType: str,
    vehicleType: str,
    bodyClass: str
) -> DecodedVehicle | None:
    """
    Assemble an adapter result, or None when nothing useful was decoded.

    Args:
        vin: Normalized VIN
        provider: Provider name recorded in raw
        year: Year as parsed from the payload (before coercion)
        make: Manufacturer text
        modelName: Model text before combining with make
        combinedModel: Combined "make model" text
        truckType: Classified truck type
        vehicleType: Provider's vehicle type text
        bodyClass: Provider's body class text

    Returns:
        DecodedVehicle or None
    """
    coercedYear = coerceYear(vin, year)
    if not (coercedYear or combinedModel or truckType):
        logger.debug(f"{provider} returned no usable data for {vin}")
        return None

    return DecodedVehicle(
        vin=vin,
        year=coercedYear,
        model=combinedModel,
        truckType=truckType,
        raw={
            'provider': provider,
            'make': make,
            'model': modelName,
            'vehicleType': vehicleType,
            'bodyClass': bodyClass,
        },
    )


class ProviderAdapter(ABC):
    """
    Base class for decoding provider adapters.

    Attributes:
        name: Provider name used in diagnostics and merged results
        fetchJson: Callable performing GET url -> parsed JSON
    """

    name: str = ''

    def __init__(self, fetchJson: FetchJson):
        self.fetchJson = fetchJson

    @property
    def isConfigured(self) -> bool:
        """Whether the adapter has what it needs to make a call."""
        return True

    @abstractmethod
    def decode(self, vin: str) -> DecodedVehicle | None:
        """
        Decode a normalized, valid VIN.

        Args:
            vin: Normalized VIN

        Returns:
            DecodedVehicle, or None when the provider has no useful data

        Raises:
            VinApiError: If the provider call fails
        """
