################################################################################
# File Name: vincario.py
# Purpose/Description: Vincario (vindecoder.eu) decoding provider adapter
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
Vincario provider adapter.

Vincario (formerly vindecoder.eu) covers European trucks well. Requests are
signed with a control sum: the first 10 hex characters of
sha1("{vin}|decode|{apiKey}|{secretKey}"). The response carries a flat
"decode" array of {label, value} entries whose labels vary between vehicle
families, so fields are picked through normalized label fallback chains.

Without both credentials the adapter is disabled and decode() returns None
without making a call.
"""

import hashlib
import logging
from urllib.parse import quote

from common.logging_config import registerSecret

from ..classifier import classifyTruckType
from ..http_client import FetchJson
from ..labels import buildLabelMap, pickLabel, pickStr
from ..types import DecodedVehicle
from ..year_resolver import parseYear
from .base import ProviderAdapter, buildDecodedVehicle, combineModel

logger = logging.getLogger(__name__)

VINCARIO_API_PREFIX = 'https://api.vindecoder.eu/3.2'

PROVIDER_NAME = 'vincario'

DECODE_OPERATION = 'decode'

CONTROL_SUM_LENGTH = 10

# Ordered label fallbacks, most specific first
MAKE_LABELS = ('make', 'manufacturer', 'manufacturer_name', 'brand')
MODEL_LABELS = ('model', 'model_name')
YEAR_LABELS = ('model_year', 'production_year', 'year')
VEHICLE_TYPE_LABELS = ('product_type', 'vehicle_type', 'vehicle_category', 'body')
BODY_CLASS_LABELS = ('body', 'body_class', 'cab_type', 'series')
MODEL_NAME_LABELS = ('series', 'trim', 'variant')


def computeControlSum(vin: str, apiKey: str, secretKey: str, operation: str = DECODE_OPERATION) -> str:
    """
    Compute the request signature expected by the Vincario API.

    Args:
        vin: Normalized VIN
        apiKey: Vincario API key
        secretKey: Vincario secret key
        operation: API operation id

    Returns:
        First 10 hex characters of the SHA-1 digest
    """
    message = f"{vin}|{operation}|{apiKey}|{secretKey}"
    return hashlib.sha1(message.encode('utf-8')).hexdigest()[:CONTROL_SUM_LENGTH]


class VincarioAdapter(ProviderAdapter):
    """
    Decodes VINs with the Vincario API.

    Attributes:
        apiKey: Vincario API key ('' disables the adapter)
        secretKey: Vincario secret key ('' disables the adapter)
        apiPrefix: API base URL including version
    """

    name = PROVIDER_NAME

    def __init__(
        self,
        fetchJson: FetchJson,
        apiKey: str | None = None,
        secretKey: str | None = None,
        apiPrefix: str = VINCARIO_API_PREFIX
    ):
        super().__init__(fetchJson)
        self.apiKey = (apiKey or '').strip()
        self.secretKey = (secretKey or '').strip()
        self.apiPrefix = (apiPrefix or VINCARIO_API_PREFIX).strip().rstrip('/')

        registerSecret(self.apiKey)
        registerSecret(self.secretKey)

    @property
    def isConfigured(self) -> bool:
        return bool(self.apiKey and self.secretKey)

    def buildUrl(self, vin: str) -> str:
        """Build the signed decode URL for a VIN."""
        controlSum = computeControlSum(vin, self.apiKey, self.secretKey)
        return (
            f"{self.apiPrefix}/{quote(self.apiKey, safe='')}/{quote(controlSum, safe='')}"
            f"/{DECODE_OPERATION}/{quote(vin, safe='')}.json"
        )

    def decode(self, vin: str) -> DecodedVehicle | None:
        if not self.isConfigured:
            logger.debug("Vincario credentials not configured, skipping")
            return None

        logger.info(f"Decoding VIN via Vincario API: {vin}")
        payload = self.fetchJson(self.buildUrl(vin))
        labels = buildLabelMap(payload.get('decode') if isinstance(payload, dict) else None)

        make = pickLabel(labels, *MAKE_LABELS)
        model = pickLabel(labels, *MODEL_LABELS)
        year = parseYear(pickLabel(labels, *YEAR_LABELS))
        vehicleType = pickLabel(labels, *VEHICLE_TYPE_LABELS)
        bodyClass = pickLabel(labels, *BODY_CLASS_LABELS)
        modelName = pickStr(model, pickLabel(labels, *MODEL_NAME_LABELS), bodyClass)
        combinedModel = combineModel(make, modelName)

        truckType = classifyTruckType({
            'VehicleType': vehicleType,
            'BodyClass': bodyClass,
            'Make': make,
            'Model': combinedModel,
        })

        return buildDecodedVehicle(
            vin=vin,
            provider=self.name,
            year=year,
            make=make,
            modelName=modelName,
            combinedModel=combinedModel,
            truckType=truckType,
            vehicleType=vehicleType,
            bodyClass=bodyClass,
        )
