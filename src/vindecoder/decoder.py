################################################################################
# File Name: decoder.py
# Purpose/Description: VIN decoding across providers with field-by-field merge
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
VIN decoder module.

Coordinates the two provider adapters according to the configured provider
mode and reconciles their results:

- NHTSA_ONLY:   NHTSA only; its errors propagate.
- PRIMARY_ONLY: Vincario first (errors downgraded to no result), then NHTSA
                if Vincario had nothing; NHTSA errors propagate.
- AUTO:         both providers independently (concurrently by default);
                errors from either are downgraded to no result.

When both providers answer, the results are merged field by field with
Vincario taking precedence (its model text is better for EU trucks) and
NHTSA filling the gaps.

Usage:
    from vindecoder import VinDecoder

    decoder = VinDecoder(config)
    vehicle = decoder.decodeVin('1M8GDM9AXKP042788')
    print(vehicle.toDict())
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from common.error_handler import formatError
from common.logging_config import logWithContext

from .config import getProviderMode, validateDecoderConfig
from .exceptions import VinNotFoundError
from .http_client import JsonHttpClient
from .labels import pickStr
from .providers.base import ProviderAdapter
from .providers.nhtsa import NhtsaAdapter
from .providers.vincario import VincarioAdapter
from .types import DecodedVehicle, ProviderMode
from .validator import requireValidVin
from .year_resolver import coerceYear

logger = logging.getLogger(__name__)

MERGED_PROVIDER_NAME = 'auto'


# ================================================================================
# Result Reconciliation
# ================================================================================

def mergeDecodedVehicles(
    vin: str,
    primary: DecodedVehicle,
    fallback: DecodedVehicle,
    currentYear: int | None = None
) -> DecodedVehicle:
    """
    Merge two provider results, preferring the primary field by field.

    Args:
        vin: Normalized VIN
        primary: Vincario result
        fallback: NHTSA result
        currentYear: Override for the current year

    Returns:
        Merged DecodedVehicle tagged with provider 'auto'
    """
    mergedYear = primary.year if primary.year is not None else fallback.year
    # A year coerceYear rejects is dropped, never passed through
    finalYear = coerceYear(vin, mergedYear, currentYear)

    return DecodedVehicle(
        vin=vin,
        year=finalYear,
        model=pickStr(primary.model, fallback.model),
        truckType=pickStr(primary.truckType, fallback.truckType),
        raw={
            'provider': MERGED_PROVIDER_NAME,
            'providers': {
                primary.provider or 'primary': primary.raw,
                fallback.provider or 'fallback': fallback.raw,
            },
        },
    )


def selectResult(
    vin: str,
    primary: DecodedVehicle | None,
    fallback: DecodedVehicle | None
) -> DecodedVehicle | None:
    """
    Pick the final result from the two optional provider results.

    Args:
        vin: Normalized VIN
        primary: Vincario result, if any
        fallback: NHTSA result, if any

    Returns:
        The merged record when both exist, the single one verbatim, or None
    """
    if primary is not None and fallback is not None:
        return mergeDecodedVehicles(vin, primary, fallback)
    return primary if primary is not None else fallback


# ================================================================================
# VIN Decoder Class
# ================================================================================

class VinDecoder:
    """
    Decodes VINs through the configured provider adapters.

    Holds no per-request state: every decode builds its own label maps and
    year candidates, and the default HTTP clients keep one requests session
    per thread, so one instance can serve concurrent callers. Injected
    adapters must be thread-safe themselves.

    Attributes:
        config: Validated configuration dictionary
        mode: ProviderMode resolved from 'vinDecoder.provider'
        vincario: Primary (Vincario) adapter
        nhtsa: Fallback (NHTSA) adapter

    Example:
        decoder = VinDecoder(loadDecoderConfig())
        try:
            vehicle = decoder.decodeVin(vin)
        except VinNotFoundError:
            ...
    """

    def __init__(
        self,
        config: dict[str, Any] | None = None,
        vincario: ProviderAdapter | None = None,
        nhtsa: ProviderAdapter | None = None
    ):
        """
        Initialize the VIN decoder.

        Args:
            config: Configuration dictionary with 'vinDecoder' section
            vincario: Adapter replacing the configured Vincario adapter
            nhtsa: Adapter replacing the configured NHTSA adapter

        Raises:
            VinConfigurationError: If the configuration is invalid
        """
        self.config = validateDecoderConfig(config)
        self.mode = getProviderMode(self.config)

        vinConfig = self.config['vinDecoder']
        timeout = vinConfig['apiTimeoutSeconds']
        self._concurrentProviders = vinConfig['concurrentProviders']

        # One HTTP client per adapter; each keeps a session per calling thread
        self.vincario = vincario or VincarioAdapter(
            JsonHttpClient(timeout).fetchJson,
            apiKey=vinConfig['vincario']['apiKey'],
            secretKey=vinConfig['vincario']['secretKey'],
            apiPrefix=vinConfig['vincario']['apiPrefix'],
        )
        self.nhtsa = nhtsa or NhtsaAdapter(
            JsonHttpClient(timeout).fetchJson,
            apiBaseUrl=vinConfig['nhtsa']['apiBaseUrl'],
        )

        self._statsLock = threading.Lock()
        self._totalDecodes = 0
        self._notFound = 0
        self._providerErrors = 0

        logger.debug(
            f"VinDecoder initialized | mode={self.mode.name} | "
            f"vincarioConfigured={self.vincario.isConfigured}"
        )

    def decodeVin(self, vin: Any) -> DecodedVehicle:
        """
        Decode a VIN.

        Args:
            vin: Raw VIN as received (normalized and validated here)

        Returns:
            DecodedVehicle

        Raises:
            VinRequiredError: If the VIN is missing
            VinValidationError: If the VIN is structurally invalid
            VinNotFoundError: If no provider returned usable data
            VinApiError: If the last provider left to try failed
        """
        normalizedVin = requireValidVin(vin)
        self._count('_totalDecodes')

        primary: DecodedVehicle | None = None
        fallback: DecodedVehicle | None = None

        if self.mode == ProviderMode.NHTSA_ONLY:
            fallback = self._callProvider(self.nhtsa, normalizedVin, tolerateErrors=False)
        elif self.mode == ProviderMode.PRIMARY_ONLY:
            primary = self._callProvider(self.vincario, normalizedVin, tolerateErrors=True)
            if primary is None:
                fallback = self._callProvider(self.nhtsa, normalizedVin, tolerateErrors=False)
        else:
            primary, fallback = self._decodeAuto(normalizedVin)

        result = selectResult(normalizedVin, primary, fallback)
        if result is None:
            self._count('_notFound')
            raise VinNotFoundError(
                "VIN not found",
                details={'field': 'vin', 'vin': normalizedVin, 'mode': self.mode.name}
            )

        logWithContext(
            logger, 'info', "VIN decoded",
            vin=normalizedVin,
            provider=result.provider,
            vehicle=result.getVehicleSummary()
        )
        return result

    def getStats(self) -> dict[str, Any]:
        """
        Get decoder statistics.

        Returns:
            Dictionary with decode statistics
        """
        with self._statsLock:
            return {
                'mode': self.mode.name,
                'totalDecodes': self._totalDecodes,
                'notFound': self._notFound,
                'providerErrors': self._providerErrors,
            }

    def _decodeAuto(self, vin: str) -> tuple[DecodedVehicle | None, DecodedVehicle | None]:
        if not self._concurrentProviders:
            return (
                self._callProvider(self.vincario, vin, tolerateErrors=True),
                self._callProvider(self.nhtsa, vin, tolerateErrors=True),
            )

        with ThreadPoolExecutor(max_workers=2, thread_name_prefix='vin-provider') as executor:
            primaryFuture = executor.submit(self._callProvider, self.vincario, vin, True)
            fallbackFuture = executor.submit(self._callProvider, self.nhtsa, vin, True)
            return primaryFuture.result(), fallbackFuture.result()

    def _callProvider(
        self,
        adapter: ProviderAdapter,
        vin: str,
        tolerateErrors: bool
    ) -> DecodedVehicle | None:
        try:
            return adapter.decode(vin)
        except Exception as e:
            self._count('_providerErrors')
            if not tolerateErrors:
                logger.error(f"{adapter.name} decode failed for {vin}: {formatError(e)}")
                raise
            logger.warning(f"{adapter.name} decode failed for {vin}, ignoring: {formatError(e)}")
            return None

    def _count(self, counterName: str) -> None:
        with self._statsLock:
            setattr(self, counterName, getattr(self, counterName) + 1)
