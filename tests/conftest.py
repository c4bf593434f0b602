################################################################################
# File Name: conftest.py
# Purpose/Description: Pytest fixtures and configuration
# Author: Michael Cornelison
# Creation Date: 2026-01-21
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-21    | M. Cornelison | Initial implementation
# 2026-10-19    | M. Cornelison | VIN decoder fixtures and provider payloads
# ================================================================================
################################################################################

"""
Pytest configuration and shared fixtures.

Fixtures defined here are available to all test files automatically.

Usage:
    def test_something(decoderConfig, nhtsaPayload):
        pass
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, Generator
from unittest.mock import MagicMock

import pytest

# Add src to path for imports
srcPath = Path(__file__).parent.parent / 'src'
if str(srcPath) not in sys.path:
    sys.path.insert(0, str(srcPath))

from common.logging_config import clearSecrets  # noqa: E402

from tests.vin_test_data import buildDecoderConfig, buildNhtsaPayload  # noqa: E402


@pytest.fixture
def decoderConfig() -> Dict[str, Any]:
    """
    Provide a complete decoder configuration in AUTO mode.

    Returns:
        Configuration dictionary
    """
    return buildDecoderConfig()


# ================================================================================
# Provider Payload Fixtures
# ================================================================================

@pytest.fixture
def nhtsaPayload() -> Dict[str, Any]:
    """
    Provide a vPIC response for a Freightliner truck-tractor.

    Returns:
        Dictionary simulating the NHTSA API response
    """
    return buildNhtsaPayload(
        Make='Freightliner',
        Model='',
        BodyClass='Truck-Tractor',
        ModelYear='1989',
        VehicleType='TRUCK',
    )


@pytest.fixture
def vincarioPayload() -> Dict[str, Any]:
    """
    Provide a Vincario response for a Volvo tractor.

    Returns:
        Dictionary simulating the Vincario API response
    """
    return {
        'decode': [
            {'label': 'Make', 'value': 'Volvo'},
            {'label': 'Model', 'value': 'FH16'},
            {'label': 'Model Year', 'value': '2015'},
            {'label': 'Product Type', 'value': 'Truck'},
            {'label': 'Body', 'value': 'Tractor'},
        ]
    }


@pytest.fixture
def mockFetch() -> MagicMock:
    """
    Provide a mock fetchJson capability.

    Returns:
        MagicMock returning an empty payload unless configured
    """
    return MagicMock(return_value={})


# ================================================================================
# Environment Fixtures
# ================================================================================

DECODER_ENV_VARS = [
    'VIN_DECODER_PROVIDER',
    'VINDECODER_EU_API_KEY',
    'VINDECODER_EU_SECRET_KEY',
    'VINDECODER_EU_API_PREFIX',
    'NHTSA_API_BASE_URL',
    'VIN_DECODER_TIMEOUT_SECONDS',
    'LOG_LEVEL',
    'TEST_VAR',
]


@pytest.fixture
def cleanEnv() -> Generator[None, None, None]:
    """
    Ensure clean environment with no decoder variables.

    Removes decoder variables before test, restores after.
    """
    saved = {}
    for var in DECODER_ENV_VARS:
        saved[var] = os.environ.pop(var, None)

    yield

    for var in DECODER_ENV_VARS:
        os.environ.pop(var, None)
    for var, value in saved.items():
        if value is not None:
            os.environ[var] = value


@pytest.fixture(autouse=True)
def resetSecrets() -> Generator[None, None, None]:
    """Forget secrets registered for log masking by earlier tests."""
    clearSecrets()
    yield
    clearSecrets()


# ================================================================================
# Pytest Configuration
# ================================================================================

def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
