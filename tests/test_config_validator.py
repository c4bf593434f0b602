################################################################################
# File Name: test_config_validator.py
# Purpose/Description: Tests for configuration validation
# Author: Michael Cornelison
# Creation Date: 2026-01-21
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-21    | M. Cornelison | Initial implementation
# 2026-10-19    | M. Cornelison | Service defaults, bool handling, dropped required keys
# ================================================================================
################################################################################

"""
Tests for the ConfigValidator class.

Run with:
    pytest tests/test_config_validator.py -v
"""

import sys
from pathlib import Path
from typing import Any, Dict

import pytest

srcPath = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(srcPath))

from common.config_validator import DEFAULTS, ConfigValidator


@pytest.fixture
def sampleConfig() -> Dict[str, Any]:
    return {
        'logging': {'level': 'DEBUG'},
        'vinDecoder': {
            'provider': 'nhtsa',
            'apiTimeoutSeconds': 10,
            'concurrentProviders': False,
            'vincario': {'apiKey': 'key', 'secretKey': ''},
        },
    }


class TestConfigValidator:
    """Tests for ConfigValidator class."""

    # =========================================================================
    # Initialization Tests
    # =========================================================================

    def test_init_defaultValues_usesModuleDefaults(self):
        """
        Given: No constructor arguments
        When: ConfigValidator is instantiated
        Then: Uses module defaults
        """
        validator = ConfigValidator()

        assert validator.defaults == DEFAULTS

    def test_init_customDefaults_mergedOverModuleDefaults(self):
        """
        Given: Custom defaults
        When: ConfigValidator is instantiated
        Then: Custom defaults are added to the module defaults
        """
        validator = ConfigValidator(
            defaults={'vinDecoder.apiTimeoutSeconds': 30, 'logging.level': 'WARNING'},
        )

        assert validator.defaults['vinDecoder.apiTimeoutSeconds'] == 30
        assert validator.defaults['logging.level'] == 'WARNING'
        assert 'logging.file' in validator.defaults

    # =========================================================================
    # Validation Tests
    # =========================================================================

    def test_validate_validConfig_returnsConfig(self, sampleConfig: Dict[str, Any]):
        """
        Given: Valid configuration
        When: validate() is called
        Then: Returns the configuration with defaults applied
        """
        result = ConfigValidator().validate(sampleConfig)

        assert result['vinDecoder']['provider'] == 'nhtsa'
        assert result['logging'] == {'level': 'DEBUG', 'file': None}

    def test_validate_emptyConfig_appliesDefaults(self):
        """
        Given: Empty configuration
        When: validate() is called with nested defaults
        Then: Nested structure is created
        """
        validator = ConfigValidator(defaults={'vinDecoder.nhtsa.apiBaseUrl': 'https://nhtsa.test'})

        result = validator.validate({})

        assert result['vinDecoder']['nhtsa']['apiBaseUrl'] == 'https://nhtsa.test'
        assert result['logging']['level'] == 'INFO'

    def test_validate_existingValue_notOverwrittenByDefault(self):
        """
        Given: Falsy but present values
        When: validate() is called
        Then: Only None or missing values receive defaults
        """
        validator = ConfigValidator(defaults={
            'vinDecoder.provider': 'auto',
            'vinDecoder.concurrentProviders': True,
        })

        result = validator.validate({'vinDecoder': {'provider': '', 'concurrentProviders': False}})

        assert result['vinDecoder']['provider'] == ''
        assert result['vinDecoder']['concurrentProviders'] is False

    def test_validate_nonDictIntermediate_replaced(self):
        """
        Given: Section set to a scalar where a dict is needed
        When: validate() applies a nested default
        Then: Scalar is replaced by a dict holding the default
        """
        validator = ConfigValidator(defaults={'vinDecoder.nhtsa.apiBaseUrl': 'https://nhtsa.test'})

        result = validator.validate({'vinDecoder': {'nhtsa': 'broken'}})

        assert result['vinDecoder']['nhtsa'] == {'apiBaseUrl': 'https://nhtsa.test'}

    # =========================================================================
    # Nested Value Tests
    # =========================================================================

    def test_getNestedValue_existingKey_returnsValue(self, sampleConfig: Dict[str, Any]):
        """
        Given: Configuration with nested value
        When: getNestedValue() is called with dot notation
        Then: Returns the value
        """
        value = ConfigValidator().getNestedValue(sampleConfig, 'vinDecoder.vincario.apiKey')

        assert value == 'key'

    @pytest.mark.parametrize('key', ['vinDecoder.missing', 'vinDecoder.provider.deeper', 'nope'])
    def test_getNestedValue_missingKey_returnsNone(self, sampleConfig: Dict[str, Any], key):
        """
        Given: Key not in configuration
        When: getNestedValue() is called
        Then: Returns None
        """
        assert ConfigValidator().getNestedValue(sampleConfig, key) is None

    def test_getNestedValue_emptyString_returnsEmptyString(self, sampleConfig: Dict[str, Any]):
        """
        Given: Value that is an empty string
        When: getNestedValue() is called
        Then: Returns '' rather than None
        """
        value = ConfigValidator().getNestedValue(sampleConfig, 'vinDecoder.vincario.secretKey')

        assert value == ''

    # =========================================================================
    # Field Type Tests
    # =========================================================================

    def test_validateField_correctType_returnsTrue(self, sampleConfig: Dict[str, Any]):
        """
        Given: Field with the expected type
        When: validateField() is called
        Then: Returns True
        """
        validator = ConfigValidator()

        assert validator.validateField(sampleConfig, 'vinDecoder.apiTimeoutSeconds', (int, float))
        assert validator.validateField(sampleConfig, 'vinDecoder.concurrentProviders', bool)

    def test_validateField_wrongType_returnsFalse(self, sampleConfig: Dict[str, Any]):
        """
        Given: Field with a different type
        When: validateField() is called
        Then: Returns False
        """
        assert not ConfigValidator().validateField(sampleConfig, 'vinDecoder.provider', int)

    def test_validateField_boolForNumber_returnsFalse(self):
        """
        Given: Boolean where a number is expected
        When: validateField() is called
        Then: Returns False even though bool subclasses int
        """
        config = {'vinDecoder': {'apiTimeoutSeconds': True}}

        assert not ConfigValidator().validateField(config, 'vinDecoder.apiTimeoutSeconds', (int, float))

    @pytest.mark.parametrize('allowNone', [True, False])
    def test_validateField_missing_followsAllowNone(self, allowNone):
        """
        Given: Missing field
        When: validateField() is called
        Then: Result equals allowNone
        """
        result = ConfigValidator().validateField({}, 'vinDecoder.provider', str, allowNone=allowNone)

        assert result is allowNone
