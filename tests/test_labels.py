################################################################################
# File Name: test_labels.py
# Purpose/Description: Tests for provider label normalization and lookup
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
Tests for the labels module.

Run with:
    pytest tests/test_labels.py -v
"""

import sys
from pathlib import Path

import pytest

srcPath = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(srcPath))

from vindecoder.labels import (
    buildLabelMap,
    joinNonEmpty,
    normalizeLabelKey,
    pickLabel,
    pickStr,
)


class TestNormalizeLabelKey:
    """Tests for normalizeLabelKey function."""

    @pytest.mark.parametrize('label,expected', [
        ('Make', 'make'),
        ('Model Year', 'model_year'),
        ('  model-year  ', 'model_year'),
        ('Manufacturer (Name)', 'manufacturer_name'),
        ('Body / Cab Type', 'body_cab_type'),
        ('ABS', 'abs'),
        ('---', ''),
        (None, ''),
    ])
    def test_normalizeLabelKey_variants_returnsCanonicalKey(self, label, expected):
        """
        Given: Provider label in some spelling
        When: normalizeLabelKey() is called
        Then: Returns the canonical snake_case key
        """
        assert normalizeLabelKey(label) == expected

    @pytest.mark.parametrize('label', ['Model Year', 'a__b', ' X-G+ ', 'Fuel Type - Primary', ''])
    def test_normalizeLabelKey_appliedTwice_isIdempotent(self, label):
        """
        Given: Any label
        When: normalizeLabelKey() is applied to its own output
        Then: The key does not change
        """
        once = normalizeLabelKey(label)

        assert normalizeLabelKey(once) == once


class TestBuildLabelMap:
    """Tests for buildLabelMap function."""

    def test_buildLabelMap_duplicateKeys_firstValueWins(self):
        """
        Given: Two entries normalizing to the same key
        When: buildLabelMap() is called
        Then: The first value is kept
        """
        labels = buildLabelMap([
            {'label': 'Make', 'value': 'A'},
            {'label': 'make', 'value': 'B'},
        ])

        assert labels['make'] == 'A'

    def test_buildLabelMap_emptyFirstValue_laterValueStored(self):
        """
        Given: Empty value followed by a non-empty one for the same key
        When: buildLabelMap() is called
        Then: The non-empty value is stored
        """
        labels = buildLabelMap([
            {'label': 'Model', 'value': '  '},
            {'label': 'MODEL', 'value': ' FH16 '},
        ])

        assert labels == {'model': 'FH16'}

    def test_buildLabelMap_emptyValueAfterValue_doesNotOverwrite(self):
        """
        Given: Non-empty value followed by an empty one
        When: buildLabelMap() is called
        Then: The stored value is unchanged
        """
        labels = buildLabelMap([
            {'label': 'Make', 'value': 'DAF'},
            {'label': 'Make', 'value': ''},
        ])

        assert labels == {'make': 'DAF'}

    def test_buildLabelMap_emptyKey_skipped(self):
        """
        Given: Entry whose label has no alphanumeric characters
        When: buildLabelMap() is called
        Then: Entry is ignored
        """
        labels = buildLabelMap([{'label': '***', 'value': 'x'}, {'value': 'y'}])

        assert labels == {}

    def test_buildLabelMap_numericValue_storedAsText(self):
        """
        Given: Entry with a numeric value
        When: buildLabelMap() is called
        Then: Value is stored as a string
        """
        labels = buildLabelMap([{'label': 'Model Year', 'value': 2015}])

        assert labels == {'model_year': '2015'}

    @pytest.mark.parametrize('entries', [None, {}, 'decode', 42])
    def test_buildLabelMap_notAList_returnsEmpty(self, entries):
        """
        Given: Payload field that is not a list
        When: buildLabelMap() is called
        Then: Returns empty map
        """
        assert buildLabelMap(entries) == {}


class TestPickLabel:
    """Tests for pickLabel and pickStr functions."""

    def test_pickLabel_firstCandidateMissing_usesNext(self):
        """
        Given: Map without 'make' but with 'manufacturer'
        When: pickLabel() is called with the make fallback chain
        Then: Returns the manufacturer value
        """
        labels = {'manufacturer': 'Volvo Trucks', 'brand': 'Volvo'}

        result = pickLabel(labels, 'make', 'manufacturer', 'manufacturer_name', 'brand')

        assert result == 'Volvo Trucks'

    def test_pickLabel_candidatesNormalized(self):
        """
        Given: Candidate written as a display label
        When: pickLabel() is called
        Then: Candidate is normalized before lookup
        """
        assert pickLabel({'model_year': '2015'}, 'Model Year') == '2015'

    def test_pickLabel_noMatch_returnsEmpty(self):
        """
        Given: No candidate present
        When: pickLabel() is called
        Then: Returns ''
        """
        assert pickLabel({'make': 'DAF'}, 'model', 'model_name') == ''

    def test_pickStr_skipsBlankValues(self):
        """
        Given: Leading None and whitespace values
        When: pickStr() is called
        Then: Returns the first non-blank value trimmed
        """
        assert pickStr(None, '  ', ' Scania ', 'MAN') == 'Scania'
        assert pickStr(None, '') == ''

    def test_joinNonEmpty_dropsBlankParts(self):
        """
        Given: Parts with blanks
        When: joinNonEmpty() is called
        Then: Only non-blank parts are joined
        """
        assert joinNonEmpty(['Volvo', '', None, 'FH16']) == 'Volvo FH16'
