################################################################################
# File Name: labels.py
# Purpose/Description: Provider label normalization and ordered field lookup
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
Label normalization module.

Providers describe fields with free-form labels ("Model Year", "model-year",
"MODEL YEAR"). Labels are reduced to a canonical key and looked up through
ordered candidate lists, so an adapter states its field preference as a
fallback chain:

    make = pickLabel(labels, 'make', 'manufacturer', 'manufacturer_name', 'brand')
"""

import re
from collections.abc import Iterable, Mapping
from typing import Any

_NON_ALNUM = re.compile(r'[^a-z0-9]+')
_SPACES = re.compile(r'\s+')


def _asText(value: Any) -> str:
    if value is None:
        return ''
    return str(value).strip()


def normalizeLabelKey(label: Any) -> str:
    """
    Convert a provider label into a canonical lookup key.

    Args:
        label: Label text, e.g. 'Model Year'

    Returns:
        Canonical key, e.g. 'model_year' ('' when nothing alphanumeric remains)
    """
    text = _NON_ALNUM.sub(' ', _asText(label).lower()).strip()
    return _SPACES.sub('_', text)


def buildLabelMap(entries: Any) -> dict[str, str]:
    """
    Build a first-wins mapping from a provider's label/value entries.

    Entries whose key normalizes to '' are skipped. Empty values are neither
    stored nor allowed to replace an earlier value.

    Args:
        entries: Sequence of {'label': ..., 'value': ...} mappings

    Returns:
        Mapping of normalized key to the first non-empty trimmed value
    """
    labelMap: dict[str, str] = {}
    if not isinstance(entries, list):
        return labelMap

    for entry in entries:
        if not isinstance(entry, Mapping):
            continue
        key = normalizeLabelKey(entry.get('label'))
        value = _asText(entry.get('value'))
        if not key:
            continue
        if key not in labelMap and value:
            labelMap[key] = value

    return labelMap


def pickLabel(labelMap: Mapping[str, str], *candidates: str) -> str:
    """
    Return the stored value of the first candidate label that has one.

    Args:
        labelMap: Mapping built by buildLabelMap
        *candidates: Labels in order of preference

    Returns:
        First non-empty value, or ''
    """
    for candidate in candidates:
        value = _asText(labelMap.get(normalizeLabelKey(candidate)))
        if value:
            return value
    return ''


def pickStr(*values: Any) -> str:
    """Return the first value that is non-empty after trimming, or ''."""
    for value in values:
        text = _asText(value)
        if text:
            return text
    return ''


def joinNonEmpty(parts: Iterable[Any], separator: str = ' ') -> str:
    """Join the non-empty trimmed parts."""
    return separator.join(text for text in (_asText(p) for p in parts) if text)
