################################################################################
# File Name: classifier.py
# Purpose/Description: Heuristic truck type classification from provider text
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
Truck type classifier module.

Maps free-text provider fields (vehicle type, body class, make, model) to one
of the TruckType categories. Rules are evaluated in order and the first match
wins; "tractor" and "refrigerated" can appear together, and tractor has
precedence.

Usage:
    from vindecoder.classifier import classifyTruckType

    classifyTruckType({'Make': 'DAF', 'Model': 'XF 480'})  # -> 'Tractor unit'
"""

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from .types import TruckType

TRUCK_TERMS = (
    'truck',
    'rigid',
    'box',
    'straight',
    'lorry',
    'heavy',
    'commercial vehicle',
)

VAN_TERMS = ('van', 'cargo van', 'minivan')

# DAF XG / XG+ / XF are sold as tractor units
DAF_TRACTOR_SERIES = re.compile(r'\b(xg\+?|xf)\b')


@dataclass(frozen=True)
class ClassificationRule:
    """One ordered rule: a predicate over the haystack and its label."""
    name: str
    matches: Callable[[str], bool]
    label: str


def _containsAny(*terms: str) -> Callable[[str], bool]:
    return lambda haystack: any(term in haystack for term in terms)


def _isDafTractorSeries(haystack: str) -> bool:
    return 'daf' in haystack and DAF_TRACTOR_SERIES.search(haystack) is not None


def _isVanOnly(haystack: str) -> bool:
    return _containsAny(*VAN_TERMS)(haystack) and not _containsAny(*TRUCK_TERMS)(haystack)


CLASSIFICATION_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule('tractor', _containsAny('truck tractor', 'tractor'), TruckType.TRACTOR_UNIT),
    ClassificationRule('dafTractorSeries', _isDafTractorSeries, TruckType.TRACTOR_UNIT),
    ClassificationRule('refrigerated', _containsAny('refrigerated', 'reefer'), TruckType.REFRIGERATED),
    ClassificationRule('flatbed', _containsAny('flatbed'), TruckType.FLATBED),
    ClassificationRule('tanker', _containsAny('tanker'), TruckType.TANKER),
    ClassificationRule('tipper', _containsAny('dump', 'tip'), TruckType.TIPPER),
    ClassificationRule('rigidBox', _containsAny('rigid', 'box', 'straight truck'), TruckType.RIGID_BOX),
    ClassificationRule('van', _isVanOnly, TruckType.VAN),
    ClassificationRule('truckFallback', _containsAny(*TRUCK_TERMS), TruckType.RIGID_BOX),
)


def _fieldText(fields: Mapping[str, Any], name: str) -> str:
    value = fields.get(name)
    return '' if value is None else str(value)


def buildHaystack(fields: Mapping[str, Any]) -> str:
    """
    Build the lowercase text searched by the rules.

    Args:
        fields: Mapping with optional VehicleType, BodyClass, Make, Model keys

    Returns:
        "{vehicleType} {bodyClass} {make} {model}" lowercased
    """
    makeModel = f"{_fieldText(fields, 'Make')} {_fieldText(fields, 'Model')}"
    return (
        f"{_fieldText(fields, 'VehicleType')} "
        f"{_fieldText(fields, 'BodyClass')} "
        f"{makeModel}"
    ).lower()


def classifyTruckType(
    fields: Mapping[str, Any] | None,
    rules: tuple[ClassificationRule, ...] = CLASSIFICATION_RULES
) -> str:
    """
    Classify a vehicle into a truck category.

    Args:
        fields: Provider fields (VehicleType, BodyClass, Make, Model)
        rules: Ordered rule table

    Returns:
        Label of the first matching rule, or '' if none match
    """
    haystack = buildHaystack(fields or {})
    for rule in rules:
        if rule.matches(haystack):
            return rule.label
    return ''
