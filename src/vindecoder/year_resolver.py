################################################################################
# File Name: year_resolver.py
# Purpose/Description: Model-year candidates from the VIN and year coercion
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
Model year resolution module.

The 10th VIN character encodes the model year on a 30-year cycle, so one
character maps to several candidate years (K -> 1989, 2019, ...). A year
reported by a provider is trusted whenever it lies in a sane range; the VIN
candidates are only used to correct years that are clearly wrong.

Usage:
    from vindecoder.year_resolver import coerceYear

    year = coerceYear('1HGCM82633A004352', 1925)  # -> 2003
"""

import math
from datetime import datetime
from typing import Any

from .validator import VIN_LENGTH, normalizeVin

# Position of the model-year character (10th, 0-based index 9)
MODEL_YEAR_INDEX = 9

# First year of the VIN year-code scheme
MIN_MODEL_YEAR = 1980

# Years ahead of the current year still accepted as model years
MODEL_YEAR_LOOKAHEAD = 2

YEAR_CYCLE = 30

# 1980-2009 cycle; 0, I, O, Q, U and Z are never year codes
MODEL_YEAR_CODES: dict[str, int] = {
    'A': 1980, 'B': 1981, 'C': 1982, 'D': 1983, 'E': 1984,
    'F': 1985, 'G': 1986, 'H': 1987, 'J': 1988, 'K': 1989,
    'L': 1990, 'M': 1991, 'N': 1992, 'P': 1993, 'R': 1994,
    'S': 1995, 'T': 1996, 'V': 1997, 'W': 1998, 'X': 1999,
    'Y': 2000,
    '1': 2001, '2': 2002, '3': 2003, '4': 2004, '5': 2005,
    '6': 2006, '7': 2007, '8': 2008, '9': 2009,
}


def _maxModelYear(currentYear: int | None) -> int:
    if currentYear is None:
        currentYear = datetime.now().year
    return currentYear + MODEL_YEAR_LOOKAHEAD


def parseYear(value: Any) -> int | None:
    """
    Parse a provider-reported year.

    Args:
        value: Year as reported ('2015', 2015, '2015.0', '', None)

    Returns:
        Integer year, or None when blank, non-numeric or fractional
    """
    if value is None or isinstance(value, bool):
        return None

    text = str(value).strip()
    if not text:
        return None

    try:
        number = float(text)
    except ValueError:
        return None

    if not math.isfinite(number) or not number.is_integer():
        return None
    return int(number)


def modelYearCandidates(vin: str, currentYear: int | None = None) -> list[int]:
    """
    List the model years the VIN's year character can stand for.

    Args:
        vin: VIN (normalized before use)
        currentYear: Override for the current year

    Returns:
        Ascending years spaced 30 apart, none above currentYear + 2;
        empty if the VIN is not 17 characters or has no year code
    """
    normalized = normalizeVin(vin)
    if len(normalized) != VIN_LENGTH:
        return []

    baseYear = MODEL_YEAR_CODES.get(normalized[MODEL_YEAR_INDEX])
    if baseYear is None:
        return []

    return list(range(baseYear, _maxModelYear(currentYear) + 1, YEAR_CYCLE))


def coerceYear(
    vin: str,
    reportedYear: Any,
    currentYear: int | None = None
) -> int | None:
    """
    Reconcile a provider-reported year with the VIN's year character.

    Plausible years are returned unchanged; only years outside
    [1980, currentYear + 2] that are not a VIN candidate are snapped to the
    nearest candidate (earliest candidate wins a tie).

    Args:
        vin: VIN the year was reported for
        reportedYear: Year reported by a provider
        currentYear: Override for the current year

    Returns:
        Resulting year, or None if reportedYear is not a positive finite number
    """
    if reportedYear is None or isinstance(reportedYear, bool):
        return None
    try:
        year = float(reportedYear)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(year) or year <= 0:
        return None
    if year.is_integer():
        year = int(year)

    candidates = modelYearCandidates(vin, currentYear)
    if not candidates:
        return year

    if MIN_MODEL_YEAR <= year <= _maxModelYear(currentYear):
        return year

    if year in candidates:
        return year

    best = candidates[0]
    for candidate in candidates:
        if abs(candidate - year) < abs(best - year):
            best = candidate
    return best
