################################################################################
# File Name: types.py
# Purpose/Description: Decoded vehicle types and truck categories
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
VIN decoder types module.

Contains dataclasses and constants for decoded vehicle information:
- DecodedVehicle: Result of decoding a VIN through one or more providers
- ProviderMode: Which provider(s) the decoder calls
- TruckType: Fixed set of truck/van categories
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


# ================================================================================
# Truck Categories
# ================================================================================

class TruckType:
    """Labels returned by the truck type classifier."""
    TRACTOR_UNIT = 'Tractor unit'
    REFRIGERATED = 'Refrigerated (reefer) truck'
    FLATBED = 'Flatbed truck'
    TANKER = 'Tanker truck'
    TIPPER = 'Tip truck / dumper'
    RIGID_BOX = 'Rigid / box truck'
    VAN = 'Van (light commercial)'

    ALL = (
        TRACTOR_UNIT,
        REFRIGERATED,
        FLATBED,
        TANKER,
        TIPPER,
        RIGID_BOX,
        VAN,
    )


class ProviderMode(Enum):
    """Provider selection driven by the 'provider' setting."""
    NHTSA_ONLY = 'nhtsa'
    PRIMARY_ONLY = 'vincario'
    AUTO = 'auto'


# ================================================================================
# Decoded Vehicle
# ================================================================================

@dataclass
class DecodedVehicle:
    """
    Result of a VIN decode.

    Attributes:
        vin: Canonical 17-character VIN
        year: Model year, or None when no plausible year is known
        model: Combined "make model" text (may be empty)
        truckType: One of TruckType.ALL, or '' when unclassifiable
        raw: Diagnostic record of the contributing provider(s); traceability only
    """
    vin: str
    year: int | None = None
    model: str = ''
    truckType: str = ''
    raw: dict[str, Any] = field(default_factory=dict)

    @property
    def provider(self) -> str:
        """Name of the provider that produced this record ('auto' when merged)."""
        return str(self.raw.get('provider', ''))

    def toDict(self) -> dict[str, Any]:
        """Convert to the flat record returned to callers."""
        return {
            'vin': self.vin,
            'year': self.year,
            'model': self.model,
            'type': self.truckType,
            'raw': self.raw,
        }

    def getVehicleSummary(self) -> str:
        """Get a human-readable vehicle summary."""
        parts = []
        if self.year:
            parts.append(str(self.year))
        if self.model:
            parts.append(self.model)
        if self.truckType:
            parts.append(f"({self.truckType})")

        if parts:
            return ' '.join(parts)
        return f"Vehicle (VIN: {self.vin})"
