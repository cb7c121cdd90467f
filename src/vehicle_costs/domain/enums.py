from __future__ import annotations

from enum import Enum


class FuelType(str, Enum):
    PETROL = "petrol"
    DIESEL = "diesel"
    HYBRID = "hybrid"
    ELECTRIC = "electric"
    LPG = "lpg"
    CNG = "cng"


class CoverageTier(str, Enum):
    BASIC = "basic"
    COMPREHENSIVE = "comprehensive"
    FULL = "full"
