"""
Abstract base class for the quantity-takeoff calculators.

Input: a frozen specification model (PipeSpecification / BendSpecification)
Output: a frozen CalculationResult
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import Optional

from .reference_data import ReferenceDataProvider

logger = logging.getLogger(__name__)


def round_half_up(value: float, places: int = 0) -> float:
    """
    Round half away from zero for positive values (2.5 → 3, 0.125 → 0.13).
    Historical quotes were rounded this way — never use round() for reported numbers.
    """
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


class BaseCalculator(ABC):
    """All item-type calculators inherit from this. No mutable state — safe to share across threads."""

    # Carbon steel, kg/dm³. The only place density is assumed.
    STEEL_DENSITY_KG_DM3 = 7.85

    def __init__(self, reference_data: Optional[ReferenceDataProvider] = None):
        self.reference_data = reference_data

    @abstractmethod
    def calculate(self, spec):
        """
        Takes a specification model.
        Returns a CalculationResult.
        """
        pass

    # --- Helper methods for all calculators ---

    def pieces_for_length(self, total_length_m: float, piece_length_m: float) -> int:
        """
        Number of whole pipes needed to cover a length.
        Always rounds up — a partial pipe consumes a full unit.
        """
        return math.ceil(total_length_m / piece_length_m)

    def circumference_m(self, diameter_mm: float) -> float:
        """Weld length around a pipe of this diameter, in meters."""
        return math.pi * diameter_mm / 1000

    def steel_weight_per_meter(self, outside_diameter_mm: float, wall_thickness_mm: float) -> float:
        """kg/m of plain-end steel pipe: π × WT × (OD − WT) × density / 1000."""
        return (math.pi * wall_thickness_mm * (outside_diameter_mm - wall_thickness_mm)
                * self.STEEL_DENSITY_KG_DM3 / 1000)
