"""
Bend calculator — simplified geometric/mass approximation.

No bend-geometry reference table is consulted and nothing is looked up,
so this path never fails. The constants below reproduce historical quotes
exactly; do not tune them.
"""

import logging
import math
import re

from ..schemas import BendSpecification, CalculationResult
from .base import BaseCalculator
from .normalizer import normalize_schedule
from .result import assemble_bend_result

logger = logging.getLogger(__name__)

# Wall thickness (mm) by schedule number
BEND_WALL_THICKNESS_MM = {
    "10": 2.77,
    "20": 3.91,
    "30": 5.54,
    "40": 6.35,
    "80": 8.74,
    "160": 14.27,
}
DEFAULT_WALL_THICKNESS_MM = 6.35  # Sch40

# Reported split of the approximate total weight
BEND_WEIGHT_SHARE = 0.7
TANGENT_WEIGHT_SHARE = 0.2
FLANGE_WEIGHT_SHARE = 0.1

OUTSIDE_DIAMETER_ALLOWANCE_MM = 20

_LEADING_NUMBER = re.compile(r"^\s*(\d+(?:\.\d+)?)")


def bend_radius_multiplier(bend_type) -> float:
    """Leading numeric factor of a bend type: '3D' → 3.0, '1.5D' → 1.5."""
    value = getattr(bend_type, "value", bend_type)
    match = _LEADING_NUMBER.match(str(value))
    if not match:
        raise ValueError(f"Unrecognised bend type: {value!r}")
    return float(match.group(1))


class BendCalculator(BaseCalculator):

    def calculate(self, spec: BendSpecification) -> CalculationResult:
        nb = spec.nominal_bore_mm

        # Geometry
        bend_radius = nb * bend_radius_multiplier(spec.bend_type)
        center_to_face = bend_radius * math.sin(math.radians(spec.bend_degrees / 2))

        # Mass: base bend + tangents (lengths in mm)
        base_bend_mass = (nb / 25) ** 2 * 2
        tangent_mass = sum(
            length_mm / 1000 * nb / 25 * self.STEEL_DENSITY_KG_DM3
            for length_mm in spec.tangent_lengths
        )
        total_weight = base_bend_mass + tangent_mass

        # Welds
        flange_count = spec.number_of_tangents + 1
        flange_weld_count = spec.number_of_tangents
        weld_circumference = self.circumference_m(nb)
        butt_weld_count = 1 if spec.number_of_tangents > 0 else 0
        butt_weld_length = weld_circumference if butt_weld_count == 1 else 0.0

        return assemble_bend_result(
            outside_diameter_mm=nb + OUTSIDE_DIAMETER_ALLOWANCE_MM,
            wall_thickness_mm=self.wall_thickness_for_schedule(spec.schedule_number),
            total_weight_kg=total_weight,
            bend_weight_kg=total_weight * BEND_WEIGHT_SHARE,
            tangent_weight_kg=total_weight * TANGENT_WEIGHT_SHARE,
            flange_weight_kg=total_weight * FLANGE_WEIGHT_SHARE,
            quantity_value=spec.quantity_value,
            flange_count=flange_count,
            flange_weld_count=flange_weld_count,
            flange_weld_length_m=flange_weld_count * weld_circumference,
            butt_weld_count=butt_weld_count,
            butt_weld_length_m=butt_weld_length,
            bend_radius_mm=bend_radius,
            center_to_face_mm=center_to_face,
        )

    def wall_thickness_for_schedule(self, schedule_number: str) -> float:
        """Fixed schedule table; anything unknown gets the Sch40 wall."""
        schedule = normalize_schedule(schedule_number)
        wall = BEND_WALL_THICKNESS_MM.get(schedule)
        if wall is None:
            logger.info("Schedule %r not in bend wall table, using %.2f mm (Sch40)",
                        schedule_number, DEFAULT_WALL_THICKNESS_MM)
            return DEFAULT_WALL_THICKNESS_MM
        return wall
