"""
Hardware weight resolver — flange, bolt and nut masses for a set of flanges.

Missing flange/bolt/nut rows are not errors: the affected weights drop to
zero and the calculation carries on ("hardware unknown").
"""

import logging

from ..schemas import HardwareWeights
from .reference_data import ReferenceDataProvider

logger = logging.getLogger(__name__)

MIN_BOLT_LENGTH_MM = 50.0
BOLT_LENGTH_PER_FLANGE_THICKNESS = 3.0

NO_HARDWARE = HardwareWeights()


def estimate_bolt_length_mm(flange_thickness_mm: float) -> float:
    """Bolt length needed to clamp a flange pair: 3 × flange thickness, never under 50 mm."""
    return max(MIN_BOLT_LENGTH_MM, flange_thickness_mm * BOLT_LENGTH_PER_FLANGE_THICKNESS)


class HardwareWeightResolver:
    """Never raises. Returns all-zero weights when the flange row is absent."""

    def __init__(self, reference_data: ReferenceDataProvider):
        self.reference_data = reference_data

    def resolve(self, nominal_bore_mm: float, flange_standard_id: int,
                flange_pressure_class_id: int, flange_count: int) -> HardwareWeights:
        try:
            return self._resolve(nominal_bore_mm, flange_standard_id,
                                 flange_pressure_class_id, flange_count)
        except Exception as e:
            # Provider failures of any kind zero the hardware, not the quote
            logger.warning(
                "Hardware lookup failed for %sNB standard=%s class=%s, hardware weight zeroed: %s",
                nominal_bore_mm, flange_standard_id, flange_pressure_class_id, e)
            return NO_HARDWARE

    def _resolve(self, nominal_bore_mm, flange_standard_id, flange_pressure_class_id, flange_count):
        flange = self.reference_data.find_flange_dimension(
            nominal_bore_mm, flange_standard_id, flange_pressure_class_id)
        if flange is None:
            logger.warning(
                "No flange dimension for %sNB standard=%s class=%s, hardware weight zeroed",
                nominal_bore_mm, flange_standard_id, flange_pressure_class_id)
            return NO_HARDWARE

        flange_weight = flange_count * flange.flange_mass_kg
        bolt_weight = 0.0
        nut_weight = 0.0

        if flange.bolt_type_id is not None:
            bolt_length = estimate_bolt_length_mm(flange.thickness_mm)
            bolt = self.reference_data.find_bolt_mass(flange.bolt_type_id, bolt_length)
            if bolt is None:
                logger.warning("No bolt mass for bolt type %s at >= %.0f mm, bolt/nut weight zeroed",
                               flange.bolt_type_id, bolt_length)
            else:
                total_bolts = flange_count * flange.num_holes
                bolt_weight = total_bolts * bolt.mass_kg
                nut = self.reference_data.find_nut_mass(flange.bolt_type_id)
                if nut is None:
                    logger.warning("No nut mass for bolt type %s, nut weight zeroed", flange.bolt_type_id)
                else:
                    nut_weight = total_bolts * nut.mass_kg

        return HardwareWeights(
            flange_weight_kg=flange_weight,
            bolt_weight_kg=bolt_weight,
            nut_weight_kg=nut_weight,
        )
