"""
Straight-pipe calculator.

Resolves the pipe dimension and true OD from reference data, then derives
weight, pipe count, flange count and flange weld length. Flange/bolt/nut
weight is added when a flange standard and pressure class are given.
"""

import logging
import math

from ..models import QuantityMode, ScheduleMode
from ..schemas import PipeSpecification, CalculationResult
from .base import BaseCalculator
from .normalizer import normalize_schedule, to_meters
from .hardware import HardwareWeightResolver, NO_HARDWARE
from .reference_data import ReferenceDataNotFound
from .result import assemble_straight_pipe_result

logger = logging.getLogger(__name__)


class StraightPipeCalculator(BaseCalculator):

    # Every pipe segment is flanged both ends; standard runs carry no butt welds
    FLANGES_PER_PIPE = 2
    BUTT_WELDS_PER_RUN = 0

    def calculate(self, spec: PipeSpecification) -> CalculationResult:
        if self.reference_data is None:
            raise ValueError("StraightPipeCalculator needs a reference data provider")

        # 1. Steel specification (only when given)
        if spec.steel_specification_id is not None:
            steel_spec = self.reference_data.find_steel_specification(spec.steel_specification_id)
            if steel_spec is None:
                raise ReferenceDataNotFound(
                    "steel_specification",
                    {"steel_specification_id": spec.steel_specification_id},
                    f"Steel specification with ID {spec.steel_specification_id} not found",
                )

        # 2. Pipe dimension
        pipe_dimension = self._find_pipe_dimension(spec)

        # 3. True outside diameter from the NB → NPS table
        nb_nps = self.reference_data.find_nb_nps_lookup(spec.nominal_bore_mm)
        if nb_nps is None:
            raise ReferenceDataNotFound(
                "nb_nps_lookup",
                {"nominal_bore_mm": spec.nominal_bore_mm},
                f"NB-NPS lookup not found for {spec.nominal_bore_mm:g}NB",
            )
        outside_diameter_mm = nb_nps.outside_diameter_mm
        wall_thickness_mm = pipe_dimension.wall_thickness_mm

        # 4. Mass per meter: tabulated when present, else computed from OD/WT
        if pipe_dimension.mass_per_meter_kg is not None and pipe_dimension.mass_per_meter_kg > 0:
            weight_per_meter = pipe_dimension.mass_per_meter_kg
        else:
            weight_per_meter = self.steel_weight_per_meter(outside_diameter_mm, wall_thickness_mm)

        # 5-6. Quantities
        individual_length_m = to_meters(spec.individual_pipe_length, spec.length_unit)
        if spec.quantity_mode == QuantityMode.TOTAL_LENGTH:
            total_length_m = to_meters(spec.quantity_value, spec.length_unit)
            pipe_count = self.pieces_for_length(total_length_m, individual_length_m)
        else:
            pipe_count = math.ceil(spec.quantity_value)
            total_length_m = pipe_count * individual_length_m

        # 7. Pipe weight
        total_pipe_weight = weight_per_meter * total_length_m

        # 8. Welding
        flange_count = pipe_count * self.FLANGES_PER_PIPE
        flange_weld_count = flange_count
        flange_weld_length = flange_weld_count * self.circumference_m(outside_diameter_mm)

        # 9. Hardware (optional)
        hardware = NO_HARDWARE
        if spec.flange_standard_id is not None and spec.flange_pressure_class_id is not None:
            hardware = HardwareWeightResolver(self.reference_data).resolve(
                spec.nominal_bore_mm,
                spec.flange_standard_id,
                spec.flange_pressure_class_id,
                flange_count,
            )

        logger.debug("Straight pipe %sNB: %d pipes, %.2f m, %.1f kg pipe",
                     spec.nominal_bore_mm, pipe_count, total_length_m, total_pipe_weight)

        # 10. Result
        return assemble_straight_pipe_result(
            outside_diameter_mm=outside_diameter_mm,
            wall_thickness_mm=wall_thickness_mm,
            weight_per_meter_kg=weight_per_meter,
            total_pipe_weight_kg=total_pipe_weight,
            hardware=hardware,
            pipe_count=pipe_count,
            total_length_m=total_length_m,
            flange_count=flange_count,
            flange_weld_count=flange_weld_count,
            flange_weld_length_m=flange_weld_length,
            butt_weld_count=self.BUTT_WELDS_PER_RUN,
            butt_weld_length_m=0.0,
        )

    def _find_pipe_dimension(self, spec: PipeSpecification):
        steel_id = spec.steel_specification_id
        if spec.schedule_mode == ScheduleMode.BY_SCHEDULE:
            schedule = normalize_schedule(spec.schedule_number)
            pipe_dimension = self.reference_data.find_pipe_dimension(
                spec.nominal_bore_mm, schedule, steel_id)
            if pipe_dimension is None:
                described = f"schedule {schedule}"
                if schedule != spec.schedule_number:
                    described += f" (normalized from '{spec.schedule_number}')"
                raise ReferenceDataNotFound(
                    "pipe_dimension",
                    {"nominal_bore_mm": spec.nominal_bore_mm, "schedule": schedule,
                     "schedule_input": spec.schedule_number, "steel_specification_id": steel_id},
                    self._not_found_message(spec.nominal_bore_mm, described, steel_id),
                )
            return pipe_dimension

        pipe_dimension = self.reference_data.find_pipe_dimension(
            spec.nominal_bore_mm, float(spec.wall_thickness_mm), steel_id)
        if pipe_dimension is None:
            raise ReferenceDataNotFound(
                "pipe_dimension",
                {"nominal_bore_mm": spec.nominal_bore_mm, "wall_thickness_mm": spec.wall_thickness_mm,
                 "steel_specification_id": steel_id},
                self._not_found_message(spec.nominal_bore_mm,
                                        f"wall thickness {spec.wall_thickness_mm:g}mm", steel_id),
            )
        return pipe_dimension

    @staticmethod
    def _not_found_message(nominal_bore_mm, described, steel_id):
        message = f"Pipe dimension not found for {nominal_bore_mm:g}NB with {described}"
        if steel_id is not None:
            message += f" and steel specification {steel_id}"
        return message
