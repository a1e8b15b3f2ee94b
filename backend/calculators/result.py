"""
Result assembly — maps calculator intermediates onto the frozen CalculationResult.

Rounding:
- weights to 2 decimals, except straight-pipe total pipe / total system weight (whole kg)
- lengths to 2 decimals
Counts pass through untouched. No other logic lives here.
"""

from ..schemas import CalculationResult, HardwareWeights
from .base import round_half_up


def assemble_straight_pipe_result(*, outside_diameter_mm: float, wall_thickness_mm: float,
                                  weight_per_meter_kg: float, total_pipe_weight_kg: float,
                                  hardware: HardwareWeights, pipe_count: int, total_length_m: float,
                                  flange_count: int, flange_weld_count: int,
                                  flange_weld_length_m: float, butt_weld_count: int,
                                  butt_weld_length_m: float) -> CalculationResult:
    total_system_weight = (total_pipe_weight_kg + hardware.flange_weight_kg
                           + hardware.bolt_weight_kg + hardware.nut_weight_kg)
    return CalculationResult(
        item_type="straight_pipe",
        outside_diameter_mm=outside_diameter_mm,
        wall_thickness_mm=wall_thickness_mm,
        pipe_weight_per_meter_kg=round_half_up(weight_per_meter_kg, 2),
        total_pipe_weight_kg=round_half_up(total_pipe_weight_kg),
        total_flange_weight_kg=round_half_up(hardware.flange_weight_kg, 2),
        total_bolt_weight_kg=round_half_up(hardware.bolt_weight_kg, 2),
        total_nut_weight_kg=round_half_up(hardware.nut_weight_kg, 2),
        total_system_weight_kg=round_half_up(total_system_weight),
        calculated_pipe_count=pipe_count,
        calculated_total_length_m=round_half_up(total_length_m, 2),
        number_of_flanges=flange_count,
        number_of_flange_welds=flange_weld_count,
        total_flange_weld_length_m=round_half_up(flange_weld_length_m, 2),
        number_of_butt_welds=butt_weld_count,
        total_butt_weld_length_m=round_half_up(butt_weld_length_m, 2),
    )


def assemble_bend_result(*, outside_diameter_mm: float, wall_thickness_mm: float,
                         total_weight_kg: float, bend_weight_kg: float, tangent_weight_kg: float,
                         flange_weight_kg: float, quantity_value: int, flange_count: int,
                         flange_weld_count: int, flange_weld_length_m: float,
                         butt_weld_count: int, butt_weld_length_m: float,
                         bend_radius_mm: float, center_to_face_mm: float) -> CalculationResult:
    return CalculationResult(
        item_type="bend",
        outside_diameter_mm=outside_diameter_mm,
        wall_thickness_mm=wall_thickness_mm,
        total_bend_weight_kg=round_half_up(bend_weight_kg, 2),
        total_tangent_weight_kg=round_half_up(tangent_weight_kg, 2),
        total_flange_weight_kg=round_half_up(flange_weight_kg, 2),
        total_system_weight_kg=round_half_up(total_weight_kg, 2),
        quantity_value=quantity_value,
        number_of_flanges=flange_count,
        number_of_flange_welds=flange_weld_count,
        total_flange_weld_length_m=round_half_up(flange_weld_length_m, 2),
        number_of_butt_welds=butt_weld_count,
        total_butt_weld_length_m=round_half_up(butt_weld_length_m, 2),
        bend_radius_mm=round_half_up(bend_radius_mm, 2),
        center_to_face_mm=round_half_up(center_to_face_mm, 2),
    )
