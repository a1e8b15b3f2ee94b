from pydantic import BaseModel, Field, model_validator
from typing import Optional, List, Literal
from .models import ScheduleMode, LengthUnit, QuantityMode, BendType


# --- Specifications (caller-built, one per request) ---

class PipeSpecification(BaseModel):
    nominal_bore_mm: float = Field(gt=0)
    schedule_mode: ScheduleMode
    schedule_number: Optional[str] = None
    wall_thickness_mm: Optional[float] = Field(default=None, gt=0)
    individual_pipe_length: float = Field(gt=0)
    length_unit: LengthUnit = LengthUnit.METERS
    quantity_mode: QuantityMode
    quantity_value: float = Field(gt=0)
    working_pressure_bar: float = Field(ge=0, le=1000)
    working_temperature_c: Optional[float] = Field(default=None, ge=-273, le=2000)
    steel_specification_id: Optional[int] = None
    flange_standard_id: Optional[int] = None
    flange_pressure_class_id: Optional[int] = None

    class Config:
        frozen = True

    @model_validator(mode="after")
    def _check_schedule_mode(self):
        if self.schedule_mode == ScheduleMode.BY_SCHEDULE and not self.schedule_number:
            raise ValueError("schedule_number is required when schedule_mode is 'schedule'")
        if self.schedule_mode == ScheduleMode.BY_WALL_THICKNESS and self.wall_thickness_mm is None:
            raise ValueError("wall_thickness_mm is required when schedule_mode is 'wall_thickness'")
        return self


class BendSpecification(BaseModel):
    nominal_bore_mm: float = Field(ge=15, le=600)
    schedule_number: str
    bend_type: BendType
    bend_degrees: float = Field(ge=15, le=180)
    number_of_tangents: int = Field(default=0, ge=0, le=10)
    tangent_lengths: List[float] = []  # mm, one per tangent
    quantity_value: int = Field(default=1, ge=1)
    working_pressure_bar: float = Field(ge=1, le=420)
    working_temperature_c: float = Field(ge=-50, le=800)
    steel_specification_id: int
    use_global_flange_specs: bool = True
    flange_standard_id: Optional[int] = None
    flange_pressure_class_id: Optional[int] = None

    class Config:
        frozen = True

    @model_validator(mode="after")
    def _check_tangents(self):
        if len(self.tangent_lengths) != self.number_of_tangents:
            raise ValueError(
                f"tangent_lengths has {len(self.tangent_lengths)} entries "
                f"but number_of_tangents is {self.number_of_tangents}"
            )
        if any(length < 0 for length in self.tangent_lengths):
            raise ValueError("tangent lengths must be >= 0")
        return self


# --- Reference records (point-lookup results) ---

class NbNpsRecord(BaseModel):
    nominal_bore_mm: float
    nps_inch: float
    outside_diameter_mm: float

    class Config:
        from_attributes = True
        frozen = True


class SteelSpecificationRecord(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True
        frozen = True


class PipeDimensionRecord(BaseModel):
    nominal_bore_mm: float
    steel_specification_id: Optional[int] = None
    schedule_designation: Optional[str] = None
    schedule_number: Optional[float] = None
    outside_diameter_mm: float
    wall_thickness_mm: float
    mass_per_meter_kg: Optional[float] = None

    class Config:
        from_attributes = True
        frozen = True


class FlangeStandardRecord(BaseModel):
    id: int
    code: str

    class Config:
        from_attributes = True
        frozen = True


class FlangePressureClassRecord(BaseModel):
    id: int
    standard_id: int
    designation: str

    class Config:
        from_attributes = True
        frozen = True


class FlangeDimensionRecord(BaseModel):
    nominal_bore_mm: float
    standard_id: int
    pressure_class_id: int
    outside_diameter_mm: float
    thickness_mm: float
    raised_face_diameter_mm: Optional[float] = None
    raised_face_height_mm: Optional[float] = None
    num_holes: int
    hole_diameter_mm: float
    pcd_mm: float
    bolt_type_id: Optional[int] = None
    flange_mass_kg: float = 0.0

    class Config:
        from_attributes = True
        frozen = True


class BoltMassRecord(BaseModel):
    bolt_type_id: int
    length_mm: float
    mass_kg: float

    class Config:
        from_attributes = True
        frozen = True


class NutMassRecord(BaseModel):
    bolt_type_id: int
    mass_kg: float

    class Config:
        from_attributes = True
        frozen = True


# --- Calculation output ---

class HardwareWeights(BaseModel):
    flange_weight_kg: float = 0.0
    bolt_weight_kg: float = 0.0
    nut_weight_kg: float = 0.0

    class Config:
        frozen = True


class CalculationResult(BaseModel):
    """Fabrication quantities for one straight-pipe or bend item. Built once, never mutated."""
    item_type: Literal["straight_pipe", "bend"]
    outside_diameter_mm: float
    wall_thickness_mm: float
    pipe_weight_per_meter_kg: Optional[float] = None
    total_pipe_weight_kg: Optional[float] = None
    total_bend_weight_kg: Optional[float] = None
    total_tangent_weight_kg: Optional[float] = None
    total_flange_weight_kg: float = 0.0
    total_bolt_weight_kg: float = 0.0
    total_nut_weight_kg: float = 0.0
    total_system_weight_kg: float
    calculated_pipe_count: Optional[int] = None
    quantity_value: Optional[int] = None
    calculated_total_length_m: Optional[float] = None
    number_of_flanges: int
    number_of_flange_welds: int
    total_flange_weld_length_m: float
    number_of_butt_welds: int
    total_butt_weld_length_m: float
    bend_radius_mm: Optional[float] = None
    center_to_face_mm: Optional[float] = None

    class Config:
        frozen = True
