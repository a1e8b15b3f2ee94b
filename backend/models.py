from sqlalchemy import Column, Integer, String, Float, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from .database import Base
import enum


# --- Enums (shared by the request schemas and the calculators) ---

class ScheduleMode(str, enum.Enum):
    BY_SCHEDULE = "schedule"
    BY_WALL_THICKNESS = "wall_thickness"


class LengthUnit(str, enum.Enum):
    METERS = "meters"
    FEET = "feet"


class QuantityMode(str, enum.Enum):
    TOTAL_LENGTH = "total_length"
    PIPE_COUNT = "number_of_pipes"


class BendType(str, enum.Enum):
    BEND_1_5D = "1.5D"
    BEND_2D = "2D"
    BEND_3D = "3D"
    BEND_5D = "5D"


# --- Reference tables (read-only during a calculation) ---

class NbNpsLookup(Base):
    """Nominal bore (mm) to NPS (inch) and true outside diameter."""
    __tablename__ = "nb_nps_lookup"

    id = Column(Integer, primary_key=True, index=True)
    nominal_bore_mm = Column(Float, unique=True, nullable=False, index=True)
    nps_inch = Column(Float, nullable=False)
    outside_diameter_mm = Column(Float, nullable=False)


class SteelSpecification(Base):
    __tablename__ = "steel_specifications"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)

    pipe_dimensions = relationship("PipeDimension", back_populates="steel_specification")


class PipeDimension(Base):
    """One row per NB × schedule (or wall thickness) × steel specification."""
    __tablename__ = "pipe_dimensions"

    id = Column(Integer, primary_key=True, index=True)
    nominal_bore_mm = Column(Float, nullable=False, index=True)
    steel_specification_id = Column(Integer, ForeignKey("steel_specifications.id"), nullable=True)
    schedule_designation = Column(String, nullable=True)  # "40", "STD", "XS", "MEDIUM", ...
    schedule_number = Column(Float, nullable=True)
    outside_diameter_mm = Column(Float, nullable=False)
    wall_thickness_mm = Column(Float, nullable=False)
    mass_per_meter_kg = Column(Float, nullable=True)  # Null ⇒ computed from OD/WT

    steel_specification = relationship("SteelSpecification", back_populates="pipe_dimensions")


class FlangeStandard(Base):
    __tablename__ = "flange_standards"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String, unique=True, nullable=False)  # 'BS 4504' | 'SABS 1123' | 'BS 10'

    pressure_classes = relationship("FlangePressureClass", back_populates="standard",
                                    cascade="all, delete-orphan")


class FlangePressureClass(Base):
    __tablename__ = "flange_pressure_classes"
    __table_args__ = (UniqueConstraint("standard_id", "designation"),)

    id = Column(Integer, primary_key=True, index=True)
    standard_id = Column(Integer, ForeignKey("flange_standards.id"), nullable=False)
    designation = Column(String, nullable=False)  # '16/3', '1000/3', 'T/E', ...

    standard = relationship("FlangeStandard", back_populates="pressure_classes")


class Bolt(Base):
    """Bolt type, e.g. M24. Bolt and nut masses hang off this."""
    __tablename__ = "bolts"

    id = Column(Integer, primary_key=True, index=True)
    designation = Column(String, unique=True, nullable=False)

    masses = relationship("BoltMass", back_populates="bolt", cascade="all, delete-orphan")
    nut_mass = relationship("NutMass", back_populates="bolt", uselist=False,
                            cascade="all, delete-orphan")


class FlangeDimension(Base):
    __tablename__ = "flange_dimensions"

    id = Column(Integer, primary_key=True, index=True)
    nominal_bore_mm = Column(Float, nullable=False, index=True)
    standard_id = Column(Integer, ForeignKey("flange_standards.id"), nullable=False)
    pressure_class_id = Column(Integer, ForeignKey("flange_pressure_classes.id"), nullable=False)
    outside_diameter_mm = Column(Float, nullable=False)     # D
    thickness_mm = Column(Float, nullable=False)            # b
    raised_face_diameter_mm = Column(Float, nullable=True)  # d4
    raised_face_height_mm = Column(Float, nullable=True)    # f
    num_holes = Column(Integer, nullable=False)
    hole_diameter_mm = Column(Float, nullable=False)        # d1
    pcd_mm = Column(Float, nullable=False)
    bolt_type_id = Column(Integer, ForeignKey("bolts.id"), nullable=True)
    flange_mass_kg = Column(Float, nullable=False, default=0.0)

    standard = relationship("FlangeStandard")
    pressure_class = relationship("FlangePressureClass")
    bolt = relationship("Bolt")


class BoltMass(Base):
    __tablename__ = "bolt_masses"
    __table_args__ = (UniqueConstraint("bolt_type_id", "length_mm"),)

    id = Column(Integer, primary_key=True, index=True)
    bolt_type_id = Column(Integer, ForeignKey("bolts.id"), nullable=False)
    length_mm = Column(Float, nullable=False)
    mass_kg = Column(Float, nullable=False)

    bolt = relationship("Bolt", back_populates="masses")


class NutMass(Base):
    __tablename__ = "nut_masses"

    id = Column(Integer, primary_key=True, index=True)
    bolt_type_id = Column(Integer, ForeignKey("bolts.id"), unique=True, nullable=False)
    mass_kg = Column(Float, nullable=False)

    bolt = relationship("Bolt", back_populates="nut_mass")
