"""
Reference data providers — read-only point lookups over the four reference tables.

Calculators only ever see the ReferenceDataProvider interface:
1. InMemoryReferenceData — immutable tuples of records (bundled tables, tests)
2. SqlReferenceData — SQLAlchemy queries against the reference tables

Providers return frozen record models or None. The engine owns all derived math.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, Union

from sqlalchemy.exc import SQLAlchemyError

from .. import models
from ..schemas import (
    BoltMassRecord,
    FlangeDimensionRecord,
    FlangePressureClassRecord,
    FlangeStandardRecord,
    NbNpsRecord,
    NutMassRecord,
    PipeDimensionRecord,
    SteelSpecificationRecord,
)

logger = logging.getLogger(__name__)

# Wall thickness keys are matched within this tolerance (mm)
WALL_THICKNESS_TOLERANCE_MM = 0.0005

ScheduleOrWallThickness = Union[str, float]


class ReferenceDataError(Exception):
    """Reference data could not be read."""


class ReferenceDataNotFound(ReferenceDataError, LookupError):
    """A required reference row is missing. The message names the attempted key."""

    def __init__(self, entity: str, key: dict, message: str):
        super().__init__(message)
        self.entity = entity
        self.key = key


def _is_schedule_key(key: ScheduleOrWallThickness) -> bool:
    return isinstance(key, str)


class ReferenceDataProvider(ABC):
    """Read-only lookups the calculators depend on."""

    @abstractmethod
    def find_pipe_dimension(self, nominal_bore_mm: float, schedule_or_wall_thickness: ScheduleOrWallThickness,
                            steel_specification_id: Optional[int] = None) -> Optional[PipeDimensionRecord]:
        """
        A str key is a schedule designation ("40", "STD"); a number is a wall thickness in mm.
        steel_specification_id=None matches any steel specification.
        """

    @abstractmethod
    def find_nb_nps_lookup(self, nominal_bore_mm: float) -> Optional[NbNpsRecord]:
        pass

    @abstractmethod
    def find_flange_dimension(self, nominal_bore_mm: float, standard_id: int,
                              pressure_class_id: int) -> Optional[FlangeDimensionRecord]:
        pass

    @abstractmethod
    def find_bolt_mass(self, bolt_type_id: int, min_length_mm: float) -> Optional[BoltMassRecord]:
        """Shortest bolt of this type that is at least min_length_mm long."""

    @abstractmethod
    def find_nut_mass(self, bolt_type_id: int) -> Optional[NutMassRecord]:
        pass

    @abstractmethod
    def find_steel_specification(self, steel_specification_id: int) -> Optional[SteelSpecificationRecord]:
        pass

    # --- Listings for the reference endpoints ---

    @abstractmethod
    def list_nb_nps(self) -> list:
        pass

    @abstractmethod
    def list_steel_specifications(self) -> list:
        pass

    @abstractmethod
    def list_flange_standards(self) -> list:
        pass

    @abstractmethod
    def list_flange_pressure_classes(self, standard_id: Optional[int] = None) -> list:
        pass


class InMemoryReferenceData(ReferenceDataProvider):
    """
    Reference data held in memory as immutable tuples.
    Built from plain row dicts (see reference_tables.py for the layout).
    """

    def __init__(self, nb_nps=(), steel_specifications=(), pipe_dimensions=(),
                 flange_standards=(), flange_pressure_classes=(), flange_dimensions=(),
                 bolt_masses=(), nut_masses=()):
        self._nb_nps = tuple(NbNpsRecord(**row) for row in nb_nps)
        self._steel_specs = tuple(SteelSpecificationRecord(**row) for row in steel_specifications)
        self._pipe_dimensions = tuple(PipeDimensionRecord(**row) for row in pipe_dimensions)
        self._flange_standards = tuple(FlangeStandardRecord(**row) for row in flange_standards)
        self._pressure_classes = tuple(FlangePressureClassRecord(**row) for row in flange_pressure_classes)
        self._flange_dimensions = tuple(FlangeDimensionRecord(**row) for row in flange_dimensions)
        self._bolt_masses = tuple(sorted(
            (BoltMassRecord(**row) for row in bolt_masses),
            key=lambda r: (r.bolt_type_id, r.length_mm),
        ))
        self._nut_masses = tuple(NutMassRecord(**row) for row in nut_masses)

    @classmethod
    def from_bundled_tables(cls) -> "InMemoryReferenceData":
        """Provider over the tables shipped in reference_tables.py."""
        from .. import reference_tables as tables
        return cls(
            nb_nps=tables.NB_NPS_LOOKUP,
            steel_specifications=tables.STEEL_SPECIFICATIONS,
            pipe_dimensions=tables.PIPE_DIMENSIONS,
            flange_standards=tables.FLANGE_STANDARDS,
            flange_pressure_classes=tables.FLANGE_PRESSURE_CLASSES,
            flange_dimensions=tables.FLANGE_DIMENSIONS,
            bolt_masses=tables.BOLT_MASSES,
            nut_masses=tables.NUT_MASSES,
        )

    def find_pipe_dimension(self, nominal_bore_mm, schedule_or_wall_thickness, steel_specification_id=None):
        for row in self._pipe_dimensions:
            if row.nominal_bore_mm != nominal_bore_mm:
                continue
            if steel_specification_id is not None and row.steel_specification_id != steel_specification_id:
                continue
            if _is_schedule_key(schedule_or_wall_thickness):
                if row.schedule_designation == schedule_or_wall_thickness:
                    return row
            elif abs(row.wall_thickness_mm - float(schedule_or_wall_thickness)) <= WALL_THICKNESS_TOLERANCE_MM:
                return row
        return None

    def find_nb_nps_lookup(self, nominal_bore_mm):
        return next((r for r in self._nb_nps if r.nominal_bore_mm == nominal_bore_mm), None)

    def find_flange_dimension(self, nominal_bore_mm, standard_id, pressure_class_id):
        return next(
            (r for r in self._flange_dimensions
             if r.nominal_bore_mm == nominal_bore_mm
             and r.standard_id == standard_id
             and r.pressure_class_id == pressure_class_id),
            None,
        )

    def find_bolt_mass(self, bolt_type_id, min_length_mm):
        # Sorted ascending by length: first hit is the shortest adequate bolt
        for row in self._bolt_masses:
            if row.bolt_type_id == bolt_type_id and row.length_mm >= min_length_mm:
                return row
        return None

    def find_nut_mass(self, bolt_type_id):
        return next((r for r in self._nut_masses if r.bolt_type_id == bolt_type_id), None)

    def find_steel_specification(self, steel_specification_id):
        return next((r for r in self._steel_specs if r.id == steel_specification_id), None)

    def list_nb_nps(self):
        return sorted(self._nb_nps, key=lambda r: r.nominal_bore_mm)

    def list_steel_specifications(self):
        return sorted(self._steel_specs, key=lambda r: r.id)

    def list_flange_standards(self):
        return sorted(self._flange_standards, key=lambda r: r.id)

    def list_flange_pressure_classes(self, standard_id=None):
        return [
            r for r in sorted(self._pressure_classes, key=lambda r: r.id)
            if standard_id is None or r.standard_id == standard_id
        ]


class SqlReferenceData(ReferenceDataProvider):
    """
    Reference lookups through a SQLAlchemy session.
    Database errors surface as ReferenceDataError so callers never see SQLAlchemy types.
    """

    def __init__(self, db):
        self.db = db

    def _first(self, query, record_type):
        try:
            row = query.first()
        except SQLAlchemyError as e:
            logger.error("Reference data query failed: %s", e)
            raise ReferenceDataError(f"Reference data query failed: {e}") from e
        return record_type.model_validate(row) if row is not None else None

    def _all(self, query, record_type):
        try:
            rows = query.all()
        except SQLAlchemyError as e:
            logger.error("Reference data query failed: %s", e)
            raise ReferenceDataError(f"Reference data query failed: {e}") from e
        return [record_type.model_validate(row) for row in rows]

    def find_pipe_dimension(self, nominal_bore_mm, schedule_or_wall_thickness, steel_specification_id=None):
        query = self.db.query(models.PipeDimension).filter(
            models.PipeDimension.nominal_bore_mm == nominal_bore_mm
        )
        if _is_schedule_key(schedule_or_wall_thickness):
            query = query.filter(models.PipeDimension.schedule_designation == schedule_or_wall_thickness)
        else:
            wt = float(schedule_or_wall_thickness)
            query = query.filter(models.PipeDimension.wall_thickness_mm.between(
                wt - WALL_THICKNESS_TOLERANCE_MM, wt + WALL_THICKNESS_TOLERANCE_MM))
        if steel_specification_id is not None:
            query = query.filter(models.PipeDimension.steel_specification_id == steel_specification_id)
        return self._first(query.order_by(models.PipeDimension.id), PipeDimensionRecord)

    def find_nb_nps_lookup(self, nominal_bore_mm):
        query = self.db.query(models.NbNpsLookup).filter(
            models.NbNpsLookup.nominal_bore_mm == nominal_bore_mm
        )
        return self._first(query, NbNpsRecord)

    def find_flange_dimension(self, nominal_bore_mm, standard_id, pressure_class_id):
        query = self.db.query(models.FlangeDimension).filter(
            models.FlangeDimension.nominal_bore_mm == nominal_bore_mm,
            models.FlangeDimension.standard_id == standard_id,
            models.FlangeDimension.pressure_class_id == pressure_class_id,
        )
        return self._first(query.order_by(models.FlangeDimension.id), FlangeDimensionRecord)

    def find_bolt_mass(self, bolt_type_id, min_length_mm):
        query = self.db.query(models.BoltMass).filter(
            models.BoltMass.bolt_type_id == bolt_type_id,
            models.BoltMass.length_mm >= min_length_mm,
        ).order_by(models.BoltMass.length_mm.asc())
        return self._first(query, BoltMassRecord)

    def find_nut_mass(self, bolt_type_id):
        query = self.db.query(models.NutMass).filter(models.NutMass.bolt_type_id == bolt_type_id)
        return self._first(query, NutMassRecord)

    def find_steel_specification(self, steel_specification_id):
        query = self.db.query(models.SteelSpecification).filter(
            models.SteelSpecification.id == steel_specification_id
        )
        return self._first(query, SteelSpecificationRecord)

    def list_nb_nps(self):
        query = self.db.query(models.NbNpsLookup).order_by(models.NbNpsLookup.nominal_bore_mm)
        return self._all(query, NbNpsRecord)

    def list_steel_specifications(self):
        query = self.db.query(models.SteelSpecification).order_by(models.SteelSpecification.id)
        return self._all(query, SteelSpecificationRecord)

    def list_flange_standards(self):
        query = self.db.query(models.FlangeStandard).order_by(models.FlangeStandard.id)
        return self._all(query, FlangeStandardRecord)

    def list_flange_pressure_classes(self, standard_id=None):
        query = self.db.query(models.FlangePressureClass)
        if standard_id is not None:
            query = query.filter(models.FlangePressureClass.standard_id == standard_id)
        return self._all(query.order_by(models.FlangePressureClass.id), FlangePressureClassRecord)
