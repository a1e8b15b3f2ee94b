"""
Reference data API — read-only listings for the RFQ forms, plus first-run seeding.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from .. import models, schemas, reference_tables
from ..calculators.reference_data import SqlReferenceData
from ..database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reference", tags=["reference-data"])

# Table model → bundled rows. Order matters: parents before children.
_SEED_TABLES = [
    (models.NbNpsLookup, reference_tables.NB_NPS_LOOKUP),
    (models.SteelSpecification, reference_tables.STEEL_SPECIFICATIONS),
    (models.PipeDimension, reference_tables.PIPE_DIMENSIONS),
    (models.FlangeStandard, reference_tables.FLANGE_STANDARDS),
    (models.FlangePressureClass, reference_tables.FLANGE_PRESSURE_CLASSES),
    (models.Bolt, reference_tables.BOLT_TYPES),
    (models.FlangeDimension, reference_tables.FLANGE_DIMENSIONS),
    (models.BoltMass, reference_tables.BOLT_MASSES),
    (models.NutMass, reference_tables.NUT_MASSES),
]


def seed_reference_data(db: Session) -> dict:
    """Load the bundled tables into any reference table that is still empty."""
    seeded = {}
    for model, rows in _SEED_TABLES:
        if db.query(model).first() is not None:
            continue
        db.add_all(model(**row) for row in rows)
        seeded[model.__tablename__] = len(rows)
    db.commit()
    if seeded:
        logger.info("Seeded reference tables: %s", seeded)
    return seeded


@router.post("/seed")
def seed(db: Session = Depends(get_db)):
    """Seed bundled reference data into empty tables."""
    seeded = seed_reference_data(db)
    return {"ok": True, "seeded": seeded}


@router.get("/nb-nps", response_model=List[schemas.NbNpsRecord])
def list_nb_nps(db: Session = Depends(get_db)):
    return SqlReferenceData(db).list_nb_nps()


@router.get("/steel-specifications", response_model=List[schemas.SteelSpecificationRecord])
def list_steel_specifications(db: Session = Depends(get_db)):
    return SqlReferenceData(db).list_steel_specifications()


@router.get("/flange-standards", response_model=List[schemas.FlangeStandardRecord])
def list_flange_standards(db: Session = Depends(get_db)):
    return SqlReferenceData(db).list_flange_standards()


@router.get("/flange-pressure-classes", response_model=List[schemas.FlangePressureClassRecord])
def list_flange_pressure_classes(standard_id: Optional[int] = None, db: Session = Depends(get_db)):
    return SqlReferenceData(db).list_flange_pressure_classes(standard_id)


@router.get("/bend-types")
def list_bend_types():
    return [bend_type.value for bend_type in models.BendType]
