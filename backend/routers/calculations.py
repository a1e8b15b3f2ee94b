"""
Calculation API — stateless quantity takeoff for RFQ items.

POST /api/rfq/straight-pipe/calculate — straight pipe run
POST /api/rfq/bend/calculate          — bend with tangents

Nothing is persisted; the RFQ layer stores whatever it needs from the result.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from .. import schemas
from ..calculators.reference_data import ReferenceDataError, ReferenceDataNotFound, SqlReferenceData
from ..calculators.registry import get_calculator
from ..database import get_db

router = APIRouter(prefix="/rfq", tags=["calculations"])


def get_reference_data(db: Session = Depends(get_db)) -> SqlReferenceData:
    return SqlReferenceData(db)


@router.post("/straight-pipe/calculate", response_model=schemas.CalculationResult)
def calculate_straight_pipe(
    spec: schemas.PipeSpecification,
    reference_data: SqlReferenceData = Depends(get_reference_data),
):
    calculator = get_calculator("straight_pipe", reference_data)
    try:
        return calculator.calculate(spec)
    except ReferenceDataNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ReferenceDataError as e:
        raise HTTPException(status_code=503, detail=str(e))


@router.post("/bend/calculate", response_model=schemas.CalculationResult)
def calculate_bend(spec: schemas.BendSpecification):
    return get_calculator("bend").calculate(spec)
