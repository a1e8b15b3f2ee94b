"""
Calculator registry — maps RFQ item types to calculator classes.
"""

from typing import Optional

from .base import BaseCalculator
from .bend import BendCalculator
from .reference_data import ReferenceDataProvider
from .straight_pipe import StraightPipeCalculator

CALCULATOR_REGISTRY: dict[str, type] = {
    "straight_pipe": StraightPipeCalculator,
    "bend": BendCalculator,
}


def get_calculator(item_type: str, reference_data: Optional[ReferenceDataProvider] = None) -> BaseCalculator:
    """Returns an instance of the calculator for an item type, or raises ValueError."""
    if item_type not in CALCULATOR_REGISTRY:
        raise ValueError(
            f"No calculator registered for item type: {item_type}. "
            f"Available: {list(CALCULATOR_REGISTRY.keys())}"
        )
    return CALCULATOR_REGISTRY[item_type](reference_data)


def has_calculator(item_type: str) -> bool:
    """Check if a calculator exists for an item type."""
    return item_type in CALCULATOR_REGISTRY


def list_calculators() -> list[str]:
    """List all registered calculator item types."""
    return list(CALCULATOR_REGISTRY.keys())
