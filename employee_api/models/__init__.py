"""
Centralized model definitions.

Exports the entity data holders and the health response types.
"""
from .employee import Employee
from .health import HealthStatus, HealthSummaryResponse
from .loan import Loan

__all__ = [
    "Employee",
    "Loan",
    "HealthStatus",
    "HealthSummaryResponse",
]
