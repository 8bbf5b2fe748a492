"""Data models for fairshare-core.

This package provides:
- Parent financial inputs and saved profiles (parent.py)
- Calculation results, errors and worksheet steps (result.py)
"""

from fairshare_core.models.parent import (
    ParentData,
    ParentProfile,
)
from fairshare_core.models.result import (
    # Enumerations
    ErrorSeverity,
    ErrorCode,
    Payer,
    # Results
    CalcError,
    CalculationStep,
    CalculationResult,
)

__all__ = [
    # Parent data
    "ParentData",
    "ParentProfile",
    # Enumerations
    "ErrorSeverity",
    "ErrorCode",
    "Payer",
    # Results
    "CalcError",
    "CalculationStep",
    "CalculationResult",
]
