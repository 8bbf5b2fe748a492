"""Calculation result models.

Every guideline calculator returns a ``CalculationResult``, on success and
on failure alike. Failures are described by ``CalcError`` entries rather
than raised exceptions.
"""

from decimal import Decimal
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field


class ErrorSeverity(str, Enum):
    """Severity levels for calculation errors."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class Payer(str, Enum):
    """Which parent owes the final amount."""
    PLAINTIFF = "Plaintiff"
    DEFENDANT = "Defendant"
    NEITHER = "Neither"
    NOT_APPLICABLE = "N/A"


class ErrorCode(str, Enum):
    """Machine-readable calculation error codes."""
    INVALID_CHILD_COUNT = "INVALID_CHILD_COUNT"
    CAGI_OUT_OF_RANGE = "CAGI_OUT_OF_RANGE"
    ARG_OUT_OF_RANGE = "ARG_OUT_OF_RANGE"
    PRIMARY_CUSTODY_REQUIRED = "PRIMARY_CUSTODY_REQUIRED"
    UNEXPECTED_ERROR = "UNEXPECTED_ERROR"


class CalcError(BaseModel):
    """A single problem encountered during a calculation.

    Attributes:
        code: Machine-readable error code (e.g. "INVALID_CHILD_COUNT")
        message: Human-readable error message
        field: Form field the error relates to, if any
        severity: Error severity level
        exception_type: Python exception type name for unexpected failures
        exception_message: Exception message for unexpected failures
    """

    model_config = {"frozen": True}

    code: str = "CALC_ERROR"
    message: str = ""
    field: Optional[str] = None
    severity: ErrorSeverity = ErrorSeverity.ERROR
    exception_type: Optional[str] = None
    exception_message: Optional[str] = None

    @classmethod
    def from_exception(
        cls,
        exc: BaseException,
        *,
        code: str = ErrorCode.UNEXPECTED_ERROR.value,
        message: str = "An unexpected error occurred during calculation.",
    ) -> "CalcError":
        """Create an error entry that carries the cause of an unexpected failure."""
        return cls(
            code=code,
            message=message,
            field=None,
            severity=ErrorSeverity.ERROR,
            exception_type=type(exc).__name__,
            exception_message=str(exc),
        )


class CalculationStep(BaseModel):
    """One worksheet line: an intermediate value of a calculation."""

    model_config = {"frozen": True}

    step: str
    value: Union[int, Decimal]
    description: str = ""


class CalculationResult(BaseModel):
    """Outcome of a child support calculation.

    ``payer`` is "N/A" and ``final_amount`` is 0 whenever ``success`` is
    False. ``steps`` holds the worksheet values computed before the
    calculation finished or failed.
    """

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "success": True,
                    "state": "AL",
                    "form": "CS42",
                    "number_of_children": 4,
                    "payer": "Defendant",
                    "final_amount": 2114,
                    "errors": [],
                }
            ]
        },
    }

    success: bool = False
    state: str
    form: str
    number_of_children: int
    payer: str = Payer.NOT_APPLICABLE.value
    final_amount: int = 0
    errors: list[CalcError] = Field(default_factory=list)
    steps: list[CalculationStep] = Field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Check if any errors were recorded."""
        return len(self.errors) > 0

    @property
    def error_codes(self) -> list[str]:
        """Codes of all recorded errors, in order."""
        return [error.code for error in self.errors]

    def step_value(self, step: str) -> Union[int, Decimal]:
        """Return the value recorded for a worksheet step.

        Raises:
            KeyError: If the step was not recorded.
        """
        for entry in self.steps:
            if entry.step == step:
                return entry.value
        raise KeyError(step)
