"""Custom exceptions for the FairShare calculation engine.

This module provides a hierarchy of exception classes for consistent error
handling across the guideline calculators, the guideline catalog and the
parent profile store. All exceptions inherit from FairShareError.

Calculators never let these escape ``calculate``; they are converted into
``CalcError`` entries on the returned ``CalculationResult``. Collaborators
(catalog, configuration loading) raise them to their callers.

Example:
    try:
        calculator = catalog.require_calculator(state, form)
    except GuidelineNotFoundError as e:
        logger.warning("unknown_guideline", state=e.state, form=e.form)
    except FairShareError as e:
        logger.error("catalog_failure", error=str(e))
"""

from typing import Any, Optional


class FairShareError(Exception):
    """Base exception for all FairShare errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional context.
        recoverable: Whether the error is potentially recoverable.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = False,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.recoverable = recoverable

    def __str__(self) -> str:
        """Return string representation of the error."""
        return self.message

    def __repr__(self) -> str:
        """Return detailed representation of the error."""
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"details={self.details!r}, "
            f"recoverable={self.recoverable!r})"
        )


class ValidationError(FairShareError):
    """Error raised when a calculation input is out of the supported range.

    The ``field`` uses the guideline form's field names (for example
    ``numberOfChildren`` or ``combinedAdjustedGrossIncome``) so callers can
    key user-facing messages by it.

    Attributes:
        field: The field that failed validation.
        value: The invalid value.
        constraint: The validation constraint that was violated.

    Example:
        >>> raise ValidationError(
        ...     "Number of children must be greater than 0.",
        ...     field="numberOfChildren",
        ...     value=0,
        ...     constraint="> 0",
        ... )
        ValidationError: Number of children must be greater than 0.
    """

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        constraint: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = True,
    ) -> None:
        """Initialize ValidationError.

        Args:
            message: Human-readable error description.
            field: The name of the field that failed validation.
            value: The invalid value.
            constraint: Description of the validation rule violated.
            details: Optional dictionary with additional context.
            recoverable: Whether the error can be fixed by user correction.
                Defaults to True since validation errors typically require
                user input correction.
        """
        super().__init__(message, details=details, recoverable=recoverable)
        self.field = field
        self.value = value
        self.constraint = constraint

        if field:
            self.details["field"] = field
        if value is not None:
            self.details["value"] = value
        if constraint:
            self.details["constraint"] = constraint


class ConfigurationError(FairShareError):
    """Error raised when configuration or reference data is invalid.

    Raised for malformed schedule files and for conflicting calculator
    registrations. Configuration errors are fatal.

    Attributes:
        config_key: The configuration key that is problematic.
        expected: Description of the expected value or format.
        actual: The actual value found (if any).
    """

    def __init__(
        self,
        message: str,
        *,
        config_key: Optional[str] = None,
        expected: Optional[str] = None,
        actual: Optional[Any] = None,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = False,
    ) -> None:
        super().__init__(message, details=details, recoverable=recoverable)
        self.config_key = config_key
        self.expected = expected
        self.actual = actual

        if config_key:
            self.details["config_key"] = config_key
        if expected:
            self.details["expected"] = expected
        if actual is not None:
            self.details["actual"] = actual


class GuidelineNotFoundError(FairShareError):
    """Error raised when no calculator is registered for a state and form.

    Attributes:
        state: The requested jurisdiction code.
        form: The requested guideline form.
    """

    def __init__(
        self,
        state: str,
        form: str,
        *,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            f"No child support guideline registered for {state} {form}",
            details=details,
            recoverable=True,
        )
        self.state = state
        self.form = form
        self.details["state"] = state
        self.details["form"] = form


__all__ = [
    "FairShareError",
    "ValidationError",
    "ConfigurationError",
    "GuidelineNotFoundError",
]
