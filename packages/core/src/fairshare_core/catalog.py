"""Catalog of guideline calculators keyed by state and form.

The catalog is the caller of the engine: it picks the calculator for a
``(state, form)`` key, enforces the input rules the guideline forms place
on the caller, and logs every outcome.
"""

from typing import Iterable, Optional

import structlog

from .calculator import (
    SharedCustodyCalculator,
    StandardCustodyCalculator,
    recorded_child_count,
)
from .config import FairShareConfig
from .exceptions import ConfigurationError, GuidelineNotFoundError
from .interfaces import ChildSupportCalculator
from .models import CalcError, CalculationResult, ErrorCode, ErrorSeverity, ParentData

logger = structlog.get_logger()


class StateGuidelineCatalog:
    """Registry of child support calculators.

    Lookups are case-insensitive on both state and form.
    """

    def __init__(self, calculators: Iterable[ChildSupportCalculator]):
        self._by_key: dict[tuple[str, str], ChildSupportCalculator] = {}
        for calc in calculators:
            key = (calc.state.upper(), calc.form.upper())
            if key in self._by_key:
                raise ConfigurationError(
                    f"Duplicate calculator registered for {calc.state} {calc.form}",
                    config_key="calculators",
                    expected="one calculator per state and form",
                    actual=f"{calc.state} {calc.form}",
                )
            self._by_key[key] = calc

    def get_states(self) -> list[str]:
        """All states with at least one calculator, sorted."""
        return sorted({state for state, _ in self._by_key})

    def get_forms_for_state(self, state: str) -> list[tuple[str, str]]:
        """``(form, display_name)`` pairs for a state, sorted by form."""
        state_key = state.strip().upper()
        return sorted(
            (calc.form, calc.display_name)
            for (s, _), calc in self._by_key.items()
            if s == state_key
        )

    def get_calculator(self, state: str, form: str) -> Optional[ChildSupportCalculator]:
        """Return the calculator for a state and form, or None."""
        return self._by_key.get((state.strip().upper(), form.strip().upper()))

    def require_calculator(self, state: str, form: str) -> ChildSupportCalculator:
        """Return the calculator for a state and form.

        Raises:
            GuidelineNotFoundError: If none is registered.
        """
        calc = self.get_calculator(state, form)
        if calc is None:
            raise GuidelineNotFoundError(state, form)
        return calc

    def list_guidelines(self) -> list[tuple[str, str, str]]:
        """``(state, form, display)`` for every calculator, ordered by state then form."""
        calcs = sorted(self._by_key.values(), key=lambda c: (c.state, c.form))
        return [(c.state, c.form, f"{c.state} {c.form}") for c in calcs]

    def calculate(
        self,
        state: str,
        form: str,
        plaintiff: ParentData,
        defendant: ParentData,
        number_of_children: int,
    ) -> CalculationResult:
        """Run the calculator for a state and form and log the outcome.

        For standard custody forms exactly one parent must have primary
        custody; otherwise a failed result is returned without calling the
        calculator.

        Raises:
            GuidelineNotFoundError: If no calculator is registered.
        """
        calc = self.require_calculator(state, form)
        log = logger.bind(state=calc.state, form=calc.form, number_of_children=number_of_children)

        if not calc.is_shared_custody and plaintiff.has_primary_custody == defendant.has_primary_custody:
            log.warning("primary_custody_required")
            return CalculationResult(
                success=False,
                state=calc.state,
                form=calc.form,
                number_of_children=recorded_child_count(number_of_children),
                errors=[
                    CalcError(
                        code=ErrorCode.PRIMARY_CUSTODY_REQUIRED.value,
                        message="For this form, you must mark exactly one parent as having Primary Custody.",
                        field="hasPrimaryCustody",
                        severity=ErrorSeverity.ERROR,
                    )
                ],
            )

        result = calc.calculate(plaintiff, defendant, number_of_children)

        if result.success:
            log.info("calculation_complete", payer=result.payer, final_amount=result.final_amount)
        else:
            for error in result.errors:
                if error.code == ErrorCode.UNEXPECTED_ERROR.value:
                    log.error(
                        "calculation_failed",
                        code=error.code,
                        exception_type=error.exception_type,
                        exception_message=error.exception_message,
                    )
                else:
                    log.warning(
                        "calculation_invalid",
                        code=error.code,
                        field=error.field,
                        message=error.message,
                    )

        return result


def default_catalog(config: Optional[FairShareConfig] = None) -> StateGuidelineCatalog:
    """Build the catalog of Alabama guideline calculators.

    Args:
        config: Configuration supplying the schedule and edge policy
            (default: loaded from the environment)
    """
    config = config or FairShareConfig()
    schedule = config.load_schedule()
    logger.debug(
        "catalog_schedule_loaded",
        version=schedule.version,
        clamp=schedule.clamp,
        min_income=schedule.min_income,
        max_income=schedule.max_income,
    )
    if schedule.provisional:
        logger.warning(
            "bcso_schedule_provisional",
            version=schedule.version,
            hint="set FAIRSHARE_SCHEDULE_PATH to the published schedule CSV",
        )
    return StateGuidelineCatalog(
        [
            StandardCustodyCalculator(schedule),
            SharedCustodyCalculator(schedule),
        ]
    )
