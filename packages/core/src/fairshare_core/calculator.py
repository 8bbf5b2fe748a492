"""Child support calculations per the Alabama Rule 32 guidelines.

This module provides two calculators:
1. StandardCustodyCalculator - Form CS-42, one parent has primary custody
2. SharedCustodyCalculator - Form CS-42-S, shared physical custody

Both are pure: they keep no state between calls, never raise, and record
each intermediate value as a worksheet step on the returned result.
Logging of outcomes is left to the caller (see ``catalog``).
"""

from decimal import Decimal
from typing import Optional, Union

from .alabama_standards import (
    SHARED_BCSO_CREDIT_RATE,
    SHARED_CUSTODY_MULTIPLIER,
    STATE,
    combined_adjusted_gross_income,
    income_share,
    max_obligation_after_reserve,
    prorated_obligation,
    round_whole,
    total_childcare_and_healthcare_costs,
)
from .bcso_schedule import DEFAULT_SCHEDULE, BcsoSchedule
from .exceptions import ValidationError
from .models import (
    CalcError,
    CalculationResult,
    CalculationStep,
    ErrorCode,
    ErrorSeverity,
    ParentData,
    Payer,
)

# Validation field -> result error code
_FIELD_ERROR_CODES = {
    "numberOfChildren": ErrorCode.INVALID_CHILD_COUNT,
    "combinedAdjustedGrossIncome": ErrorCode.CAGI_OUT_OF_RANGE,
}


def _is_whole_number(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def recorded_child_count(number_of_children) -> int:
    """Child count as stored on a result; 0 when it is not a whole number."""
    return number_of_children if _is_whole_number(number_of_children) else 0


def _validate_child_count(number_of_children: int) -> None:
    if not _is_whole_number(number_of_children):
        raise ValidationError(
            "Number of children must be a whole number.",
            field="numberOfChildren",
            value=number_of_children,
            constraint="integer",
        )
    if number_of_children <= 0:
        raise ValidationError(
            "Number of children must be greater than 0.",
            field="numberOfChildren",
            value=number_of_children,
            constraint="> 0",
        )


def _validation_error(exc: ValidationError) -> CalcError:
    """Convert a validation failure into a result error keyed by field."""
    code = _FIELD_ERROR_CODES.get(exc.field, ErrorCode.ARG_OUT_OF_RANGE)
    return CalcError(
        code=code.value,
        message=exc.message,
        field=exc.field,
        severity=ErrorSeverity.ERROR,
    )


def _record(
    steps: list[CalculationStep],
    step: str,
    value: Union[int, Decimal],
    description: str,
) -> None:
    steps.append(CalculationStep(step=step, value=value, description=description))


class StandardCustodyCalculator:
    """
    Form CS-42: standard custody child support.

    The parent without primary custody pays. The amount is that parent's
    income share of the total obligation, less the childcare and health
    insurance costs they already pay (never below zero), capped at 85% of
    their income above the self-support reserve.
    """

    state = STATE
    form = "CS42"
    display_name = "CS-42 Standard Custody"
    is_shared_custody = False

    def __init__(self, schedule: Optional[BcsoSchedule] = None):
        """
        Initialize calculator with a BCSO schedule.

        Args:
            schedule: Override the BCSO schedule (default: bundled schedule)
        """
        self.schedule = schedule or DEFAULT_SCHEDULE

    def calculate(
        self,
        plaintiff: ParentData,
        defendant: ParentData,
        number_of_children: int,
    ) -> CalculationResult:
        """
        Calculate the payer and final child support amount.

        Args:
            plaintiff: The plaintiff parent on the original court order
            defendant: The defendant parent on the original court order
            number_of_children: Children shared between both parents

        Returns:
            CalculationResult with payer, amount and worksheet steps
        """
        steps: list[CalculationStep] = []
        errors: list[CalcError] = []
        success = False
        payer = Payer.NOT_APPLICABLE.value
        final_amount = 0

        try:
            _validate_child_count(number_of_children)

            # Step 1: Combined income and basic obligation
            combined = combined_adjusted_gross_income(plaintiff, defendant)
            _record(steps, "combined_adjusted_gross_income", combined,
                    "Combined monthly adjusted gross income")

            bcso = self.schedule.get(combined, number_of_children)
            _record(steps, "basic_child_support_obligation", bcso,
                    f"BCSO for {number_of_children} child(ren)")

            # Step 2: Total obligation including costs
            total_costs = total_childcare_and_healthcare_costs(plaintiff, defendant)
            _record(steps, "total_childcare_and_healthcare_costs", total_costs,
                    "Work-related childcare and health insurance costs")

            total_obligation = bcso + total_costs
            _record(steps, "total_child_support_obligation", total_obligation,
                    "BCSO plus childcare and health insurance costs")

            # Step 3: Each parent's share and obligation
            plaintiff_share = income_share(plaintiff.adjusted_gross_income, combined)
            defendant_share = income_share(defendant.adjusted_gross_income, combined)
            _record(steps, "plaintiff_income_share", plaintiff_share, "Plaintiff share of CAGI")
            _record(steps, "defendant_income_share", defendant_share, "Defendant share of CAGI")

            plaintiff_obligation = prorated_obligation(total_obligation, plaintiff_share)
            defendant_obligation = prorated_obligation(total_obligation, defendant_share)
            _record(steps, "plaintiff_obligation", plaintiff_obligation,
                    "Plaintiff share of total obligation")
            _record(steps, "defendant_obligation", defendant_obligation,
                    "Defendant share of total obligation")

            # Step 4: Credit the costs each parent already pays
            plaintiff_recommended = max(
                0, plaintiff_obligation - plaintiff.total_childcare_and_healthcare_costs
            )
            defendant_recommended = max(
                0, defendant_obligation - defendant.total_childcare_and_healthcare_costs
            )
            _record(steps, "plaintiff_recommended_obligation", plaintiff_recommended,
                    "Plaintiff obligation less costs paid, not below zero")
            _record(steps, "defendant_recommended_obligation", defendant_recommended,
                    "Defendant obligation less costs paid, not below zero")

            # Step 5: Self-support reserve cap
            plaintiff_max = max_obligation_after_reserve(plaintiff.monthly_gross_income)
            defendant_max = max_obligation_after_reserve(defendant.monthly_gross_income)
            _record(steps, "plaintiff_max_obligation_after_reserve", plaintiff_max,
                    "85% of plaintiff income above the self-support reserve")
            _record(steps, "defendant_max_obligation_after_reserve", defendant_max,
                    "85% of defendant income above the self-support reserve")

            # Step 6: The non-custodial parent pays the lesser amount
            if plaintiff.has_primary_custody:
                payer = Payer.DEFENDANT.value
                final_amount = min(defendant_recommended, defendant_max)
            else:
                payer = Payer.PLAINTIFF.value
                final_amount = min(plaintiff_recommended, plaintiff_max)

            success = True
        except ValidationError as e:
            errors.append(_validation_error(e))
        except Exception as e:
            errors.append(CalcError.from_exception(e))

        if not success:
            payer = Payer.NOT_APPLICABLE.value
            final_amount = 0

        return CalculationResult(
            success=success,
            state=self.state,
            form=self.form,
            number_of_children=recorded_child_count(number_of_children),
            payer=payer,
            final_amount=final_amount,
            errors=errors,
            steps=steps,
        )


class SharedCustodyCalculator:
    """
    Form CS-42-S: shared custody child support.

    The basic obligation is raised to 150%, split by income share, and each
    parent is credited with half of the raised obligation plus the costs
    they pay. The parent left with the larger adjusted obligation pays that
    amount; adjusted obligations are not floored at zero.
    """

    state = STATE
    form = "CS42S"
    display_name = "CS-42-S Shared Custody"
    is_shared_custody = True

    def __init__(self, schedule: Optional[BcsoSchedule] = None):
        self.schedule = schedule or DEFAULT_SCHEDULE

    def calculate(
        self,
        plaintiff: ParentData,
        defendant: ParentData,
        number_of_children: int,
    ) -> CalculationResult:
        """
        Calculate the payer and final child support amount.

        Args:
            plaintiff: The plaintiff parent on the original court order
            defendant: The defendant parent on the original court order
            number_of_children: Children shared between both parents

        Returns:
            CalculationResult with payer ("Neither" on equal obligations),
            amount and worksheet steps
        """
        steps: list[CalculationStep] = []
        errors: list[CalcError] = []
        success = False
        payer = Payer.NOT_APPLICABLE.value
        final_amount = 0

        try:
            _validate_child_count(number_of_children)

            combined = combined_adjusted_gross_income(plaintiff, defendant)
            _record(steps, "combined_adjusted_gross_income", combined,
                    "Combined monthly adjusted gross income")

            bcso = self.schedule.get(combined, number_of_children)
            _record(steps, "basic_child_support_obligation", bcso,
                    f"BCSO for {number_of_children} child(ren)")

            shared_bcso = round_whole(bcso * SHARED_CUSTODY_MULTIPLIER)
            _record(steps, "shared_basic_child_support_obligation", shared_bcso,
                    "150% of the BCSO")

            total_costs = total_childcare_and_healthcare_costs(plaintiff, defendant)
            _record(steps, "total_childcare_and_healthcare_costs", total_costs,
                    "Work-related childcare and health insurance costs")

            total_obligation = shared_bcso + total_costs
            _record(steps, "total_child_support_obligation", total_obligation,
                    "Shared BCSO plus childcare and health insurance costs")

            # The defendant's portion is the remainder so the two always sum to the total
            plaintiff_share = income_share(plaintiff.adjusted_gross_income, combined)
            _record(steps, "plaintiff_income_share", plaintiff_share, "Plaintiff share of CAGI")

            plaintiff_obligation = prorated_obligation(total_obligation, plaintiff_share)
            defendant_obligation = total_obligation - plaintiff_obligation
            _record(steps, "plaintiff_obligation", plaintiff_obligation,
                    "Plaintiff share of total obligation")
            _record(steps, "defendant_obligation", defendant_obligation,
                    "Remainder of total obligation")

            shared_credit = round_whole(shared_bcso * SHARED_BCSO_CREDIT_RATE)
            _record(steps, "shared_bcso_credit", shared_credit, "50% of the shared BCSO")

            plaintiff_adjusted = plaintiff_obligation - (
                plaintiff.total_childcare_and_healthcare_costs + shared_credit
            )
            defendant_adjusted = defendant_obligation - (
                defendant.total_childcare_and_healthcare_costs + shared_credit
            )
            _record(steps, "plaintiff_adjusted_obligation", plaintiff_adjusted,
                    "Plaintiff obligation less costs paid and shared credit")
            _record(steps, "defendant_adjusted_obligation", defendant_adjusted,
                    "Defendant obligation less costs paid and shared credit")

            # Equality is checked before the greater-than comparison
            if plaintiff_adjusted == defendant_adjusted:
                payer = Payer.NEITHER.value
                final_amount = 0
            elif plaintiff_adjusted >= defendant_adjusted:
                payer = Payer.PLAINTIFF.value
                final_amount = plaintiff_adjusted
            else:
                payer = Payer.DEFENDANT.value
                final_amount = defendant_adjusted

            success = True
        except ValidationError as e:
            errors.append(_validation_error(e))
        except Exception as e:
            errors.append(CalcError.from_exception(e))

        if not success:
            payer = Payer.NOT_APPLICABLE.value
            final_amount = 0

        return CalculationResult(
            success=success,
            state=self.state,
            form=self.form,
            number_of_children=recorded_child_count(number_of_children),
            payer=payer,
            final_amount=final_amount,
            errors=errors,
            steps=steps,
        )
