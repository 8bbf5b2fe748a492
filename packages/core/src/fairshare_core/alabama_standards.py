"""Alabama Rule 32 guideline constants and shared derivations.

These helpers are used identically by the standard (CS-42) and shared
custody (CS-42-S) calculators:

- Combined adjusted gross income (CAGI) of both parents
- Each parent's percentage share of CAGI
- Total work-related childcare and health insurance costs
- The self-support reserve (SSR) cap on a paying parent's obligation

Rounding: obligation amounts round to whole dollars and income shares to
two decimal places, half to even in both cases.
"""

from decimal import ROUND_HALF_EVEN, Decimal
from typing import Union

from .models import ParentData


# =============================================================================
# GUIDELINE CONSTANTS
# =============================================================================

STATE = "AL"

# Monthly income protected for the paying parent's own support
SELF_SUPPORT_RESERVE = 981

# Share of income above the SSR that may be ordered as support
MAX_INCOME_AVAILABLE_RATE = Decimal("0.85")

# Shared custody uses 150% of the basic obligation
SHARED_CUSTODY_MULTIPLIER = Decimal("1.5")

# Each parent is credited with 50% of the shared-custody obligation
SHARED_BCSO_CREDIT_RATE = Decimal("0.5")

ROUNDING = ROUND_HALF_EVEN

_WHOLE_DOLLAR = Decimal("1")
_SHARE_PLACES = Decimal("0.01")


# =============================================================================
# ROUNDING
# =============================================================================

def round_whole(value: Union[int, Decimal]) -> int:
    """Round a dollar amount to whole dollars."""
    return int(Decimal(value).quantize(_WHOLE_DOLLAR, rounding=ROUNDING))


def round_share(value: Decimal) -> Decimal:
    """Round an income share to two decimal places."""
    return value.quantize(_SHARE_PLACES, rounding=ROUNDING)


# =============================================================================
# SHARED DERIVATIONS
# =============================================================================

def combined_adjusted_gross_income(plaintiff: ParentData, defendant: ParentData) -> int:
    """Sum of both parents' adjusted gross incomes."""
    return plaintiff.adjusted_gross_income + defendant.adjusted_gross_income


def income_share(parent_adjusted_gross_income: int, combined_adjusted_gross_income: int) -> Decimal:
    """A parent's share of the combined income, rounded to two places.

    Returns 0 when the combined income is 0.
    """
    if combined_adjusted_gross_income == 0:
        return Decimal("0")
    return round_share(Decimal(parent_adjusted_gross_income) / Decimal(combined_adjusted_gross_income))


def total_childcare_and_healthcare_costs(plaintiff: ParentData, defendant: ParentData) -> int:
    """Childcare and health insurance costs paid by both parents."""
    return (
        plaintiff.total_childcare_and_healthcare_costs
        + defendant.total_childcare_and_healthcare_costs
    )


def prorated_obligation(total_obligation: int, share: Decimal) -> int:
    """A parent's portion of the total obligation, in whole dollars."""
    return round_whole(total_obligation * share)


def income_available_for_child_support(monthly_gross_income: int) -> int:
    """Gross income left after the self-support reserve. May be negative."""
    return monthly_gross_income - SELF_SUPPORT_RESERVE


def max_obligation_after_reserve(monthly_gross_income: int) -> int:
    """Largest obligation allowed after the SSR: 85% of the available income, never negative."""
    available = income_available_for_child_support(monthly_gross_income)
    return max(0, round_whole(available * MAX_INCOME_AVAILABLE_RATE))
