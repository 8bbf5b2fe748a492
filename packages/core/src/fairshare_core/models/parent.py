"""Parent financial data models.

``ParentData`` is the per-parent input to every guideline calculator.
``ParentProfile`` is a saved, named copy of that data kept by the profile
store so a parent's figures can be reused across calculations.

Amounts are whole dollars per month. Validation of the base fields happens
here, at construction time; the calculators trust what they are given.
"""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, computed_field, field_validator
from pydantic.alias_generators import to_camel


def _utc_now() -> datetime:
    """Return current UTC datetime with timezone info."""
    return datetime.now(timezone.utc)


class ParentData(BaseModel):
    """Income and child-related expenses for one parent.

    Field names also accept the camelCase spelling used on the guideline
    forms (``monthlyGrossIncome``, ``hasPrimaryCustody``, ...).
    """

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "alias_generator": to_camel,
        "json_schema_extra": {
            "examples": [
                {
                    "monthlyGrossIncome": 4244,
                    "preexistingChildSupport": 0,
                    "preexistingAlimony": 0,
                    "workRelatedChildcareCosts": 0,
                    "healthcareCoverageCosts": 0,
                    "hasPrimaryCustody": True,
                }
            ]
        },
    }

    monthly_gross_income: int = Field(
        default=0,
        ge=0,
        description="Monthly gross income in whole dollars",
    )
    preexisting_child_support: int = Field(
        default=0,
        ge=0,
        description="Child support already paid for children of other relationships",
    )
    preexisting_alimony: int = Field(
        default=0,
        ge=0,
        description="Alimony already paid under a prior order",
    )
    work_related_childcare_costs: int = Field(
        default=0,
        ge=0,
        description="Work-related childcare costs paid by this parent",
    )
    healthcare_coverage_costs: int = Field(
        default=0,
        ge=0,
        description="Cost of the children's health insurance coverage paid by this parent",
    )
    has_primary_custody: bool = Field(
        default=False,
        description="Whether this parent has primary physical custody",
    )

    @computed_field
    @property
    def adjusted_gross_income(self) -> int:
        """Gross income less preexisting child support and alimony. May be negative."""
        return self.monthly_gross_income - (
            self.preexisting_child_support + self.preexisting_alimony
        )

    @computed_field
    @property
    def total_childcare_and_healthcare_costs(self) -> int:
        """Work-related childcare plus health insurance costs."""
        return self.work_related_childcare_costs + self.healthcare_coverage_costs

    @property
    def financial_signature(self) -> tuple[int, int, int, int, int]:
        """The five money fields, used to detect duplicate profiles."""
        return (
            self.monthly_gross_income,
            self.preexisting_child_support,
            self.preexisting_alimony,
            self.work_related_childcare_costs,
            self.healthcare_coverage_costs,
        )


class ParentProfile(ParentData):
    """A saved parent profile.

    Profiles are immutable; the store hands out copies and accepts updated
    copies back, using ``row_version`` to reject stale writes.
    """

    id: UUID = Field(default_factory=uuid4)
    display_name: str = Field(min_length=1, max_length=100)
    is_archived: bool = False
    created_utc: datetime = Field(default_factory=_utc_now)
    updated_utc: Optional[datetime] = None
    row_version: int = Field(default=1, ge=1)
    owner_user_id: Optional[UUID] = None

    @field_validator("display_name", mode="before")
    @classmethod
    def strip_display_name(cls, v):
        """Trim surrounding whitespace from display names."""
        if isinstance(v, str):
            return v.strip()
        return v

    def to_parent_data(self) -> ParentData:
        """Return only the financial fields as a ``ParentData``."""
        return ParentData(
            monthly_gross_income=self.monthly_gross_income,
            preexisting_child_support=self.preexisting_child_support,
            preexisting_alimony=self.preexisting_alimony,
            work_related_childcare_costs=self.work_related_childcare_costs,
            healthcare_coverage_costs=self.healthcare_coverage_costs,
            has_primary_custody=self.has_primary_custody,
        )

    def apply_from(self, source: ParentData) -> "ParentProfile":
        """Return a copy of this profile carrying the financial fields of ``source``."""
        return self.model_copy(
            update={
                "monthly_gross_income": source.monthly_gross_income,
                "preexisting_child_support": source.preexisting_child_support,
                "preexisting_alimony": source.preexisting_alimony,
                "work_related_childcare_costs": source.work_related_childcare_costs,
                "healthcare_coverage_costs": source.healthcare_coverage_costs,
                "has_primary_custody": source.has_primary_custody,
            }
        )
