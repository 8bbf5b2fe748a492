"""Tests for parent and result models."""

import json
from decimal import Decimal
from uuid import UUID

import pytest
from pydantic import ValidationError as PydanticValidationError

from fairshare_core.models import (
    CalcError,
    CalculationResult,
    CalculationStep,
    ErrorCode,
    ErrorSeverity,
    ParentData,
    ParentProfile,
    Payer,
)


class TestParentData:
    """Tests for ParentData model."""

    def test_defaults(self):
        """All amounts default to zero and custody to False."""
        parent = ParentData()

        assert parent.monthly_gross_income == 0
        assert parent.preexisting_child_support == 0
        assert parent.preexisting_alimony == 0
        assert parent.work_related_childcare_costs == 0
        assert parent.healthcare_coverage_costs == 0
        assert parent.has_primary_custody is False

    def test_adjusted_gross_income(self):
        """AGI is gross income less preexisting support and alimony."""
        parent = ParentData(
            monthly_gross_income=8462,
            preexisting_child_support=200,
            preexisting_alimony=1000,
        )
        assert parent.adjusted_gross_income == 7262

    def test_adjusted_gross_income_can_be_negative(self):
        """Deductions larger than income give a negative AGI."""
        parent = ParentData(monthly_gross_income=500, preexisting_alimony=800)
        assert parent.adjusted_gross_income == -300

    def test_total_costs(self):
        """Total costs are childcare plus health insurance."""
        parent = ParentData(work_related_childcare_costs=150, healthcare_coverage_costs=292)
        assert parent.total_childcare_and_healthcare_costs == 442

    @pytest.mark.parametrize(
        "field",
        [
            "monthly_gross_income",
            "preexisting_child_support",
            "preexisting_alimony",
            "work_related_childcare_costs",
            "healthcare_coverage_costs",
        ],
    )
    def test_rejects_negative_amounts(self, field: str):
        """Money fields must not be negative."""
        with pytest.raises(PydanticValidationError):
            ParentData(**{field: -1})

    def test_accepts_camel_case(self):
        """Form field names should be accepted."""
        parent = ParentData.model_validate(
            {"monthlyGrossIncome": 4244, "hasPrimaryCustody": True}
        )
        assert parent.monthly_gross_income == 4244
        assert parent.has_primary_custody is True

    def test_serializes_with_computed_fields(self):
        """JSON output should include the derived amounts."""
        parent = ParentData(monthly_gross_income=4000, healthcare_coverage_costs=100)
        data = json.loads(parent.model_dump_json())

        assert data["monthly_gross_income"] == 4000
        assert data["adjusted_gross_income"] == 4000
        assert data["total_childcare_and_healthcare_costs"] == 100

    def test_frozen(self):
        """ParentData is immutable."""
        parent = ParentData()
        with pytest.raises(PydanticValidationError):
            parent.monthly_gross_income = 10

    def test_financial_signature_ignores_custody(self):
        """The signature covers money fields only."""
        a = ParentData(monthly_gross_income=3000, has_primary_custody=True)
        b = ParentData(monthly_gross_income=3000)
        assert a.financial_signature == b.financial_signature == (3000, 0, 0, 0, 0)


class TestParentProfile:
    """Tests for ParentProfile model."""

    def test_create_profile(self):
        """Should create a profile with generated id and version 1."""
        profile = ParentProfile(display_name="  Jane Doe  ", monthly_gross_income=4000)

        assert isinstance(profile.id, UUID)
        assert profile.display_name == "Jane Doe"
        assert profile.row_version == 1
        assert profile.is_archived is False
        assert profile.updated_utc is None
        assert profile.created_utc.tzinfo is not None

    def test_display_name_required(self):
        """Blank display names are rejected."""
        with pytest.raises(PydanticValidationError):
            ParentProfile(display_name="   ")

    def test_display_name_max_length(self):
        """Display names are limited to 100 characters."""
        with pytest.raises(PydanticValidationError):
            ParentProfile(display_name="x" * 101)

    def test_to_parent_data(self):
        """Should strip profile metadata."""
        profile = ParentProfile(
            display_name="Jane",
            monthly_gross_income=4000,
            healthcare_coverage_costs=100,
            has_primary_custody=True,
        )
        data = profile.to_parent_data()

        assert type(data) is ParentData
        assert data.monthly_gross_income == 4000
        assert data.healthcare_coverage_costs == 100
        assert data.has_primary_custody is True

    def test_apply_from(self):
        """Should copy financial fields and keep identity."""
        profile = ParentProfile(display_name="Jane", monthly_gross_income=4000)
        updated = profile.apply_from(ParentData(monthly_gross_income=4500, preexisting_alimony=200))

        assert updated.id == profile.id
        assert updated.display_name == "Jane"
        assert updated.monthly_gross_income == 4500
        assert updated.preexisting_alimony == 200
        assert profile.monthly_gross_income == 4000


class TestCalcError:
    """Tests for CalcError model."""

    def test_defaults(self):
        """Default error is a generic calculation error."""
        error = CalcError()

        assert error.code == "CALC_ERROR"
        assert error.severity == ErrorSeverity.ERROR
        assert error.field is None

    @pytest.mark.parametrize(
        "severity,expected",
        [
            (ErrorSeverity.INFO, "info"),
            (ErrorSeverity.WARNING, "warning"),
            (ErrorSeverity.ERROR, "error"),
        ],
    )
    def test_severity_serializes_lowercase(self, severity: ErrorSeverity, expected: str):
        """Severities serialize as lowercase strings."""
        data = json.loads(CalcError(severity=severity).model_dump_json())

        assert data["severity"] == expected
        assert CalcError.model_validate({"severity": expected}).severity is severity

    def test_from_exception(self):
        """Should capture the exception type and message."""
        try:
            raise ZeroDivisionError("division by zero")
        except ZeroDivisionError as e:
            error = CalcError.from_exception(e)

        assert error.code == ErrorCode.UNEXPECTED_ERROR.value
        assert error.message == "An unexpected error occurred during calculation."
        assert error.exception_type == "ZeroDivisionError"
        assert error.exception_message == "division by zero"


class TestCalculationResult:
    """Tests for CalculationResult model."""

    def test_failed_defaults(self):
        """A bare result is a failure with no payer."""
        result = CalculationResult(state="AL", form="CS42", number_of_children=1)

        assert result.success is False
        assert result.payer == Payer.NOT_APPLICABLE.value
        assert result.final_amount == 0
        assert not result.has_errors

    def test_error_codes(self):
        """error_codes lists codes in order."""
        result = CalculationResult(
            state="AL",
            form="CS42",
            number_of_children=0,
            errors=[CalcError(code="A"), CalcError(code="B")],
        )

        assert result.has_errors
        assert result.error_codes == ["A", "B"]

    def test_step_value(self):
        """step_value returns a recorded value or raises KeyError."""
        result = CalculationResult(
            state="AL",
            form="CS42",
            number_of_children=1,
            steps=[
                CalculationStep(step="plaintiff_income_share", value=Decimal("0.36")),
                CalculationStep(step="combined_adjusted_gross_income", value=11706),
            ],
        )

        assert result.step_value("plaintiff_income_share") == Decimal("0.36")
        assert result.step_value("combined_adjusted_gross_income") == 11706
        with pytest.raises(KeyError):
            result.step_value("missing")

    def test_serializes_to_json(self):
        """Results should serialize to JSON cleanly."""
        result = CalculationResult(
            success=True,
            state="AL",
            form="CS42",
            number_of_children=4,
            payer=Payer.DEFENDANT.value,
            final_amount=2114,
        )
        data = json.loads(result.model_dump_json())

        assert data["payer"] == "Defendant"
        assert data["final_amount"] == 2114
        assert data["errors"] == []
