"""Tests for the state guideline catalog."""

import pytest
from structlog.testing import capture_logs

from fairshare_core import (
    DEFAULT_SCHEDULE,
    ConfigurationError,
    ErrorCode,
    FairShareConfig,
    GuidelineNotFoundError,
    ParentData,
    SharedCustodyCalculator,
    StandardCustodyCalculator,
    StateGuidelineCatalog,
    default_catalog,
)


class _FailingSchedule:
    """Schedule stand-in whose lookup fails unexpectedly."""

    def get(self, combined_adjusted_gross_income, number_of_children):
        raise RuntimeError("schedule unavailable")


@pytest.fixture
def catalog() -> StateGuidelineCatalog:
    """Catalog with both Alabama calculators."""
    return StateGuidelineCatalog([StandardCustodyCalculator(), SharedCustodyCalculator()])


@pytest.fixture
def plaintiff() -> ParentData:
    return ParentData(monthly_gross_income=4244, has_primary_custody=True)


@pytest.fixture
def defendant() -> ParentData:
    return ParentData(
        monthly_gross_income=8462,
        preexisting_alimony=1000,
        healthcare_coverage_costs=292,
    )


class TestLookup:
    """Tests for calculator lookup."""

    def test_get_states(self, catalog: StateGuidelineCatalog):
        """Should list registered states."""
        assert catalog.get_states() == ["AL"]

    def test_get_forms_for_state(self, catalog: StateGuidelineCatalog):
        """Should list forms with display names, sorted by form."""
        assert catalog.get_forms_for_state("al") == [
            ("CS42", "CS-42 Standard Custody"),
            ("CS42S", "CS-42-S Shared Custody"),
        ]

    def test_get_forms_for_unknown_state(self, catalog: StateGuidelineCatalog):
        """Unknown states have no forms."""
        assert catalog.get_forms_for_state("GA") == []

    def test_get_calculator_case_insensitive(self, catalog: StateGuidelineCatalog):
        """Lookups ignore case and surrounding whitespace."""
        calc = catalog.get_calculator(" al ", "cs42s")
        assert isinstance(calc, SharedCustodyCalculator)

    def test_get_calculator_missing(self, catalog: StateGuidelineCatalog):
        """Unknown keys return None."""
        assert catalog.get_calculator("AL", "CS99") is None

    def test_require_calculator_missing(self, catalog: StateGuidelineCatalog):
        """require_calculator raises for unknown keys."""
        with pytest.raises(GuidelineNotFoundError) as exc_info:
            catalog.require_calculator("GA", "CS42")

        assert exc_info.value.state == "GA"
        assert exc_info.value.recoverable is True

    def test_list_guidelines(self, catalog: StateGuidelineCatalog):
        """Should list every calculator with its display key."""
        assert catalog.list_guidelines() == [
            ("AL", "CS42", "AL CS42"),
            ("AL", "CS42S", "AL CS42S"),
        ]

    def test_duplicate_registration(self):
        """Two calculators for the same key are a configuration error."""
        with pytest.raises(ConfigurationError):
            StateGuidelineCatalog([StandardCustodyCalculator(), StandardCustodyCalculator()])


class TestCalculate:
    """Tests for running calculations through the catalog."""

    def test_standard_calculation(self, catalog, plaintiff, defendant):
        """Should dispatch to the standard calculator."""
        result = catalog.calculate("AL", "CS42", plaintiff, defendant, 4)

        assert result.success
        assert result.payer == "Defendant"
        assert result.final_amount == 2114

    def test_unknown_form_raises(self, catalog, plaintiff, defendant):
        """Unknown forms raise GuidelineNotFoundError."""
        with pytest.raises(GuidelineNotFoundError):
            catalog.calculate("AL", "CS99", plaintiff, defendant, 1)

    @pytest.mark.parametrize("plaintiff_primary,defendant_primary", [(True, True), (False, False)])
    def test_standard_requires_one_custodial_parent(
        self, catalog, plaintiff_primary: bool, defendant_primary: bool
    ):
        """Exactly one parent must have primary custody for CS-42."""
        plaintiff = ParentData(monthly_gross_income=3000, has_primary_custody=plaintiff_primary)
        defendant = ParentData(monthly_gross_income=3000, has_primary_custody=defendant_primary)

        result = catalog.calculate("AL", "CS42", plaintiff, defendant, 1)

        assert not result.success
        assert result.payer == "N/A"
        assert result.error_codes == [ErrorCode.PRIMARY_CUSTODY_REQUIRED.value]
        assert result.errors[0].field == "hasPrimaryCustody"
        assert result.steps == []

    def test_shared_ignores_custody_flags(self, catalog):
        """Shared custody runs regardless of custody flags."""
        parent = ParentData(monthly_gross_income=3000)

        result = catalog.calculate("AL", "CS42S", parent, parent, 1)

        assert result.success
        assert result.payer == "Neither"

    def test_logs_success(self, catalog, plaintiff, defendant):
        """Successful calculations are logged with the outcome."""
        with capture_logs() as logs:
            catalog.calculate("AL", "CS42", plaintiff, defendant, 4)

        events = [entry for entry in logs if entry["event"] == "calculation_complete"]
        assert len(events) == 1
        assert events[0]["payer"] == "Defendant"
        assert events[0]["final_amount"] == 2114
        assert events[0]["form"] == "CS42"

    def test_logs_invalid_input(self, catalog, plaintiff, defendant):
        """Validation failures are logged as warnings."""
        with capture_logs() as logs:
            catalog.calculate("AL", "CS42", plaintiff, defendant, 0)

        events = [entry for entry in logs if entry["event"] == "calculation_invalid"]
        assert len(events) == 1
        assert events[0]["log_level"] == "warning"
        assert events[0]["code"] == ErrorCode.INVALID_CHILD_COUNT.value

    def test_logs_unexpected_error(self, plaintiff, defendant):
        """Unexpected failures are logged as errors with their cause."""
        catalog = StateGuidelineCatalog([StandardCustodyCalculator(_FailingSchedule())])

        with capture_logs() as logs:
            result = catalog.calculate("AL", "CS42", plaintiff, defendant, 2)

        assert result.error_codes == [ErrorCode.UNEXPECTED_ERROR.value]
        events = [entry for entry in logs if entry["event"] == "calculation_failed"]
        assert len(events) == 1
        assert events[0]["log_level"] == "error"
        assert events[0]["exception_type"] == "RuntimeError"
        assert events[0]["exception_message"] == "schedule unavailable"

    def test_custody_error_with_missing_children(self, catalog):
        """A missing child count does not break the custody check."""
        parent = ParentData(monthly_gross_income=3000)

        result = catalog.calculate("AL", "CS42", parent, parent, None)

        assert result.error_codes == [ErrorCode.PRIMARY_CUSTODY_REQUIRED.value]
        assert result.number_of_children == 0


class TestDefaultCatalog:
    """Tests for default_catalog."""

    def test_registers_alabama_forms(self):
        """Default catalog has both Alabama forms."""
        catalog = default_catalog(FairShareConfig())

        assert [form for form, _ in catalog.get_forms_for_state("AL")] == ["CS42", "CS42S"]

    def test_warns_about_provisional_schedule(self):
        """Using the bundled schedule logs a warning."""
        with capture_logs() as logs:
            default_catalog(FairShareConfig())

        events = [entry for entry in logs if entry["event"] == "bcso_schedule_provisional"]
        assert len(events) == 1
        assert events[0]["log_level"] == "warning"

    def test_no_warning_for_schedule_file(self, tmp_path):
        """A schedule loaded from file is not flagged."""
        path = tmp_path / "al_published.csv"
        DEFAULT_SCHEDULE.to_csv(path)

        with capture_logs() as logs:
            default_catalog(FairShareConfig(schedule_path=path))

        assert not [entry for entry in logs if entry["event"] == "bcso_schedule_provisional"]

    def test_uses_configured_edge_policy(self, plaintiff, defendant):
        """clamp_income=False makes out-of-range incomes fail."""
        catalog = default_catalog(FairShareConfig(clamp_income=False))
        rich = ParentData(monthly_gross_income=30000)

        result = catalog.calculate("AL", "CS42", plaintiff, rich, 1)

        assert not result.success
        assert result.error_codes == [ErrorCode.CAGI_OUT_OF_RANGE.value]

    def test_uses_configured_schedule_file(self, tmp_path, plaintiff, defendant):
        """A schedule file replaces the bundled schedule."""
        path = tmp_path / "flat.csv"
        path.write_text(
            "low,high,1,2,3,4,5,6\n0,100000,500,600,700,800,900,1000\n",
            encoding="utf-8",
        )
        catalog = default_catalog(FairShareConfig(schedule_path=path))

        result = catalog.calculate("AL", "CS42", plaintiff, defendant, 1)

        assert result.step_value("basic_child_support_obligation") == 500
