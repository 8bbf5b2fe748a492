"""FairShare Core - Alabama Rule 32 child support calculations."""

__version__ = "0.1.0"

from .alabama_standards import (
    SELF_SUPPORT_RESERVE,
    combined_adjusted_gross_income,
    income_share,
    max_obligation_after_reserve,
    total_childcare_and_healthcare_costs,
)
from .bcso_schedule import (
    BCSO_SCHEDULE_VERSION,
    DEFAULT_SCHEDULE,
    BcsoBracket,
    BcsoSchedule,
    get_basic_child_support_obligation,
)
from .calculator import SharedCustodyCalculator, StandardCustodyCalculator
from .catalog import StateGuidelineCatalog, default_catalog
from .config import FairShareConfig, configure_logging
from .exceptions import (
    ConfigurationError,
    FairShareError,
    GuidelineNotFoundError,
    ValidationError,
)
from .interfaces import ChildSupportCalculator
from .models import (
    CalcError,
    CalculationResult,
    CalculationStep,
    ErrorCode,
    ErrorSeverity,
    ParentData,
    ParentProfile,
    Payer,
)
from .profiles import ParentProfileService

__all__ = [
    # Calculators
    "StandardCustodyCalculator",
    "SharedCustodyCalculator",
    "ChildSupportCalculator",
    "StateGuidelineCatalog",
    "default_catalog",
    # Schedule and derivations
    "BCSO_SCHEDULE_VERSION",
    "DEFAULT_SCHEDULE",
    "BcsoBracket",
    "BcsoSchedule",
    "get_basic_child_support_obligation",
    "SELF_SUPPORT_RESERVE",
    "combined_adjusted_gross_income",
    "income_share",
    "max_obligation_after_reserve",
    "total_childcare_and_healthcare_costs",
    # Models
    "ParentData",
    "ParentProfile",
    "CalcError",
    "CalculationResult",
    "CalculationStep",
    "ErrorCode",
    "ErrorSeverity",
    "Payer",
    # Profiles
    "ParentProfileService",
    # Configuration
    "FairShareConfig",
    "configure_logging",
    # Exceptions
    "FairShareError",
    "ValidationError",
    "ConfigurationError",
    "GuidelineNotFoundError",
]
