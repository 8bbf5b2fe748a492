"""Calculator contract for guideline variants.

Each guideline form is implemented by an independent class. Structural
subtyping via ``typing.Protocol`` lets the catalog accept any object with
the right attributes and ``calculate`` signature; no base class is needed.

Example Usage:
    ```python
    class CS42Calculator:
        state = "AL"
        form = "CS42"
        display_name = "CS-42 Standard Custody"
        is_shared_custody = False

        def calculate(self, plaintiff, defendant, number_of_children):
            ...

    assert isinstance(CS42Calculator(), ChildSupportCalculator)
    ```
"""

from typing import Protocol, runtime_checkable

from .models import CalculationResult, ParentData


@runtime_checkable
class ChildSupportCalculator(Protocol):
    """Protocol every guideline calculator satisfies.

    Attributes:
        state: Two-letter jurisdiction code (e.g. "AL")
        form: Guideline form identifier (e.g. "CS42")
        display_name: Human-readable form name
        is_shared_custody: Whether the shared-custody rules and UI apply
    """

    state: str
    form: str
    display_name: str
    is_shared_custody: bool

    def calculate(
        self,
        plaintiff: ParentData,
        defendant: ParentData,
        number_of_children: int,
    ) -> CalculationResult:
        """Determine the payer and the amount owed.

        Implementations never raise; failures are reported in the result.
        """
        ...
