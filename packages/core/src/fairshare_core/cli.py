"""Command line interface for FairShare.

Usage:
    fairshare forms [--state AL]
    fairshare calculate --form CS42 --children 2 \\
        --plaintiff-income 4244 --plaintiff-primary \\
        --defendant-income 8462 --defendant-alimony 1000 --defendant-healthcare 292
"""

import argparse
import json
import sys
from typing import Optional, Sequence

from pydantic import ValidationError as PydanticValidationError

from .catalog import default_catalog
from .config import FairShareConfig, configure_logging
from .exceptions import FairShareError
from .models import CalculationResult, ParentData


def _add_parent_arguments(parser: argparse.ArgumentParser, role: str) -> None:
    prefix = f"--{role}"
    parser.add_argument(f"{prefix}-income", type=int, required=True,
                        help=f"{role.title()} monthly gross income")
    parser.add_argument(f"{prefix}-child-support", type=int, default=0,
                        help=f"{role.title()} preexisting child support paid")
    parser.add_argument(f"{prefix}-alimony", type=int, default=0,
                        help=f"{role.title()} preexisting alimony paid")
    parser.add_argument(f"{prefix}-childcare", type=int, default=0,
                        help=f"{role.title()} work-related childcare costs")
    parser.add_argument(f"{prefix}-healthcare", type=int, default=0,
                        help=f"{role.title()} health insurance costs for the children")
    parser.add_argument(f"{prefix}-primary", action="store_true",
                        help=f"{role.title()} has primary custody")


def _parent_from_args(args: argparse.Namespace, role: str) -> ParentData:
    return ParentData(
        monthly_gross_income=getattr(args, f"{role}_income"),
        preexisting_child_support=getattr(args, f"{role}_child_support"),
        preexisting_alimony=getattr(args, f"{role}_alimony"),
        work_related_childcare_costs=getattr(args, f"{role}_childcare"),
        healthcare_coverage_costs=getattr(args, f"{role}_healthcare"),
        has_primary_custody=getattr(args, f"{role}_primary"),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fairshare",
        description="Alabama Rule 32 child support calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    forms = subparsers.add_parser("forms", help="List available guideline forms")
    forms.add_argument("--state", default=None, help="Two-letter state code")

    calc = subparsers.add_parser("calculate", help="Calculate child support")
    calc.add_argument("--state", default=None, help="Two-letter state code")
    calc.add_argument("--form", required=True, help="Guideline form (CS42 or CS42S)")
    calc.add_argument("--children", type=int, required=True, help="Number of children")
    calc.add_argument("--json", action="store_true", help="Print the result as JSON")
    _add_parent_arguments(calc, "plaintiff")
    _add_parent_arguments(calc, "defendant")

    return parser


def _print_result(result: CalculationResult) -> None:
    print("=" * 60)
    print(f"{result.state} {result.form} - {result.number_of_children} child(ren)")
    print("=" * 60)
    for step in result.steps:
        print(f"  {step.description:<55} {step.value:>10}")
    print()
    if result.success:
        if result.payer == "Neither":
            print("RESULT: Neither parent owes child support")
        else:
            print(f"RESULT: {result.payer} pays ${result.final_amount:,} per month")
    else:
        for error in result.errors:
            field = f" ({error.field})" if error.field else ""
            print(f"ERROR: {error.code}{field}: {error.message}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI and return the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = FairShareConfig()
    configure_logging(config)

    try:
        catalog = default_catalog(config)
    except FairShareError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    state = args.state or config.default_state

    if args.command == "forms":
        forms = catalog.get_forms_for_state(state)
        if not forms:
            print(f"No guideline forms for {state.upper()}", file=sys.stderr)
            return 1
        for form, display_name in forms:
            print(f"{form:<8} {display_name}")
        return 0

    try:
        plaintiff = _parent_from_args(args, "plaintiff")
        defendant = _parent_from_args(args, "defendant")
    except PydanticValidationError as e:
        print(f"Error: invalid parent data: {e}", file=sys.stderr)
        return 2

    try:
        result = catalog.calculate(state, args.form, plaintiff, defendant, args.children)
    except FairShareError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result.model_dump(mode="json"), indent=2))
    else:
        _print_result(result)

    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
