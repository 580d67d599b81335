"""
Standalone CLI for checking puzzle files.

Usage:
    python -m wordweb.validate daily/2025-09-14.json
    python -m wordweb.validate daily/*.json --strict
"""

import argparse
import sys
from typing import Optional

from .verifiers import load_puzzle, verify_puzzle


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Repair and verify word web puzzle files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m wordweb.validate daily/2025-09-14.json
  python -m wordweb.validate daily/*.json --strict
        """
    )
    parser.add_argument(
        "files",
        nargs="+",
        help="Puzzle JSON files"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Also fail when answers share cells (straight-line puzzles)"
    )

    args = parser.parse_args(argv)

    failed = 0
    for path in args.files:
        result = load_puzzle(path)
        if result.valid and result.puzzle is not None:
            checked = verify_puzzle(result.puzzle, require_disjoint=args.strict)
            result = result.model_copy(update={
                "valid": checked.valid,
                "errors": checked.errors,
                "warnings": result.warnings + checked.warnings,
            })

        status = "OK" if result.valid else "INVALID"
        print(f"{path}: {status}")
        for error in result.errors:
            print(f"  error   {error.code}: {error.message}")
        for warning in result.warnings:
            print(f"  warning {warning.code}: {warning.message}")

        if not result.valid:
            failed += 1

    if failed:
        print(f"{failed} of {len(args.files)} file(s) invalid", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
