#!/usr/bin/env python3
"""Command-line interface for csspseudo."""

from __future__ import annotations

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version

from .capabilities import (
    CssProfile,
    CssVersion,
    parse_profile,
    parse_version,
    pseudo_classes,
    pseudo_element_exceptions,
    pseudo_elements,
    pseudo_functions,
)
from .constants import PROFILE_LABELS, VERSION_LABELS
from .context import ValidationContext
from .parser import SelectorValidator, StrictModeError


def _get_version() -> str:
    try:
        return version("csspseudo")
    except PackageNotFoundError:  # pragma: no cover
        return "dev"


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="csspseudo",
        description="Check pseudo-classes, pseudo-elements and pseudo-functions against a CSS level and profile.",
        epilog=(
            "Examples:\n"
            "  csspseudo 'li:nth-child(2n+1)' 'p::first-line'\n"
            "  csspseudo --css-version css21 'a:lang(fr)'\n"
            "  csspseudo --profile tv --list classes\n"
            "\n"
            "If you don't have the 'csspseudo' command available, use:\n"
            "  python -m csspseudo ...\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "selectors",
        nargs="*",
        help="Selectors to check",
    )
    parser.add_argument(
        "--css-version",
        choices=sorted(VERSION_LABELS),
        default="css3",
        help="CSS level to check against (default: css3)",
    )
    parser.add_argument(
        "--profile",
        choices=sorted(PROFILE_LABELS),
        default="default",
        help="Delivery profile (default: default)",
    )
    parser.add_argument(
        "--list",
        choices=["classes", "elements", "functions", "exceptions"],
        help="Print the admissible names for a category instead of checking selectors",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Stop at the first invalid selector",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log rejected names and constructed pseudo-functions to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"csspseudo {_get_version()}",
    )

    args = parser.parse_args(argv)

    if not args.selectors and not args.list:
        parser.print_help(sys.stderr)
        raise SystemExit(2)

    return args


def _names(category: str, css_version: CssVersion, profile: CssProfile) -> frozenset[str] | None:
    if category == "classes":
        return pseudo_classes(css_version, profile)
    if category == "elements":
        return pseudo_elements(css_version)
    if category == "functions":
        return pseudo_functions(css_version)
    return pseudo_element_exceptions(css_version)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    css_version = parse_version(args.css_version)
    profile = parse_profile(args.profile)

    if args.list:
        names = _names(args.list, css_version, profile)
        if names:
            sys.stdout.write("\n".join(sorted(names)))
            sys.stdout.write("\n")
        return None

    validator = SelectorValidator(ValidationContext(css_version, profile), strict=args.strict)
    try:
        validator.check_all(args.selectors)
    except StrictModeError as e:
        print(str(e.diagnostic), file=sys.stderr)
        raise SystemExit(1) from e

    for diagnostic in validator.errors:
        print(str(diagnostic), file=sys.stderr)

    if validator.errors:
        raise SystemExit(1)
    return None


if __name__ == "__main__":
    main()
