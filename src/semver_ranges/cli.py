"""Command line entrypoint.

Usage:
  semver-ranges check ">=1.2 <2" 1.2.3 1.5.0 [--warn-only]
  semver-ranges contains "1 - 2" "~1.4"
  semver-ranges sort [--descending] 1.2.3 1.0.0 2.0.0
  semver-ranges policy [--config semver-ranges.json] [--summary] 1.2.3
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from .config import load_settings
from .core import evaluate_policy
from .errors import ConfigError, SemverError
from .parsers.constraint import parse as parse_constraint
from .parsers.version import parse as parse_version
from .sort import join_versions, sort_ascending, sort_descending
from .summary import render_summary

FAILURE_EXIT_CODE = 10
WARN_ONLY_ENV_VAR = "SEMVER_RANGES_WARN_ONLY"


def _warn_only(args: argparse.Namespace) -> bool:
    if args.warn_only:
        return True
    return os.getenv(WARN_ONLY_ENV_VAR, "").strip().lower() in {"1", "true", "yes", "y"}


def _cmd_check(args: argparse.Namespace) -> int:
    constraint = parse_constraint(args.constraint)
    report = evaluate_policy([("cli", constraint)], args.versions)
    print(json.dumps(report, indent=2))
    if report["hasFailures"] and not _warn_only(args):
        return FAILURE_EXIT_CODE
    return 0


def _cmd_contains(args: argparse.Namespace) -> int:
    outer = parse_constraint(args.outer)
    inner = parse_constraint(args.inner)
    contained = outer.contains(inner)
    print("true" if contained else "false")
    return 0 if contained else 1


def _cmd_sort(args: argparse.Namespace) -> int:
    versions = [parse_version(v) for v in args.versions]
    ordered = sort_descending(versions) if args.descending else sort_ascending(versions)
    print(join_versions(ordered, separator=args.separator))
    return 0


def _cmd_policy(args: argparse.Namespace) -> int:
    settings = load_settings(args.config)
    enabled = [(c.id, c.constraint) for c in settings.get_enabled_constraints()]
    report = evaluate_policy(enabled, args.versions)
    if args.summary:
        print(render_summary(report), end="")
    else:
        print(json.dumps(report, indent=2))
    if report["hasFailures"] and not _warn_only(args):
        return FAILURE_EXIT_CODE
    return 0


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="semver-ranges", description=__doc__.splitlines()[0])
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Check versions against a constraint")
    check.add_argument("constraint")
    check.add_argument("versions", nargs="+")
    check.add_argument("--warn-only", action="store_true")
    check.set_defaults(func=_cmd_check)

    contains = sub.add_parser("contains", help="Test whether OUTER contains INNER")
    contains.add_argument("outer")
    contains.add_argument("inner")
    contains.set_defaults(func=_cmd_contains)

    sort = sub.add_parser("sort", help="Sort versions")
    sort.add_argument("versions", nargs="+")
    sort.add_argument("--descending", action="store_true")
    sort.add_argument("--separator", default="\n")
    sort.set_defaults(func=_cmd_sort)

    policy = sub.add_parser("policy", help="Check versions against a policy file")
    policy.add_argument("versions", nargs="+")
    policy.add_argument("--config", type=Path, default=None)
    policy.add_argument("--summary", action="store_true", help="Print Markdown instead of JSON")
    policy.add_argument("--warn-only", action="store_true")
    policy.set_defaults(func=_cmd_policy)

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except SemverError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    except ConfigError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
