"""
Command line entry point for lightning-dev.

    lightning-dev core "^8.5.3 || ^8.6"
    lightning-dev lightning "^1.3.0 || ~2.3.0"
    lightning-dev policy core "~8.5.3"
    lightning-dev manifest composer.json --rule "drupal/core*=core" --write
"""

from __future__ import annotations

import argparse
import sys

from lightning_dev.constraint import ComposerConstraint
from lightning_dev.manifest import DEFAULT_RULES, DEFAULT_SECTIONS, ComposerManifest, parse_rule
from lightning_dev.policies import available_policies

EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lightning-dev",
        description="Rewrite Composer constraints into dev branch constraints.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    core = subparsers.add_parser("core", help="Replace the last digits of each range by x-dev")
    core.add_argument("constraint", help="Composer constraint, e.g. '^8.5.3'")

    lightning = subparsers.add_parser(
        "lightning", help="Keep the first digits of each range followed by x-dev"
    )
    lightning.add_argument("constraint", help="Composer constraint, e.g. '^1.3.0'")

    policy = subparsers.add_parser("policy", help="Apply a registered policy to a constraint")
    policy.add_argument("name", help=f"Policy name (one of {', '.join(available_policies())})")
    policy.add_argument("constraint", help="Composer constraint")

    manifest = subparsers.add_parser("manifest", help="Rewrite constraints in a composer.json file")
    manifest.add_argument("path", help="Path to composer.json")
    manifest.add_argument(
        "--rule",
        action="append",
        default=None,
        metavar="PATTERN=POLICY",
        help="Package pattern and policy; repeatable (default: built-in Drupal rules)",
    )
    manifest.add_argument(
        "--section",
        action="append",
        default=None,
        help=f"Manifest section to rewrite; repeatable (default: {', '.join(DEFAULT_SECTIONS)})",
    )
    manifest.add_argument(
        "--write",
        action="store_true",
        help="Update the file in place instead of printing the result",
    )
    manifest.add_argument("--verbose", type=int, default=0, help="Verbosity level")
    return parser


def _run_manifest(args: argparse.Namespace) -> None:
    if args.rule:
        rules = dict(parse_rule(rule) for rule in args.rule)
    else:
        rules = dict(DEFAULT_RULES)
    sections = args.section or DEFAULT_SECTIONS

    manifest = ComposerManifest(args.path, verbose=args.verbose).load()
    manifest.rewrite(rules, sections)
    if args.write:
        manifest.save()
    else:
        sys.stdout.write(manifest.dumps())


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        if args.command == "manifest":
            _run_manifest(args)
        else:
            constraint = ComposerConstraint(args.constraint)
            policy = args.name if args.command == "policy" else args.command
            print(constraint.get_dev(policy))
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    return 0


if __name__ == "__main__":
    sys.exit(main())
