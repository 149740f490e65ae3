"""fsroutes CLI: fsroutes build / fsroutes dev.

Entry point for the ``fsroutes`` command-line interface.
"""

from __future__ import annotations

import argparse
import sys


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Options shared by every subcommand.

    Defaults are None so values from a config file are not masked.
    """
    parser.add_argument("root", nargs="?", default=".", help="Project root directory")
    parser.add_argument("--routes-dir", default=None, help="Routes directory (default: src/pages)")
    parser.add_argument(
        "--ext",
        dest="route_extensions",
        action="append",
        default=None,
        help="Route file extension, repeatable (default: .tsx)",
    )
    parser.add_argument(
        "--case-sensitive",
        action="store_true",
        default=None,
        help="Keep original casing in route paths",
    )
    parser.add_argument(
        "--schema-variant",
        type=int,
        choices=(5, 6),
        default=None,
        help="Output schema: react-router 5 or 6 (default: 5)",
    )
    parser.add_argument("--output", "-o", default=None, help="Output file (default: stdout)")
    parser.add_argument(
        "--strict",
        dest="strict_collisions",
        action="store_true",
        default=None,
        help="Fail when two route files resolve to the same route",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the fsroutes CLI."""
    parser = argparse.ArgumentParser(
        prog="fsroutes",
        description="Generate a react-router route config from a pages directory.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    build_parser = subparsers.add_parser(
        "build",
        help="Generate the routes module once",
    )
    _add_common_arguments(build_parser)

    dev_parser = subparsers.add_parser(
        "dev",
        help="Generate the routes module and regenerate on file changes",
    )
    _add_common_arguments(dev_parser)

    return parser


def _get_version() -> str:
    """Get the package version."""
    from fsroutes import __version__

    return __version__


def _overrides(args: argparse.Namespace) -> dict[str, object]:
    return {
        "routes_dir": args.routes_dir,
        "route_extensions": tuple(args.route_extensions) if args.route_extensions else None,
        "case_sensitive": args.case_sensitive,
        "schema_variant": args.schema_variant,
        "output": args.output,
        "strict_collisions": args.strict_collisions,
    }


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from fsroutes._errors import FsRoutesError
    from fsroutes.app import build, dev

    try:
        if args.command == "build":
            build(args.root, **_overrides(args))
        elif args.command == "dev":
            dev(args.root, **_overrides(args))
    except FsRoutesError as exc:
        print(f"fsroutes: error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
