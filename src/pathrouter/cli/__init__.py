"""pathrouter CLI — inspect route tables and try paths against them.

Entry point registered as ``pathrouter`` in ``pyproject.toml``::

    [project.scripts]
    pathrouter = "pathrouter.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``pathrouter`` command."""
    parser = argparse.ArgumentParser(
        prog="pathrouter",
        description="pathrouter — URI path-template routing for microservice dispatch.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for registration messages",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- pathrouter routes ------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument(
        "target",
        help="Import string (e.g. myservice:runner)",
    )
    routes_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Also print the compiled pattern of each route",
    )

    # -- pathrouter match -------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Show the routes a path matches")
    match_parser.add_argument(
        "target",
        help="Import string (e.g. myservice:runner)",
    )
    match_parser.add_argument("path", help="Request path (e.g. /users/42)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "routes":
        from pathrouter.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from pathrouter.cli._match import run_match

        run_match(args)
