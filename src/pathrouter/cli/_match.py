"""``pathrouter match`` — show every route a request path matches."""

import argparse
import sys

from pathrouter.cli._resolve import resolve_router
from pathrouter.cli._routes import describe_destination
from pathrouter.errors import ConfigurationError


def run_match(args: argparse.Namespace) -> None:
    """Print each match for ``args.path`` in registration order.

    Exits with status 1 when nothing matches.
    """
    try:
        router = resolve_router(args.target)
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    matches = router.get_destinations(args.path)
    if not matches:
        print(f"No route matches {args.path!r}", file=sys.stderr)
        raise SystemExit(1)

    for i, match in enumerate(matches, start=1):
        print(f"{i}. {describe_destination(match.destination)}")
        for name, value in match.parameters.items():
            print(f"     {name} = {value!r}")
