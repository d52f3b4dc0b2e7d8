"""``pathrouter routes`` — list registered routes.

Resolves an import string to a router and prints every route with its
template, compiled pattern, parameters, and destination.
"""

import argparse
import sys
from typing import Any

from pathrouter.cli._resolve import resolve_router
from pathrouter.errors import ConfigurationError
from pathrouter.service import Endpoint


def describe_destination(destination: Any) -> str:
    if isinstance(destination, Endpoint):
        return destination.name
    return getattr(destination, "__qualname__", repr(destination))


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of TEMPLATE, PARAMS, and DESTINATION, in match order."""
    try:
        router = resolve_router(args.target)
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not router.routes:
        print("No routes registered.")
        return

    rows: list[tuple[str, str, str]] = []
    for route in router.routes:
        params = ", ".join(route.param_names) or "-"
        rows.append((route.source, params, describe_destination(route.destination)))

    max_template = max(max(len(r[0]) for r in rows), 8)  # "TEMPLATE" header
    max_params = max(max(len(r[1]) for r in rows), 6)  # "PARAMS" header

    fmt = f"{{:<{max_template}}}  {{:<{max_params}}}  {{}}"
    print(fmt.format("TEMPLATE", "PARAMS", "DESTINATION"))
    sep_len = max_template + max_params + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
    if args.verbose:
        print()
        for route in router.routes:
            print(f"{route.source}  =>  {route.template.regex.pattern}")
