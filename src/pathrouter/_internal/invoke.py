"""Invoke helpers — call sync or async endpoints uniformly.

Service endpoints can be ``def`` or ``async def``. The runner awaits
whatever the endpoint returns if it is awaitable, so the sync/async
check lives in exactly one place.

Usage::

    from pathrouter._internal.invoke import invoke

    result = await invoke(endpoint, **params)
"""

import inspect
from typing import Any


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call an endpoint and await the result if it's a coroutine."""
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
