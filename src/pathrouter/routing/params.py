"""Path parameter conversion for endpoint arguments.

Extracted values are always strings. Endpoints annotated with ``int`` or
``float`` receive converted values; anything else passes through.
"""

from typing import Any

CONVERTERS: dict[Any, type] = {
    str: str,
    int: int,
    float: float,
}


def convert_param(value: str, annotation: Any) -> Any:
    """Convert a captured path parameter to the endpoint's annotated type.

    Raises ``ValueError`` if the string cannot be converted.
    """
    target = CONVERTERS.get(annotation)
    if target is None:
        return value
    return target(value)


def argument_name(param_name: str) -> str:
    """Python keyword for a template parameter: ``user-id`` -> ``user_id``."""
    return param_name.replace("-", "_").replace(".", "_")
