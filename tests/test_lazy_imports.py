"""Tests for pathrouter.__init__ — lazy import registry covers all public names."""

import pytest

import pathrouter


@pytest.mark.parametrize("name", pathrouter.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(pathrouter, name)
    assert obj is not None, f"pathrouter.{name} resolved to None"


def test_all_names_in_lazy_registry() -> None:
    """Every name in __all__ has a corresponding entry in _LAZY_IMPORTS."""
    missing = set(pathrouter.__all__) - set(pathrouter._LAZY_IMPORTS)
    assert not missing, f"Names in __all__ but not in _LAZY_IMPORTS: {sorted(missing)}"


def test_lazy_registry_no_extras() -> None:
    """Every name in _LAZY_IMPORTS should be in __all__ (public API contract)."""
    extras = set(pathrouter._LAZY_IMPORTS) - set(pathrouter.__all__)
    assert not extras, f"Names in _LAZY_IMPORTS but not in __all__: {sorted(extras)}"


def test_unknown_name_raises() -> None:
    with pytest.raises(AttributeError, match="has no attribute 'nope'"):
        pathrouter.nope  # noqa: B018


def test_version() -> None:
    assert pathrouter.__version__ == "0.1.0"
