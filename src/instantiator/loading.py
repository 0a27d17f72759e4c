"""Resolve candidate types from import paths.

Candidates often arrive as strings from configuration or plugin
metadata. Two spellings are accepted:

- ``package.module:ClassName`` (entry-point style, nested ``Outer.Inner`` allowed)
- ``package.module.ClassName`` (plain dotted path)
"""

from __future__ import annotations

import importlib
from typing import Any

from instantiator.domain.errors import CandidateLoadError
from instantiator.factory import instantiate


def qualified_name(cls: type) -> str:
    """Return the ``module:qualname`` path for *cls*."""
    return f"{cls.__module__}:{cls.__qualname__}"


def _split_path(path: str) -> tuple[str, str]:
    normalized = path.strip()
    if ":" in normalized:
        module_name, _, attr_path = normalized.partition(":")
    else:
        module_name, _, attr_path = normalized.rpartition(".")
    if not module_name or not attr_path:
        raise CandidateLoadError(path, "expected 'module:ClassName' or 'module.ClassName'")
    return module_name, attr_path


def load_type(path: str) -> type:
    """Import and return the class named by *path*.

    Raises:
        CandidateLoadError: the module cannot be imported, the attribute
            is missing, or it does not name a class.
    """
    module_name, attr_path = _split_path(path)
    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise CandidateLoadError(path, f"module {module_name!r} not importable ({exc})") from exc

    for attr in attr_path.split("."):
        try:
            target = getattr(target, attr)
        except AttributeError as exc:
            raise CandidateLoadError(path, f"attribute {attr!r} not found") from exc

    if not isinstance(target, type):
        raise CandidateLoadError(path, f"{attr_path!r} is not a class")
    return target


def instantiate_from_path[T](required: type[T], path: str) -> T:
    """Load the class at *path* and construct it as a *required*."""
    return instantiate(required, load_type(path))
