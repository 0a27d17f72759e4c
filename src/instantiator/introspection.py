"""Type introspection — subtype queries and constructor resolution.

The factory never touches ``issubclass`` or ``inspect`` directly; it asks
a :class:`TypeIntrospector`. :class:`ReflectiveIntrospector` answers from
the live class objects.

Python classes expose a single call signature (``inspect.signature``
folds ``__new__``, ``__init__`` and a metaclass ``__call__`` together),
so there is at most one constructor to resolve per class.
"""

from __future__ import annotations

import inspect
import logging
from typing import Protocol, runtime_checkable

from instantiator.domain.constructors import (
    AllParametersDefaulted,
    DefaultedParameter,
    ResolvedConstructor,
    ZeroArgument,
)

logger = logging.getLogger(__name__)

_VARIADIC = frozenset({inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD})


@runtime_checkable
class TypeIntrospector(Protocol):
    """Host reflection facility used by the factory."""

    def is_subtype_or_equal(self, candidate: type, required: type) -> bool:
        """Return True if *candidate* is *required* or a subtype/implementor of it."""
        ...

    def resolve_constructor(self, candidate: type) -> ResolvedConstructor | None:
        """Return the constructor strategy for *candidate*, or None if unusable."""
        ...


def _named_parameters(candidate: type) -> list[inspect.Parameter] | None:
    """Non-variadic signature parameters, or None when the host has no signature."""
    try:
        signature = inspect.signature(candidate)
    except (TypeError, ValueError):
        return None
    return [p for p in signature.parameters.values() if p.kind not in _VARIADIC]


def required_parameters(candidate: type) -> list[str]:
    """Names of *candidate*'s constructor parameters that lack a default."""
    params = _named_parameters(candidate) or []
    return [p.name for p in params if p.default is inspect.Parameter.empty]


class ReflectiveIntrospector:
    """Introspector backed by ``issubclass`` and ``inspect.signature``.

    Args:
        allow_virtual_subclasses: When True (default), ABC-registered
            classes and ``__subclasshook__`` matches satisfy the
            constraint. When False, *required* must appear in the
            candidate's MRO. Protocols that do not support
            ``issubclass`` are always checked against the MRO.
    """

    def __init__(self, *, allow_virtual_subclasses: bool = True) -> None:
        self._allow_virtual_subclasses = allow_virtual_subclasses

    @property
    def allow_virtual_subclasses(self) -> bool:
        return self._allow_virtual_subclasses

    def is_subtype_or_equal(self, candidate: type, required: type) -> bool:
        if candidate is required:
            return True
        if self._allow_virtual_subclasses:
            try:
                return issubclass(candidate, required)
            except TypeError:
                # Protocols that are not runtime_checkable, or that declare
                # data members, refuse issubclass(); only explicit
                # inheritance can be checked for them.
                logger.debug(
                    "issubclass unsupported for %s; checking MRO only",
                    required.__qualname__,
                )
        return required in candidate.__mro__

    def resolve_constructor(self, candidate: type) -> ResolvedConstructor | None:
        params = _named_parameters(candidate)
        if params is None:
            # No introspectable signature (some C types); let the host decide.
            logger.debug("No signature for %s; assuming zero-argument", candidate.__qualname__)
            return ZeroArgument()

        if not params:
            return ZeroArgument()

        if any(p.default is inspect.Parameter.empty for p in params):
            return None

        return AllParametersDefaulted(
            parameters=tuple(
                DefaultedParameter(
                    name=p.name,
                    default=p.default,
                    positional_only=p.kind is inspect.Parameter.POSITIONAL_ONLY,
                )
                for p in params
            )
        )
