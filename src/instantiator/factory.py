"""Instantiator — construct a candidate class constrained to a required type.

INVARIANT: the type constraint is checked strictly before any
construction attempt. A rejected candidate's constructor never runs.

Constructor resolution order:
  1. Zero-argument signature  -> ``cls()``
  2. All parameters defaulted -> ``cls()`` with every default left to the class
  3. Neither                  -> :class:`ConstructionFailure`

Exceptions raised by the constructor itself propagate unchanged.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, cast

from instantiator.domain.errors import (
    ConstructionFailure,
    NullCandidateError,
    TypeConstraintViolation,
)
from instantiator.introspection import (
    ReflectiveIntrospector,
    TypeIntrospector,
    required_parameters,
)

if TYPE_CHECKING:
    from instantiator.config.settings import InstantiatorSettings

logger = logging.getLogger(__name__)


class Instantiator:
    """Stateless, thread-safe factory over a :class:`TypeIntrospector`."""

    def __init__(self, introspector: TypeIntrospector | None = None) -> None:
        self._introspector = introspector or ReflectiveIntrospector()

    @classmethod
    def from_settings(cls, settings: InstantiatorSettings) -> Instantiator:
        """Build a factory whose introspector honours *settings*."""
        return cls(
            ReflectiveIntrospector(allow_virtual_subclasses=settings.allow_virtual_subclasses)
        )

    @property
    def introspector(self) -> TypeIntrospector:
        return self._introspector

    def check(self, required: type, candidate: type | None) -> type:
        """Validate *candidate* against *required* without constructing anything.

        Returns the candidate on success so callers can chain it.
        """
        required_name = getattr(required, "__qualname__", repr(required))
        if candidate is None:
            raise NullCandidateError(required_name)

        if not isinstance(required, type):
            msg = f"Required type must be a class, got {required!r}"
            raise TypeError(msg)

        if not isinstance(candidate, type):
            raise TypeConstraintViolation(
                repr(candidate),
                required_name,
                reason=f"{candidate!r} is not a class and cannot be a subtype of {required_name}",
            )

        if not self._introspector.is_subtype_or_equal(candidate, required):
            raise TypeConstraintViolation(candidate.__qualname__, required_name)

        return candidate

    def instantiate[T](self, required: type[T], candidate: type | None) -> T:
        """Construct *candidate*, guaranteed to be *required* or a subtype of it.

        Raises:
            NullCandidateError: *candidate* is None.
            TypeConstraintViolation: *candidate* is not *required* or a subtype.
            ConstructionFailure: no zero-argument or all-defaulted constructor.
        """
        cls = self.check(required, candidate)

        constructor = self._introspector.resolve_constructor(cls)
        if constructor is None:
            raise ConstructionFailure(cls.__qualname__, required_parameters(cls))

        logger.debug(
            "Constructing %s as %s via %s",
            cls.__qualname__,
            required.__qualname__,
            constructor.kind,
        )
        return cast(T, constructor.invoke(cls))


_default_instantiator = Instantiator()


def instantiate[T](required: type[T], candidate: type | None) -> T:
    """Construct *candidate* as a *required* using the default reflective factory."""
    return _default_instantiator.instantiate(required, candidate)
