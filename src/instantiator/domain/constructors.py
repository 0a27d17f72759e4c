"""Resolved constructor strategies.

A candidate class resolves to exactly one of two strategies, or to none:

- :class:`ZeroArgument`: the class signature takes no named parameters,
  so ``cls()`` is the whole binding.
- :class:`AllParametersDefaulted`: every named parameter carries a
  default. The binding marks every parameter as "use its default" by
  omitting it, so the class applies its own defaults, including default
  factories that a signature only reports as a placeholder (pydantic
  ``Field(default_factory=...)``, dataclass ``field(default_factory=...)``).

Variadic ``*args`` / ``**kwargs`` parameters never count as named
parameters; an empty binding satisfies them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, ClassVar


class ConstructorKind(StrEnum):
    """Label for a resolved constructor strategy."""

    ZERO_ARGUMENT = "zero_argument"
    ALL_DEFAULTED = "all_defaulted"


@dataclass(frozen=True)
class DefaultedParameter:
    """One constructor parameter and the default its signature reports.

    ``default`` is informational: for factory-backed defaults it is a
    placeholder, never the value the class will actually use.
    """

    name: str
    default: Any
    positional_only: bool = False


@dataclass(frozen=True)
class ZeroArgument:
    """Constructor callable with an empty argument list."""

    kind: ClassVar[ConstructorKind] = ConstructorKind.ZERO_ARGUMENT

    def invoke[T](self, cls: type[T]) -> T:
        return cls()


@dataclass(frozen=True)
class AllParametersDefaulted:
    """Constructor whose every named parameter has a default value.

    ``parameters`` keeps signature order for diagnostics.
    """

    parameters: tuple[DefaultedParameter, ...]
    kind: ClassVar[ConstructorKind] = ConstructorKind.ALL_DEFAULTED

    def bind(self) -> tuple[tuple[Any, ...], dict[str, Any]]:
        """Return ``(args, kwargs)`` requesting the default for every parameter.

        Every parameter is defaulted, so leaving all of them out is a valid
        call and lets the class resolve each default itself.
        """
        return (), {}

    def declared_defaults(self) -> dict[str, Any]:
        """Map parameter name to the default reported by the signature."""
        return {p.name: p.default for p in self.parameters}

    def invoke[T](self, cls: type[T]) -> T:
        args, kwargs = self.bind()
        return cls(*args, **kwargs)

    @property
    def parameter_names(self) -> list[str]:
        return [p.name for p in self.parameters]


type ResolvedConstructor = ZeroArgument | AllParametersDefaulted
