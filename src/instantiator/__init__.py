"""instantiator — type-constrained object factory."""

from __future__ import annotations

from instantiator.config.logging import configure_from_settings, configure_logging
from instantiator.config.settings import InstantiatorSettings
from instantiator.domain.constructors import (
    AllParametersDefaulted,
    ConstructorKind,
    DefaultedParameter,
    ResolvedConstructor,
    ZeroArgument,
)
from instantiator.domain.errors import (
    CandidateLoadError,
    ConstructionFailure,
    InstantiationError,
    NullCandidateError,
    TypeConstraintViolation,
)
from instantiator.factory import Instantiator, instantiate
from instantiator.introspection import ReflectiveIntrospector, TypeIntrospector
from instantiator.loading import instantiate_from_path, load_type, qualified_name

__all__ = [
    "AllParametersDefaulted",
    "CandidateLoadError",
    "ConstructionFailure",
    "ConstructorKind",
    "DefaultedParameter",
    "InstantiationError",
    "Instantiator",
    "InstantiatorSettings",
    "NullCandidateError",
    "ReflectiveIntrospector",
    "ResolvedConstructor",
    "TypeConstraintViolation",
    "TypeIntrospector",
    "ZeroArgument",
    "configure_from_settings",
    "configure_logging",
    "instantiate",
    "instantiate_from_path",
    "load_type",
    "qualified_name",
]
