"""Error taxonomy for instantiation.

Every error carries a stable ``code`` plus a ``detail`` dict naming the
offending and required types, so callers can report or branch on them
without parsing the message. Each also extends the builtin exception a
generic handler would expect (``ValueError`` for a missing candidate,
``TypeError`` for type problems, ``ImportError`` for loading problems).

Exceptions raised by a constructor itself are never wrapped in these.
"""

from __future__ import annotations

from typing import Any, ClassVar


class InstantiationError(Exception):
    """Base class for all instantiator errors."""

    code: ClassVar[str] = "INSTANTIATION_ERROR"

    def __init__(self, message: str, *, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = dict(detail or {})


class NullCandidateError(InstantiationError, ValueError):
    """No candidate type was supplied."""

    code = "NULL_CANDIDATE"

    def __init__(self, required_name: str) -> None:
        msg = f"Candidate type must not be None (required type: {required_name})"
        super().__init__(msg, detail={"required": required_name})
        self.required_name = required_name


class TypeConstraintViolation(InstantiationError, TypeError):
    """Candidate is neither the required type nor one of its subtypes."""

    code = "TYPE_CONSTRAINT_VIOLATION"

    def __init__(self, candidate_name: str, required_name: str, *, reason: str = "") -> None:
        msg = reason or f"{candidate_name} is not a type or subtype of {required_name}"
        super().__init__(
            msg,
            detail={"candidate": candidate_name, "required": required_name},
        )
        self.candidate_name = candidate_name
        self.required_name = required_name


class ConstructionFailure(InstantiationError, TypeError):
    """Candidate exposes neither a zero-argument nor an all-defaulted constructor."""

    code = "NO_USABLE_CONSTRUCTOR"

    def __init__(self, candidate_name: str, required_parameters: list[str]) -> None:
        params = ", ".join(required_parameters)
        msg = (
            f"{candidate_name} has no zero-argument or all-defaulted constructor; "
            f"parameters without defaults: {params}"
        )
        super().__init__(
            msg,
            detail={"candidate": candidate_name, "required_parameters": required_parameters},
        )
        self.candidate_name = candidate_name
        self.required_parameters = required_parameters


class CandidateLoadError(InstantiationError, ImportError):
    """A dotted candidate path could not be resolved to a class."""

    code = "CANDIDATE_LOAD_ERROR"

    def __init__(self, path: str, reason: str) -> None:
        msg = f"Cannot load candidate type {path!r}: {reason}"
        super().__init__(msg, detail={"path": path, "reason": reason})
        self.path = path
