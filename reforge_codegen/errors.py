"""Structured failures raised while validating redesign plans.

Every plan-validation failure is a :class:`RenderPlanError` carrying a
machine-readable :class:`ErrorCategory`, a human-readable message, and the
offending keys or section types in ``details``. Each category has a dedicated
subclass so callers can either catch a specific condition or inspect
``category`` on the base class and map it to an HTTP 4xx payload via
:meth:`RenderPlanError.to_dict`.

None of these errors is retryable: the plan itself has to change.

Examples
--------
>>> err = DuplicateSectionTypeError("duplicate hero", details=("hero",))
>>> err.category.value
'DuplicateSectionType'
>>> err.to_dict()["details"]
['hero']
"""

from __future__ import annotations

import enum
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class ErrorCategory(enum.StrEnum):
    """Machine-readable categories for plan-validation failures."""

    EMPTY_OR_MALFORMED_ORDERING = "EmptyOrMalformedOrdering"
    DUPLICATE_SECTION_TYPE = "DuplicateSectionType"
    UNKNOWN_SECTION_TYPE = "UnknownSectionType"
    INVALID_VARIANT = "InvalidVariant"
    MISSING_REQUIRED_PROPS = "MissingRequiredProps"
    MALFORMED_PROPS = "MalformedProps"
    UNKNOWN_LAYOUT_VARIANT_KEY = "UnknownLayoutVariantKey"
    INVALID_PLAN_SHAPE = "InvalidPlanShape"


class RenderPlanError(ValueError):
    """Base class for every redesign-plan validation failure."""

    category: typ.ClassVar[ErrorCategory]

    def __init__(self, message: str, *, details: cabc.Iterable[str] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.details: tuple[str, ...] = tuple(details)

    def to_dict(self) -> dict[str, typ.Any]:
        """Return a JSON-friendly payload describing the failure."""
        return {
            "category": self.category.value,
            "message": self.message,
            "details": list(self.details),
        }


class EmptyOrMalformedOrderingError(RenderPlanError):
    """``sectionOrdering`` is missing, not a sequence, or empty."""

    category = ErrorCategory.EMPTY_OR_MALFORMED_ORDERING


class DuplicateSectionTypeError(RenderPlanError):
    """One or more section types appear more than once in the ordering."""

    category = ErrorCategory.DUPLICATE_SECTION_TYPE


class UnknownSectionTypeError(RenderPlanError):
    """A section type is not present in the template registry."""

    category = ErrorCategory.UNKNOWN_SECTION_TYPE


class InvalidVariantError(RenderPlanError):
    """An explicitly requested variant is not registered for the section."""

    category = ErrorCategory.INVALID_VARIANT


class MissingRequiredPropsError(RenderPlanError):
    """Required props are absent or ``None`` for a section."""

    category = ErrorCategory.MISSING_REQUIRED_PROPS


class MalformedPropsError(RenderPlanError):
    """The resolved props value is not a key-value mapping."""

    category = ErrorCategory.MALFORMED_PROPS


class UnknownLayoutVariantKeyError(RenderPlanError):
    """``layoutVariants`` names sections that are not in the ordering."""

    category = ErrorCategory.UNKNOWN_LAYOUT_VARIANT_KEY


class InvalidPlanShapeError(RenderPlanError):
    """The plan or its companion analysis object is not a mapping."""

    category = ErrorCategory.INVALID_PLAN_SHAPE


class RegistryError(RuntimeError):
    """Raised when the template registry is malformed or misused."""


__all__ = [
    "DuplicateSectionTypeError",
    "EmptyOrMalformedOrderingError",
    "ErrorCategory",
    "InvalidPlanShapeError",
    "InvalidVariantError",
    "MalformedPropsError",
    "MissingRequiredPropsError",
    "RegistryError",
    "RenderPlanError",
    "UnknownLayoutVariantKeyError",
    "UnknownSectionTypeError",
]
