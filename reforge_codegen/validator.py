"""Pure validation helpers for redesign plans.

Every function here is free of I/O and deterministic, and either returns
normally or raises a :class:`~reforge_codegen.errors.RenderPlanError`
subclass. There is no silent fallback for anything a plan supplies
explicitly. Checks that can find several problems at once (duplicate section
types, missing required props, unemittable prop values, stray
``layoutVariants`` keys) collect every violation before raising so the whole
list reaches the plan author in one go.

The helpers are independent of :mod:`reforge_codegen.builder` so they can be
composed and tested on their own.
"""

from __future__ import annotations

import collections.abc as cabc
import json
import typing as typ

from .errors import (
    DuplicateSectionTypeError,
    EmptyOrMalformedOrderingError,
    InvalidVariantError,
    MalformedPropsError,
    MissingRequiredPropsError,
    UnknownLayoutVariantKeyError,
    UnknownSectionTypeError,
)

if typ.TYPE_CHECKING:
    from .registry import TemplateRegistry, TemplateRegistryEntry


def _describe(value: object) -> str:
    """Render ``value`` for an error message without failing on odd types."""
    try:
        return json.dumps(value, ensure_ascii=False, sort_keys=True)
    except (TypeError, ValueError):
        return repr(value)


def _quoted(values: cabc.Iterable[object]) -> str:
    return ", ".join(f'"{value}"' for value in values)


def is_sequence(value: object) -> bool:
    """Return True for list-like values, excluding strings and mappings."""
    return isinstance(value, cabc.Sequence) and not isinstance(
        value, str | bytes | bytearray
    )


def validate_section_ordering(section_ordering: object) -> None:
    """Ensure ``sectionOrdering`` is a non-empty sequence without duplicates.

    Parameters
    ----------
    section_ordering : object
        The ``sectionOrdering`` value taken from a redesign plan.

    Raises
    ------
    EmptyOrMalformedOrderingError
        If the value is not a list-like sequence or is empty.
    DuplicateSectionTypeError
        If any section type repeats. Every repeated type is listed once.
    """
    if not is_sequence(section_ordering):
        msg = (
            "redesignPlan.sectionOrdering must be an array. "
            f"Received: {_describe(section_ordering)}"
        )
        raise EmptyOrMalformedOrderingError(msg)
    ordering = typ.cast("cabc.Sequence[object]", section_ordering)
    if not ordering:
        msg = (
            "redesignPlan.sectionOrdering must not be empty. "
            "Provide at least one section type."
        )
        raise EmptyOrMalformedOrderingError(msg)

    seen: list[object] = []
    duplicates: list[object] = []
    for section_type in ordering:
        if section_type in seen:
            if section_type not in duplicates:
                duplicates.append(section_type)
        else:
            seen.append(section_type)
    if duplicates:
        msg = (
            "redesignPlan.sectionOrdering contains duplicate section types: "
            f"[{_quoted(duplicates)}]. Each section type may appear at most once. "
            "If you need two instances of the same component, use distinct "
            "section types."
        )
        raise DuplicateSectionTypeError(
            msg, details=[str(value) for value in duplicates]
        )


def validate_section_type(
    section_type: object, registry: TemplateRegistry
) -> TemplateRegistryEntry:
    """Return the registry entry for ``section_type``.

    Raises
    ------
    UnknownSectionTypeError
        If ``section_type`` is not a non-blank string or is not registered.
        The message enumerates every known section type.
    """
    known = ", ".join(registry)
    if not isinstance(section_type, str) or not section_type.strip():
        msg = (
            "Section type must be a non-empty string. "
            f"Received: {_describe(section_type)}. Known section types are: [{known}]"
        )
        raise UnknownSectionTypeError(msg, details=[_describe(section_type)])
    entry = registry.get(section_type)
    if entry is None:
        msg = (
            f'Unknown section type: "{section_type}". '
            f"Known section types are: [{known}]"
        )
        raise UnknownSectionTypeError(msg, details=[section_type])
    return entry


def validate_variant(
    section_type: str, variant: object, entry: TemplateRegistryEntry
) -> str:
    """Resolve the variant for a section, strictly.

    ``None`` means the plan did not ask for a variant, so the entry's default
    is returned. Any other value must be one of ``entry.variants`` exactly.

    Examples
    --------
    >>> from reforge_codegen.registry import lookup
    >>> hero = lookup("hero")
    >>> validate_variant("hero", None, hero)
    'centered'
    >>> validate_variant("hero", "split", hero)
    'split'
    """
    if variant is None:
        return entry.default_variant
    if not isinstance(variant, str) or variant not in entry.variants:
        msg = (
            f"Invalid variant {_describe(variant)} for section \"{section_type}\". "
            f"Valid variants are: [{', '.join(entry.variants)}]. "
            "No fallback is performed; provide a valid variant or omit it to use "
            f'the default ("{entry.default_variant}").'
        )
        raise InvalidVariantError(msg, details=[_describe(variant)])
    return variant


def validate_required_props(
    section_type: str, props: object, required_props: cabc.Iterable[str]
) -> None:
    """Check that ``props`` is a mapping holding every required key.

    Raises
    ------
    MalformedPropsError
        If ``props`` is not a mapping.
    MissingRequiredPropsError
        If any required key is absent or ``None``. All missing keys are
        reported together with the keys that were provided.
    """
    if not isinstance(props, cabc.Mapping):
        msg = (
            f'Props for section "{section_type}" must be a plain object. '
            f"Received: {_describe(props)}"
        )
        raise MalformedPropsError(msg, details=[section_type])

    missing = [key for key in required_props if props.get(key) is None]
    if missing:
        provided = [str(key) for key in props]
        msg = (
            f'Missing required props for section "{section_type}": '
            f"[{_quoted(missing)}]. Provided props keys: [{_quoted(provided)}]"
        )
        raise MissingRequiredPropsError(msg, details=missing)


def _unsupported_paths(value: object, path: str) -> cabc.Iterator[str]:
    if isinstance(value, cabc.Mapping):
        for key, item in value.items():
            if not isinstance(key, str):
                yield f"{path}[{key!r}] (non-string key)"
                continue
            yield from _unsupported_paths(item, f"{path}.{key}" if path else key)
    elif isinstance(value, list | tuple):
        for index, item in enumerate(value):
            yield from _unsupported_paths(item, f"{path}[{index}]")
    elif value is not None and not isinstance(value, bool | int | float | str):
        yield f"{path} ({type(value).__name__})"


def validate_props_encodable(section_type: str, props: cabc.Mapping) -> None:
    """Reject prop values that cannot be written into the page source.

    Only strings, numbers, booleans, ``None``, lists, tuples and mappings
    with string keys can be emitted. YAML documents can carry other scalars,
    such as dates, which would otherwise fail during emission.

    Raises
    ------
    MalformedPropsError
        If any nested value or key is unsupported; every offending path is
        listed.

    Examples
    --------
    >>> validate_props_encodable("hero", {"headline": "Hi", "stats": [1, 2.5]})
    """
    unsupported = list(_unsupported_paths(props, ""))
    if unsupported:
        msg = (
            f'Props for section "{section_type}" contain values that cannot be '
            f"emitted: [{_quoted(unsupported)}]. Use strings, numbers, booleans, "
            "null, arrays and objects only."
        )
        raise MalformedPropsError(msg, details=unsupported)


def validate_layout_variant_keys(
    layout_variants: object, section_ordering: cabc.Sequence[str]
) -> None:
    """Reject ``layoutVariants`` keys for sections that will never render.

    A missing or non-mapping ``layoutVariants`` value counts as empty.

    Raises
    ------
    UnknownLayoutVariantKeyError
        If any key is absent from ``section_ordering``; every offending key
        is listed.
    """
    if not isinstance(layout_variants, cabc.Mapping):
        return
    unknown = [str(key) for key in layout_variants if key not in section_ordering]
    if unknown:
        msg = (
            "redesignPlan.layoutVariants contains keys not present in "
            f"sectionOrdering: [{_quoted(unknown)}]. Remove these entries or add "
            "them to sectionOrdering. sectionOrdering is: "
            f"[{_quoted(section_ordering)}]"
        )
        raise UnknownLayoutVariantKeyError(msg, details=unknown)


__all__ = [
    "is_sequence",
    "validate_layout_variant_keys",
    "validate_props_encodable",
    "validate_required_props",
    "validate_section_ordering",
    "validate_section_type",
    "validate_variant",
]
