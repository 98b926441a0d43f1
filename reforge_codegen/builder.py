"""Turn a redesign plan into a validated, ordered render plan.

:func:`build_render_plan` runs in two strict phases. First every check runs
for every section: ordering, ``layoutVariants`` keys, section types,
variants, required props and emittable prop values. Only when all of them
pass are the public :class:`RenderPlanItem` records constructed, so a failure
never yields a partial plan.

Props come from exactly one source per section. ``sectionProps[type]`` wins
outright when it is a mapping; otherwise the first ``componentMappings`` entry
for the type supplies them; otherwise the section gets an empty mapping and
required-prop validation reports the gap. The sources are never merged.

The page analysis argument is accepted for downstream consumers and is never
read here, so its contents cannot change the plan.

Example
-------
>>> plan = {
...     "sectionOrdering": ["hero"],
...     "sectionProps": {"hero": {"headline": "Welcome"}},
... }
>>> [item.to_dict() for item in build_render_plan(plan, {})]
[{'sectionType': 'hero', 'componentName': 'HeroSection', 'variant': 'centered', 'props': {'headline': 'Welcome'}}]
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import logging
import types
import typing as typ

from .errors import InvalidPlanShapeError
from .registry import TemplateRegistry, TemplateRegistryEntry, get_template_registry
from .validator import (
    is_sequence,
    validate_layout_variant_keys,
    validate_props_encodable,
    validate_required_props,
    validate_section_ordering,
    validate_section_type,
    validate_variant,
)

logger = logging.getLogger(__name__)

Props = cabc.Mapping[str, typ.Any]


@dc.dataclass(frozen=True, slots=True)
class RenderPlanItem:
    """Rendering instruction for one section of the composed page.

    Attributes
    ----------
    section_type : str
        Registry key of the section.
    component_name : str
        Component rendered for the section.
    variant : str
        Validated layout variant, always one of the entry's variants.
    props : Mapping[str, Any]
        Read-only props satisfying the entry's required keys.
    """

    section_type: str
    component_name: str
    variant: str
    props: Props

    def to_dict(self) -> dict[str, typ.Any]:
        """Return the camelCase wire shape used by planner-facing callers."""
        return {
            "sectionType": self.section_type,
            "componentName": self.component_name,
            "variant": self.variant,
            "props": dict(self.props),
        }


@dc.dataclass(slots=True)
class _ValidatedSection:
    section_type: str
    entry: TemplateRegistryEntry
    variant: str
    props: Props


def render_plan_item_schema() -> dict[str, str]:
    """Describe the fields of a serialized :class:`RenderPlanItem`."""
    return {
        "sectionType": "string - one of the registered section type keys",
        "componentName": "string - component name from the registry",
        "variant": "string - validated variant for this section",
        "props": "object - validated props to pass to the component",
    }


def extract_section_props(
    section_type: str, redesign_plan: cabc.Mapping[str, typ.Any]
) -> object:
    """Select the props for ``section_type`` using the precedence rule.

    The value is returned verbatim; the caller validates its shape.
    """
    section_props = redesign_plan.get("sectionProps")
    if isinstance(section_props, cabc.Mapping):
        explicit = section_props.get(section_type)
        if isinstance(explicit, cabc.Mapping):
            return explicit

    mappings = redesign_plan.get("componentMappings")
    if is_sequence(mappings):
        for mapping in typ.cast("cabc.Sequence[object]", mappings):
            if (
                isinstance(mapping, cabc.Mapping)
                and mapping.get("sectionType") == section_type
            ):
                # First match only, even when its props are unusable.
                props = mapping.get("props")
                if isinstance(props, cabc.Mapping):
                    return props
                break

    return {}


def build_render_plan(
    redesign_plan: object,
    page_analysis: object,
    *,
    registry: TemplateRegistry | None = None,
) -> tuple[RenderPlanItem, ...]:
    """Validate ``redesign_plan`` and build the ordered render plan.

    Parameters
    ----------
    redesign_plan : Mapping[str, Any]
        Planner output with ``sectionOrdering`` and optional
        ``layoutVariants``, ``sectionProps`` and ``componentMappings``.
    page_analysis : Mapping[str, Any]
        Analysis of the crawled page. Must be a mapping; never read.
    registry : Mapping[str, TemplateRegistryEntry], optional
        Registry snapshot to validate against; defaults to the process-wide
        registry.

    Returns
    -------
    tuple[RenderPlanItem, ...]
        One item per section, in ``sectionOrdering`` order.

    Raises
    ------
    RenderPlanError
        The first failing check's error; no items are returned.
    """
    if not isinstance(redesign_plan, cabc.Mapping):
        msg = "build_render_plan: redesignPlan must be a non-null object."
        raise InvalidPlanShapeError(msg, details=["redesignPlan"])
    if not isinstance(page_analysis, cabc.Mapping):
        msg = "build_render_plan: webPageAnalysis must be a non-null object."
        raise InvalidPlanShapeError(msg, details=["webPageAnalysis"])
    table = get_template_registry() if registry is None else registry

    section_ordering = redesign_plan.get("sectionOrdering")
    validate_section_ordering(section_ordering)
    ordering = typ.cast("cabc.Sequence[str]", section_ordering)

    layout_variants = redesign_plan.get("layoutVariants")
    validate_layout_variant_keys(layout_variants, ordering)
    if not isinstance(layout_variants, cabc.Mapping):
        layout_variants = {}

    validated: list[_ValidatedSection] = []
    for section_type in ordering:
        entry = validate_section_type(section_type, table)
        variant = validate_variant(
            section_type, layout_variants.get(section_type), entry
        )
        props = extract_section_props(section_type, redesign_plan)
        validate_required_props(section_type, props, entry.required_props)
        validate_props_encodable(section_type, typ.cast("Props", props))
        validated.append(
            _ValidatedSection(
                section_type=section_type,
                entry=entry,
                variant=variant,
                props=typ.cast("Props", props),
            )
        )

    logger.debug("Validated %d section(s) for render plan.", len(validated))
    return tuple(
        RenderPlanItem(
            section_type=section.section_type,
            component_name=section.entry.component_name,
            variant=section.variant,
            props=types.MappingProxyType(dict(section.props)),
        )
        for section in validated
    )


__all__ = [
    "RenderPlanItem",
    "build_render_plan",
    "extract_section_props",
    "render_plan_item_schema",
]
