"""Static template registry for section-type to component resolution.

Two tables describe the template library the generated page imports from:

* ``COMPONENT_VARIANTS`` maps each runtime component name to its ordered
  layout variants (the first entry is the default). Template components
  consult this table when they render.
* ``_SECTION_TEMPLATES`` maps each section-type key used in redesign plans to
  the component that renders it and the props that component requires.

The code-generation registry is derived from both tables exactly once, when
the module is imported, by :func:`build_template_registry`. Variants therefore
come from a single table and cannot drift between code generation and
runtime rendering. The resulting registry is a read-only mapping of frozen
:class:`TemplateRegistryEntry` records and exposes no mutator.

Two distinct variant helpers live here. :func:`resolve_runtime_variant` is the
lenient resolver used at render time: it logs and falls back to the default.
Code generation never calls it; it uses the strict
:func:`reforge_codegen.validator.validate_variant` instead.

Examples
--------
>>> entry = lookup("hero")
>>> entry.component_name, entry.default_variant
('HeroSection', 'centered')
>>> lookup("ghost") is None
True
"""

from __future__ import annotations

import dataclasses as dc
import logging
import types
import typing as typ

from .errors import RegistryError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = logging.getLogger(__name__)

COMPONENT_VARIANTS: typ.Final[cabc.Mapping[str, tuple[str, ...]]] = (
    types.MappingProxyType(
        {
            "NavHeader": ("minimal", "centered", "sticky"),
            "HeroSection": ("centered", "split", "fullwidth"),
            "FeaturesSection": ("grid3", "grid2", "list"),
            "CourseShowcase": ("scroll", "grid"),
            "BenefitsSection": ("alternating", "steps"),
            "TestimonialsSection": ("grid", "carousel"),
            "PricingSection": ("three-tier", "two-tier"),
            # Single accordion layout.
            "FAQSection": ("default",),
            "FinalCTA": ("gradient", "image-overlay"),
            # Column count is data-driven.
            "Footer": ("default",),
        }
    )
)

# section type -> (component name, required props)
_SECTION_TEMPLATES: typ.Final[dict[str, tuple[str, tuple[str, ...]]]] = {
    "navigation": ("NavHeader", ("logoText", "navLinks")),
    "hero": ("HeroSection", ("headline",)),
    "features": ("FeaturesSection", ("heading", "features")),
    "courses": ("CourseShowcase", ("heading", "courses")),
    "benefits": ("BenefitsSection", ("heading", "items")),
    "testimonials": ("TestimonialsSection", ("heading", "testimonials")),
    "pricing": ("PricingSection", ("heading", "plans")),
    "faq": ("FAQSection", ("faqs",)),
    "cta": ("FinalCTA", ("headline",)),
    "footer": ("Footer", ("logoText", "linkGroups")),
}


@dc.dataclass(frozen=True, slots=True)
class TemplateRegistryEntry:
    """Code-generation contract for one section type.

    Attributes
    ----------
    section_type : str
        Registry key used in ``sectionOrdering``.
    component_name : str
        Component identifier the emitted page imports and renders.
    variants : tuple[str, ...]
        Every valid layout variant, in declared order.
    default_variant : str
        Variant used when a plan does not request one.
    required_props : tuple[str, ...]
        Prop keys that must be present and non-null.
    """

    section_type: str
    component_name: str
    variants: tuple[str, ...]
    default_variant: str
    required_props: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.variants:
            msg = f"Section '{self.section_type}' must declare at least one variant."
            raise RegistryError(msg)
        if self.default_variant not in self.variants:
            msg = (
                f"Default variant '{self.default_variant}' for section "
                f"'{self.section_type}' is not one of {list(self.variants)}."
            )
            raise RegistryError(msg)


TemplateRegistry = typ.Mapping[str, TemplateRegistryEntry]


def build_template_registry(
    section_templates: cabc.Mapping[str, tuple[str, cabc.Sequence[str]]],
    component_variants: cabc.Mapping[str, cabc.Sequence[str]],
) -> TemplateRegistry:
    """Derive the read-only code-generation registry from the source tables.

    Parameters
    ----------
    section_templates : Mapping[str, tuple[str, Sequence[str]]]
        Section type mapped to ``(component_name, required_props)``.
    component_variants : Mapping[str, Sequence[str]]
        Component name mapped to its ordered variants.

    Returns
    -------
    Mapping[str, TemplateRegistryEntry]
        Immutable registry keyed by section type, in declaration order.

    Raises
    ------
    RegistryError
        If a section references a component with no registered variants.
    """
    entries: dict[str, TemplateRegistryEntry] = {}
    for section_type, (component_name, required_props) in section_templates.items():
        variants = component_variants.get(component_name)
        if not variants:
            msg = (
                f"Section '{section_type}' maps to component '{component_name}', "
                "which has no registered variants."
            )
            raise RegistryError(msg)
        ordered = tuple(variants)
        entries[section_type] = TemplateRegistryEntry(
            section_type=section_type,
            component_name=component_name,
            variants=ordered,
            default_variant=ordered[0],
            required_props=tuple(required_props),
        )
    return types.MappingProxyType(entries)


_TEMPLATE_REGISTRY: typ.Final[TemplateRegistry] = build_template_registry(
    _SECTION_TEMPLATES, COMPONENT_VARIANTS
)


def get_template_registry() -> TemplateRegistry:
    """Return the process-wide registry for inspection and testing."""
    return _TEMPLATE_REGISTRY


def lookup(
    section_type: str, registry: TemplateRegistry | None = None
) -> TemplateRegistryEntry | None:
    """Return the entry for ``section_type`` or ``None`` when unregistered."""
    table = _TEMPLATE_REGISTRY if registry is None else registry
    return table.get(section_type)


def known_section_types(registry: TemplateRegistry | None = None) -> list[str]:
    """List registered section types in declaration order."""
    table = _TEMPLATE_REGISTRY if registry is None else registry
    return list(table)


def default_variant_for(component_name: str) -> str:
    """Return the default variant for a runtime component.

    Raises
    ------
    RegistryError
        If ``component_name`` has no registered variants.
    """
    variants = COMPONENT_VARIANTS.get(component_name)
    if not variants:
        msg = f"Unknown component '{component_name}'. Register it in COMPONENT_VARIANTS."
        raise RegistryError(msg)
    return variants[0]


def resolve_runtime_variant(component_name: str, variant: str | None) -> str | None:
    """Leniently coerce ``variant`` for render-time use.

    Invalid variants fall back to the component default with a warning and
    unknown components pass the variant through unchanged. This helper must
    not be used while generating code.
    """
    allowed = COMPONENT_VARIANTS.get(component_name)
    if not allowed:
        logger.warning(
            "Unknown component %r; returning variant %r as-is.",
            component_name,
            variant,
        )
        return variant
    if variant not in allowed:
        fallback = allowed[0]
        logger.warning(
            "Invalid variant %r for %s. Expected one of: [%s]. Falling back to %r.",
            variant,
            component_name,
            ", ".join(allowed),
            fallback,
        )
        return fallback
    return variant


__all__ = [
    "COMPONENT_VARIANTS",
    "TemplateRegistry",
    "TemplateRegistryEntry",
    "build_template_registry",
    "default_variant_for",
    "get_template_registry",
    "known_section_types",
    "lookup",
    "resolve_runtime_variant",
]
