"""Deterministic JSX emission for a validated render plan.

The three public functions are pure: the same render plan always yields the
same characters. Imports are ordered alphabetically by component name and
de-duplicated, so they depend only on the *set* of components in the plan.
Section elements keep render-plan order. Props are encoded with
:func:`~reforge_codegen.emitter.encoder.encode_canonical`, which sorts keys
and never emits ``\\r``.

The page skeleton lives in ``templates/app_component.jsx.jinja`` and is
rendered with autoescaping disabled, since the output is JavaScript source
rather than HTML.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from reforge_codegen._constants import APP_COMPONENT_TEMPLATE, IMPORT_LINE_TEMPLATE

from .encoder import encode_canonical

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from reforge_codegen.builder import RenderPlanItem

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
ELEMENT_INDENT = " " * 6
ATTRIBUTE_INDENT = " " * 8
PROPS_CONTINUATION_INDENT = " " * 10

_environment = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=False,  # noqa: S701 - emits JavaScript, not HTML
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    undefined=StrictUndefined,
)


def generate_imports(render_plan: cabc.Iterable[RenderPlanItem]) -> str:
    """Return one import line per distinct component, sorted by name.

    Examples
    --------
    >>> from types import SimpleNamespace as NS
    >>> print(generate_imports([NS(component_name="HeroSection"),
    ...                         NS(component_name="Footer"),
    ...                         NS(component_name="HeroSection")]))
    import { Footer } from './templates';
    import { HeroSection } from './templates';
    """
    names = sorted({item.component_name for item in render_plan})
    return "\n".join(IMPORT_LINE_TEMPLATE.format(name=name) for name in names)


def _render_element(item: RenderPlanItem) -> str:
    encoded = encode_canonical(item.props)
    serialized = f"\n{PROPS_CONTINUATION_INDENT}".join(encoded.split("\n"))
    return (
        f"{ELEMENT_INDENT}<{item.component_name}\n"
        f'{ATTRIBUTE_INDENT}variant="{item.variant}"\n'
        f"{ATTRIBUTE_INDENT}{{...{serialized}}}\n"
        f"{ELEMENT_INDENT}/>"
    )


def generate_jsx(render_plan: cabc.Iterable[RenderPlanItem]) -> list[str]:
    """Return one self-closing element string per item, in plan order."""
    return [_render_element(item) for item in render_plan]


def generate_app_component(render_plan: cabc.Sequence[RenderPlanItem]) -> str:
    """Assemble the full ``App.jsx`` source for ``render_plan``.

    Returns
    -------
    str
        Import block, a blank line, the ``App`` function returning every
        section inside a fragment, and ``export default App;``. The text
        always ends with exactly one newline.
    """
    template = _environment.get_template(APP_COMPONENT_TEMPLATE)
    source = template.render(
        imports=generate_imports(render_plan),
        sections="\n".join(generate_jsx(render_plan)),
    )
    if not source.endswith("\n"):
        source += "\n"
    return source


__all__ = ["generate_app_component", "generate_imports", "generate_jsx"]
