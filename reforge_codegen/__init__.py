"""Deterministic code generation for redesigned landing pages.

This package turns a planner's redesign plan into a validated render plan and
then into the source of a single React page component. The CLI entry points
used by the ``reforge`` console script live in :mod:`reforge_codegen.cli`.

Exports
-------
- ``build_render_plan``: validate a plan and return ordered render items.
- ``generate_app_component``: emit ``App.jsx`` source for a render plan.
- ``write_page_component``: write emitted source to ``<root>/src/App.jsx``.
- ``app`` and ``main``: the Cyclopts application and its runner.

Examples
--------
>>> from reforge_codegen import build_render_plan, generate_app_component
>>> items = build_render_plan(
...     {"sectionOrdering": ["hero"], "sectionProps": {"hero": {"headline": "Hi"}}},
...     {},
... )
>>> generate_app_component(items).splitlines()[0]
"import { HeroSection } from './templates';"
"""

from __future__ import annotations

from .builder import RenderPlanItem, build_render_plan
from .cli import app, main
from .emitter import generate_app_component, generate_imports, generate_jsx
from .errors import ErrorCategory, RenderPlanError
from .output import build_generated_output, write_page_component

__all__ = [
    "ErrorCategory",
    "RenderPlanError",
    "RenderPlanItem",
    "app",
    "build_generated_output",
    "build_render_plan",
    "generate_app_component",
    "generate_imports",
    "generate_jsx",
    "main",
    "write_page_component",
]
