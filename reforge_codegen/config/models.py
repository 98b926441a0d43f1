"""Typed containers for documents handed to the code generator."""

from __future__ import annotations

import dataclasses as dc
import typing as typ


class PlanDocumentError(ValueError):
    """Raised when an input document cannot be used as a plan or analysis."""


@dc.dataclass(slots=True)
class GenerationRequest:
    """A redesign plan paired with the analysis of the page it redesigns.

    Attributes
    ----------
    redesign_plan : dict[str, Any]
        Planner output in its camelCase wire shape.
    page_analysis : dict[str, Any]
        Crawled page analysis; forwarded to the builder but never read by it.
    """

    redesign_plan: dict[str, typ.Any]
    page_analysis: dict[str, typ.Any] = dc.field(default_factory=dict)


__all__ = ["GenerationRequest", "PlanDocumentError"]
