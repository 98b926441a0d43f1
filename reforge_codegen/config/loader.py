"""Load redesign plans and page analyses from YAML or JSON files."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from .models import GenerationRequest, PlanDocumentError

if typ.TYPE_CHECKING:
    from pathlib import Path

PLAN_KEY = "redesignPlan"
ANALYSIS_KEY = "targetAnalysis"


def load_plan_document(path: Path) -> dict[str, typ.Any]:
    """Read a YAML 1.2 (or JSON) document whose top level is a mapping.

    Parameters
    ----------
    path : Path
        Location of the document. JSON files load unchanged because JSON is
        a subset of YAML 1.2.

    Returns
    -------
    dict[str, Any]
        The parsed top-level mapping; an empty file yields ``{}``.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    PlanDocumentError
        If the top-level value is not a mapping.
    YAMLError
        If the content cannot be parsed.
    """
    if not path.exists():
        msg = f"Plan document '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle)
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        msg = f"Top-level structure of '{path}' must be a mapping."
        raise PlanDocumentError(msg)
    return dict(loaded)


def load_generation_request(
    plan_path: Path, analysis_path: Path | None = None
) -> GenerationRequest:
    """Build a :class:`GenerationRequest` from one or two documents.

    ``plan_path`` may hold the plan itself or a request body wrapping it as
    ``{redesignPlan: ..., targetAnalysis: ...}``. A separate
    ``analysis_path`` takes precedence over a wrapped analysis. When no
    analysis is supplied anywhere an empty mapping is used; a wrapped
    ``targetAnalysis`` that is present but null or not a mapping is an error.

    Raises
    ------
    PlanDocumentError
        If a wrapped ``redesignPlan`` or an analysis is not a mapping.
    """
    raw = load_plan_document(plan_path)
    if PLAN_KEY in raw:
        plan = raw[PLAN_KEY]
        analysis = raw.get(ANALYSIS_KEY, {})
    else:
        plan = raw
        analysis = {}
    if not isinstance(plan, dict):
        msg = f"'{PLAN_KEY}' in '{plan_path}' must be a mapping."
        raise PlanDocumentError(msg)

    if analysis_path is not None:
        analysis = load_plan_document(analysis_path)
    if not isinstance(analysis, dict):
        msg = f"'{ANALYSIS_KEY}' in '{plan_path}' must be a mapping."
        raise PlanDocumentError(msg)

    return GenerationRequest(redesign_plan=plan, page_analysis=analysis)


__all__ = ["load_generation_request", "load_plan_document"]
