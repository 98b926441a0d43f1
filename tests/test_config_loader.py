"""Unit tests for loading plan and analysis documents."""

from __future__ import annotations

import json
import typing as typ
from textwrap import dedent

import pytest

from reforge_codegen.config import (
    PlanDocumentError,
    load_generation_request,
    load_plan_document,
)

if typ.TYPE_CHECKING:
    from pathlib import Path


def test_loads_yaml_plan(tmp_path: Path) -> None:
    """A bare YAML plan becomes the redesign plan with an empty analysis."""
    path = tmp_path / "plan.yaml"
    path.write_text(
        dedent(
            """
            sectionOrdering: [hero, footer]
            sectionProps:
              hero:
                headline: Welcome
              footer:
                logoText: X
                linkGroups: []
            """
        ).strip()
        + "\n",
        encoding="utf-8",
    )
    request = load_generation_request(path)
    assert request.redesign_plan["sectionOrdering"] == ["hero", "footer"]
    assert request.redesign_plan["sectionProps"]["footer"]["linkGroups"] == []
    assert request.page_analysis == {}


def test_loads_wrapped_json_request(tmp_path: Path) -> None:
    """A JSON request body is unwrapped into plan and analysis."""
    path = tmp_path / "request.json"
    body = {
        "redesignPlan": {"sectionOrdering": ["hero"]},
        "targetAnalysis": {"url": "https://example.invalid/"},
    }
    path.write_text(json.dumps(body), encoding="utf-8")
    request = load_generation_request(path)
    assert request.redesign_plan == {"sectionOrdering": ["hero"]}
    assert request.page_analysis == {"url": "https://example.invalid/"}


def test_separate_analysis_overrides_wrapped(tmp_path: Path) -> None:
    """An explicit analysis document replaces the wrapped one."""
    plan_path = tmp_path / "request.json"
    plan_path.write_text(
        json.dumps(
            {"redesignPlan": {"sectionOrdering": ["hero"]}, "targetAnalysis": {"a": 1}}
        ),
        encoding="utf-8",
    )
    analysis_path = tmp_path / "analysis.yaml"
    analysis_path.write_text("title: Acme\n", encoding="utf-8")
    request = load_generation_request(plan_path, analysis_path)
    assert request.page_analysis == {"title": "Acme"}


def test_missing_document_raises(tmp_path: Path) -> None:
    """Missing files surface as FileNotFoundError."""
    with pytest.raises(FileNotFoundError, match="not found"):
        load_plan_document(tmp_path / "absent.yaml")


def test_empty_document_is_empty_mapping(tmp_path: Path) -> None:
    """An empty file parses to an empty mapping."""
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_plan_document(path) == {}


@pytest.mark.parametrize(
    "content",
    [
        "- hero\n- footer\n",
        "redesignPlan: [hero]\n",
        "redesignPlan: null\n",
        "redesignPlan: {sectionOrdering: [hero]}\ntargetAnalysis: null\n",
        "redesignPlan: {sectionOrdering: [hero]}\ntargetAnalysis: []\n",
        "redesignPlan: {sectionOrdering: [hero]}\ntargetAnalysis: \"\"\n",
    ],
)
def test_non_mapping_documents_are_rejected(tmp_path: Path, content: str) -> None:
    """Non-mapping documents, wrapped plans and wrapped analyses are refused."""
    path = tmp_path / "bad.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(PlanDocumentError):
        load_generation_request(path)


def test_absent_wrapped_analysis_defaults_to_empty(tmp_path: Path) -> None:
    """Only a missing ``targetAnalysis`` key falls back to an empty mapping."""
    path = tmp_path / "request.yaml"
    path.write_text("redesignPlan: {sectionOrdering: [hero]}\n", encoding="utf-8")
    assert load_generation_request(path).page_analysis == {}
