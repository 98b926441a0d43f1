"""Behaviour tests for ``reforge generate`` using pytest-bdd.

These scenarios write a planner-shaped redesign plan to disk, run the
``generate`` command against a temporary project root, and inspect the
resulting ``src/App.jsx``.

Usage
-----
Run ``pytest tests/bdd/test_generate_page.py -v``.
"""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, scenarios, then, when

from reforge_codegen import cli

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "generate_page.feature"
)
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]

EXPECTED_COMPONENTS = [
    "NavHeader",
    "HeroSection",
    "FeaturesSection",
    "FinalCTA",
    "Footer",
]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Share mutable scenario data across pytest-bdd steps."""
    return {}


@given("a landing redesign plan on disk")
def given_landing_plan(
    tmp_path: Path,
    landing_plan: dict[str, typ.Any],
    scenario_state: ScenarioState,
) -> None:
    """Write the landing plan as a wrapped JSON request body."""
    plan_path = tmp_path / "request.json"
    body = {"redesignPlan": landing_plan, "targetAnalysis": {"title": "Acme"}}
    plan_path.write_text(json.dumps(body), encoding="utf-8")
    scenario_state["plan_path"] = plan_path
    scenario_state["output_dir"] = tmp_path / "frontend"


@when("I run the reforge generate workflow")
def when_generate(scenario_state: ScenarioState) -> None:
    """Run ``generate`` once and keep the written source."""
    output_dir = typ.cast("Path", scenario_state["output_dir"])
    cli.generate(scenario_state["plan_path"], output_dir=output_dir)
    page = output_dir / "src" / "App.jsx"
    scenario_state["source"] = page.read_text(encoding="utf-8")


@when("I run the reforge generate workflow twice")
def when_generate_twice(scenario_state: ScenarioState) -> None:
    """Run ``generate`` twice, recording the source after each run."""
    output_dir = typ.cast("Path", scenario_state["output_dir"])
    page = output_dir / "src" / "App.jsx"
    sources = []
    for _ in range(2):
        cli.generate(scenario_state["plan_path"], output_dir=output_dir)
        sources.append(page.read_bytes())
    scenario_state["sources"] = sources
    scenario_state["tree"] = sorted(
        str(path.relative_to(output_dir)) for path in output_dir.rglob("*")
    )


@then("the page component imports each rendered component once")
def then_imports_once(scenario_state: ScenarioState) -> None:
    """Every component appears in exactly one import line."""
    source = typ.cast("str", scenario_state["source"])
    import_lines = [line for line in source.splitlines() if line.startswith("import")]
    expected = [
        f"import {{ {name} }} from './templates';"
        for name in sorted(EXPECTED_COMPONENTS)
    ]
    assert import_lines == expected, f"unexpected imports: {import_lines!r}"


@then("the sections appear in plan order")
def then_plan_order(scenario_state: ScenarioState) -> None:
    """Elements follow ``sectionOrdering``."""
    source = typ.cast("str", scenario_state["source"])
    positions = [source.index(f"      <{name}\n") for name in EXPECTED_COMPONENTS]
    assert positions == sorted(positions), "sections rendered out of order"
    assert 'variant="split"' in source


@then("the page component is identical on both runs")
def then_identical(scenario_state: ScenarioState) -> None:
    """Regeneration is byte-for-byte stable and writes a single file."""
    first, second = scenario_state["sources"]
    assert first == second
    assert b"\r" not in first
    assert scenario_state["tree"] == ["src", "src/App.jsx"]
