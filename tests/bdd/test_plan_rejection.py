"""Behaviour tests for plans rejected by ``reforge generate``.

Each scenario writes an invalid redesign plan, runs ``generate`` and checks
that the command exits with the validation status, names the error category
on stderr, and leaves the output folder untouched.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path
from textwrap import dedent

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from reforge_codegen import cli

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "plan_rejection.feature"
)
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Share mutable scenario data across pytest-bdd steps."""
    return {}


def _write_plan(tmp_path: Path, scenario_state: ScenarioState, body: str) -> None:
    plan_path = tmp_path / "plan.yaml"
    plan_path.write_text(dedent(body).strip() + "\n", encoding="utf-8")
    scenario_state["plan_path"] = plan_path
    scenario_state["output_dir"] = tmp_path / "frontend"


@given("a redesign plan listing the hero section twice")
def given_duplicate_plan(tmp_path: Path, scenario_state: ScenarioState) -> None:
    """Write a plan whose ordering repeats ``hero``."""
    _write_plan(
        tmp_path,
        scenario_state,
        """
        sectionOrdering: [hero, footer, hero]
        sectionProps:
          hero:
            headline: Welcome
          footer:
            logoText: X
            linkGroups: []
        """,
    )


@given("a redesign plan with a layout variant for a missing section")
def given_ghost_layout_plan(tmp_path: Path, scenario_state: ScenarioState) -> None:
    """Write a plan choosing a variant for ``pricing`` without rendering it."""
    _write_plan(
        tmp_path,
        scenario_state,
        """
        sectionOrdering: [hero]
        layoutVariants:
          pricing: cards
        sectionProps:
          hero:
            headline: Welcome
        """,
    )


@when("I run the reforge generate workflow")
def when_generate(
    scenario_state: ScenarioState, capsys: pytest.CaptureFixture[str]
) -> None:
    """Run ``generate`` and capture the exit status and stderr."""
    with pytest.raises(SystemExit) as excinfo:
        cli.generate(
            scenario_state["plan_path"], output_dir=scenario_state["output_dir"]
        )
    scenario_state["exit_code"] = excinfo.value.code
    scenario_state["stderr"] = capsys.readouterr().err


@then(parsers.parse('generation fails with the "{category}" category'))
def then_fails_with(scenario_state: ScenarioState, category: str) -> None:
    """The command exits with the validation status and names the category."""
    assert scenario_state["exit_code"] == cli.VALIDATION_EXIT_CODE
    stderr = typ.cast("str", scenario_state["stderr"])
    assert stderr.startswith(f"error[{category}]: "), stderr


@then("no page component is written")
def then_nothing_written(scenario_state: ScenarioState) -> None:
    """Rejected plans leave no files behind."""
    output_dir = typ.cast("Path", scenario_state["output_dir"])
    assert not output_dir.exists(), "expected no output directory"
