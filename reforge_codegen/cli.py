"""Cyclopts CLI entrypoint for turning redesign plans into page source.

The ``reforge`` console script loads a redesign plan (YAML or JSON), validates
it against the template registry, and either writes ``src/App.jsx`` under an
output directory, prints the emitted source, or prints the intermediate
render plan. Typical usage runs ``reforge generate plan.json --output-dir
frontend`` after the planner has produced ``plan.json``.

Validation failures are reported on stderr as ``error[<category>]: <message>``
and exit with status 2, because they can only be fixed by changing the plan.

Examples
--------
Generate the page into ``frontend/src/App.jsx``:

>>> from reforge_codegen.cli import app
>>> app(["generate", "plan.json", "--output-dir", "frontend"])  # doctest: +SKIP

Inspect the registry:

>>> from reforge_codegen.cli import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import sys
import typing as typ
from pathlib import Path

import cyclopts
import msgspec.json
from cyclopts import App, Parameter

from .builder import RenderPlanItem, build_render_plan
from .config import PlanDocumentError, load_generation_request
from .emitter import generate_app_component
from .errors import RenderPlanError
from .output import write_page_component
from .registry import get_template_registry

DEFAULT_OUTPUT_DIR = Path("generated")
VALIDATION_EXIT_CODE = 2

app = App(name="reforge", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]

PlanArgument = typ.Annotated[
    Path, Parameter(help="Redesign plan or request body (YAML/JSON)")
]
AnalysisOption = typ.Annotated[
    Path | None,
    Parameter(help="Optional page analysis document", env_var="INPUT_ANALYSIS"),
]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _dump_json(payload: object) -> str:
    return msgspec.json.format(msgspec.json.encode(payload), indent=2).decode("utf-8")


def _load_render_plan(
    plan: Path, analysis: Path | None
) -> tuple[RenderPlanItem, ...]:
    """Load the documents and build the render plan, exiting on bad input."""
    try:
        request = load_generation_request(plan, analysis)
        return build_render_plan(request.redesign_plan, request.page_analysis)
    except RenderPlanError as exc:
        print(f"error[{exc.category.value}]: {exc.message}", file=sys.stderr)
        raise SystemExit(VALIDATION_EXIT_CODE) from exc
    except PlanDocumentError as exc:
        print(f"error[InvalidPlanShape]: {exc}", file=sys.stderr)
        raise SystemExit(VALIDATION_EXIT_CODE) from exc


@app.command(help="Validate a plan and write src/App.jsx under the output folder.")
def generate(
    plan: PlanArgument,
    *,
    analysis: AnalysisOption = None,
    output_dir: typ.Annotated[
        Path,
        Parameter(help="Project root receiving src/App.jsx", env_var="INPUT_OUTPUT_DIR"),
    ] = DEFAULT_OUTPUT_DIR,
) -> None:
    """Generate the page component for ``plan`` and write it to disk.

    Parameters
    ----------
    plan : Path
        Redesign plan, or a request body with ``redesignPlan`` and
        ``targetAnalysis`` keys.
    analysis : Path or None, optional
        Separate page analysis document; overrides a wrapped analysis.
    output_dir : Path, optional
        Project root; the file lands at ``<output_dir>/src/App.jsx``.
    """
    render_plan = _load_render_plan(plan, analysis)
    written = write_page_component(generate_app_component(render_plan), output_dir)
    print(f"wrote {_format_path(written)}")


@app.command(help="Print the generated App.jsx source without writing it.")
def emit(plan: PlanArgument, *, analysis: AnalysisOption = None) -> None:
    """Print the emitted page source for ``plan`` to stdout."""
    render_plan = _load_render_plan(plan, analysis)
    print(generate_app_component(render_plan), end="")


@app.command(name="plan", help="Print the validated render plan as JSON.")
def show_plan(plan: PlanArgument, *, analysis: AnalysisOption = None) -> None:
    """Print the render plan for ``plan`` in its camelCase wire shape."""
    render_plan = _load_render_plan(plan, analysis)
    print(_dump_json([item.to_dict() for item in render_plan]))


@app.command(help="Print the template registry as JSON.")
def registry() -> None:
    """Print every registered section type with its contract."""
    entries = {
        key: dc.asdict(entry) for key, entry in get_template_registry().items()
    }
    print(_dump_json(entries))


def main() -> None:
    """Invoke the Cyclopts application behind the ``reforge`` console command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
