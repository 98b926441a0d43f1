"""Materialize emitted page source and describe it as a generated bundle.

This is the only module in the pipeline with a filesystem side effect.
:func:`write_page_component` creates ``<output_root>/src`` when needed and
writes ``App.jsx`` there as UTF-8 with ``\\n`` line endings. It never lists,
deletes, or touches sibling files, and rewriting the same text leaves the file
unchanged, so repeated runs are idempotent. Concurrent writers targeting the
same output root follow last-writer-wins; use distinct roots to isolate
builds.

:func:`build_generated_output` is the in-memory counterpart: it packages the
emitted source with the dependency and preview metadata that API callers
return to clients, without touching the disk.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from ._constants import PAGE_FILE_NAME, PAGE_RELATIVE_PATH, PAGE_SOURCE_DIR
from .emitter import generate_app_component

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from .builder import RenderPlanItem

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class GeneratedFile:
    """A single emitted source file, addressed relative to the project root."""

    path: str
    content: str
    type: str = "component"


@dc.dataclass(frozen=True, slots=True)
class Dependency:
    """An npm package the generated page needs at runtime."""

    package: str
    version: str


@dc.dataclass(frozen=True, slots=True)
class PreviewMetadata:
    """Entry point details used to preview the generated project."""

    entry_point: str = PAGE_RELATIVE_PATH
    framework: str = "react"


RUNTIME_DEPENDENCIES: tuple[Dependency, ...] = (
    Dependency(package="react", version="^18.0.0"),
    Dependency(package="react-dom", version="^18.0.0"),
)


@dc.dataclass(frozen=True, slots=True)
class GeneratedOutput:
    """In-memory result of a code generation request."""

    files: tuple[GeneratedFile, ...]
    dependencies: tuple[Dependency, ...] = RUNTIME_DEPENDENCIES
    preview_metadata: PreviewMetadata = dc.field(default_factory=PreviewMetadata)

    def to_dict(self) -> dict[str, typ.Any]:
        """Return the camelCase wire shape of the bundle."""
        return {
            "files": [dc.asdict(item) for item in self.files],
            "dependencies": [dc.asdict(dep) for dep in self.dependencies],
            "previewMetadata": {
                "entryPoint": self.preview_metadata.entry_point,
                "framework": self.preview_metadata.framework,
            },
        }


def build_generated_output(
    render_plan: cabc.Sequence[RenderPlanItem],
) -> GeneratedOutput:
    """Emit the page for ``render_plan`` and wrap it without writing files."""
    content = generate_app_component(render_plan)
    return GeneratedOutput(
        files=(GeneratedFile(path=PAGE_RELATIVE_PATH, content=content),)
    )


def write_page_component(source: str, output_root: Path) -> Path:
    """Write ``source`` to ``<output_root>/src/App.jsx``.

    Parameters
    ----------
    source : str
        Emitted page source.
    output_root : Path
        Project root that receives the ``src`` directory.

    Returns
    -------
    Path
        Path of the written file.

    Notes
    -----
    Any ``\\r\\n`` in ``source`` is written as ``\\n``. Filesystem errors
    propagate to the caller.
    """
    source_dir = output_root / PAGE_SOURCE_DIR
    source_dir.mkdir(parents=True, exist_ok=True)
    output_path = source_dir / PAGE_FILE_NAME
    normalized = source.replace("\r\n", "\n")
    output_path.write_text(normalized, encoding="utf-8", newline="\n")
    logger.debug("Wrote %d characters to %s", len(normalized), output_path)
    return output_path


def write_project_files(
    render_plan: cabc.Sequence[RenderPlanItem], output_root: Path
) -> Path:
    """Emit the page for ``render_plan`` and write it under ``output_root``."""
    return write_page_component(generate_app_component(render_plan), output_root)


__all__ = [
    "RUNTIME_DEPENDENCIES",
    "Dependency",
    "GeneratedFile",
    "GeneratedOutput",
    "PreviewMetadata",
    "build_generated_output",
    "write_page_component",
    "write_project_files",
]
