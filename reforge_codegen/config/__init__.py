"""Load the documents that drive a code generation run.

This subpackage reads planner output from YAML or JSON files and returns a
:class:`GenerationRequest` pairing the redesign plan with the analysis of the
crawled page. A file may contain the plan on its own or the full request body
(``redesignPlan`` plus ``targetAnalysis``). Structural validation of the plan
itself is left to :func:`reforge_codegen.builder.build_render_plan`; the loader
only guarantees that each document is a mapping.

Examples
--------
>>> from pathlib import Path
>>> from reforge_codegen.config import load_generation_request
>>> request = load_generation_request(Path("plan.yaml"))  # doctest: +SKIP
>>> request.redesign_plan["sectionOrdering"]  # doctest: +SKIP
['hero', 'footer']
"""

from .loader import load_generation_request, load_plan_document
from .models import GenerationRequest, PlanDocumentError

__all__ = [
    "GenerationRequest",
    "PlanDocumentError",
    "load_generation_request",
    "load_plan_document",
]
