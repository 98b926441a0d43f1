"""Deterministic source emission for validated render plans."""

from .encoder import encode_canonical
from .jsx import generate_app_component, generate_imports, generate_jsx

__all__ = [
    "encode_canonical",
    "generate_app_component",
    "generate_imports",
    "generate_jsx",
]
