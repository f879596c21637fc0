"""Runtime utilities for input validation and version lookup."""

from .validation import validate_input_dir, validate_layout_parameters
from .version import resolve_project_version

__all__ = [
    "resolve_project_version",
    "validate_input_dir",
    "validate_layout_parameters",
]
