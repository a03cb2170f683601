"""Link formatting: selections in, notation text out."""

from .build_anchor import build_anchor
from .compose_portable_metadata import compose_portable_metadata
from .compute_range_spec import compute_range_spec
from .ComputedSelection import ComputedSelection
from .format_link import format_link
from .format_portable_link import format_portable_link
from .is_rectangular_selection import is_rectangular_selection
from .join_with_hash import join_with_hash
from .parse_selection_arg import parse_selection_arg
from .validate_selections import validate_selections

__all__ = [
    "ComputedSelection",
    "build_anchor",
    "compose_portable_metadata",
    "compute_range_spec",
    "format_link",
    "format_portable_link",
    "is_rectangular_selection",
    "join_with_hash",
    "parse_selection_arg",
    "validate_selections",
]
