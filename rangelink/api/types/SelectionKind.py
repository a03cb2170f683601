from enum import Enum


class SelectionKind(str, Enum):
    """Contiguous range (single hash) or column block (doubled hash)."""

    NORMAL = "Normal"
    RECTANGULAR = "Rectangular"
