from enum import Enum


class LinkType(str, Enum):
    """Regular links rely on ambient delimiters; portable links carry their own."""

    REGULAR = "Regular"
    PORTABLE = "Portable"
