"""Shared constants for the RangeLink notation and its dot-directory."""

RANGELINK_HOME_EXT = ".rangelink"  # user-level state/config directory suffix

# Longest string parse_link will look at; generous for deep absolute paths
MAX_LINK_LENGTH = 3000

# Largest line number accepted from notation text (int32 max, as editors index lines)
MAX_LINE_NUMBER = 2**31 - 1

# Wraps the delimiter fields appended to portable links: ~#~L~-~C~
PORTABLE_METADATA_SEPARATOR = "~"

# Characters no delimiter may contain; they carry meaning elsewhere in paths or metadata
RESERVED_CHARS = ("~", "|", "/", "\\", ":", ",", "@")
