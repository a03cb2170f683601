"""Unit test fixtures.

Configuration helpers live in tests/conftest.py; re-exported here for
test modules that import them directly.
"""

from tests.conftest import custom_delimiters, run_cmd

__all__ = ["custom_delimiters", "run_cmd"]
