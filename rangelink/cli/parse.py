"""Parse command for the root Typer app."""

import typer

from rangelink.api.parse.cmd_parse import cmd_parse
from rangelink.cli._handle_stage_result import _handle_stage_result


def parse_cmd(
    text: str = typer.Argument(..., help="Link text, e.g. 'src/a.ts#L10C5-L20C10'"),
) -> None:
    """Parse a single link."""
    _handle_stage_result(cmd_parse)(text)
