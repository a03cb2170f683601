"""Format command for the root Typer app."""

import typer

from rangelink.api.format.cmd_format import cmd_format
from rangelink.cli._handle_stage_result import _handle_stage_result


def format_cmd(
    path: str = typer.Argument(..., help="Path to encode in the link"),
    selection: list[str] = typer.Option(
        ..., "--selection", "-s", help="LINE[:CHAR][-LINE[:CHAR]], 1-indexed; repeat for column selections"
    ),
    portable: bool = typer.Option(False, "--portable", "-p", help="Embed the delimiters in the link"),
    full_line: bool | None = typer.Option(None, "--full-line/--positions", help="Force line-only or positional notation"),
) -> None:
    """Format a link, e.g. `rangelink format src/a.ts -s 10:5-20:10`."""
    _handle_stage_result(cmd_format)(path, selection, portable=portable, full_line=full_line)
