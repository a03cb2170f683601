"""Scan command for the root Typer app."""

import typer

from rangelink.api.scan.cmd_scan import cmd_scan
from rangelink.cli._handle_stage_result import _handle_stage_result


def scan_cmd(
    source: str = typer.Argument("-", help="File to scan; '-' reads stdin"),
    include_unparsed: bool = typer.Option(False, "--include-unparsed", help="Also report candidates that fail to parse"),
) -> None:
    """List the links found in a file or stdin."""
    _handle_stage_result(cmd_scan)(source, include_unparsed=include_unparsed)
