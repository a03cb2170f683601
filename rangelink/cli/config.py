"""Config Typer app factory."""

import typer

from rangelink.api.config.cmd_show import cmd_show
from rangelink.api.config.cmd_validate import cmd_validate
from rangelink.api.config.cmd_version import cmd_version
from rangelink.cli._handle_stage_result import _handle_stage_result


def config() -> typer.Typer:
    """Create and configure the config Typer app."""
    app = typer.Typer(
        name="config",
        help="Configuration operations",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Show help when no subcommand is provided."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=False)
            raise typer.Exit()

    @app.command(name="show")
    def show_cmd(
        section: str = typer.Argument("", help="Configuration section name; omit to list sections"),
    ) -> None:
        """Show configuration, or list its sections."""
        _handle_stage_result(cmd_show)(section)

    @app.command(name="validate")
    def validate_cmd() -> None:
        """Validate the configured delimiters."""
        _handle_stage_result(cmd_validate)()

    @app.command(name="version")
    def version_cmd() -> None:
        """Show RangeLink version information."""
        _handle_stage_result(cmd_version)()

    return app
