"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click

    from rangelink.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        from rangelink.api.config.cmd_version import cmd_version

        result = cmd_version()
        list(result.progress_callback(result))
        print(f"rangelink {result.output.get('full_version', 'unknown')}")
        return 0 if result.success else 1

    _setup_logging()

    app = _create_app()
    try:
        exit_code = app(argv, standalone_mode=False)
    except click.exceptions.Abort:
        return 1
    except click.exceptions.UsageError as e:
        click.echo(f"Usage error: {e}", err=True)
        return 2
    return exit_code if isinstance(exit_code, int) else 0


def _setup_logging() -> None:
    """Configure file logging at the configured level; an unreadable config keeps INFO."""
    from rangelink.api.config.RangeLinkConfig import RangeLinkConfig
    from rangelink.utils.logger import configure_logging

    try:
        level = RangeLinkConfig.load().log.level
    except ValueError:
        level = "INFO"
    configure_logging(level=level)
