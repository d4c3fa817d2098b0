"""Main CLI entry point.

Every file command maps onto one operation of :mod:`filetool.ops`:

    filetool mkdir data/inbox
    filetool sequence data/inbox "Report.TXT" 3 --policy lower
    filetool copy data/inbox/report.txt backup
    filetool rename-all backup photo.jpg --policy lower
"""

import json
import sys
from collections.abc import Callable
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from filetool import ops
from filetool.cli.config_cmd import config
from filetool.cli.error_handler import handle_error
from filetool.foundation.config import get_config, load_config, override_config
from filetool.foundation.errors import FileToolError
from filetool.foundation.logging import configure_logging
from filetool.foundation.utils import sanitize_filename, sanitize_path

console = Console()


def _json_output() -> bool:
    ctx = click.get_current_context()
    return bool(ctx.find_root().obj and ctx.find_root().obj.get("json"))


def _policy(policy: str | None) -> str:
    return get_config().default_policy if policy is None else policy


def _run(operation: Callable[..., FileToolError | None], *args: object, done: str) -> None:
    """Run an operation, print ``done`` on success, exit 1 on a reported error."""
    error = operation(*args, sink=ops.null_sink)
    if error is not None:
        handle_error(error, json_output=_json_output())
    if _json_output():
        click.echo(json.dumps({"ok": True, "message": done}))
    else:
        console.print(f"[green]✓[/green] {escape(done)}")


def _parse_mode(
    ctx: click.Context, param: click.Parameter, value: str | None,
) -> int | None:
    if value is None:
        return None
    try:
        return int(value.removeprefix("0o"), 8)
    except ValueError:
        raise click.BadParameter(f"'{value}' is not an octal mode") from None


policy_option = click.option(
    "--policy",
    "-p",
    default=None,
    help="Casing policy: none, lower, upper, camel, pascal, date (default from config)",
)


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--json", "json_output", is_flag=True, help="Emit JSON instead of text")
@click.option(
    "--log-file",
    is_flag=True,
    help="Also write a session log to .filetool/logs/",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Explicit config file",
)
@click.version_option(package_name="filetool")
@click.pass_context
def main(
    ctx: click.Context,
    debug: bool,
    json_output: bool,
    log_file: bool,
    config_path: Path | None,
) -> None:
    """FileTool - sanitized file and directory operations."""
    ctx.ensure_object(dict)
    ctx.obj["json"] = json_output
    try:
        load_config(config_path)
        if debug:
            override_config(debug=True)
    except FileToolError as e:
        handle_error(e, json_output=json_output)
    configure_logging(debug=debug, persist=log_file)


main.add_command(config)


# =============================================================================
# Create
# =============================================================================


@main.command()
@click.argument("path")
@click.option("--mode", "-m", callback=_parse_mode, help="Octal mode, e.g. 0755")
def mkdir(path: str, mode: int | None) -> None:
    """Create a directory and its missing parents."""
    _run(ops.create_directory, path, mode, done=f"Created directory {sanitize_path(path)}")


@main.command()
@click.argument("directory")
@click.argument("name")
@policy_option
def touch(directory: str, name: str, policy: str | None) -> None:
    """Create an empty file NAME inside DIRECTORY."""
    _run(ops.create_file, directory, name, _policy(policy), done=f"Created {name} in {directory}")


@main.command()
@click.argument("directory")
@click.argument("name")
@click.argument("count", type=int)
@policy_option
def sequence(directory: str, name: str, count: int, policy: str | None) -> None:
    """Create COUNT empty files: NAME, NAME_1, NAME_2, ..."""
    _run(
        ops.create_sequence, directory, name, _policy(policy), count,
        done=f"Created {count} files in {directory}",
    )


# =============================================================================
# Copy
# =============================================================================


@main.command()
@click.argument("origin")
@click.argument("destination")
def copy(origin: str, destination: str) -> None:
    """Copy a file into DESTINATION, never overwriting."""
    _run(ops.copy_file, origin, destination, done=f"Copied {origin} to {destination}")


@main.command("copy-all")
@click.argument("origin")
@click.argument("destination")
def copy_all(origin: str, destination: str) -> None:
    """Copy every file of ORIGIN into DESTINATION."""
    _run(ops.copy_all_files, origin, destination, done=f"Copied {origin} to {destination}")


@main.command("copy-content")
@click.argument("source")
@click.argument("destination")
def copy_content(source: str, destination: str) -> None:
    """Overwrite DESTINATION with the content of SOURCE."""
    _run(ops.copy_file_content, source, destination, done=f"Copied content to {destination}")


# =============================================================================
# Remove
# =============================================================================


@main.command()
@click.argument("path")
def rmdir(path: str) -> None:
    """Remove an empty directory."""
    _run(ops.remove_directory, path, done=f"Removed directory {path}")


@main.command()
@click.argument("path")
def rm(path: str) -> None:
    """Remove a file."""
    _run(ops.remove_file, path, done=f"Removed {path}")


@main.command("rm-all")
@click.argument("path")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
def rm_all(path: str, yes: bool) -> None:
    """Remove every file in PATH, then PATH itself."""
    if not yes:
        click.confirm(f"Delete all files in {path} and the directory?", abort=True)
    _run(ops.remove_all_and_directory, path, done=f"Removed {path}")


# =============================================================================
# Rename
# =============================================================================


@main.command()
@click.argument("old")
@click.argument("new")
@policy_option
def rename(old: str, new: str, policy: str | None) -> None:
    """Rename or move OLD to NEW."""
    _run(ops.rename, old, new, _policy(policy), done=f"Renamed {old}")


@main.command("rename-all")
@click.argument("directory")
@click.argument("name")
@policy_option
def rename_all(directory: str, name: str, policy: str | None) -> None:
    """Rename every entry of DIRECTORY to NAME_1, NAME_2, ..."""
    _run(
        ops.rename_all_sequential, directory, name, _policy(policy),
        done=f"Renamed entries of {directory}",
    )


# =============================================================================
# Sanitize
# =============================================================================


@main.command("sanitize-path")
@click.argument("value")
def sanitize_path_cmd(value: str) -> None:
    """Print VALUE sanitized as a directory path."""
    click.echo(sanitize_path(value))


@main.command("sanitize-name")
@click.argument("value")
@policy_option
def sanitize_name_cmd(value: str, policy: str | None) -> None:
    """Print VALUE sanitized as a filename."""
    try:
        click.echo(sanitize_filename(value, _policy(policy)))
    except FileToolError as e:
        handle_error(e, json_output=_json_output())


if __name__ == "__main__":
    sys.exit(main())
