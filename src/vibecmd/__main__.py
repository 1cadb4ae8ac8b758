"""CLI entry point: `vc` (cmd), `vc init`, `vc docs list|read`."""

from __future__ import annotations

import click

from .commands import init_project
from .commands.listing import handle_docs, show_command_files, show_docs_list
from .commands.runner import handle_cmd
from .core.config import load_settings
from .core.utils import short_cwd
from .tui import TerminalPrompter
from .tui.renderer import console, log_celebration, log_success, log_warning, report_exception


@click.group(invoke_without_command=True)
@click.option("--verbose", "-v", is_flag=True, help="Show tracebacks for errors")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """vibe-cmd: resolve doc-bound commands into a prompt for your AI assistant."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    if ctx.invoked_subcommand is None:
        ctx.invoke(cmd)


@cli.command()
@click.option("--assistant", "-a", default=None, help="Assistant key: claude, cursor, gemini")
@click.pass_context
def cmd(ctx: click.Context, assistant: str | None):
    """Select a command, answer its questions, and send the prompt."""
    settings = load_settings(assistant=assistant, verbose=ctx.obj.get("verbose", False))
    handle_cmd(settings, TerminalPrompter())


@cli.command()
@click.pass_context
def init(ctx: click.Context):
    """Scaffold vc.config.json and .vc/ in the current directory."""
    settings = load_settings(verbose=ctx.obj.get("verbose", False))
    try:
        created = init_project(settings.cwd)
    except OSError as e:
        report_exception("init failed", e, settings.verbose)
        return
    if not created:
        log_warning(f"already initialized: {short_cwd(settings.cwd)}")
        return
    for path in created:
        log_success(f"created/updated {path}")
    console.print()
    log_celebration("vibe-cmd is ready. Edit vc.config.json and run `vc`.")


@cli.group()
def docs():
    """Inspect the docs bound to each command."""


@docs.command("list")
@click.option("--command", "-c", "command_name", default=None, help="Show one command only")
@click.pass_context
def docs_list(ctx: click.Context, command_name: str | None):
    """List commands and the files their patterns resolve to."""
    settings = load_settings(verbose=ctx.obj.get("verbose", False))
    handle_docs(settings, show_docs_list, command_name)


@docs.command("read")
@click.argument("name")
@click.pass_context
def docs_read(ctx: click.Context, name: str):
    """Print the files of one command with a read-first instruction."""
    settings = load_settings(verbose=ctx.obj.get("verbose", False))
    handle_docs(settings, show_command_files, name)


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
