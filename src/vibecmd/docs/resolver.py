"""DocResolver: glob patterns -> ResolvedDocPattern, with per-pattern failure isolation.

Patterns are expanded one at a time, in input order, relative to the working
directory. A pattern whose expansion raises records the error on its own entry
and never affects its siblings.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from vibecmd.core.config import Settings
from vibecmd.core.errors import CommandNotFound, PatternExpansionError
from vibecmd.core.utils import relative_posix, strip_root

from .loader import load_command_config
from .models import CommandEntry, DocsResult, ResolvedCommand, ResolvedDocPattern


def expand_pattern(pattern: str, base: Path) -> list[str]:
    """Expand one glob against *base*. Returns sorted relative POSIX paths of files."""
    try:
        matches = [p for p in base.glob(strip_root(pattern)) if p.is_file()]
    except (ValueError, NotImplementedError, OSError) as e:
        raise PatternExpansionError(pattern, str(e) or e.__class__.__name__) from e
    return sorted({relative_posix(p, base) for p in matches})


def _expand_set(patterns: Iterable[str], base: Path) -> set[str]:
    files: set[str] = set()
    for pattern in patterns:
        try:
            files.update(expand_pattern(pattern, base))
        except PatternExpansionError:
            continue
    return files


def resolve_patterns(
    patterns: Iterable[str],
    base: Path,
    ignore: Iterable[str] = (),
    inline: bool = False,
) -> tuple[ResolvedDocPattern, ...]:
    """Resolve each pattern in order; subtract files matched by *ignore* by exact path."""
    ignored = _expand_set(ignore, base)
    resolved: list[ResolvedDocPattern] = []
    for pattern in patterns:
        try:
            files = expand_pattern(pattern, base)
        except PatternExpansionError as e:
            resolved.append(ResolvedDocPattern(pattern=pattern, error=e.reason, inline=inline))
            continue
        kept = tuple(f for f in files if f not in ignored)
        resolved.append(ResolvedDocPattern(pattern=pattern, matched_files=kept, inline=inline))
    return tuple(resolved)


def resolve_command(entry: CommandEntry, base: Path) -> ResolvedCommand:
    """One resolution pass: inline patterns first, then body patterns minus ignores."""
    inline = resolve_patterns(entry.inline_doc_patterns, base, inline=True)
    body = resolve_patterns(entry.doc_patterns, base, ignore=entry.ignore_patterns)
    return ResolvedCommand(
        name=entry.name,
        description=entry.description,
        patterns=inline + body,
        sub_commands=entry.sub_commands,
        pre_commands=entry.pre_commands,
    )


def extend_command(
    resolved: ResolvedCommand,
    extra_patterns: Iterable[str],
    base: Path,
    ignore: Iterable[str] = (),
) -> ResolvedCommand:
    """Append answer-driven patterns as independent entries. Returns a new command."""
    extra_patterns = list(extra_patterns)
    if not extra_patterns:
        return resolved
    return resolved.with_patterns(resolve_patterns(extra_patterns, base, ignore=ignore))


def get_command_docs(settings: Settings, command_name: str | None = None) -> DocsResult:
    """Load the config and resolve every command (or only *command_name*)."""
    config = load_command_config(settings.config_path)
    entries = config.commands
    if command_name:
        entries = tuple(e for e in entries if e.name == command_name)
    return DocsResult(commands=[resolve_command(e, settings.cwd) for e in entries])


def read_command_files(settings: Settings, command_name: str) -> tuple[str, list[str]]:
    """Listing of a command's existing doc files with a read-first instruction."""
    result = get_command_docs(settings, command_name)
    if not result.commands:
        raise CommandNotFound(command_name)

    loaded: list[str] = []
    for command in result.commands:
        for pattern in command.patterns:
            if pattern.exists:
                loaded.extend(pattern.matched_files)

    listing = "\n".join(f"- {f}" for f in loaded)
    content = (
        f'Files related to command "{command_name}" ({len(loaded)}):\n\n'
        f"{listing}\n\n"
        "**Important**: read every file above before starting work.\n"
        f'They contain the key information about "{command_name}".'
    )
    return content, loaded
