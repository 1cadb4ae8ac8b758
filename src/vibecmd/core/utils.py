"""Path helpers shared by the loader, resolver and assembler."""

from __future__ import annotations

from pathlib import Path


def strip_root(pattern: str) -> str:
    """Patterns are project-root relative: '/docs/*.md' -> 'docs/*.md'."""
    return pattern[1:] if pattern.startswith("/") else pattern


def relative_posix(path: Path, base: Path) -> str:
    """Return *path* relative to *base* with forward slashes."""
    try:
        return path.relative_to(base).as_posix()
    except ValueError:
        return path.as_posix()


def read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8", errors="replace")


def short_cwd(p: Path) -> str:
    """Return path relative to home directory, using ~ prefix."""
    try:
        rel = p.relative_to(Path.home())
        return f"~/{rel}" if str(rel) != "." else "~"
    except ValueError:
        return str(p)
