"""Project scaffolding: `vc init` copies templates and registers the `:` instruction."""

from __future__ import annotations

import shutil
from pathlib import Path

from vibecmd.core.config import CONFIG_FILE_NAME, DEFAULT_DOCS_DIR

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

CLAUDE_MD_FILE = "CLAUDE.md"
CURSOR_RULES_FILE = Path(".cursor") / "rules" / "vibe-cmd.mdc"

INSTRUCTION_MARKER = "<!-- added by vibe-cmd -->"

COMMAND_INSTRUCTION = f"""

{INSTRUCTION_MARKER}
When the user types ":" run:

```
vc
```

A selection list appears after the command starts:
1. ":" alone: let the user pick a command.
2. ":<name>": pick the command whose name matches the text after ":".

<!-- end of vibe-cmd instructions -->
"""

CLAUDE_MD_TEMPLATE = "# Instructions for Claude Code\n{instruction}"

CURSOR_RULES_TEMPLATE = """\
---
description:
globs:
alwaysApply: true
---

# vibe-cmd instructions for Cursor
{instruction}"""


def _copy_tree(src: Path, dest: Path, cwd: Path) -> list[str]:
    """Copy files under *src* that are missing in *dest*."""
    created: list[str] = []
    for path in sorted(src.rglob("*")):
        if not path.is_file():
            continue
        target = dest / path.relative_to(src)
        if target.exists():
            continue
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(path, target)
        created.append(target.relative_to(cwd).as_posix())
    return created


def _register_instruction(path: Path, template: str, cwd: Path) -> str | None:
    """Append the instruction block once. Returns the relative path if touched."""
    rel = path.relative_to(cwd).as_posix()
    if path.exists():
        existing = path.read_text(encoding="utf-8")
        if INSTRUCTION_MARKER in existing:
            return None
        path.write_text(existing + COMMAND_INSTRUCTION, encoding="utf-8")
        return rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(template.format(instruction=COMMAND_INSTRUCTION), encoding="utf-8")
    return rel


def init_project(cwd: Path | None = None, templates: Path = TEMPLATES_DIR) -> list[str]:
    """Scaffold vc.config.json + .vc/ and register the instruction. Returns touched paths."""
    cwd = cwd or Path.cwd()
    created: list[str] = []

    config_path = cwd / CONFIG_FILE_NAME
    if not config_path.exists():
        shutil.copyfile(templates / CONFIG_FILE_NAME, config_path)
        created.append(CONFIG_FILE_NAME)

    created.extend(_copy_tree(templates / "docs", cwd / DEFAULT_DOCS_DIR, cwd))

    for path, template in (
        (cwd / CLAUDE_MD_FILE, CLAUDE_MD_TEMPLATE),
        (cwd / CURSOR_RULES_FILE, CURSOR_RULES_TEMPLATE),
    ):
        touched = _register_instruction(path, template, cwd)
        if touched:
            created.append(touched)

    return created
