"""Doc data models: CommandEntry, SubCommand, ResolvedDocPattern, ResolvedCommand."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from vibecmd.core.config import DEFAULT_DOCS_DIR


@dataclass(frozen=True)
class Answer:
    """A selectable answer; choosing it may add doc patterns."""

    label: str
    extra_doc_patterns: tuple[str, ...] = ()


@dataclass(frozen=True)
class SubCommand:
    """An interactive question. No question = no prompt; no answers = free text."""

    name: str
    question: str = ""
    answers: tuple[Answer, ...] = ()

    @property
    def is_interactive(self) -> bool:
        return bool(self.question)

    @property
    def is_choice(self) -> bool:
        return len(self.answers) > 0


@dataclass(frozen=True)
class CommandEntry:
    name: str
    description: str
    doc_patterns: tuple[str, ...] = ()
    ignore_patterns: tuple[str, ...] = ()
    inline_doc_patterns: tuple[str, ...] = ()
    pre_commands: tuple[str, ...] = ()
    sub_commands: tuple[SubCommand, ...] = ()


@dataclass(frozen=True)
class CommandConfig:
    commands: tuple[CommandEntry, ...] = ()
    docs_directory: str = DEFAULT_DOCS_DIR

    def get(self, name: str) -> CommandEntry | None:
        for entry in self.commands:
            if entry.name == name:
                return entry
        return None

    @property
    def names(self) -> list[str]:
        return [c.name for c in self.commands]


@dataclass(frozen=True)
class ResolvedDocPattern:
    pattern: str
    matched_files: tuple[str, ...] = ()
    error: str | None = None
    inline: bool = False

    @property
    def exists(self) -> bool:
        return self.error is None and len(self.matched_files) > 0


@dataclass(frozen=True)
class ResolvedCommand:
    """Result of one resolution pass. Inline patterns come first."""

    name: str
    description: str
    patterns: tuple[ResolvedDocPattern, ...] = ()
    sub_commands: tuple[SubCommand, ...] = ()
    pre_commands: tuple[str, ...] = ()

    @property
    def total_file_count(self) -> int:
        return sum(len(p.matched_files) for p in self.patterns if not p.inline)

    @property
    def inline_doc_files(self) -> list[str]:
        return [f for p in self.patterns if p.inline for f in p.matched_files]

    def with_patterns(self, extra: tuple[ResolvedDocPattern, ...]) -> ResolvedCommand:
        """New command with *extra* appended; self is left untouched."""
        return replace(self, patterns=self.patterns + tuple(extra))


@dataclass
class DocsResult:
    commands: list[ResolvedCommand] = field(default_factory=list)

    @property
    def total_commands(self) -> int:
        return len(self.commands)
