"""Tests for prompt assembly: fixed section order, inline docs, @ references."""

import pytest

from vibecmd.commands.assembler import (
    assemble_prompt,
    build_file_references,
    build_prompt_body,
    referenced_files,
)
from vibecmd.core.errors import InlineDocReadError
from vibecmd.docs import ResolvedCommand, ResolvedDocPattern


def _command(*patterns, name="release", description="Ship it"):
    return ResolvedCommand(name=name, description=description, patterns=tuple(patterns))


class TestBuildPromptBody:
    def test_name_and_purpose(self, tmp_path):
        body = build_prompt_body(_command(), {}, base=tmp_path)
        assert body == "release\n\nPurpose: Ship it"

    def test_answers_in_order(self, tmp_path):
        body = build_prompt_body(_command(), {"target": "staging", "note": "asap"}, base=tmp_path)
        assert body.endswith("\n\nInputs:\n- target: staging\n- note: asap")

    def test_option_line(self, tmp_path):
        body = build_prompt_body(_command(), {"a": "b"}, option="--fast", base=tmp_path)
        assert body.endswith("- a: b\n\nAdditional options: --fast")

    def test_empty_option_omitted(self, tmp_path):
        assert "Additional options" not in build_prompt_body(_command(), {}, "", tmp_path)

    def test_inline_docs_first(self, tmp_path, write_files):
        write_files("inline/1.md", content="first\n")
        write_files("inline/2.md", content="second")
        cmd = _command(
            ResolvedDocPattern("inline/*.md", ("inline/1.md", "inline/2.md"), inline=True),
            ResolvedDocPattern("docs/*.md", ("docs/a.md",)),
        )
        body = build_prompt_body(cmd, {}, base=tmp_path)
        assert body == "first\n\nsecond\n\nrelease\n\nPurpose: Ship it"

    def test_unreadable_inline_doc(self, tmp_path):
        cmd = _command(ResolvedDocPattern("x.md", ("x.md",), inline=True))
        with pytest.raises(InlineDocReadError):
            build_prompt_body(cmd, {}, base=tmp_path)


class TestFileReferences:
    def test_only_existing_patterns(self):
        cmd = _command(
            ResolvedDocPattern("docs/*.md", ("docs/a.md", "docs/b.md")),
            ResolvedDocPattern("none/*.md"),
            ResolvedDocPattern("", error="Unacceptable pattern"),
        )
        assert build_file_references(cmd) == "@docs/a.md @docs/b.md "

    def test_deduplicated_first_wins(self):
        cmd = _command(
            ResolvedDocPattern("docs/b.md", ("docs/b.md",)),
            ResolvedDocPattern("docs/*.md", ("docs/a.md", "docs/b.md")),
        )
        assert referenced_files(cmd) == ["docs/b.md", "docs/a.md"]

    def test_empty(self):
        assert build_file_references(_command()) == ""


class TestAssemblePrompt:
    def test_references_prepended(self, tmp_path):
        cmd = _command(ResolvedDocPattern("docs/*.md", ("docs/a.md",)))
        prompt = assemble_prompt(cmd, {"k": "v"}, base=tmp_path)
        assert prompt == "@docs/a.md release\n\nPurpose: Ship it\n\nInputs:\n- k: v"

    def test_references_omitted(self, tmp_path):
        cmd = _command(ResolvedDocPattern("docs/*.md", ("docs/a.md",)))
        prompt = assemble_prompt(cmd, {}, base=tmp_path, include_references=False)
        assert not prompt.startswith("@")

    def test_deterministic(self, tmp_path, write_files):
        write_files("inline/i.md", content="ctx")
        cmd = _command(
            ResolvedDocPattern("inline/i.md", ("inline/i.md",), inline=True),
            ResolvedDocPattern("docs/*.md", ("docs/a.md",)),
        )
        answers = {"x": "1"}
        first = assemble_prompt(cmd, answers, "opt", tmp_path)
        assert first == assemble_prompt(cmd, answers, "opt", tmp_path)
