"""Tests for the questionnaire fold: answers, skipped questions, extra patterns."""

from conftest import ScriptedPrompter

from vibecmd.commands.questionnaire import Questionnaire, QuestionState, ask_sub_commands
from vibecmd.docs import Answer, CommandEntry, SubCommand, extend_command, resolve_command

DEPLOY_SUBS = (
    SubCommand(
        "target",
        "Which environment?",
        (Answer("staging", ("docs/staging/*.md",)), Answer("prod")),
    ),
)


class TestAskSubCommands:
    def test_choice_records_label(self):
        result = ask_sub_commands(DEPLOY_SUBS, ScriptedPrompter("prod"))
        assert result.answers == {"target": "prod"}
        assert result.additional_patterns == []

    def test_choice_constrained_to_labels(self):
        prompter = ScriptedPrompter(0)
        ask_sub_commands(DEPLOY_SUBS, prompter)
        assert prompter.asked == [("choice", "Which environment?", ["staging", "prod"])]

    def test_choice_collects_extra_patterns(self):
        result = ask_sub_commands(DEPLOY_SUBS, ScriptedPrompter("staging"))
        assert result.answers == {"target": "staging"}
        assert result.additional_patterns == ["docs/staging/*.md"]

    def test_free_text(self):
        subs = (SubCommand("feature", "What to build?"),)
        prompter = ScriptedPrompter("login form")
        result = ask_sub_commands(subs, prompter)
        assert result.answers == {"feature": "login form"}
        assert prompter.asked[0][0] == "text"

    def test_no_question_skipped(self):
        subs = (
            SubCommand("silent"),
            SubCommand("feature", "What?"),
            SubCommand("also-silent", answers=(Answer("x", ("x/*.md",)),)),
        )
        prompter = ScriptedPrompter("thing")
        result = ask_sub_commands(subs, prompter)
        assert result.answers == {"feature": "thing"}
        assert result.additional_patterns == []
        assert len(prompter.asked) == 1

    def test_order_preserved(self):
        subs = (
            SubCommand("b", "B?", (Answer("b1", ("b/1.md", "b/2.md")),)),
            SubCommand("a", "A?"),
            SubCommand("c", "C?", (Answer("c1", ("c/*.md",)),)),
        )
        result = ask_sub_commands(subs, ScriptedPrompter("b1", "free", "c1"))
        assert list(result.answers) == ["b", "a", "c"]
        assert result.additional_patterns == ["b/1.md", "b/2.md", "c/*.md"]

    def test_fresh_pass_each_call(self):
        first = ask_sub_commands(DEPLOY_SUBS, ScriptedPrompter("staging"))
        second = ask_sub_commands(DEPLOY_SUBS, ScriptedPrompter("prod"))
        assert first.additional_patterns == ["docs/staging/*.md"]
        assert second.additional_patterns == []


class TestQuestionnaireStates:
    def test_empty_is_done(self):
        q = Questionnaire(())
        assert q.done
        assert q.state is QuestionState.DONE

    def test_transitions(self):
        q = Questionnaire((SubCommand("a", "A?"), SubCommand("b", "B?")))
        prompter = ScriptedPrompter("1", "2")
        assert q.state is QuestionState.PENDING
        assert q.step(prompter) is QuestionState.ANSWER_COLLECTED
        assert q.step(prompter) is QuestionState.PENDING
        assert q.index == 1
        assert q.step(prompter) is QuestionState.ANSWER_COLLECTED
        assert q.step(prompter) is QuestionState.DONE
        assert q.step(prompter) is QuestionState.DONE
        assert q.result.answers == {"a": "1", "b": "2"}


class TestDeployScenario:
    def _resolve(self, tmp_path, choice):
        entry = CommandEntry(
            "deploy", "Deploy", doc_patterns=("docs/deploy/*.md",), sub_commands=DEPLOY_SUBS
        )
        result = ask_sub_commands(entry.sub_commands, ScriptedPrompter(choice))
        resolved = resolve_command(entry, tmp_path)
        return extend_command(resolved, result.additional_patterns, tmp_path)

    def test_staging_appends_pattern(self, tmp_path, write_files):
        write_files("docs/deploy/d.md", "docs/staging/s.md")
        resolved = self._resolve(tmp_path, "staging")
        assert [p.pattern for p in resolved.patterns] == ["docs/deploy/*.md", "docs/staging/*.md"]
        assert resolved.patterns[1].matched_files == ("docs/staging/s.md",)

    def test_prod_adds_nothing(self, tmp_path, write_files):
        write_files("docs/deploy/d.md", "docs/staging/s.md")
        resolved = self._resolve(tmp_path, "prod")
        assert [p.pattern for p in resolved.patterns] == ["docs/deploy/*.md"]
