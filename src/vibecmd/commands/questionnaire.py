"""Questionnaire: walk a command's sub-commands, collect answers and extra doc patterns.

States: Pending(i) -> AnswerCollected(i) -> Pending(i+1) ... -> Done. Sub-commands
without a question are skipped without an entry in the answer map. The walk is a
fold: the command itself is never touched; the caller resolves the accumulated
``additional_patterns`` in a single second pass.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from vibecmd.docs.models import SubCommand
from vibecmd.tui.prompter import Prompter
from vibecmd.tui.renderer import console


class QuestionState(Enum):
    PENDING = "pending"
    ANSWER_COLLECTED = "answer_collected"
    DONE = "done"


@dataclass
class QuestionnaireResult:
    answers: dict[str, str] = field(default_factory=dict)
    additional_patterns: list[str] = field(default_factory=list)


class Questionnaire:
    def __init__(self, sub_commands: tuple[SubCommand, ...] | list[SubCommand]):
        self.sub_commands = tuple(sub_commands)
        self.index = 0
        self.state = QuestionState.PENDING if self.sub_commands else QuestionState.DONE
        self.result = QuestionnaireResult()

    @property
    def done(self) -> bool:
        return self.state is QuestionState.DONE

    def step(self, prompter: Prompter) -> QuestionState:
        """Advance one transition."""
        if self.state is QuestionState.DONE:
            return self.state

        if self.state is QuestionState.ANSWER_COLLECTED:
            self.index += 1
            self.state = (
                QuestionState.DONE
                if self.index >= len(self.sub_commands)
                else QuestionState.PENDING
            )
            return self.state

        sub = self.sub_commands[self.index]
        console.print(f"\n📝 {sub.name}", highlight=False)
        if sub.is_interactive:
            self._ask(sub, prompter)
        self.state = QuestionState.ANSWER_COLLECTED
        return self.state

    def _ask(self, sub: SubCommand, prompter: Prompter) -> None:
        if sub.is_choice:
            labels = [a.label for a in sub.answers]
            answer = sub.answers[prompter.ask_choice(sub.question, labels)]
            self.result.answers[sub.name] = answer.label
            self.result.additional_patterns.extend(answer.extra_doc_patterns)
        else:
            self.result.answers[sub.name] = prompter.ask_text(sub.question)

    def run(self, prompter: Prompter) -> QuestionnaireResult:
        while not self.done:
            self.step(prompter)
        return self.result


def ask_sub_commands(
    sub_commands: tuple[SubCommand, ...] | list[SubCommand], prompter: Prompter
) -> QuestionnaireResult:
    """Fresh pass over *sub_commands*; nothing carries over between calls."""
    return Questionnaire(sub_commands).run(prompter)
