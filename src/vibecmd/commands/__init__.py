"""Commands: questionnaire, prompt assembly and project scaffolding.

The interactive flow lives in ``commands.runner`` and the docs views in
``commands.listing``; both depend on ``vibecmd.dispatch`` and are imported
directly.
"""

from .assembler import (
    assemble_prompt,
    build_file_references,
    build_prompt_body,
    referenced_files,
)
from .questionnaire import Questionnaire, QuestionnaireResult, QuestionState, ask_sub_commands
from .scaffold import COMMAND_INSTRUCTION, init_project

__all__ = [
    "COMMAND_INSTRUCTION",
    "QuestionState",
    "Questionnaire",
    "QuestionnaireResult",
    "ask_sub_commands",
    "assemble_prompt",
    "build_file_references",
    "build_prompt_body",
    "init_project",
    "referenced_files",
]
