"""
Command registry.

Single table of every command word, its argument parser and a short
description. The suggestion vocabulary is derived from this table, so a
command cannot be dispatchable without also being suggestible.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from medrec import parsers
from medrec.model import RecordKind
from medrec.parsers import Parser


@dataclass(frozen=True)
class CommandSpec:
    """
    Registry entry.

    Attributes:
        word: Exact command word, e.g. "help" or "add t/patient".
        parser: Turns the argument tail into a command.
        description: One-line description for palettes and listings.
    """

    word: str
    parser: Parser
    description: str


# Order matters: suggestion ties are broken by position in this list
COMMANDS: List[CommandSpec] = [
    CommandSpec("help", parsers.parse_help, "Show the list of commands"),
    CommandSpec("add t/patient", parsers.parse_add_patient, "Add a patient"),
    CommandSpec("view t/patient", parsers.parse_view_patient, "Show a patient's details"),
    CommandSpec("delete t/patient", parsers.parse_delete_patient, "Delete a patient"),
    CommandSpec("edit t/patient", parsers.parse_edit_patient, "Edit a patient"),
    CommandSpec("list t/patient", parsers.list_parser(RecordKind.PATIENT), "List all patients"),
    CommandSpec("clear t/patient", parsers.clear_parser(RecordKind.PATIENT), "Delete all patients"),
    CommandSpec("add t/doctor", parsers.parse_add_doctor, "Add a doctor"),
    CommandSpec("view t/doctor", parsers.parse_view_doctor, "Show a doctor's details"),
    CommandSpec("delete t/doctor", parsers.parse_delete_doctor, "Delete a doctor"),
    CommandSpec("edit t/doctor", parsers.parse_edit_doctor, "Edit a doctor"),
    CommandSpec("list t/doctor", parsers.list_parser(RecordKind.DOCTOR), "List all doctors"),
    CommandSpec("clear t/doctor", parsers.clear_parser(RecordKind.DOCTOR), "Delete all doctors"),
    CommandSpec("find", parsers.parse_find, "Find entries by keyword"),
    CommandSpec("add t/activity", parsers.parse_add_activity, "Add a scheduled activity"),
    CommandSpec("delete t/activity", parsers.parse_delete_activity, "Delete an activity"),
    CommandSpec(
        "list t/activity", parsers.list_parser(RecordKind.ACTIVITY), "List all activities"
    ),
    CommandSpec(
        "clear t/activity", parsers.clear_parser(RecordKind.ACTIVITY), "Delete all activities"
    ),
    CommandSpec("exit", parsers.parse_exit, "Exit the application"),
]

REGISTRY: Dict[str, CommandSpec] = {spec.word: spec for spec in COMMANDS}

VOCABULARY: Tuple[str, ...] = tuple(spec.word for spec in COMMANDS)


def find_command(word: str) -> Optional[CommandSpec]:
    """
    Look up a command word. Matching is exact and case-sensitive.

    Args:
        word: Command word as isolated by the tokenizer.

    Returns:
        Registry entry if found, None otherwise.
    """
    return REGISTRY.get(word)
