"""
Executable commands.

Each parser produces one immutable command; executing it against a Model
yields a CommandResult. Commands check everything they need before changing
the model, so a CommandError always leaves the model untouched.
"""

import dataclasses
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from medrec.errors import CommandError
from medrec.messages import (
    MESSAGE_DUPLICATE_RECORD,
    MESSAGE_HELP_COMMANDS,
    MESSAGE_INVALID_ID,
    MESSAGE_ITEMS_LISTED_OVERVIEW,
)
from medrec.model import PREDICATE_SHOW_ALL, Model, Record, RecordKind, record_values

logger = logging.getLogger(__name__)


class DisplayChange(Enum):
    """What the user surface should show after a command."""

    PATIENTS = "patients"
    DOCTORS = "doctors"
    ACTIVITIES = "activities"
    PATIENT_DETAIL = "patient_detail"
    DOCTOR_DETAIL = "doctor_detail"
    HELP = "help"
    EXIT = "exit"


LIST_DISPLAY = {
    RecordKind.PATIENT: DisplayChange.PATIENTS,
    RecordKind.DOCTOR: DisplayChange.DOCTORS,
    RecordKind.ACTIVITY: DisplayChange.ACTIVITIES,
}

DETAIL_DISPLAY = {
    RecordKind.PATIENT: DisplayChange.PATIENT_DETAIL,
    RecordKind.DOCTOR: DisplayChange.DOCTOR_DETAIL,
}


@dataclass(frozen=True)
class CommandResult:
    """
    Outcome of one input line.

    Attributes:
        message: Feedback shown to the user.
        display: Display change requested, if any.
        record: Record the display change refers to (detail views only).
        error: True if the line was rejected.
    """

    message: str
    display: Optional[DisplayChange] = None
    record: Optional[Record] = None
    error: bool = False

    @property
    def is_exit(self) -> bool:
        return self.display is DisplayChange.EXIT

    @property
    def is_help(self) -> bool:
        return self.display is DisplayChange.HELP


def describe(record: Record) -> str:
    """One-line summary of a record, e.g. "P001 John Doe; Phone: 98765432"."""
    parts = []
    for f in dataclasses.fields(record):
        if f.name == "id":
            continue
        value = getattr(record, f.name)
        if isinstance(value, tuple):
            value = ", ".join(value)
        if value:
            parts.append(f"{f.name.replace('_', ' ').capitalize()}: {value}")
    return f"{record.id} " + "; ".join(parts)


class Command(ABC):
    """Base class for all commands."""

    @abstractmethod
    def execute(self, model: Model) -> CommandResult:
        """
        Run the command.

        Args:
            model: Model to query and update.

        Returns:
            Result to display.

        Raises:
            CommandError: If the model state does not allow the command.
        """
        pass


def _require_record(model: Model, kind: RecordKind, record_id: str) -> Record:
    record = model.get(kind, record_id)
    if record is None:
        raise CommandError(MESSAGE_INVALID_ID.format(kind.value))
    return record


class _AddCommand(Command):
    """Shared add behaviour: duplicate check, insert, show the list."""

    kind: RecordKind

    def _check(self, model: Model) -> None:
        pass

    def execute(self, model: Model) -> CommandResult:
        fields = dataclasses.asdict(self)
        self._check(model)
        if model.has_duplicate(self.kind, fields):
            raise CommandError(MESSAGE_DUPLICATE_RECORD.format(self.kind.value))

        record = model.add(self.kind, fields)
        model.update_filtered_list(self.kind, PREDICATE_SHOW_ALL)
        return CommandResult(
            f"New {self.kind.value} added: {describe(record)}", LIST_DISPLAY[self.kind]
        )


@dataclass(frozen=True)
class AddPatientCommand(_AddCommand):
    name: str
    phone: str
    age: Optional[str] = None
    gender: Optional[str] = None
    blood_type: Optional[str] = None
    conditions: Tuple[str, ...] = ()

    kind = RecordKind.PATIENT


@dataclass(frozen=True)
class AddDoctorCommand(_AddCommand):
    name: str
    phone: str
    department: Optional[str] = None

    kind = RecordKind.DOCTOR


@dataclass(frozen=True)
class AddActivityCommand(_AddCommand):
    title: str
    start: str
    end: str
    patient_id: Optional[str] = None
    description: Optional[str] = None

    kind = RecordKind.ACTIVITY

    def _check(self, model: Model) -> None:
        if self.patient_id is not None:
            _require_record(model, RecordKind.PATIENT, self.patient_id)


@dataclass(frozen=True)
class EditCommand(Command):
    """Overwrite selected fields of a patient or doctor."""

    kind: RecordKind
    record_id: str
    changes: Tuple[Tuple[str, object], ...]

    def execute(self, model: Model) -> CommandResult:
        record = _require_record(model, self.kind, self.record_id)
        changes = dict(self.changes)

        merged = {**dataclasses.asdict(record), **changes}
        if model.has_duplicate(self.kind, merged, exclude_id=self.record_id):
            raise CommandError(MESSAGE_DUPLICATE_RECORD.format(self.kind.value))

        edited = model.replace(self.kind, self.record_id, changes)
        model.update_filtered_list(self.kind, PREDICATE_SHOW_ALL)
        return CommandResult(
            f"Edited {self.kind.value}: {describe(edited)}", LIST_DISPLAY[self.kind]
        )


@dataclass(frozen=True)
class ViewCommand(Command):
    """Show one patient or doctor in full."""

    kind: RecordKind
    record_id: str

    def execute(self, model: Model) -> CommandResult:
        record = _require_record(model, self.kind, self.record_id)
        return CommandResult(
            f"Viewing {self.kind.value}: {describe(record)}", DETAIL_DISPLAY[self.kind], record
        )


@dataclass(frozen=True)
class DeleteCommand(Command):
    kind: RecordKind
    record_id: str

    def execute(self, model: Model) -> CommandResult:
        _require_record(model, self.kind, self.record_id)
        record = model.delete(self.kind, self.record_id)
        return CommandResult(
            f"Deleted {self.kind.value}: {describe(record)}", LIST_DISPLAY[self.kind]
        )


@dataclass(frozen=True)
class FindCommand(Command):
    """
    Filter every list to records containing any keyword.

    Keywords match as case-insensitive substrings of any attribute value.
    """

    keywords: Tuple[str, ...]

    def matches(self, record: Record) -> bool:
        values = [value.lower() for value in record_values(record)]
        return any(keyword.lower() in value for keyword in self.keywords for value in values)

    def execute(self, model: Model) -> CommandResult:
        found = 0
        for kind in RecordKind:
            model.update_filtered_list(kind, self.matches)
            found += len(model.filtered(kind))
        return CommandResult(MESSAGE_ITEMS_LISTED_OVERVIEW.format(found), DisplayChange.PATIENTS)


@dataclass(frozen=True)
class ListCommand(Command):
    kind: RecordKind

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_list(self.kind, PREDICATE_SHOW_ALL)
        plural = "activities" if self.kind is RecordKind.ACTIVITY else f"{self.kind.value}s"
        return CommandResult(f"Listed all {plural}", LIST_DISPLAY[self.kind])


@dataclass(frozen=True)
class ClearCommand(Command):
    kind: RecordKind

    def execute(self, model: Model) -> CommandResult:
        removed = model.clear(self.kind)
        model.update_filtered_list(self.kind, PREDICATE_SHOW_ALL)
        logger.info(f"Cleared {removed} {self.kind.value} records")
        return CommandResult(
            f"All {self.kind.value} records have been cleared!", LIST_DISPLAY[self.kind]
        )


@dataclass(frozen=True)
class HelpCommand(Command):
    def execute(self, model: Model) -> CommandResult:
        return CommandResult(MESSAGE_HELP_COMMANDS, DisplayChange.HELP)


@dataclass(frozen=True)
class ExitCommand(Command):
    def execute(self, model: Model) -> CommandResult:
        return CommandResult("Exiting MedRec as requested ...", DisplayChange.EXIT)
