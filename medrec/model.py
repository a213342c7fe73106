"""
In-memory record model.

Holds patients, doctors and scheduled activities, assigns their ids, and
keeps one filtered view per record kind for display.
"""

import dataclasses
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple, Union

logger = logging.getLogger(__name__)


class RecordKind(Enum):
    """Record types a command can target."""

    PATIENT = "patient"
    DOCTOR = "doctor"
    ACTIVITY = "activity"

    @property
    def id_prefix(self) -> str:
        """Leading letter of ids issued for this kind (P001, D001, A001)."""
        return self.value[0].upper()


@dataclass(frozen=True)
class Patient:
    id: str
    name: str
    phone: str
    age: Optional[str] = None
    gender: Optional[str] = None
    blood_type: Optional[str] = None
    conditions: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Doctor:
    id: str
    name: str
    phone: str
    department: Optional[str] = None


@dataclass(frozen=True)
class Activity:
    id: str
    title: str
    start: str
    end: str
    patient_id: Optional[str] = None
    description: Optional[str] = None


Record = Union[Patient, Doctor, Activity]
Predicate = Callable[[Record], bool]

RECORD_TYPES: Dict[RecordKind, type] = {
    RecordKind.PATIENT: Patient,
    RecordKind.DOCTOR: Doctor,
    RecordKind.ACTIVITY: Activity,
}


def _show_all(record: Record) -> bool:
    return True


PREDICATE_SHOW_ALL: Predicate = _show_all


def record_values(record: Record) -> List[str]:
    """All non-empty attribute values of a record as strings."""
    values = []
    for f in dataclasses.fields(record):
        value = getattr(record, f.name)
        if isinstance(value, tuple):
            values.extend(value)
        elif value:
            values.append(str(value))
    return values


def identity_of(kind: RecordKind, fields: dict) -> Tuple[str, ...]:
    """
    Key two records of the same kind are considered duplicates on.

    Patients and doctors are identified by name and phone, activities by
    title and start time. Names and titles compare case-insensitively.
    """
    if kind is RecordKind.ACTIVITY:
        return (fields["title"].lower(), fields["start"])
    return (fields["name"].lower(), fields["phone"])


class Model:
    """
    Mutable record store.

    Command objects are the only writers. Every method that changes state
    either succeeds fully or raises before changing anything.
    """

    def __init__(self) -> None:
        self._records: Dict[RecordKind, Dict[str, Record]] = {kind: {} for kind in RecordKind}
        self._counters: Dict[RecordKind, int] = {kind: 0 for kind in RecordKind}
        self._predicates: Dict[RecordKind, Predicate] = {
            kind: PREDICATE_SHOW_ALL for kind in RecordKind
        }

    def _next_id(self, kind: RecordKind) -> str:
        self._counters[kind] += 1
        return f"{kind.id_prefix}{self._counters[kind]:03d}"

    def add(self, kind: RecordKind, fields: dict) -> Record:
        """
        Add a record.

        Args:
            kind: Record kind.
            fields: Constructor fields of the record type, id excluded.

        Returns:
            New record with its assigned id.
        """
        record = RECORD_TYPES[kind](id=self._next_id(kind), **fields)
        self._records[kind][record.id] = record
        logger.debug(f"Added {kind.value} {record.id}")
        return record

    def get(self, kind: RecordKind, record_id: str) -> Optional[Record]:
        return self._records[kind].get(record_id)

    def has(self, kind: RecordKind, record_id: str) -> bool:
        return record_id in self._records[kind]

    def has_duplicate(self, kind: RecordKind, fields: dict, exclude_id: Optional[str] = None) -> bool:
        """Check whether another record of this kind has the same identity."""
        key = identity_of(kind, fields)
        for record in self._records[kind].values():
            if record.id == exclude_id:
                continue
            if identity_of(kind, dataclasses.asdict(record)) == key:
                return True
        return False

    def replace(self, kind: RecordKind, record_id: str, changes: dict) -> Record:
        """
        Replace fields of an existing record.

        Raises:
            KeyError: If no record has this id.
        """
        record = dataclasses.replace(self._records[kind][record_id], **changes)
        self._records[kind][record_id] = record
        logger.debug(f"Edited {kind.value} {record_id}: {sorted(changes)}")
        return record

    def delete(self, kind: RecordKind, record_id: str) -> Record:
        """
        Remove a record. Deleting a patient unlinks it from its activities.

        Raises:
            KeyError: If no record has this id.
        """
        record = self._records[kind].pop(record_id)
        if kind is RecordKind.PATIENT:
            self._unlink_patients({record_id})
        logger.debug(f"Deleted {kind.value} {record_id}")
        return record

    def clear(self, kind: RecordKind) -> int:
        """Remove all records of a kind. Returns how many were removed."""
        removed = set(self._records[kind])
        self._records[kind].clear()
        if kind is RecordKind.PATIENT:
            self._unlink_patients(removed)
        logger.debug(f"Cleared {len(removed)} {kind.value} records")
        return len(removed)

    def _unlink_patients(self, patient_ids: set) -> None:
        activities = self._records[RecordKind.ACTIVITY]
        for activity_id, activity in list(activities.items()):
            if activity.patient_id in patient_ids:
                activities[activity_id] = dataclasses.replace(activity, patient_id=None)

    def records(self, kind: RecordKind) -> List[Record]:
        """All records of a kind, in insertion order."""
        return list(self._records[kind].values())

    def filtered(self, kind: RecordKind) -> List[Record]:
        """Records of a kind that pass the current filter."""
        predicate = self._predicates[kind]
        return [record for record in self._records[kind].values() if predicate(record)]

    def update_filtered_list(self, kind: RecordKind, predicate: Predicate) -> None:
        self._predicates[kind] = predicate
