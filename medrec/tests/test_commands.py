"""
Unit tests for command execution against the in-memory model.
"""

import pytest

from medrec.commands import (
    AddActivityCommand,
    AddDoctorCommand,
    AddPatientCommand,
    ClearCommand,
    DeleteCommand,
    DisplayChange,
    EditCommand,
    ExitCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
    ViewCommand,
    describe,
)
from medrec.errors import CommandError
from medrec.messages import MESSAGE_HELP_COMMANDS
from medrec.model import Model, RecordKind


@pytest.fixture
def model():
    """Model with two patients, one doctor and one activity."""
    m = Model()
    AddPatientCommand(name="Alice Tan", phone="111", conditions=("asthma",)).execute(m)
    AddPatientCommand(name="Bob Lim", phone="222").execute(m)
    AddDoctorCommand(name="Carol Ng", phone="333", department="Cardiology").execute(m)
    AddActivityCommand(title="Checkup", start="1/1/2023 10:00", end="1/1/2023 11:00", patient_id="P001").execute(m)
    return m


class TestAddCommands:
    """Test add commands."""

    def test_ids_assigned(self, model):
        """Ids are issued per kind."""
        assert [p.id for p in model.records(RecordKind.PATIENT)] == ["P001", "P002"]
        assert [d.id for d in model.records(RecordKind.DOCTOR)] == ["D001"]
        assert [a.id for a in model.records(RecordKind.ACTIVITY)] == ["A001"]

    def test_result(self):
        """Add reports the new record and shows its list."""
        result = AddDoctorCommand(name="Dan", phone="444").execute(Model())

        assert result.message == "New doctor added: D001 Name: Dan; Phone: 444"
        assert result.display is DisplayChange.DOCTORS
        assert not result.error

    def test_duplicate_rejected(self, model):
        """Same name (any case) and phone is a duplicate."""
        with pytest.raises(CommandError, match="This patient already exists"):
            AddPatientCommand(name="alice tan", phone="111").execute(model)

        assert len(model.records(RecordKind.PATIENT)) == 2

    def test_activity_unknown_patient(self, model):
        """Activity linked to a missing patient is rejected before adding."""
        command = AddActivityCommand(title="X", start="a", end="b", patient_id="P999")

        with pytest.raises(CommandError, match="The patient id doesn't exist in the list"):
            command.execute(model)

        assert len(model.records(RecordKind.ACTIVITY)) == 1


class TestEditCommand:
    """Test edit."""

    def test_edit(self, model):
        """Given fields are replaced, others kept."""
        result = EditCommand(RecordKind.PATIENT, "P002", (("phone", "999"),)).execute(model)

        bob = model.get(RecordKind.PATIENT, "P002")
        assert bob.phone == "999"
        assert bob.name == "Bob Lim"
        assert result.message.startswith("Edited patient: P002")

    def test_edit_unknown_id(self, model):
        """Unknown id is rejected."""
        with pytest.raises(CommandError, match="The doctor id doesn't exist"):
            EditCommand(RecordKind.DOCTOR, "D404", (("phone", "1"),)).execute(model)

    def test_edit_into_duplicate(self, model):
        """Editing into another record's identity is rejected."""
        command = EditCommand(RecordKind.PATIENT, "P002", (("name", "Alice Tan"), ("phone", "111")))

        with pytest.raises(CommandError):
            command.execute(model)

        assert model.get(RecordKind.PATIENT, "P002").name == "Bob Lim"


class TestViewDeleteCommands:
    """Test view and delete."""

    def test_view(self, model):
        """View returns the record for the detail display."""
        result = ViewCommand(RecordKind.DOCTOR, "D001").execute(model)

        assert result.display is DisplayChange.DOCTOR_DETAIL
        assert result.record.name == "Carol Ng"

    def test_delete(self, model):
        """Delete removes the record."""
        result = DeleteCommand(RecordKind.DOCTOR, "D001").execute(model)

        assert not model.has(RecordKind.DOCTOR, "D001")
        assert result.message == "Deleted doctor: D001 Name: Carol Ng; Phone: 333; Department: Cardiology"

    def test_delete_unknown(self, model):
        """Unknown id is rejected."""
        with pytest.raises(CommandError, match="The activity id doesn't exist"):
            DeleteCommand(RecordKind.ACTIVITY, "A404").execute(model)

    def test_delete_patient_unlinks_activities(self, model):
        """Activities keep existing without the deleted patient."""
        DeleteCommand(RecordKind.PATIENT, "P001").execute(model)

        assert model.get(RecordKind.ACTIVITY, "A001").patient_id is None


class TestListFindClear:
    """Test filtering and clearing."""

    def test_find(self, model):
        """Keywords match substrings of any attribute, case-insensitively."""
        result = FindCommand(("ASTH", "cardio")).execute(model)

        assert result.message == "2 items listed!"
        assert [p.id for p in model.filtered(RecordKind.PATIENT)] == ["P001"]
        assert [d.id for d in model.filtered(RecordKind.DOCTOR)] == ["D001"]
        assert model.filtered(RecordKind.ACTIVITY) == []

    def test_list_resets_filter(self, model):
        """List shows everything again."""
        FindCommand(("nomatch",)).execute(model)
        result = ListCommand(RecordKind.PATIENT).execute(model)

        assert result.message == "Listed all patients"
        assert result.display is DisplayChange.PATIENTS
        assert len(model.filtered(RecordKind.PATIENT)) == 2

    def test_list_activities_message(self, model):
        """Plural of activity."""
        assert ListCommand(RecordKind.ACTIVITY).execute(model).message == "Listed all activities"

    def test_clear(self, model):
        """Clear empties one kind only."""
        ClearCommand(RecordKind.PATIENT).execute(model)

        assert model.records(RecordKind.PATIENT) == []
        assert len(model.records(RecordKind.DOCTOR)) == 1
        assert model.get(RecordKind.ACTIVITY, "A001").patient_id is None


class TestHelpExit:
    """Test help and exit."""

    def test_help(self):
        """Help returns the help text."""
        result = HelpCommand().execute(Model())

        assert result.message == MESSAGE_HELP_COMMANDS
        assert result.is_help

    def test_exit(self):
        """Exit asks the surface to close."""
        assert ExitCommand().execute(Model()).is_exit


class TestDescribe:
    """Test record summaries."""

    def test_describe_skips_empty(self, model):
        """Empty fields are left out and tuples are joined."""
        assert describe(model.get(RecordKind.PATIENT, "P001")) == (
            "P001 Name: Alice Tan; Phone: 111; Conditions: asthma"
        )
