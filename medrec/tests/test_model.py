"""
Unit tests for the in-memory model.
"""

import pytest

from medrec.model import PREDICATE_SHOW_ALL, Model, RecordKind, record_values


class TestModel:
    """Test record storage and filtering."""

    def test_id_prefix(self):
        """Id prefixes per kind."""
        assert RecordKind.PATIENT.id_prefix == "P"
        assert RecordKind.DOCTOR.id_prefix == "D"
        assert RecordKind.ACTIVITY.id_prefix == "A"

    def test_ids_not_reused(self):
        """Deleted ids are not issued again."""
        model = Model()
        model.add(RecordKind.DOCTOR, {"name": "A", "phone": "1"})
        model.delete(RecordKind.DOCTOR, "D001")
        doctor = model.add(RecordKind.DOCTOR, {"name": "B", "phone": "2"})

        assert doctor.id == "D002"

    def test_replace_unknown(self):
        """Replacing a missing record raises KeyError."""
        with pytest.raises(KeyError):
            Model().replace(RecordKind.PATIENT, "P001", {"name": "X"})

    def test_filtered(self):
        """Filter applies per kind until reset."""
        model = Model()
        model.add(RecordKind.PATIENT, {"name": "Amy", "phone": "1"})
        model.add(RecordKind.PATIENT, {"name": "Ben", "phone": "2"})

        model.update_filtered_list(RecordKind.PATIENT, lambda r: r.name == "Ben")
        assert [p.name for p in model.filtered(RecordKind.PATIENT)] == ["Ben"]
        assert len(model.records(RecordKind.PATIENT)) == 2

        model.update_filtered_list(RecordKind.PATIENT, PREDICATE_SHOW_ALL)
        assert len(model.filtered(RecordKind.PATIENT)) == 2

    def test_has_duplicate_excludes_self(self):
        """A record is not its own duplicate."""
        model = Model()
        model.add(RecordKind.PATIENT, {"name": "Amy", "phone": "1"})
        fields = {"name": "AMY", "phone": "1"}

        assert model.has_duplicate(RecordKind.PATIENT, fields)
        assert not model.has_duplicate(RecordKind.PATIENT, fields, exclude_id="P001")

    def test_record_values(self):
        """Values flatten tuples and skip empty fields."""
        model = Model()
        patient = model.add(
            RecordKind.PATIENT, {"name": "Amy", "phone": "1", "conditions": ("flu", "cough")}
        )

        assert record_values(patient) == ["P001", "Amy", "1", "flu", "cough"]
