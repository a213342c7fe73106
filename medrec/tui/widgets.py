"""
TUI widgets built on Textual's native DataTable and Static.
"""

import dataclasses
from typing import Dict, List

from rich.text import Text
from textual.widgets import DataTable, Static

from medrec.model import RECORD_TYPES, Record, RecordKind


def _cell(value) -> str:
    if isinstance(value, tuple):
        return ", ".join(value)
    return "" if value is None else str(value)


class RecordTable(DataTable):
    """
    Table showing either one record list or one record's details.
    """

    DEFAULT_CSS = """
    RecordTable {
        height: 1fr;
        border: solid cyan;
    }
    """

    def __init__(self, **kwargs):
        super().__init__(zebra_stripes=True, cursor_type="row", **kwargs)
        self.kind = RecordKind.PATIENT

    def show_records(self, kind: RecordKind, records: List[Record]) -> None:
        """Replace table contents with a record list."""
        self.kind = kind
        self.clear(columns=True)

        names = [f.name for f in dataclasses.fields(RECORD_TYPES[kind])]
        self.add_columns(*[name.replace("_", " ").title() for name in names])
        for record in records:
            self.add_row(*[_cell(getattr(record, name)) for name in names])

        self.border_title = f"{kind.value.title()}s ({len(records)})"

    def show_detail(self, kind: RecordKind, record: Record) -> None:
        """Replace table contents with field/value rows for one record."""
        self.kind = kind
        self.clear(columns=True)
        self.add_columns("Field", "Value")
        for f in dataclasses.fields(record):
            self.add_row(f.name.replace("_", " ").title(), _cell(getattr(record, f.name)))

        self.border_title = f"{kind.value.title()} {record.id}"


class FeedbackPanel(Static):
    """
    Feedback for the last command, shown as plain text.
    """

    DEFAULT_CSS = """
    FeedbackPanel {
        height: auto;
        max-height: 50%;
        border: solid yellow;
        padding: 0 1;
    }
    """

    def show_message(self, message: str, error: bool = False) -> None:
        # Plain Text: usage strings contain square brackets
        self.update(Text(message, style="bold red" if error else ""))
        self.refresh()


class StatusPanel(Static):
    """
    Record counts and command statistics.
    """

    DEFAULT_CSS = """
    StatusPanel {
        height: auto;
        border: solid green;
        padding: 0 1;
    }
    """

    def update_status(self, counts: Dict[RecordKind, int], stats: Dict[str, int]) -> None:
        """Update status display."""
        content = (
            f"[bold]RECORDS[/bold]  "
            f"Patients: {counts.get(RecordKind.PATIENT, 0):>4}  "
            f"Doctors: {counts.get(RecordKind.DOCTOR, 0):>4}  "
            f"Activities: {counts.get(RecordKind.ACTIVITY, 0):>4}\n"
            f"[bold]COMMANDS[/bold] "
            f"Executed: {stats.get('executed', 0):>4}  "
            f"Parse errors: {stats.get('parse_errors', 0):>4}  "
            f"Rejected: {stats.get('command_errors', 0):>4}"
        )
        self.update(content)
        self.refresh()
