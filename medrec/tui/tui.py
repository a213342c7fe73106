"""
Main Textual TUI for MedRec.

Command input docked at the bottom, feedback and status at the top, and a
table showing whichever list or record the last command selected.
"""

import logging
from datetime import datetime

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Footer, Header, Input, Label, ListItem, ListView

from medrec.commands import DETAIL_DISPLAY, LIST_DISPLAY, CommandResult, DisplayChange
from medrec.config import Config, load_config
from medrec.logic import LogicManager
from medrec.messages import MESSAGE_HELP_COMMANDS
from medrec.model import RecordKind
from medrec.registry import COMMANDS
from medrec.tui.widgets import FeedbackPanel, RecordTable, StatusPanel

logger = logging.getLogger(__name__)

KIND_FOR_DISPLAY = {display: kind for kind, display in LIST_DISPLAY.items()}
KIND_FOR_DETAIL = {display: kind for kind, display in DETAIL_DISPLAY.items()}


class CommandPaletteScreen(ModalScreen[str | None]):
    """Modal screen listing every registered command word."""

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", priority=True),
    ]

    DEFAULT_CSS = """
    CommandPaletteScreen {
        align: center middle;
    }

    #palette-dialog {
        width: 70;
        height: auto;
        max-height: 80%;
        border: thick $accent;
        background: $surface;
        padding: 1 2;
    }

    #palette-title {
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }

    #palette-input {
        margin-bottom: 1;
    }

    #palette-list {
        height: auto;
        max-height: 20;
        border: solid $primary;
    }

    #palette-help {
        text-align: center;
        margin-top: 1;
        color: $text-muted;
    }
    """

    def compose(self) -> ComposeResult:
        with Vertical(id="palette-dialog"):
            yield Label("Command Palette", id="palette-title")
            yield Input(placeholder="Type to filter...", id="palette-input")
            yield ListView(
                *[
                    ListItem(Label(f"{spec.word:<20} {spec.description}"), id=f"cmd-{i}")
                    for i, spec in enumerate(COMMANDS)
                ],
                id="palette-list",
            )
            yield Label("[Enter] Select  [Esc] Close", id="palette-help")

    def on_mount(self) -> None:
        """Focus input on mount."""
        self.query_one("#palette-input", Input).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Filter commands as user types."""
        query = event.value.lower()
        for i, spec in enumerate(COMMANDS):
            item = self.query_one(f"#cmd-{i}", ListItem)
            item.display = query in spec.word or query in spec.description.lower()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Select first matching command word."""
        query = event.value.strip().lower()
        for spec in COMMANDS:
            if query in spec.word:
                self.dismiss(spec.word)
                return
        self.dismiss(None)

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Handle command selection."""
        if event.item and event.item.id:
            idx = int(event.item.id.split("-")[1])
            self.dismiss(COMMANDS[idx].word)

    def action_cancel(self) -> None:
        """Cancel and close."""
        self.dismiss(None)


class MedrecApp(App):
    """
    MedRec TUI application.
    """

    CSS = """
    Screen {
        layout: vertical;
    }

    #command_input {
        dock: bottom;
        height: 3;
        border: solid $accent;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
        Binding("ctrl+p", "command_palette", "Commands", priority=True),
        Binding("f1", "show_help", "Help"),
        Binding("escape", "focus_input", "Input", show=False),
    ]

    def __init__(self, config: Config | None = None) -> None:
        super().__init__()
        self.config = config if config is not None else Config()
        self.logic = LogicManager(config=self.config)

        # Widgets
        self.status_panel = None
        self.feedback = None
        self.record_table = None
        self.command_input = None

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        yield Header()

        self.status_panel = StatusPanel()
        yield self.status_panel

        self.feedback = FeedbackPanel()
        yield self.feedback

        self.record_table = RecordTable()
        yield self.record_table

        self.command_input = Input(
            placeholder="Type a command, e.g. add t/patient n/John Doe p/98765432 (Ctrl+P for commands)",
            id="command_input",
        )
        yield self.command_input

        yield Footer()

    def on_mount(self) -> None:
        """Called when app starts."""
        self.title = self.config.ui.title
        self.sub_title = "Ctrl+P=commands F1=help Ctrl+Q=quit"

        self.record_table.show_records(RecordKind.PATIENT, [])
        self.refresh_status()
        if self.config.ui.show_help_on_start:
            self.feedback.show_message(MESSAGE_HELP_COMMANDS)
        else:
            self.feedback.show_message("Welcome to MedRec! Type help to see the commands.")
        self.command_input.focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle command input."""
        if event.input is not self.command_input:
            return

        line = event.value.strip()
        if not line:
            return

        result = self.logic.execute(line)
        # Keep the line on error so it can be corrected
        if not result.error:
            self.command_input.value = ""
        self.apply_result(result)

    def apply_result(self, result: CommandResult) -> None:
        """Show feedback and switch the table as the result requests."""
        self.feedback.show_message(result.message, error=result.error)

        display = result.display
        if display is DisplayChange.EXIT:
            self.exit()
            return

        model = self.logic.model
        if display in KIND_FOR_DISPLAY:
            kind = KIND_FOR_DISPLAY[display]
            self.record_table.show_records(kind, model.filtered(kind))
        elif display in KIND_FOR_DETAIL and result.record is not None:
            self.record_table.show_detail(KIND_FOR_DETAIL[display], result.record)
        elif display is None and not result.error:
            # Refresh the current list after commands that do not switch views
            kind = self.record_table.kind
            self.record_table.show_records(kind, model.filtered(kind))

        self.refresh_status()

    def refresh_status(self) -> None:
        model = self.logic.model
        counts = {kind: len(model.records(kind)) for kind in RecordKind}
        self.status_panel.update_status(counts, self.logic.stats)

    def action_command_palette(self) -> None:
        """Open the command palette and prefill the chosen command word."""

        def handle_command(result: str | None) -> None:
            if result:
                self.command_input.value = f"{result} "
                self.command_input.cursor_position = len(self.command_input.value)
            self.command_input.focus()

        self.push_screen(CommandPaletteScreen(), handle_command)

    def action_show_help(self) -> None:
        """Show help (bound to F1)."""
        self.apply_result(self.logic.execute("help"))

    def action_focus_input(self) -> None:
        """Focus the command input."""
        self.command_input.focus()


def main() -> None:
    """
    Launch TUI application.

    Entry point for medrec-tui command.
    """
    from medrec.cli import configure_logging

    config = load_config()

    # Configure logging to FILE ONLY (no stderr/stdout to avoid TUI conflict)
    log_path = configure_logging(config.logging, console=False)

    logger.info("=" * 80)
    logger.info("MedRec TUI Starting")
    logger.info(f"Log file: {log_path}")
    logger.info(f"Timestamp: {datetime.now().isoformat()}")
    logger.info("=" * 80)

    # Run TUI
    try:
        app = MedrecApp(config)
        app.run()
    except Exception as e:
        logger.critical(f"TUI crashed: {e}", exc_info=True)
        raise
    finally:
        logger.info("=" * 80)
        logger.info("MedRec TUI Exiting")
        logger.info("=" * 80)


if __name__ == "__main__":
    main()
