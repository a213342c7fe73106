"""
Unit tests for the line-oriented front end.
"""

import io

from medrec.cli import main, run_repl
from medrec.logic import LogicManager
from medrec.model import RecordKind


class TestRepl:
    """Test reading commands from a stream."""

    def test_runs_until_exit(self):
        """Lines after exit are not executed."""
        stdin = io.StringIO("add t/patient n/Amy p/1\n\nexit\nadd t/patient n/Ben p/2\n")
        stdout = io.StringIO()
        logic = LogicManager()

        status = run_repl(logic, stdin, stdout)

        assert status == 0
        assert len(logic.model.records(RecordKind.PATIENT)) == 1
        assert stdout.getvalue().splitlines()[-1] == "Exiting MedRec as requested ..."

    def test_stops_at_end_of_input(self):
        """End of input ends the session."""
        stdout = io.StringIO()

        assert run_repl(LogicManager(), io.StringIO("hel\n"), stdout) == 0
        assert stdout.getvalue().startswith("Sorry, hel is an invalid command.")


class TestMain:
    """Test the medrec entry point."""

    def test_single_command(self, tmp_path, capsys):
        """--command prints the result."""
        status = main(["--config", str(tmp_path / "none.toml"), "--no-log-file", "--command", "list t/doctor"])

        assert status == 0
        assert capsys.readouterr().out == "Listed all doctors\n"

    def test_single_command_error(self, tmp_path, capsys):
        """Rejected lines exit with status 1."""
        status = main(["--config", str(tmp_path / "none.toml"), "--no-log-file", "--command", "lst t/doctor"])

        assert status == 1
        assert capsys.readouterr().out.startswith("Sorry, lst t/doctor is an invalid command.")

    def test_bad_config(self, tmp_path, capsys):
        """Unreadable config is reported."""
        path = tmp_path / "config.toml"
        path.write_text("not toml [")

        assert main(["--config", str(path), "--command", "help"]) == 1
        assert "cannot load config" in capsys.readouterr().err
