"""
Unit tests for input tokenizing.

Tests command word isolation (generic and typed forms) and prefixed
argument splitting.
"""

import pytest

from medrec.errors import InvalidFormatError, ParseError
from medrec.messages import USAGE_HELP
from medrec.tokenizer import split_command, tokenize_arguments


class TestSplitCommand:
    """Test command word / argument tail split."""

    def test_generic(self):
        """Single-word command word keeps the rest as arguments."""
        tokens = split_command("find alice bob")

        assert tokens.command_word == "find"
        assert tokens.arguments == " alice bob"

    def test_no_arguments(self):
        """Bare command word has an empty tail."""
        tokens = split_command("help")

        assert tokens.command_word == "help"
        assert tokens.arguments == ""

    def test_typed_precedence(self):
        """Typed form wins over the generic form."""
        tokens = split_command("add t/patient n/John p/123")

        assert tokens.command_word == "add t/patient"
        assert tokens.arguments == " n/John p/123"

    def test_typed_without_arguments(self):
        """Typed form with nothing after it."""
        tokens = split_command("list t/doctor")

        assert tokens.command_word == "list t/doctor"
        assert tokens.arguments == ""

    def test_surrounding_whitespace_trimmed(self):
        """Leading and trailing whitespace is ignored."""
        tokens = split_command("   delete t/activity A001   ")

        assert tokens.command_word == "delete t/activity"
        assert tokens.arguments == " A001"

    def test_typed_needs_target(self):
        """'t/' with no target falls back to the generic form."""
        tokens = split_command("find t/")

        assert tokens.command_word == "find"
        assert tokens.arguments == " t/"

    def test_typed_only_in_second_position(self):
        """A later 't/' token does not make a typed command word."""
        tokens = split_command("find alice t/patient")

        assert tokens.command_word == "find"

    def test_unknown_typed_word_isolated(self):
        """Typed form is isolated even when the verb is misspelled."""
        tokens = split_command("ad t/patient n/John")

        assert tokens.command_word == "ad t/patient"

    @pytest.mark.parametrize("text", ["", "   ", "\t", " \n "])
    def test_blank_input(self, text):
        """Blank input is rejected with the generic usage."""
        with pytest.raises(InvalidFormatError) as excinfo:
            split_command(text)

        assert excinfo.value.usage == USAGE_HELP
        assert isinstance(excinfo.value, ParseError)
        assert str(excinfo.value).startswith("Invalid command format! \n")


class TestTokenizeArguments:
    """Test prefixed argument splitting."""

    PREFIXES = ["n/", "p/", "m/", "d/", "pid/", "de/"]

    def test_values(self):
        """Values run until the next prefix and are stripped."""
        argmap = tokenize_arguments(" n/John Doe p/98765432", self.PREFIXES)

        assert argmap.preamble == ""
        assert argmap.get_value("n/") == "John Doe"
        assert argmap.get_value("p/") == "98765432"

    def test_repeated_prefix(self):
        """Repeated prefixes keep every value; get_value returns the last."""
        argmap = tokenize_arguments(" m/asthma m/diabetes", self.PREFIXES)

        assert argmap.get_all_values("m/") == ["asthma", "diabetes"]
        assert argmap.get_value("m/") == "diabetes"

    def test_preamble(self):
        """Text before the first prefix is the preamble."""
        argmap = tokenize_arguments(" P001 n/John", self.PREFIXES)

        assert argmap.preamble == "P001"
        assert argmap.get_value("n/") == "John"

    def test_prefix_inside_word_ignored(self):
        """'d/' inside 'pid/' is not a separate prefix."""
        argmap = tokenize_arguments(" pid/P001 d/follow up", self.PREFIXES)

        assert argmap.get_value("pid/") == "P001"
        assert argmap.get_value("d/") == "follow up"

    def test_longer_prefix_preferred(self):
        """'de/' is not read as 'd/' followed by 'e/...'."""
        argmap = tokenize_arguments(" de/Cardiology", self.PREFIXES)

        assert argmap.get_value("de/") == "Cardiology"
        assert not argmap.has("d/")

    def test_missing_prefix(self):
        """Absent prefixes give None / empty list."""
        argmap = tokenize_arguments(" n/John", self.PREFIXES)

        assert argmap.get_value("p/") is None
        assert argmap.get_all_values("p/") == []
        assert not argmap.has("p/")

    def test_empty_value(self):
        """A prefix with nothing after it has an empty value."""
        argmap = tokenize_arguments(" n/ p/123", self.PREFIXES)

        assert argmap.has("n/")
        assert argmap.get_value("n/") == ""

    def test_no_prefixes(self):
        """Without known prefixes everything is preamble."""
        argmap = tokenize_arguments("  alice bob ", [])

        assert argmap.preamble == "alice bob"
        assert argmap.values == {}
