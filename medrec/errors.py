"""
Exception taxonomy for MedRec.

Parse failures are terminal for the input line that caused them and are
reported back to the user verbatim. Execution failures leave the model
unchanged.
"""

from typing import List

from medrec.messages import MESSAGE_INVALID_COMMAND_FORMAT


class MedrecError(Exception):
    """Base exception for MedRec errors."""

    pass


class ParseError(MedrecError):
    """User input could not be turned into a command."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidFormatError(ParseError):
    """Input or arguments did not match the expected format."""

    def __init__(self, usage: str):
        self.usage = usage
        super().__init__(MESSAGE_INVALID_COMMAND_FORMAT.format(usage))


class UnknownCommandError(ParseError):
    """Command word was isolated but is not registered."""

    def __init__(self, command_word: str, suggestions: List[str], message: str):
        self.command_word = command_word
        self.suggestions = suggestions
        super().__init__(message)


class CommandError(MedrecError):
    """Command is well-formed but cannot run against the current model."""

    pass
