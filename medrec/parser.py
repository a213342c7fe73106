"""
Command dispatcher.

Turns one line of user input into a command:
    raw line -> split_command() -> registry lookup -> family parser -> Command

Unknown command words are answered with ranked suggestions from the
registry vocabulary.
"""

import logging

from medrec.commands import Command
from medrec.errors import UnknownCommandError
from medrec.registry import VOCABULARY, find_command
from medrec.similarity import MAX_SUGGESTIONS, format_suggestions, suggest
from medrec.tokenizer import split_command

logger = logging.getLogger(__name__)


def dispatch(command_word: str, arguments: str, max_suggestions: int = MAX_SUGGESTIONS) -> Command:
    """
    Hand the argument tail to the parser registered for command_word.

    Args:
        command_word: Exact command word.
        arguments: Argument tail.
        max_suggestions: Cap on suggestions for multi-word command words.

    Returns:
        Parsed command.

    Raises:
        InvalidFormatError: Propagated unchanged from the family parser.
        UnknownCommandError: If command_word is not registered.
    """
    spec = find_command(command_word)

    if spec is None:
        suggestions = suggest(command_word, VOCABULARY, max_suggestions)
        logger.info(f"Unknown command {command_word!r}, suggesting {suggestions}")
        raise UnknownCommandError(
            command_word, suggestions, format_suggestions(command_word, suggestions)
        )

    return spec.parser(arguments)


def parse_command(user_input: str, max_suggestions: int = MAX_SUGGESTIONS) -> Command:
    """
    Parse a full input line into a command.

    Args:
        user_input: Raw line as typed by the user.
        max_suggestions: Cap on suggestions for multi-word command words.

    Returns:
        Parsed command, ready to execute.

    Raises:
        ParseError: If the line is blank, malformed or names an unknown command.
    """
    tokens = split_command(user_input)
    command = dispatch(tokens.command_word, tokens.arguments, max_suggestions)
    logger.debug(f"Parsed {tokens.command_word!r} -> {command!r}")
    return command
