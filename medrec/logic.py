"""
Logic manager: one input line in, one CommandResult out.

User errors (parse failures, commands the model refuses) come back as a
result carrying the error text; the caller keeps accepting input.
"""

import logging
from typing import Optional

from medrec.commands import CommandResult
from medrec.config import Config
from medrec.errors import CommandError, ParseError
from medrec.model import Model
from medrec.parser import parse_command

logger = logging.getLogger(__name__)


class LogicManager:
    """
    Parses and executes input lines against a model.

    Keeps simple statistics for the status display.
    """

    def __init__(self, model: Optional[Model] = None, config: Optional[Config] = None):
        """
        Initialize logic manager.

        Args:
            model: Model to execute against. A fresh one is created if None.
            config: Application config. Defaults are used if None.
        """
        self.model = model if model is not None else Model()
        self.config = config if config is not None else Config()

        # Statistics
        self.stats = {
            "executed": 0,
            "parse_errors": 0,
            "command_errors": 0,
        }

    def execute(self, user_input: str) -> CommandResult:
        """
        Parse and run one line of input.

        Args:
            user_input: Raw line as typed by the user.

        Returns:
            Result of the command, or a result carrying the error message.
        """
        try:
            command = parse_command(user_input, self.config.suggestions.max_suggestions)
        except ParseError as e:
            self.stats["parse_errors"] += 1
            logger.warning(f"Parse error for {user_input.strip()!r}: {e.message!r}")
            return CommandResult(e.message, error=True)

        try:
            result = command.execute(self.model)
        except CommandError as e:
            self.stats["command_errors"] += 1
            logger.warning(f"Command {command!r} failed: {e}")
            return CommandResult(str(e), error=True)

        self.stats["executed"] += 1
        logger.info(f"Executed {type(command).__name__}: {result.message.splitlines()[0]}")
        return result
