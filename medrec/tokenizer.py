"""
Input tokenizing.

Splits a raw input line into a command word and an argument tail, and splits
an argument tail into prefixed values (e.g. "n/John Doe p/98765432").

Command word forms:
    generic:  <word> <rest>           e.g. "find alice"
    typed:    <word> t/<word> <rest>  e.g. "add t/patient n/John"

The typed form wins whenever both match.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from medrec.errors import InvalidFormatError
from medrec.messages import USAGE_HELP

logger = logging.getLogger(__name__)

GENERIC_COMMAND_FORMAT = re.compile(r"(?P<command_word>\S+)(?P<arguments>.*)")
TYPED_COMMAND_FORMAT = re.compile(r"(?P<command_word>\S+\st/\S+)(?P<arguments>.*)")


@dataclass(frozen=True)
class TokenizedInput:
    """
    Result of splitting one input line.

    Attributes:
        command_word: Leading token, or "<verb> t/<target>" for typed commands.
        arguments: Remaining text, leading whitespace included.
    """

    command_word: str
    arguments: str


def split_command(user_input: str) -> TokenizedInput:
    """
    Split an input line into command word and argument tail.

    Args:
        user_input: Raw line as typed by the user.

    Returns:
        Tokenized input.

    Raises:
        InvalidFormatError: If no command word can be isolated (blank input).
    """
    text = user_input.strip()

    generic = GENERIC_COMMAND_FORMAT.fullmatch(text)
    if generic is None:
        raise InvalidFormatError(USAGE_HELP)

    typed = TYPED_COMMAND_FORMAT.fullmatch(text)
    match = typed if typed is not None else generic

    tokens = TokenizedInput(match.group("command_word"), match.group("arguments"))
    logger.debug(f"Tokenized {text!r} -> {tokens.command_word!r} + {tokens.arguments!r}")
    return tokens


@dataclass
class ArgumentMultimap:
    """
    Prefixed argument values.

    Attributes:
        preamble: Text before the first recognised prefix, stripped.
        values: Prefix -> values in input order.
    """

    preamble: str = ""
    values: Dict[str, List[str]] = field(default_factory=dict)

    def has(self, prefix: str) -> bool:
        return prefix in self.values

    def get_value(self, prefix: str) -> Optional[str]:
        """Last value given for prefix, or None."""
        values = self.values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: str) -> List[str]:
        return list(self.values.get(prefix, []))


def tokenize_arguments(arguments: str, prefixes: Sequence[str]) -> ArgumentMultimap:
    """
    Split an argument tail on known prefixes.

    A prefix only counts when it starts the tail or follows whitespace, so
    "pid/" never matches as "d/".

    Args:
        arguments: Argument tail from split_command().
        prefixes: Recognised prefixes, e.g. ["n/", "p/"].

    Returns:
        Parsed argument multimap.
    """
    if not prefixes:
        return ArgumentMultimap(preamble=arguments.strip())

    alternatives = "|".join(re.escape(p) for p in sorted(prefixes, key=len, reverse=True))
    pattern = re.compile(rf"(?<!\S)({alternatives})")
    matches = list(pattern.finditer(arguments))

    if not matches:
        return ArgumentMultimap(preamble=arguments.strip())

    result = ArgumentMultimap(preamble=arguments[: matches[0].start()].strip())
    for i, match in enumerate(matches):
        end = matches[i + 1].start() if i + 1 < len(matches) else len(arguments)
        value = arguments[match.end() : end].strip()
        result.values.setdefault(match.group(1), []).append(value)

    return result
