"""
Command suggestions for mistyped command words.

Ranks a fixed vocabulary of command words by Levenshtein distance to the
word the user typed and formats the "did you mean" reply.

Single-token input is treated as a mistyped verb and compared against the
first word of every vocabulary entry. Multi-token input (e.g. "ad t/patient")
is compared against whole entries and capped.
"""

import logging
import math
from typing import List, Sequence, Tuple

from polyleven import levenshtein

from medrec.messages import (
    MESSAGE_SUGGESTION_SEPARATOR,
    MESSAGE_SUGGESTIONS_HEADER,
    MESSAGE_UNKNOWN_COMMAND,
)

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 5


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance between two strings."""
    return levenshtein(a, b)


def _first_word(entry: str) -> str:
    return entry.split(" ")[0]


def _threshold(text: str) -> int:
    # Half the candidate length, rounded up
    return math.ceil(len(text) / 2)


def rank_candidates(
    command_word: str,
    vocabulary: Sequence[str],
    limit: int = MAX_SUGGESTIONS,
) -> List[Tuple[int, str]]:
    """
    Rank vocabulary entries against a mistyped command word.

    Args:
        command_word: Command word that failed to resolve.
        vocabulary: Valid command words, in registry order.
        limit: Cap applied to multi-token input.

    Returns:
        (distance, candidate) pairs surviving the length threshold, sorted by
        ascending distance. Ties keep vocabulary order.
    """
    parts = command_word.split(" ", 1)

    if len(parts) == 1:
        scored = [(edit_distance(_first_word(entry), parts[0]), entry) for entry in vocabulary]
        scored.sort(key=lambda pair: pair[0])
        return [pair for pair in scored if pair[0] <= _threshold(_first_word(pair[1]))]

    scored = [(edit_distance(entry, command_word), entry) for entry in vocabulary]
    scored.sort(key=lambda pair: pair[0])
    return [pair for pair in scored if pair[0] <= _threshold(pair[1])][:limit]


def suggest(
    command_word: str,
    vocabulary: Sequence[str],
    limit: int = MAX_SUGGESTIONS,
) -> List[str]:
    """Return ranked candidate command words for a mistyped command word."""
    return [candidate for _, candidate in rank_candidates(command_word, vocabulary, limit)]


def format_suggestions(command_word: str, suggestions: Sequence[str]) -> str:
    """
    Build the reply shown for an unknown command word.

    Args:
        command_word: Command word as typed by the user.
        suggestions: Ranked candidates, possibly empty.

    Returns:
        Base "invalid command" message, followed by the candidates when any
        survived filtering.
    """
    reply = MESSAGE_UNKNOWN_COMMAND.format(command_word)

    if suggestions:
        reply += MESSAGE_SUGGESTIONS_HEADER + "".join(
            candidate + MESSAGE_SUGGESTION_SEPARATOR for candidate in suggestions
        )

    logger.debug(f"Suggestions for {command_word!r}: {list(suggestions)}")
    return reply
