"""
MedRec - personal record manager for patients, doctors and scheduled activities.

Free-text commands are parsed into typed commands and executed against an
in-memory model. Unknown command words get "did you mean" suggestions.
"""

__version__ = "0.1.0"
__author__ = "MedRec Contributors"

from medrec.logic import LogicManager
from medrec.model import Model
from medrec.parser import parse_command

__all__ = ["LogicManager", "Model", "parse_command", "__version__"]
