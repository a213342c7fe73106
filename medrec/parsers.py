"""
Argument parsers, one per command family.

Every parser takes the argument tail left after the command word and returns
a command, or raises InvalidFormatError carrying that family's usage text.
Parsers are stateless and never touch the model. Only presence of required
values is checked; field formats are left to the user.
"""

from typing import Callable, Dict, List

from medrec.commands import (
    AddActivityCommand,
    AddDoctorCommand,
    AddPatientCommand,
    ClearCommand,
    Command,
    DeleteCommand,
    EditCommand,
    ExitCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
    ViewCommand,
)
from medrec.errors import InvalidFormatError
from medrec.messages import (
    USAGE_ADD_ACTIVITY,
    USAGE_ADD_DOCTOR,
    USAGE_ADD_PATIENT,
    USAGE_DELETE_ACTIVITY,
    USAGE_DELETE_DOCTOR,
    USAGE_DELETE_PATIENT,
    USAGE_EDIT_DOCTOR,
    USAGE_EDIT_PATIENT,
    USAGE_FIND,
    USAGE_VIEW_DOCTOR,
    USAGE_VIEW_PATIENT,
)
from medrec.model import RecordKind
from medrec.tokenizer import ArgumentMultimap, tokenize_arguments

Parser = Callable[[str], Command]

# Argument prefixes
PREFIX_ID = "i/"
PREFIX_NAME = "n/"
PREFIX_PHONE = "p/"
PREFIX_AGE = "a/"
PREFIX_GENDER = "g/"
PREFIX_BLOOD_TYPE = "b/"
PREFIX_CONDITION = "m/"
PREFIX_DEPARTMENT = "de/"
PREFIX_TITLE = "ti/"
PREFIX_START = "s/"
PREFIX_END = "e/"
PREFIX_PATIENT_ID = "pid/"
PREFIX_DESCRIPTION = "d/"

# Prefix -> record field, per editable record kind
PATIENT_FIELDS: Dict[str, str] = {
    PREFIX_NAME: "name",
    PREFIX_PHONE: "phone",
    PREFIX_AGE: "age",
    PREFIX_GENDER: "gender",
    PREFIX_BLOOD_TYPE: "blood_type",
    PREFIX_CONDITION: "conditions",
}

DOCTOR_FIELDS: Dict[str, str] = {
    PREFIX_NAME: "name",
    PREFIX_PHONE: "phone",
    PREFIX_DEPARTMENT: "department",
}

ACTIVITY_FIELDS: Dict[str, str] = {
    PREFIX_TITLE: "title",
    PREFIX_START: "start",
    PREFIX_END: "end",
    PREFIX_PATIENT_ID: "patient_id",
    PREFIX_DESCRIPTION: "description",
}

# Fields holding every value given for their prefix
MULTI_VALUE_PREFIXES = {PREFIX_CONDITION}


def _tokenize(arguments: str, prefixes: List[str], required: List[str], usage: str) -> ArgumentMultimap:
    """Tokenize and check that no preamble is present and required values are non-empty."""
    argmap = tokenize_arguments(arguments, prefixes)
    if argmap.preamble or any(not argmap.get_value(prefix) for prefix in required):
        raise InvalidFormatError(usage)
    return argmap


def _collect(argmap: ArgumentMultimap, fields: Dict[str, str]) -> dict:
    """Map every prefix present in argmap to its record field value."""
    values = {}
    for prefix, name in fields.items():
        if not argmap.has(prefix):
            continue
        if prefix in MULTI_VALUE_PREFIXES:
            values[name] = tuple(v for v in argmap.get_all_values(prefix) if v)
        else:
            values[name] = argmap.get_value(prefix) or None
    return values


def _parse_record_id(arguments: str, usage: str) -> str:
    tokens = arguments.split()
    if len(tokens) != 1:
        raise InvalidFormatError(usage)
    return tokens[0]


def parse_add_patient(arguments: str) -> AddPatientCommand:
    argmap = _tokenize(
        arguments, list(PATIENT_FIELDS), [PREFIX_NAME, PREFIX_PHONE], USAGE_ADD_PATIENT
    )
    return AddPatientCommand(**_collect(argmap, PATIENT_FIELDS))


def parse_add_doctor(arguments: str) -> AddDoctorCommand:
    argmap = _tokenize(
        arguments, list(DOCTOR_FIELDS), [PREFIX_NAME, PREFIX_PHONE], USAGE_ADD_DOCTOR
    )
    return AddDoctorCommand(**_collect(argmap, DOCTOR_FIELDS))


def parse_add_activity(arguments: str) -> AddActivityCommand:
    argmap = _tokenize(
        arguments,
        list(ACTIVITY_FIELDS),
        [PREFIX_TITLE, PREFIX_START, PREFIX_END],
        USAGE_ADD_ACTIVITY,
    )
    return AddActivityCommand(**_collect(argmap, ACTIVITY_FIELDS))


def _parse_edit(
    arguments: str, kind: RecordKind, fields: Dict[str, str], required: List[str], usage: str
) -> EditCommand:
    """
    Parse "i/ID" followed by at least one field to overwrite.

    Fields listed in required may be omitted but not blanked.
    """
    argmap = _tokenize(arguments, [PREFIX_ID, *fields], [PREFIX_ID], usage)
    changes = _collect(argmap, fields)
    if not changes:
        raise InvalidFormatError(usage)
    for prefix in required:
        if fields[prefix] in changes and not changes[fields[prefix]]:
            raise InvalidFormatError(usage)
    return EditCommand(kind, argmap.get_value(PREFIX_ID), tuple(changes.items()))


def parse_edit_patient(arguments: str) -> EditCommand:
    return _parse_edit(
        arguments,
        RecordKind.PATIENT,
        PATIENT_FIELDS,
        [PREFIX_NAME, PREFIX_PHONE],
        USAGE_EDIT_PATIENT,
    )


def parse_edit_doctor(arguments: str) -> EditCommand:
    return _parse_edit(
        arguments,
        RecordKind.DOCTOR,
        DOCTOR_FIELDS,
        [PREFIX_NAME, PREFIX_PHONE],
        USAGE_EDIT_DOCTOR,
    )


def parse_view_patient(arguments: str) -> ViewCommand:
    return ViewCommand(RecordKind.PATIENT, _parse_record_id(arguments, USAGE_VIEW_PATIENT))


def parse_view_doctor(arguments: str) -> ViewCommand:
    return ViewCommand(RecordKind.DOCTOR, _parse_record_id(arguments, USAGE_VIEW_DOCTOR))


def parse_delete_patient(arguments: str) -> DeleteCommand:
    return DeleteCommand(RecordKind.PATIENT, _parse_record_id(arguments, USAGE_DELETE_PATIENT))


def parse_delete_doctor(arguments: str) -> DeleteCommand:
    return DeleteCommand(RecordKind.DOCTOR, _parse_record_id(arguments, USAGE_DELETE_DOCTOR))


def parse_delete_activity(arguments: str) -> DeleteCommand:
    return DeleteCommand(
        RecordKind.ACTIVITY, _parse_record_id(arguments, USAGE_DELETE_ACTIVITY)
    )


def parse_find(arguments: str) -> FindCommand:
    keywords = arguments.split()
    if not keywords:
        raise InvalidFormatError(USAGE_FIND)
    return FindCommand(tuple(keywords))


def list_parser(kind: RecordKind) -> Parser:
    """Parser for "list t/<kind>"; arguments are ignored."""

    def parse(arguments: str) -> ListCommand:
        return ListCommand(kind)

    return parse


def clear_parser(kind: RecordKind) -> Parser:
    """Parser for "clear t/<kind>"; arguments are ignored."""

    def parse(arguments: str) -> ClearCommand:
        return ClearCommand(kind)

    return parse


def parse_help(arguments: str) -> HelpCommand:
    return HelpCommand()


def parse_exit(arguments: str) -> ExitCommand:
    return ExitCommand()
