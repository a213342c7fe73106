"""
User-visible message strings.

All strings here are built once at import time and never mutated.
"""

MESSAGE_UNKNOWN_COMMAND = "Sorry, {} is an invalid command."
MESSAGE_SUGGESTIONS_HEADER = " You can choose from these commands instead: \n"
MESSAGE_SUGGESTION_SEPARATOR = "   "
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"

MESSAGE_INVALID_ID = "The {} id doesn't exist in the list"
MESSAGE_DUPLICATE_RECORD = "This {} already exists in the list"
MESSAGE_ITEMS_LISTED_OVERVIEW = "{} items listed!"

# Usage strings, one per command family
USAGE_HELP = "help: Shows the list of commands.\nExample: help"

USAGE_EXIT = "exit: Exits the application.\nExample: exit"

USAGE_ADD_PATIENT = (
    "add t/patient: Adds a patient.\n"
    "Parameters: n/NAME p/PHONE [a/AGE] [g/GENDER] [b/BLOOD_TYPE] [m/CONDITION]...\n"
    "Example: add t/patient n/John Doe p/98765432 a/45 g/M b/O+ m/diabetes"
)

USAGE_ADD_DOCTOR = (
    "add t/doctor: Adds a doctor.\n"
    "Parameters: n/NAME p/PHONE [de/DEPARTMENT]\n"
    "Example: add t/doctor n/Jane Tan p/91234567 de/Cardiology"
)

USAGE_ADD_ACTIVITY = (
    "add t/activity: Adds a scheduled activity.\n"
    "Parameters: ti/TITLE s/START e/END [pid/PATIENT_ID] [d/DESCRIPTION]\n"
    "Example: add t/activity ti/Checkup s/15/09/2022 14:00 e/15/09/2022 15:00 pid/P001"
)

USAGE_EDIT_PATIENT = (
    "edit t/patient: Edits the patient identified by its id. "
    "Existing values will be overwritten by the input values.\n"
    "Parameters: i/PATIENT_ID [n/NAME] [p/PHONE] [a/AGE] [g/GENDER] [b/BLOOD_TYPE] "
    "[m/CONDITION]...\n"
    "Example: edit t/patient i/P001 p/91234567"
)

USAGE_EDIT_DOCTOR = (
    "edit t/doctor: Edits the doctor identified by its id. "
    "Existing values will be overwritten by the input values.\n"
    "Parameters: i/DOCTOR_ID [n/NAME] [p/PHONE] [de/DEPARTMENT]\n"
    "Example: edit t/doctor i/D001 de/Neurology"
)

USAGE_VIEW_PATIENT = (
    "view t/patient: Shows the details of the patient identified by its id.\n"
    "Parameters: PATIENT_ID\n"
    "Example: view t/patient P001"
)

USAGE_VIEW_DOCTOR = (
    "view t/doctor: Shows the details of the doctor identified by its id.\n"
    "Parameters: DOCTOR_ID\n"
    "Example: view t/doctor D001"
)

USAGE_DELETE_PATIENT = (
    "delete t/patient: Deletes the patient identified by its id.\n"
    "Parameters: PATIENT_ID\n"
    "Example: delete t/patient P001"
)

USAGE_DELETE_DOCTOR = (
    "delete t/doctor: Deletes the doctor identified by its id.\n"
    "Parameters: DOCTOR_ID\n"
    "Example: delete t/doctor D001"
)

USAGE_DELETE_ACTIVITY = (
    "delete t/activity: Deletes the activity identified by its id.\n"
    "Parameters: ACTIVITY_ID\n"
    "Example: delete t/activity A001"
)

USAGE_FIND = (
    "find: Finds all entries containing any of the given keywords "
    "(case-insensitive) and displays them.\n"
    "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
    "Example: find alice cardiology"
)


def _generate_help_text() -> str:
    """Build the summary shown by the help command."""
    sections = [
        ("add", "Adds a patient, doctor or activity."),
        ("clear", "Empties all patients, doctors or activities."),
        (
            "delete",
            "Deletes the patient, doctor or activity identified by the id shown in "
            "their respective list.",
        ),
        (
            "edit",
            "Edits the details of the patient or doctor identified by its id.\n"
            "    Existing values will be overwritten by the input values.",
        ),
        ("exit", "Exits MedRec."),
        ("find", "Finds entries that contain the given keyword as substring in their attributes."),
        ("list", "Lists all patients, doctors or activities as specified by the user."),
        ("view", "Shows the full details of a single patient or doctor."),
        ("help", "Returns a list of commands and a brief description of what they do."),
    ]
    return "".join(f"{name}:\n    {text}\n\n" for name, text in sections)


MESSAGE_HELP_COMMANDS = _generate_help_text()
