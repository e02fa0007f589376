"""
ccabook core: clean-architecture layout.

- domain: entities (Person, Cca, CcaInformation, Attendance) and the AddressBook aggregate.
- application: ModelManager, filtered view, commands, parser, ports.
- infrastructure: adapters (JSON storage, sample data).
"""

from ccabook.application import (
    CommandError,
    CommandResult,
    LogicManager,
    ModelManager,
    ParseError,
    StorageError,
    parse_command,
)
from ccabook.domain import (
    AddressBook,
    Attendance,
    Cca,
    CcaInformation,
    NotEnrolledError,
    Person,
    SessionCount,
    UserPrefs,
    ValidationError,
)
from ccabook.infrastructure import JsonAddressBookStorage, JsonUserPrefsStorage, StorageManager

__all__ = [
    "AddressBook",
    "Attendance",
    "Cca",
    "CcaInformation",
    "CommandError",
    "CommandResult",
    "JsonAddressBookStorage",
    "JsonUserPrefsStorage",
    "LogicManager",
    "ModelManager",
    "NotEnrolledError",
    "ParseError",
    "Person",
    "SessionCount",
    "StorageError",
    "StorageManager",
    "UserPrefs",
    "ValidationError",
    "parse_command",
]
