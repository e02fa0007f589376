"""Domain layer: entities, value objects and the AddressBook aggregate. No dependencies on outer layers."""

from ccabook.domain.address_book import AddressBook, ReadOnlyAddressBook
from ccabook.domain.cca import Attendance, Cca, CcaInformation, CcaName, Role, SessionCount
from ccabook.domain.entities import Address, Email, Name, Person, Phone
from ccabook.domain.errors import (
    CcaBookError,
    CcaNotFoundError,
    DuplicateCcaError,
    DuplicatePersonError,
    ModelError,
    NotEnrolledError,
    PersonNotFoundError,
    ValidationError,
)
from ccabook.domain.prefs import GuiSettings, UserPrefs

__all__ = [
    "Address",
    "AddressBook",
    "Attendance",
    "Cca",
    "CcaBookError",
    "CcaInformation",
    "CcaName",
    "CcaNotFoundError",
    "DuplicateCcaError",
    "DuplicatePersonError",
    "Email",
    "GuiSettings",
    "ModelError",
    "Name",
    "NotEnrolledError",
    "Person",
    "PersonNotFoundError",
    "Phone",
    "ReadOnlyAddressBook",
    "Role",
    "SessionCount",
    "UserPrefs",
    "ValidationError",
]
