"""Application ports (interfaces). Implemented by infrastructure adapters."""

from pathlib import Path
from typing import Protocol

from ccabook.domain import AddressBook, ReadOnlyAddressBook, UserPrefs


class AddressBookStorage(Protocol):
    """Persists and loads the address book."""

    @property
    def address_book_file_path(self) -> Path:
        ...

    def read_address_book(self) -> AddressBook | None:
        """Return the stored address book, or None if nothing has been saved yet.
        Raises StorageError if the stored data cannot be read or is invalid."""
        ...

    def save_address_book(self, address_book: ReadOnlyAddressBook) -> None:
        """Write the address book. Raises StorageError on IO failure."""
        ...


class UserPrefsStorage(Protocol):
    """Persists and loads user preferences."""

    @property
    def user_prefs_file_path(self) -> Path:
        ...

    def read_user_prefs(self) -> UserPrefs | None:
        """Return stored preferences, or None if the file does not exist."""
        ...

    def save_user_prefs(self, user_prefs: UserPrefs) -> None:
        ...


class Storage(AddressBookStorage, UserPrefsStorage, Protocol):
    """Both stores behind one object."""
