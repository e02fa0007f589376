"""Infrastructure layer: concrete implementations of application ports."""

from ccabook.infrastructure.persistence.json_storage import (
    JsonAddressBookStorage,
    JsonUserPrefsStorage,
    StorageManager,
)
from ccabook.infrastructure.sample_data import sample_address_book

__all__ = [
    "JsonAddressBookStorage",
    "JsonUserPrefsStorage",
    "StorageManager",
    "sample_address_book",
]
