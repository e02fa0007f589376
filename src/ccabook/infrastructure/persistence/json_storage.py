"""JSON file implementations of AddressBookStorage and UserPrefsStorage."""

import logging
from pathlib import Path

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ccabook.application.errors import StorageError
from ccabook.domain import AddressBook, ReadOnlyAddressBook, UserPrefs
from ccabook.infrastructure.persistence.json_models import (
    JsonSerializableAddressBook,
    JsonUserPrefs,
)

logger = logging.getLogger(__name__)


def _read_json(path: Path, model: type[BaseModel]) -> BaseModel | None:
    if not path.exists():
        logger.info("%s not found", path)
        return None
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise StorageError(f"Could not read {path}: {e}") from e
    try:
        return model.model_validate_json(raw)
    except PydanticValidationError as e:
        logger.warning("Illegal values found in %s: %s", path, e)
        raise StorageError(f"Illegal values found in {path}") from e


def _write_json(path: Path, data: BaseModel) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(data.model_dump_json(indent=2), encoding="utf-8")
    except OSError as e:
        raise StorageError(f"Could not write {path}: {e}") from e


class JsonAddressBookStorage:
    """Stores the address book as one JSON document."""

    def __init__(self, file_path: Path | str) -> None:
        self._file_path = Path(file_path)

    @property
    def address_book_file_path(self) -> Path:
        return self._file_path

    def read_address_book(self, file_path: Path | None = None) -> AddressBook | None:
        path = Path(file_path) if file_path is not None else self._file_path
        data = _read_json(path, JsonSerializableAddressBook)
        if data is None:
            return None
        try:
            book = data.to_model()
        except StorageError:
            logger.warning("Invalid address book data in %s", path)
            raise
        logger.info("Loaded %r from %s", book, path)
        return book

    def save_address_book(
        self, address_book: ReadOnlyAddressBook, file_path: Path | None = None
    ) -> None:
        if address_book is None:
            raise TypeError("address_book must not be None")
        path = Path(file_path) if file_path is not None else self._file_path
        _write_json(path, JsonSerializableAddressBook.from_model(address_book))
        logger.debug("Saved address book to %s", path)


class JsonUserPrefsStorage:
    """Stores user preferences as JSON."""

    def __init__(self, file_path: Path | str) -> None:
        self._file_path = Path(file_path)

    @property
    def user_prefs_file_path(self) -> Path:
        return self._file_path

    def read_user_prefs(self) -> UserPrefs | None:
        data = _read_json(self._file_path, JsonUserPrefs)
        if data is None:
            return None
        return data.to_model()

    def save_user_prefs(self, user_prefs: UserPrefs) -> None:
        _write_json(self._file_path, JsonUserPrefs.from_model(user_prefs))
        logger.debug("Saved user prefs to %s", self._file_path)


class StorageManager:
    """Address book and user prefs storage behind one object."""

    def __init__(
        self,
        address_book_storage: JsonAddressBookStorage,
        user_prefs_storage: JsonUserPrefsStorage,
    ) -> None:
        self._address_book_storage = address_book_storage
        self._user_prefs_storage = user_prefs_storage

    @property
    def address_book_file_path(self) -> Path:
        return self._address_book_storage.address_book_file_path

    def read_address_book(self) -> AddressBook | None:
        return self._address_book_storage.read_address_book()

    def save_address_book(self, address_book: ReadOnlyAddressBook) -> None:
        self._address_book_storage.save_address_book(address_book)

    @property
    def user_prefs_file_path(self) -> Path:
        return self._user_prefs_storage.user_prefs_file_path

    def read_user_prefs(self) -> UserPrefs | None:
        return self._user_prefs_storage.read_user_prefs()

    def save_user_prefs(self, user_prefs: UserPrefs) -> None:
        self._user_prefs_storage.save_user_prefs(user_prefs)
