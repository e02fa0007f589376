"""
Interactive front end: reads commands from stdin and prints the filtered person list.
Run: python -m ccabook (from repo root, with .env or env vars set).
"""
import logging
import sys

from ccabook.config import Settings, configure_logging, load_env

load_env()

from ccabook.application import (
    CommandError,
    LogicManager,
    ModelManager,
    ParseError,
    StorageError,
)
from ccabook.domain import AddressBook, UserPrefs
from ccabook.domain.phone import set_default_region
from ccabook.infrastructure import (
    JsonAddressBookStorage,
    JsonUserPrefsStorage,
    StorageManager,
    sample_address_book,
)

logger = logging.getLogger(__name__)

PROMPT = "> "


def _init_prefs(storage: JsonUserPrefsStorage, settings: Settings) -> UserPrefs:
    try:
        prefs = storage.read_user_prefs()
    except StorageError:
        logger.warning(
            "Preference file at %s could not be loaded. Using default preferences.",
            storage.user_prefs_file_path,
        )
        prefs = None
    if prefs is None:
        prefs = UserPrefs()
        prefs.address_book_file_path = settings.data_path
    return prefs


def _init_address_book(storage: JsonAddressBookStorage) -> AddressBook:
    try:
        book = storage.read_address_book()
    except StorageError:
        logger.warning(
            "Data file at %s could not be loaded. Starting with an empty address book.",
            storage.address_book_file_path,
        )
        return AddressBook()
    if book is None:
        logger.info(
            "Creating a new data file %s populated with a sample address book.",
            storage.address_book_file_path,
        )
        return sample_address_book()
    return book


def _render(logic: LogicManager) -> str:
    lines = []
    for i, person in enumerate(logic.get_filtered_person_list(), start=1):
        lines.append(f"{i}. {person}")
    ccas = ", ".join(str(cca) for cca in logic.get_cca_list()) or "none"
    lines.append(f"CCAs: {ccas}")
    return "\n".join(lines)


def main() -> int:
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    set_default_region(settings.phone_region)

    prefs_storage = JsonUserPrefsStorage(settings.prefs_path)
    prefs = _init_prefs(prefs_storage, settings)
    book_storage = JsonAddressBookStorage(prefs.address_book_file_path)
    storage = StorageManager(book_storage, prefs_storage)
    model = ModelManager(_init_address_book(book_storage), prefs)
    logic = LogicManager(model, storage)

    logger.info("Starting ccabook with data file %s", book_storage.address_book_file_path)
    print(_render(logic))
    try:
        while True:
            try:
                line = input(PROMPT)
            except EOFError:
                break
            if not line.strip():
                continue
            try:
                result = logic.execute(line)
            except (ParseError, CommandError) as e:
                print(e)
                continue
            print(result.feedback_to_user)
            if result.exit:
                break
            if not result.show_help:
                print(_render(logic))
    finally:
        try:
            storage.save_user_prefs(model.user_prefs)
        except StorageError as e:
            logger.error("Failed to save preferences: %s", e)
    logger.info("Exiting ccabook")
    return 0


if __name__ == "__main__":
    sys.exit(main())
