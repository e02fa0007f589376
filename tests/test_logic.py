"""Tests for LogicManager: parse, execute, save."""

import pytest

from ccabook.application import (
    CommandError,
    LogicManager,
    ModelManager,
    ParseError,
    StorageError,
)
from ccabook.domain import Cca, GuiSettings
from ccabook.infrastructure import JsonAddressBookStorage, JsonUserPrefsStorage, StorageManager


def _logic(tmp_path) -> tuple[LogicManager, StorageManager]:
    storage = StorageManager(
        JsonAddressBookStorage(tmp_path / "addressbook.json"),
        JsonUserPrefsStorage(tmp_path / "preferences.json"),
    )
    return LogicManager(ModelManager(), storage), storage


class _FailingStorage:
    def save_address_book(self, address_book) -> None:
        raise StorageError("disk full")


def test_execute_saves_after_command(tmp_path) -> None:
    logic, storage = _logic(tmp_path)

    result = logic.execute("addcca c/Choir")

    assert result.feedback_to_user == "New CCA added: Choir"
    assert logic.get_cca_list() == (Cca("Choir"),)
    saved = storage.read_address_book()
    assert saved is not None
    assert saved.ccas == (Cca("Choir"),)


def test_parse_error_does_not_save(tmp_path) -> None:
    logic, storage = _logic(tmp_path)
    with pytest.raises(ParseError):
        logic.execute("addcca")
    assert storage.read_address_book() is None


def test_command_error_reaches_caller(tmp_path) -> None:
    logic, _ = _logic(tmp_path)
    with pytest.raises(CommandError, match="index provided is invalid"):
        logic.execute("delete 1")


def test_save_failure_becomes_command_error() -> None:
    logic = LogicManager(ModelManager(), _FailingStorage())
    with pytest.raises(CommandError, match="Could not save data.*disk full"):
        logic.execute("addcca c/Choir")


def test_filtered_list_and_gui_settings(tmp_path) -> None:
    logic, _ = _logic(tmp_path)
    logic.execute("add n/Alice p/91234567 e/alice@example.com a/Blk 1")
    assert [p.name.value for p in logic.get_filtered_person_list()] == ["Alice"]

    settings = GuiSettings(900, 650)
    logic.set_gui_settings(settings)
    assert logic.gui_settings == settings
