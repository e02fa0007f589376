"""Runs user commands against the model and saves after each one."""

import logging

from ccabook.application.commands import CommandResult
from ccabook.application.errors import CommandError, StorageError
from ccabook.application.filtered_list import FilteredPersonList
from ccabook.application.model_manager import ModelManager
from ccabook.application.parser import parse_command
from ccabook.application.ports import Storage
from ccabook.domain import Cca, GuiSettings

logger = logging.getLogger(__name__)

FILE_OPS_ERROR_FORMAT = "Could not save data due to the following error: {}"


class LogicManager:
    """Parse -> execute -> save. ParseError and CommandError reach the caller unchanged."""

    def __init__(self, model: ModelManager, storage: Storage) -> None:
        self._model = model
        self._storage = storage

    def execute(self, command_text: str) -> CommandResult:
        logger.info("----------------[USER COMMAND][%s]", command_text)
        command = parse_command(command_text)
        result = command.execute(self._model)
        try:
            self._storage.save_address_book(self._model.address_book)
        except StorageError as e:
            raise CommandError(FILE_OPS_ERROR_FORMAT.format(e)) from e
        return result

    def get_filtered_person_list(self) -> FilteredPersonList:
        return self._model.get_filtered_person_list()

    def get_cca_list(self) -> tuple[Cca, ...]:
        return self._model.get_cca_list()

    @property
    def gui_settings(self) -> GuiSettings:
        return self._model.gui_settings

    def set_gui_settings(self, gui_settings: GuiSettings) -> None:
        self._model.set_gui_settings(gui_settings)
