"""Application layer: model manager, commands, parsing and ports. Depends only on domain."""

from ccabook.application.commands import Command, CommandResult
from ccabook.application.errors import CommandError, ParseError, StorageError
from ccabook.application.filtered_list import (
    PREDICATE_SHOW_ALL_PERSONS,
    FilteredPersonList,
    InCcaPredicate,
    NameContainsKeywordsPredicate,
)
from ccabook.application.logic import LogicManager
from ccabook.application.model_manager import ModelManager
from ccabook.application.parser import parse_command
from ccabook.application.ports import AddressBookStorage, Storage, UserPrefsStorage

__all__ = [
    "AddressBookStorage",
    "Command",
    "CommandError",
    "CommandResult",
    "FilteredPersonList",
    "InCcaPredicate",
    "LogicManager",
    "ModelManager",
    "NameContainsKeywordsPredicate",
    "PREDICATE_SHOW_ALL_PERSONS",
    "ParseError",
    "Storage",
    "StorageError",
    "UserPrefsStorage",
    "parse_command",
]
