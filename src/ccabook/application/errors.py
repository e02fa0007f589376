"""Errors surfaced to the user by the command layer and storage."""

from ccabook.domain.errors import CcaBookError

MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"
MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_PERSON_DISPLAYED_INDEX = "The person index provided is invalid"


class ParseError(CcaBookError):
    """User input does not match the expected command format. Never mutates the model."""


class CommandError(CcaBookError):
    """A parsed command could not be carried out against the current model."""


class StorageError(CcaBookError):
    """Data could not be read from or written to disk."""
