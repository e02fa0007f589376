"""Exceptions raised by the domain layer and the address book aggregate."""


class CcaBookError(Exception):
    """Base exception for all ccabook errors."""


class ValidationError(CcaBookError, ValueError):
    """Raised when a field value does not satisfy its format rule."""


class NotEnrolledError(CcaBookError, ValueError):
    """Raised when attendance is recorded for a CCA the person is not in."""


class ModelError(CcaBookError):
    """A call that would break an address book invariant. Signals a caller bug."""


class DuplicatePersonError(ModelError):
    def __init__(self) -> None:
        super().__init__("Operation would result in duplicate persons")


class PersonNotFoundError(ModelError):
    def __init__(self) -> None:
        super().__init__("Person not found in the address book")


class DuplicateCcaError(ModelError):
    def __init__(self) -> None:
        super().__init__("Operation would result in duplicate CCAs")


class CcaNotFoundError(ModelError):
    def __init__(self) -> None:
        super().__init__("CCA not found in the address book")
