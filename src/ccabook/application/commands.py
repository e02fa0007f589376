"""Executable commands. Each one calls exactly one mutating ModelManager operation."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace

from ccabook.application.errors import (
    MESSAGE_INVALID_PERSON_DISPLAYED_INDEX,
    CommandError,
)
from ccabook.application.filtered_list import (
    PREDICATE_SHOW_ALL_PERSONS,
    InCcaPredicate,
    NameContainsKeywordsPredicate,
)
from ccabook.application.model_manager import ModelManager
from ccabook.domain import (
    Address,
    Attendance,
    Cca,
    CcaInformation,
    CcaName,
    DuplicatePersonError,
    Email,
    Name,
    NotEnrolledError,
    Person,
    Phone,
    Role,
    SessionCount,
    ValidationError,
)

MESSAGE_CCA_NOT_FOUND = "This CCA does not exist in the address book"


@dataclass(frozen=True)
class CommandResult:
    feedback_to_user: str
    show_help: bool = False
    exit: bool = False


class Command(ABC):
    COMMAND_WORD: str = ""
    MESSAGE_USAGE: str = ""

    @abstractmethod
    def execute(self, model: ModelManager) -> CommandResult:
        ...


def _person_at(model: ModelManager, index: int) -> Person:
    """Resolve a 1-based index against the filtered list shown to the user."""
    persons = model.get_filtered_person_list()
    if index < 1 or index > len(persons):
        raise CommandError(MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)
    return persons[index - 1]


def _stored_cca(model: ModelManager, name: CcaName) -> Cca:
    cca = model.find_cca(Cca(name))
    if cca is None:
        raise CommandError(MESSAGE_CCA_NOT_FOUND)
    return cca


@dataclass(frozen=True)
class AddCommand(Command):
    COMMAND_WORD = "add"
    MESSAGE_USAGE = (
        "add: Adds a person to the address book. "
        "Parameters: n/NAME p/PHONE e/EMAIL a/ADDRESS\n"
        "Example: add n/John Doe p/98765432 e/johnd@example.com a/311, Clementi Ave 2, #02-25"
    )

    to_add: Person

    def execute(self, model: ModelManager) -> CommandResult:
        if model.has_person(self.to_add):
            raise CommandError("This person already exists in the address book")
        model.add_person(self.to_add)
        return CommandResult(f"New person added: {self.to_add}")


@dataclass(frozen=True)
class AddCcaCommand(Command):
    COMMAND_WORD = "addcca"
    MESSAGE_USAGE = (
        "addcca: Adds a CCA to the address book. Parameters: c/CCA_NAME\n"
        "Example: addcca c/Choir"
    )

    to_add: Cca

    def execute(self, model: ModelManager) -> CommandResult:
        if model.has_cca(self.to_add):
            raise CommandError("This CCA already exists in the address book")
        model.add_cca(self.to_add)
        return CommandResult(f"New CCA added: {self.to_add}")


@dataclass(frozen=True)
class AddCcaToStudentCommand(Command):
    COMMAND_WORD = "addtocca"
    MESSAGE_USAGE = (
        "addtocca: Adds the person identified by the index number used in the displayed "
        "person list to an existing CCA. "
        "Parameters: INDEX (must be a positive integer) c/CCA_NAME [r/ROLE] [t/TOTAL_SESSIONS]\n"
        "Example: addtocca 1 c/Choir r/Secretary t/12"
    )

    index: int
    cca_name: CcaName
    role: Role = field(default_factory=Role)
    total_sessions: SessionCount = field(default_factory=SessionCount)

    def execute(self, model: ModelManager) -> CommandResult:
        person = _person_at(model, self.index)
        cca = _stored_cca(model, self.cca_name)
        if person.has_cca(cca):
            raise CommandError("This person is already in this CCA")
        info = CcaInformation(cca, self.role, Attendance(SessionCount(0), self.total_sessions))
        edited = person.with_cca_information(person.cca_information | {info})
        model.set_person(person, edited)
        return CommandResult(f"Added {edited.name} to {cca} as {self.role}")


@dataclass(frozen=True)
class DeleteCommand(Command):
    COMMAND_WORD = "delete"
    MESSAGE_USAGE = (
        "delete: Deletes the person identified by the index number used in the displayed "
        "person list.\nParameters: INDEX (must be a positive integer)\nExample: delete 1"
    )

    index: int

    def execute(self, model: ModelManager) -> CommandResult:
        person = _person_at(model, self.index)
        model.delete_person(person)
        return CommandResult(f"Deleted Person: {person}")


@dataclass(frozen=True)
class DeleteCcaCommand(Command):
    COMMAND_WORD = "deletecca"
    MESSAGE_USAGE = (
        "deletecca: Deletes a CCA and removes it from every person in it.\n"
        "Parameters: c/CCA_NAME\nExample: deletecca c/Choir"
    )

    cca_name: CcaName

    def execute(self, model: ModelManager) -> CommandResult:
        cca = _stored_cca(model, self.cca_name)
        model.delete_cca(cca)
        return CommandResult(f"Deleted CCA: {cca}")


@dataclass(frozen=True)
class EditPersonDescriptor:
    """Fields to change on a person. None means keep the current value."""

    name: Name | None = None
    phone: Phone | None = None
    email: Email | None = None
    address: Address | None = None

    def is_any_field_edited(self) -> bool:
        return any(
            value is not None for value in (self.name, self.phone, self.email, self.address)
        )

    def apply_to(self, person: Person) -> Person:
        changes = {
            key: value
            for key, value in (
                ("name", self.name),
                ("phone", self.phone),
                ("email", self.email),
                ("address", self.address),
            )
            if value is not None
        }
        return replace(person, **changes)


@dataclass(frozen=True)
class EditCommand(Command):
    COMMAND_WORD = "edit"
    MESSAGE_USAGE = (
        "edit: Edits the details of the person identified by the index number used in the "
        "displayed person list. Existing values will be overwritten by the input values.\n"
        "Parameters: INDEX (must be a positive integer) [n/NAME] [p/PHONE] [e/EMAIL] [a/ADDRESS]\n"
        "Example: edit 1 p/91234567 e/johndoe@example.com"
    )

    index: int
    descriptor: EditPersonDescriptor

    def execute(self, model: ModelManager) -> CommandResult:
        person = _person_at(model, self.index)
        edited = self.descriptor.apply_to(person)
        try:
            model.set_person(person, edited)
        except DuplicatePersonError:
            raise CommandError("This person already exists in the address book") from None
        model.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)
        return CommandResult(f"Edited Person: {edited}")


@dataclass(frozen=True)
class AttendCommand(Command):
    COMMAND_WORD = "attend"
    MESSAGE_USAGE = (
        "attend: Records attendance for the person identified by the index number used in "
        "the displayed person list. A negative amount corrects earlier records.\n"
        "Parameters: INDEX (must be a positive integer) c/CCA_NAME s/AMOUNT\n"
        "Example: attend 1 c/Choir s/1"
    )

    index: int
    cca_name: CcaName
    amount: int

    def execute(self, model: ModelManager) -> CommandResult:
        person = _person_at(model, self.index)
        cca = _stored_cca(model, self.cca_name)
        try:
            edited = model.record_attendance(cca, person, self.amount)
        except NotEnrolledError:
            raise CommandError(f"{person.name} is not in {cca}") from None
        except ValidationError as e:
            raise CommandError(f"Attendance not recorded: {e}") from None
        attendance = edited.get_cca_information(cca).attendance
        return CommandResult(f"Attendance for {edited.name} in {cca} is now {attendance}")


@dataclass(frozen=True)
class ListCommand(Command):
    COMMAND_WORD = "list"
    MESSAGE_USAGE = (
        "list: Lists all persons, or only the members of one CCA.\n"
        "Parameters: [c/CCA_NAME]\nExample: list c/Choir"
    )

    cca_name: CcaName | None = None

    def execute(self, model: ModelManager) -> CommandResult:
        if self.cca_name is None:
            model.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)
            return CommandResult("Listed all persons")
        cca = _stored_cca(model, self.cca_name)
        model.update_filtered_person_list(InCcaPredicate(cca))
        return CommandResult(f"Listed members of {cca}")


@dataclass(frozen=True)
class FindCommand(Command):
    COMMAND_WORD = "find"
    MESSAGE_USAGE = (
        "find: Finds all persons whose names contain any of the specified keywords "
        "(case-insensitive) and displays them as a list with index numbers.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\nExample: find alice bob charlie"
    )

    predicate: NameContainsKeywordsPredicate

    def execute(self, model: ModelManager) -> CommandResult:
        model.update_filtered_person_list(self.predicate)
        count = len(model.get_filtered_person_list())
        return CommandResult(f"{count} persons listed!")


@dataclass(frozen=True)
class HelpCommand(Command):
    COMMAND_WORD = "help"
    MESSAGE_USAGE = "help: Shows program usage instructions.\nExample: help"

    def execute(self, model: ModelManager) -> CommandResult:
        usage = "\n\n".join(command.MESSAGE_USAGE for command in ALL_COMMANDS)
        return CommandResult(usage, show_help=True)


@dataclass(frozen=True)
class ExitCommand(Command):
    COMMAND_WORD = "exit"
    MESSAGE_USAGE = "exit: Exits the program.\nExample: exit"

    def execute(self, model: ModelManager) -> CommandResult:
        return CommandResult("Exiting Address Book as requested ...", exit=True)


ALL_COMMANDS: tuple[type[Command], ...] = (
    AddCommand,
    AddCcaCommand,
    AddCcaToStudentCommand,
    DeleteCommand,
    DeleteCcaCommand,
    EditCommand,
    AttendCommand,
    ListCommand,
    FindCommand,
    HelpCommand,
    ExitCommand,
)
