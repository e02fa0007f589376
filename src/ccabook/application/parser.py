"""Turns a line of user input into a Command.

Arguments use prefixes (`n/NAME`, `c/CCA_NAME`, ...). A prefix only counts when it
starts the argument string or follows whitespace.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass, field

from ccabook.application.commands import (
    AddCcaCommand,
    AddCcaToStudentCommand,
    AddCommand,
    AttendCommand,
    Command,
    DeleteCcaCommand,
    DeleteCommand,
    EditCommand,
    EditPersonDescriptor,
    ExitCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
)
from ccabook.application.errors import (
    MESSAGE_INVALID_COMMAND_FORMAT,
    MESSAGE_UNKNOWN_COMMAND,
    ParseError,
)
from ccabook.application.filtered_list import NameContainsKeywordsPredicate
from ccabook.domain import (
    Address,
    Cca,
    CcaName,
    Email,
    Name,
    Person,
    Phone,
    Role,
    SessionCount,
    ValidationError,
)
from ccabook.domain.cca import SESSION_COUNT_CONSTRAINTS

PREFIX_NAME = "n/"
PREFIX_PHONE = "p/"
PREFIX_EMAIL = "e/"
PREFIX_ADDRESS = "a/"
PREFIX_CCA = "c/"
PREFIX_ROLE = "r/"
PREFIX_TOTAL = "t/"
PREFIX_SESSIONS = "s/"

MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."
MESSAGE_INVALID_AMOUNT = "Amount should be a non-zero integer, e.g. 1 or -2."
MESSAGE_NOT_EDITED = "At least one field to edit must be provided."
MESSAGE_DUPLICATE_FIELDS = "Multiple values specified for the following single-valued field(s): "

_COMMAND_FORMAT = re.compile(r"^(?P<word>\S+)(?P<arguments>.*)$", re.DOTALL)


def _invalid_format(usage: str) -> ParseError:
    return ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(usage))


@dataclass
class ArgumentMultimap:
    """Values found for each prefix, in order, plus the text before the first prefix."""

    preamble: str = ""
    values: dict[str, list[str]] = field(default_factory=dict)

    def get_value(self, prefix: str) -> str | None:
        found = self.values.get(prefix)
        return found[-1] if found else None

    def get_all_values(self, prefix: str) -> list[str]:
        return list(self.values.get(prefix, []))

    def has(self, *prefixes: str) -> bool:
        return all(prefix in self.values for prefix in prefixes)

    def verify_no_duplicate_prefixes_for(self, *prefixes: str) -> None:
        duplicated = [p for p in prefixes if len(self.values.get(p, [])) > 1]
        if duplicated:
            raise ParseError(MESSAGE_DUPLICATE_FIELDS + " ".join(duplicated))


def tokenize(args: str, *prefixes: str) -> ArgumentMultimap:
    """Split `args` on the given prefixes. Values are stripped of surrounding whitespace."""
    result = ArgumentMultimap()
    if not prefixes:
        result.preamble = args.strip()
        return result
    pattern = re.compile(
        r"(?:^|(?<=\s))(" + "|".join(re.escape(p) for p in prefixes) + ")"
    )
    matches = list(pattern.finditer(args))
    end_of_preamble = matches[0].start() if matches else len(args)
    result.preamble = args[:end_of_preamble].strip()
    for i, match in enumerate(matches):
        value_end = matches[i + 1].start() if i + 1 < len(matches) else len(args)
        value = args[match.end():value_end].strip()
        result.values.setdefault(match.group(1), []).append(value)
    return result


# --- field parsers ---


def _validated(factory, raw: str):
    try:
        return factory(raw.strip())
    except ValidationError as e:
        raise ParseError(str(e)) from None


def parse_index(raw: str) -> int:
    text = raw.strip()
    if not re.fullmatch(r"[0-9]+", text) or int(text) == 0:
        raise ParseError(MESSAGE_INVALID_INDEX)
    return int(text)


def parse_name(raw: str) -> Name:
    return _validated(Name, raw)


def parse_phone(raw: str) -> Phone:
    return _validated(Phone, raw)


def parse_email(raw: str) -> Email:
    return _validated(Email, raw)


def parse_address(raw: str) -> Address:
    return _validated(Address, raw)


def parse_cca_name(raw: str) -> CcaName:
    return _validated(CcaName, raw)


def parse_role(raw: str) -> Role:
    return _validated(Role, raw)


def parse_session_count(raw: str) -> SessionCount:
    text = raw.strip()
    if not re.fullmatch(r"[0-9]+", text):
        raise ParseError(SESSION_COUNT_CONSTRAINTS)
    return SessionCount(int(text))


def parse_amount(raw: str) -> int:
    text = raw.strip()
    if not re.fullmatch(r"[+-]?[0-9]+", text) or int(text) == 0:
        raise ParseError(MESSAGE_INVALID_AMOUNT)
    return int(text)


# --- command parsers ---


def _index_from_preamble(argmap: ArgumentMultimap, usage: str) -> int:
    if not argmap.preamble:
        raise _invalid_format(usage)
    try:
        return parse_index(argmap.preamble)
    except ParseError as e:
        raise _invalid_format(usage) from e


def parse_add(args: str) -> AddCommand:
    argmap = tokenize(args, PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS)
    if argmap.preamble or not argmap.has(PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS):
        raise _invalid_format(AddCommand.MESSAGE_USAGE)
    argmap.verify_no_duplicate_prefixes_for(
        PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS
    )
    person = Person(
        name=parse_name(argmap.get_value(PREFIX_NAME)),
        phone=parse_phone(argmap.get_value(PREFIX_PHONE)),
        email=parse_email(argmap.get_value(PREFIX_EMAIL)),
        address=parse_address(argmap.get_value(PREFIX_ADDRESS)),
    )
    return AddCommand(person)


def parse_add_cca(args: str) -> AddCcaCommand:
    argmap = tokenize(args, PREFIX_CCA)
    if argmap.preamble or not argmap.has(PREFIX_CCA):
        raise _invalid_format(AddCcaCommand.MESSAGE_USAGE)
    argmap.verify_no_duplicate_prefixes_for(PREFIX_CCA)
    return AddCcaCommand(Cca(parse_cca_name(argmap.get_value(PREFIX_CCA))))


def parse_add_cca_to_student(args: str) -> AddCcaToStudentCommand:
    argmap = tokenize(args, PREFIX_CCA, PREFIX_ROLE, PREFIX_TOTAL)
    if not argmap.has(PREFIX_CCA):
        raise _invalid_format(AddCcaToStudentCommand.MESSAGE_USAGE)
    index = _index_from_preamble(argmap, AddCcaToStudentCommand.MESSAGE_USAGE)
    argmap.verify_no_duplicate_prefixes_for(PREFIX_CCA, PREFIX_ROLE, PREFIX_TOTAL)
    role = argmap.get_value(PREFIX_ROLE)
    total = argmap.get_value(PREFIX_TOTAL)
    return AddCcaToStudentCommand(
        index,
        parse_cca_name(argmap.get_value(PREFIX_CCA)),
        parse_role(role) if role is not None else Role(),
        parse_session_count(total) if total is not None else SessionCount(0),
    )


def parse_delete(args: str) -> DeleteCommand:
    try:
        return DeleteCommand(parse_index(args))
    except ParseError as e:
        raise _invalid_format(DeleteCommand.MESSAGE_USAGE) from e


def parse_delete_cca(args: str) -> DeleteCcaCommand:
    argmap = tokenize(args, PREFIX_CCA)
    if argmap.preamble or not argmap.has(PREFIX_CCA):
        raise _invalid_format(DeleteCcaCommand.MESSAGE_USAGE)
    argmap.verify_no_duplicate_prefixes_for(PREFIX_CCA)
    return DeleteCcaCommand(parse_cca_name(argmap.get_value(PREFIX_CCA)))


def parse_edit(args: str) -> EditCommand:
    argmap = tokenize(args, PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS)
    index = _index_from_preamble(argmap, EditCommand.MESSAGE_USAGE)
    argmap.verify_no_duplicate_prefixes_for(
        PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS
    )
    parsers: dict[str, Callable] = {
        PREFIX_NAME: parse_name,
        PREFIX_PHONE: parse_phone,
        PREFIX_EMAIL: parse_email,
        PREFIX_ADDRESS: parse_address,
    }
    edited = {
        prefix: parse(argmap.get_value(prefix))
        for prefix, parse in parsers.items()
        if argmap.get_value(prefix) is not None
    }
    descriptor = EditPersonDescriptor(
        name=edited.get(PREFIX_NAME),
        phone=edited.get(PREFIX_PHONE),
        email=edited.get(PREFIX_EMAIL),
        address=edited.get(PREFIX_ADDRESS),
    )
    if not descriptor.is_any_field_edited():
        raise ParseError(MESSAGE_NOT_EDITED)
    return EditCommand(index, descriptor)


def parse_attend(args: str) -> AttendCommand:
    argmap = tokenize(args, PREFIX_CCA, PREFIX_SESSIONS)
    if not argmap.has(PREFIX_CCA, PREFIX_SESSIONS):
        raise _invalid_format(AttendCommand.MESSAGE_USAGE)
    index = _index_from_preamble(argmap, AttendCommand.MESSAGE_USAGE)
    argmap.verify_no_duplicate_prefixes_for(PREFIX_CCA, PREFIX_SESSIONS)
    return AttendCommand(
        index,
        parse_cca_name(argmap.get_value(PREFIX_CCA)),
        parse_amount(argmap.get_value(PREFIX_SESSIONS)),
    )


def parse_list(args: str) -> ListCommand:
    argmap = tokenize(args, PREFIX_CCA)
    if argmap.preamble:
        raise _invalid_format(ListCommand.MESSAGE_USAGE)
    if not argmap.has(PREFIX_CCA):
        return ListCommand()
    argmap.verify_no_duplicate_prefixes_for(PREFIX_CCA)
    return ListCommand(parse_cca_name(argmap.get_value(PREFIX_CCA)))


def parse_find(args: str) -> FindCommand:
    keywords = args.split()
    if not keywords:
        raise _invalid_format(FindCommand.MESSAGE_USAGE)
    return FindCommand(NameContainsKeywordsPredicate(tuple(keywords)))


def _no_arguments(command_cls) -> Callable[[str], Command]:
    def parse(args: str) -> Command:
        return command_cls()

    return parse


_PARSERS: dict[str, Callable[[str], Command]] = {
    AddCommand.COMMAND_WORD: parse_add,
    AddCcaCommand.COMMAND_WORD: parse_add_cca,
    AddCcaToStudentCommand.COMMAND_WORD: parse_add_cca_to_student,
    DeleteCommand.COMMAND_WORD: parse_delete,
    DeleteCcaCommand.COMMAND_WORD: parse_delete_cca,
    EditCommand.COMMAND_WORD: parse_edit,
    AttendCommand.COMMAND_WORD: parse_attend,
    ListCommand.COMMAND_WORD: parse_list,
    FindCommand.COMMAND_WORD: parse_find,
    HelpCommand.COMMAND_WORD: _no_arguments(HelpCommand),
    ExitCommand.COMMAND_WORD: _no_arguments(ExitCommand),
}


def parse_command(user_input: str) -> Command:
    """Parse one line of input. Raises ParseError for unknown or malformed commands."""
    match = _COMMAND_FORMAT.match((user_input or "").strip())
    if match is None:
        raise _invalid_format(HelpCommand.MESSAGE_USAGE)
    parse = _PARSERS.get(match.group("word"))
    if parse is None:
        raise ParseError(MESSAGE_UNKNOWN_COMMAND)
    return parse(match.group("arguments"))
