"""In-memory model of the address book: mutations, CCA cascade, attendance and the filtered view."""

import logging
from pathlib import Path

from ccabook.application.filtered_list import (
    PREDICATE_SHOW_ALL_PERSONS,
    FilteredPersonList,
    PersonPredicate,
)
from ccabook.domain import (
    AddressBook,
    Cca,
    GuiSettings,
    NotEnrolledError,
    Person,
    ReadOnlyAddressBook,
    UserPrefs,
)

logger = logging.getLogger(__name__)


def _require_non_null(**kwargs) -> None:
    for name, value in kwargs.items():
        if value is None:
            raise TypeError(f"{name} must not be None")


class ModelManager:
    """Owns one AddressBook and one UserPrefs. The only way to mutate either."""

    def __init__(
        self,
        address_book: ReadOnlyAddressBook | None = None,
        user_prefs: UserPrefs | None = None,
    ) -> None:
        address_book = address_book if address_book is not None else AddressBook()
        user_prefs = user_prefs if user_prefs is not None else UserPrefs()
        logger.debug(
            "Initializing with address book: %r and user prefs %r", address_book, user_prefs
        )
        self._address_book = AddressBook(address_book)
        self._user_prefs = UserPrefs(user_prefs)
        self._filtered_persons = FilteredPersonList(lambda: self._address_book.persons)

    # --- user prefs ---

    @property
    def user_prefs(self) -> UserPrefs:
        return self._user_prefs

    def set_user_prefs(self, user_prefs: UserPrefs) -> None:
        _require_non_null(user_prefs=user_prefs)
        self._user_prefs.reset_data(user_prefs)

    @property
    def gui_settings(self) -> GuiSettings:
        return self._user_prefs.gui_settings

    def set_gui_settings(self, gui_settings: GuiSettings) -> None:
        _require_non_null(gui_settings=gui_settings)
        self._user_prefs.gui_settings = gui_settings

    @property
    def address_book_file_path(self) -> Path:
        return self._user_prefs.address_book_file_path

    def set_address_book_file_path(self, path: Path) -> None:
        _require_non_null(path=path)
        self._user_prefs.address_book_file_path = path

    # --- address book ---

    @property
    def address_book(self) -> ReadOnlyAddressBook:
        return self._address_book

    def set_address_book(self, address_book: ReadOnlyAddressBook) -> None:
        _require_non_null(address_book=address_book)
        self._address_book.reset_data(address_book)

    def has_person(self, person: Person) -> bool:
        _require_non_null(person=person)
        return self._address_book.has_person(person)

    def delete_person(self, target: Person) -> None:
        _require_non_null(target=target)
        self._address_book.remove_person(target)

    def add_person(self, person: Person) -> None:
        _require_non_null(person=person)
        self._address_book.add_person(person)
        self.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)

    def set_person(self, target: Person, edited_person: Person) -> None:
        _require_non_null(target=target, edited_person=edited_person)
        self._address_book.set_person(target, edited_person)

    def has_cca(self, cca: Cca) -> bool:
        _require_non_null(cca=cca)
        return self._address_book.has_cca(cca)

    def add_cca(self, cca: Cca) -> None:
        _require_non_null(cca=cca)
        self._address_book.add_cca(cca)

    def set_cca(self, target: Cca, edited_cca: Cca) -> None:
        _require_non_null(target=target, edited_cca=edited_cca)
        self._address_book.set_cca(target, edited_cca)

    def find_cca(self, cca: Cca) -> Cca | None:
        _require_non_null(cca=cca)
        return self._address_book.find_cca(cca)

    def delete_cca(self, target: Cca) -> None:
        """Remove `target` and drop every person's record for it.

        The replacement persons are computed before anything is written, so
        a failure leaves the address book untouched.
        """
        _require_non_null(target=target)
        affected = 0
        updated = []
        for person in self._address_book.persons:
            if person.has_cca(target):
                updated.append(person.without_cca(target))
                affected += 1
            else:
                updated.append(person)
        self._address_book.remove_cca(target)
        if affected:
            self._address_book.set_persons(updated)
        logger.info("Deleted CCA %s; removed it from %d person(s)", target, affected)

    def record_attendance(self, cca: Cca, person: Person, amount: int) -> Person:
        """Add `amount` (may be negative) to the person's attended sessions for `cca`.

        Raises NotEnrolledError when the person has no record for `cca`, and
        ValidationError when the attended count would drop below zero. The
        total is not used as an upper bound. Returns the replacement person.
        """
        _require_non_null(cca=cca, person=person, amount=amount)
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise TypeError("amount must be an int")
        info = person.get_cca_information(cca)
        if info is None:
            raise NotEnrolledError("Person does not have this CCA")
        new_info = info.with_attendance(info.attendance.record(amount))
        new_person = person.with_cca_information(
            (person.cca_information - {info}) | {new_info}
        )
        self._address_book.set_person(person, new_person)
        logger.info(
            "Recorded %+d session(s) of %s for %s: %s -> %s",
            amount,
            cca,
            person.name,
            info.attendance,
            new_info.attendance,
        )
        return new_person

    # --- views ---

    def get_cca_list(self) -> tuple[Cca, ...]:
        return self._address_book.ccas

    @property
    def filtered_persons(self) -> FilteredPersonList:
        return self._filtered_persons

    def get_filtered_person_list(self) -> FilteredPersonList:
        return self._filtered_persons

    def update_filtered_person_list(self, predicate: PersonPredicate) -> None:
        _require_non_null(predicate=predicate)
        self._filtered_persons.predicate = predicate

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, ModelManager):
            return NotImplemented
        return (
            self._address_book == other._address_book
            and self._user_prefs == other._user_prefs
            and self._filtered_persons == other._filtered_persons
        )
