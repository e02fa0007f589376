"""AddressBook aggregate: ordered, duplicate-free persons and CCAs."""

from collections.abc import Callable, Iterable, Iterator
from typing import Generic, Protocol, TypeVar

from ccabook.domain.cca import Cca
from ccabook.domain.entities import Person
from ccabook.domain.errors import (
    CcaNotFoundError,
    DuplicateCcaError,
    DuplicatePersonError,
    ModelError,
    PersonNotFoundError,
)

T = TypeVar("T")


class ReadOnlyAddressBook(Protocol):
    """Read-only snapshot of an address book, as handed over by storage."""

    @property
    def persons(self) -> tuple[Person, ...]:
        ...

    @property
    def ccas(self) -> tuple[Cca, ...]:
        ...


class UniqueList(Generic[T]):
    """List that refuses two items for which `is_same` holds. Order is insertion order.

    Membership uses `is_same`; removal and replacement locate the exact (==) item.
    """

    def __init__(
        self,
        is_same: Callable[[T, T], bool],
        duplicate_error: Callable[[], ModelError],
        not_found_error: Callable[[], ModelError],
    ) -> None:
        self._is_same = is_same
        self._duplicate_error = duplicate_error
        self._not_found_error = not_found_error
        self._items: list[T] = []

    def contains(self, item: T) -> bool:
        if item is None:
            raise TypeError("item must not be None")
        return any(self._is_same(existing, item) for existing in self._items)

    def add(self, item: T) -> None:
        if self.contains(item):
            raise self._duplicate_error()
        self._items.append(item)

    def set_item(self, target: T, edited: T) -> None:
        if target is None or edited is None:
            raise TypeError("target and edited item must not be None")
        try:
            index = self._items.index(target)
        except ValueError:
            raise self._not_found_error() from None
        for i, existing in enumerate(self._items):
            if i != index and self._is_same(existing, edited):
                raise self._duplicate_error()
        self._items[index] = edited

    def remove(self, item: T) -> None:
        if item is None:
            raise TypeError("item must not be None")
        try:
            self._items.remove(item)
        except ValueError:
            raise self._not_found_error() from None

    def set_all(self, items: Iterable[T]) -> None:
        new_items = list(items)
        for i, item in enumerate(new_items):
            if item is None:
                raise TypeError("items must not contain None")
            if any(self._is_same(other, item) for other in new_items[:i]):
                raise self._duplicate_error()
        self._items = new_items

    def as_tuple(self) -> tuple[T, ...]:
        return tuple(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UniqueList):
            return NotImplemented
        return self._items == other._items


class AddressBook:
    """Wraps all data at the address-book level."""

    def __init__(self, to_be_copied: ReadOnlyAddressBook | None = None) -> None:
        self._persons: UniqueList[Person] = UniqueList(
            Person.is_same_person, DuplicatePersonError, PersonNotFoundError
        )
        self._ccas: UniqueList[Cca] = UniqueList(
            Cca.is_same_cca, DuplicateCcaError, CcaNotFoundError
        )
        if to_be_copied is not None:
            self.reset_data(to_be_copied)

    # --- whole-list operations ---

    def set_persons(self, persons: Iterable[Person]) -> None:
        """Replace all persons. The list must not contain duplicate persons."""
        self._persons.set_all(persons)

    def set_ccas(self, ccas: Iterable[Cca]) -> None:
        """Replace all CCAs. The list must not contain duplicate CCAs."""
        self._ccas.set_all(ccas)

    def reset_data(self, new_data: ReadOnlyAddressBook) -> None:
        """Replace contents with `new_data`. Either both lists are replaced or neither."""
        if new_data is None:
            raise TypeError("new_data must not be None")
        persons = UniqueList(Person.is_same_person, DuplicatePersonError, PersonNotFoundError)
        persons.set_all(new_data.persons)
        ccas = UniqueList(Cca.is_same_cca, DuplicateCcaError, CcaNotFoundError)
        ccas.set_all(new_data.ccas)
        self._persons = persons
        self._ccas = ccas

    # --- person-level operations ---

    def has_person(self, person: Person) -> bool:
        return self._persons.contains(person)

    def add_person(self, person: Person) -> None:
        self._persons.add(person)

    def set_person(self, target: Person, edited_person: Person) -> None:
        self._persons.set_item(target, edited_person)

    def remove_person(self, key: Person) -> None:
        self._persons.remove(key)

    # --- cca-level operations ---

    def has_cca(self, cca: Cca) -> bool:
        return self._ccas.contains(cca)

    def add_cca(self, cca: Cca) -> None:
        self._ccas.add(cca)

    def set_cca(self, target: Cca, edited_cca: Cca) -> None:
        self._ccas.set_item(target, edited_cca)

    def remove_cca(self, key: Cca) -> None:
        self._ccas.remove(key)

    def find_cca(self, cca: Cca) -> Cca | None:
        """Return the stored CCA with the same name, or None."""
        for existing in self._ccas:
            if existing.is_same_cca(cca):
                return existing
        return None

    # --- read-only views ---

    @property
    def persons(self) -> tuple[Person, ...]:
        return self._persons.as_tuple()

    @property
    def ccas(self) -> tuple[Cca, ...]:
        return self._ccas.as_tuple()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddressBook):
            return NotImplemented
        return self._persons == other._persons and self._ccas == other._ccas

    def __repr__(self) -> str:
        return f"AddressBook(persons={len(self._persons)}, ccas={len(self._ccas)})"
