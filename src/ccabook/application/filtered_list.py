"""Live, predicate-filtered view over the address book's persons."""

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass

from ccabook.domain import Cca, Person

PersonPredicate = Callable[[Person], bool]


def show_all_persons(person: Person) -> bool:
    return True


PREDICATE_SHOW_ALL_PERSONS: PersonPredicate = show_all_persons


@dataclass(frozen=True)
class NameContainsKeywordsPredicate:
    """Matches persons whose name contains any keyword as a whole word (case-insensitive)."""

    keywords: tuple[str, ...]

    def __call__(self, person: Person) -> bool:
        words = person.name.value.lower().split()
        return any(keyword.lower() in words for keyword in self.keywords)


@dataclass(frozen=True)
class InCcaPredicate:
    """Matches persons holding a CCA record for `cca`."""

    cca: Cca

    def __call__(self, person: Person) -> bool:
        return person.has_cca(self.cca)


class FilteredPersonList(Sequence):
    """
    Read-only sequence of the persons accepted by the current predicate.
    Recomputed from the source on every read, so it always reflects the latest mutation.
    """

    def __init__(
        self,
        source: Callable[[], tuple[Person, ...]],
        predicate: PersonPredicate = PREDICATE_SHOW_ALL_PERSONS,
    ) -> None:
        self._source = source
        self._predicate = predicate

    @property
    def predicate(self) -> PersonPredicate:
        return self._predicate

    @predicate.setter
    def predicate(self, predicate: PersonPredicate) -> None:
        if predicate is None:
            raise TypeError("predicate must not be None")
        self._predicate = predicate

    def _current(self) -> list[Person]:
        return [person for person in self._source() if self._predicate(person)]

    def __getitem__(self, index):
        return self._current()[index]

    def __len__(self) -> int:
        return len(self._current())

    def __iter__(self) -> Iterator[Person]:
        return iter(self._current())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sequence) or isinstance(other, str):
            return NotImplemented
        return self._current() == list(other)

    def __repr__(self) -> str:
        return f"FilteredPersonList({self._current()!r})"
