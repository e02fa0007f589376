"""Unit tests for ModelManager: delegation, CCA delete cascade, attendance and the filtered view."""

from pathlib import Path

import pytest

from ccabook.application import (
    PREDICATE_SHOW_ALL_PERSONS,
    InCcaPredicate,
    ModelManager,
    NameContainsKeywordsPredicate,
)
from ccabook.domain import (
    AddressBook,
    Attendance,
    Cca,
    CcaInformation,
    CcaNotFoundError,
    DuplicatePersonError,
    GuiSettings,
    NotEnrolledError,
    Person,
    PersonNotFoundError,
    UserPrefs,
    ValidationError,
)

CHOIR = Cca("Choir")
ROBOTICS = Cca("Robotics")


def _person(name: str, phone: str, *infos: CcaInformation) -> Person:
    return Person(
        name=name,
        phone=phone,
        email=f"{name.lower()}@example.com",
        address=f"Blk 1 {name} Road",
        cca_information=infos,
    )


def _model(*persons: Person, ccas=(CHOIR, ROBOTICS)) -> ModelManager:
    book = AddressBook()
    for cca in ccas:
        book.add_cca(cca)
    for person in persons:
        book.add_person(person)
    return ModelManager(book, UserPrefs())


def _stored(model: ModelManager, name: str) -> Person:
    return next(p for p in model.address_book.persons if p.name.value == name)


def test_default_model_is_empty() -> None:
    model = ModelManager()
    assert model.address_book == AddressBook()
    assert model.user_prefs == UserPrefs()
    assert list(model.get_filtered_person_list()) == []


def test_model_copies_the_snapshot() -> None:
    book = AddressBook()
    model = ModelManager(book, UserPrefs())
    model.add_person(_person("Alice", "91234567"))
    assert book.persons == ()


def test_add_person_then_has_person_and_visible() -> None:
    model = _model()
    alice = _person("Alice", "91234567")
    model.add_person(alice)
    assert model.has_person(alice)
    assert alice in model.get_filtered_person_list()


def test_add_person_resets_filter_to_show_all() -> None:
    bob = _person("Bob", "98765432")
    model = _model(bob)
    model.update_filtered_person_list(NameContainsKeywordsPredicate(("Bob",)))
    alice = _person("Alice", "91234567")

    model.add_person(alice)

    assert model.filtered_persons.predicate is PREDICATE_SHOW_ALL_PERSONS
    assert list(model.filtered_persons) == [bob, alice]


def test_add_duplicate_person_rejected() -> None:
    alice = _person("Alice", "91234567")
    model = _model(alice)
    with pytest.raises(DuplicatePersonError):
        model.add_person(alice)


def test_none_arguments_rejected() -> None:
    model = _model()
    alice = _person("Alice", "91234567")
    with pytest.raises(TypeError):
        model.has_person(None)
    with pytest.raises(TypeError):
        model.add_cca(None)
    with pytest.raises(TypeError):
        model.set_person(alice, None)
    with pytest.raises(TypeError):
        model.delete_cca(None)
    with pytest.raises(TypeError):
        model.record_attendance(None, alice, 1)
    with pytest.raises(TypeError):
        model.record_attendance(CHOIR, alice, None)
    with pytest.raises(TypeError):
        model.update_filtered_person_list(None)


def test_delete_and_set_person_delegate() -> None:
    alice = _person("Alice", "91234567")
    bob = _person("Bob", "98765432")
    model = _model(alice, bob)

    enrolled = alice.with_cca_information([CcaInformation(CHOIR)])
    model.set_person(alice, enrolled)
    model.delete_person(bob)

    assert model.address_book.persons == (enrolled,)
    with pytest.raises(PersonNotFoundError):
        model.delete_person(bob)


def test_cca_delegation() -> None:
    model = _model(ccas=())
    model.add_cca(CHOIR)
    assert model.has_cca(CHOIR)
    model.set_cca(CHOIR, Cca("Chamber Choir"))
    assert model.get_cca_list() == (Cca("Chamber Choir"),)
    assert model.find_cca(Cca("Chamber Choir")) == Cca("Chamber Choir")


def test_delete_cca_cascades_exactly() -> None:
    alice_robotics = CcaInformation(ROBOTICS, "Member", Attendance(2, 8))
    alice = _person(
        "Alice", "91234567", CcaInformation(CHOIR, "President", Attendance(4, 10)), alice_robotics
    )
    bob = _person("Bob", "98765432", CcaInformation(CHOIR))
    carol = _person("Carol", "93210283", CcaInformation(ROBOTICS, "Captain", Attendance(1, 2)))
    model = _model(alice, bob, carol)

    model.delete_cca(CHOIR)

    assert not model.has_cca(CHOIR)
    assert model.get_cca_list() == (ROBOTICS,)
    for person in model.address_book.persons:
        assert not person.has_cca(CHOIR)
    assert _stored(model, "Alice").cca_information == frozenset({alice_robotics})
    assert _stored(model, "Bob").cca_information == frozenset()
    assert _stored(model, "Carol") == carol
    assert [p.name.value for p in model.address_book.persons] == ["Alice", "Bob", "Carol"]


def test_delete_missing_cca_changes_nothing() -> None:
    alice = _person("Alice", "91234567", CcaInformation(CHOIR))
    model = _model(alice, ccas=(ROBOTICS,))
    before = AddressBook(model.address_book)

    with pytest.raises(CcaNotFoundError):
        model.delete_cca(CHOIR)

    assert model.address_book == before


def test_record_attendance_adds_amount() -> None:
    robotics = CcaInformation(ROBOTICS, "Member", Attendance(1, 8))
    alice = _person("Alice", "91234567", CcaInformation(CHOIR, "Member", Attendance(0, 10)), robotics)
    model = _model(alice)

    updated = model.record_attendance(CHOIR, alice, 3)

    stored = _stored(model, "Alice")
    assert stored == updated
    assert stored.get_cca_information(CHOIR).attendance == Attendance(3, 10)
    assert stored.get_cca_information(CHOIR).role == alice.get_cca_information(CHOIR).role
    assert stored.get_cca_information(ROBOTICS) == robotics


def test_record_attendance_negative_correction() -> None:
    alice = _person("Alice", "91234567", CcaInformation(CHOIR, "Member", Attendance(5, 10)))
    model = _model(alice)
    model.record_attendance(CHOIR, alice, -2)
    assert _stored(model, "Alice").get_cca_information(CHOIR).attendance == Attendance(3, 10)


def test_record_attendance_is_not_clamped_to_total() -> None:
    alice = _person("Alice", "91234567", CcaInformation(CHOIR, "Member", Attendance(9, 10)))
    model = _model(alice)
    model.record_attendance(CHOIR, alice, 4)
    assert _stored(model, "Alice").get_cca_information(CHOIR).attendance == Attendance(13, 10)


def test_record_attendance_below_zero_rejected_without_mutation() -> None:
    alice = _person("Alice", "91234567", CcaInformation(CHOIR, "Member", Attendance(1, 10)))
    model = _model(alice)
    with pytest.raises(ValidationError):
        model.record_attendance(CHOIR, alice, -2)
    assert model.address_book.persons == (alice,)


def test_record_attendance_not_enrolled_rejected_without_mutation() -> None:
    alice = _person("Alice", "91234567", CcaInformation(ROBOTICS))
    model = _model(alice)
    before = AddressBook(model.address_book)

    with pytest.raises(NotEnrolledError, match="does not have this CCA"):
        model.record_attendance(CHOIR, alice, 1)

    assert model.address_book == before


def test_not_enrolled_error_is_value_error() -> None:
    alice = _person("Alice", "91234567")
    model = _model(alice)
    with pytest.raises(ValueError):
        model.record_attendance(CHOIR, alice, 1)


def test_record_attendance_for_stale_person_rejected() -> None:
    alice = _person("Alice", "91234567", CcaInformation(CHOIR))
    model = _model(alice)
    model.record_attendance(CHOIR, alice, 1)
    with pytest.raises(PersonNotFoundError):
        model.record_attendance(CHOIR, alice, 1)


def test_record_attendance_rejects_non_int_amount() -> None:
    alice = _person("Alice", "91234567", CcaInformation(CHOIR))
    model = _model(alice)
    with pytest.raises(TypeError):
        model.record_attendance(CHOIR, alice, 1.5)


def test_choir_scenario() -> None:
    alice = _person("Alice", "91234567")
    model = _model(alice, ccas=())

    model.add_cca(CHOIR)
    assert model.has_cca(CHOIR)

    with pytest.raises(NotEnrolledError):
        model.record_attendance(CHOIR, alice, 1)

    enrolled = alice.with_cca_information([CcaInformation(CHOIR, "Member", Attendance(0, 10))])
    model.set_person(alice, enrolled)
    model.record_attendance(CHOIR, enrolled, 3)
    assert _stored(model, "Alice").get_cca_information(CHOIR).attendance == Attendance(3, 10)

    model.delete_cca(CHOIR)
    assert not model.has_cca(CHOIR)
    assert _stored(model, "Alice").get_cca_information(CHOIR) is None


def test_filtered_view_is_live() -> None:
    alice = _person("Alice", "91234567", CcaInformation(CHOIR))
    bob = _person("Bob", "98765432")
    model = _model(alice, bob)
    view = model.get_filtered_person_list()

    model.update_filtered_person_list(InCcaPredicate(CHOIR))
    assert list(view) == [alice]

    enrolled_bob = bob.with_cca_information([CcaInformation(CHOIR)])
    model.set_person(bob, enrolled_bob)
    assert list(view) == [alice, enrolled_bob]

    model.delete_cca(CHOIR)
    assert len(view) == 0

    model.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)
    assert len(view) == 2


def test_user_prefs_accessors() -> None:
    model = ModelManager()
    settings = GuiSettings(800, 600, 10, 20)
    model.set_gui_settings(settings)
    model.set_address_book_file_path(Path("somewhere/book.json"))

    assert model.gui_settings == settings
    assert model.address_book_file_path == Path("somewhere/book.json")

    prefs = UserPrefs()
    model.set_user_prefs(prefs)
    assert model.user_prefs == prefs


def test_set_address_book_replaces_contents() -> None:
    alice = _person("Alice", "91234567")
    source = AddressBook()
    source.add_person(alice)
    model = ModelManager()
    model.set_address_book(source)
    assert model.address_book == source
    assert list(model.filtered_persons) == [alice]


def test_equality() -> None:
    alice = _person("Alice", "91234567")
    bob = _person("Bob", "98765432")
    model = _model(alice, bob)
    same = _model(alice, bob)

    assert model == same
    assert model == model
    assert model != _model(alice)
    assert model != "model"

    same.update_filtered_person_list(NameContainsKeywordsPredicate(("Alice",)))
    assert model != same
    same.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)

    prefs = UserPrefs()
    prefs.address_book_file_path = "different.json"
    same.set_user_prefs(prefs)
    assert model != same
