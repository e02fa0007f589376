"""Pydantic shapes of the JSON files. to_model() re-validates through the domain constructors."""

from pydantic import BaseModel, Field

from ccabook.application.errors import StorageError
from ccabook.domain import (
    AddressBook,
    Attendance,
    Cca,
    CcaInformation,
    DuplicateCcaError,
    DuplicatePersonError,
    GuiSettings,
    Person,
    ReadOnlyAddressBook,
    UserPrefs,
    ValidationError,
)

MESSAGE_DUPLICATE_PERSON = "Persons list contains duplicate person(s)."
MESSAGE_DUPLICATE_CCA = "CCA list contains duplicate CCA(s)."
MESSAGE_UNKNOWN_CCA = "Person {} refers to CCA {} which is not in the CCA list."


class JsonAdaptedCca(BaseModel):
    name: str

    @classmethod
    def from_model(cls, cca: Cca) -> "JsonAdaptedCca":
        return cls(name=cca.name.value)

    def to_model(self) -> Cca:
        return Cca(self.name)


class JsonAdaptedCcaInformation(BaseModel):
    cca: str
    role: str = "Member"
    sessions_attended: int = 0
    total_sessions: int = 0

    @classmethod
    def from_model(cls, info: CcaInformation) -> "JsonAdaptedCcaInformation":
        return cls(
            cca=info.cca.name.value,
            role=info.role.value,
            sessions_attended=info.attendance.sessions_attended.value,
            total_sessions=info.attendance.total_sessions.value,
        )

    def to_model(self) -> CcaInformation:
        return CcaInformation(
            cca=Cca(self.cca),
            role=self.role,
            attendance=Attendance(self.sessions_attended, self.total_sessions),
        )


class JsonAdaptedPerson(BaseModel):
    name: str
    phone: str
    email: str
    address: str
    ccas: list[JsonAdaptedCcaInformation] = Field(default_factory=list)

    @classmethod
    def from_model(cls, person: Person) -> "JsonAdaptedPerson":
        return cls(
            name=person.name.value,
            phone=person.phone.value,
            email=person.email.value,
            address=person.address.value,
            ccas=[
                JsonAdaptedCcaInformation.from_model(info)
                for info in person.sorted_cca_information()
            ],
        )

    def to_model(self) -> Person:
        return Person(
            name=self.name,
            phone=self.phone,
            email=self.email,
            address=self.address,
            cca_information=[info.to_model() for info in self.ccas],
        )


class JsonSerializableAddressBook(BaseModel):
    ccas: list[JsonAdaptedCca] = Field(default_factory=list)
    persons: list[JsonAdaptedPerson] = Field(default_factory=list)

    @classmethod
    def from_model(cls, source: ReadOnlyAddressBook) -> "JsonSerializableAddressBook":
        return cls(
            ccas=[JsonAdaptedCca.from_model(cca) for cca in source.ccas],
            persons=[JsonAdaptedPerson.from_model(person) for person in source.persons],
        )

    def to_model(self) -> AddressBook:
        """Build an AddressBook. Raises StorageError on invalid values, duplicates
        or persons holding records for CCAs that are not listed."""
        book = AddressBook()
        try:
            for adapted in self.ccas:
                book.add_cca(adapted.to_model())
            for adapted in self.persons:
                person = adapted.to_model()
                for cca in person.ccas:
                    if not book.has_cca(cca):
                        raise StorageError(MESSAGE_UNKNOWN_CCA.format(person.name, cca))
                book.add_person(person)
        except ValidationError as e:
            raise StorageError(str(e)) from e
        except DuplicateCcaError as e:
            raise StorageError(MESSAGE_DUPLICATE_CCA) from e
        except DuplicatePersonError as e:
            raise StorageError(MESSAGE_DUPLICATE_PERSON) from e
        return book


class JsonGuiSettings(BaseModel):
    window_width: float = 740.0
    window_height: float = 600.0
    window_x: int | None = None
    window_y: int | None = None


class JsonUserPrefs(BaseModel):
    gui_settings: JsonGuiSettings = Field(default_factory=JsonGuiSettings)
    address_book_file_path: str = "data/addressbook.json"

    @classmethod
    def from_model(cls, prefs: UserPrefs) -> "JsonUserPrefs":
        gui = prefs.gui_settings
        return cls(
            gui_settings=JsonGuiSettings(
                window_width=gui.window_width,
                window_height=gui.window_height,
                window_x=gui.window_x,
                window_y=gui.window_y,
            ),
            address_book_file_path=str(prefs.address_book_file_path),
        )

    def to_model(self) -> UserPrefs:
        prefs = UserPrefs()
        try:
            prefs.gui_settings = GuiSettings(**self.gui_settings.model_dump())
        except ValueError as e:
            raise StorageError(str(e)) from e
        prefs.address_book_file_path = self.address_book_file_path
        return prefs
