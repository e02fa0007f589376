"""Address book contents used when no data file exists yet."""

from ccabook.domain import AddressBook, Attendance, Cca, CcaInformation, Person


def sample_ccas() -> list[Cca]:
    return [Cca("Choir"), Cca("Basketball"), Cca("Robotics")]


def sample_persons() -> list[Person]:
    return [
        Person(
            "Alex Yeoh",
            "87438807",
            "alexyeoh@example.com",
            "Blk 30 Geylang Street 29, #06-40",
            [CcaInformation("Choir", "Member", Attendance(4, 10))],
        ),
        Person(
            "Bernice Yu",
            "99272758",
            "berniceyu@example.com",
            "Blk 30 Lorong 3 Serangoon Gardens, #07-18",
            [
                CcaInformation("Choir", "President", Attendance(9, 10)),
                CcaInformation("Robotics", "Member", Attendance(2, 8)),
            ],
        ),
        Person(
            "Charlotte Oliveiro",
            "93210283",
            "charlotte@example.com",
            "Blk 11 Ang Mo Kio Street 74, #11-04",
            [CcaInformation("Basketball", "Captain", Attendance(12, 14))],
        ),
        Person(
            "David Li",
            "91031282",
            "lidavid@example.com",
            "Blk 436 Serangoon Gardens Street 26, #16-43",
        ),
    ]


def sample_address_book() -> AddressBook:
    book = AddressBook()
    for cca in sample_ccas():
        book.add_cca(cca)
    for person in sample_persons():
        book.add_person(person)
    return book
