"""Domain entities: Person and its field value objects (Name, Phone, Email, Address)."""

import re
from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from ccabook.domain.cca import Cca, CcaInformation
from ccabook.domain.errors import ValidationError
from ccabook.domain.phone import PHONE_CONSTRAINTS, canonical_phone, is_valid_phone

NAME_CONSTRAINTS = (
    "Names should only contain alphanumeric characters and spaces, "
    "and it should not be blank"
)
ADDRESS_CONSTRAINTS = "Addresses can take any values, and it should not be blank"
EMAIL_CONSTRAINTS = (
    "Emails should be of the format local-part@domain and adhere to the following constraints:\n"
    "1. The local-part should only contain alphanumeric characters and these special "
    "characters, excluding the parentheses, (+_.-). The local-part may not start or end "
    "with any special characters.\n"
    "2. This is followed by a '@' and then a domain name. The domain name is made up of "
    "domain labels separated by periods.\n"
    "The domain name must:\n"
    "    - end with a domain label at least 2 characters long\n"
    "    - have each domain label start and end with alphanumeric characters\n"
    "    - have each domain label consist of alphanumeric characters, separated only by "
    "hyphens, if any."
)

_NAME_PATTERN = re.compile(r"^[^\W_](?:[^\W_]| )*$")
_EMAIL_PATTERN = re.compile(
    r"^[A-Za-z0-9]+(?:[+_.-][A-Za-z0-9]+)*"
    r"@(?:[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?\.)*"
    r"[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])$"
)


@dataclass(frozen=True)
class Name:
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not _NAME_PATTERN.match(self.value):
            raise ValidationError(NAME_CONSTRAINTS)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Phone:
    """Canonical form is fixed at construction under the default region then in force."""

    value: str
    canonical: str = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.value, str) or not is_valid_phone(self.value):
            raise ValidationError(PHONE_CONSTRAINTS)
        object.__setattr__(self, "canonical", canonical_phone(self.value))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Email:
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not _EMAIL_PATTERN.match(self.value):
            raise ValidationError(EMAIL_CONSTRAINTS)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Address:
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError(ADDRESS_CONSTRAINTS)
        if self.value[0].isspace():
            raise ValidationError(ADDRESS_CONSTRAINTS)

    def __str__(self) -> str:
        return self.value


def _coerce(value, kind):
    return value if isinstance(value, kind) else kind(value)


@dataclass(frozen=True)
class Person:
    """
    A student in the address book, with their CCA memberships.

    Two persons are the same person when name, phone, email and address agree;
    `==` additionally compares CCA information.
    """

    name: Name
    phone: Phone
    email: Email
    address: Address
    cca_information: frozenset[CcaInformation] = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, "name", _coerce(self.name, Name))
        object.__setattr__(self, "phone", _coerce(self.phone, Phone))
        object.__setattr__(self, "email", _coerce(self.email, Email))
        object.__setattr__(self, "address", _coerce(self.address, Address))
        infos = frozenset(self.cca_information or ())
        names = [info.cca.name for info in infos]
        if len(names) != len(set(names)):
            raise ValidationError("A person can hold at most one record per CCA.")
        object.__setattr__(self, "cca_information", infos)

    @property
    def identity_key(self) -> tuple[str, str, str, str]:
        return (
            self.name.value,
            self.phone.canonical,
            self.email.value.lower(),
            self.address.value,
        )

    def is_same_person(self, other: "Person | None") -> bool:
        if other is self:
            return True
        return other is not None and other.identity_key == self.identity_key

    @property
    def ccas(self) -> frozenset[Cca]:
        return frozenset(info.cca for info in self.cca_information)

    def has_cca(self, cca: Cca) -> bool:
        return self.get_cca_information(cca) is not None

    def get_cca_information(self, cca: Cca) -> CcaInformation | None:
        for info in self.cca_information:
            if info.cca.is_same_cca(cca):
                return info
        return None

    def sorted_cca_information(self) -> list[CcaInformation]:
        return sorted(self.cca_information, key=lambda info: info.cca.name.value)

    def with_cca_information(self, infos: Iterable[CcaInformation]) -> "Person":
        return replace(self, cca_information=frozenset(infos))

    def without_cca(self, cca: Cca) -> "Person":
        return self.with_cca_information(
            info for info in self.cca_information if not info.cca.is_same_cca(cca)
        )

    def __str__(self) -> str:
        ccas = ", ".join(str(info) for info in self.sorted_cca_information()) or "none"
        return (
            f"{self.name}; Phone: {self.phone}; Email: {self.email}; "
            f"Address: {self.address}; CCAs: {ccas}"
        )
