"""CCA value objects: Cca, Role, SessionCount, Attendance, CcaInformation."""

import re
from dataclasses import dataclass, field, replace

from ccabook.domain.errors import ValidationError

CCA_NAME_CONSTRAINTS = (
    "CCA names should only contain alphanumeric characters and spaces, "
    "and it should not be blank"
)
ROLE_CONSTRAINTS = (
    "Roles should only contain alphanumeric characters and spaces, "
    "and it should not be blank"
)
SESSION_COUNT_CONSTRAINTS = "Session count should be a non-negative integer"

DEFAULT_ROLE = "Member"

_WORDS_PATTERN = re.compile(r"^[^\W_](?:[^\W_]| )*$")


@dataclass(frozen=True)
class CcaName:
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not _WORDS_PATTERN.match(self.value):
            raise ValidationError(CCA_NAME_CONSTRAINTS)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Cca:
    """An extracurricular activity. Identified by its name, case-sensitively."""

    name: CcaName

    def __post_init__(self):
        if isinstance(self.name, str):
            object.__setattr__(self, "name", CcaName(self.name))
        if not isinstance(self.name, CcaName):
            raise ValidationError(CCA_NAME_CONSTRAINTS)

    def is_same_cca(self, other: "Cca | None") -> bool:
        if other is self:
            return True
        return other is not None and other.name == self.name

    def __str__(self) -> str:
        return self.name.value


@dataclass(frozen=True)
class Role:
    value: str = DEFAULT_ROLE

    def __post_init__(self):
        if not isinstance(self.value, str) or not _WORDS_PATTERN.match(self.value):
            raise ValidationError(ROLE_CONSTRAINTS)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SessionCount:
    """Non-negative number of sessions."""

    value: int = 0

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(SESSION_COUNT_CONSTRAINTS)
        if self.value < 0:
            raise ValidationError(SESSION_COUNT_CONSTRAINTS)

    def add(self, amount: int) -> "SessionCount":
        return SessionCount(self.value + amount)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


def _as_session_count(value: SessionCount | int) -> SessionCount:
    if isinstance(value, SessionCount):
        return value
    return SessionCount(value)


@dataclass(frozen=True)
class Attendance:
    """
    Sessions attended out of the total sessions held.
    attended <= total is not enforced here; record() may overshoot the total.
    """

    sessions_attended: SessionCount = field(default_factory=SessionCount)
    total_sessions: SessionCount = field(default_factory=SessionCount)

    def __post_init__(self):
        object.__setattr__(
            self, "sessions_attended", _as_session_count(self.sessions_attended)
        )
        object.__setattr__(self, "total_sessions", _as_session_count(self.total_sessions))

    def record(self, amount: int) -> "Attendance":
        """Return a copy with `amount` sessions added to the attended count."""
        return Attendance(self.sessions_attended.add(amount), self.total_sessions)

    def __str__(self) -> str:
        return f"{self.sessions_attended}/{self.total_sessions}"


@dataclass(frozen=True)
class CcaInformation:
    """A person's membership in one CCA: their role and attendance."""

    cca: Cca
    role: Role = field(default_factory=Role)
    attendance: Attendance = field(default_factory=Attendance)

    def __post_init__(self):
        if isinstance(self.cca, (str, CcaName)):
            object.__setattr__(self, "cca", Cca(self.cca))
        if isinstance(self.role, str):
            object.__setattr__(self, "role", Role(self.role))
        if not isinstance(self.cca, Cca):
            raise ValidationError("CCA information must reference a CCA.")

    def with_attendance(self, attendance: Attendance) -> "CcaInformation":
        return replace(self, attendance=attendance)

    def __str__(self) -> str:
        return f"{self.cca} ({self.role}, {self.attendance})"
