"""Unit tests for CCA value objects and attendance arithmetic."""

import pytest

from ccabook.domain import (
    Attendance,
    Cca,
    CcaInformation,
    CcaName,
    Role,
    SessionCount,
    ValidationError,
)
from ccabook.domain.cca import CCA_NAME_CONSTRAINTS, SESSION_COUNT_CONSTRAINTS


def test_cca_identity_is_case_sensitive_name() -> None:
    assert Cca("Choir").is_same_cca(Cca(CcaName("Choir")))
    assert not Cca("Choir").is_same_cca(Cca("choir"))
    assert not Cca("Choir").is_same_cca(None)
    assert Cca("Choir") == Cca("Choir")


@pytest.mark.parametrize("value", ["", "  ", "Choir!", "_Choir"])
def test_invalid_cca_name_rejected(value) -> None:
    with pytest.raises(ValidationError) as excinfo:
        Cca(value)
    assert str(excinfo.value) == CCA_NAME_CONSTRAINTS


def test_role_defaults_to_member_and_is_validated() -> None:
    assert Role().value == "Member"
    assert Role("Vice President").value == "Vice President"
    with pytest.raises(ValidationError):
        Role("")


@pytest.mark.parametrize("value", [-1, True, "3", 2.0])
def test_invalid_session_count_rejected(value) -> None:
    with pytest.raises(ValidationError, match=SESSION_COUNT_CONSTRAINTS):
        SessionCount(value)


def test_session_count_add() -> None:
    assert SessionCount(3).add(2) == SessionCount(5)
    assert SessionCount(3).add(-3) == SessionCount(0)
    with pytest.raises(ValidationError):
        SessionCount(3).add(-4)


def test_attendance_coerces_ints() -> None:
    attendance = Attendance(3, 10)
    assert attendance.sessions_attended == SessionCount(3)
    assert attendance.total_sessions == SessionCount(10)
    assert str(attendance) == "3/10"
    assert Attendance() == Attendance(0, 0)


def test_attendance_record_keeps_total() -> None:
    attendance = Attendance(3, 10)
    updated = attendance.record(2)
    assert updated == Attendance(5, 10)
    assert attendance == Attendance(3, 10)


def test_attendance_may_exceed_total() -> None:
    attendance = Attendance(9, 10).record(3)
    assert attendance == Attendance(12, 10)


def test_cca_information_defaults_and_coercion() -> None:
    info = CcaInformation("Choir")
    assert info.cca == Cca("Choir")
    assert info.role == Role("Member")
    assert info.attendance == Attendance(0, 0)
    assert str(info) == "Choir (Member, 0/0)"


def test_cca_information_with_attendance() -> None:
    info = CcaInformation(Cca("Choir"), Role("President"), Attendance(1, 4))
    updated = info.with_attendance(Attendance(2, 4))
    assert updated.cca == info.cca
    assert updated.role == info.role
    assert updated.attendance == Attendance(2, 4)
    assert info.attendance == Attendance(1, 4)
