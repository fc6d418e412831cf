"""
Tests unitaires de validation des schémas Pydantic (alias camelCase, champs obligatoires).
"""

from datetime import date

import pytest
from pydantic import ValidationError

from app.models.enums import StudentStatus
from app.schemas.attendance import AttendanceCreate
from app.schemas.filiere import FiliereCreate, FiliereUpdate
from app.schemas.student import StudentCreate, StudentUpdate
from app.schemas.timetable import TimetableCreate
from app.schemas.user import UserCreate, UserRecord, UserResponse


def test_filiere_alias_camelcase():
    filiere = FiliereCreate.model_validate({"name": " IP ", "abbreviation": "IP", "numYears": 3})
    assert filiere.num_years == 3
    assert filiere.name == "IP"
    assert filiere.model_dump(by_alias=True) == {"name": "IP", "abbreviation": "IP", "numYears": 3}


def test_filiere_par_nom_de_champ():
    """populate_by_name : le stockage construit les schémas avec les noms Python."""
    assert FiliereCreate(name="SF", abbreviation="SF", num_years=3).num_years == 3


def test_filiere_update_champs_omis_non_definis():
    update = FiliereUpdate.model_validate({"abbreviation": "IPX"})
    assert update.model_dump(exclude_unset=True) == {"abbreviation": "IPX"}


def test_filiere_update_null_rejete():
    with pytest.raises(ValidationError):
        FiliereUpdate.model_validate({"numYears": None})


def test_student_defauts():
    student = StudentCreate.model_validate({"fullName": "Amina Benali"})
    assert student.status == StudentStatus.ACTIVE
    assert student.class_id is None


def test_student_update_efface_champ_optionnel():
    update = StudentUpdate.model_validate({"classId": None})
    assert update.model_dump(exclude_unset=True) == {"class_id": None}


def test_student_nom_vide_rejete():
    with pytest.raises(ValidationError):
        StudentCreate.model_validate({"fullName": "  "})


def test_attendance_date_iso():
    attendance = AttendanceCreate.model_validate({"studentId": 1, "date": "2024-03-15"})
    assert attendance.date == date(2024, 3, 15)


@pytest.mark.parametrize("value", ["24:00", "8:30", "08:60", "0830"])
def test_timetable_heure_invalide(value):
    with pytest.raises(ValidationError):
        TimetableCreate.model_validate({
            "classId": 1, "subjectId": 1, "teacherId": 1, "roomId": 1,
            "dayOfWeek": 2, "startTime": value, "endTime": "10:00",
        })


def test_user_role_par_defaut_student():
    user = UserCreate.model_validate({"username": "x", "password": "p", "fullName": "X"})
    assert user.role.value == "student"


def test_user_response_sans_hash():
    record = UserRecord(id=1, username="x", password_hash="h", full_name="X")
    dumped = UserResponse.model_validate(record).model_dump(by_alias=True)
    assert "passwordHash" not in dumped
    assert dumped["fullName"] == "X"
