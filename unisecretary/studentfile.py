"""Students kept in a comma-separated text file.

Each line holds ``name,surname,age,semester,id``.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Sequence
from enum import Enum
from pathlib import Path

from .semester import AcademicSemester
from .student import Student

logger = logging.getLogger(__name__)

_STUDENT_FIELDS = 5


class StudentField(Enum):
    """A student attribute that can be modified in the file."""

    NAME = "N"
    SURNAME = "L"
    AGE = "A"
    ID = "I"
    SEMESTER = "S"


_FIELD_INDEX = {
    StudentField.NAME: 0,
    StudentField.SURNAME: 1,
    StudentField.AGE: 2,
    StudentField.SEMESTER: 3,
    StudentField.ID: 4,
}


def _fields(line: str) -> list[str]:
    parts = line.rstrip("\r\n").split(",")
    parts += [""] * (_STUDENT_FIELDS - len(parts))
    return parts[:_STUDENT_FIELDS]


def _append_record(path: Path, record: str) -> None:
    prefix = ""
    if path.exists():
        existing = path.read_text()
        if existing and not existing.endswith("\n"):
            prefix = "\n"
    with path.open("a") as handle:
        handle.write(f"{prefix}{record}\n")


def _rewrite(path: Path, transform: Callable[[str], str | None]) -> None:
    output = []
    for line in path.read_text().splitlines():
        result = transform(line)
        if result is not None:
            output.append(result)
    temp = path.with_name(f"temp_{path.name}")
    temp.write_text("".join(f"{line}\n" for line in output))
    os.replace(temp, path)


def read_students(
    path: str | os.PathLike[str], semesters: Sequence[AcademicSemester]
) -> list[Student]:
    """Replace every semester's students with those in the file.

    Blank lines are skipped; a student of a semester that does not exist is
    logged and left out. Returns the students that were placed.
    """
    text = Path(path).read_text()
    for semester in semesters:
        semester.clear_students()
    placed = []
    for line in text.splitlines():
        if not line.strip():
            continue
        name, surname, age, semester, student_id = _fields(line)
        index = int(semester) - 1
        if not 0 <= index < len(semesters):
            logger.warning("Invalid semester index: %d", index)
            continue
        student = Student(
            name=name,
            surname=surname,
            person_id=student_id,
            age=int(age),
            semester=int(semester),
        )
        semesters[index].add_student(student)
        placed.append(student)
    return placed


def append_student(
    path: str | os.PathLike[str],
    semesters: Sequence[AcademicSemester],
    name: str,
    surname: str,
    age: int | str,
    semester: int | str,
    student_id: str,
) -> None:
    """Append a student to the file and reload the semesters from it."""
    record = f"{name},{surname},{int(age)},{int(semester)},{student_id}"
    _append_record(Path(path), record)
    read_students(path, semesters)


def delete_student(
    path: str | os.PathLike[str], semesters: Sequence[AcademicSemester], student_id: str
) -> bool:
    """Remove every line of the student with ``student_id`` and reload.

    Returns True when the student was found.
    """
    found = False

    def keep(line: str) -> str | None:
        nonlocal found
        if line.strip() and _fields(line)[4] == student_id:
            found = True
            return None
        return line

    _rewrite(Path(path), keep)
    read_students(path, semesters)
    return found


def modify_student(
    path: str | os.PathLike[str],
    semesters: Sequence[AcademicSemester],
    student_id: str,
    field: StudentField | str,
    value: object,
) -> bool:
    """Set one field of the student with ``student_id`` and reload.

    Returns True when the student was found.
    """
    if not isinstance(field, StudentField):
        field = StudentField(str(field).upper())
    found = False

    def change(line: str) -> str:
        nonlocal found
        parts = _fields(line)
        if line.strip() and parts[4] == student_id:
            found = True
            parts[_FIELD_INDEX[field]] = str(value)
            return ",".join(parts)
        return line

    _rewrite(Path(path), change)
    read_students(path, semesters)
    return found


def write_passed_students(
    path: str | os.PathLike[str], semester: AcademicSemester, course_name: str
) -> int:
    """Write the semester's students who passed ``course_name`` to a file.

    Raises LookupError, writing nothing, when the course is not part of the
    semester. Returns how many students were written.
    """
    if not semester.has_course(course_name):
        raise LookupError("Course not found in the selected semester.")
    passed = [s for s in semester.students if s.has_passed_course(course_name)]
    lines = [
        f'Students who passed the course "{course_name}" in Semester {semester.number}:\n'
    ]
    lines.extend(
        f"{s.name} {s.surname} with ID {s.person_id}: {s.course_grade(course_name)}\n"
        for s in passed
    )
    Path(path).write_text("".join(lines))
    return len(passed)


def delete_file(path: str | os.PathLike[str]) -> None:
    """Delete a file; OSError is raised when that fails."""
    os.remove(path)