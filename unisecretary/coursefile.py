"""Courses kept in a comma-separated text file.

Each line holds ``name,semester,ects,mandatory``. The mandatory flag is
written as ``True``/``true`` or ``False``/``false``.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from enum import Enum
from pathlib import Path

from .course import Course
from .semester import AcademicSemester

_COURSE_FIELDS = 4


class CourseField(Enum):
    """A course attribute that can be modified in the file."""

    NAME = "N"
    SEMESTER = "S"
    ECTS = "E"
    MANDATORY = "M"


_FIELD_INDEX = {
    CourseField.NAME: 0,
    CourseField.SEMESTER: 1,
    CourseField.ECTS: 2,
    CourseField.MANDATORY: 3,
}


def _fields(line: str, count: int) -> list[str]:
    parts = line.rstrip("\r\n").split(",")
    parts += [""] * (count - len(parts))
    return parts[:count]


def _parse_mandatory(text: str) -> bool:
    if text in ("True", "true"):
        return True
    if text in ("False", "false"):
        return False
    raise ValueError(f"mandatory flag must be True or False, not {text!r}")


def _as_flag(value: bool | str) -> bool:
    return value if isinstance(value, bool) else _parse_mandatory(str(value))


def _as_field(field: CourseField | str) -> CourseField:
    return field if isinstance(field, CourseField) else CourseField(str(field).upper())


def _append_record(path: Path, record: str) -> None:
    prefix = ""
    if path.exists():
        existing = path.read_text()
        if existing and not existing.endswith("\n"):
            prefix = "\n"
    with path.open("a") as handle:
        handle.write(f"{prefix}{record}\n")


def _place(course: Course, semesters: Sequence[AcademicSemester]) -> None:
    if 1 <= course.semester <= len(semesters):
        semesters[course.semester - 1].add_course(course)


def parse_course_line(line: str) -> Course:
    """Build a course from one line of the courses file.

    Raises ValueError when the semester or ECTS is not a whole number or the
    mandatory flag is not recognised.
    """
    name, semester, ects, mandatory = _fields(line, _COURSE_FIELDS)
    return Course(name, int(semester), int(ects), _parse_mandatory(mandatory))


def read_courses(
    path: str | os.PathLike[str], semesters: Sequence[AcademicSemester]
) -> list[Course]:
    """Replace every semester's courses with those in the file.

    Blank lines are skipped, as are courses of a semester that does not
    exist. Returns the courses that were placed.
    """
    text = Path(path).read_text()
    for semester in semesters:
        semester.clear_courses()
    placed = []
    for line in text.splitlines():
        if not line.strip():
            continue
        course = parse_course_line(line)
        if 1 <= course.semester <= len(semesters):
            _place(course, semesters)
            placed.append(course)
    return placed


def append_course(
    path: str | os.PathLike[str],
    semesters: Sequence[AcademicSemester],
    name: str,
    semester: int | str,
    ects: int | str,
    mandatory: bool | str,
) -> Course:
    """Append a course to the file and add it to its semester."""
    course = Course(name, int(semester), int(ects), _as_flag(mandatory))
    record = f"{course.name},{course.semester},{course.ects},{course.mandatory}"
    _append_record(Path(path), record)
    _place(course, semesters)
    return course


def delete_course(
    path: str | os.PathLike[str], semesters: Sequence[AcademicSemester], name: str
) -> int:
    """Remove the course called ``name`` from each semester and rewrite the file.

    At most one course per semester is removed. Returns how many were removed.
    """
    removed = 0
    for semester in semesters:
        course = semester.get_course(name)
        if course is not None:
            semester.courses.remove(course)
            removed += 1
    lines = [
        f"{c.name},{c.semester},{c.ects},{'True' if c.mandatory else 'False'}\n"
        for semester in semesters
        for c in semester.courses
    ]
    Path(path).write_text("".join(lines))
    return removed


def modify_course(
    path: str | os.PathLike[str],
    semesters: Sequence[AcademicSemester],
    name: str,
    field: CourseField | str,
    value: object,
) -> bool:
    """Set one field of every line for the course called ``name``.

    The file is rewritten through a temporary file and the semesters are
    reloaded from it. Returns True when the course was found.
    """
    field = _as_field(field)
    source = Path(path)
    lines = source.read_text().splitlines()
    found = False
    output = []
    for line in lines:
        parts = _fields(line, _COURSE_FIELDS)
        if line.strip() and parts[0] == name:
            found = True
            parts[_FIELD_INDEX[field]] = str(value)
            output.append(",".join(parts))
        else:
            output.append(line)
    temp = source.with_name(f"temp_{source.name}")
    temp.write_text("".join(f"{line}\n" for line in output))
    os.replace(temp, source)
    read_courses(source, semesters)
    return found