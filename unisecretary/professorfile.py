"""Professors kept in a comma-separated text file.

Each line holds ``name,surname,age,id``.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from enum import Enum
from pathlib import Path

from .professor import Professor, ProfessorRegistry

_PROFESSOR_FIELDS = 4


class ProfessorField(Enum):
    """A professor attribute that can be modified in the file."""

    NAME = "N"
    SURNAME = "L"
    AGE = "A"
    ID = "I"


_FIELD_INDEX = {
    ProfessorField.NAME: 0,
    ProfessorField.SURNAME: 1,
    ProfessorField.AGE: 2,
    ProfessorField.ID: 3,
}


def _fields(line: str) -> list[str]:
    parts = line.rstrip("\r\n").split(",")
    parts += [""] * (_PROFESSOR_FIELDS - len(parts))
    return parts[:_PROFESSOR_FIELDS]


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


def read_professors(
    path: str | os.PathLike[str], registry: ProfessorRegistry
) -> list[Professor]:
    """Replace the registry's professors with those in the file.

    Blank lines are skipped. Raises ValueError when an age is not a whole
    number. Returns the professors that were added.
    """
    text = Path(path).read_text()
    registry.clear()
    added = []
    for line in text.splitlines():
        if not line.strip():
            continue
        name, surname, age, professor_id = _fields(line)
        professor = Professor(
            name=name, surname=surname, person_id=professor_id, age=int(age)
        )
        registry.add(professor)
        added.append(professor)
    return added


def append_professor(
    path: str | os.PathLike[str],
    registry: ProfessorRegistry,
    name: str,
    surname: str,
    professor_id: str,
    age: int | str,
) -> Professor:
    """Append a professor to the file and to the registry."""
    professor = Professor(
        name=name, surname=surname, person_id=professor_id, age=int(age)
    )
    _append_record(
        Path(path), f"{professor.name},{professor.surname},{professor.age},{professor_id}"
    )
    registry.add(professor)
    return professor


def delete_professor(
    path: str | os.PathLike[str], registry: ProfessorRegistry, professor_id: str
) -> bool:
    """Remove the professor with ``professor_id`` from the file and the registry.

    Returns True when the professor was found in the file.
    """
    found = False

    def keep(line: str) -> str | None:
        nonlocal found
        if line.strip() and _fields(line)[3] == professor_id:
            found = True
            return None
        return line

    _rewrite(Path(path), keep)
    if found:
        registry.remove_by_id(professor_id)
    return found


def modify_professor(
    path: str | os.PathLike[str],
    registry: ProfessorRegistry,
    professor_id: str,
    field: ProfessorField | str,
    value: object,
) -> bool:
    """Set one field of the professor with ``professor_id`` and reload the registry.

    Returns True when the professor was found.
    """
    if not isinstance(field, ProfessorField):
        field = ProfessorField(str(field).upper())
    found = False

    def change(line: str) -> str:
        nonlocal found
        parts = _fields(line)
        if line.strip() and parts[3] == professor_id:
            found = True
            parts[_FIELD_INDEX[field]] = str(value)
            return ",".join(parts)
        return line

    _rewrite(Path(path), change)
    read_professors(path, registry)
    return found