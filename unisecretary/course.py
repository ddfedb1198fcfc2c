"""Courses, their teachers and their enrolled students."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class Course:
    """A course taught in a semester and worth a number of ECTS."""

    name: str
    semester: int
    ects: int
    mandatory: bool = True
    teachers: list[Any] = field(default_factory=list)
    students: list[Any] = field(default_factory=list)

    def move_semester(self, new_semester: int) -> None:
        """Move the course to another semester."""
        self.semester = new_semester

    def add_teacher(self, professor: Any) -> None:
        """Add a professor to the course's teachers; None is ignored."""
        if professor is not None:
            self.teachers.append(professor)

    def teaches(self, professor: Any) -> Any | None:
        """Return the teacher sharing ``professor``'s id, or None."""
        return next((t for t in self.teachers if t.person_id == professor.person_id), None)

    def enroll_student(self, semesters: Sequence[Any], student: Any, confirm: bool) -> bool:
        """Enroll the student when confirmed and not already enrolled.

        The student is also added to the semester the course belongs to.
        Returns True when the student was enrolled.
        """
        if self.is_student_enrolled(student):
            return False
        if not (self.name and confirm):
            return False
        self.students.append(student)
        semesters[self.semester - 1].add_student(student)
        return True

    def is_student_enrolled(self, student: Any) -> bool:
        """True if a student with the same id is already enrolled."""
        return any(s.person_id == student.person_id for s in self.students)


def find_course_by_name(name: str, semesters: Iterable[Any]) -> Course | None:
    """Return the first course called ``name`` across the semesters, or None."""
    for semester in semesters:
        for course in semester.courses:
            if course.name == name:
                return course
    return None