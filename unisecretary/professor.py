"""Professors, the subjects they teach and the register of all professors."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .person import Person

if TYPE_CHECKING:
    from .course import Course
    from .student import Student


class AssessmentError(Exception):
    """Raised when a student cannot be graded in a course."""


@dataclass(eq=False)
class Professor(Person):
    """A professor together with the subjects assigned to them."""

    subjects: list[str] = field(default_factory=list)

    def assign_subject(self, subject: str) -> bool:
        """Assign a subject; return False when it was already assigned."""
        if subject in self.subjects:
            return False
        self.subjects.append(subject)
        return True

    def final_grade(self, course: Course, student: Student, points: float) -> None:
        """Record the student's grade in the course.

        Raises AssessmentError when the course belongs to a later semester
        than the one the student is in.
        """
        if course.semester > student.semester:
            raise AssessmentError(
                f"Student {student.name} {student.surname} cannot be assessed "
                f"in {course.name}"
            )
        student.set_grade(points, course.name)

    def assign_grade(
        self, student_id: str, course_name: str, points: float, semester: Any
    ) -> bool:
        """Grade a student of ``semester`` in a course this professor teaches.

        Points are taken as a whole number. Returns False when the professor
        does not teach the named course in that semester; raises LookupError
        when no student with ``student_id`` belongs to the semester.
        """
        course = next(
            (
                c
                for c in semester.courses
                if c.teaches(self) is not None and c.name == course_name
            ),
            None,
        )
        if course is None:
            return False
        student = next(
            (s for s in semester.students if s.person_id == student_id), None
        )
        if student is None:
            raise LookupError(f"Student with ID {student_id} not found in the semester.")
        self.final_grade(course, student, int(points))
        return True

    def subjects_listing(self) -> str:
        """Return the numbered list of this professor's subjects."""
        lines = [f"Courses available to grade for professor {self.surname}"]
        lines.extend(f"{i}) {subject}" for i, subject in enumerate(self.subjects, 1))
        return "\n".join(lines)


class ProfessorRegistry:
    """All professors of the university, in the order they were added."""

    def __init__(self) -> None:
        self._professors: list[Professor] = []

    def add(self, professor: Professor) -> None:
        """Register a professor; None is rejected with ValueError."""
        if professor is None:
            raise ValueError("Cannot add to professors")
        self._professors.append(professor)

    def remove_by_id(self, professor_id: str) -> int:
        """Remove every professor with ``professor_id``; return how many went."""
        before = len(self._professors)
        self._professors = [p for p in self._professors if p.person_id != professor_id]
        return before - len(self._professors)

    def find_by_id(self, professor_id: str) -> Professor | None:
        """Return the first professor with ``professor_id``, or None."""
        return find_professor_by_id(professor_id, self._professors)

    def clear(self) -> None:
        """Forget every professor."""
        self._professors.clear()

    def __iter__(self) -> Iterator[Professor]:
        return iter(self._professors)

    def __len__(self) -> int:
        return len(self._professors)

    def __getitem__(self, index: int) -> Professor:
        return self._professors[index]


def find_professor_by_id(
    professor_id: str, professors: Iterable[Professor]
) -> Professor | None:
    """Return the first professor in ``professors`` with ``professor_id``, or None."""
    return next((p for p in professors if p.person_id == professor_id), None)