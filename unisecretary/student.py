"""Students and their grades."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .person import Person

if TYPE_CHECKING:
    from .course import Course

PASS_MARK = 5


@dataclass
class Grade:
    """The points a student holds in one lesson."""

    lesson: str
    points: float


@dataclass(eq=False)
class Student(Person):
    """A student enrolled in a given semester, with the grades gained so far."""

    semester: int = 1
    grades: list[Grade] = field(default_factory=list)

    def _grade_for(self, lesson: str) -> Grade | None:
        return next((g for g in self.grades if g.lesson == lesson), None)

    def set_grade(self, points: float, lesson: str) -> None:
        """Record points for a lesson; a repeated lesson keeps the average of old and new."""
        existing = self._grade_for(lesson)
        if existing is None:
            self.grades.append(Grade(lesson, points))
        else:
            existing.points = (existing.points + points) / 2

    def passed_course(self, course: Course) -> bool:
        """True if the course is open to this student and its grade reaches the pass mark."""
        if self.semester < course.semester:
            return False
        return self.has_passed_course(course.name)

    def has_passed_course(self, course_name: str) -> bool:
        """True if the student holds a passing grade in the named course."""
        grade = self._grade_for(course_name)
        return grade is not None and grade.points >= PASS_MARK

    def course_grade(self, course_name: str) -> int:
        """Return the whole-number grade in the course, or -1 when there is none."""
        grade = self._grade_for(course_name)
        return -1 if grade is None else int(grade.points)

    def has_no_courses(self) -> bool:
        """True when the student has no grade at all."""
        return not self.grades


def find_student_by_id(student_id: str, semesters: Iterable[Any]) -> Student | None:
    """Return the first student with ``student_id`` across the semesters, or None."""
    for semester in semesters:
        for student in semester.students:
            if student.person_id == student_id:
                return student
    return None