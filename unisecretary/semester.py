"""Academic semesters and the reports built across them."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field, replace
from typing import Any

from .course import Course
from .display import underline_text
from .student import PASS_MARK, Student

SEMESTER_COUNT = 8
REQUIRED_PASSED_COURSES = 32
REQUIRED_ECTS = 240


@dataclass(eq=False)
class AcademicSemester:
    """One semester with its students, professors and courses."""

    number: int
    students: list[Student] = field(default_factory=list)
    professors: list[Any] = field(default_factory=list)
    courses: list[Course] = field(default_factory=list)

    def clear_students(self) -> None:
        """Remove every student."""
        self.students.clear()

    def clear_professors(self) -> None:
        """Remove every professor."""
        self.professors.clear()

    def clear_courses(self) -> None:
        """Remove every course."""
        self.courses.clear()

    def has_course(self, name: str) -> bool:
        """True if a course called ``name`` belongs to this semester."""
        return self.get_course(name) is not None

    def get_course(self, name: str) -> Course | None:
        """Return the course called ``name``, or None."""
        return next((c for c in self.courses if c.name == name), None)

    def add_student(self, student: Student) -> None:
        """Add a student; None is rejected with ValueError."""
        if student is None:
            raise ValueError("Invalid student")
        self.students.append(student)

    def add_professor(self, professor: Any) -> None:
        """Add a professor; None is rejected with ValueError."""
        if professor is None:
            raise ValueError("Invalid professor")
        self.professors.append(professor)

    def add_course(self, course: Course) -> None:
        """Add a course."""
        self.courses.append(course)

    def holds(self, course: Course) -> bool:
        """True if the course is scheduled for this semester."""
        return course.semester == self.number

    def replace_courses(self, courses: Iterable[Course]) -> None:
        """Replace the courses with copies of ``courses``."""
        self.courses = [
            replace(c, teachers=list(c.teachers), students=list(c.students))
            for c in courses
        ]

    def course_listing(self, start: int = 1) -> str:
        """Return the courses as numbered lines, counting from ``start``."""
        return "\n".join(f"{i}){c.name}" for i, c in enumerate(self.courses, start))


def make_semesters(count: int = SEMESTER_COUNT) -> list[AcademicSemester]:
    """Return ``count`` empty semesters numbered from 1."""
    return [AcademicSemester(n) for n in range(1, count + 1)]


def graduate(semesters: Sequence[AcademicSemester], student: Student) -> bool:
    """True if the student may graduate.

    The student must be in at least the eighth semester, hold some grade,
    and have passed at least 32 courses worth at least 240 ECTS in total.
    """
    if student is None or semesters is None:
        return False
    if student.semester < SEMESTER_COUNT or student.has_no_courses():
        return False
    passed = [
        course
        for semester in semesters[:SEMESTER_COUNT]
        for course in semester.courses
        for grade in student.grades
        if grade.lesson == course.name and grade.points >= PASS_MARK
    ]
    total_ects = sum(course.ects for course in passed)
    return len(passed) >= REQUIRED_PASSED_COURSES and total_ects >= REQUIRED_ECTS


def detailed_grades(semesters: Sequence[AcademicSemester], student: Student) -> str:
    """Return a report of the student's grades in the semesters studied so far."""
    lines = [
        underline_text("Detailed Grades for Student"),
        f"{student.name} {student.surname}:",
    ]
    for semester in semesters[: student.semester]:
        for grade in student.grades:
            course = semester.get_course(grade.lesson)
            if course is None:
                continue
            points = int(grade.points)
            kind = "Mandatory" if course.mandatory else "Not Mandatory"
            status = " Passed" if points >= PASS_MARK else " Not Passed"
            lines.append(
                f"Course: {grade.lesson}  Points: {points} /10 {kind}"
                + underline_text(status)
            )
    lines.append("")
    lines.append(underline_text("End of Detailed Grades."))
    return "\n".join(lines)