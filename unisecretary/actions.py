"""Secretary actions that combine professors, courses, students and semesters."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .course import Course, find_course_by_name
from .professor import Professor
from .semester import SEMESTER_COUNT, AcademicSemester, graduate
from .student import Student

MIN_GRADE = 0
MAX_GRADE = 10


@dataclass(frozen=True)
class CourseStatistics:
    """A professor's results in one course of one semester."""

    semester: int
    course: str
    total_students: int
    passed_students: int
    average_grade: float


def assign_course(
    professor: Professor, course_name: str, semesters: Sequence[AcademicSemester]
) -> Course:
    """Make the professor a teacher of the named course and give them the subject.

    Raises LookupError when no semester holds the course.
    """
    course = find_course_by_name(course_name, semesters[:SEMESTER_COUNT])
    if course is None:
        raise LookupError(f"Course {course_name} not found.")
    course.add_teacher(professor)
    professor.assign_subject(course_name)
    return course


def grade_course(
    professor: Professor,
    course_name: str,
    semesters: Sequence[AcademicSemester],
    grader: Callable[[Student], float],
) -> dict[str, int]:
    """Grade every enrolled student of the course's semester.

    ``grader`` gives the points for each student; points outside 0 to 10
    raise ValueError. Returns the points recorded, keyed by student id.
    Raises LookupError when no semester holds the course.
    """
    target: tuple[AcademicSemester, Course] | None = None
    for semester in semesters[:SEMESTER_COUNT]:
        course = semester.get_course(course_name)
        if course is not None:
            target = (semester, course)
    if target is None:
        raise LookupError(f"Course {course_name} not found.")
    semester, course = target
    graded: dict[str, int] = {}
    for student in list(semester.students):
        if not course.is_student_enrolled(student):
            continue
        points = grader(student)
        if not MIN_GRADE <= points <= MAX_GRADE:
            raise ValueError(f"Invalid grade {points}")
        if professor.assign_grade(student.person_id, course.name, points, semester):
            graded[student.person_id] = int(points)
    return graded


def professor_statistics(
    professor: Professor, semesters: Sequence[AcademicSemester]
) -> list[CourseStatistics]:
    """Return statistics for every course the professor teaches, by semester.

    The average is taken over the points of passing students divided by all
    students of the semester.
    """
    results = []
    for semester in semesters[:SEMESTER_COUNT]:
        for course in semester.courses:
            if course.teaches(professor) is None:
                continue
            passed = [s for s in semester.students if s.passed_course(course)]
            total = len(semester.students)
            points = sum(s.course_grade(course.name) for s in passed)
            average = points / total if total else 0.0
            results.append(
                CourseStatistics(semester.number, course.name, total, len(passed), average)
            )
    return results


def graduation_report(
    semesters: Sequence[AcademicSemester],
) -> list[tuple[Student, bool]]:
    """Return every student with whether they are eligible to graduate."""
    return [
        (student, graduate(semesters, student))
        for semester in semesters[:SEMESTER_COUNT]
        for student in semester.students
    ]