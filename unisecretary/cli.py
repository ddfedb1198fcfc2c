"""Interactive console for the university secretary."""

from __future__ import annotations

import argparse
import os
import random
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TextIO

from .actions import assign_course, grade_course, graduation_report, professor_statistics
from .coursefile import CourseField, append_course, delete_course, modify_course, read_courses
from .display import underline_text
from .professor import AssessmentError, Professor, ProfessorRegistry
from .professorfile import (
    ProfessorField,
    append_professor,
    delete_professor,
    modify_professor,
    read_professors,
)
from .semester import SEMESTER_COUNT, AcademicSemester, detailed_grades, make_semesters
from .student import Student, find_student_by_id
from .studentfile import (
    StudentField,
    append_student,
    delete_student,
    modify_student,
    read_students,
    write_passed_students,
)

STUDENTS_FILE = "students.txt"
COURSES_FILE = "courses.txt"
PROFESSORS_FILE = "professors.txt"
PASSED_STUDENTS_FILE = "passed_students.txt"

END_MESSAGE = "This was the demonstration of the Program, End Of Program"

_MENU = "\n".join(
    [
        underline_text("OPTION LIST:"),
        "-Press '1' to enter professor modification.",
        "-Press '2' to enter student modification.",
        "-Press '3' to enter course modification.",
        "-Press '4' to assign Professors to courses.",
        "-Press '5' to enroll a student in a course.",
        "-Press '6' to make Professor assign Grades",
        "-Press '7' to record and save students who passed a specific course in a semester.",
        "-Press '8' to print a professor's semester statistics for all of their courses.",
        "-Press '9' to print detailed grades for the current semester and all years for a student.",
        underline_text("-Press '10' to print the list of students eligible for graduation."),
        "Press any other key to exit the program",
    ]
)


class University:
    """The secretary's menu over the students, courses and professors files."""

    def __init__(
        self,
        directory: str | os.PathLike[str] = ".",
        ask: Callable[[str], str] | None = None,
        output: TextIO | None = None,
    ) -> None:
        self.directory = Path(directory)
        self.semesters: list[AcademicSemester] = make_semesters()
        self.registry = ProfessorRegistry()
        self._ask = ask if ask is not None else input
        self._out = output if output is not None else sys.stdout
        self._rng = random.Random()

    @property
    def students_path(self) -> Path:
        return self.directory / STUDENTS_FILE

    @property
    def courses_path(self) -> Path:
        return self.directory / COURSES_FILE

    @property
    def professors_path(self) -> Path:
        return self.directory / PROFESSORS_FILE

    def _say(self, *lines: str) -> None:
        for line in lines:
            self._out.write(f"{line}\n")

    def _letter(self, prompt: str) -> str:
        return self._ask(prompt).strip()[:1].upper()

    def _ask_index(self, prompt: str, count: int, listing: Callable[[], None] | None = None) -> int:
        while True:
            if listing is not None:
                listing()
            try:
                index = int(self._ask(prompt).strip())
            except ValueError:
                index = 0
            if 1 <= index <= count:
                return index
            self._say("Invalid Input, Please Try again....")

    def load(self) -> None:
        """Read the students, courses and professors files into memory."""
        self._say(underline_text("List of Student in DI University 2023-2024:"))
        for student in read_students(self.students_path, self.semesters):
            self._say(f"Student:{student.name} {student.surname} Created")
        self._say("", underline_text("Courses in DI University 2023-2024:"))
        for course in read_courses(self.courses_path, self.semesters):
            self._say(f"Course {course.name} added to Semester {course.semester}")
        self._say("", underline_text("List of Professors in DI University 2023-2024:"))
        for professor in read_professors(self.professors_path, self.registry):
            self._say(f"-Professor {professor.name} {professor.surname} created")
        self._say("")

    def run(self) -> None:
        """Show the option list until a choice outside 1 to 10 is made."""
        actions: dict[int, Callable[[], None]] = {
            1: self._professor_menu,
            2: self._student_menu,
            3: self._course_menu,
            4: self._assign_professor,
            5: self._enroll_student,
            6: self._assign_grades,
            7: self._passed_students,
            8: self._statistics,
            9: self._detailed_grades,
            10: self._graduation,
        }
        self._say("----------WELCOME TO THE DIT UNIVERSITY OF ATHENS----------")
        while True:
            self._say(_MENU)
            try:
                choice = int(self._ask("").strip())
            except (ValueError, EOFError):
                choice = 0
            action = actions.get(choice)
            if action is None:
                self._say(END_MESSAGE)
                return
            try:
                action()
            except EOFError:
                self._say(END_MESSAGE)
                return
            except (ValueError, LookupError, OSError, AssessmentError) as exc:
                self._say(f"Error: {exc}")
            self._say("")

    def _professor_menu(self) -> None:
        choice = self._letter(
            "-Press 'A' to add new professor\n-Press 'M' to modify professor's information\n"
            "-Press 'D' to delete professor\n-Press any other key to exit professor modification\n"
        )
        if choice == "A":
            name = self._ask("-Adding new professor.\nEnter name: ")
            surname = self._ask("-Enter surname: ")
            professor_id = self._ask("-Enter professors's ID: ")
            age = self._ask("-Enter age: ")
            professor = append_professor(
                self.professors_path, self.registry, name, surname, professor_id, age
            )
            self._say(f"-Professor {professor.name} {professor.surname} created")
        elif choice == "M":
            professor_id = self._ask("-Enter professor's ID you wish to modify: ")
            letter = self._letter(
                "-Enter 'N' to modify professor's name, 'L' to modify professor's last name,"
                "'A' to modify professor's age, 'I' to modify professor's ID\n"
            )
            if letter not in {f.value for f in ProfessorField}:
                self._say("-Wrong input!")
                return
            value = self._ask("-Enter the new value: ")
            if not modify_professor(self.professors_path, self.registry, professor_id, letter, value):
                self._say(f"-Professor with ID {professor_id} not found.")
        elif choice == "D":
            professor_id = self._ask("-Enter professor's ID you wish to delete: ")
            if delete_professor(self.professors_path, self.registry, professor_id):
                self._say(f"-Professor with ID {professor_id} found and deleted.")
            else:
                self._say(f"-Professor with ID {professor_id} not found.")
        else:
            self._say("Exiting professor modification")

    def _student_menu(self) -> None:
        choice = self._letter(
            "-Press 'A' to add new student\n-Press 'M' to modify students's information\n"
            "-Press 'D' to delete student\n-Press any other key to exit student modification\n"
        )
        if choice == "A":
            name = self._ask("-Adding new student.\nEnter name: ")
            surname = self._ask("-Enter surname: ")
            age = self._ask("-Enter age: ")
            student_id = self._ask("-Enter student's ID: ")
            semester = self._ask("-Enter the semester in which the student is currently in: ")
            append_student(
                self.students_path, self.semesters, name, surname, age, semester, student_id
            )
        elif choice == "M":
            student_id = self._ask("-Enter student's ID you wish to modify: ")
            letter = self._letter(
                "-Enter 'N' to modify student's name, 'L' to modify student's last name,"
                "'A' to modify student's age, 'I' to modify student's ID , 'S' to modify "
                "student's semester.\n"
            )
            if letter not in {f.value for f in StudentField}:
                self._say("-Invalid input!")
                return
            value = self._ask("-Enter the new value: ")
            if not modify_student(self.students_path, self.semesters, student_id, letter, value):
                self._say(f"-Student with ID {student_id} not found.")
        elif choice == "D":
            student_id = self._ask("-Enter student's ID you wish to delete: ")
            if delete_student(self.students_path, self.semesters, student_id):
                self._say(f"-Student with ID {student_id} found and deleted.")
            else:
                self._say(f"-Student with ID {student_id} not found.")
        else:
            self._say("Exiting student modification")

    def _course_menu(self) -> None:
        choice = self._letter(
            "-Press 'A' to add new course\n-Press 'M' to modify course's information\n"
            "-Press 'D' to delete course\n-Press any other key to exit course modification\n"
        )
        if choice == "A":
            name = self._ask("Adding new course.\nEnter course name: ")
            semester = self._ask("Enter course's semester: ")
            ects = self._ask("Enter course's ECTS: ")
            mandatory = self._ask("Enter True if course is mandatory or False if not: ")
            append_course(self.courses_path, self.semesters, name, semester, ects, mandatory)
        elif choice == "M":
            name = self._ask("Enter course's name you wish to modify: ")
            letter = self._letter(
                "Enter 'N' to modify course's name, 'S' to modify course's semester,"
                "'E' to modify courses's ECTS, 'M' to modify course's mandate\n"
            )
            if letter not in {f.value for f in CourseField}:
                self._say("Wrong input! Exiting modification")
                return
            value = self._ask("Enter the new value: ")
            if not modify_course(self.courses_path, self.semesters, name, letter, value):
                self._say(f"Course with name {name} not found.")
        elif choice == "D":
            name = self._ask("Enter the name of the course you want to delete: ")
            if delete_course(self.courses_path, self.semesters, name):
                self._say(f"Course {name} deleted.")
            else:
                self._say(f"Course {name} not found.")
        else:
            self._say("Exiting course modification")

    def _list_professors(self) -> None:
        for i, professor in enumerate(self.registry, 1):
            self._say(f"{i}) {professor.name} {professor.surname}")

    def _list_courses(self, semesters: Sequence[AcademicSemester]) -> None:
        for semester in semesters:
            self._say(f"Courses for Semester {semester.number}:", semester.course_listing(1), "")

    def _select_professor(self, prompt: str) -> Professor | None:
        if not len(self.registry):
            self._say("There are no professors.")
            return None
        index = self._ask_index(prompt, len(self.registry), self._list_professors)
        return self.registry[index - 1]

    def _assign_professor(self) -> None:
        self._say(underline_text("-The List of Professors at DIT University:"))
        professor = self._select_professor("-Select Professor's index to Assign a Course: ")
        if professor is None:
            return
        semesters = self.semesters[:SEMESTER_COUNT]
        self._list_courses(semesters)
        while True:
            name = self._ask(
                f"Enter Course's name to assign to Professor {professor.surname}: "
            ).strip()
            if any(s.has_course(name) for s in semesters):
                break
            self._say("Invalid Input, Please Try again....")
        assign_course(professor, name, semesters)
        self._say(f"Subject {name} has been assigned to Professor {professor.name}")

    def _find_student(self, prompt: str) -> Student | None:
        while True:
            student_id = self._ask(prompt).strip()
            student = find_student_by_id(student_id, self.semesters)
            if student is not None:
                return student
            again = self._letter(
                f"Student with ID {student_id} doesn't exist. Do you want to try again?"
                "Press 'Y' to try again or any other key to exit."
            )
            if again != "Y":
                return None

    def _enroll_student(self) -> None:
        student = self._find_student("-Enter Student's ID you want to enroll to courses: ")
        if student is None:
            return
        available = self.semesters[: student.semester]
        while True:
            self._say(
                f"-Courses available for student {student.name} {student.surname} "
                f"with ID: {student.person_id}"
            )
            self._list_courses(available)
            course = None
            while course is None:
                name = self._ask(
                    f"Enter Course's name to assign to student {student.surname}: "
                ).strip()
                course = next(
                    (s.get_course(name) for s in available if s.has_course(name)), None
                )
                if course is None:
                    self._say("Invalid Input, Please Try again....")
            if course.is_student_enrolled(student):
                self._say(
                    f"-Student {student.surname} is already enrolled in Course {course.name}"
                )
            else:
                confirm = self._letter(
                    f"-Do you want to enroll in the Course {course.name}? "
                    "Enter 'Y' for yes or any other key to exit."
                ) == "Y"
                if course.enroll_student(self.semesters, student, confirm):
                    self._say(
                        f"-{student.name} {student.surname} successfully enrolled "
                        f"in Course {course.name}"
                    )
                else:
                    self._say(
                        f"-{student.name} {student.surname} chose not to enroll "
                        f"in Course {course.name}"
                    )
            again = self._letter(
                "Do you want to enroll another course to this student?"
                "Press 'Y' to continue or any other key to exit enrollment"
            )
            if again != "Y":
                return

    def _manual_grader(self, student: Student) -> float:
        while True:
            try:
                grade = float(
                    self._ask(f"Enter grade for student {student.name} {student.surname}: ")
                )
            except ValueError:
                grade = -1.0
            if 0.0 <= grade <= 10.0:
                return grade
            self._say("Invalid grade please try again.")

    def _random_grader(self, student: Student) -> float:
        return self._rng.randint(0, 10)

    def _assign_grades(self) -> None:
        while True:
            mode = self._letter(
                "Press 'R' to insert grades randomly(faster,for time reasons) "
                "or 'M' to manually assign grades\n"
            )
            if mode in ("M", "R"):
                break
            self._say("Invalid input please try again.")
        self._say("-Select professor's index which is assigning grades: ")
        professor = self._select_professor("Enter Professor's index: ")
        if professor is None:
            return
        if not professor.subjects:
            self._say(f"Professor {professor.surname} has not been assigned to any courses")
            return
        index = self._ask_index(
            "-Select courses's index to assign grades: ",
            len(professor.subjects),
            lambda: self._say(professor.subjects_listing()),
        )
        grader = self._manual_grader if mode == "M" else self._random_grader
        graded = grade_course(
            professor, professor.subjects[index - 1], self.semesters, grader
        )
        self._say(f"Grades assigned to {len(graded)} students.")

    def _passed_students(self) -> None:
        while True:
            try:
                number = int(
                    self._ask("Enter which semester's courses would you like to view(1-8)\n")
                )
            except ValueError:
                number = 0
            if 1 <= number <= SEMESTER_COUNT:
                break
            self._say("Invalid input please try again!")
        semester = self.semesters[number - 1]
        self._list_courses([semester])
        name = self._ask(
            "Please enter the course name to view the list of students "
            "who have successfully passed the course: "
        ).strip()
        path = self.directory / PASSED_STUDENTS_FILE
        try:
            write_passed_students(path, semester, name)
        except LookupError:
            self._say("Course not found in the selected semester.")
            return
        self._say(f"File with students who passed {name} successfully created as {path.name}!")

    def _statistics(self) -> None:
        professor_id = self._ask(
            underline_text(
                "-Please Insert the Professor's ID that you want to Print Their Stats:"
            )
            + "\n"
        ).strip()
        professor = self.registry.find_by_id(professor_id)
        if professor is None:
            self._say(f"Professor with ID {professor_id} does not exist.")
            return
        self._say(
            underline_text("-Statistics for Professor "),
            f"{professor.name} {professor.surname}:",
            "",
        )
        stats = professor_statistics(professor, self.semesters)
        for semester in self.semesters[:SEMESTER_COUNT]:
            own = [s for s in stats if s.semester == semester.number]
            if not own:
                self._say(
                    f"Professor does not teach any course in Semester {semester.number}"
                )
            for item in own:
                self._say(
                    f"Semester: {item.semester}, Course: {item.course}",
                    f"   Total Students: {item.total_students}",
                    f"   Passed Students: {item.passed_students}",
                    f"   Average Grade: {item.average_grade:g}",
                    "",
                )
        self._say("-----------------", "")

    def _detailed_grades(self) -> None:
        student = self._find_student(
            "Enter student's ID you want to to see their detailed grades\n"
        )
        if student is None:
            return
        self._say(detailed_grades(self.semesters, student))

    def _graduation(self) -> None:
        for student, eligible in graduation_report(self.semesters):
            verdict = "is eligible" if eligible else "is not eligible"
            self._say(f"Student {student.name} {student.surname} {verdict} for graduation.")


def main(argv: Sequence[str] | None = None) -> int:
    """Load the university files from a directory and start the menu."""
    parser = argparse.ArgumentParser(description="University secretary console.")
    parser.add_argument(
        "--directory",
        default=".",
        help="directory holding students.txt, courses.txt and professors.txt",
    )
    args = parser.parse_args(argv)
    university = University(args.directory)
    try:
        university.load()
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    university.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())