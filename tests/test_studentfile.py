import pytest

from unisecretary.course import Course
from unisecretary.semester import AcademicSemester, make_semesters
from unisecretary.student import Student, find_student_by_id
from unisecretary.studentfile import (
    StudentField,
    append_student,
    delete_file,
    delete_student,
    modify_student,
    read_students,
    write_passed_students,
)


@pytest.fixture
def student_file(tmp_path):
    path = tmp_path / "students.txt"
    path.write_text("Ann,Lee,20,1,s1\nBob,Ray,22,3,s2\n\nCid,Fox,21,12,s3\n")
    return path


def test_read_students_places_by_semester(student_file):
    semesters = make_semesters()
    placed = read_students(student_file, semesters)
    assert [s.person_id for s in placed] == ["s1", "s2"]
    assert [s.name for s in semesters[0].students] == ["Ann"]
    bob = semesters[2].students[0]
    assert (bob.surname, bob.age, bob.semester) == ("Ray", 22, 3)


def test_read_students_skips_invalid_semester(student_file):
    semesters = make_semesters()
    read_students(student_file, semesters)
    assert find_student_by_id("s3", semesters) is None


def test_read_students_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_students(tmp_path / "none.txt", make_semesters())


def test_append_student_round_trip(student_file):
    semesters = make_semesters()
    read_students(student_file, semesters)
    append_student(student_file, semesters, "Dia", "Kay", 19, 2, "s4")
    student = find_student_by_id("s4", semesters)
    assert (student.name, student.surname, student.age, student.semester) == (
        "Dia",
        "Kay",
        19,
        2,
    )
    assert student in semesters[1].students


def test_append_student_to_file_without_trailing_newline(tmp_path):
    path = tmp_path / "students.txt"
    path.write_text("Ann,Lee,20,1,s1")
    semesters = make_semesters()
    append_student(path, semesters, "Bob", "Ray", 22, 1, "s2")
    assert [s.person_id for s in semesters[0].students] == ["s1", "s2"]


def test_delete_student(student_file):
    semesters = make_semesters()
    read_students(student_file, semesters)
    assert delete_student(student_file, semesters, "s1") is True
    assert find_student_by_id("s1", semesters) is None
    assert "s1" not in student_file.read_text()
    assert find_student_by_id("s2", semesters).name == "Bob"


def test_delete_unknown_student(student_file):
    before = student_file.read_text()
    assert delete_student(student_file, make_semesters(), "zz") is False
    assert student_file.read_text() == before


def test_modify_student_moves_semester(student_file):
    semesters = make_semesters()
    read_students(student_file, semesters)
    assert modify_student(student_file, semesters, "s1", StudentField.SEMESTER, 4) is True
    assert semesters[0].students == []
    assert semesters[3].students[0].person_id == "s1"
    assert not (student_file.parent / "temp_students.txt").exists()


def test_modify_student_by_letter(student_file):
    semesters = make_semesters()
    modify_student(student_file, semesters, "s2", "l", "Ross")
    assert find_student_by_id("s2", semesters).surname == "Ross"


def test_modify_unknown_student(student_file):
    assert modify_student(student_file, make_semesters(), "zz", StudentField.AGE, 30) is False


def _graded_semester():
    semester = AcademicSemester(2)
    semester.add_course(Course("Math", 2, 6, True))
    ann = Student(name="Ann", surname="Lee", person_id="s1", age=20, semester=2)
    ann.set_grade(7, "Math")
    bob = Student(name="Bob", surname="Ray", person_id="s2", age=21, semester=2)
    bob.set_grade(3, "Math")
    semester.add_student(ann)
    semester.add_student(bob)
    return semester


def test_write_passed_students(tmp_path):
    path = tmp_path / "passed_students.txt"
    assert write_passed_students(path, _graded_semester(), "Math") == 1
    assert path.read_text().splitlines() == [
        'Students who passed the course "Math" in Semester 2:',
        "Ann Lee with ID s1: 7",
    ]


def test_write_passed_students_unknown_course(tmp_path):
    path = tmp_path / "passed_students.txt"
    with pytest.raises(LookupError):
        write_passed_students(path, _graded_semester(), "Art")
    assert not path.exists()


def test_delete_file(tmp_path):
    path = tmp_path / "gone.txt"
    path.write_text("x")
    delete_file(path)
    assert not path.exists()
    with pytest.raises(FileNotFoundError):
        delete_file(path)