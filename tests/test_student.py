from types import SimpleNamespace

from unisecretary.student import Grade, Student, find_student_by_id


def _student(sid="S1", semester=3):
    return Student("Ann", "Lee", sid, 20, semester)


def test_set_grade_appends_new_lesson():
    s = _student()
    s.set_grade(8.0, "Math")
    assert s.grades == [Grade("Math", 8.0)]
    assert not s.has_no_courses()


def test_set_grade_averages_repeated_lesson():
    s = _student()
    s.set_grade(4.0, "Math")
    s.set_grade(8.0, "Math")
    assert len(s.grades) == 1
    assert s.grades[0].points == (4.0 + 8.0) / 2


def test_has_passed_course_threshold():
    s = _student()
    s.set_grade(5.0, "Math")
    s.set_grade(4.9, "Physics")
    assert s.has_passed_course("Math")
    assert not s.has_passed_course("Physics")
    assert not s.has_passed_course("Unknown")


def test_course_grade_truncates_and_missing():
    s = _student()
    s.set_grade(7.6, "Math")
    assert s.course_grade("Math") == int(s.grades[0].points)
    assert s.course_grade("Math") < s.grades[0].points
    assert s.course_grade("Nope") == -1


def test_passed_course_respects_semester():
    s = _student(semester=2)
    s.set_grade(9.0, "Math")
    s.set_grade(9.0, "Later")
    assert s.passed_course(SimpleNamespace(name="Math", semester=2))
    assert not s.passed_course(SimpleNamespace(name="Later", semester=3))


def test_has_no_courses_initially():
    assert _student().has_no_courses()


def test_find_student_by_id():
    a = _student("A")
    b = _student("B")
    semesters = [SimpleNamespace(students=[a]), SimpleNamespace(students=[]), SimpleNamespace(students=[b])]
    assert find_student_by_id("B", semesters) is b
    assert find_student_by_id("A", semesters) is a
    assert find_student_by_id("Z", semesters) is None