import pytest

from unisecretary.professor import ProfessorRegistry
from unisecretary.professorfile import (
    ProfessorField,
    append_professor,
    delete_professor,
    modify_professor,
    read_professors,
)


@pytest.fixture
def prof_file(tmp_path):
    path = tmp_path / "professors.txt"
    path.write_text("Maria,Papadaki,45,P1\nNikos,Georgiou,52,P2\n")
    return path


def test_read_professors_fills_registry(prof_file):
    registry = ProfessorRegistry()
    added = read_professors(prof_file, registry)
    assert len(added) == 2
    assert [p.person_id for p in registry] == ["P1", "P2"]
    assert registry[0].name == "Maria"
    assert registry[0].surname == "Papadaki"
    assert registry[0].age == 45


def test_read_professors_replaces_previous_contents(prof_file):
    registry = ProfessorRegistry()
    read_professors(prof_file, registry)
    read_professors(prof_file, registry)
    assert len(registry) == 2


def test_read_skips_blank_lines(tmp_path):
    path = tmp_path / "professors.txt"
    path.write_text("\nMaria,Papadaki,45,P1\n\n")
    registry = ProfessorRegistry()
    read_professors(path, registry)
    assert [p.person_id for p in registry] == ["P1"]


def test_read_rejects_bad_age(tmp_path):
    path = tmp_path / "professors.txt"
    path.write_text("Maria,Papadaki,old,P1\n")
    with pytest.raises(ValueError):
        read_professors(path, ProfessorRegistry())


def test_append_round_trip(prof_file):
    registry = ProfessorRegistry()
    read_professors(prof_file, registry)
    professor = append_professor(prof_file, registry, "Eleni", "Kosta", "P3", "40")
    assert professor.age == 40
    assert registry.find_by_id("P3") is professor
    reloaded = ProfessorRegistry()
    read_professors(prof_file, reloaded)
    found = reloaded.find_by_id("P3")
    assert (found.name, found.surname, found.age) == ("Eleni", "Kosta", 40)
    assert len(reloaded) == 3


def test_append_to_file_without_trailing_newline(tmp_path):
    path = tmp_path / "professors.txt"
    path.write_text("Maria,Papadaki,45,P1")
    append_professor(path, ProfessorRegistry(), "Eleni", "Kosta", "P3", 40)
    reloaded = ProfessorRegistry()
    read_professors(path, reloaded)
    assert [p.person_id for p in reloaded] == ["P1", "P3"]


def test_delete_professor(prof_file):
    registry = ProfessorRegistry()
    read_professors(prof_file, registry)
    assert delete_professor(prof_file, registry, "P1") is True
    assert registry.find_by_id("P1") is None
    assert "P1" not in prof_file.read_text()
    reloaded = ProfessorRegistry()
    read_professors(prof_file, reloaded)
    assert [p.person_id for p in reloaded] == ["P2"]


def test_delete_missing_professor(prof_file):
    registry = ProfessorRegistry()
    read_professors(prof_file, registry)
    before = prof_file.read_text()
    assert delete_professor(prof_file, registry, "P9") is False
    assert prof_file.read_text() == before
    assert len(registry) == 2


@pytest.mark.parametrize(
    "field, value, attribute, expected",
    [
        (ProfessorField.NAME, "Anna", "name", "Anna"),
        ("l", "Dimou", "surname", "Dimou"),
        ("A", 60, "age", 60),
    ],
)
def test_modify_professor(prof_file, field, value, attribute, expected):
    registry = ProfessorRegistry()
    read_professors(prof_file, registry)
    assert modify_professor(prof_file, registry, "P1", field, value) is True
    assert getattr(registry.find_by_id("P1"), attribute) == expected
    assert registry.find_by_id("P2").name == "Nikos"


def test_modify_professor_id(prof_file):
    registry = ProfessorRegistry()
    read_professors(prof_file, registry)
    assert modify_professor(prof_file, registry, "P2", "I", "P7") is True
    assert registry.find_by_id("P2") is None
    assert registry.find_by_id("P7").name == "Nikos"


def test_modify_missing_professor(prof_file):
    registry = ProfessorRegistry()
    read_professors(prof_file, registry)
    assert modify_professor(prof_file, registry, "P9", "N", "X") is False
    assert [p.name for p in registry] == ["Maria", "Nikos"]


def test_modify_unknown_field(prof_file):
    with pytest.raises(ValueError):
        modify_professor(prof_file, ProfessorRegistry(), "P1", "Z", "X")