"""People known to the university."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

_RULE = "-" * 42


@dataclass(eq=False)
class Person:
    """A member of the university with a name, surname, id and age."""

    name: str = ""
    surname: str = ""
    person_id: str = ""
    age: int = 0

    def describe(self) -> str:
        """Return the personal-info block for this person."""
        return (
            f"\n{_RULE}\n"
            f"-Name: {self.name}\n"
            f"-Surname: {self.surname}\n"
            f"-Age: {self.age}\n"
            f"-ID: {self.person_id}\n"
        )


def is_valid_name(name: str) -> bool:
    """Return True when every character is a letter or a space."""
    return all(ch.isalpha() or ch == " " for ch in name)


def _ask_name(ask: Callable[[str], str], prompt: str) -> str:
    value = ask(prompt)
    while not is_valid_name(value):
        value = ask(prompt)
    return value


def _ask_age(ask: Callable[[str], str], prompt: str, low: int, high: int) -> int:
    while True:
        try:
            age = int(ask(prompt))
        except ValueError:
            continue
        if low < age < high:
            return age


def prompt_person(ask: Callable[[str], str]) -> Person:
    """Build a person from answers given by ``ask``, re-asking on bad input.

    Names may hold only letters and spaces; the age must lie strictly
    between 18 and 100.
    """
    name = _ask_name(ask, "-Insert the Name of the Person: ")
    surname = _ask_name(ask, "-Insert the Surname: ")
    age = _ask_age(ask, "-Insert Age: ", 18, 100)
    person_id = ask("-Insert the University ID: ")
    return Person(name, surname, person_id, age)