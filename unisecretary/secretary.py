"""A secretary's register of university members."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from .person import Person, prompt_person


class Secretary:
    """Keeps the members of the university in the order they were added."""

    def __init__(self) -> None:
        self._members: list[Person] = []

    def add(self, person: Person) -> None:
        """Register a person."""
        self._members.append(person)

    def __iadd__(self, person: Person) -> Secretary:
        self.add(person)
        return self

    def find(self, person_id: str) -> Person | None:
        """Return the first member with ``person_id``, or None."""
        return next((p for p in self._members if p.person_id == person_id), None)

    def copy(self) -> Secretary:
        """Return a new register holding copies of every member's personal data."""
        other = Secretary()
        for p in self._members:
            other.add(Person(p.name, p.surname, p.person_id, p.age))
        return other

    def read_from(self, ask: Callable[[str], str]) -> None:
        """Read members through ``ask`` until the answer to continue is not Y."""
        while True:
            self.add(prompt_person(ask))
            answer = ask(
                "You are a member of University. For new Enroll press Y "
                "and any other key for exit: "
            )
            if answer[:1].upper() != "Y":
                break

    def __str__(self) -> str:
        return "".join(p.describe() for p in self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Person]:
        return iter(self._members)