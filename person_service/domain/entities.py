from dataclasses import dataclass


@dataclass(eq=False)
class Person:
    id: int | None = None
    firstname: str | None = None
    lastname: str | None = None
    email: str | None = None
    password: str | None = None
    tutor: bool = False

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Person):
            return NotImplemented
        # identity is assigned by storage; unsaved records never compare equal
        return self.id is not None and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
