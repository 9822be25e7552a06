from .entities import Person


class IPersonRepository:
    def list_all(self) -> list[Person]: ...
    def save(self, person: Person) -> Person: ...
