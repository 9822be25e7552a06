from pydantic import BaseModel

from ...domain.entities import Person

class PersonIn(BaseModel):
    id: int | None = None
    firstname: str | None = None
    lastname: str | None = None
    email: str | None = None
    password: str | None = None
    tutor: bool = False

    def to_domain(self) -> Person:
        return Person(**self.model_dump())

class PersonOut(BaseModel):
    id: int
    firstname: str | None = None
    lastname: str | None = None
    email: str | None = None
    password: str | None = None
    tutor: bool
    class Config: from_attributes = True
