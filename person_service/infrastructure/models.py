# person_service/infrastructure/models.py
from __future__ import annotations

from sqlalchemy import Boolean, String, false
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase): pass


class PersonORM(Base):
    __tablename__ = "person"

    id: Mapped[int] = mapped_column("id", primary_key=True, autoincrement=True)
    firstname: Mapped[str | None] = mapped_column("firstname", String(255), nullable=True)
    lastname: Mapped[str | None] = mapped_column("lastname", String(255), nullable=True)
    email: Mapped[str | None] = mapped_column("email", String(255), nullable=True)
    password: Mapped[str | None] = mapped_column("password", String(255), nullable=True)
    tutor: Mapped[bool] = mapped_column("tutor", Boolean, nullable=False, default=False, server_default=false())

    def __repr__(self) -> str:
        return f"PersonORM(id={self.id!r}, email={self.email!r}, tutor={self.tutor!r})"


__all__ = [
    "Base",
    "PersonORM",
]
