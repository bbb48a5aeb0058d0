"""SQLAlchemy models backing the store."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, String, func
from sqlalchemy.orm import declarative_base

from thelist.domain.people import MAX_NAME_LENGTH, Person

Base = declarative_base()


class PersonRow(Base):
    __tablename__ = "people"
    # ids are never reused, even after whole-table teardown of the last row
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(MAX_NAME_LENGTH), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def to_person(self) -> Person:
        return Person(id=int(self.id), name=self.name)
