"""Validation and in-memory mirror on top of the store."""
from __future__ import annotations

import logging
import threading

from thelist.core.exceptions import InvalidNameError, StoreError
from thelist.db.store import Store
from thelist.domain.people import Person, validate_name

logger = logging.getLogger(__name__)


class PeopleRepository:
    """
    Keeps a cache of people consistent with a Store.

    ``load`` resynchronises the cache from the store; ``add`` validates,
    writes through the store and appends the new person locally without
    re-fetching. One lock guards both the store calls and the cache, so a
    repository may be shared between threads but never observes a half-done
    update.
    """

    def __init__(self, store: Store) -> None:
        self._store = store
        self._people: list[Person] = []
        self._lock = threading.Lock()

    @property
    def store(self) -> Store:
        return self._store

    @property
    def people(self) -> tuple[Person, ...]:
        """Snapshot of the cache."""
        with self._lock:
            return tuple(self._people)

    def load(self) -> list[Person]:
        with self._lock:
            try:
                people = self._store.fetch_all()
            except StoreError as exc:
                logger.error("Could not fetch. %s", exc)
                raise
            self._people = list(people)
            return list(self._people)

    def add(self, name_input: str | None) -> Person:
        try:
            name = validate_name(name_input)
        except InvalidNameError as exc:
            logger.info("Rejected name %r: %s", name_input, exc.message)
            raise
        with self._lock:
            try:
                new_id = self._store.insert(name)
            except StoreError as exc:
                logger.error("Could not save. %s", exc)
                raise
            person = Person(id=new_id, name=name)
            self._people.append(person)
        logger.info("Added person %s", person.id)
        return person
