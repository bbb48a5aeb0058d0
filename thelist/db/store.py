"""Engine/session ownership for the durable list of people."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from sqlalchemy import create_engine, func, select
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import ArgumentError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from thelist.core.exceptions import ReadError, StoreClosedError, StoreUnavailableError, WriteError
from thelist.db.models import Base, PersonRow
from thelist.domain.people import Person

logger = logging.getLogger(__name__)

MEMORY_LOCATION = ":memory:"


def location_to_url(location: str) -> str:
    """
    Turn a store location into a SQLAlchemy URL.

    Anything containing "://" is taken as a URL already. ":memory:" maps to a
    private in-memory SQLite database. Everything else is a filesystem path to
    a SQLite file; its parent directories are created.
    """
    value = (location or "").strip()
    if not value:
        raise StoreUnavailableError("Store location must not be empty")
    if "://" in value:
        return value
    if value == MEMORY_LOCATION:
        return "sqlite://"
    path = Path(value).expanduser().resolve()
    path.parent.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{path}"


def _build_engine(url: str) -> Engine:
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return create_engine(url, future=True, pool_pre_ping=True)
    # the repository lock serializes access, so connections may hop threads
    kwargs: dict = {"connect_args": {"check_same_thread": False}}
    if parsed.database in (None, "", MEMORY_LOCATION):
        kwargs["poolclass"] = StaticPool
    return create_engine(url, future=True, **kwargs)


class Store:
    """Durable storage of people, one engine per opened location."""

    def __init__(self, engine: Engine, location: str):
        self._engine = engine
        self._sessionmaker = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
        self._location = location
        self._closed = False

    @classmethod
    def open(cls, location: str) -> "Store":
        """Open (creating if absent) the medium at ``location``."""
        try:
            url = location_to_url(location)
            engine = _build_engine(url)
        except StoreUnavailableError:
            raise
        except (OSError, ArgumentError, SQLAlchemyError) as exc:
            logger.error("Could not open store at %s: %s", location, exc)
            raise StoreUnavailableError(f"Could not open store at {location!r}") from exc
        try:
            Base.metadata.create_all(bind=engine)
        except SQLAlchemyError as exc:
            engine.dispose()
            logger.error("Could not create store at %s: %s", location, exc)
            raise StoreUnavailableError(f"Could not create store at {location!r}") from exc
        logger.info("Opened store at %s", location)
        return cls(engine, location)

    @property
    def location(self) -> str:
        return self._location

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def closed(self) -> bool:
        return self._closed

    def _ensure_open(self) -> None:
        if self._closed:
            raise StoreClosedError(f"Store at {self._location!r} is closed")

    @contextmanager
    def session(self) -> Iterator[Session]:
        self._ensure_open()
        session: Session = self._sessionmaker()
        try:
            yield session
        finally:
            session.close()

    def insert(self, name: str) -> int:
        """Persist one person and return its new id; all or nothing."""
        with self.session() as session:
            try:
                row = PersonRow(name=name)
                session.add(row)
                session.flush()
                new_id = int(row.id)
                session.commit()
            except (SQLAlchemyError, UnicodeError) as exc:
                session.rollback()
                logger.warning("Could not save %r: %s", name, exc)
                raise WriteError(f"Could not save {name!r}") from exc
        logger.debug("Inserted person %s", new_id)
        return new_id

    def fetch_all(self) -> list[Person]:
        """Return every durable person in insertion order."""
        with self.session() as session:
            try:
                rows = session.execute(select(PersonRow).order_by(PersonRow.id)).scalars().all()
                return [row.to_person() for row in rows]
            except SQLAlchemyError as exc:
                logger.warning("Could not fetch people: %s", exc)
                raise ReadError("Could not fetch people") from exc

    def count(self) -> int:
        with self.session() as session:
            try:
                return int(session.execute(select(func.count()).select_from(PersonRow)).scalar_one())
            except SQLAlchemyError as exc:
                logger.warning("Could not count people: %s", exc)
                raise ReadError("Could not count people") from exc

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._engine.dispose()
        logger.info("Closed store at %s", self._location)

    def __enter__(self) -> "Store":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
