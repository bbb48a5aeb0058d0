from __future__ import annotations

import threading

import pytest

from thelist.core.exceptions import InvalidNameError, ReadError, StoreClosedError, WriteError
from thelist.domain.people import Person
from thelist.repositories.people_repository import PeopleRepository


def test_empty_store_then_two_adds_then_load(repo):
    assert repo.load() == []

    ada = repo.add("Ada")
    assert repo.people == (Person(ada.id, "Ada"),)

    grace = repo.add("Grace")
    assert grace.id != ada.id
    assert repo.people == (Person(ada.id, "Ada"), Person(grace.id, "Grace"))

    assert repo.load() == [Person(ada.id, "Ada"), Person(grace.id, "Grace")]


@pytest.mark.parametrize("value", ["", "   ", "\t\n", None])
def test_blank_names_are_rejected_without_io(repo, store, monkeypatch, value):
    def boom(name):
        raise AssertionError("store must not be touched")

    monkeypatch.setattr(store, "insert", boom)
    with pytest.raises(InvalidNameError):
        repo.add(value)
    assert repo.people == ()
    monkeypatch.undo()
    assert repo.load() == []


def test_too_long_name_is_rejected(repo):
    with pytest.raises(InvalidNameError):
        repo.add("x" * 256)
    assert repo.load() == []


def test_add_trims_and_round_trips_once(repo):
    person = repo.add("  Ada Lovelace  ")
    assert person.name == "Ada Lovelace"
    names = [p.name for p in repo.load()]
    assert names.count("Ada Lovelace") == 1


def test_load_replaces_cache_with_store_contents(repo, store):
    repo.add("Ada")
    # written behind the repository's back
    other_id = store.insert("Grace")
    assert len(repo.people) == 1
    loaded = repo.load()
    assert loaded == store.fetch_all()
    assert list(repo.people) == loaded
    assert loaded[-1] == Person(other_id, "Grace")


def test_add_appends_without_refetch(repo, store, monkeypatch):
    repo.add("Ada")
    before = repo.people

    def no_fetch():
        raise AssertionError("add must not re-fetch")

    monkeypatch.setattr(store, "fetch_all", no_fetch)
    grace = repo.add("Grace")
    assert repo.people == before + (grace,)


def test_write_failure_leaves_cache_untouched(repo, store, monkeypatch):
    repo.add("Ada")
    before = repo.people

    def fail(name):
        raise WriteError("disk full")

    monkeypatch.setattr(store, "insert", fail)
    with pytest.raises(WriteError):
        repo.add("Grace")
    assert repo.people == before


def test_read_failure_leaves_cache_untouched(repo, store, monkeypatch):
    repo.add("Ada")
    before = repo.people

    def fail():
        raise ReadError("unreadable")

    monkeypatch.setattr(store, "fetch_all", fail)
    with pytest.raises(ReadError):
        repo.load()
    assert repo.people == before


def test_sequential_ids_are_distinct(repo):
    ids = [repo.add(f"person {i}").id for i in range(25)]
    assert len(set(ids)) == 25


def test_concurrent_adds_are_serialized(repo):
    errors: list[Exception] = []

    def worker(prefix: str) -> None:
        try:
            for i in range(10):
                repo.add(f"{prefix}-{i}")
        except Exception as exc:  # pragma: no cover - surfaced below
            errors.append(exc)

    threads = [threading.Thread(target=worker, args=(f"t{n}",)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    cached = repo.people
    assert len(cached) == 40
    assert len({p.id for p in cached}) == 40
    assert sorted(repo.load(), key=lambda p: p.id) == sorted(cached, key=lambda p: p.id)


def test_closed_store_surfaces_typed_error(store):
    repo = PeopleRepository(store)
    store.close()
    with pytest.raises(StoreClosedError):
        repo.load()
    with pytest.raises(StoreClosedError):
        repo.add("Ada")
    assert repo.people == ()


def test_unencodable_name_is_rejected_without_io(repo, store, monkeypatch):
    def boom(name):
        raise AssertionError("store must not be touched")

    monkeypatch.setattr(store, "insert", boom)
    with pytest.raises(InvalidNameError):
        repo.add("Ada\ud800")
    assert repo.people == ()
