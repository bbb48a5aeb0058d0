#!/usr/bin/env python3
"""
Append a name to the list.

Usage:
  python scripts/add_name.py "Ada Lovelace" [--db data/thelist.db]
"""
from __future__ import annotations

import argparse
import sys

from thelist.core.config import get_settings
from thelist.core.exceptions import InvalidNameError
from thelist.core.log import configure_logging
from thelist.db.store import Store
from thelist.repositories.people_repository import PeopleRepository


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Add a new name to the list")
    ap.add_argument("name", help="Name to save")
    ap.add_argument("--db", help="Store location (default: THELIST_STORE)")
    args = ap.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level)
    with Store.open(args.db or settings.store_location) as store:
        repo = PeopleRepository(store)
        try:
            person = repo.add(args.name)
        except InvalidNameError as exc:
            raise SystemExit(f"Invalid name: {exc.message}")
    print(f"OK: saved {person.name!r}")
    print(f"  ID: {person.id}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
