#!/usr/bin/env python3
"""
Print every saved name in insertion order, one ``id<TAB>name`` per line,
followed by a ``total: N`` footer.

Usage:
  python scripts/list_names.py [--db data/thelist.db]
"""
from __future__ import annotations

import argparse
import sys

from thelist.core.config import get_settings
from thelist.core.log import configure_logging
from thelist.db.store import Store
from thelist.repositories.people_repository import PeopleRepository


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="List saved names")
    ap.add_argument("--db", help="Store location (default: THELIST_STORE)")
    args = ap.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level)
    with Store.open(args.db or settings.store_location) as store:
        people = PeopleRepository(store).load()
        total = store.count()
    for person in people:
        print(f"{person.id}\t{person.name}")
    print(f"total: {total}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
