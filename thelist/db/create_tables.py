"""Utility script to create the backing medium for the list."""
from __future__ import annotations

import argparse

from thelist.core.config import get_settings
from thelist.core.exceptions import StoreUnavailableError
from thelist.core.log import configure_logging
from thelist.db.store import Store


def create_all(location: str | None = None) -> str:
    """Open (and so create) the store at ``location``; return the location used."""
    target = location or get_settings().store_location
    with Store.open(target):
        pass
    return target


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Create the people table")
    ap.add_argument("--db", help="Store location (path or SQLAlchemy URL)")
    args = ap.parse_args(argv)
    configure_logging(get_settings().log_level)
    try:
        target = create_all(args.db)
    except StoreUnavailableError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
    print(f"Store ready at {target}")


if __name__ == "__main__":
    main()
