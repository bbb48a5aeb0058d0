"""FastAPI application exposing the list of people."""
from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from thelist.core.config import Settings, get_settings
from thelist.core.log import configure_logging
from thelist.db.store import Store
from thelist.repositories.people_repository import PeopleRepository
from thelist.routers import people as people_router


def create_app(settings: Settings | None = None, store: Store | None = None) -> FastAPI:
    """
    Build the application around one store.

    An injected store is wired immediately and stays owned by the caller.
    Without one, the store at ``settings.store_location`` is opened on
    startup and closed on shutdown, so an app that is never started never
    touches the medium.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if store is not None:
            yield
            return
        owned = Store.open(settings.store_location)
        app.state.people_repository = PeopleRepository(owned)
        try:
            yield
        finally:
            owned.close()

    app = FastAPI(title=settings.title, lifespan=lifespan)
    app.state.title = settings.title
    if store is not None:
        app.state.people_repository = PeopleRepository(store)
    app.include_router(people_router.router)
    return app
