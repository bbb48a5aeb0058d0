"""Routes for the list page, the add form and the JSON people API."""
from __future__ import annotations

import html

from fastapi import APIRouter, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from pydantic import BaseModel

from thelist.core.exceptions import InvalidNameError, StoreError
from thelist.repositories.people_repository import PeopleRepository

router = APIRouter(tags=["people"])


class NewPerson(BaseModel):
    name: str = ""


def _get_people_repository(request: Request) -> PeopleRepository:
    repo = getattr(getattr(request.app, "state", None), "people_repository", None)
    if not repo:
        raise RuntimeError("PeopleRepository not configured")
    return repo


def _title(request: Request) -> str:
    return getattr(request.app.state, "title", "The List")


def _layout(title: str, body: str, status_code: int = 200) -> HTMLResponse:
    return HTMLResponse(
        f"""
        <!doctype html><html lang='en'><head>
        <meta charset='utf-8'><meta name='viewport' content='width=device-width,initial-scale=1'>
        <title>{html.escape(title)}</title>
        </head><body>
        <main>
          <h1>{html.escape(title)}</h1>
          {body}
        </main>
        </body></html>
        """,
        status_code=status_code,
    )


def _add_form() -> str:
    return """
          <form method='post' action='/add'>
            <label>New Name</label>
            <input name='name' placeholder='Add a new name' required>
            <button>Save</button>
          </form>
    """


@router.get("/", response_class=HTMLResponse)
def list_page(request: Request):
    repo = _get_people_repository(request)
    try:
        people = repo.load()
    except StoreError:
        return _layout(_title(request), "<p>Could not load the list, try again later.</p>", status_code=503)
    items = "".join(f"<li>{html.escape(p.name)}</li>" for p in people)
    body = f"<ul id='people'>{items}</ul>{_add_form()}"
    return _layout(_title(request), body)


@router.post("/add")
def add_from_form(request: Request, name: str = Form("")):
    repo = _get_people_repository(request)
    try:
        repo.add(name)
    except InvalidNameError as exc:
        return _layout(_title(request), f"<p>{html.escape(exc.message)}</p>{_add_form()}", status_code=400)
    except StoreError:
        return _layout(_title(request), "<p>Could not save, try again later.</p>", status_code=503)
    return RedirectResponse("/", status_code=303)


@router.get("/people")
def list_people(request: Request):
    repo = _get_people_repository(request)
    try:
        people = repo.load()
    except StoreError:
        raise HTTPException(503, "Could not fetch people")
    return {
        "title": _title(request),
        "count": len(people),
        "people": [p.to_dict() for p in people],
    }


@router.post("/people", status_code=201)
def create_person(request: Request, payload: NewPerson):
    repo = _get_people_repository(request)
    try:
        person = repo.add(payload.name)
    except InvalidNameError as exc:
        return JSONResponse({"detail": exc.message}, status_code=422)
    except StoreError:
        raise HTTPException(503, "Could not save person")
    return person.to_dict()
