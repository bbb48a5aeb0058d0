"""
FastAPI routers for The List.

Each module exposes an APIRouter that app.py includes; endpoints only talk to
the PeopleRepository stored on app.state.
"""
