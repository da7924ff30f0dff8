"""
FastAPI routers grouped by domain (auth, pets, ongs, bookings, adoption).

Each module exposes an APIRouter that create_app() includes. Handlers pull
the Database handle from ``request.app.state`` and call repositories or the
auth service; they never keep state of their own.
"""
