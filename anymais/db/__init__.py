"""Database helpers (engine/session export)."""

from .session import Base, get_session, make_engine, make_sessionmaker

__all__ = ["Base", "get_session", "make_engine", "make_sessionmaker"]
