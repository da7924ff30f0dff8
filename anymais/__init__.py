"""
AnyMais local data layer.

Pet profiles, NGOs, appointments and adoption interests stored in a single
key-value blob, plus the session of the user logged in on this device.
"""

from anymais.database import Database, open_database

__all__ = ["Database", "open_database"]
