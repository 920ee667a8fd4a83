"""
Entity mappings and database wiring.
"""
from .orm import (Base, EmployeeRecord, get_engine, get_session,
                  init_database, reset_engine)

__all__ = [
    "Base",
    "EmployeeRecord",
    "get_engine",
    "get_session",
    "init_database",
    "reset_engine",
]
