"""
SQLAlchemy mapping for the employee entity.

Declares the `employee` table with its column constraints and provides
engine/session factories. Only the mapping lives here; nothing in the API
reads or writes employees.
"""
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import Column, Integer, String, create_engine, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker, validates

from employee_api import config
from employee_api.models import Employee

logger = logging.getLogger(__name__)

Base = declarative_base()

# Columns that keep their first persisted value.
IMMUTABLE_COLUMNS = ("id", "employee_code")


class EmployeeRecord(Base):
    """SQLAlchemy model for the employee table."""
    __tablename__ = "employee"

    id = Column(Integer, primary_key=True, autoincrement=True, nullable=False)
    name = Column(String(255), nullable=True)
    email = Column(String(320), nullable=True)
    job_title = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
    image_url = Column(String(2000), nullable=True)
    employee_code = Column(String(255), nullable=False, unique=True)

    @validates(*IMMUTABLE_COLUMNS)
    def _reject_update(self, key: str, value):
        if inspect(self).persistent:
            current = getattr(self, key)
            if current is not None and value != current:
                raise ValueError(f"{key} cannot be changed once persisted")
        return value

    @classmethod
    def from_model(cls, employee: Employee) -> "EmployeeRecord":
        """Build a new row from an Employee data holder."""
        return cls(**employee.model_dump(exclude_none=True))

    def to_model(self) -> Employee:
        return Employee.model_validate(self)

    def __repr__(self) -> str:
        return f"<EmployeeRecord id={self.id} employee_code={self.employee_code!r}>"


_engine: Optional[Engine] = None
_SessionLocal: Optional[sessionmaker] = None


def get_engine(database_url: Optional[str] = None) -> Engine:
    """Get or create the database engine."""
    global _engine
    if _engine is None:
        url = database_url or config.DATABASE_URL
        if not url:
            raise ValueError("DATABASE_URL environment variable is required")
        _engine = create_engine(url, echo=False)
    return _engine


def get_session() -> Session:
    """Get a database session bound to the shared engine."""
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(bind=get_engine(), autocommit=False, autoflush=False)
    return _SessionLocal()


def init_database(engine: Optional[Engine] = None) -> None:
    """Create the mapped tables if they don't exist."""
    engine = engine or get_engine()
    Base.metadata.create_all(bind=engine)
    logger.info(f"Database initialized - {engine.url.render_as_string(hide_password=True)}")


def reset_engine() -> None:
    """Dispose of the shared engine and session factory."""
    global _engine, _SessionLocal
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _SessionLocal = None
