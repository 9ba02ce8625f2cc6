"""
Database schema and connection management.

Uses SQLAlchemy; any URL SQLAlchemy understands works, SQLite by default.
"""

from pathlib import Path
from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    create_engine,
    event,
)
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker

from . import env

Base = declarative_base()


class Company(Base):
    """Company a job belongs to."""

    __tablename__ = "companies"

    handle = Column(String(25), primary_key=True)
    name = Column(Text, nullable=False, unique=True)
    num_employees = Column(Integer, CheckConstraint("num_employees >= 0"))
    description = Column(Text, nullable=False)
    logo_url = Column(Text)


class Job(Base):
    """Job posting model."""

    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    salary = Column(Integer, CheckConstraint("salary >= 0"))
    equity = Column(Numeric, CheckConstraint("equity <= 1.0"))
    company_handle = Column(
        String(25),
        ForeignKey("companies.handle", ondelete="CASCADE"),
        nullable=False,
    )


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def get_engine(db_url: str = None) -> Engine:
    """
    Create an engine for `db_url` (default: DATABASE_URL).

    SQLite connections get foreign key enforcement switched on.
    """
    url = make_url(db_url or env.database_url())
    engine = create_engine(url)
    if url.get_backend_name() == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def init_database(db_url: str = None) -> None:
    """
    Initialize database and create tables.

    Args:
        db_url: SQLAlchemy database URL (default: DATABASE_URL)
    """
    url = make_url(db_url or env.database_url())
    if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)
    engine = get_engine(url)
    Base.metadata.create_all(engine)


def get_session(db_url: str = None):
    """
    Get database session.

    Args:
        db_url: SQLAlchemy database URL (default: DATABASE_URL)

    Returns:
        SQLAlchemy session
    """
    engine = get_engine(db_url)
    Session = sessionmaker(bind=engine)
    return Session()
