"""
Pytest configuration and shared fixtures.
"""

import pytest
from typing import Any, Dict

from jobboard.database import Company, init_database, get_session
from jobboard.logger import reset_logger
from jobboard.repositories import JobRepository


@pytest.fixture(autouse=True)
def fresh_logger():
    """Drop the global logger after each test so handlers do not leak."""
    yield
    reset_logger()


@pytest.fixture
def db_url(tmp_path) -> str:
    """Initialized SQLite database in a temporary directory."""
    url = f"sqlite:///{tmp_path / 'test.db'}"
    init_database(url)
    return url


@pytest.fixture
def db_session(db_url):
    """Session on the temporary database."""
    session = get_session(db_url)
    yield session
    session.close()


@pytest.fixture
def companies(db_session):
    """Two companies jobs can belong to."""
    db_session.add_all([
        Company(
            handle="c1",
            name="C1",
            num_employees=1,
            description="Desc1",
            logo_url="http://c1.img",
        ),
        Company(
            handle="c2",
            name="C2",
            num_employees=2,
            description="Desc2",
        ),
    ])
    db_session.commit()
    return ["c1", "c2"]


@pytest.fixture
def job_repo(db_session, companies) -> JobRepository:
    """Repository bound to a database that already has companies."""
    return JobRepository(db_session)


@pytest.fixture
def new_job() -> Dict[str, Any]:
    """Valid new job data."""
    return {
        "title": "Engineer",
        "salary": 100000,
        "equity": "0.1",
        "companyHandle": "c1",
    }
