#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Run only tests that do not touch a database
    python -m pytest tests/ -v -m "not db"

    # Using unittest
    python -m unittest discover tests -v

Database tests run against SQLite (in-memory or a temporary file), so no
external service is needed. The schema only uses generic SQLAlchemy types
and is created with Base.metadata.create_all.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

IN_MEMORY_DB_URL = "sqlite://"


def make_engine(url: str = IN_MEMORY_DB_URL):
    """Create an engine with all tables. In-memory databases share one connection."""
    from database.models import Base

    if url == IN_MEMORY_DB_URL:
        engine = create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(url)
    Base.metadata.create_all(engine)
    return engine


def make_session_factory(url: str = IN_MEMORY_DB_URL):
    """Session factory bound to a freshly created test database."""
    return sessionmaker(autocommit=False, autoflush=False, bind=make_engine(url))
