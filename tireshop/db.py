#!/usr/bin/env python
# -*- coding: utf-8 -*-
# @Date    : 2026-02-03 06:54:54
"""
DB
"""
# ========================================================
# IMPORTS
# ========================================================
import os
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, scoped_session
# --------------------------------------------------------
# Local Imports
# --------------------------------------------------------
from tireshop.config import DATABASE_URL
from tireshop.models import Base  # ensure models import happens before create_all

# ========================================================
# GLOABALS
# ========================================================
engine: Engine | None = None
SessionLocal = scoped_session(sessionmaker(autoflush=False,
                                           autocommit=False))


# ========================================================
# EVENT LISTENER
# ========================================================
def set_sqlite_pragma(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA journal_mode=WAL;")
        cursor.execute("PRAGMA foreign_keys=ON;")
        cursor.execute("PRAGMA secure_delete=ON;")
    finally:
        cursor.close()


# ========================================================
# FUNCTIONS
# ========================================================
def init_db(database_url: str = DATABASE_URL) -> Engine:
    """
    (Re)bind the session factory to ``database_url`` and create tables.
    """
    global engine
    is_sqlite = database_url.startswith("sqlite")
    if is_sqlite and ":memory:" not in database_url:
        db_file = database_url.split("///", 1)[-1]
        os.makedirs(os.path.dirname(os.path.abspath(db_file)), exist_ok=True)

    SessionLocal.remove()
    if engine is not None:
        engine.dispose()

    engine = create_engine(
        database_url,
        echo=False,
        future=True,
        connect_args={"check_same_thread": False} if is_sqlite else {},
    )
    if is_sqlite:
        event.listen(engine, "connect", set_sqlite_pragma)

    SessionLocal.configure(bind=engine)
    Base.metadata.create_all(bind=engine)
    return engine
