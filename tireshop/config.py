#!/usr/bin/env python
# -*- coding: utf-8 -*-
# @Date    : 2026-02-03 06:54:54
"""
App Configurations
"""
# ========================================================
# IMPORTS
# ========================================================
import os
from pathlib import Path


# ========================================================
# FUNCTIONS
# ========================================================
def lock_path_for(db_path: str) -> str:
    """Return a path for the lock file based on the DB file location"""
    return db_path + ".lock"


# ========================================================
# GLOABALS
# ========================================================
VERSION = "1.2.0"
APP_NAME = "Gomería Pro - Tire Inventory"

BASE_DIR = Path(__file__).resolve().parents[1]
DB_PATH = os.environ.get("TIRESHOP_DB_PATH",
                         str(BASE_DIR / "db" / "tire_inventory.db"))
# Point this at a hosted database (e.g. postgresql+psycopg://...) in production
DATABASE_URL = os.environ.get("TIRESHOP_DATABASE_URL", f"sqlite:///{DB_PATH}")
LOCK_PATH = os.environ.get("TIRESHOP_LOCK_PATH", lock_path_for(DB_PATH))
LOG_DIR = os.environ.get("TIRESHOP_LOG_DIR", str(BASE_DIR / "logs"))

# Set Production via ENV!
SECRET_KEY = os.environ.get("TIRESHOP_SECRET_KEY", "change-me-please")
ADMIN_USERNAME = os.environ.get("TIRESHOP_ADMIN_USERNAME", "admin")
# Either a werkzeug hash or a plain password (hashed on startup)
ADMIN_PASSWORD_HASH = os.environ.get("TIRESHOP_ADMIN_PASSWORD_HASH")
ADMIN_PASSWORD = os.environ.get("TIRESHOP_ADMIN_PASSWORD", "admin")

LANGUAGE = os.environ.get("TIRESHOP_LANGUAGE", "en")
HOST = os.environ.get("TIRESHOP_HOST", "0.0.0.0")
PORT = int(os.environ.get("TIRESHOP_PORT", "5000"))

DEFAULT_MIN_STOCK = 5
TOP_N = 5
