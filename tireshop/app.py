#!/usr/bin/env python
# -*- coding: utf-8 -*-
# @Date    : 2026-02-03 06:54:54
"""
Flask App Factory
"""
# ========================================================
# IMPORTS
# ========================================================
from datetime import datetime, timezone
from flask import Flask
# --------------------------------------------------------
# Local Imports
# --------------------------------------------------------
from tireshop import config
from tireshop.auth import require_login, resolve_password_hash, is_authenticated
from tireshop.db import init_db, SessionLocal
from tireshop.i18n import t, label, set_language
from tireshop.utils import get_csrf_token


# --------------------------------------------------------
# GLOBALS
# --------------------------------------------------------
ROOT_DIR = config.BASE_DIR   # repo root (one level up from tireshop/)
TEMPLATES_DIR = ROOT_DIR / "templates"
STATIC_DIR = ROOT_DIR / "static"


# ========================================================
# FUNCTIONS
# ========================================================
def create_app(overrides: dict | None = None):
    app = Flask(__name__,
                template_folder=str(TEMPLATES_DIR),
                static_folder=str(STATIC_DIR),
                static_url_path="/static",
                )
    app.config.from_mapping(
        SECRET_KEY=config.SECRET_KEY,
        DATABASE_URL=config.DATABASE_URL,
        LOCK_PATH=config.LOCK_PATH,
        ADMIN_USERNAME=config.ADMIN_USERNAME,
        ADMIN_PASSWORD_HASH=config.ADMIN_PASSWORD_HASH,
        ADMIN_PASSWORD=config.ADMIN_PASSWORD,
        LANGUAGE=config.LANGUAGE,
    )
    if overrides:
        app.config.update(overrides)
    app.config["ADMIN_PASSWORD_HASH"] = resolve_password_hash(
        app.config["ADMIN_PASSWORD_HASH"], app.config.pop("ADMIN_PASSWORD"))

    set_language(app.config["LANGUAGE"])
    init_db(app.config["DATABASE_URL"])

    # Jinja globals
    app.jinja_env.globals["csrf_token"] = get_csrf_token
    app.jinja_env.globals["APP_VERSION"] = config.VERSION
    app.jinja_env.globals["APP_NAME"] = config.APP_NAME
    app.jinja_env.globals["LANG"] = app.config["LANGUAGE"]
    app.jinja_env.globals["now"] = lambda: datetime.now(timezone.utc)
    app.jinja_env.globals["t"] = t
    app.jinja_env.globals["label"] = label
    app.jinja_env.globals["is_authenticated"] = is_authenticated

    app.before_request(require_login)

    @app.teardown_appcontext
    def remove_session(exc=None):
        SessionLocal.remove()

    # Register routes
    from tireshop.routes import register_routes
    register_routes(app)

    return app
