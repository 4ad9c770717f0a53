#!/usr/bin/env python
# -*- coding: utf-8 -*-
# @Date    : 2026-02-03 06:54:54
"""
Auth gate: a single operator account, signed in via the Flask session
"""
# ========================================================
# IMPORTS
# ========================================================
import hmac
import logging
from flask import session, current_app, request, redirect, url_for, flash
from werkzeug.security import check_password_hash, generate_password_hash
# --------------------------------------------------------
# Local Imports
# --------------------------------------------------------
from tireshop.i18n import t

# ========================================================
# GLOABALS
# ========================================================
logger = logging.getLogger(__name__)
SESSION_KEY = "operator"
# Endpoints reachable without a session
PUBLIC_ENDPOINTS = {"login", "static", "favicon"}


# ========================================================
# FUNCTIONS
# ========================================================
def resolve_password_hash(password_hash: str | None,
                          password: str | None) -> str:
    """Prefer a configured hash, otherwise hash the plain password."""
    if password_hash:
        return password_hash
    if not password:
        raise ValueError("No operator password configured.")
    return generate_password_hash(password)


def sign_in(username: str, password: str) -> bool:
    cfg = current_app.config
    user_ok = hmac.compare_digest(username.encode("utf-8"),
                                  cfg["ADMIN_USERNAME"].encode("utf-8"))
    pass_ok = check_password_hash(cfg["ADMIN_PASSWORD_HASH"], password)
    if not (user_ok and pass_ok):
        logger.warning("Failed sign-in for user %r", username)
        return False
    session.clear()
    session[SESSION_KEY] = cfg["ADMIN_USERNAME"]
    logger.info("Operator %s signed in", username)
    return True


def sign_out() -> None:
    user = session.get(SESSION_KEY)
    session.clear()
    if user:
        logger.info("Operator %s signed out", user)


def is_authenticated() -> bool:
    return bool(session.get(SESSION_KEY))


def require_login():
    """before_request hook: send anonymous requests to the login page."""
    if request.endpoint in PUBLIC_ENDPOINTS or request.endpoint is None:
        return None
    if is_authenticated():
        return None
    flash(t("login_required"), "error")
    return redirect(url_for("login", next=request.full_path))
