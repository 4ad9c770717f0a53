#!/usr/bin/env python
# -*- coding: utf-8 -*-
# @Date    : 2026-02-03 06:54:54
"""
Utils: lightweight CSRF protection and form helpers
"""
# ========================================================
# IMPORTS
# ========================================================
import math
import secrets
from flask import session, request, abort


# ========================================================
# FUNCTIONS
# ========================================================
def get_csrf_token():
    token = session.get("_csrf_token")
    if not token:
        token = secrets.token_urlsafe(16)
        session["_csrf_token"] = token
    return token


def validate_csrf():
    token = session.get("_csrf_token")
    form_token = request.form.get("_csrf_token")
    if not token or not form_token or not secrets.compare_digest(token,
                                                                 form_token):
        abort(400, description="Invalid CSRF token.")


def form_text(name: str) -> str:
    return (request.form.get(name, "") or "").strip()


def form_number(name: str, cast, default=None):
    """Parse a finite, non-negative numeric form field, ValueError otherwise."""
    raw = form_text(name)
    if not raw:
        if default is None:
            raise ValueError(f"Field '{name}' is required.")
        return default
    try:
        value = cast(raw.replace(",", "."))
    except ValueError as e:
        raise ValueError(f"Field '{name}' must be a number.") from e
    if not math.isfinite(value):
        raise ValueError(f"Field '{name}' must be a number.")
    if value < 0:
        raise ValueError(f"Field '{name}' must not be negative.")
    return value
