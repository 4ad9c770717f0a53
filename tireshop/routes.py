#!/usr/bin/env python
# -*- coding: utf-8 -*-
# @Date    : 2026-02-03 06:54:54
"""
All routes attached to app
"""
# ========================================================
# IMPORTS
# ========================================================
import io
import logging
import zipfile
from datetime import datetime, timezone
from flask import (
    request, redirect, url_for, flash, render_template, abort, Response,
    send_file, current_app
)
from sqlalchemy.exc import SQLAlchemyError

# --------------------------------------------------------
# Local Imports
# --------------------------------------------------------
from tireshop.auth import sign_in, sign_out
from tireshop.db import SessionLocal
from tireshop.entities import TireRecord, VehicleType, Season, Condition
from tireshop.excel_io import read_excel, export_excel, write_csv
from tireshop.filters import FilterSpec, filter_records
from tireshop.i18n import t
from tireshop.repository import TireRepository, RecordNotFound
from tireshop.stats import summarize
from tireshop.utils import validate_csrf, form_text, form_number
from tireshop.config import DEFAULT_MIN_STOCK, TOP_N

# ========================================================
# GLOABALS
# ========================================================
logger = logging.getLogger(__name__)
XLSX_MIMETYPE = ("application/vnd.openxmlformats-officedocument."
                 "spreadsheetml.sheet")


# ========================================================
# FUNCTIONS
# ========================================================
def get_repository(db) -> TireRepository:
    return TireRepository(db, lock_path=current_app.config.get("LOCK_PATH"))


def parse_tire_form(record_id: str | None = None) -> TireRecord:
    """
    Build a TireRecord from the submitted form, ValueError on invalid input.
    """
    brand = form_text("brand")
    model = form_text("model")
    size = form_text("size")
    if not (brand and model and size):
        raise ValueError("Brand, model and size are required.")
    try:
        vehicle_type = VehicleType(form_text("vehicle_type"))
        season = Season(form_text("season") or Season.ALLSEASON.value)
        condition = Condition(form_text("condition") or Condition.NEW.value)
    except ValueError as e:
        raise ValueError(f"Invalid selection: {e}") from e

    images = [u.strip() for u in request.form.get("images", "").splitlines()
              if u.strip()]
    return TireRecord(
        id=record_id,
        brand=brand,
        model=model,
        size=size,
        vehicle_type=vehicle_type,
        price=form_number("price", float),
        stock=form_number("stock", int),
        min_stock=form_number("min_stock", int, default=DEFAULT_MIN_STOCK),
        season=season,
        load_index=form_text("load_index"),
        speed_rating=form_text("speed_rating"),
        condition=condition,
        notes=form_text("notes"),
        images=images,
    )


def _safe_next(target: str | None) -> str:
    if target and target.startswith("/") and not target.startswith("//"):
        return target
    return url_for("index")


def _choices():
    return {"vehicle_types": list(VehicleType), "seasons": list(Season),
            "conditions": list(Condition)}


# --------------------------------------------------------
# Routes
# --------------------------------------------------------
def register_routes(app):
    @app.route("/login", methods=["GET", "POST"])
    def login():
        if request.method == "POST":
            validate_csrf()
            username = form_text("username")
            password = request.form.get("password", "")
            if sign_in(username, password):
                return redirect(_safe_next(request.args.get("next")))
            flash(t("login_failed"), "error")
        return render_template("login.html")

    @app.route("/logout", methods=["POST"])
    def logout():
        validate_csrf()
        sign_out()
        flash(t("signed_out"), "success")
        return redirect(url_for("login"))

    @app.route("/")
    def index():
        db = SessionLocal()
        try:
            records = get_repository(db).list_all()
            summary = summarize(records)
            return render_template("index.html", summary=summary,
                                   alerts=summary.low_stock_records[:TOP_N],
                                   active="dashboard")
        finally:
            db.close()

    @app.route("/tires")
    def list_tires():
        db = SessionLocal()
        try:
            spec = FilterSpec.from_args(request.args)
            items = filter_records(get_repository(db).list_all(), spec)
            return render_template("tires_list.html", items=items, spec=spec,
                                   export_args=spec.to_args(),
                                   active="inventory", **_choices())
        finally:
            db.close()

    @app.route("/tires/new", methods=["GET", "POST"])
    def create_tire():
        db = SessionLocal()
        try:
            if request.method == "POST":
                validate_csrf()
                try:
                    record = parse_tire_form()
                except ValueError as e:
                    flash(str(e), "error")
                    return render_template("tire_form.html", w=None,
                                           form=request.form, editing=False,
                                           active="inventory", **_choices())
                try:
                    tid = get_repository(db).add(record)
                except SQLAlchemyError:
                    db.rollback()
                    logger.exception("Creating tire failed")
                    flash(t("save_failed"), "error")
                    return redirect(url_for("create_tire"))

                logger.info("Created tire %s (%s %s %s)", tid, record.brand,
                            record.model, record.size)
                flash(t("tire_created"), "success")
                return redirect(url_for("list_tires"))

            return render_template("tire_form.html", w=None, form=None,
                                   editing=False, active="inventory",
                                   **_choices())
        finally:
            db.close()

    @app.route("/tires/<tid>/edit", methods=["GET", "POST"])
    def edit_tire(tid):
        db = SessionLocal()
        try:
            repo = get_repository(db)
            w = repo.get(tid)
            if not w:
                abort(404, description=t("tire_not_found"))

            if request.method == "POST":
                validate_csrf()
                try:
                    record = parse_tire_form(record_id=tid)
                except ValueError as e:
                    flash(str(e), "error")
                    return render_template("tire_form.html", w=w,
                                           form=request.form, editing=True,
                                           active="inventory", **_choices())
                try:
                    repo.update(record)
                except RecordNotFound:
                    abort(404, description=t("tire_not_found"))
                except SQLAlchemyError:
                    db.rollback()
                    logger.exception("Updating tire %s failed", tid)
                    flash(t("save_failed"), "error")
                    return redirect(url_for("edit_tire", tid=tid))

                logger.info("Updated tire %s", tid)
                flash(t("tire_updated"), "success")
                return redirect(url_for("list_tires"))

            return render_template("tire_form.html", w=w, form=None,
                                   editing=True, active="inventory",
                                   **_choices())
        finally:
            db.close()

    @app.route("/tires/<tid>/delete", methods=["GET"])
    def delete_tire_confirm(tid):
        db = SessionLocal()
        try:
            w = get_repository(db).get(tid)
            if not w:
                abort(404, description=t("tire_not_found"))
            return render_template("delete_confirm.html", w=w,
                                   active="inventory")
        finally:
            db.close()

    @app.route("/tires/<tid>/delete", methods=["POST"])
    def delete_tire(tid):
        validate_csrf()
        db = SessionLocal()
        try:
            try:
                get_repository(db).delete(tid)
            except RecordNotFound:
                abort(404, description=t("tire_not_found"))
            except SQLAlchemyError:
                db.rollback()
                logger.exception("Deleting tire %s failed", tid)
                flash(t("delete_failed"), "error")
                return redirect(url_for("list_tires"))
            logger.info("Deleted tire %s", tid)
            flash(t("tire_deleted"), "success")
            return redirect(url_for("list_tires"))
        finally:
            db.close()

    @app.route("/statistics")
    def statistics():
        db = SessionLocal()
        try:
            summary = summarize(get_repository(db).list_all())
            return render_template("statistics.html", summary=summary,
                                   active="statistics")
        finally:
            db.close()

    @app.route("/tires/export.csv")
    def export_csv():
        db = SessionLocal()
        try:
            spec = FilterSpec.from_args(request.args)
            items = filter_records(get_repository(db).list_all(), spec)
        finally:
            db.close()
        buf = io.StringIO()
        write_csv(buf, items)
        ts = datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S")
        logger.info("Exported %d tires as CSV", len(items))
        # UTF-8 with BOM so Excel on Windows opens accents correctly
        return Response(
            buf.getvalue().encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition":
                     f"attachment; filename=tires_{ts}.csv"},
        )

    @app.route("/tires/export.xlsx")
    def export_xlsx():
        db = SessionLocal()
        try:
            spec = FilterSpec.from_args(request.args)
            items = filter_records(get_repository(db).list_all(), spec)
        finally:
            db.close()
        buf = io.BytesIO()
        export_excel(buf, items)
        buf.seek(0)
        ts = datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S")
        logger.info("Exported %d tires as Excel", len(items))
        return send_file(buf, mimetype=XLSX_MIMETYPE, as_attachment=True,
                         download_name=f"tires_{ts}.xlsx")

    @app.route("/tires/import", methods=["POST"])
    def import_xlsx():
        validate_csrf()
        upload = request.files.get("file")
        if upload is None or not upload.filename:
            flash(t("no_file"), "error")
            return redirect(url_for("list_tires"))
        try:
            records = read_excel(upload.stream)
        except (ValueError, zipfile.BadZipFile) as e:
            flash(t("import_failed", error=e), "error")
            return redirect(url_for("list_tires"))

        db = SessionLocal()
        try:
            count = get_repository(db).bulk_insert(records)
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Importing %s failed", upload.filename)
            flash(t("save_failed"), "error")
            return redirect(url_for("list_tires"))
        finally:
            db.close()
        logger.info("Imported %d tires from %s", count, upload.filename)
        flash(t("import_done", count=count), "success")
        return redirect(url_for("list_tires"))

    @app.route("/favicon.ico")
    def favicon():
        return Response(status=204)
