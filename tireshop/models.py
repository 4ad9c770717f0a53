#!/usr/bin/env python
# -*- coding: utf-8 -*-
# @Date    : 2026-02-03 06:54:54
"""
Models
"""
# ========================================================
# IMPORTS
# ========================================================
import uuid
from datetime import datetime, timezone
from sqlalchemy.orm import declarative_base
from sqlalchemy import (Column, Integer, String, DateTime, Text, Numeric,
                        JSON, ForeignKey)
# --------------------------------------------------------
# Local Imports
# --------------------------------------------------------
from tireshop.config import DEFAULT_MIN_STOCK


# ========================================================
# GLOABALS
# ========================================================
Base = declarative_base()


def _utcnow():
    return datetime.now(timezone.utc)


def _new_id():
    return uuid.uuid4().hex


# ========================================================
# CLASSES (MODELS from BASE)
# ========================================================
class Tire(Base):
    """
    Tire Class
    """
    __tablename__ = "tires"

    id = Column(String(32), primary_key=True, default=_new_id)
    brand = Column(String(100), nullable=False, index=True)
    model = Column(String(100), nullable=False, index=True)
    size = Column(String(50), nullable=False, index=True)
    vehicle_type = Column(String(20), nullable=False, default="auto")
    price = Column(Numeric(10, 2, asdecimal=False), nullable=False, default=0)
    stock = Column(Integer, nullable=False, default=0)
    min_stock = Column(Integer, nullable=False, default=DEFAULT_MIN_STOCK)
    season = Column(String(20), nullable=False, default="all-season")
    load_index = Column(String(10), nullable=False, default="")
    speed_rating = Column(String(10), nullable=False, default="")
    condition = Column(String(10), nullable=False, default="new")
    notes = Column(Text, nullable=False, default="")
    images = Column(JSON, nullable=False, default=list)

    created_at = Column(DateTime, default=_utcnow, nullable=False, index=True)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow,
                        nullable=False)


class TireMovement(Base):
    """
    Stock movement log (shape only, nothing writes to it yet)
    """
    __tablename__ = "tire_movements"

    id = Column(String(32), primary_key=True, default=_new_id)
    tire_id = Column(String(32), ForeignKey("tires.id", ondelete="CASCADE"),
                     nullable=False, index=True)
    # 'in', 'out', 'adjustment'
    movement_type = Column(String(20), nullable=False)
    quantity = Column(Integer, nullable=False)
    previous_stock = Column(Integer, nullable=False)
    new_stock = Column(Integer, nullable=False)
    reason = Column(Text, nullable=True)
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    created_by = Column(String(100), nullable=True)
