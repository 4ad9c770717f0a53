"""
Tire inventory console for a tire shop (Flask + SQLAlchemy).
"""
from tireshop.config import VERSION as __version__
