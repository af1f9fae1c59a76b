"""Database package."""

from .db import configure_engine, get_session, init_db
from .models import CycleRecord
from .history import record_cycle, recent_cycles, focus_count_on

__all__ = [
    "configure_engine",
    "get_session",
    "init_db",
    "CycleRecord",
    "record_cycle",
    "recent_cycles",
    "focus_count_on",
]
