"""Completed-period history."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta

from .db import get_session
from .models import CycleRecord


def record_cycle(
    mode: str,
    duration_seconds: int,
    completed_pomodoros: int,
    completed_at: datetime | None = None,
) -> int:
    """Store one finished period and return its row id."""
    with get_session() as db:
        record = CycleRecord(
            mode=str(getattr(mode, "value", mode)),
            duration_seconds=duration_seconds,
            completed_pomodoros=completed_pomodoros,
            completed_at=completed_at or datetime.now(),
        )
        db.add(record)
        db.flush()
        return record.id


def recent_cycles(limit: int = 20) -> list[CycleRecord]:
    """Newest first."""
    with get_session() as db:
        return (
            db.query(CycleRecord)
            .order_by(CycleRecord.completed_at.desc(), CycleRecord.id.desc())
            .limit(limit)
            .all()
        )


def focus_count_on(day: date) -> int:
    """How many focus periods were completed on *day*."""
    start = datetime.combine(day, time.min)
    end = start + timedelta(days=1)
    with get_session() as db:
        return (
            db.query(CycleRecord)
            .filter(
                CycleRecord.mode == "focus",
                CycleRecord.completed_at >= start,
                CycleRecord.completed_at < end,
            )
            .count()
        )
