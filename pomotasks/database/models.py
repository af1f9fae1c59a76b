"""SQLAlchemy ORM models for PomoTasks."""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


class CycleRecord(Base):
    """One finished period (focus or break) that ran down to zero."""

    __tablename__ = "cycles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    mode = Column(String(20), nullable=False)  # focus | short-break | long-break
    duration_seconds = Column(Integer, nullable=False, default=0)
    completed_pomodoros = Column(Integer, nullable=False, default=0)
    completed_at = Column(DateTime, nullable=False, default=datetime.now, index=True)

    def __repr__(self) -> str:
        return (
            f"<CycleRecord id={self.id} mode={self.mode} "
            f"pomodoros={self.completed_pomodoros}>"
        )
