"""Engine and sessions for the completed-period history.

The history is a single SQLite file next to the settings.  Nothing here is
needed by the pure timer or task list; only ``SessionDriver`` and the
console runner touch it, and only when ``history_enabled`` is set.
"""

import logging
from pathlib import Path
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session as OrmSession

from .models import Base

logger = logging.getLogger(__name__)

APP_SUPPORT_DIR = Path.home() / ".local" / "share" / "pomotasks"
DB_PATH = APP_SUPPORT_DIR / "history.db"

_engine = None
_SessionFactory = None


def _make_engine(url: str):
    # one process, but Qt slots may run off the creating thread
    return create_engine(url, connect_args={"check_same_thread": False})


def _history_engine():
    global _engine
    if _engine is None:
        APP_SUPPORT_DIR.mkdir(parents=True, exist_ok=True)
        _engine = _make_engine(f"sqlite:///{DB_PATH}")
    return _engine


def _history_sessions():
    global _SessionFactory
    if _SessionFactory is None:
        _SessionFactory = sessionmaker(bind=_history_engine(), expire_on_commit=False)
    return _SessionFactory


def configure_engine(url: str) -> None:
    """Swap the history database, disposing of the previous engine.

    Tests point this at ``sqlite:///:memory:``.
    """
    global _engine, _SessionFactory
    if _engine is not None:
        _engine.dispose()
    _SessionFactory = None
    _engine = _make_engine(url)


def init_db() -> None:
    """Create the ``cycles`` table if it is missing."""
    engine = _history_engine()
    Base.metadata.create_all(engine)
    logger.debug("History database ready at %s", engine.url)


@contextmanager
def get_session():
    """Yield an ORM session over the history; commits on a clean exit.

    Any exception rolls the session back and is re-raised to the caller.
    """
    session: OrmSession = _history_sessions()()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
