"""Run one PomoTasks period in the terminal: python -m pomotasks [mode]."""

import logging
import signal
import sys

from PyQt6.QtCore import QCoreApplication

from .database.db import init_db
from .log import setup_logging
from .settings import load_settings
from .timer.driver import SessionDriver
from .timer.engine import Mode

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    settings = load_settings()
    setup_logging(settings.log_level, settings.json_logs, settings.log_file)

    if settings.history_enabled:
        init_db()

    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
    app.setApplicationName("PomoTasks")

    driver = SessionDriver(
        history_enabled=settings.history_enabled,
        auto_advance=settings.auto_advance,
    )
    driver.switch_mode(argv[0] if argv else Mode.FOCUS)

    def show(_remaining: int) -> None:
        print(f"\r{driver.formatted_time}", end="", flush=True)

    def done(data: dict) -> None:
        print(f"\n{data['mode']} complete, next: {data['next_mode']}")
        if not driver.auto_advance:
            app.quit()

    driver.tick.connect(show)
    driver.cycle_completed.connect(done)

    print(f"{driver.formatted_time}", end="", flush=True)
    driver.start()
    # Qt swallows KeyboardInterrupt inside exec()
    signal.signal(signal.SIGINT, signal.SIG_DFL)
    logger.debug("Running %s", driver.mode)
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
