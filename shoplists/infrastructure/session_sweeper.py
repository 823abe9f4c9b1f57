# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import threading

from shoplists.domain.users import SessionRegistry
from shoplists.shared.logging import logger


class SessionSweeper:
    """Daemon thread dropping expired sessions every ``interval`` seconds."""

    def __init__(self, sessions: SessionRegistry, interval: float) -> None:
        self._sessions = sessions
        self._interval = max(0.1, float(interval))
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(
            target=self._run, name="session-sweeper", daemon=True
        )
        self._thread.start()
        logger.info(f"sessions.sweeper: started interval={self._interval:.0f}s")

    def stop(self, timeout: float | None = 5.0) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
        logger.info("sessions.sweeper: stopped")

    def sweep_once(self) -> int:
        removed = self._sessions.purge_expired()
        if removed:
            logger.info(f"sessions.sweeper: purged {removed} expired sessions")
        return removed

    def _run(self) -> None:
        while not self._stop.wait(self._interval):
            try:
                self.sweep_once()
            except Exception:
                logger.exception("sessions.sweeper: sweep failed")


__all__ = ["SessionSweeper"]
