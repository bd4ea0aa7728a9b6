from __future__ import annotations

import logging
from typing import Optional

from apscheduler.schedulers.background import BackgroundScheduler

from ..core.constants import DEFAULT_SWEEP_INTERVAL_SECONDS
from .service import SessionLifecycleService

logger = logging.getLogger(__name__)

SWEEP_JOB_ID = "sweep_expired_sessions"


class SweepScheduler:
    """Runs SessionLifecycleService.sweep on a fixed interval in a background thread.

    Owns its BackgroundScheduler: nothing runs until start(), and shutdown()
    stops the job so the process can exit cleanly.
    """

    def __init__(
        self,
        lifecycle: SessionLifecycleService,
        *,
        interval_seconds: int = DEFAULT_SWEEP_INTERVAL_SECONDS,
        scheduler: Optional[BackgroundScheduler] = None,
    ):
        if int(interval_seconds) <= 0:
            raise ValueError("interval_seconds must be greater than 0")
        self._lifecycle = lifecycle
        self._interval_seconds = int(interval_seconds)
        self._scheduler = scheduler or BackgroundScheduler(daemon=True)

    @property
    def running(self) -> bool:
        return bool(self._scheduler.running)

    def run_once(self) -> int:
        """Job body. Never raises: an exception here would only reach APScheduler's logger."""

        try:
            return self._lifecycle.sweep()
        except Exception:
            logger.exception("Sweep run failed")
            return 0

    def start(self) -> None:
        if self.running:
            return
        self._scheduler.add_job(
            func=self.run_once,
            trigger="interval",
            seconds=self._interval_seconds,
            id=SWEEP_JOB_ID,
            name="Close expired sessions and backfill absentees",
            replace_existing=True,
            max_instances=1,
            coalesce=True,
        )
        self._scheduler.start()
        logger.info("Sweep scheduler started (every %ds)", self._interval_seconds)

    def shutdown(self, *, wait: bool = False) -> None:
        if not self.running:
            return
        self._scheduler.shutdown(wait=wait)
        logger.info("Sweep scheduler stopped")
