"""Refresh coordination for the lookup cache.

Two strategies populate a `core.cache.Cache`:
- lazy ("on_demand"): a lookup miss fetches synchronously, stores, returns.
- scheduled ("polling"): lazy lookups plus an APScheduler interval job that
  re-fetches every cached key, starting immediately.

Fetches always run outside the cache lock; only the final `put` takes it.
A failing key in a scheduled run is logged and recorded, never raised, and
its previous entry is left as is.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Literal, Optional, TypeVar

from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.asyncio import AsyncIOScheduler

from core.cache import Cache
from core.errors import FetchError, SerializationError, ValidationError
from core.interfaces import Fetcher
from core.models import RefreshReport, SDKMode

V = TypeVar("V")

CoordinatorState = Literal["created", "running", "shut_down"]

logger = logging.getLogger(__name__)


def validate_key(key: Optional[str]) -> str:
    if key is None or not str(key).strip():
        raise ValidationError("Lookup key cannot be null or empty")
    return key


class RefreshCoordinator(Generic[V]):
    """Serve lookups from the cache and keep it populated.

    State machine: created -> running -> shut_down. Only "polling" mode arms
    a scheduled job on start(). shutdown() is idempotent and terminal; a run
    in progress finishes its current key and stops.

    A scheduler passed in by the caller is started if needed but never shut
    down here; shutdown() only removes this coordinator's job from it.
    """

    def __init__(
        self,
        *,
        cache: Cache[V],
        fetcher: Fetcher[V],
        mode: SDKMode = "on_demand",
        poll_interval: float = 600.0,
        scheduler: Optional[AsyncIOScheduler] = None,
    ) -> None:
        if mode not in ("on_demand", "polling"):
            raise ValueError(f"Unknown refresh mode: {mode!r}")

        self._cache = cache
        self._fetcher = fetcher
        self._mode: SDKMode = mode
        self._poll_interval = float(poll_interval)

        self._scheduler = scheduler
        self._owns_scheduler = False
        self._job: Any = None

        self._state: CoordinatorState = "created"
        self._last_report: Optional[RefreshReport] = None

    @property
    def mode(self) -> SDKMode:
        return self._mode

    @property
    def state(self) -> CoordinatorState:
        return self._state

    @property
    def last_report(self) -> Optional[RefreshReport]:
        return self._last_report

    async def lookup(self, key: str) -> V:
        """Return the cached value for `key`, fetching it on a miss.

        Raises ValidationError for a blank key and propagates fetch errors
        unchanged; a failed fetch leaves the cache untouched.
        """
        validate_key(key)

        cached = self._cache.get(key)
        if cached is not None:
            return cached

        value = await self._fetcher.fetch(key)
        self._cache.put(key, value)
        return value

    def start(self) -> None:
        if self._state == "shut_down":
            raise RuntimeError("Refresh coordinator has been shut down")
        if self._state == "running":
            return

        if self._mode == "polling":
            self._arm_scheduler()

        self._state = "running"

    def shutdown(self) -> None:
        if self._state == "shut_down":
            return

        # Flip state first so an in-flight run stops after its current key
        self._state = "shut_down"

        if self._job is None:
            return

        if self._owns_scheduler:
            self._scheduler.shutdown(wait=False)
        else:
            try:
                self._job.remove()
            except JobLookupError:
                # Already removed by whoever runs the shared scheduler
                pass
        self._job = None
        logger.info("Scheduled cache refresh stopped")

    async def refresh_all(self) -> RefreshReport:
        """Re-fetch every key cached at the start of the run.

        Bypasses freshness checks: fresh entries are refreshed as eagerly as
        stale ones. Per-key failures never abort the run.
        """
        keys = self._cache.keys()
        refreshed: List[str] = []
        failures: Dict[str, BaseException] = {}
        skipped: List[str] = []

        for i, key in enumerate(keys):
            if self._state == "shut_down":
                skipped = keys[i:]
                break

            try:
                value = await self._fetcher.fetch(key)
            except (FetchError, SerializationError) as e:
                failures[key] = e
                logger.warning("Refresh failed for %r: %s", key, e)
                continue
            except Exception as e:
                failures[key] = e
                logger.exception("Unexpected error refreshing %r", key)
                continue

            self._cache.put(key, value)
            refreshed.append(key)

        report = RefreshReport(
            refreshed=tuple(refreshed),
            failures=failures,
            skipped=tuple(skipped),
        )
        self._last_report = report

        logger.info(
            "Cache refresh run: %d refreshed, %d failed, %d skipped",
            len(report.refreshed),
            len(report.failures),
            len(report.skipped),
        )
        return report

    # --- scheduling ---

    def _arm_scheduler(self) -> None:
        if self._scheduler is None:
            self._scheduler = AsyncIOScheduler()
            self._owns_scheduler = True

        # Zero initial delay: first run fires right away
        self._job = self._scheduler.add_job(
            self._scheduled_run,
            "interval",
            seconds=self._poll_interval,
            next_run_time=datetime.now(timezone.utc),
            coalesce=True,
            max_instances=1,
        )

        if not self._scheduler.running:
            self._scheduler.start()

        logger.info("Scheduled cache refresh started (every %.1fs)", self._poll_interval)

    async def _scheduled_run(self) -> None:
        if self._state != "running":
            return
        await self.refresh_all()
