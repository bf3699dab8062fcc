"""
EvictionSweeper - periodic removal of inactive participants.

Each sweep:
1. Records departure notices still pending from earlier sweeps
2. Evicts every participant idle for longer than the TTL
3. Records one departure notice per evicted participant

A notice is built once, when its participant is evicted, and kept until it is
written, so retrying it on a later sweep never produces a second notice.

Sweeps are single-flight: a tick that finds the previous sweep still running
is skipped. Any failure is logged and ends the current sweep; evicted
participants whose notice was not written stay pending for the next sweep.
Nothing raised here reaches a client or stops the ticker.
"""

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from chatroom.application.commands.participants.evict_expired import (
    EvictExpiredCommand,
    EvictExpiredHandler,
)
from chatroom.application.services.status_announcer import StatusAnnouncer
from chatroom.config.settings import Config
from chatroom.domain.entities.message import Message
from chatroom.domain.entities.participant import Participant
from chatroom.domain.value_objects.participant_name import ParticipantName
from chatroom.observability.metrics import (
    SweepOutcome,
    increment_participants_evicted,
    increment_sweep,
    set_pending_departures,
)

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EvictionSweeper:
    def __init__(
        self,
        evict_handler: EvictExpiredHandler,
        announcer: StatusAnnouncer,
        interval_seconds: float = Config.SWEEP_INTERVAL_SECONDS,
        ttl_seconds: float = Config.PRESENCE_TTL_SECONDS,
        leave_text: str = Config.LEAVE_NOTICE_TEXT,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._evict_handler = evict_handler
        self._announcer = announcer
        self._interval = interval_seconds
        self._ttl = timedelta(seconds=ttl_seconds)
        self._leave_text = leave_text
        self._clock = clock

        self._lock = asyncio.Lock()
        self._pending: list[Message] = []
        self._ticker: Optional[asyncio.Task] = None
        self._in_flight: set[asyncio.Task] = set()

    @property
    def pending_departures(self) -> list[ParticipantName]:
        return [notice.sender for notice in self._pending]

    @property
    def is_running(self) -> bool:
        return self._ticker is not None and not self._ticker.done()

    async def sweep(self) -> Optional[list[Participant]]:
        """
        Run one sweep now.

        Returns:
            Participants evicted by this sweep, or None if another sweep was
            already in progress and this one was skipped.
        """
        if self._lock.locked():
            logger.warning("[Sweeper] Previous sweep still running, skipping tick")
            increment_sweep(SweepOutcome.SKIPPED)
            return None

        async with self._lock:
            evicted: list[Participant] = []
            try:
                await self._flush_pending()

                evicted = await self._evict_handler.execute(
                    EvictExpiredCommand(now=self._clock(), ttl=self._ttl)
                )
                if evicted:
                    increment_participants_evicted(len(evicted))
                    self._pending.extend(
                        self._announcer.build(p.name, self._leave_text) for p in evicted
                    )
                    await self._flush_pending()
            except Exception as e:
                logger.error(f"[Sweeper] Sweep failed: {e}", exc_info=True)
                increment_sweep(SweepOutcome.FAILED)
                return evicted
            finally:
                set_pending_departures(len(self._pending))

            increment_sweep(SweepOutcome.COMPLETED)
            return evicted

    async def _flush_pending(self) -> None:
        while self._pending:
            notice = self._pending[0]
            await self._announcer.record(notice)
            self._pending.pop(0)
            logger.info(f"[Sweeper] {notice.sender.value} left (inactive)")

    async def _tick_forever(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            # Fixed-rate ticks; sweep() itself refuses to overlap
            task = asyncio.create_task(self.sweep())
            self._in_flight.add(task)
            task.add_done_callback(self._in_flight.discard)

    def start(self) -> None:
        if self.is_running:
            return
        self._ticker = asyncio.create_task(self._tick_forever())
        logger.info(
            f"[Sweeper] Started: interval={self._interval}s, "
            f"ttl={self._ttl.total_seconds()}s"
        )

    async def stop(self) -> None:
        """Stop ticking and wait for an in-flight sweep to finish."""
        if self._ticker:
            self._ticker.cancel()
            try:
                await self._ticker
            except asyncio.CancelledError:
                pass
            self._ticker = None

        if self._in_flight:
            await asyncio.gather(*self._in_flight)
        logger.info("[Sweeper] Stopped")
