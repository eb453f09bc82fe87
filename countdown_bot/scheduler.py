"""
countdown_bot/scheduler.py

Asyncio-based countdown scheduler.

Runs the compute -> format -> deliver pipeline once on start and then once
per interval until the target is reached. Each tick runs in its own task so
a slow webhook never delays the next firing.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Callable, Optional, Set

from .blocks import format_message
from .countdown import RemainingDuration, compute_remaining
from .errors import DeliveryError
from .webhook import WebhookClient


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CountdownScheduler:
    """
    Posts countdown updates on a fixed interval.

    The scheduler owns a single timer task. Once a tick finds the target
    reached the timer is cancelled and the scheduler is finished; stop()
    does the same on external shutdown. Neither state can go back to
    running.

    Args:
        client: Webhook client used for delivery.
        target: Instant being counted down to.
        interval: Seconds between ticks.
        clock: Callable returning the current aware datetime.
    """

    def __init__(
        self,
        client: WebhookClient,
        target: datetime,
        interval: float = 60.0,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.client = client
        self.target = target
        self.interval = interval
        self.clock = clock
        self.running = False
        self.stopped = False
        self._task: Optional[asyncio.Task] = None
        self._ticks: Set[asyncio.Task] = set()
        self._finished = asyncio.Event()
        self.logger = logging.getLogger(f"{__name__}.scheduler")

    async def start(self) -> None:
        """
        Start posting updates.

        Fires the first tick immediately, then one per interval.
        """
        if self.running:
            self.logger.warning("Scheduler already running")
            return
        if self.stopped:
            self.logger.warning("Scheduler already stopped, not restarting")
            return

        self.running = True
        self._task = asyncio.create_task(self._timer_loop())
        self.logger.info(f"Scheduler started (interval: {self.interval}s)")

    async def stop(self) -> None:
        """
        Stop the scheduler immediately.

        Cancels the timer and any tick still waiting on the webhook.
        """
        was_stopped = self.stopped
        timer = self._task
        self._cancel_timer()

        pending = [tick for tick in self._ticks if not tick.done()]
        for tick in pending:
            tick.cancel()
        if timer is not None:
            pending.append(timer)
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
        self._ticks.clear()

        if not was_stopped:
            self.logger.info("Scheduler stopped")

    async def wait_finished(self) -> None:
        """Wait until the scheduler has stopped for any reason."""
        await self._finished.wait()

    @property
    def finished(self) -> bool:
        return self._finished.is_set()

    @property
    def in_flight(self) -> int:
        """Number of ticks still running."""
        return sum(1 for tick in self._ticks if not tick.done())

    def _cancel_timer(self) -> None:
        self.running = False
        self.stopped = True
        if self._task:
            self._task.cancel()
        self._task = None
        self._finished.set()

    @staticmethod
    def next_slot(previous: float, now: float, interval: float) -> float:
        """
        First firing time on the interval grid after now.

        Slots missed while the event loop was blocked are skipped rather
        than fired back to back.
        """
        next_fire = previous + interval
        while next_fire <= now:
            next_fire += interval
        return next_fire

    async def _timer_loop(self) -> None:
        """Fire a tick every interval on a fixed wall-clock cadence."""
        loop = asyncio.get_running_loop()
        next_fire = loop.time()

        self.logger.debug("Timer loop started")
        try:
            while self.running:
                self._spawn_tick()
                next_fire = self.next_slot(next_fire, loop.time(), self.interval)
                await asyncio.sleep(max(0.0, next_fire - loop.time()))
        except asyncio.CancelledError:
            self.logger.debug("Timer loop cancelled")
            raise

    def _spawn_tick(self) -> None:
        tick = asyncio.create_task(self._guarded_tick())
        self._ticks.add(tick)
        tick.add_done_callback(self._ticks.discard)

    async def _guarded_tick(self) -> None:
        """Run one tick, logging anything that escapes it."""
        try:
            await self.tick()
        except asyncio.CancelledError:
            raise
        except Exception as e:
            self.logger.exception(f"Failed to update countdown: {e}")

    async def tick(self) -> RemainingDuration:
        """
        Run the pipeline once.

        Delivery failures are logged and do not propagate. If the target
        has been reached the scheduler stops after the delivery attempt,
        even when that attempt raised something unexpected.

        Returns:
            The remaining duration computed for this tick.
        """
        remaining = compute_remaining(self.clock(), self.target)
        message = format_message(remaining)

        self.logger.debug(
            f"Countdown: {remaining.days}d {remaining.time_of_day} remaining "
            f"(reached: {remaining.reached})"
        )

        try:
            await self.client.deliver(message)
        except DeliveryError as e:
            self.logger.error(f"Failed to deliver countdown update: {e}")
        finally:
            # Reached stops the schedule whatever the delivery outcome
            if remaining.reached and not self.stopped:
                self.logger.info("Event has started! Stopping countdown updates.")
                self._cancel_timer()

        return remaining
