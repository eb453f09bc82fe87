"""
Countdown bot orchestrator.

Coordinates startup and shutdown of the webhook client and the
scheduler. The countdown logic itself lives in countdown.py, blocks.py
and scheduler.py.
"""

import asyncio
import logging
import signal
from datetime import datetime
from typing import Callable, Optional

from .config import BOT_NAME, BotConfig
from .scheduler import CountdownScheduler, utc_now
from .webhook import WebhookClient


logger = logging.getLogger(__name__)


class CountdownBot:
    """
    Countdown bot process.

    Responsibilities:
    1. Create the webhook client and scheduler
    2. Run until the countdown completes or a shutdown signal arrives
    3. Release resources in reverse order
    """

    SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)

    def __init__(
        self,
        config: BotConfig,
        client: Optional[WebhookClient] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.config = config
        self.client = client
        self.clock = clock
        self.scheduler: Optional[CountdownScheduler] = None
        self._shutdown: Optional[asyncio.Event] = None

    def _build(self) -> CountdownScheduler:
        if self.client is None:
            self.client = WebhookClient(self.config.webhook_url)
        self.scheduler = CountdownScheduler(
            self.client,
            target=self.config.target,
            interval=self.config.interval,
            clock=self.clock,
        )
        return self.scheduler

    async def start(self) -> None:
        """Create components and start posting updates"""
        scheduler = self._build()

        logger.info(f"Starting {BOT_NAME}...")
        logger.info(f"Target date: {self.config.target.isoformat()}")
        logger.info(f"Update interval: {self.config.interval:g} seconds")

        await scheduler.start()

    async def run_once(self):
        """Run a single pipeline tick without starting the timer."""
        scheduler = self._build()
        try:
            return await scheduler.tick()
        finally:
            await self.stop()

    def request_shutdown(self) -> None:
        """Ask run() to stop. Safe to call from a signal handler."""
        if self._shutdown is not None:
            self._shutdown.set()

    def _install_signal_handlers(self) -> None:
        loop = asyncio.get_running_loop()
        for sig in self.SHUTDOWN_SIGNALS:
            try:
                loop.add_signal_handler(sig, self.request_shutdown)
            except (NotImplementedError, RuntimeError):
                # Not available on this platform; KeyboardInterrupt still works
                logger.debug(f"Cannot install handler for {sig.name}")

    def _remove_signal_handlers(self) -> None:
        loop = asyncio.get_running_loop()
        for sig in self.SHUTDOWN_SIGNALS:
            try:
                loop.remove_signal_handler(sig)
            except (NotImplementedError, RuntimeError):
                pass

    async def run(self) -> None:
        """Run until the countdown completes or shutdown is requested"""
        self._shutdown = asyncio.Event()
        self._install_signal_handlers()

        try:
            await self.start()

            shutdown = asyncio.create_task(self._shutdown.wait())
            finished = asyncio.create_task(self.scheduler.wait_finished())
            done, pending = await asyncio.wait(
                {shutdown, finished},
                return_when=asyncio.FIRST_COMPLETED,
            )
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)

            if shutdown in done:
                logger.info("Received shutdown signal")
            else:
                logger.info("Countdown complete")
        finally:
            self._remove_signal_handlers()
            await self.stop()

    async def stop(self) -> None:
        """Stop all components in reverse order"""
        logger.info("Shutting down countdown bot...")

        if self.scheduler:
            await self.scheduler.stop()
        if self.client:
            await self.client.close()

        logger.info("✅ Countdown bot stopped")
