"""
Command watcher - periodic poll, apply and report cycle.

Each cycle fetches every pending command, applies them from the oldest to
the newest and sends all the resulting reports in one batch. A failed fetch
skips the cycle, a failed send drops its reports: the platform keeps the
commands pending and the idempotency annotation prevents re-application.
"""

import asyncio
import logging
from typing import List, Protocol

from hubagent.modules.api import Command, CommandReport

from .router import CommandRouter

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL = 5.0


class CommandSource(Protocol):
    """Protocol for the platform side of the command exchange."""

    async def list_pending_commands(self) -> List[Command]:
        ...

    async def send_command_reports(self, reports: List[CommandReport]) -> None:
        ...


class Watcher:
    """Watches and applies the commands of the platform."""

    def __init__(
        self,
        source: CommandSource,
        router: CommandRouter,
        interval: float = DEFAULT_POLL_INTERVAL,
    ):
        if interval <= 0:
            raise ValueError("interval must be positive")

        self.source = source
        self.router = router
        self.interval = interval
        self._stop = asyncio.Event()

    def stop(self) -> None:
        """Ask the watcher to stop. A cycle in progress runs to completion."""
        self._stop.set()

    @property
    def stopped(self) -> bool:
        return self._stop.is_set()

    async def run(self) -> None:
        """
        Run cycles on a fixed period until stop() is called.

        Ticks missed while a cycle overruns the period are coalesced: the
        next cycle starts right away and the ones in between are dropped.
        """
        logger.info(f"Starting command watcher (every {self.interval}s)")

        loop = asyncio.get_running_loop()
        next_tick = loop.time() + self.interval

        while not await self._wait_until(next_tick):
            await self.run_cycle()

            next_tick += self.interval
            now = loop.time()
            if next_tick <= now:
                dropped = int((now - next_tick) // self.interval)
                next_tick += dropped * self.interval
                logger.debug(f"Command cycle overran the polling interval, {dropped} tick(s) dropped")

        logger.info("Stopping command watcher")

    async def run_cycle(self) -> List[CommandReport]:
        """Fetch, apply and report once. Returns the reports of the cycle."""
        try:
            commands = await self.source.list_pending_commands()
        except Exception as e:
            logger.warning(f"Failed to list commands: {e}")
            return []

        if not commands:
            return []

        reports = await self.apply_commands(commands)

        try:
            await self.source.send_command_reports(reports)
        except Exception as e:
            logger.error(f"Failed to send {len(reports)} command report(s): {e}")

        return reports

    async def apply_commands(self, commands: List[Command]) -> List[CommandReport]:
        """Apply commands sequentially from the oldest to the newest."""
        ordered = sorted(commands, key=lambda command: command.created_at)

        reports = []
        for command in ordered:
            reports.append(await self.router.route(command))

        return reports

    async def _wait_until(self, deadline: float) -> bool:
        """Sleep until deadline. Returns True if stop was requested."""
        if self._stop.is_set():
            return True

        timeout = max(0.0, deadline - asyncio.get_running_loop().time())
        try:
            await asyncio.wait_for(self._stop.wait(), timeout=timeout)
        except asyncio.TimeoutError:
            return False

        return True
