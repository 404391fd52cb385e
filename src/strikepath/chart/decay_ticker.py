"""
Decay Ticker

Periodic tick source that drives PathRecorder.tick() at display refresh
rate. It only ever runs the decay step and never touches pointer input, so
tests can leave it stopped and call step() by hand.
"""

import asyncio
from typing import Optional

from loguru import logger

from strikepath.chart.path_recorder import PathRecorder

DEFAULT_FRAME_INTERVAL = 1 / 60


class DecayTicker:
    """
    Asyncio loop calling recorder.tick() every interval seconds.

    Attributes:
        recorder: Recorder whose cells decay
        interval: Seconds between ticks
        ticks: Number of ticks run so far
    """

    def __init__(self, recorder: PathRecorder, interval: float = DEFAULT_FRAME_INTERVAL):
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")

        self.recorder = recorder
        self.interval = interval
        self.ticks = 0
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def step(self, count: int = 1) -> int:
        """
        Run ticks synchronously.

        Returns:
            Total number of cells removed
        """
        removed = 0
        for _ in range(count):
            removed += self.recorder.tick()
            self.ticks += 1
        return removed

    def start(self) -> None:
        """Schedule the loop on the running event loop (no-op if already running)."""
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.debug(f"✓ DecayTicker started (interval: {self.interval:.4f}s)")

    async def stop(self) -> None:
        """Cancel the loop and wait for it to finish."""
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.debug(f"DecayTicker stopped after {self.ticks} ticks")

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            self.step()

    async def __aenter__(self) -> "DecayTicker":
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.stop()
