import asyncio
import logging

import pytest

from grid_tron.config import GameConfig
from grid_tron.controller import GameController
from grid_tron.scheduler import AsyncioTickScheduler
from grid_tron.types import Phase


def test_start_requires_running_loop() -> None:
    scheduler = AsyncioTickScheduler(0.01, lambda: None)
    with pytest.raises(RuntimeError):
        scheduler.start()
    assert not scheduler.running


def test_rejects_non_positive_interval() -> None:
    with pytest.raises(ValueError):
        AsyncioTickScheduler(0, lambda: None)


def test_ticks_until_stopped() -> None:
    calls: list[int] = []

    async def run() -> None:
        scheduler = AsyncioTickScheduler(0.005, lambda: calls.append(1))
        scheduler.start()
        scheduler.start()
        await asyncio.sleep(0.05)
        scheduler.stop()
        stopped_at = len(calls)
        await asyncio.sleep(0.03)
        assert len(calls) == stopped_at
        assert not scheduler.running

    asyncio.run(run())
    assert len(calls) >= 2


def test_controller_round_runs_to_completion() -> None:
    async def run() -> GameController:
        controller = GameController(
            config=GameConfig(width=20, height=20, frames_per_second=200), seed=5
        )
        controller.start()
        for _ in range(200):
            if controller.phase == Phase.ROUND_OVER:
                break
            await asyncio.sleep(0.01)
        controller.close()
        return controller

    controller = asyncio.run(run())
    assert controller.phase == Phase.ROUND_OVER
    assert controller.state.is_game_over
    assert not controller.scheduler.running


def test_first_tick_waits_one_interval() -> None:
    calls: list[int] = []

    async def run() -> None:
        scheduler = AsyncioTickScheduler(0.2, lambda: calls.append(1))
        scheduler.start()
        await asyncio.sleep(0.05)
        scheduler.stop()

    asyncio.run(run())
    assert calls == []


def test_failing_callback_does_not_end_loop(caplog: pytest.LogCaptureFixture) -> None:
    calls: list[int] = []

    def callback() -> None:
        calls.append(1)
        raise OSError("disk full")

    async def run() -> bool:
        scheduler = AsyncioTickScheduler(0.005, callback)
        scheduler.start()
        await asyncio.sleep(0.05)
        running = scheduler.running
        scheduler.stop()
        return running

    with caplog.at_level(logging.ERROR, logger="grid_tron.scheduler"):
        assert asyncio.run(run())
    assert len(calls) >= 2
    assert "Tick callback failed" in caplog.text
