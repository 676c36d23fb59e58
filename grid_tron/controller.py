"""Round and game lifecycle controller.

``GameController`` owns the current :class:`grid_tron.state.State` and moves
it through the lifecycle phases::

    SETUP --start--> PLAYING <--pause/resume--> PAUSED
                        |
                    round over
                        v
                   ROUND_OVER --next_round--> PLAYING

    any phase --new_game--> SETUP

It drives a fixed-interval scheduler that calls :meth:`GameController.tick`,
replaces the state wholesale with the result of :func:`grid_tron.step.step`,
keeps the single-player high score and hands finished single-player scores to
a score sink.

Input arrives asynchronously relative to ticks. Steering and pause intents are
applied immediately (they only stage data); shoot and bomb intents are queued
and applied at the start of the next tick. A re-entrant lock serializes
intents and ticks so hosts may call in from other threads.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from dataclasses import replace
from typing import Callable, Deque, Optional, Tuple

from grid_tron.actions import MOVE_ACTIONS, ONE_SHOT_ACTIONS, Action
from grid_tron.config import GameConfig, SessionContext, validate_frames_per_second
from grid_tron.controls import Intent, translate_key
from grid_tron.levels.round import reset_game, reset_round
from grid_tron.persistence import HighScoreStore, InMemoryHighScoreStore, ScoreSink
from grid_tron.scheduler import AsyncioTickScheduler, Scheduler, TickCallback
from grid_tron.state import State
from grid_tron.step import apply_action, step
from grid_tron.types import GameMode, Phase
from grid_tron.utils.terminal import is_terminal_state

logger = logging.getLogger(__name__)

SchedulerFactory = Callable[[float, TickCallback], Scheduler]


class GameController:
    """Lifecycle state machine around the pure tick engine.

    Args:
        config (GameConfig | None): Setup choices; defaults to a 40x30
            single-player game at 15 FPS.
        session (SessionContext | None): Current user; anonymous by default.
        high_scores (HighScoreStore | None): Single-player best tally store.
        score_sink (ScoreSink | None): Leaderboard submission target.
        scheduler_factory (SchedulerFactory): Builds the tick scheduler from an
            interval and a callback.
        seed (int | None): Spawn seed for every game this controller creates.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        session: Optional[SessionContext] = None,
        high_scores: Optional[HighScoreStore] = None,
        score_sink: Optional[ScoreSink] = None,
        scheduler_factory: SchedulerFactory = AsyncioTickScheduler,
        seed: Optional[int] = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.session = session if session is not None else SessionContext()
        self.high_scores = high_scores if high_scores is not None else InMemoryHighScoreStore()
        self.score_sink = score_sink
        self._scheduler_factory = scheduler_factory
        self._seed = seed
        self._lock = threading.RLock()
        self._pending: Deque[Intent] = deque()
        self._submitted: Optional[Tuple[int, int]] = None
        self._high_score = self.high_scores.load()
        self._scheduler = scheduler_factory(self.config.tick_interval, self.tick)
        self._state = self._fresh_state()
        self._phase = Phase.SETUP

    # -------- Read-only views --------

    @property
    def state(self) -> State:
        return self._state

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def high_score(self) -> int:
        return self._high_score

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    # -------- Lifecycle transitions --------

    def start(self) -> None:
        """Leave setup and start ticking round 1."""
        with self._lock:
            if self._phase != Phase.SETUP:
                logger.debug("start() ignored in phase %s", self._phase)
                return
            self._phase = Phase.PLAYING
            self._scheduler.start()
            logger.info(
                "Game started: %s mode, %dx%d at %d FPS",
                self.config.mode,
                self.config.width,
                self.config.height,
                self.config.frames_per_second,
            )

    def pause(self) -> None:
        with self._lock:
            if self._phase != Phase.PLAYING:
                logger.debug("pause() ignored in phase %s", self._phase)
                return
            self._scheduler.stop()
            self._state = replace(self._state, is_game_paused=True)
            self._phase = Phase.PAUSED

    def resume(self) -> None:
        with self._lock:
            if self._phase != Phase.PAUSED:
                logger.debug("resume() ignored in phase %s", self._phase)
                return
            self._state = replace(self._state, is_game_paused=False)
            self._phase = Phase.PLAYING
            self._scheduler.start()

    def toggle_pause(self) -> None:
        with self._lock:
            if self._phase == Phase.PLAYING:
                self.pause()
            elif self._phase == Phase.PAUSED:
                self.resume()

    def next_round(self) -> None:
        """Start the next round, keeping the cross-round accumulators."""
        with self._lock:
            if self._phase != Phase.ROUND_OVER:
                logger.debug("next_round() ignored in phase %s", self._phase)
                return
            self._pending.clear()
            self._state = reset_round(self._state)
            self._phase = Phase.PLAYING
            self._scheduler.start()
            logger.info("Round %d started", self._state.round)

    def new_game(self, config: Optional[GameConfig] = None) -> None:
        """Stop ticking, reset every accumulator and return to setup.

        Passing a new ``config`` (e.g. a different mode) rebuilds the
        scheduler for its tick rate.
        """
        with self._lock:
            self._scheduler.stop()
            if config is not None:
                self.config = config
                self._scheduler = self._scheduler_factory(config.tick_interval, self.tick)
            self._pending.clear()
            self._submitted = None
            self._state = self._fresh_state()
            self._phase = Phase.SETUP
            logger.info("New game set up (%s mode)", self.config.mode)

    def set_frames_per_second(self, frames_per_second: int) -> None:
        """Change the tick rate, restarting the timer if it is running.

        Raises:
            ValueError: If the rate is outside the setup bounds.
        """
        validate_frames_per_second(frames_per_second)
        with self._lock:
            self.config = replace(self.config, frames_per_second=frames_per_second)
            self._scheduler.interval = self.config.tick_interval
            if self._scheduler.running:
                self._scheduler.stop()
                self._scheduler.start()

    def close(self) -> None:
        with self._lock:
            self._scheduler.stop()

    # -------- Input --------

    def handle_key(self, key: str) -> None:
        """Translate a raw key press for the current mode and submit it."""
        intent = translate_key(self.config.mode, key)
        if intent is not None:
            self.submit(intent)

    def submit(self, intent: Intent) -> None:
        """Apply or queue a player intent."""
        with self._lock:
            if intent.action == Action.PAUSE:
                self.toggle_pause()
                return
            if self._phase not in (Phase.PLAYING, Phase.PAUSED):
                logger.debug("Intent %s ignored in phase %s", intent, self._phase)
                return
            if intent.action in MOVE_ACTIONS:
                self._state = apply_action(self._state, intent.action, intent.player_id)
            elif intent.action in ONE_SHOT_ACTIONS:
                self._pending.append(intent)

    # -------- Ticking --------

    def tick(self) -> State:
        """Advance one tick if playing and return the current state."""
        with self._lock:
            if self._phase != Phase.PLAYING:
                return self._state
            state = self._state
            while self._pending:
                intent = self._pending.popleft()
                state = apply_action(state, intent.action, intent.player_id)
            state = step(state)
            self._state = state
            self._record_high_score()
            if is_terminal_state(state):
                self._finish_round()
            return self._state

    def _fresh_state(self) -> State:
        return reset_game(self.config.width, self.config.height, self.config.mode, self._seed)

    def _record_high_score(self) -> None:
        if self._state.mode != GameMode.SINGLE:
            return
        tally = self._state.tokens_collected
        if tally <= self._high_score:
            return
        self._high_score = tally
        try:
            self.high_scores.save(tally)
        except Exception as exc:
            logger.warning("Saving high score %d failed: %s", tally, exc)

    def _finish_round(self) -> None:
        self._scheduler.stop()
        self._phase = Phase.ROUND_OVER
        state = self._state
        if state.gravitron_death:
            logger.info("Round %d over: GraviTron collected", state.round)
        elif state.winner_id is not None:
            logger.info("Round %d over: player %d wins", state.round, state.winner_id)
        else:
            logger.info("Round %d over", state.round)
        self._submit_score()

    def _submit_score(self) -> None:
        state = self._state
        if state.mode != GameMode.SINGLE or self.score_sink is None:
            return
        score = state.tokens_collected
        if not self.session.is_authenticated or score <= 0:
            return
        key = (state.round, score)
        if self._submitted == key:
            return
        self._submitted = key
        try:
            self.score_sink.submit_score(
                self.session.user_id, self.session.display_name, score
            )
        except Exception as exc:
            logger.warning(
                "Score submission for %s failed, dropping it: %s",
                self.session.display_name,
                exc,
            )
