"""
game_engine.py: The session owner. Runs the simulation step and the
Idle -> Running -> Ended state machine.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from .constants import (
    MAX_FRAME_DT, PIPE_SPEED_PPS, PIPE_CLEANUP_MARGIN, PLAYER_X_RATIO,
    PLAYER_Y_RATIO
)
from .data_models import GameState, Phase, Player
from .physics_core import PhysicsCore
from .pipe_spawner import PipeSpawner
from .storage import KeyValueStore, MemoryStore, load_best, save_best

logger = logging.getLogger(__name__)


@dataclass
class GameEngine:
    """
    Owns one GameState and is its only mutator. The host drives it with
    `tick(now)` once per frame and forwards every control input to `flap()`.
    """
    store: KeyValueStore = field(default_factory=MemoryStore)
    core: PhysicsCore = field(default_factory=PhysicsCore)
    spawner: PipeSpawner = field(default_factory=PipeSpawner)
    clock: Callable[[], float] = time.monotonic
    state: GameState = field(default_factory=GameState)

    def __post_init__(self):
        self.state.best = load_best(self.store)
        self._place_player()

    # ---------- Viewport ----------

    def _place_player(self):
        player = self.state.player
        player.x = round(self.state.width * PLAYER_X_RATIO)
        player.y = round(self.state.height * PLAYER_Y_RATIO)

    def resize(self, width: float, height: float):
        """Applies new viewport dimensions. Call between ticks only."""
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid viewport size: {width}x{height}")
        self.state.width = width
        self.state.height = height
        self._place_player()

    # ---------- State machine ----------

    def start(self, now: Optional[float] = None):
        """Resets the session and enables physics. Also used for restarts."""
        if now is None:
            now = self.clock()
        state = self.state
        state.pipes.clear()
        state.score = 0
        state.player = Player(size=state.player.size)
        self._place_player()
        state.last_spawn = now
        state.last_time = None
        state.phase = Phase.RUNNING
        logger.info("Session started (best %d)", state.best)

    def end(self):
        """Freezes the session and persists a new best score."""
        state = self.state
        if not state.running:
            return
        state.phase = Phase.ENDED
        state.player.alive = False
        if state.score > state.best:
            state.best = state.score
            if save_best(self.store, state.best):
                logger.info("New best score %d saved", state.best)
        logger.info("Session ended with score %d (best %d)", state.score, state.best)

    def flap(self, now: Optional[float] = None):
        """Single control action: starts a session, or kicks the player upward."""
        if not self.state.running:
            self.start(now)
            return
        player = self.state.player
        if player.alive:
            player.velocity = self.core.flap()

    # ---------- Simulation ----------

    def advance(self, dt: float):
        """Advances physics, pipes, scoring and collisions by dt seconds."""
        state = self.state
        if not state.running:
            return
        dt = max(0.0, min(dt, MAX_FRAME_DT))
        player = state.player

        # 1. Player movement and world bounds
        self.core.apply_gravity_and_movement(player, dt)
        if self.core.hit_floor(player, state.height):
            self.end()
            return
        self.core.clamp_ceiling(player)

        # 2. Pipes, walked backwards so removal keeps indices valid
        pipe_delta_x = PIPE_SPEED_PPS * dt
        for i in range(len(state.pipes) - 1, -1, -1):
            pipe = state.pipes[i]
            pipe.x -= pipe_delta_x

            if self.core.check_passed(player, pipe):
                state.score += 1

            if self.core.check_collision(player, pipe, state.height):
                self.end()
                return

            if pipe.right < -PIPE_CLEANUP_MARGIN:
                del state.pipes[i]

    def tick(self, now: float) -> bool:
        """
        One frame of the loop driver. Returns True while the driver should
        keep ticking, i.e. while the session is running.
        """
        state = self.state
        if not state.running:
            return False
        if state.last_time is None:
            state.last_time = now
        dt = min(now - state.last_time, MAX_FRAME_DT)
        state.last_time = now

        self.advance(dt)
        if state.running:
            self.spawner.maybe_spawn(state, now)
        return state.running

    def get_state(self) -> dict:
        return self.state.to_client_state()
