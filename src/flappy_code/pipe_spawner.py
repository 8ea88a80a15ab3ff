"""
pipe_spawner.py: Decides when and where new pipes appear.
"""

import logging
import math
import random
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .constants import (
    PIPE_WIDTH, PIPE_GAP, PIPE_SPAWN_INTERVAL, PIPE_MIN_TOP, PIPE_BOTTOM_MARGIN,
    PIPE_SYMBOLS
)
from .data_models import GameState, Pipe

logger = logging.getLogger(__name__)


@dataclass
class PipeSpawner:
    """
    Timed spawning policy. Pipes enter just off the right edge with a top
    segment height drawn uniformly from the bounds the viewport allows.
    """
    rng: random.Random = field(default_factory=random.Random)
    interval: float = PIPE_SPAWN_INTERVAL
    width: float = PIPE_WIDTH
    gap: float = PIPE_GAP

    def top_bounds(self, height: float) -> Tuple[int, int]:
        """Returns (min_top, max_top); both collapse to min_top on short viewports."""
        min_top = PIPE_MIN_TOP
        max_top = math.floor(height - self.gap - PIPE_BOTTOM_MARGIN)
        return min_top, max(min_top, max_top)

    def spawn_pipe(self, state: GameState) -> Pipe:
        """Generates a new pipe off-screen to the right."""
        min_top, max_top = self.top_bounds(state.height)
        top = self.rng.randint(min_top, max_top)
        pipe = Pipe(
            x=state.width + self.width,
            top=top,
            bottom=max(0, state.height - top - self.gap),
            width=self.width,
            symbol=self.rng.choice(PIPE_SYMBOLS),
        )
        state.pipes.append(pipe)
        logger.debug("Spawned pipe top=%s bottom=%s symbol=%r",
                     pipe.top, pipe.bottom, pipe.symbol)
        return pipe

    def maybe_spawn(self, state: GameState, now: float) -> Optional[Pipe]:
        if now - state.last_spawn > self.interval:
            state.last_spawn = now
            return self.spawn_pipe(state)
        return None
