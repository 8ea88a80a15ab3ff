"""
data_models.py: Data structures for the game state.
"""

import enum
from dataclasses import dataclass, field
from typing import List, Optional

from .constants import (
    DEFAULT_WIDTH, DEFAULT_HEIGHT, PLAYER_SIZE, PLAYER_X_RATIO, PLAYER_Y_RATIO
)


class Phase(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    ENDED = "ended"


@dataclass
class Rect:
    """Axis-aligned box given by its four edges."""
    left: float
    top: float
    right: float
    bottom: float


@dataclass
class Player:
    """The falling glyph. x is fixed for a session, y moves under gravity."""
    x: float = round(DEFAULT_WIDTH * PLAYER_X_RATIO)
    y: float = round(DEFAULT_HEIGHT * PLAYER_Y_RATIO)
    velocity: float = 0.0
    size: float = PLAYER_SIZE
    rotation: float = 0.0           # Cosmetic only
    alive: bool = True

    @property
    def rect(self) -> Rect:
        half = self.size / 2
        return Rect(self.x - half, self.y - half, self.x + half, self.y + half)


@dataclass
class Pipe:
    """A top/bottom pipe pair with a fixed gap between the segments."""
    x: float
    top: float
    bottom: float
    width: float
    symbol: str
    passed: bool = False

    @property
    def right(self) -> float:
        return self.x + self.width


@dataclass
class GameState:
    """Everything one play session owns."""
    width: float = DEFAULT_WIDTH
    height: float = DEFAULT_HEIGHT
    phase: Phase = Phase.IDLE
    score: int = 0
    best: int = 0
    last_time: Optional[float] = None   # Timestamp of the previous tick
    last_spawn: float = 0.0             # Timestamp of the last pipe spawn
    player: Player = field(default_factory=Player)
    pipes: List[Pipe] = field(default_factory=list)

    @property
    def running(self) -> bool:
        return self.phase is Phase.RUNNING

    def to_client_state(self) -> dict:
        """Minimal snapshot for debugging and the HUD."""
        return {
            "score": self.score,
            "best": self.best,
            "running": self.running,
            "phase": self.phase.value,
        }
