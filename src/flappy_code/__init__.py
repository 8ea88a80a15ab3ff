"""
Flappy Code: a single-player gap-flying arcade game built on pygame.
"""

from .data_models import GameState, Phase, Pipe, Player, Rect
from .game_engine import GameEngine
from .physics_core import PhysicsCore
from .pipe_spawner import PipeSpawner
from .storage import MemoryStore, SqliteStore, load_best, save_best

__version__ = "1.0.0"
