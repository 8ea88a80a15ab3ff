"""
physics_core.py: Kinematic functions, collision tests and pass scoring.
"""

from typing import Tuple

from .constants import (
    GRAVITY_ACCEL, JUMP_VELOCITY, ROTATION_DIVISOR, MIN_ROTATION, MAX_ROTATION
)
from .data_models import Player, Pipe, Rect


class PhysicsCore:
    """
    Stateless physics used by the game engine. Every method works on the
    entities it is handed and never keeps a reference to them.
    """

    def apply_gravity_and_movement(self, player: Player, dt: float):
        """Integrates one step of length dt and refreshes the cosmetic rotation."""
        player.velocity += GRAVITY_ACCEL * dt
        player.y += player.velocity * dt
        player.rotation = self.rotation_for(player.velocity)

    @staticmethod
    def rotation_for(velocity: float) -> float:
        return max(MIN_ROTATION, min(MAX_ROTATION, velocity / ROTATION_DIVISOR))

    def flap(self) -> float:
        """Returns the instantaneous velocity after a flap."""
        return JUMP_VELOCITY

    def hit_floor(self, player: Player, height: float) -> bool:
        """Clamps the player onto the floor. True means the player landed (fatal)."""
        half = player.size / 2
        if player.y + half >= height:
            player.y = height - half
            return True
        return False

    def clamp_ceiling(self, player: Player):
        """Keeps the player below the ceiling; upward velocity is dropped."""
        half = player.size / 2
        if player.y - half <= 0:
            player.y = half
            player.velocity = max(0.0, player.velocity)

    @staticmethod
    def rect_intersect(a: Rect, b: Rect) -> bool:
        # Touching edges count as an intersection.
        return not (
            a.right < b.left
            or a.left > b.right
            or a.bottom < b.top
            or a.top > b.bottom
        )

    @staticmethod
    def pipe_rects(pipe: Pipe, height: float) -> Tuple[Rect, Rect]:
        """Returns the (top, bottom) segment boxes of a pipe."""
        top = Rect(pipe.x, 0, pipe.right, pipe.top)
        bottom = Rect(pipe.x, height - pipe.bottom, pipe.right, height)
        return top, bottom

    def check_collision(self, player: Player, pipe: Pipe, height: float) -> bool:
        """Checks the player's box against both segments of one pipe."""
        player_rect = player.rect
        top_rect, bottom_rect = self.pipe_rects(pipe, height)
        return (self.rect_intersect(player_rect, top_rect)
                or self.rect_intersect(player_rect, bottom_rect))

    def check_passed(self, player: Player, pipe: Pipe) -> bool:
        """Marks a pipe passed once its trailing edge clears the player's leading edge.

        Returns True only on the frame the pipe becomes passed.
        """
        if pipe.passed:
            return False
        if pipe.right < player.x - player.size / 2:
            pipe.passed = True
            return True
        return False
