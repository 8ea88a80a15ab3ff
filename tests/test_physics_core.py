#!/usr/bin/env python3
"""
Tests for physics_core.py — integration, world bounds, box collision and
pass scoring. No display needed.
"""

import unittest

from flappy_code.constants import GRAVITY_ACCEL, JUMP_VELOCITY, MAX_ROTATION, MIN_ROTATION
from flappy_code.data_models import Pipe, Player, Rect
from flappy_code.physics_core import PhysicsCore


def make_pipe(x, top=100, bottom=100, width=64):
    return Pipe(x=x, top=top, bottom=bottom, width=width, symbol="<>")


class TestMovement(unittest.TestCase):
    def setUp(self):
        self.core = PhysicsCore()

    def test_gravity_integrates_velocity_then_position(self):
        player = Player(x=60, y=100, velocity=0.0)
        self.core.apply_gravity_and_movement(player, 0.05)
        self.assertAlmostEqual(player.velocity, GRAVITY_ACCEL * 0.05)
        self.assertAlmostEqual(player.y, 100 + GRAVITY_ACCEL * 0.05 * 0.05)

    def test_flap_returns_upward_velocity(self):
        self.assertEqual(self.core.flap(), JUMP_VELOCITY)
        self.assertLess(self.core.flap(), 0)

    def test_rotation_is_clamped(self):
        self.assertEqual(PhysicsCore.rotation_for(-10000), MIN_ROTATION)
        self.assertEqual(PhysicsCore.rotation_for(10000), MAX_ROTATION)
        self.assertAlmostEqual(PhysicsCore.rotation_for(300), 0.5)

    def test_floor_clamps_and_reports_hit(self):
        player = Player(x=60, y=599, size=36)
        self.assertTrue(self.core.hit_floor(player, 600))
        self.assertEqual(player.y, 582)

    def test_floor_not_reached(self):
        player = Player(x=60, y=300, size=36)
        self.assertFalse(self.core.hit_floor(player, 600))
        self.assertEqual(player.y, 300)

    def test_ceiling_clamps_and_drops_upward_velocity(self):
        player = Player(x=60, y=5, velocity=-200.0, size=36)
        self.core.clamp_ceiling(player)
        self.assertEqual(player.y, 18)
        self.assertEqual(player.velocity, 0.0)

    def test_ceiling_keeps_downward_velocity(self):
        player = Player(x=60, y=10, velocity=50.0, size=36)
        self.core.clamp_ceiling(player)
        self.assertEqual(player.y, 18)
        self.assertEqual(player.velocity, 50.0)


class TestCollision(unittest.TestCase):
    def setUp(self):
        self.core = PhysicsCore()

    def test_rect_intersect_overlap(self):
        a = Rect(0, 0, 10, 10)
        b = Rect(5, 5, 15, 15)
        self.assertTrue(PhysicsCore.rect_intersect(a, b))

    def test_rect_intersect_separated(self):
        a = Rect(0, 0, 10, 10)
        for b in (Rect(11, 0, 20, 10), Rect(-20, 0, -1, 10),
                  Rect(0, 11, 10, 20), Rect(0, -20, 10, -1)):
            self.assertFalse(PhysicsCore.rect_intersect(a, b), b)

    def test_shared_edge_counts_as_intersection(self):
        a = Rect(0, 0, 10, 10)
        self.assertTrue(PhysicsCore.rect_intersect(a, Rect(10, 0, 20, 10)))
        self.assertTrue(PhysicsCore.rect_intersect(a, Rect(0, 10, 10, 20)))

    def test_pipe_rects_span_viewport_edges(self):
        top, bottom = PhysicsCore.pipe_rects(make_pipe(200, top=120, bottom=90), 600)
        self.assertEqual((top.left, top.top, top.right, top.bottom), (200, 0, 264, 120))
        self.assertEqual((bottom.left, bottom.top, bottom.right, bottom.bottom),
                         (200, 510, 264, 600))

    def test_player_touching_pipe_edge_collides(self):
        # Player box spans x 42..78, y 252..288.
        player = Player(x=60, y=270, size=36)
        self.assertTrue(self.core.check_collision(player, make_pipe(78, top=300), 600))
        self.assertFalse(self.core.check_collision(player, make_pipe(78.01, top=300), 600))

    def test_player_in_gap_is_safe(self):
        player = Player(x=60, y=270, size=36)
        pipe = make_pipe(40, top=200, bottom=200)
        self.assertFalse(self.core.check_collision(player, pipe, 600))

    def test_player_hits_bottom_segment(self):
        player = Player(x=60, y=270, size=36)
        pipe = make_pipe(40, top=100, bottom=320)
        self.assertTrue(self.core.check_collision(player, pipe, 600))


class TestPassScoring(unittest.TestCase):
    def setUp(self):
        self.core = PhysicsCore()
        self.player = Player(x=60, y=270, size=36)

    def test_not_passed_while_trailing_edge_at_leading_edge(self):
        pipe = make_pipe(42 - 64)
        self.assertFalse(self.core.check_passed(self.player, pipe))
        self.assertFalse(pipe.passed)

    def test_passed_only_once(self):
        pipe = make_pipe(41 - 64)
        self.assertTrue(self.core.check_passed(self.player, pipe))
        self.assertTrue(pipe.passed)
        self.assertFalse(self.core.check_passed(self.player, pipe))


if __name__ == "__main__":
    unittest.main()
