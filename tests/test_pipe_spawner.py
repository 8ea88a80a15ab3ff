#!/usr/bin/env python3
"""
Tests for pipe_spawner.py — spawn timing and pipe geometry bounds.
"""

import random
import unittest

from flappy_code.constants import PIPE_GAP, PIPE_SYMBOLS, PIPE_WIDTH
from flappy_code.data_models import GameState
from flappy_code.pipe_spawner import PipeSpawner


class TestGeometry(unittest.TestCase):
    def setUp(self):
        self.spawner = PipeSpawner(rng=random.Random(1234))

    def test_top_bounds_for_default_viewport(self):
        self.assertEqual(self.spawner.top_bounds(600), (60, 380))

    def test_spawned_pipes_stay_within_bounds(self):
        state = GameState(width=400, height=600)
        min_top, max_top = self.spawner.top_bounds(state.height)
        for _ in range(200):
            pipe = self.spawner.spawn_pipe(state)
            self.assertGreaterEqual(pipe.top, min_top)
            self.assertLessEqual(pipe.top, max_top)
            self.assertEqual(pipe.bottom, state.height - pipe.top - PIPE_GAP)
            self.assertGreaterEqual(pipe.bottom, 0)
            self.assertEqual(pipe.x, state.width + PIPE_WIDTH)
            self.assertEqual(pipe.width, PIPE_WIDTH)
            self.assertIn(pipe.symbol, PIPE_SYMBOLS)
            self.assertFalse(pipe.passed)
        self.assertEqual(len(state.pipes), 200)

    def test_short_viewport_collapses_bounds(self):
        self.assertEqual(self.spawner.top_bounds(250), (60, 60))
        state = GameState(width=400, height=250)
        pipe = self.spawner.spawn_pipe(state)
        self.assertEqual(pipe.top, 60)
        self.assertEqual(pipe.bottom, 50)

    def test_degenerate_viewport_never_yields_negative_segment(self):
        state = GameState(width=400, height=150)
        pipe = self.spawner.spawn_pipe(state)
        self.assertEqual(pipe.top, 60)
        self.assertEqual(pipe.bottom, 0)

    def test_seeded_spawner_is_repeatable(self):
        a = PipeSpawner(rng=random.Random(7))
        b = PipeSpawner(rng=random.Random(7))
        pa = a.spawn_pipe(GameState())
        pb = b.spawn_pipe(GameState())
        self.assertEqual((pa.top, pa.symbol), (pb.top, pb.symbol))


class TestTiming(unittest.TestCase):
    def setUp(self):
        self.spawner = PipeSpawner(rng=random.Random(0))
        self.state = GameState()
        self.state.last_spawn = 0.0

    def test_no_spawn_until_interval_exceeded(self):
        self.assertIsNone(self.spawner.maybe_spawn(self.state, 1.0))
        self.assertIsNone(self.spawner.maybe_spawn(self.state, 1.5))
        self.assertEqual(self.state.pipes, [])

    def test_spawn_resets_timer(self):
        pipe = self.spawner.maybe_spawn(self.state, 1.51)
        self.assertIsNotNone(pipe)
        self.assertEqual(self.state.last_spawn, 1.51)
        self.assertIsNone(self.spawner.maybe_spawn(self.state, 2.0))
        self.assertIsNotNone(self.spawner.maybe_spawn(self.state, 3.1))
        self.assertEqual(len(self.state.pipes), 2)


if __name__ == "__main__":
    unittest.main()
