"""Tests for dvd_logo.motion."""

from __future__ import annotations

from dataclasses import replace
from random import Random

import pytest

from dvd_logo.motion import (
    PhysicsConfig,
    advance,
    apply_nudge,
    clamp_velocity,
    is_corner_hit,
    resolve_walls,
)
from dvd_logo.state import PointerState, SimulationState

CONFIG = PhysicsConfig(logo_height=60.0)
NO_POINTER = PointerState()


class TestCornerDetection:
    def test_top_left_is_corner(self) -> None:
        assert is_corner_hit(0, 0, CONFIG)

    @pytest.mark.parametrize("height", [1.0, 60.0, 250.0])
    def test_origin_is_corner_for_any_height(self, height: float) -> None:
        config = PhysicsConfig(logo_height=height)
        state = advance(SimulationState(x=0, y=0, vx=0, vy=0), NO_POINTER, config)
        assert state.hit_corner
        assert state.corner_hits == 1

    def test_centre_is_not_corner(self) -> None:
        assert not is_corner_hit(400, 300, CONFIG)
        state = advance(SimulationState(x=400, y=300, vx=0, vy=0), NO_POINTER, CONFIG)
        assert not state.hit_corner
        assert state.corner_hits == 0

    def test_single_wall_is_not_corner(self) -> None:
        assert not is_corner_hit(0, 300, CONFIG)
        assert not is_corner_hit(400, 0, CONFIG)

    def test_bottom_right_within_tolerance(self) -> None:
        assert is_corner_hit(CONFIG.max_x - 4, CONFIG.max_y - 4, CONFIG)
        assert not is_corner_hit(CONFIG.max_x - 5, CONFIG.max_y - 4, CONFIG)

    def test_lingering_in_corner_scores_every_tick(self) -> None:
        state = SimulationState(x=0, y=0, vx=0, vy=0)
        for _ in range(3):
            state = advance(state, NO_POINTER, CONFIG)
        assert state.corner_hits == 3

    def test_hit_flag_cleared_on_next_tick(self) -> None:
        state = SimulationState(x=0, y=0, vx=0, vy=0, corner_hits=4, hit_corner=True)
        state = advance(replace(state, x=400, y=300), NO_POINTER, CONFIG)
        assert not state.hit_corner
        assert state.corner_hits == 4


class TestWallBounce:
    def test_left_wall_reflects(self) -> None:
        state = advance(SimulationState(x=0, y=300, vx=-2, vy=0), NO_POINTER, CONFIG)
        assert state.x == 0
        assert state.vx == 2

    def test_right_wall_clamps_to_limit(self) -> None:
        state = advance(SimulationState(x=679, y=300, vx=3, vy=0), NO_POINTER, CONFIG)
        assert state.x == CONFIG.max_x == 680
        assert state.vx == -3

    def test_bottom_wall_uses_logo_height(self) -> None:
        state = advance(SimulationState(x=400, y=539, vx=0, vy=2), NO_POINTER, CONFIG)
        assert state.y == 540
        assert state.vy == -2

    def test_diagonal_into_corner_flips_both_axes(self) -> None:
        state = advance(SimulationState(x=1, y=1, vx=-2, vy=-2), NO_POINTER, CONFIG)
        assert (state.x, state.y) == (0, 0)
        assert (state.vx, state.vy) == (2, 2)
        assert state.hit_corner

    def test_inside_viewport_untouched(self) -> None:
        state = SimulationState(x=100, y=100, vx=1, vy=-1)
        assert resolve_walls(state, CONFIG) == state


class TestPointerNudge:
    def test_released_button_does_nothing(self) -> None:
        state = SimulationState(x=340, y=270, vx=1, vy=1)
        pointer = PointerState(position=(0, 0), pressed=False)
        assert apply_nudge(state, pointer, CONFIG) == state

    def test_pulls_towards_pointer(self) -> None:
        # Logo centre is (400, 300).
        state = SimulationState(x=340, y=270, vx=0, vy=0)
        pointer = PointerState(position=(600, 100), pressed=True)
        nudged = apply_nudge(state, pointer, CONFIG)
        assert nudged.vx == pytest.approx(0.1)
        assert nudged.vy == pytest.approx(-0.1)
        assert (nudged.x, nudged.y) == (state.x, state.y)

    def test_clamps_each_axis_keeping_sign(self) -> None:
        state = SimulationState(x=0, y=270, vx=2.9, vy=-1.0)
        pointer = PointerState(position=(800, 300), pressed=True)
        nudged = apply_nudge(state, pointer, CONFIG)
        assert nudged.vx == 3.0
        assert nudged.vy == -1.0

    def test_negative_clamp(self) -> None:
        state = SimulationState(x=680, y=270, vx=-2.9, vy=0)
        pointer = PointerState(position=(0, 300), pressed=True)
        assert apply_nudge(state, pointer, CONFIG).vx == -3.0

    def test_clamp_velocity(self) -> None:
        assert clamp_velocity(5.0, 3.0) == 3.0
        assert clamp_velocity(-5.0, 3.0) == -3.0
        assert clamp_velocity(2.5, 3.0) == 2.5


class TestAdvance:
    def test_zero_velocity_is_idempotent(self) -> None:
        state = SimulationState(x=400, y=300, vx=0, vy=0)
        after = advance(state, NO_POINTER, CONFIG)
        assert (after.x, after.y, after.vx, after.vy) == (400, 300, 0, 0)

    def test_moves_by_velocity(self) -> None:
        state = advance(SimulationState(x=100, y=100, vx=2, vy=-1.5), NO_POINTER, CONFIG)
        assert (state.x, state.y) == (102, 98.5)

    def test_long_run_keeps_invariants(self) -> None:
        rng = Random(0)
        state = SimulationState(x=200, y=150, vx=2, vy=2)
        for _ in range(5000):
            pointer = PointerState(
                position=(rng.uniform(-100, 900), rng.uniform(-100, 700)),
                pressed=rng.random() < 0.3,
            )
            before = state.corner_hits
            state = advance(state, pointer, CONFIG)
            assert 0 <= state.x <= CONFIG.max_x
            assert 0 <= state.y <= CONFIG.max_y
            assert abs(state.vx) <= CONFIG.max_velocity
            assert abs(state.vy) <= CONFIG.max_velocity
            assert state.corner_hits - before in (0, 1)
            assert state.hit_corner == (state.corner_hits == before + 1)
