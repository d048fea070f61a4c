"""Tests for the target motion model."""

import math

import pytest

from sharpshooter.engine.motion import generate_config, position, velocity
from sharpshooter.models.motion import Axis, MotionBounds, MotionConfig, WorldPoint

ORIGIN = WorldPoint(y=0.0, z=0.0)
WIDE_BOUNDS = MotionBounds(min_speed=0.0, max_speed=10.0, min_amplitude=0.0, max_amplitude=10.0)


def _config(speed: float = 2.0, axis: Axis = Axis.HORIZONTAL, amplitude: float = 0.15) -> MotionConfig:
    return MotionConfig(speed=speed, axis=axis, amplitude=amplitude)


class TestPosition:
    def test_quarter_cycle_reaches_peak(self):
        cfg = _config(speed=1.0, amplitude=0.1)
        pos = position(ORIGIN, cfg, 250)
        assert pos.y == 0.0
        assert pos.z == pytest.approx(0.1)

    def test_at_time_zero_is_center(self):
        center = WorldPoint(y=1.5, z=-0.3)
        pos = position(center, _config(speed=3.0), 0)
        assert pos == center

    def test_full_cycle_returns_to_center(self):
        # speed 4 Hz, 250 ms = one full cycle
        pos = position(ORIGIN, _config(speed=4.0), 250)
        assert pos.y == 0.0
        assert pos.z == pytest.approx(0.0, abs=1e-9)

    def test_vertical_moves_y(self):
        pos = position(ORIGIN, _config(speed=3.0, axis=Axis.VERTICAL, amplitude=0.1), 250)
        assert pos.y != 0.0
        assert pos.z == 0.0

    def test_offset_applied_to_center(self):
        center = WorldPoint(y=2.0, z=1.0)
        pos = position(center, _config(speed=1.0, amplitude=0.2), 750)
        # three quarters of a cycle: sin(3π/2) = -1
        assert pos.y == 2.0
        assert pos.z == pytest.approx(0.8)

    @pytest.mark.parametrize("t", [0, 17, 125, 333.3, 1000, 98765])
    def test_never_exceeds_amplitude(self, t):
        cfg = _config(speed=2.7, amplitude=0.2)
        assert abs(position(ORIGIN, cfg, t).z) <= 0.2 + 1e-12

    def test_is_deterministic(self):
        cfg = _config(speed=2.5, amplitude=0.12)
        assert position(ORIGIN, cfg, 500) == position(ORIGIN, cfg, 500)

    def test_center_not_mutated(self):
        center = WorldPoint(y=0.4, z=0.4)
        position(center, _config(), 123)
        assert center == WorldPoint(y=0.4, z=0.4)


class TestPeriodicity:
    @pytest.mark.parametrize("speed", [0.5, 1.0, 2.0, 3.7, 5.0])
    @pytest.mark.parametrize("t", [0.0, 40.0, 310.0, 1234.5])
    def test_repeats_after_period(self, speed, t):
        cfg = _config(speed=speed, amplitude=0.18)
        period_ms = 1000 / speed
        a = position(ORIGIN, cfg, t)
        b = position(ORIGIN, cfg, t + period_ms)
        assert b.z == pytest.approx(a.z, abs=1e-9)
        assert b.y == a.y

    def test_period_ms_property(self):
        assert _config(speed=4.0).period_ms == pytest.approx(250.0)
        assert _config(speed=0.0).period_ms is None


class TestDegenerateMotion:
    @pytest.mark.parametrize("t", [0, 1, 250, 999.9, 1e6])
    def test_zero_amplitude_returns_center_exactly(self, t):
        center = WorldPoint(y=0.3, z=-0.7)
        for axis in Axis:
            assert position(center, _config(axis=axis, amplitude=0.0), t) == center

    @pytest.mark.parametrize("t", [0, 250, 1e5])
    def test_zero_speed_is_stationary(self, t):
        center = WorldPoint(y=0.3, z=-0.7)
        assert position(center, _config(speed=0.0), t) == center
        assert velocity(_config(speed=0.0), t) == (0.0, 0.0)

    def test_stationary_flag(self):
        assert _config(speed=0.0).is_stationary
        assert _config(amplitude=0.0).is_stationary
        assert not _config().is_stationary


class TestAxisExclusivity:
    @pytest.mark.parametrize("t", [0, 13, 77.7, 250, 501, 4000])
    def test_horizontal_pins_y(self, t):
        center = WorldPoint(y=1.25, z=0.5)
        cfg = _config(speed=3.3, axis=Axis.HORIZONTAL)
        assert position(center, cfg, t).y == center.y
        assert velocity(cfg, t)[0] == 0.0

    @pytest.mark.parametrize("t", [0, 13, 77.7, 250, 501, 4000])
    def test_vertical_pins_z(self, t):
        center = WorldPoint(y=1.25, z=0.5)
        cfg = _config(speed=3.3, axis=Axis.VERTICAL)
        assert position(center, cfg, t).z == center.z
        assert velocity(cfg, t)[1] == 0.0


class TestVelocity:
    def test_peak_speed_at_time_zero(self):
        cfg = _config(speed=2.0, amplitude=0.1)
        vy, vz = velocity(cfg, 0)
        assert vy == 0.0
        assert vz == pytest.approx(0.1 * 2.0 * 2 * math.pi)

    def test_zero_at_quarter_cycle(self):
        cfg = _config(speed=1.0, axis=Axis.VERTICAL, amplitude=0.1)
        vy, vz = velocity(cfg, 250)
        assert vy == pytest.approx(0.0, abs=1e-12)
        assert vz == 0.0

    @pytest.mark.parametrize("axis", list(Axis))
    @pytest.mark.parametrize("speed,amplitude", [(2.0, 0.08), (3.5, 0.15), (5.0, 0.2)])
    @pytest.mark.parametrize("t", [10.0, 137.0, 400.0, 2500.0])
    def test_matches_central_difference(self, axis, speed, amplitude, t):
        cfg = _config(speed=speed, axis=axis, amplitude=amplitude)
        eps_ms = 1e-3
        before = position(ORIGIN, cfg, t - eps_ms)
        after = position(ORIGIN, cfg, t + eps_ms)
        dt_s = 2 * eps_ms / 1000
        vy, vz = velocity(cfg, t)
        assert (after.y - before.y) / dt_s == pytest.approx(vy, abs=1e-3)
        assert (after.z - before.z) / dt_s == pytest.approx(vz, abs=1e-3)


class TestInvalidInput:
    @pytest.mark.parametrize("t", [math.nan, math.inf, -math.inf])
    def test_non_finite_time_rejected(self, t):
        with pytest.raises(ValueError):
            position(ORIGIN, _config(), t)
        with pytest.raises(ValueError):
            velocity(_config(), t)

    def test_negative_time_rejected(self):
        with pytest.raises(ValueError):
            position(ORIGIN, _config(), -1.0)

    def test_non_finite_center_rejected(self):
        with pytest.raises(ValueError):
            position(WorldPoint(y=math.nan, z=0.0), _config(), 10)

    @pytest.mark.parametrize("kwargs", [
        {"speed": -1.0},
        {"speed": math.nan},
        {"amplitude": -0.1},
        {"amplitude": math.inf},
    ])
    def test_bad_config_rejected(self, kwargs):
        with pytest.raises(ValueError):
            _config(**kwargs)

    def test_string_axis_rejected(self):
        with pytest.raises(ValueError):
            MotionConfig(speed=1.0, axis="horizontal", amplitude=0.1)


class TestGenerateConfig:
    def test_same_seed_same_config(self):
        assert generate_config(42) == generate_config(42)

    def test_known_first_draw(self):
        # state = 42 * 16807 + 12345 = 718239; 718239 / (2**31 - 1) < 0.5
        assert generate_config(42).axis is Axis.HORIZONTAL

    def test_different_seeds_differ(self):
        bounds = MotionBounds(min_speed=0.5, max_speed=10.0, min_amplitude=0.01, max_amplitude=1.0)
        configs = [generate_config(seed, bounds) for seed in range(40, 50)]
        assert len({c.speed for c in configs}) > 1
        assert len({c.amplitude for c in configs}) > 1
        assert generate_config(42, bounds) != generate_config(43, bounds)

    def test_both_axes_occur(self):
        axes = {generate_config(seed * 7919).axis for seed in range(1, 200)}
        assert axes == {Axis.HORIZONTAL, Axis.VERTICAL}

    @pytest.mark.parametrize("seed", [0, 1, 42, 43, -42, 123456789, 2**31 - 2, 2**40])
    def test_bounds_respected(self, seed):
        bounds = MotionBounds(min_speed=1.0, max_speed=3.0, min_amplitude=0.05, max_amplitude=0.25)
        cfg = generate_config(seed, bounds)
        assert bounds.min_speed <= cfg.speed <= bounds.max_speed
        assert bounds.min_amplitude <= cfg.amplitude <= bounds.max_amplitude

    def test_default_bounds(self):
        for seed in range(1, 50):
            cfg = generate_config(seed)
            assert 2.0 <= cfg.speed <= 5.0
            assert 0.08 <= cfg.amplitude <= 0.2

    def test_zero_seed_matches_seed_one(self):
        assert generate_config(0) == generate_config(1)

    def test_negative_seed_matches_positive(self):
        assert generate_config(-42) == generate_config(42)
        assert generate_config(-7, WIDE_BOUNDS) == generate_config(7, WIDE_BOUNDS)

    def test_zero_state_mid_sequence_matches_reference(self):
        cfg = generate_config(1812590171, WIDE_BOUNDS)
        assert cfg.axis is Axis.HORIZONTAL
        assert cfg.speed == pytest.approx(10 * 29152 / 2147483647)
        assert cfg.amplitude == pytest.approx(10 * 489970009 / 2147483647)

    def test_fixed_point_seed_does_not_collapse(self):
        cfg = generate_config(1700123165, WIDE_BOUNDS)
        assert cfg.speed != cfg.amplitude
        assert cfg == generate_config(1, WIDE_BOUNDS)

    def test_zero_seed_is_not_constant(self):
        cfg = generate_config(0, MotionBounds(min_speed=0.0, max_speed=10.0,
                                              min_amplitude=0.0, max_amplitude=10.0))
        assert cfg.speed != cfg.amplitude

    def test_collapsed_bounds(self):
        bounds = MotionBounds(min_speed=3.0, max_speed=3.0, min_amplitude=0.1, max_amplitude=0.1)
        cfg = generate_config(99, bounds)
        assert cfg.speed == 3.0
        assert cfg.amplitude == 0.1


class TestMotionBounds:
    def test_min_above_max_speed_rejected(self):
        with pytest.raises(ValueError, match="min_speed"):
            MotionBounds(min_speed=5.0, max_speed=2.0)

    def test_min_above_max_amplitude_rejected(self):
        with pytest.raises(ValueError, match="min_amplitude"):
            MotionBounds(min_amplitude=0.3, max_amplitude=0.1)

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            MotionBounds(min_speed=-1.0)
