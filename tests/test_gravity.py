import datetime
import os
import sys

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import config
from gravity import GravityHandler, as_seconds


def test_falling_step_integrates_velocity_then_position():
    g = GravityHandler(gravity=10.0, jump_speed=5.0, terminal_velocity=100.0)
    assert g.step(True, 0.5) == pytest.approx(10.0 * 0.5 * 0.5)
    assert g.velocity == pytest.approx(5.0)
    assert g.step(True, 0.5) == pytest.approx(10.0 * 0.5)
    assert g.velocity == pytest.approx(10.0)
    assert not g.grounded


def test_support_resets_velocity_and_returns_zero():
    g = GravityHandler(gravity=10.0)
    g.step(True, 1.0)
    assert g.step(False, 1.0) == 0.0
    assert g.velocity == 0.0
    assert g.grounded


def test_velocity_is_capped_at_terminal_velocity():
    g = GravityHandler(gravity=10.0, terminal_velocity=3.0)
    for _ in range(10):
        drop = g.step(True, 1.0)
    assert g.velocity == 3.0
    assert drop == 3.0
    g.step(True, 1e6)
    assert g.velocity == 3.0


def test_jump_sets_upward_velocity():
    g = GravityHandler(gravity=10.0, jump_speed=5.0)
    assert g.jump() is True
    assert g.velocity == -5.0
    assert g.is_rising
    drop = g.step(True, 0.1)
    assert drop == pytest.approx(-0.4)


def test_support_cancels_pending_jump():
    g = GravityHandler(gravity=10.0, jump_speed=5.0)
    assert not g.rise_through_support
    g.jump()
    assert g.step(False, 0.1) == 0.0
    assert g.velocity == 0.0
    assert g.grounded


def test_pending_jump_rises_through_support_when_enabled():
    g = GravityHandler(gravity=10.0, jump_speed=5.0, rise_through_support=True)
    g.jump()
    assert g.step(False, 0.1) == pytest.approx(-0.4)
    assert not g.grounded
    # once the impulse is spent, support lands the player again
    while g.is_rising:
        g.step(True, 0.1)
    assert g.step(False, 0.1) == 0.0
    assert g.grounded


def test_jump_apex_then_landing():
    g = GravityHandler()
    g.jump()
    height = 0.0
    dt = 0.001
    while g.is_rising:
        height -= g.step(True, dt)
    assert height == pytest.approx(config.MAX_JUMP_HEIGHT, rel=0.02)
    assert g.step(False, dt) == 0.0
    assert g.grounded


def test_air_jump_allowed_by_default():
    g = GravityHandler()
    g.step(True, 0.2)
    assert g.jump() is True
    assert g.is_rising


def test_air_jump_refused_when_disabled():
    g = GravityHandler(allow_air_jump=False)
    assert g.jump() is True
    g.step(True, 0.05)
    velocity = g.velocity
    assert g.jump() is False
    assert g.velocity == velocity
    while g.is_rising or not g.grounded:
        g.step(g.is_rising, 0.05)
    assert g.jump() is True


def test_reset():
    g = GravityHandler()
    g.step(True, 1.0)
    g.reset()
    assert g.velocity == 0.0
    assert g.grounded


def test_as_seconds():
    assert as_seconds(0.25) == 0.25
    assert as_seconds(datetime.timedelta(milliseconds=100)) == pytest.approx(0.1)
    with pytest.raises(ValueError):
        as_seconds(-0.1)
    with pytest.raises(ValueError):
        as_seconds(float("nan"))
