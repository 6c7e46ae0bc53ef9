import datetime
import math

import logutil
from config import GRAVITY, JUMP_SPEED, TERMINAL_VELOCITY, ALLOW_AIR_JUMP, RISE_THROUGH_SUPPORT


def as_seconds(elapsed):
    """Accept a float number of seconds or a `datetime.timedelta`."""
    if isinstance(elapsed, datetime.timedelta):
        elapsed = elapsed.total_seconds()
    dt = float(elapsed)
    if not math.isfinite(dt) or dt < 0.0:
        raise ValueError(f"elapsed time must be finite and >= 0, got {elapsed!r}")
    return dt


class GravityHandler(object):
    """
    Vertical kinematics of the player.

    `velocity` is signed with positive pointing down, so the value returned by
    `step()` is the drop to subtract from the Y coordinate. A jump stores a
    negative (upward) velocity.
    """
    def __init__(self, gravity=GRAVITY, jump_speed=JUMP_SPEED,
                 terminal_velocity=TERMINAL_VELOCITY, allow_air_jump=ALLOW_AIR_JUMP,
                 rise_through_support=RISE_THROUGH_SUPPORT):
        self.gravity = gravity
        self.jump_speed = jump_speed
        self.terminal_velocity = terminal_velocity
        self.allow_air_jump = allow_air_jump
        self.rise_through_support = rise_through_support
        self.velocity = 0.0
        self.grounded = True

    @property
    def is_rising(self):
        return self.velocity < 0.0

    def reset(self):
        self.velocity = 0.0
        self.grounded = True

    def jump(self):
        """Apply the upward impulse. Returns False if it was refused
        because the player is airborne and air jumps are disabled."""
        if not self.allow_air_jump and not self.grounded:
            logutil.log("MOTION", "air jump ignored", level="DEBUG")
            return False
        self.velocity = -self.jump_speed
        logutil.log("MOTION", f"jump v={self.velocity:.3f}", level="DEBUG")
        return True

    def step(self, is_falling, elapsed):
        """
        Advance the vertical state by `elapsed` and return the downward
        displacement for this step.

        Semi-implicit Euler: the velocity is updated first and the new
        velocity is used for the displacement. Support under the feet lands
        the player instantly: velocity resets and the drop is zero. With
        `rise_through_support` a pending jump keeps rising instead.
        """
        dt = as_seconds(elapsed)
        if not is_falling and not (self.rise_through_support and self.is_rising):
            if not self.grounded:
                logutil.log("MOTION", f"landed v={self.velocity:.3f}", level="DEBUG")
            self.velocity = 0.0
            self.grounded = True
            return 0.0

        self.grounded = False
        v = self.velocity + self.gravity * dt
        self.velocity = max(-self.terminal_velocity, min(self.terminal_velocity, v))
        return self.velocity * dt
