import enum
import math

import numpy as np

import logutil
from config import (
    SPEED,
    LOOKAHEAD_RATIO,
    SPAWN_POSITION,
    SPAWN_ROTATION,
    COUPLE_FALL_TO_COLLISION,
)
from gravity import GravityHandler, as_seconds
from vector import Vector3

HALF_PI = math.pi * 0.5
WORLD_UP = Vector3(0.0, 1.0, 0.0)


class MotionState(enum.Enum):
    FORWARD = "forward"
    BACKWARD = "backward"
    LEFT = "left"
    RIGHT = "right"
    NONE = "none"


def _check_finite(name, *values):
    for v in values:
        if not math.isfinite(v):
            raise ValueError(f"{name} must be finite, got {values!r}")


class Camera(object):
    """
    First person camera: owns the player position, the yaw/pitch orientation,
    the four motion flags and the vertical kinematics.

    `world` is anything implementing `world.WorldQuery`; the camera only reads
    from it. Yaw and pitch are in radians, pitch stays strictly inside
    (-pi/2, pi/2).
    """
    def __init__(self, world, position=SPAWN_POSITION, rotation=SPAWN_ROTATION,
                 gravity_handler=None, speed=SPEED, lookahead_ratio=LOOKAHEAD_RATIO,
                 couple_fall_to_collision=COUPLE_FALL_TO_COLLISION):
        position = Vector3.from_iterable(position)
        if not position.is_finite():
            raise ValueError(f"position must be finite, got {position!r}")
        yaw, pitch = (float(r) for r in rotation)
        _check_finite("rotation", yaw, pitch)
        if not -HALF_PI < pitch < HALF_PI:
            raise ValueError(f"pitch must lie in (-pi/2, pi/2), got {pitch!r}")

        self.position = position
        self.rotation = [yaw, pitch]
        self.world = world
        self.gravity_handler = gravity_handler if gravity_handler is not None else GravityHandler()
        self.speed = speed
        self.lookahead_ratio = lookahead_ratio
        self.couple_fall_to_collision = couple_fall_to_collision

        self.forward_pressed = False
        self.backward_pressed = False
        self.left_pressed = False
        self.right_pressed = False

    @property
    def yaw(self):
        return self.rotation[0]

    @property
    def pitch(self):
        return self.rotation[1]

    def motion_flags(self):
        return {
            MotionState.FORWARD: self.forward_pressed,
            MotionState.BACKWARD: self.backward_pressed,
            MotionState.LEFT: self.left_pressed,
            MotionState.RIGHT: self.right_pressed,
        }

    @property
    def is_moving(self):
        return any(self.motion_flags().values())

    def step(self, elapsed):
        """ Advance the player by `elapsed` (seconds or timedelta).

        The candidate move is tested at a look-ahead point `lookahead_ratio`
        times further than the true step. Vertical motion comes from the
        gravity handler and is never gated by the horizontal test; whether a
        rejected frame keeps it depends on `couple_fall_to_collision`.

        Returns True when the candidate position was committed.
        """
        dt = as_seconds(elapsed)
        f = self.ground_direction_forward()
        r = self.ground_direction_right()
        next_pos = self.position.copy()
        next_pos_amplified = self.position.copy()
        amplitude = self.speed * dt
        ratio = self.lookahead_ratio
        # diagonal moves are not speed normalized
        if self.forward_pressed:
            next_pos += f * amplitude
            next_pos_amplified += f * (amplitude * ratio)
        if self.backward_pressed:
            next_pos -= f * amplitude
            next_pos_amplified -= f * (amplitude * ratio)
        if self.right_pressed:
            next_pos += r * amplitude
            next_pos_amplified += r * (amplitude * ratio)
        if self.left_pressed:
            next_pos -= r * amplitude
            next_pos_amplified -= r * (amplitude * ratio)

        # Collision detection (xz-plane)
        is_free = self.world.is_position_free(next_pos_amplified)

        # Free-fall handling
        is_falling = self.world.is_position_free_falling(next_pos_amplified)
        drop = self.gravity_handler.step(is_falling, dt)
        next_pos[1] = next_pos[1] - drop

        if is_free:
            self.position = next_pos
            return True

        if not self.couple_fall_to_collision:
            self.position[1] = next_pos[1]
        if logutil.enabled("MOTION", "DEBUG"):
            logutil.log(
                "MOTION",
                f"rejected pos={self.position.as_tuple()} tested={next_pos_amplified.as_tuple()} drop={drop:.4f}",
                level="DEBUG",
            )
        return False

    def toggle_state(self, state):
        """Flip the flag for `state`; pressing the same direction twice cancels it."""
        if state is MotionState.FORWARD:
            self.forward_pressed = not self.forward_pressed
        elif state is MotionState.BACKWARD:
            self.backward_pressed = not self.backward_pressed
        elif state is MotionState.LEFT:
            self.left_pressed = not self.left_pressed
        elif state is MotionState.RIGHT:
            self.right_pressed = not self.right_pressed

    def set_state(self, state, active):
        """Explicit held-key update, for press/release input."""
        active = bool(active)
        if state is MotionState.FORWARD:
            self.forward_pressed = active
        elif state is MotionState.BACKWARD:
            self.backward_pressed = active
        elif state is MotionState.LEFT:
            self.left_pressed = active
        elif state is MotionState.RIGHT:
            self.right_pressed = active

    def jump(self):
        return self.gravity_handler.jump()

    def up(self):
        self.position[1] = self.position[1] + 1.0

    def down(self):
        self.position[1] = self.position[1] - 1.0

    def direction(self):
        """ Returns the unit line of sight vector from yaw and pitch. """
        yaw, pitch = self.rotation
        return Vector3(math.cos(yaw) * math.cos(pitch), math.sin(pitch), math.sin(yaw) * math.cos(pitch))

    def ground_direction_forward(self):
        yaw = self.rotation[0]
        return Vector3(math.cos(yaw), 0.0, math.sin(yaw))

    def ground_direction_right(self):
        yaw = self.rotation[0]
        return Vector3(math.sin(yaw), 0.0, -math.cos(yaw))

    def look(self, horizontal, vertical, sensitivity):
        """ Apply a mouse delta.

        Yaw is unbounded. A pitch change that would leave (-pi/2, pi/2) is
        dropped entirely rather than clipped to the limit.
        """
        _check_finite("look delta", horizontal, vertical, sensitivity)
        self.rotation[0] -= horizontal * sensitivity

        pitch = self.rotation[1] + vertical * sensitivity
        # don't let the player turn upside down
        if -HALF_PI < pitch < HALF_PI:
            self.rotation[1] = pitch

    def view_matrix(self):
        """ Returns the view matrix for the current position and orientation.

        Rows 0-2 hold the x, y and z components of the right, up and forward
        basis vectors; row 3 is the translation. Multiply row vectors on the
        left.
        """
        forward = self.direction()
        s = WORLD_UP.cross(forward).normalize()
        u = forward.cross(s)
        p = self.position
        m = np.zeros((4, 4), dtype=float)
        m[:3, 0] = s.as_array()
        m[:3, 1] = u.as_array()
        m[:3, 2] = forward.as_array()
        m[3] = [-p.dot(s), -p.dot(u), -p.dot(forward), 1.0]
        return m

    view_transform = view_matrix
