import config
import logutil
from camera import MotionState

MOTION_ACTIONS = {
    "forward": MotionState.FORWARD,
    "backward": MotionState.BACKWARD,
    "left": MotionState.LEFT,
    "right": MotionState.RIGHT,
}
ACTIONS = tuple(MOTION_ACTIONS) + ("jump", "up", "down")


def default_keymap(key):
    """ Build the default bindings from a `pyglet.window.key` module (or any
    object exposing the same symbol attributes).

    """
    return {
        key.W: "forward",
        key.S: "backward",
        key.A: "left",
        key.D: "right",
        key.SPACE: "jump",
        key.E: "up",
        key.Q: "down",
    }


class Controls(object):
    """
    Translates window input events into camera calls.

    With `toggle` set, a motion key flips its flag on press and release is
    ignored, so tapping a direction twice stops the player. Otherwise the
    flag is held between press and release.
    """
    def __init__(self, camera, keymap, toggle=None, sensitivity=None):
        unknown = set(keymap.values()) - set(ACTIONS)
        if unknown:
            raise ValueError(f"unknown actions in keymap: {sorted(unknown)}")
        self.camera = camera
        self.keymap = dict(keymap)
        self.toggle = config.TOGGLE_MOTION_KEYS if toggle is None else toggle
        self.sensitivity = config.MOUSE_SENSITIVITY if sensitivity is None else sensitivity

    def on_key_press(self, symbol, modifiers=0):
        """ Called when the player presses a key.

        Returns True if `symbol` is bound to an action.
        """
        action = self.keymap.get(symbol)
        if action is None:
            return False
        if action in MOTION_ACTIONS:
            state = MOTION_ACTIONS[action]
            if self.toggle:
                self.camera.toggle_state(state)
            else:
                self.camera.set_state(state, True)
            logutil.log("INPUT", f"{action} -> {self.camera.motion_flags()[state]}", level="DEBUG")
        elif action == "jump":
            self.camera.jump()
        elif action == "up":
            self.camera.up()
        elif action == "down":
            self.camera.down()
        return True

    def on_key_release(self, symbol, modifiers=0):
        action = self.keymap.get(symbol)
        if action is None:
            return False
        if action in MOTION_ACTIONS and not self.toggle:
            self.camera.set_state(MOTION_ACTIONS[action], False)
        return True

    def on_mouse_motion(self, dx, dy):
        self.camera.look(dx, dy, self.sensitivity)
