import math
import time

# pyglet imports
import pyglet
from pyglet.window import key
from pyglet.math import Mat4

# local module imports
import config
import logutil
import simulation
import util
from camera import Camera
from gravity import GravityHandler
from controls import Controls, default_keymap
from world import World
from config import TICKS_PER_SEC, PHYSICS_SUBSTEPS, LOADED_SECTORS, GAME_RISE_THROUGH_SUPPORT


class Window(pyglet.window.Window):

    def __init__(self, *args, **kwargs):
        super(Window, self).__init__(*args, **kwargs)

        # Whether or not the window exclusively captures the mouse.
        self.exclusive = False

        self.world = World()
        self.world.generate_flat(LOADED_SECTORS)
        self.camera = Camera(self.world, gravity_handler=GravityHandler(
            rise_through_support=GAME_RISE_THROUGH_SUPPORT))
        self.controls = Controls(self.camera, default_keymap(key))
        self.frame = 0
        self.last_update_ms = 0.0
        self.fps = 0.0

        self.label = pyglet.text.Label('', font_name='Arial', font_size=14,
            x=10, y=self.height - 10, anchor_x='left', anchor_y='top',
            color=(255, 255, 255, 255))

        # This call schedules the `update()` method to be called
        # TICKS_PER_SEC. This is the main game event loop.
        pyglet.clock.schedule_interval(self.update, 1.0 / TICKS_PER_SEC)

    def set_exclusive_mouse(self, exclusive):
        """ If `exclusive` is True, the game will capture the mouse, if False
        the game will ignore the mouse.

        """
        super(Window, self).set_exclusive_mouse(exclusive)
        self.exclusive = exclusive

    def update(self, dt):
        """ This method is scheduled to be called repeatedly by the pyglet
        clock.

        Parameters
        ----------
        dt : float
            The change in time since the last call.

        """
        self.frame += 1
        if dt > 0:
            self.fps = 0.9 * self.fps + 0.1 / dt
        logutil.set_frame(self.frame)
        update_start = time.perf_counter()
        simulation.tick(self.world, self.camera, dt)
        self.last_update_ms = (time.perf_counter() - update_start) * 1000.0
        logutil.log("MAINLOOP", f"update substeps={PHYSICS_SUBSTEPS} physics_ms={self.last_update_ms:.2f}")

    def on_mouse_press(self, x, y, button, modifiers):
        if not self.exclusive:
            self.set_exclusive_mouse(True)

    def on_mouse_motion(self, x, y, dx, dy):
        """ Called when the player moves the mouse.

        Parameters
        ----------
        x, y : int
            The coordinates of the mouse click. Always center of the screen if
            the mouse is captured.
        dx, dy : float
            The movement of the mouse.

        """
        if self.exclusive:
            self.controls.on_mouse_motion(dx, dy)

    def on_key_press(self, symbol, modifiers):
        """ Called when the player presses a key. See pyglet docs for key
        mappings.

        """
        if symbol == key.ESCAPE:
            self.set_exclusive_mouse(False)
            return
        self.controls.on_key_press(symbol, modifiers)

    def on_key_release(self, symbol, modifiers):
        self.controls.on_key_release(symbol, modifiers)

    def on_resize(self, width, height):
        """ Called when the window is resized to a new `width` and `height`.

        """
        self.label.y = height - 10
        return super(Window, self).on_resize(width, height)

    def set_3d(self):
        width, height = self.get_size()
        aspect = width / float(height)
        self.projection = Mat4.perspective_projection(aspect, 0.1, 512.0, 65)
        self.view = util.to_mat4(self.camera.view_matrix())

    def set_2d(self):
        width, height = self.get_size()
        self.projection = Mat4.orthogonal_projection(0, width, 0, height, -255, 255)
        self.view = Mat4()

    def on_draw(self):
        """ Called by pyglet to draw the canvas.

        """
        self.clear()
        self.set_3d()
        # world geometry is drawn by the renderer against these matrices
        self.set_2d()
        self.draw_label()

    def draw_label(self):
        x, y, z = self.camera.position.as_tuple()
        yaw, pitch = self.camera.rotation
        grounded = 'ground' if self.camera.gravity_handler.grounded else 'air'
        self.label.text = '%02d (%.2f, %.2f, %.2f) yaw %.1f pitch %.1f %s' % (
            self.fps, x, y, z,
            math.degrees(yaw), math.degrees(pitch), grounded)
        self.label.draw()


def setup():
    """ Basic OpenGL configuration.

    """
    pyglet.gl.glClearColor(0.5, 0.69, 1.0, 1)


def main():
    logutil.log("MAIN", f"starting spawn={config.SPAWN_POSITION} toggle_keys={config.TOGGLE_MOTION_KEYS}")
    window = Window(width=800, height=600, caption='Voxel Walker', resizable=True)
    # Hide the mouse cursor and prevent the mouse from leaving the window.
    window.set_exclusive_mouse(True)
    setup()
    pyglet.app.run()


if __name__ == '__main__':
    main()
