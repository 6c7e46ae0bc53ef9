import logutil
from config import PHYSICS_SUBSTEPS, MAX_FRAME_DT, LOADED_SECTORS


def tick(world, camera, dt, substeps=PHYSICS_SUBSTEPS, max_dt=MAX_FRAME_DT,
         load_radius=LOADED_SECTORS):
    """ Advance the camera by one window tick.

    Flat sectors missing within `load_radius` of the player are generated
    first, so walking past the edge of the world keeps the physics running.
    `dt` is clamped to `max_dt` and split into `substeps` camera steps.

    Returns the number of sectors generated.
    """
    generated = world.ensure_flat(camera.position.as_tuple(), load_radius)
    if generated:
        logutil.log("WORLD", f"generated {generated} sectors around {camera.position.to_cube_coordinates()}")
    dt = min(dt, max_dt)
    for _ in range(substeps):
        camera.step(dt / substeps)
    return generated
