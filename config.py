import math

TICKS_PER_SEC = 60
# Physics runs in sub-steps so a single tick never drops more than a fraction of a block.
PHYSICS_SUBSTEPS = 20
MAX_FRAME_DT = 0.2

# Size of sectors used to ease block loading.
SECTOR_SIZE = 16 #width and depth (x and z)
SECTOR_HEIGHT = 64 #height of world (y)
LOADED_SECTORS = 2 #sectors around the origin generated at startup
# Top surface of the generated floor.
CHUNK_FLOOR = 10

# Travel speed [m/s] or [cube/s]
SPEED = 2.0
# Collision is tested this many steps ahead of the true next position.
LOOKAHEAD_RATIO = 10.0

PLAYER_HEIGHT = 2.0
# Feet sunk into a floor cell by less than this do not count as an obstruction.
FOOT_TOLERANCE = 0.5

GRAVITY = 20.0
MAX_JUMP_HEIGHT = 1.0 # About the height of a block.
# To derive the formula for calculating jump speed, first solve
#    v_t = v_0 + a * t
# for the time at which you achieve maximum height, where a is the acceleration
# due to gravity and v_t = 0. This gives:
#    t = - v_0 / a
# Use t and the desired MAX_JUMP_HEIGHT to solve for v_0 (jump speed) in
#    s = s_0 + v_0 * t + (a * t^2) / 2
JUMP_SPEED = math.sqrt(2 * GRAVITY * MAX_JUMP_HEIGHT)
TERMINAL_VELOCITY = 50.0

# Jumping while airborne re-applies the impulse.
ALLOW_AIR_JUMP = True

# Support under the feet cancels a pending jump unless this is set. A player
# standing on the floor always reports support, so the game window enables it.
RISE_THROUGH_SUPPORT = False
GAME_RISE_THROUGH_SUPPORT = True

# When the look-ahead is obstructed the whole frame is rejected, vertical motion included.
COUPLE_FALL_TO_COLLISION = True

# Motion keys toggle on press; set False for press/release (hold to move).
TOGGLE_MOTION_KEYS = True

MOUSE_SENSITIVITY = 0.0025 # radians per pixel

SPAWN_POSITION = (4.0, CHUNK_FLOOR + PLAYER_HEIGHT, 3.0)
SPAWN_ROTATION = (math.pi, 0.0) # yaw, pitch

# Minimum level printed by logutil: DEBUG, INFO, WARN or ERROR.
LOG_LEVEL = "INFO"

# Enable ANSI colors in logs.
LOG_COLOR = True

# Log main-loop timings and frame boundaries.
LOG_MAIN_LOOP = False

# Log per-frame motion decisions (rejections, landings).
LOG_MOTION = True
