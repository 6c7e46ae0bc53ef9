import math

import numpy as np
from pyglet.math import Mat4

from config import SECTOR_SIZE


def normalize(position):
    """ Accepts `position` of arbitrary precision and returns the block
    containing that position.

    Block (i, j, k) spans [i, i+1) x [j, j+1) x [k, k+1), so each component
    is floored rather than rounded.

    Parameters
    ----------
    position : tuple of len 3

    Returns
    -------
    block_position : tuple of ints of len 3

    """
    x, y, z = position
    x, y, z = (int(math.floor(x)), int(math.floor(y)), int(math.floor(z)))
    return (x, y, z)


def sectorize(position):
    """ Returns a tuple representing the sector for the given `position`.

    Parameters
    ----------
    position : tuple of len 3

    Returns
    -------
    sector : tuple of len 3

    """
    x, y, z = normalize(position)
    x, y, z = x // SECTOR_SIZE, y // SECTOR_SIZE, z // SECTOR_SIZE
    return (x*SECTOR_SIZE, 0, z*SECTOR_SIZE)


def to_mat4(matrix):
    """Convert a 4x4 array whose rows are the columns of a GL matrix
    (translation in the fourth row) into a pyglet `Mat4`.

    Both layouts are column-major, so the rows are flattened in order.
    """
    values = np.asarray(matrix, dtype=float).reshape(16)
    return Mat4(*(float(v) for v in values))
