import math
from typing import Protocol

import numpy

import logutil
from blocks import BLOCK_ID, BLOCK_SOLID
from config import (
    SECTOR_SIZE,
    SECTOR_HEIGHT,
    CHUNK_FLOOR,
    PLAYER_HEIGHT,
    FOOT_TOLERANCE,
)
from util import normalize, sectorize

EPS = 1e-6


class WorldQuery(Protocol):
    """Read-only collision queries the camera needs from the world."""

    def is_position_free(self, position) -> bool: ...

    def is_position_free_falling(self, position) -> bool: ...


class Sector(object):
    """A SECTOR_SIZE x SECTOR_HEIGHT x SECTOR_SIZE column of blocks."""
    def __init__(self, position, blocks=None):
        self.position = position[0],0,position[2]
        if blocks is None:
            blocks = numpy.zeros((SECTOR_SIZE, SECTOR_HEIGHT, SECTOR_SIZE), dtype='u2')
        elif blocks.shape != (SECTOR_SIZE, SECTOR_HEIGHT, SECTOR_SIZE):
            raise ValueError(f"sector blocks must have shape {(SECTOR_SIZE, SECTOR_HEIGHT, SECTOR_SIZE)}, got {blocks.shape}")
        self.blocks = blocks

    def _local(self, position):
        x, y, z = position
        lx = x - self.position[0]
        lz = z - self.position[2]
        if not (0 <= lx < SECTOR_SIZE and 0 <= y < SECTOR_HEIGHT and 0 <= lz < SECTOR_SIZE):
            raise IndexError(f"{position} is outside sector {self.position}")
        return lx, y, lz

    def __getitem__(self, position):
        return int(self.blocks[self._local(position)])

    def __setitem__(self, position, block_id):
        self.blocks[self._local(position)] = block_id


class World(object):
    """
    Chunked voxel store. Sectors are keyed by `sectorize()` of any point
    inside them.

    The collision predicates treat the player as a single column one block
    wide whose eye is at the queried point and whose feet are PLAYER_HEIGHT
    below it.
    """
    def __init__(self, player_height=PLAYER_HEIGHT, foot_tolerance=FOOT_TOLERANCE):
        self.sectors = {}
        self.player_height = player_height
        self.foot_tolerance = foot_tolerance

    def add_sector(self, position, blocks=None):
        sector = Sector(sectorize(position), blocks)
        self.sectors[sector.position] = sector
        return sector

    def generate_flat(self, radius, floor=CHUNK_FLOOR, block='Grass'):
        """Fill every sector within `radius` sectors of the origin with
        `block` below `floor`, so the top surface sits at y == floor."""
        count = self.ensure_flat((0, 0, 0), radius, floor=floor, block=block)
        logutil.log("WORLD", f"generated {count} flat sectors floor={floor} block={block}")

    def ensure_flat(self, position, radius, floor=CHUNK_FLOOR, block='Grass'):
        """Generate any missing flat sector within `radius` sectors of
        `position`. Existing sectors are left untouched. Returns the number
        of sectors generated."""
        block_id = BLOCK_ID[block]
        cx, _, cz = sectorize(position)
        count = 0
        for dx in range(-radius, radius + 1):
            for dz in range(-radius, radius + 1):
                key = (cx + dx * SECTOR_SIZE, 0, cz + dz * SECTOR_SIZE)
                if key in self.sectors:
                    continue
                sector = self.add_sector(key)
                sector.blocks[:, :floor, :] = block_id
                count += 1
        return count

    def __getitem__(self, position):
        """
        retrieves the block at the (x,y,z) cube coordinate tuple `position`,
        or None when it is not loaded or outside the world's height
        """
        sector = self.sectors.get(sectorize(position))
        if sector is None:
            return None
        try:
            return sector[position]
        except IndexError:
            return None

    def is_sector_ready(self, position):
        return sectorize(position) in self.sectors

    def _edit_position(self, position):
        position = normalize(position)
        if not 0 <= position[1] < SECTOR_HEIGHT:
            raise ValueError(f"block height {position[1]} outside [0, {SECTOR_HEIGHT})")
        return position

    def add_block(self, position, block_id):
        if not 0 < block_id < len(BLOCK_SOLID):
            raise ValueError(f"unknown block id {block_id}")
        position = self._edit_position(position)
        sector = self.sectors.get(sectorize(position))
        if sector is None:
            sector = self.add_sector(position)
        sector[position] = block_id

    def remove_block(self, position):
        """Clear the block at `position`; a no-op when its sector is not loaded."""
        position = self._edit_position(position)
        sector = self.sectors.get(sectorize(position))
        if sector is None:
            return
        sector[position] = 0

    def is_solid(self, position):
        b = self[position]
        return bool(b) and bool(BLOCK_SOLID[b])

    def _body_cells(self, position):
        x, y, z = position[0], position[1], position[2]
        bx, bz = int(math.floor(x)), int(math.floor(z))
        feet = y - self.player_height
        lo = int(math.floor(feet + self.foot_tolerance))
        hi = int(math.floor(y - EPS))
        return bx, bz, range(lo, hi + 1)

    def is_position_free(self, position):
        """True iff no solid block overlaps the player's body when the eye
        is at `position`."""
        bx, bz, ys = self._body_cells(position)
        for by in ys:
            if self.is_solid((bx, by, bz)):
                return False
        return True

    def is_position_free_falling(self, position):
        """True iff the block directly under the player's feet is not solid."""
        x, y, z = position[0], position[1], position[2]
        feet = y - self.player_height
        below = (int(math.floor(x)), int(math.floor(feet - EPS)), int(math.floor(z)))
        return not self.is_solid(below)
