import numpy


class Block(object):
    name = None
    # Solid blocks obstruct movement and support the player.
    solid = True

class DirtWithGrass(Block):
    name = 'Grass'

class Dirt(Block):
    name = 'Dirt'

class Sand(Block):
    name = 'Sand'

class Stone(Block):
    name = 'Stone'

class Brick(Block):
    name = 'Brick'

class Wood(Block):
    name = 'Wood'

class Plank(Block):
    name = 'Plank'

class Leaves(Block):
    name = 'Leaves'
    solid = False

class Water(Block):
    name = 'Water'
    solid = False

class Flower(Block):
    name = 'Flower'
    solid = False

BLOCKS = [
    DirtWithGrass,
    Dirt,
    Sand,
    Stone,
    Brick,
    Wood,
    Plank,
    Leaves,
    Water,
    Flower,
]

# Id 0 is air.
BLOCK_ID = {}
i = 1
for x in BLOCKS:
    BLOCK_ID[x.name] = i
    i+=1
BLOCK_SOLID = numpy.array([False]+[x.solid for x in BLOCKS], dtype = numpy.uint8)
