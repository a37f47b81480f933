from cubelib.packing import CUBE_SIZE, count_cells
from cubelib.rotation import all_rotations, translate


def generate_placements(piece: int) -> set[int]:
    """
    Generates all placements of a piece inside the cube.

    Every distinct rotation of the piece is shifted by every offset in [-4, 4)
    along each axis. A shift that changes the number of occupied cells pushed
    part of the piece out of the cube and is discarded.

    Parameters:
    piece (int): packed volume of the piece as read from the pieces file

    Returns:
    set(int): the distinct packed placements of the piece, in no particular order

    """
    num_cells = count_cells(piece)

    orientations = set(all_rotations(piece))
    placements = set(orientations)
    for orientation in orientations:
        for dz in range(-CUBE_SIZE, CUBE_SIZE):
            for dy in range(-CUBE_SIZE, CUBE_SIZE):
                for dx in range(-CUBE_SIZE, CUBE_SIZE):
                    placement = translate(orientation, dx, dy, dz)
                    if count_cells(placement) == num_cells:
                        placements.add(placement)
    return placements
