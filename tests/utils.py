from itertools import product
from cubelib.packing import CUBE_NUM_BITS, CUBE_SIZE, pack_cells


def slab(axis: int, start: int, thickness: int) -> int:
    """Packed block of every cell whose coordinate along axis lies in [start, start + thickness)."""
    return pack_cells(cell for cell in product(range(CUBE_SIZE), repeat=3)
                      if start <= cell[axis] < start + thickness)


def get_test_data() -> list[int]:
    return [
        pack_cells([(0, 0, 0)]),
        pack_cells([(0, 0, 0), (1, 0, 0)]),
        pack_cells([(0, 0, 0), (1, 0, 0), (0, 1, 0)]),
        # no rotation maps this one onto itself
        pack_cells([(0, 0, 0), (1, 0, 0), (2, 0, 0), (0, 1, 0), (0, 0, 1)]),
        pack_cells([(1, 1, 1), (2, 1, 1), (2, 2, 1), (2, 2, 2)]),
        pack_cells([(0, 1, 0), (1, 0, 0), (1, 1, 0), (2, 1, 0), (1, 2, 0), (1, 1, 1)]),
        slab(2, 0, 2),
    ]


def two_slab_pieces() -> list[int]:
    """Two 4x4x2 halves: 6 raw solutions, all rotations of one another."""
    return [slab(2, 0, 2), slab(2, 0, 2)]


def four_layer_pieces() -> list[int]:
    """Four 4x4x1 layers: 72 raw solutions in 12 rotation classes."""
    return [slab(2, 0, 1) for _ in range(4)]


def partition_masks() -> list[int]:
    """13 pieces with one fixed placement each: 12 runs of 5 consecutive cells and one of 4."""
    masks = []
    for start in range(0, CUBE_NUM_BITS, 5):
        end = min(start + 5, CUBE_NUM_BITS)
        masks.append(((1 << end) - 1) ^ ((1 << start) - 1))
    return masks


PLUS_BLOCK = """# 0
0100
1110
0100
0000
0000
0100
0000
0000
"""
