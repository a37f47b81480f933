import numpy as np
from typing import Iterable, Union

CUBE_SIZE = 4
CUBE_NUM_BITS = CUBE_SIZE * CUBE_SIZE * CUBE_SIZE
FULL_CUBE = (1 << CUBE_NUM_BITS) - 1
NUM_PIECES = 13


def bit_index(x, y, z):
    """Bit position of cell (x, y, z). Works on ints and on numpy index arrays alike."""
    return x * CUBE_SIZE * CUBE_SIZE + y * CUBE_SIZE + z


def pack_bit(bit: bool, x: int, y: int, z: int) -> int:
    return int(bool(bit)) << bit_index(x, y, z)


def unpack_bit(mask: int, x: int, y: int, z: int) -> bool:
    return (mask >> bit_index(x, y, z)) & 1 == 1


def pack_cells(cells: Iterable[tuple[int, int, int]]) -> int:
    mask = 0
    for x, y, z in cells:
        mask |= pack_bit(True, x, y, z)
    return mask


def pack(volume: np.ndarray) -> int:
    """
    Converts a 4x4x4 ndarray into the 64 bit integer that identifies it.

    The C-order flattening of an array indexed [x, y, z] lists the cells in
    bit order, so packing is a single packbits call.

    Parameters:
    volume (np.array): 3D Numpy array indexed [x, y, z] where non-zero values indicate occupied cells.
        Any array with 64 elements is accepted, e.g. an already flattened volume.

    Returns:
    mask (int): the packed volume, bit x*16 + y*4 + z set for every occupied cell

    """
    flat = np.asarray(volume).reshape(-1) != 0
    return int.from_bytes(np.packbits(flat, bitorder='little').tobytes(), 'little')


def unpack(mask: int) -> np.ndarray:
    """
    Converts a packed 64 bit mask back into a 4x4x4 ndarray

    Parameters:
    mask (int): a packed volume

    Returns:
    volume (np.array): 3D Numpy uint8 array indexed [x, y, z] where 1 values indicate
        occupied cells

    """
    data = np.frombuffer(int(mask).to_bytes(CUBE_NUM_BITS // 8, 'little'), dtype=np.uint8)
    return np.unpackbits(data, bitorder='little').reshape((CUBE_SIZE, CUBE_SIZE, CUBE_SIZE))


def count_cells(mask: int) -> int:
    return bin(mask).count("1")


def first_empty_cell(mask: int) -> int:
    """Index of the lowest clear bit, i.e. the number of trailing set bits."""
    return (~mask & (mask + 1)).bit_length() - 1


class PackedVolume():
    """Cell access into a packed 64 bit volume."""

    def __init__(self, mask: int):
        self.mask = mask

    def __getitem__(self, coords: tuple[int, int, int]) -> bool:
        x, y, z = coords
        return unpack_bit(self.mask, x, y, z)


class GridVolume():
    """
    Cell access into a literal 3D array.

    order names the array's axes: "zyx" for a grid stored as grid[z][y][x],
    "xyz" for the [x, y, z] arrays returned by unpack.
    """

    def __init__(self, grid, order: str = "zyx"):
        if sorted(order) != ['x', 'y', 'z']:
            raise ValueError(f"axis order must be a permutation of 'xyz', got {order!r}")
        self.grid = np.asarray(grid)
        self.order = order

    def __getitem__(self, coords: tuple[int, int, int]) -> bool:
        x, y, z = coords
        position = {'x': x, 'y': y, 'z': z}
        return bool(self.grid[tuple(position[axis] for axis in self.order)])


CellReader = Union[PackedVolume, GridVolume]


def cell_reader(volume) -> CellReader:
    """
    Wraps a volume so it reads as volume[x, y, z].

    Accepts a packed mask, a PackedVolume / GridVolume, or an unpacked ndarray
    indexed [x, y, z] as returned by unpack. Wrap arrays stored in another
    axis order in a GridVolume with that order.
    """
    if isinstance(volume, (PackedVolume, GridVolume)):
        return volume
    if isinstance(volume, (int, np.integer)):
        return PackedVolume(int(volume))
    return GridVolume(volume, order="xyz")
