import numpy as np
from enum import Enum
from typing import Generator
from cubelib.packing import CUBE_SIZE, bit_index, pack, unpack


class Axis(Enum):
    X = 0
    Y = 1
    Z = 2


def _rotation_sources(axis: Axis) -> np.ndarray:
    """For every target cell in bit order, the bit index of the cell it is copied from."""
    x, y, z = np.indices((CUBE_SIZE, CUBE_SIZE, CUBE_SIZE))
    last = CUBE_SIZE - 1
    if axis == Axis.X:
        sources = bit_index(x, last - z, y)
    elif axis == Axis.Y:
        sources = bit_index(last - z, y, x)
    else:
        sources = bit_index(last - y, x, z)
    return sources.reshape(-1)


RotationSources = {axis: _rotation_sources(axis) for axis in Axis}


def rotate_90(mask: int, axis: Axis) -> int:
    """
    Rotates a packed volume by 90 degrees about the centre of the cube.

    The rotation is a permutation of the 64 cells, so no cell is ever lost and
    four rotations about the same axis give back the original volume.

    Parameters:
    mask (int): packed volume
    axis (Axis): the axis to rotate about

    Returns:
    int: the rotated packed volume

    """
    return pack(unpack(mask).reshape(-1)[RotationSources[axis]])


def _shift_slices(offset: int) -> tuple[slice, slice]:
    # (source, destination) along one axis, both empty once the shift leaves the cube
    if offset >= 0:
        return slice(0, max(CUBE_SIZE - offset, 0)), slice(min(offset, CUBE_SIZE), CUBE_SIZE)
    return slice(min(-offset, CUBE_SIZE), CUBE_SIZE), slice(0, max(CUBE_SIZE + offset, 0))


def translate(mask: int, dx: int, dy: int, dz: int) -> int:
    """
    Moves a packed volume by (dx, dy, dz) inside the cube.

    Cells pushed outside [0, 4) on any axis are dropped, so the result can hold
    fewer cells than the input. Compare count_cells before and after to know
    whether the whole shape stayed inside.

    """
    volume = unpack(mask)
    moved = np.zeros_like(volume)
    source, destination = zip(*(_shift_slices(offset) for offset in (dx, dy, dz)))
    moved[destination] = volume[source]
    return pack(moved)


def rotation_steps() -> Generator[Axis, None, None]:
    """Four X turns inside every Y turn inside every Z turn; visits all 24 orientations."""
    for _ in range(4):
        for _ in range(4):
            for _ in range(4):
                yield Axis.X
            yield Axis.Y
        yield Axis.Z


def all_rotations(mask: int) -> Generator[int, None, None]:
    """
    Calculates all rotations of a packed volume.

    Applies the rotation steps one after the other and yields every
    intermediate volume, so the same orientation is yielded several times.
    Collect into a set to get the distinct orientations (24 for a volume
    without rotational symmetry).

    Parameters:
    mask (int): packed volume

    Returns:
    generator(int): Yields rotations of this volume about all axes

    """
    for axis in rotation_steps():
        mask = rotate_90(mask, axis)
        yield mask
