import numpy as np
from typing import IO, Iterable
from cubelib.packing import CUBE_SIZE, cell_reader

EMPTY_LABEL = '.'
COLUMN_SEPARATOR = "  "


def piece_label(piece: int) -> str:
    return chr(ord('A') + piece)


def format_volume(volume) -> str:
    """
    Draws a volume as text: one line per y row, the four z layers side by side,
    '#' for an occupied cell and '.' for an empty one.

    Parameters:
    volume: a packed mask, an [x, y, z] array from unpack, or a PackedVolume / GridVolume

    """
    reader = cell_reader(volume)
    lines = []
    for y in range(CUBE_SIZE):
        layers = []
        for z in range(CUBE_SIZE):
            layers.append("".join('#' if reader[x, y, z] else '.' for x in range(CUBE_SIZE)))
        lines.append("    ".join(layers))
    return "\n".join(lines)


def solution_labels(solution: Iterable[int]) -> np.ndarray:
    """Array of piece labels indexed [z][y][x]; cells no piece covers hold EMPTY_LABEL."""
    labels = np.full((CUBE_SIZE, CUBE_SIZE, CUBE_SIZE), EMPTY_LABEL, dtype='<U1')
    for piece, placement in enumerate(solution):
        reader = cell_reader(placement)
        for z in range(CUBE_SIZE):
            for y in range(CUBE_SIZE):
                for x in range(CUBE_SIZE):
                    if reader[x, y, z]:
                        labels[z, y, x] = piece_label(piece)
    return labels


def format_solution(solution: Iterable[int]) -> str:
    labels = solution_labels(solution)
    slices = []
    for z in range(CUBE_SIZE):
        slices.append("\n".join(COLUMN_SEPARATOR.join(labels[z, y]) for y in range(CUBE_SIZE)))
    return "\n\n".join(slices)


def write_solutions(fp: IO[str], solutions: Iterable[Iterable[int]]) -> None:
    for i, solution in enumerate(solutions):
        fp.write(f"Solution #{i}\n")
        fp.write(format_solution(solution))
        fp.write("\n\n")


def save_solutions(path: str, solutions: Iterable[Iterable[int]]) -> None:
    with open(path, 'w') as fp:
        write_solutions(fp, solutions)
