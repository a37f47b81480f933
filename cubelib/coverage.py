from cubelib.packing import CUBE_NUM_BITS

CoverageIndex = tuple[tuple[tuple[int, ...], ...], ...]


def build_coverage_index(piece_placements: list[set[int]]) -> CoverageIndex:
    """
    Maps every cell of the cube to the placements of each piece that cover it.

    index[cell][piece] holds, in ascending order, the placements of that piece
    with the cell's bit set. The search only ever extends the first empty
    cell, so this is all it needs to look at.

    Parameters:
    piece_placements (list[set[int]]): placements of each piece, indexed by piece id

    Returns:
    tuple: the read-only index, CUBE_NUM_BITS entries of one tuple per piece

    """
    ordered = [sorted(placements) for placements in piece_placements]
    index = []
    for cell in range(CUBE_NUM_BITS):
        bit = 1 << cell
        index.append(tuple(
            tuple(placement for placement in placements if placement & bit)
            for placements in ordered
        ))
    return tuple(index)


def placements_covering(index: CoverageIndex, cell: int, piece: int) -> tuple[int, ...]:
    return index[cell][piece]


def num_indexed_pieces(index: CoverageIndex) -> int:
    return len(index[0])
