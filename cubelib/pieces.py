from typing import Iterable
from cubelib.packing import CUBE_SIZE, NUM_PIECES, pack_bit

# pieces are given as two z layers of a 4x4 grid
PIECE_LAYERS = 2
BLOCK_LINES = PIECE_LAYERS * CUBE_SIZE


def parse_pieces(lines: Iterable[str], num_pieces: int = NUM_PIECES) -> list[int]:
    """
    Parses piece blocks into packed volumes.

    Each block is a header line, ignored apart from separating blocks, followed
    by 8 rows of 4 characters: rows y=0..3 of layer z=0, then of layer z=1.
    The character at column x is '1' for an occupied cell.

    Example block:
    # 0
    0100
    1110
    0100
    0000
    0000
    0000
    0000
    0000

    Parameters:
    lines (iterable(str)): the lines of a pieces file
    num_pieces (int): the number of blocks the file must contain

    Returns:
    list(int): packed volume of each piece, indexed by piece id

    """
    lines = [line.rstrip("\r\n") for line in lines]
    while lines and not lines[-1].strip():
        lines.pop()

    pieces = []
    position = 0
    while position < len(lines):
        header = position
        rows = lines[position + 1: position + 1 + BLOCK_LINES]
        if len(rows) != BLOCK_LINES:
            raise ValueError(f"piece block starting at line {header + 1} has {len(rows)} rows, expected {BLOCK_LINES}")

        piece = 0
        for row_number, row in enumerate(rows):
            row = row.rstrip()
            if len(row) > CUBE_SIZE:
                raise ValueError(f"line {header + 2 + row_number} has more than {CUBE_SIZE} columns: {row!r}")
            z, y = divmod(row_number, CUBE_SIZE)
            for x, c in enumerate(row):
                if c == '1':
                    piece |= pack_bit(True, x, y, z)
        pieces.append(piece)
        position += 1 + BLOCK_LINES

    if num_pieces is not None and len(pieces) != num_pieces:
        raise ValueError(f"expected {num_pieces} pieces, got {len(pieces)}")
    return pieces


def read_pieces(path: str, num_pieces: int = NUM_PIECES) -> list[int]:
    with open(path, 'r') as fp:
        return parse_pieces(fp, num_pieces)
