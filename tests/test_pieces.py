import os
import tempfile
import unittest
from cubelib.packing import CUBE_SIZE, NUM_PIECES, pack_cells, unpack_bit
from cubelib.pieces import parse_pieces, read_pieces
from utils import PLUS_BLOCK


def block_text(piece_id: int, mask: int) -> str:
    lines = [f"# {piece_id}"]
    for z in range(2):
        for y in range(CUBE_SIZE):
            lines.append("".join('1' if unpack_bit(mask, x, y, z) else '0' for x in range(CUBE_SIZE)))
    return "\n".join(lines) + "\n"


class PieceReadingTests(unittest.TestCase):
    def test_parse_block(self):
        pieces = parse_pieces(PLUS_BLOCK.splitlines(), num_pieces=1)
        self.assertEqual(pieces, [pack_cells([(1, 0, 0), (0, 1, 0), (1, 1, 0), (2, 1, 0), (1, 2, 0), (1, 1, 1)])])

    def test_parse_many_blocks(self):
        masks = [pack_cells([(i % 4, i // 4 % 4, i // 16)]) for i in range(NUM_PIECES)]
        text = "".join(block_text(i, mask) for i, mask in enumerate(masks))
        self.assertEqual(parse_pieces(text.splitlines(keepends=True)), masks)

    def test_other_characters_are_empty(self):
        text = "header\n1x.#\n" + "....\n" * 7
        self.assertEqual(parse_pieces(text.splitlines(), num_pieces=1), [pack_cells([(0, 0, 0)])])

    def test_trailing_blank_lines_ignored(self):
        pieces = parse_pieces((PLUS_BLOCK + "\n\n").splitlines(), num_pieces=1)
        self.assertEqual(len(pieces), 1)

    def test_wrong_piece_count(self):
        with self.assertRaises(ValueError):
            parse_pieces(PLUS_BLOCK.splitlines())
        with self.assertRaises(ValueError):
            parse_pieces((PLUS_BLOCK * 2).splitlines(), num_pieces=1)

    def test_truncated_block(self):
        with self.assertRaises(ValueError):
            parse_pieces(PLUS_BLOCK.splitlines()[:-1], num_pieces=1)

    def test_long_row(self):
        text = PLUS_BLOCK.replace("1110", "11100")
        with self.assertRaises(ValueError):
            parse_pieces(text.splitlines(), num_pieces=1)

    def test_read_pieces(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "pieces.txt")
            with open(path, 'w') as fp:
                fp.write(PLUS_BLOCK * NUM_PIECES)
            pieces = read_pieces(path)
        self.assertEqual(len(pieces), NUM_PIECES)
        self.assertEqual(len(set(pieces)), 1)

    def test_missing_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(OSError):
                read_pieces(os.path.join(tmp, "missing.txt"))
