import unittest
from cubelib.coverage import build_coverage_index
from cubelib.dedup import deduplicate, fingerprint, rotate_solution, solution_rotations
from cubelib.placements import generate_placements
from cubelib.rotation import Axis
from cubelib.search import search
from utils import four_layer_pieces, two_slab_pieces, slab


def raw_solutions(pieces):
    return search(build_coverage_index([generate_placements(piece) for piece in pieces]))


class DeduplicationTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.two_slab_solutions = raw_solutions(two_slab_pieces())
        cls.four_layer_solutions = raw_solutions(four_layer_pieces())

    def test_fingerprint_is_order_sensitive(self):
        bottom, top = slab(2, 0, 2), slab(2, 2, 2)
        self.assertNotEqual(fingerprint((bottom, top)), fingerprint((top, bottom)))
        self.assertEqual(fingerprint([bottom, top]), (bottom, top))

    def test_rotate_solution_turns_every_placement(self):
        bottom, top = slab(2, 0, 2), slab(2, 2, 2)
        # about Y the z halves become x halves
        self.assertEqual(rotate_solution((bottom, top), Axis.Y), (slab(0, 0, 2), slab(0, 2, 2)))
        self.assertEqual(rotate_solution((bottom, top), Axis.Z), (bottom, top))

    def test_solution_orbit(self):
        solution = (slab(2, 0, 2), slab(2, 2, 2))
        rotations = list(solution_rotations(solution))
        self.assertEqual(len(rotations), 84)
        self.assertEqual(len(set(rotations)), 6)
        self.assertIn(solution, rotations)

    def test_two_slabs_collapse_to_one(self):
        self.assertEqual(len(deduplicate(self.two_slab_solutions)), 1)

    def test_four_layers(self):
        unique = deduplicate(self.four_layer_solutions)
        self.assertEqual(len(unique), 12)
        self.assertEqual(unique[0], self.four_layer_solutions[0])

    def test_no_over_merging(self):
        unique = deduplicate(self.four_layer_solutions)
        for i, solution in enumerate(unique):
            orbit = set(solution_rotations(solution))
            for other in unique[i + 1:]:
                self.assertNotIn(other, orbit)

    def test_rotated_copies_are_duplicates(self):
        known_all_rotations = set()
        unique = deduplicate(self.four_layer_solutions, known_all_rotations)
        for solution in unique:
            for rotation in solution_rotations(solution):
                self.assertEqual(deduplicate([rotation], known_all_rotations), [])

    def test_every_raw_solution_is_covered(self):
        known_all_rotations = set()
        deduplicate(self.four_layer_solutions, known_all_rotations)
        for solution in self.four_layer_solutions:
            self.assertIn(fingerprint(solution), known_all_rotations)
