from time import perf_counter
from cubelib.coverage import CoverageIndex, num_indexed_pieces, placements_covering
from cubelib.packing import FULL_CUBE, first_empty_cell


class SearchStats():
    """Counts the leaves of one search run and prints a progress line at most once per interval."""

    def __init__(self, print_progress: bool = True, interval: float = 1.0):
        self.print_progress = print_progress
        self.interval = interval
        self.num_permutations = 0
        self.num_solutions = 0

        self.last_print = perf_counter()
        self.last_print_permutations = 0

    def print(self) -> None:
        if not self.print_progress:
            return
        now = perf_counter()
        elapsed = now - self.last_print
        if elapsed < self.interval:
            return

        permutations = self.num_permutations - self.last_print_permutations
        print(f"\rPermutations: {self.num_permutations}, Solutions: {self.num_solutions}, "
              f"Permutations/s: {permutations / elapsed:.0f}", end="")
        self.last_print = now
        self.last_print_permutations = self.num_permutations

    def success(self) -> None:
        self.num_solutions += 1
        self.num_permutations += 1

    def fail(self) -> None:
        self.num_permutations += 1


def search(index: CoverageIndex, stats: SearchStats = None) -> list[tuple[int, ...]]:
    """
    Finds every exact cover of the cube by the indexed pieces.

    Depth first search that always fills the lowest empty cell. For every unused
    piece it tries each placement covering that cell that does not overlap the
    cells filled so far. The occupied and used-piece masks are passed down by
    value so backtracking needs no undo; the pick list is overwritten in place.

    Parameters:
    index (CoverageIndex): coverage index built by build_coverage_index
    stats (SearchStats): optional counters, updated on every call

    Returns:
    list(tuple(int)): every solution found, one placement per piece indexed by piece id

    """
    if stats is None:
        stats = SearchStats(print_progress=False)

    num_pieces = num_indexed_pieces(index)
    all_pieces = (1 << num_pieces) - 1
    picks = [0] * num_pieces
    solutions = []

    def extend(occupied: int, used_pieces: int) -> None:
        stats.print()
        if used_pieces == all_pieces:
            if occupied == FULL_CUBE:
                solutions.append(tuple(picks))
                stats.success()
            else:
                stats.fail()
            return
        if occupied == FULL_CUBE:
            stats.fail()
            return

        cell = first_empty_cell(occupied)
        for piece in range(num_pieces):
            piece_bit = 1 << piece
            if used_pieces & piece_bit:
                continue
            for placement in placements_covering(index, cell, piece):
                if placement & occupied == 0:
                    picks[piece] = placement
                    extend(occupied | placement, used_pieces | piece_bit)
        stats.fail()

    extend(0, 0)
    if stats.print_progress:
        print(f"\rPermutations: {stats.num_permutations}, Solutions: {stats.num_solutions}")
    return solutions
