import argparse
from time import perf_counter
from cubelib.cache import cache_exists, cache_key, get_cache, save_cache
from cubelib.coverage import build_coverage_index
from cubelib.dedup import deduplicate
from cubelib.packing import CUBE_NUM_BITS, count_cells
from cubelib.pieces import read_pieces
from cubelib.placements import generate_placements
from cubelib.printing import format_volume, save_solutions
from cubelib.renderer import render_solutions
from cubelib.search import SearchStats, search
from cubelib import solution_file


def find_solutions(pieces: list[int], print_progress: bool = True) -> list[tuple[int, ...]]:
    """
    Runs the exhaustive search for a list of pieces

    Parameters:
    pieces (list[int]): packed volume of each piece, indexed by piece id
    print_progress (bool): whether to print placement counts and search progress

    Returns:
    list(tuple(int)): every exact cover of the cube, including rotated copies

    """
    total_cells = sum(count_cells(piece) for piece in pieces)
    if total_cells != CUBE_NUM_BITS:
        if print_progress:
            print(f"Pieces cover {total_cells} cells, the cube has {CUBE_NUM_BITS}: no solutions")
        return []

    piece_placements = [generate_placements(piece) for piece in pieces]
    if print_progress:
        for piece, placements in enumerate(piece_placements):
            print(f"Piece {piece}: {len(placements)} placements")
        print()

    index = build_coverage_index(piece_placements)
    return search(index, SearchStats(print_progress=print_progress))


def solve_puzzle(pieces: list[int], use_cache: bool = False, dedup: bool = True,
                 print_progress: bool = True, cache_dir: str = ".") -> list[tuple[int, ...]]:
    """
    Solves the packing puzzle for a list of pieces

    Searches for every way to fill the 4x4x4 cube with all the pieces, optionally
    collapsing solutions that are rotations of each other into one.
    Uses an optional cache so the search runs once per set of pieces.

    Parameters:
    pieces (list[int]): packed volume of each piece, indexed by piece id
    use_cache (bool): whether to load and save raw search results in cache files
    dedup (bool): whether to keep only one solution per rotation class
    print_progress (bool): whether to print progress to the console
    cache_dir (str): directory for the cache files

    Returns:
    list(tuple(int)): the solutions, one placement per piece indexed by piece id

    """
    key = cache_key(pieces)
    if use_cache and cache_exists(key, cache_dir):
        solutions = get_cache(key, cache_dir)
    else:
        solutions = find_solutions(pieces, print_progress)
        if use_cache:
            save_cache(key, solutions, len(pieces), cache_dir)

    if dedup:
        solutions = deduplicate(solutions)
    return solutions


def main(argv: list[str] = None) -> None:
    parser = argparse.ArgumentParser(
        prog='Cube Puzzle Solver',
        description='Finds every way to pack 13 polycube pieces into a 4x4x4 cube.')

    parser.add_argument('--pieces', default='pieces.txt',
                        help='The file describing the pieces')
    parser.add_argument('--output', default='solutions.txt',
                        help='The file the solutions are written to')
    parser.add_argument('--archive', default=None,
                        help='Also write the solutions to this binary solution archive')

    # Requires python >=3.9
    parser.add_argument('--cache', action=argparse.BooleanOptionalAction)
    parser.add_argument('--dedup', action=argparse.BooleanOptionalAction)
    parser.add_argument('--compress', action=argparse.BooleanOptionalAction)
    parser.add_argument('--render', action=argparse.BooleanOptionalAction)

    args = parser.parse_args(argv)

    use_cache = args.cache if args.cache is not None else True
    dedup = args.dedup if args.dedup is not None else True
    compress = args.compress if args.compress is not None else False
    render = args.render if args.render is not None else False

    pieces = read_pieces(args.pieces)
    for piece, mask in enumerate(pieces):
        print(f"Piece {piece}")
        print(format_volume(mask))
        print()
    print(f"Read {len(pieces)} pieces\n")

    # Start the timer
    t1_start = perf_counter()

    solutions = solve_puzzle(pieces, use_cache=use_cache, dedup=dedup)

    # Stop the timer
    t1_stop = perf_counter()

    save_solutions(args.output, solutions)

    if args.archive:
        with open(args.archive, 'wb') as fp:
            solution_file.write(
                fp,
                solution_file.Deduplication.UNIQUE_UP_TO_ROTATION if dedup else solution_file.Deduplication.RAW,
                len(pieces),
                solutions,
                solution_file.Compression.GZIP_COMPRESSION if compress else solution_file.Compression.NO_COMPRESSION)

    if render:
        render_solutions(solutions, args.output.removesuffix('.txt'))

    print(f"\nFound {len(solutions)} {'unique ' if dedup else ''}solutions")
    print(f"\nElapsed time: {round(t1_stop - t1_start,3)}s")


if __name__ == "__main__":
    main()
