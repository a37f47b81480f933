from typing import Generator, Iterable
from cubelib.rotation import Axis, rotate_90, rotation_steps

Solution = tuple[int, ...]


def fingerprint(solution: Iterable[int]) -> Solution:
    # the ordered masks themselves; set lookups compare them exactly on a hash clash
    return tuple(int(placement) for placement in solution)


def rotate_solution(solution: Solution, axis: Axis) -> Solution:
    return tuple(rotate_90(placement, axis) for placement in solution)


def solution_rotations(solution: Solution) -> Generator[Solution, None, None]:
    """Yields the whole solution turned through the same steps as all_rotations."""
    for axis in rotation_steps():
        solution = rotate_solution(solution, axis)
        yield solution


def deduplicate(solutions: Iterable[Solution], known_all_rotations: set = None) -> list[Solution]:
    """
    Keeps one solution per class of solutions that are rotations of each other.

    A solution is kept when its fingerprint has not been seen; the fingerprints
    of all its rotations are then recorded so rotated copies found later are
    skipped.

    Parameters:
    solutions (iterable(tuple(int))): raw search results
    known_all_rotations (set): fingerprints seen so far, updated in place. Pass
        the set from an earlier call to check new solutions against old ones.

    Returns:
    list(tuple(int)): the unique solutions, in the order first encountered

    """
    if known_all_rotations is None:
        known_all_rotations = set()

    unique = []
    for solution in solutions:
        solution_id = fingerprint(solution)
        if solution_id in known_all_rotations:
            continue
        unique.append(solution_id)
        known_all_rotations.add(solution_id)
        for rotation in solution_rotations(solution_id):
            known_all_rotations.add(fingerprint(rotation))
    return unique
