import os
import hashlib
import numpy as np
from cubelib.packing import CUBE_NUM_BITS

cache_path_fstring = "solutions_{0}.npy"


def cache_key(pieces: list[int]) -> str:
    """
    Derives the cache name for a set of pieces

    Parameters:
    pieces (list[int]): packed volumes of the pieces, in piece id order

    Returns:
    str: a short hex digest, different for every list of pieces

    """
    data = b"".join(int(piece).to_bytes(CUBE_NUM_BITS // 8, 'little') for piece in pieces)
    return hashlib.sha1(data).hexdigest()[:16]


def cache_path(key: str, cache_dir: str = ".") -> str:
    return os.path.join(cache_dir, cache_path_fstring.format(key))


def cache_exists(key: str, cache_dir: str = ".") -> bool:
    """
    Checks if a cache file exists for the given key

    Parameters:
    key (str): the cache key of the pieces, see cache_key
    cache_dir (str): directory holding the cache files

    Returns:
    bool: whether that cache exists

    """
    return os.path.exists(cache_path(key, cache_dir))


def get_cache_raw(path: str) -> np.ndarray:
    """
    Loads a Cache File for a given pathname

    Parameters:
    path (str): the file location to look for the cache file

    Returns:
    np.ndarray: uint64 array with one row per solution, or None if there is no such file

    """
    if os.path.exists(path):
        return np.load(path)
    else:
        return None


def get_cache(key: str, cache_dir: str = ".") -> list[tuple[int, ...]]:
    """
    Loads the cached search results for a set of pieces

    Parameters:
    key (str): the cache key of the pieces
    cache_dir (str): directory holding the cache files

    Returns:
    list[tuple[int]]: the raw solutions, one placement per piece

    """
    print(f"\rLoading solutions {key} from cache: ", end="")
    data = get_cache_raw(cache_path(key, cache_dir))
    solutions = [tuple(int(placement) for placement in row) for row in data]
    print(f"{len(solutions)} solutions")
    return solutions


def save_cache_raw(path: str, solutions: list[tuple[int, ...]], num_pieces: int) -> None:
    """
    Saves raw solutions to a file at a given pathname

    Parameters:
    path (str): the file location to save the cache file
    solutions (list[tuple[int]]): the solutions to be cached
    num_pieces (int): placements per solution, fixes the array shape when there are no solutions
    """
    data = np.zeros((len(solutions), num_pieces), dtype=np.uint64)
    for row, solution in enumerate(solutions):
        data[row] = np.array(solution, dtype=np.uint64)
    np.save(path, data)


def save_cache(key: str, solutions: list[tuple[int, ...]], num_pieces: int, cache_dir: str = ".") -> None:
    save_cache_raw(cache_path(key, cache_dir), solutions, num_pieces)
    print(f"Wrote cache file for solutions {key}")
