from enum import Enum
from io import IOBase
from dataclasses import dataclass
import leb128
from io import BytesIO
import gzip
from cubelib.packing import CUBE_NUM_BITS

magic_string = b'PSOL'
placement_size = CUBE_NUM_BITS // 8


class Deduplication(Enum):
    RAW = 0
    UNIQUE_UP_TO_ROTATION = 1


class Compression(Enum):
    NO_COMPRESSION = 0
    GZIP_COMPRESSION = 1


@dataclass
class Solutions():
    deduplication: Deduplication
    num_pieces: int
    solutions: list[tuple[int, ...]]


def encode_solution(solution: tuple[int, ...]) -> bytes:
    return b"".join(int(placement).to_bytes(placement_size, 'little') for placement in solution)


def write(fp: IOBase, deduplication: Deduplication, num_pieces: int, solutions: list[tuple[int, ...]],
          compression: Compression = Compression.NO_COMPRESSION) -> None:
    header = magic_string
    header += int(deduplication.value).to_bytes(1, 'little')
    header += int(compression.value).to_bytes(1, 'little')
    header += int(num_pieces).to_bytes(1, 'little')
    header += leb128.u.encode(len(solutions))
    fp.write(header)

    body = bytearray()
    for solution in solutions:
        if len(solution) != num_pieces:
            raise ValueError(f"solution has {len(solution)} placements, expected {num_pieces}")
        body.extend(encode_solution(solution))
    if compression == Compression.GZIP_COMPRESSION:
        fp.write(gzip.compress(body, 5))
    else:
        fp.write(body)


def read_solution(fp: IOBase, num_pieces: int) -> tuple[int, ...]:
    data = fp.read(placement_size * num_pieces)
    if len(data) != placement_size * num_pieces:
        raise ValueError("provided file ends in the middle of a solution")
    return tuple(int.from_bytes(data[i:i + placement_size], 'little')
                 for i in range(0, len(data), placement_size))


def read(fp: IOBase) -> Solutions:
    magic = fp.read(4)
    if magic != magic_string:
        raise ValueError("provided file does not have a valid solution archive header")

    deduplication = int.from_bytes(fp.read(1), 'little')
    if deduplication not in [e.value for e in Deduplication]:
        raise ValueError("provided file uses unsupported deduplication")
    deduplication = Deduplication(deduplication)

    compression = int.from_bytes(fp.read(1), 'little')
    if compression not in [e.value for e in Compression]:
        raise ValueError("provided file uses unsupported compression")
    compression = Compression(compression)

    num_pieces = int.from_bytes(fp.read(1), 'little')
    n_solutions, _ = leb128.u.decode_reader(fp)

    use_fp = fp
    if compression == Compression.GZIP_COMPRESSION:
        use_fp = BytesIO(gzip.decompress(fp.read()))

    solutions = [read_solution(use_fp, num_pieces) for _ in range(n_solutions)]
    return Solutions(deduplication=deduplication, num_pieces=num_pieces, solutions=solutions)
