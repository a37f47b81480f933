import math
import numpy as np
import matplotlib
import matplotlib.pyplot as plt
from matplotlib.colors import to_hex
from cubelib.packing import CUBE_SIZE, cell_reader

# # Draws solved cubes as voxels, one colour per piece. Up to a few dozen solutions
# # fit in one picture before the cubes get too small to read.


def piece_colors(num_pieces: int) -> list[str]:
    cmap = matplotlib.colormaps['tab20']
    return [to_hex(cmap(i % cmap.N), keep_alpha=True) for i in range(num_pieces)]


def render_solutions(solutions: list[tuple[int, ...]], path: str, dpi: int = 150):
    n = len(solutions)
    if n == 0:
        return
    dim = CUBE_SIZE
    i = math.isqrt(n - 1) + 1
    voxel_dim = dim * i
    voxel_array = np.zeros((voxel_dim + i, voxel_dim + i, dim), dtype=bool)
    colors = np.empty(voxel_array.shape, dtype=object)
    palette = piece_colors(max(len(solution) for solution in solutions))
    for idx, solution in enumerate(solutions):
        x0 = (idx % i) * dim + (idx % i)
        y0 = (idx // i) * dim + (idx // i)
        for piece, placement in enumerate(solution):
            reader = cell_reader(placement)
            for x in range(dim):
                for y in range(dim):
                    for z in range(dim):
                        if reader[x, y, z]:
                            voxel_array[x0 + x, y0 + y, z] = True
                            colors[x0 + x, y0 + y, z] = palette[piece]

    fig = plt.figure(figsize=(4 * i, 4 * i), dpi=dpi)
    ax = fig.add_subplot(projection='3d')
    ax.voxels(voxel_array, facecolors=colors, edgecolor='k', linewidth=0.1)

    ax.set_xlim([0, voxel_array.shape[0]])
    ax.set_ylim([0, voxel_array.shape[1]])
    ax.set_zlim([0, voxel_array.shape[2]])
    plt.axis("off")
    ax.set_box_aspect((1, 1, voxel_array.shape[2] / voxel_array.shape[0]))
    fig.savefig(path + ".png", bbox_inches='tight', pad_inches=0)
    plt.close(fig)
