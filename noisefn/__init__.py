from .cellular import DISTANCE_FNS, RETURN_TYPES, cell_distance, cell_value
from .fractal import FRACTALS, layered, ping_pong
from .gradient import perlin_noise
from .simplex import IMPROVE_MODES, improve_3d, open_simplex_2, open_simplex_2s, simplex_noise
from .tiling import torus_coords
from .value import value_cubic_noise, value_noise

__all__ = [
    "DISTANCE_FNS",
    "FRACTALS",
    "IMPROVE_MODES",
    "RETURN_TYPES",
    "cell_distance",
    "cell_value",
    "improve_3d",
    "layered",
    "open_simplex_2",
    "open_simplex_2s",
    "perlin_noise",
    "ping_pong",
    "simplex_noise",
    "torus_coords",
    "value_cubic_noise",
    "value_noise",
]
