from __future__ import annotations

from dataclasses import dataclass, field, replace

NOISE_KINDS = {
    "value": "Value",
    "value_cubic": "Value Cubic",
    "perlin": "Perlin",
    "simplex": "Simplex",
    "open_simplex_2": "OpenSimplex2",
    "open_simplex_2s": "OpenSimplex2S",
    "cell_value": "Cell Value",
    "cell_distance": "Cell Distance",
    "cell_distance_sq": "Cell Distance Sq",
    "fast_cell_value": "Fast Cell Value",
    "fast_cell_distance": "Fast Cell Distance",
    "fast_cell_distance_sq": "Fast Cell Distance Sq",
}
DIMENSIONS = {2: "2D", 3: "3D", 4: "4D"}
FRACTALS = {
    "none": "None",
    "fbm": "FBm",
    "ridged": "Ridged",
    "ping_pong": "Ping Pong",
}
IMPROVES = {
    "none": "None",
    "xy": "Improve XY planes",
    "xz": "Improve XZ planes",
}
DISTANCE_FNS = {
    "euclidean": "Euclidean",
    "euclidean_squared": "Euclidean Squared",
    "manhattan": "Manhattan",
    "hybrid": "Hybrid",
    "chebyshev": "Chebyshev",
}
CELL_INDICES = {0: "I0", 1: "I1", 2: "I2", 3: "I3"}
DISTANCE_RETURN_TYPES = {
    "index0": "Index0",
    "index0_add_1": "Index0Add1",
    "index0_sub_1": "Index0Sub1",
    "index0_mul_1": "Index0Mul1",
    "index0_div_1": "Index0Div1",
}

MAX_RESOLUTION = 1024


def _check_tag(what: str, value: object, allowed: dict) -> None:
    if value not in allowed:
        raise ValueError(f"unknown {what}: {value!r}")


@dataclass
class NoiseConfig:
    """The requested noise field.

    Fields that do not apply to the active kind/dimension are kept as-is and
    ignored when resolving a sampler.
    """

    kind: str = "simplex"
    seed: int = 0
    frequency: float = 3.0

    # fractal
    fractal: str = "none"
    octaves: int = 3
    lacunarity: float = 2.0
    gain: float = 0.5
    weighted_strength: float = 0.0
    ping_pong_strength: float = 2.0

    # simplex family, 3D only
    improve: str = "xy"

    # cellular
    jitter: float = 1.0
    distance_fn: str = "euclidean"
    value_index: int = 0
    distance_indices: tuple[int, int] = (0, 1)
    distance_return_type: str = "index0"

    # tiling; tile size 1/frequency makes one grid one seamless tile
    tileable: bool = True
    tile_width: float = 1.0 / 3.0
    tile_height: float = 1.0 / 3.0

    def __post_init__(self) -> None:
        _check_tag("noise kind", self.kind, NOISE_KINDS)
        _check_tag("fractal", self.fractal, FRACTALS)
        _check_tag("improve mode", self.improve, IMPROVES)
        _check_tag("distance function", self.distance_fn, DISTANCE_FNS)
        _check_tag("distance return type", self.distance_return_type, DISTANCE_RETURN_TYPES)
        self.distance_indices = tuple(int(i) for i in self.distance_indices)  # type: ignore[assignment]
        if len(self.distance_indices) != 2:
            raise ValueError("distance_indices must be a pair")


@dataclass
class Viewport:
    dimension: int = 2
    resolution: int = 295
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0
    simd: bool = False

    def __post_init__(self) -> None:
        _check_tag("dimension", self.dimension, DIMENSIONS)

    @property
    def shift(self) -> tuple[float, float, float, float]:
        return (float(self.x), float(self.y), float(self.z), float(self.w))


@dataclass
class Settings:
    """Everything the settings form edits, passed explicitly to update functions."""

    config: NoiseConfig = field(default_factory=NoiseConfig)
    viewport: Viewport = field(default_factory=Viewport)
    show_tiles: bool = True
    link_tile_size_to_frequency: bool = True

    def copy(self) -> Settings:
        return replace(self, config=replace(self.config), viewport=replace(self.viewport))


DEFAULT_CONFIG = NoiseConfig()
DEFAULT_VIEWPORT = Viewport()
DEFAULT_SETTINGS = Settings()