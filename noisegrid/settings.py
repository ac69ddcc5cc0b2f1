"""Declarative settings form.

Every editable field is a `FieldSpec`: where the value lives, its default,
which widget edits it, and a predicate telling whether it currently means
anything. The form, reset buttons and dirty tracking all go through
`set_field` / `reset_field`, which operate on an explicit `Settings` state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from noisegrid.cache import ValueCache
from noisegrid.capabilities import (
    is_cell_distance,
    is_cell_value,
    is_cellular,
    is_simplex_family,
    supports_tiling,
)
from noisegrid.config import (
    CELL_INDICES,
    DEFAULT_SETTINGS,
    DIMENSIONS,
    DISTANCE_FNS,
    DISTANCE_RETURN_TYPES,
    FRACTALS,
    IMPROVES,
    MAX_RESOLUTION,
    NOISE_KINDS,
    Settings,
)

SELECT = "select"
INT = "int"
FLOAT = "float"
SLIDER = "slider"
TOGGLE = "toggle"

# Frequency and tile sizes must stay positive for tiling to be defined; the
# upper bound keeps the reciprocal of either within range.
MIN_POSITIVE = 1e-3
MAX_POSITIVE = 1.0 / MIN_POSITIVE

TILE_LINKED = ("frequency", "tile_width", "tile_height")


def _always(settings: Settings) -> bool:
    return True


def _tiling(settings: Settings) -> bool:
    return bool(settings.config.tileable) and supports_tiling(
        settings.config.kind, settings.viewport.dimension
    )


def _fractal_on(settings: Settings) -> bool:
    return settings.config.fractal != "none"


@dataclass(frozen=True)
class FieldSpec:
    name: str
    label: str
    target: str
    attr: str
    widget: str
    applicable: Callable[[Settings], bool] = _always
    options: dict | None = None
    min_value: float | None = None
    max_value: float | None = None
    step: float | None = None
    item: int | None = None

    @property
    def default(self) -> Any:
        return get_value(DEFAULT_SETTINGS, self)


FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("kind", "Type", "config", "kind", SELECT, options=NOISE_KINDS),
    FieldSpec("dimension", "Dimension", "viewport", "dimension", SELECT, options=DIMENSIONS),
    FieldSpec(
        "improve",
        "Improve",
        "config",
        "improve",
        SELECT,
        applicable=lambda s: is_simplex_family(s.config.kind) and s.viewport.dimension == 3,
        options=IMPROVES,
    ),
    FieldSpec(
        "jitter",
        "Jitter",
        "config",
        "jitter",
        FLOAT,
        applicable=lambda s: is_cellular(s.config.kind),
        step=0.02,
    ),
    FieldSpec(
        "distance_fn",
        "Distance Function",
        "config",
        "distance_fn",
        SELECT,
        applicable=lambda s: is_cellular(s.config.kind),
        options=DISTANCE_FNS,
    ),
    FieldSpec(
        "value_index",
        "Value Index",
        "config",
        "value_index",
        SELECT,
        applicable=lambda s: is_cell_value(s.config.kind),
        options=CELL_INDICES,
    ),
    FieldSpec(
        "distance_index_0",
        "Distance Index 0",
        "config",
        "distance_indices",
        SELECT,
        applicable=lambda s: is_cell_distance(s.config.kind),
        options=CELL_INDICES,
        item=0,
    ),
    FieldSpec(
        "distance_index_1",
        "Distance Index 1",
        "config",
        "distance_indices",
        SELECT,
        applicable=lambda s: is_cell_distance(s.config.kind),
        options=CELL_INDICES,
        item=1,
    ),
    FieldSpec(
        "distance_return_type",
        "Distance Return Type",
        "config",
        "distance_return_type",
        SELECT,
        applicable=lambda s: is_cell_distance(s.config.kind),
        options=DISTANCE_RETURN_TYPES,
    ),
    FieldSpec("fractal", "Fractal", "config", "fractal", SELECT, options=FRACTALS),
    FieldSpec(
        "octaves",
        "Octaves",
        "config",
        "octaves",
        INT,
        applicable=_fractal_on,
        min_value=1,
        max_value=8,
        step=1,
    ),
    FieldSpec(
        "lacunarity", "Lacunarity", "config", "lacunarity", FLOAT, applicable=_fractal_on, step=0.02
    ),
    FieldSpec("gain", "Gain", "config", "gain", FLOAT, applicable=_fractal_on, step=0.02),
    FieldSpec(
        "weighted_strength",
        "Weighted Strength",
        "config",
        "weighted_strength",
        SLIDER,
        applicable=_fractal_on,
        min_value=0.0,
        max_value=1.0,
        step=0.01,
    ),
    FieldSpec(
        "ping_pong_strength",
        "Ping Pong Strength",
        "config",
        "ping_pong_strength",
        SLIDER,
        applicable=lambda s: s.config.fractal == "ping_pong",
        min_value=0.5,
        max_value=3.0,
        step=0.01,
    ),
    FieldSpec(
        "frequency",
        "Frequency",
        "config",
        "frequency",
        FLOAT,
        min_value=MIN_POSITIVE,
        max_value=MAX_POSITIVE,
        step=0.02,
    ),
    FieldSpec("seed", "Seed", "config", "seed", INT, step=1),
    FieldSpec("tileable", "Tileable", "config", "tileable", TOGGLE),
    FieldSpec(
        "link_tile_size_to_frequency",
        "Link Tile Size to Freq.",
        "settings",
        "link_tile_size_to_frequency",
        TOGGLE,
        applicable=_tiling,
    ),
    FieldSpec(
        "tile_width",
        "Tile Width",
        "config",
        "tile_width",
        FLOAT,
        applicable=_tiling,
        min_value=MIN_POSITIVE,
        max_value=MAX_POSITIVE,
        step=0.02,
    ),
    FieldSpec(
        "tile_height",
        "Tile Height",
        "config",
        "tile_height",
        FLOAT,
        applicable=_tiling,
        min_value=MIN_POSITIVE,
        max_value=MAX_POSITIVE,
        step=0.02,
    ),
    FieldSpec(
        "resolution",
        "Texture Size",
        "viewport",
        "resolution",
        INT,
        min_value=0,
        max_value=MAX_RESOLUTION,
        step=1,
    ),
    FieldSpec("x", "X", "viewport", "x", FLOAT, step=0.002),
    FieldSpec("y", "Y", "viewport", "y", FLOAT, step=0.002),
    FieldSpec(
        "z", "Z", "viewport", "z", FLOAT, applicable=lambda s: s.viewport.dimension >= 3, step=0.002
    ),
    FieldSpec(
        "w", "W", "viewport", "w", FLOAT, applicable=lambda s: s.viewport.dimension == 4, step=0.002
    ),
    FieldSpec("show_tiles", "Show Tiles", "settings", "show_tiles", TOGGLE, applicable=_tiling),
    FieldSpec("simd", "Simd", "viewport", "simd", TOGGLE),
)

_BY_NAME = {spec.name: spec for spec in FIELDS}


def field_spec(name: str) -> FieldSpec:
    try:
        return _BY_NAME[str(name)]
    except KeyError:
        raise ValueError(f"unknown setting: {name!r}") from None


def _owner(settings: Settings, spec: FieldSpec) -> Any:
    if spec.target == "config":
        return settings.config
    if spec.target == "viewport":
        return settings.viewport
    return settings


def get_value(settings: Settings, spec: FieldSpec) -> Any:
    value = getattr(_owner(settings, spec), spec.attr)
    if spec.item is not None:
        return value[spec.item]
    return value


def _assign(settings: Settings, spec: FieldSpec, value: Any) -> None:
    owner = _owner(settings, spec)
    if spec.item is not None:
        pair = list(getattr(owner, spec.attr))
        pair[spec.item] = value
        value = tuple(pair)
    setattr(owner, spec.attr, value)


def coerce(spec: FieldSpec, value: Any) -> Any:
    """Convert a widget value to the field's type, clamped to its range."""

    if spec.widget == SELECT:
        options = spec.options or {}
        if value not in options:
            raise ValueError(f"{spec.name}: {value!r} is not one of {list(options)}")
        return value
    if spec.widget == TOGGLE:
        return bool(value)

    value = int(value) if spec.widget == INT else float(value)
    if spec.min_value is not None:
        value = max(value, type(value)(spec.min_value))
    if spec.max_value is not None:
        value = min(value, type(value)(spec.max_value))
    return value


def get_field(settings: Settings, name: str) -> Any:
    return get_value(settings, field_spec(name))


def is_default(settings: Settings, name: str) -> bool:
    spec = field_spec(name)
    return get_value(settings, spec) == spec.default


def applicable_fields(settings: Settings) -> list[FieldSpec]:
    return [spec for spec in FIELDS if spec.applicable(settings)]


def _link_tiles_to_frequency(settings: Settings) -> None:
    tile = 1.0 / float(settings.config.frequency)
    settings.config.tile_width = tile
    settings.config.tile_height = tile


def set_field(settings: Settings, cache: ValueCache, name: str, value: Any) -> bool:
    """Assign `value` to the named field; mark the cache dirty if it changed.

    While tile size is linked to frequency, both tile sizes track
    1/frequency (one seamless tile per grid): changing frequency resizes
    the tiles, and changing either tile size sets frequency to its
    reciprocal and the other tile size to the same value. Turning the link
    on snaps the tiles to the current frequency.
    """

    spec = field_spec(name)
    value = coerce(spec, value)
    if get_value(settings, spec) == value:
        return False

    _assign(settings, spec, value)
    if settings.link_tile_size_to_frequency:
        if spec.name == "frequency":
            _link_tiles_to_frequency(settings)
        elif spec.name in TILE_LINKED:
            settings.config.frequency = 1.0 / value
            settings.config.tile_width = value
            settings.config.tile_height = value
        elif spec.name == "link_tile_size_to_frequency":
            _link_tiles_to_frequency(settings)
    cache.mark_dirty()
    return True


def reset_field(settings: Settings, cache: ValueCache, name: str) -> bool:
    """Restore the field's default; a no-op (returns False) when already default."""
    spec = field_spec(name)
    return set_field(settings, cache, spec.name, spec.default)
