from noisegrid.appconfig import AppConfig, load_app_config
from noisegrid.cache import ValueCache
from noisegrid.capabilities import KIND_TABLE, normalization_policy, supports, supports_tiling
from noisegrid.config import NoiseConfig, Settings, Viewport
from noisegrid.grid import fill, grid_coordinate
from noisegrid.normalize import POLICY_BY_KIND, normalize, normalize_into
from noisegrid.render import Frame, NoiseView
from noisegrid.resolver import Sampler, Unsupported, resolve
from noisegrid.settings import FIELDS, applicable_fields, reset_field, set_field

__all__ = [
    "AppConfig",
    "FIELDS",
    "Frame",
    "KIND_TABLE",
    "NoiseConfig",
    "NoiseView",
    "POLICY_BY_KIND",
    "Sampler",
    "Settings",
    "Unsupported",
    "ValueCache",
    "Viewport",
    "applicable_fields",
    "fill",
    "grid_coordinate",
    "load_app_config",
    "normalization_policy",
    "normalize",
    "normalize_into",
    "reset_field",
    "resolve",
    "set_field",
    "supports",
    "supports_tiling",
]
