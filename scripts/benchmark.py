from __future__ import annotations

import time

from noisegrid.appconfig import AppConfig, load_app_config
from noisegrid.capabilities import SCALAR, WIDE, kind_spec
from noisegrid.config import NOISE_KINDS
from noisegrid.logging_setup import setup_logging
from noisegrid.render import NoiseView


def _timeit(label: str, fn) -> float:
    t0 = time.perf_counter()
    fn()
    t1 = time.perf_counter()
    ms = (t1 - t0) * 1000.0
    print(f"{label}: {ms:.2f} ms")
    return ms


def _render_once(kind: str, size: int, *, simd: bool, app_config: AppConfig) -> None:
    view = NoiseView(app_config=app_config)
    view.set("kind", kind)
    view.set("resolution", size)
    view.set("simd", simd)
    frame = view.render()
    if not frame.sample_success:
        raise RuntimeError(f"{kind} could not be sampled (simd={simd})")


def main() -> None:
    """Quick CPU benchmark of a full render pass per noise kind.

    NOISE_DEMO_WORKERS sets the thread count of the scalar path.
    """

    app_config = load_app_config()
    setup_logging(app_config.debug)

    for size in (256, 512):
        for kind in NOISE_KINDS:
            spec = kind_spec(kind)
            for simd, precision in ((False, SCALAR), (True, WIDE)):
                if precision not in spec.precisions:
                    continue
                _timeit(
                    f"{kind} {size}x{size} ({precision}, workers={app_config.workers})",
                    lambda: _render_once(kind, size, simd=simd, app_config=app_config),
                )


if __name__ == "__main__":
    main()
